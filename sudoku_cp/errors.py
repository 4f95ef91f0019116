"""
Exceptions raised by the solver package.
"""


class MalformedInputError(ValueError):
    """Puzzle text ended early or held a token that is not a cell value."""


class InvariantViolation(AssertionError):
    """A grid reported as solved failed validation."""
