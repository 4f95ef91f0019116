"""
Sudoku Solver - constraint propagation with backtracking

This package contains modules for:
- Cell state and the row/column/box neighbor topology
- Naked-single and hidden-single propagation
- Backtracking search and solution validation
- Reading puzzles from text and rendering boards
"""

__version__ = "1.0.0"
__author__ = "Sudoku Solver Project Team"
