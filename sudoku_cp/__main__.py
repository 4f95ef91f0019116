"""
Entry point for running the sudoku_cp package as a module.

Usage:
    python -m sudoku_cp --puzzle path/to/puzzle.txt
"""

from .sudoku_solver import main

if __name__ == '__main__':
    main()
