"""
Sudoku Solver - Main Application Module
"""

import argparse
import os
import sys

from .errors import MalformedInputError
from .grid import Grid
from .parsing import read_puzzle_file
from .render import format_board
from .search import SolveStats
from .solver import solve_puzzle
from .validator import is_correct

DEFAULT_OUTPUT_DIR = "output"


def print_branch(event):
    """Trace hook: echo each search decision."""
    indent = "      " + "  " * (event.depth - 1)
    if event.action == "assume":
        print(f"{indent}assume [{event.col},{event.row}]={event.digit}")
    else:
        print(f"{indent}wrong assumption [{event.col},{event.row}]={event.digit}")


class SudokuSolver:
    """
    Main class for the Sudoku Solver application.

    This class runs one puzzle file through loading, solving and validation,
    and optionally writes the rendered solution to disk.
    """

    def __init__(self, box_size=None, save_solution=True, trace=False):
        """
        Initialize the Sudoku Solver.

        Args:
            box_size (int): Box size N, or None to infer it from the cell count
            save_solution (bool): Whether to write the solution next to the outputs
            trace (bool): Whether to print every search assumption
        """
        self.box_size = box_size
        self.save_solution = save_solution
        self.trace = trace

    def process_puzzle(self, puzzle_path, output_dir=DEFAULT_OUTPUT_DIR):
        """
        Process a puzzle file through the complete pipeline.

        Pipeline steps:
        1. Load and parse the puzzle
        2. Propagate and search (duplicate givens fail here)
        3. Validate and save the solution

        Args:
            puzzle_path (str): Path to the puzzle text file
            output_dir (str): Directory to save the solution

        Returns:
            dict: Results with the puzzle, solution, message and stats, or
                None if the file could not be parsed
        """
        print(f"\n{'='*60}")
        print(f"Processing: {os.path.basename(puzzle_path)}")
        print(f"{'='*60}")

        print("\n[1/3] Loading puzzle...")
        try:
            grid = read_puzzle_file(puzzle_path, self.box_size)
        except MalformedInputError as e:
            print(f"      ✗ Malformed puzzle: {e}")
            return None

        board = grid.to_board()
        size = grid.ncount
        print(f"      Grid size: {size}x{size} (box {grid.box_size}x{grid.box_size})")
        print(f"      Givens: {grid.size - grid.count_empty()}/{grid.size}")
        print(format_board(board))

        print("\n[2/3] Solving...")
        stats = SolveStats()
        solution, solve_msg = solve_puzzle(
            board,
            on_branch=print_branch if self.trace else None,
            stats=stats,
        )

        result = {
            'puzzle': board,
            'solution': solution,
            'message': solve_msg,
            'stats': stats,
            'solved': solution is not None,
        }

        if solution is None:
            print(f"      ✗ Could not solve: {solve_msg}")
            return result

        print(f"      ✓ Solved puzzle ({solve_msg}):")
        print(format_board(solution))
        print(f"      Sweeps: {stats.sweeps}, placements: {stats.placements}, "
              f"guesses: {stats.branches}, backtracks: {stats.backtracks}, "
              f"max depth: {stats.max_depth}")

        print("\n[3/3] Validating...")
        if not is_correct(Grid.from_board(solution)):
            print("      ✗ Solution breaks a row, column or box")
            result['solved'] = False
            return result
        print("      ✓ Every row, column and box holds distinct digits")

        if self.save_solution:
            result['output_path'] = self._save_solution(puzzle_path, output_dir, solution)

        return result

    def _save_solution(self, puzzle_path, output_dir, solution):
        """
        Save the rendered solution to disk.

        Args:
            puzzle_path (str): Original puzzle path (for naming)
            output_dir (str): Output directory
            solution (np.ndarray): Solved board
        """
        os.makedirs(output_dir, exist_ok=True)
        base_name = os.path.splitext(os.path.basename(puzzle_path))[0]
        output_path = os.path.join(output_dir, f"{base_name}_solution.txt")
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(format_board(solution) + "\n")

        print(f"      Saved solution to {output_path}")
        return output_path


def main(argv=None):
    """
    Main entry point for the Sudoku Solver application.

    Handles command-line arguments and processes puzzle files.
    """
    parser = argparse.ArgumentParser(
        description='Sudoku Solver - constraint propagation with backtracking',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Solve a single puzzle:
    python -m sudoku_cp --puzzle easy.txt

  Solve a 16x16 puzzle and trace every guess:
    python -m sudoku_cp --puzzle big.txt --box-size 4 --trace

  Solve all puzzles in a directory:
    python -m sudoku_cp --puzzle puzzles/*.txt
        """
    )

    parser.add_argument('--puzzle', '-p', required=True, nargs='+',
                        help='Path(s) to puzzle text files')
    parser.add_argument('--output', '-o', default=DEFAULT_OUTPUT_DIR,
                        help=f'Output directory (default: {DEFAULT_OUTPUT_DIR})')
    parser.add_argument('--box-size', '-n', type=int, default=None,
                        help='Box size N for an N^2 x N^2 grid (default: inferred)')
    parser.add_argument('--no-save', action='store_true',
                        help='Do not save solutions')
    parser.add_argument('--trace', action='store_true',
                        help='Print every search assumption')

    args = parser.parse_args(argv)

    solver = SudokuSolver(
        box_size=args.box_size,
        save_solution=not args.no_save,
        trace=args.trace,
    )

    results = {
        'solved': [],
        'unsolved': [],
        'error': []
    }

    for puzzle_path in args.puzzle:
        if not os.path.exists(puzzle_path):
            print(f"Error: Puzzle file not found: {puzzle_path}")
            results['error'].append(puzzle_path)
            continue

        result = solver.process_puzzle(puzzle_path, args.output)
        if result is None:
            results['error'].append(puzzle_path)
        elif result['solved']:
            results['solved'].append(puzzle_path)
        else:
            results['unsolved'].append(puzzle_path)

    if len(args.puzzle) > 1:
        total = len(args.puzzle)
        print("\n" + "=" * 60)
        print("SUMMARY")
        print("=" * 60)
        print(f"✅ Solved:    {len(results['solved'])}/{total}")
        print(f"❌ Unsolved:  {len(results['unsolved'])}/{total}")
        print(f"⚠️  Errors:    {len(results['error'])}/{total}")

    if results['unsolved'] or results['error']:
        sys.exit(1)


if __name__ == '__main__':
    main()
