import logging

from sudoku_engine.cells import CellNote, CellState, build_cell_grid, cell_values
from sudoku_engine.exceptions import (
    GenerationCancelled,
    SolverInvariantError,
    SudokuError,
)
from sudoku_engine.generator import Difficulty, PuzzleGenerator, generate
from sudoku_engine.grid import (
    count_available,
    format_grid,
    is_solved_grid,
    is_valid_placement,
    parse_grid,
    same_block,
    same_col,
    same_row,
)
from sudoku_engine.solver import Solver, count_solutions, solve
from sudoku_engine.validator import is_board_solved, validate_board, validate_notes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CellNote",
    "CellState",
    "Difficulty",
    "GenerationCancelled",
    "PuzzleGenerator",
    "Solver",
    "SolverInvariantError",
    "SudokuError",
    "build_cell_grid",
    "cell_values",
    "count_available",
    "count_solutions",
    "format_grid",
    "generate",
    "is_board_solved",
    "is_solved_grid",
    "is_valid_placement",
    "parse_grid",
    "same_block",
    "same_col",
    "same_row",
    "solve",
    "validate_board",
    "validate_notes",
]
