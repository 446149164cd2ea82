"""N-Queens solved by simulated annealing."""

from .position import Position
from .board import Board
from .randomness import RandomSource, default_random_source
from .solver import Solver, SolverState
from .rendering import render_board
from .utils import board_to_rows, conflicts, is_valid_solution

__all__ = [
    "Position",
    "Board",
    "RandomSource",
    "default_random_source",
    "Solver",
    "SolverState",
    "render_board",
    "board_to_rows",
    "conflicts",
    "is_valid_solution",
]
