"""Utility helpers for the saqueens project.

Low-level checks shared by the tests, the experiment pipeline and the CLI.
They deliberately avoid ``Board.jeopardized_pieces`` so they can serve as an
independent oracle for the solver's results.

Representation
--------------
``board_to_rows`` converts a ``Board`` to the compact ``rows[col - 1] = row``
encoding (1-based rows, 0 for an empty column) used by ``conflicts``.
"""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import List, Sequence

from .board import Board


def board_to_rows(board: Board) -> List[int]:
    """Return the row of the queen in each column ``1..size`` (0 if none).

    When a column holds more than one queen the last placed one wins; use
    ``is_valid_solution`` to detect such boards.
    """
    rows = [0] * board.size
    for pos in board:
        rows[pos.x - 1] = pos.y
    return rows


def conflicts(rows: Sequence[int]) -> int:
    """Count attacking queen pairs in O(N) for a row-per-column encoding.

    Empty columns (row 0) are ignored. Pairs sharing a row or a diagonal are
    counted once per shared line.
    """
    row_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for column, row in enumerate(rows, start=1):
        if row == 0:
            continue
        row_count[row] += 1
        diag1[row - column] += 1
        diag2[row + column] += 1

    return sum(
        count * (count - 1) // 2
        for counter in (row_count, diag1, diag2)
        for count in counter.values()
    )


def is_valid_solution(board: Board) -> bool:
    """Return True if ``board`` is a complete N-Queens solution.

    Contract
    - exactly ``board.size`` queens, all inside ``[1, size]`` on both axes
    - no pair shares a row, a column or a diagonal (exhaustive pairwise check)
    """
    placed = list(board)
    if board.size < 1 or len(placed) != board.size:
        return False
    for pos in placed:
        if not (1 <= pos.x <= board.size and 1 <= pos.y <= board.size):
            return False
    for a, b in combinations(placed, 2):
        if a.x == b.x or a.y == b.y or abs(a.x - b.x) == abs(a.y - b.y):
            return False
    return True
