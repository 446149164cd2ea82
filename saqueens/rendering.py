"""Plain-text rendering of boards.

Layout: a header with column numbers from ``size`` down to 1, then one line
per row ``1..size`` (top to bottom) prefixed with the row number. Columns are
printed right-to-left, ``Q`` marks a queen and ``+`` an empty square.
Single-digit labels only line up for boards smaller than 10.
"""

from __future__ import annotations

from .board import Board
from .position import Position


def render_board(board: Board) -> str:
    columns = range(board.size, 0, -1)
    lines = ["  " + "".join(str(x) for x in columns)]
    for y in range(1, board.size + 1):
        cells = "".join("Q" if board.contains(Position(x, y)) else "+" for x in columns)
        lines.append(f"{y} {cells}")
    return "\n".join(lines) + "\n"
