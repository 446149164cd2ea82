"""Queen coordinates on the board.

A ``Position`` is an immutable ``(x, y)`` pair, 1-indexed, where ``x`` is the
column and ``y`` the row. Two positions with the same coordinates are the same
square, so positions are safe to use as set members and dictionary keys.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Square occupied by a queen.

    Parameters
    ----------
    x : int
        Column index (1-based).
    y : int
        Row index (1-based).
    """

    x: int
    y: int

    def can_attack(self, other: Position) -> bool:
        """Return True if a queen here attacks a queen at ``other``.

        A queen never attacks its own square; otherwise it attacks along its
        row, its column and both diagonals. The relation is symmetric.
        """
        if self == other:
            return False
        return self._on_row_with(other) or self._on_col_with(other) or self._diagonal_to(other)

    def _on_row_with(self, other: Position) -> bool:
        return other.y == self.y

    def _on_col_with(self, other: Position) -> bool:
        return other.x == self.x

    def _diagonal_to(self, other: Position) -> bool:
        return abs(other.x - self.x) == abs(other.y - self.y)
