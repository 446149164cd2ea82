"""Board model for the annealing solver.

A ``Board`` is a set of unique ``Position`` objects on a ``size x size`` grid.
It answers conflict queries and produces independent copies; the solver never
mutates the board it holds, it mutates a clone and swaps it in.

Ordering
--------
Positions are kept in placement order (an insertion-ordered dict used as an
ordered set). ``jeopardized_pieces()`` reports pieces in that same order, and a
piece relocated with ``move_piece`` counts as the most recently placed one.
The solver perturbs the first jeopardized piece, so this order decides which
queen moves next.

Failure reporting
-----------------
Invalid moves (duplicate square, occupied destination, out-of-bounds square)
return ``False`` and leave the board unchanged. Nothing here raises.
"""

from __future__ import annotations

from typing import Dict, Iterator, List

from .position import Position


class Board:
    """Queen placements on an N x N grid.

    Parameters
    ----------
    size : int
        Board dimension N; every placed position must lie in ``[1, size]``
        on both axes.
    """

    def __init__(self, size: int):
        self.size = size
        self._positions: Dict[Position, None] = {}

    def __contains__(self, pos: object) -> bool:
        return pos in self._positions

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __repr__(self) -> str:
        placed = ", ".join(f"({p.x},{p.y})" for p in self._positions)
        return f"Board(size={self.size}, positions=[{placed}])"

    @property
    def positions(self) -> List[Position]:
        """Placed positions in placement order."""
        return list(self._positions)

    def in_bounds(self, pos: Position) -> bool:
        return 1 <= pos.x <= self.size and 1 <= pos.y <= self.size

    def contains(self, pos: Position) -> bool:
        return pos in self._positions

    def add(self, pos: Position) -> bool:
        """Place a queen at ``pos``.

        Returns
        -------
        bool
            False when the square is already occupied or off the board (the
            board is left unchanged), True otherwise.
        """
        if pos in self._positions or not self.in_bounds(pos):
            return False
        self._positions[pos] = None
        return True

    def move_piece(self, existing: Position, dest: Position) -> bool:
        """Relocate the queen at ``existing`` to ``dest``.

        Fails without touching the board when ``existing`` is not placed,
        when ``dest`` is off the board, or when ``dest`` is held by another
        queen. Moving a queen onto its own square succeeds and keeps its place
        in the placement order.
        """
        if existing not in self._positions or not self.in_bounds(dest):
            return False
        if dest == existing:
            return True
        if dest in self._positions:
            return False
        del self._positions[existing]
        self._positions[dest] = None
        return True

    def count(self) -> int:
        return len(self._positions)

    def jeopardized_pieces(self) -> List[Position]:
        """Return every placed queen attacked by at least one other queen.

        Computed pairwise over the placed positions on every call, in
        placement order and without duplicates.
        """
        placed = list(self._positions)
        attacked = set()
        for i, piece in enumerate(placed):
            for other in placed[i + 1:]:
                if piece.can_attack(other):
                    attacked.add(piece)
                    attacked.add(other)
        return [piece for piece in placed if piece in attacked]

    def jeopardized_count(self) -> int:
        return len(self.jeopardized_pieces())

    def is_correct(self) -> bool:
        """True when no two placed queens attack each other."""
        return not self.jeopardized_pieces()

    def clone(self) -> Board:
        """Return an independent copy; mutating it never affects this board."""
        copy = Board(self.size)
        copy._positions = dict(self._positions)
        return copy
