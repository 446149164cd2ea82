"""Simulated Annealing solver for the N-Queens problem.

The solver holds one ``Board`` with exactly one queen per column. Each
iteration perturbs the first jeopardized queen (placement order, see
``saqueens.board``) by moving it to another row of its own column, then
accepts or rejects the candidate board with the Metropolis rule.

Contract (public API)
---------------------
- Input: board size ``size >= 1`` and an optional ``RandomSource``.
- ``solve()`` returns True when a conflict-free board was reached and False
  when the cooling schedule ran out first. Exhaustion is an expected outcome
  and is never raised.
- After ``solve()`` the final board is available as ``solver.board``.

Cooling schedule
----------------
The temperature is ``10 ** size // iteration`` in integer arithmetic. The
search stops with failure as soon as it truncates to zero, i.e. after exactly
``10 ** size`` iterations; this is the only termination bound.

Acceptance
----------
With ``delta = candidate.jeopardized_count() - board.jeopardized_count()``:

- ``delta < 0``: accepted without drawing a random number.
- otherwise: accepted iff ``rng.random() < exp(-delta // temperature)``. The
  exponent is floor-divided like the temperature itself, so ``delta == 0``
  gives ``exp(0) == 1`` (lateral moves always pass) and any worsening no
  larger than the temperature is accepted with probability ``exp(-1)``.

Determinism
-----------
All draws go through the injected ``RandomSource``: ``randint(1, size)`` for
initial rows and relocations, ``random()`` for acceptance. Pass
``random.Random(seed)`` for reproducible runs.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import List, Optional

from .board import Board
from .position import Position
from .randomness import RandomSource, default_random_source


class SolverState(Enum):
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class Solver:
    """Annealing search over one-queen-per-column boards.

    Parameters
    ----------
    size : int
        Board dimension N.
    rng : RandomSource | None
        Source of randomness; defaults to an unseeded ``random.Random``.

    Attributes
    ----------
    board : Board
        Board currently held; replaced whenever a candidate is accepted.
    iteration : int
        Starts at 1 and grows by one per perturbation, accepted or not.
    accepted_moves : int
        Number of accepted candidates.
    best_jeopardized : int
        Lowest jeopardized count of any board held so far.
    """

    def __init__(self, size: int, rng: Optional[RandomSource] = None):
        if size < 1:
            raise ValueError(f"Board size must be a positive integer, got {size}")
        self.size = size
        self.rng: RandomSource = rng if rng is not None else default_random_source()
        self.board = Board(size)
        self.iteration = 1
        self.accepted_moves = 0
        self._populate()
        self.best_jeopardized = self.board.jeopardized_count()

    @property
    def temperature(self) -> int:
        return 10 ** self.size // self.iteration

    @property
    def state(self) -> SolverState:
        if self.board.is_correct():
            return SolverState.SOLVED
        if self.temperature == 0:
            return SolverState.EXHAUSTED
        return SolverState.RUNNING

    def solve(self) -> bool:
        """Anneal until the board is correct or the schedule is exhausted.

        Returns
        -------
        bool
            True if ``self.board`` is conflict-free, False on exhaustion.
        """
        while True:
            jeopardized = self.board.jeopardized_pieces()
            if not jeopardized:
                return True
            temperature = self.temperature
            if temperature == 0:
                return False
            self._advance(jeopardized, temperature)

    def step(self) -> bool:
        """Run a single perturb/accept iteration.

        Does nothing and returns False unless the solver is RUNNING; otherwise
        returns whether the candidate board was accepted.
        """
        jeopardized = self.board.jeopardized_pieces()
        temperature = self.temperature
        if not jeopardized or temperature == 0:
            return False
        return self._advance(jeopardized, temperature)

    def _advance(self, jeopardized: List[Position], temperature: int) -> bool:
        candidate = self._altered_board(jeopardized[0])
        candidate_count = candidate.jeopardized_count()
        accepted = self._accept(candidate_count - len(jeopardized), temperature)
        if accepted:
            self.board = candidate
            self.accepted_moves += 1
            self.best_jeopardized = min(self.best_jeopardized, candidate_count)
        self.iteration += 1
        return accepted

    def _altered_board(self, piece: Position) -> Board:
        """Clone the board and move ``piece`` to another row of its column."""
        candidate = self.board.clone()
        if not candidate.move_piece(piece, self._move_dest(piece)):
            raise RuntimeError(f"Could not relocate {piece} on {candidate!r}")
        return candidate

    def _move_dest(self, piece: Position) -> Position:
        # Only reached with size >= 2: a lone queen is never jeopardized.
        dest = piece
        while dest == piece:
            dest = Position(piece.x, self.rng.randint(1, self.size))
        return dest

    def _accept(self, delta: int, temperature: int) -> bool:
        if delta < 0:
            return True
        return self.rng.random() < math.exp(-delta // temperature)

    def _populate(self) -> None:
        for x in range(1, self.size + 1):
            self.board.add(Position(x, self.rng.randint(1, self.size)))
