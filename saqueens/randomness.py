"""Randomness collaborator for the solver.

The solver draws row choices and acceptance thresholds from a ``RandomSource``
instead of the global ``random`` module, so callers can pass a seeded or a
fully scripted source. ``random.Random`` already satisfies the protocol.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Minimal interface the solver needs from a random generator."""

    def randint(self, a: int, b: int) -> int:
        """Uniform integer in ``[a, b]``, both bounds inclusive."""
        ...

    def random(self) -> float:
        """Uniform float in ``[0, 1)``."""
        ...


def default_random_source(seed: Optional[int] = None) -> RandomSource:
    """Return a ``random.Random`` seeded with ``seed`` (unseeded when None)."""
    return random.Random(seed)
