"""
Injectable randomness for score jitter and fallback sampling.

Anything with ``random()`` and ``choice()`` methods works, including a seeded
``random.Random``. Tests pass a fixed source to make rankings deterministic.
"""

import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        ...


def default_random_source() -> RandomSource:
    """Fresh, unseeded generator for production calls"""
    return random.Random()
