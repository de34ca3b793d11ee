"""
Random source used by artifact generation.

All generation code draws through an ArtifactRng handle so that a seeded
handle reproduces the exact same artifact. Callers that don't care pass
nothing and get the shared process-wide instance.
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


class ArtifactRng:
    """Thin wrapper over random.Random exposing the primitives generation needs."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def seed(self, seed: Optional[int]) -> None:
        self._random.seed(seed)

    def rng(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi]. Reversed bounds are swapped."""
        if lo > hi:
            lo, hi = hi, lo
        return self._random.randint(lo, hi)

    def one_in(self, chance: int) -> bool:
        """True with probability 1/chance; always True for chance <= 1."""
        return chance <= 1 or self.rng(0, chance - 1) == 0

    def random_entry(self, seq: Sequence[T]) -> T:
        return seq[self.rng(0, len(seq) - 1)]

    def random_entry_removed(self, pool: List[T]) -> T:
        """
        Remove and return a uniformly chosen element of ``pool``.

        The chosen slot is swapped with the last one and popped, so the
        order of the remaining elements is not preserved.
        """
        index = self.rng(0, len(pool) - 1)
        pool[index], pool[-1] = pool[-1], pool[index]
        return pool.pop()


# Shared instance (one generation at a time; callers serialize access)
shared_rng = ArtifactRng()


def seed_shared_rng(seed: Optional[int]) -> None:
    shared_rng.seed(seed)


def resolve_rng(rng: Optional[ArtifactRng]) -> ArtifactRng:
    return rng if rng is not None else shared_rng
