"""Deterministic PRNG for reproducible randomised checks.

Use set_seed(n) at test start for reproducibility.
Default (no seed) uses os.urandom.
"""

import os
import random as _random


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, uses os.urandom."""

    def __init__(self, seed=None):
        self._seed = seed
        if seed is not None:
            self._rng = _random.Random(seed)
        else:
            self._rng = None

    def randbelow(self, n: int) -> int:
        if self._rng is not None:
            return self._rng.randrange(n)
        nbytes = max(16, (n.bit_length() + 7) // 8 + 8)
        return int.from_bytes(os.urandom(nbytes), 'big') % n

    def randint(self, a: int, b: int) -> int:
        """Integer in [a, b], both ends included."""
        return a + self.randbelow(b - a + 1)

    def shuffle(self, items: list):
        for i in range(len(items) - 1, 0, -1):
            j = self.randbelow(i + 1)
            items[i], items[j] = items[j], items[i]


_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Set global seed for reproducibility. None = OS randomness."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def randbelow(n: int) -> int:
    return _global_rng.randbelow(n)


def randint(a: int, b: int) -> int:
    return _global_rng.randint(a, b)


def shuffle(items: list):
    _global_rng.shuffle(items)
