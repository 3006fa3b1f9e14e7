"""
Domain-constrained random sampling.

All randomness flows through an explicit :class:`numpy.random.Generator` so a
run can be reproduced from its seed.
"""

import numpy as np


class Sampler:
    """Uniform draws over inclusive ranges.

    Bounds given in the wrong order are swapped rather than rejected.
    """

    def __init__(self, rng, seed=None):
        self.rng = rng
        self.seed = seed

    @classmethod
    def from_seed(cls, seed=None):
        """Build a sampler from an integer seed.

        With ``seed=None`` fresh entropy is pulled from the OS; the resulting
        seed is kept on ``sampler.seed`` so the run can be repeated.
        """
        seq = np.random.SeedSequence(seed)
        return cls(np.random.default_rng(seq), seed=seq.entropy)

    def uniform(self, lo: float, hi: float) -> float:
        if lo > hi:
            lo, hi = hi, lo
        x = float(self.rng.uniform(lo, hi))
        # numpy documents that rounding may land on hi exactly, never beyond
        return min(max(x, lo), hi)

    def integer(self, lo: int, hi: int) -> int:
        if lo > hi:
            lo, hi = hi, lo
        n = int(np.floor(self.rng.uniform(lo, hi + 1)))
        return min(max(n, lo), hi)

    def chance(self, p: float) -> bool:
        return bool(self.rng.uniform(0.0, 1.0) < p)
