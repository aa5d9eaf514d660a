"""
Random source capability for PyNoisey.

Samplers never create their own random numbers: they consume a RandomSource
once, at construction, to build their permutation and gradient tables. Any
object with ``uniform_float()`` and ``permutation(n)`` qualifies, which lets
callers plug in their own generator. The default implementation wraps a
seeded ``numpy.random.Generator``.
"""

from typing import Callable, Protocol, Sequence

import numpy as np

from .. import constants as cte

_UINT64_MASK = (1 << 64) - 1


class RandomSource(Protocol):
    """Capability providing uniform floats and random permutations."""

    def uniform_float(self) -> float:
        """Return a uniform float in [0, 1)."""
        ...

    def permutation(self, n: int) -> Sequence[int]:
        """Return a random permutation of range(n)."""
        ...


RandomSeedBuilder = Callable[[int], RandomSource]


class NumpyRandomSource:
    """
    RandomSource backed by a numpy Generator.

    Args:
        seed: Integer seed. Any int64 value is accepted; negative seeds are
              reinterpreted as their unsigned 64-bit two's complement so that
              every int64 maps to a distinct numpy seed.
    """

    def __init__(self, seed: int = cte.DEFAULT_SEED):
        self.seed = int(seed)
        self._rng = np.random.default_rng(self.seed & _UINT64_MASK)

    def uniform_float(self) -> float:
        return float(self._rng.random())

    def permutation(self, n: int) -> Sequence[int]:
        return self._rng.permutation(n).tolist()

    def __repr__(self):
        return f"NumpyRandomSource(seed={self.seed})"


def default_seed_builder(seed: int) -> RandomSource:
    """Build the default RandomSource for a configuration seed."""
    return NumpyRandomSource(seed)
