"""
Random number capability for PyNoisey.

Available:
- RandomSource: protocol consumed by every sampler at construction
- RandomSeedBuilder: callable type mapping an integer seed to a RandomSource
- NumpyRandomSource: default RandomSource backed by numpy.random.Generator
- default_seed_builder: RandomSeedBuilder used when none is injected

Usage:
    import random
    import pynoisey as pn

    # Use the default numpy generator
    perlin = pn.noise.PerlinSampler(pn.rng.NumpyRandomSource(42))

    # Or adapt any other generator
    class StdlibSource:
        def __init__(self, seed):
            self._r = random.Random(seed)
        def uniform_float(self):
            return self._r.random()
        def permutation(self, n):
            p = list(range(n))
            self._r.shuffle(p)
            return p
"""

from .random_source import (
    RandomSource,
    RandomSeedBuilder,
    NumpyRandomSource,
    default_seed_builder,
)

__all__ = [
    "RandomSource",
    "RandomSeedBuilder",
    "NumpyRandomSource",
    "default_seed_builder",
]
