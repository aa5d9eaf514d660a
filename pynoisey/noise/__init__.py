"""
Coherent noise kernels for PyNoisey.

Leaf samplers turning a 2D coordinate into a deterministic, band-limited
pseudo-random value. Each sampler consumes a RandomSource once at
construction and is immutable afterwards, so sampling is a pure function
that can be shared freely between threads.

Noise Types:
- PerlinSampler: gradient lattice noise with quintic interpolation, range [-1, 1]
- SimplexSampler: triangular-lattice noise with radial kernels, range within [-1, 1]

Usage:
    import pynoisey as pn

    rng = pn.rng.NumpyRandomSource(42)
    perlin = pn.noise.PerlinSampler(rng)
    value = perlin.sample_2d(1.5, 2.25)
"""

from .base import Sampler, permutation_table
from .perlin import PerlinSampler
from .simplex import SimplexSampler

# Export all noise kernels
__all__ = [
    "Sampler",
    "permutation_table",
    "PerlinSampler",
    "SimplexSampler",
]
