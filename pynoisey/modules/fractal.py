"""
Fractal sum (fractional Brownian motion) module for PyNoisey.

Adds up frequency-scaled, amplitude-scaled copies of an upstream sampler to
produce multi-scale detail. The sum is not normalized: with many octaves or a
persistence close to 1 the output grows beyond the upstream range, and it is
up to the caller to rescale it (typically with a Scale module).
"""

import numbers

from ..errors import ConfigError
from ..noise.base import require_sampler


class FractalSum:
    """
    Fractional Brownian motion over one upstream sampler.

    Args:
        source: Upstream sampler
        octaves: Number of layers to sum (>= 0). Zero octaves is valid and
                 produces 0.0 everywhere.
        persistence: Amplitude ratio between consecutive octaves
        lacunarity: Frequency ratio between consecutive octaves
        frequency: Frequency of the first octave

    Raises:
        ConfigError: If octaves is not a non-negative integer
        TypeError: If source does not implement sample_2d

    Example:
        fbm = FractalSum(PerlinSampler(rng), octaves=5, persistence=0.5,
                         lacunarity=2.0, frequency=1.0)
    """

    def __init__(
        self,
        source,
        octaves: int = 1,
        persistence: float = 0.5,
        lacunarity: float = 2.0,
        frequency: float = 1.0,
    ):
        if isinstance(octaves, bool) or not isinstance(octaves, numbers.Integral):
            raise ConfigError(f"octaves must be an integer, got {octaves!r}")
        if octaves < 0:
            raise ConfigError(f"octaves must be >= 0, got {octaves}")

        self.source = require_sampler(source, "source")
        self.octaves = int(octaves)
        self.persistence = float(persistence)
        self.lacunarity = float(lacunarity)
        self.frequency = float(frequency)

    def sample_2d(self, x: float, y: float) -> float:
        total = 0.0
        amplitude = 1.0
        freq = self.frequency

        for _ in range(self.octaves):
            total += amplitude * self.source.sample_2d(x * freq, y * freq)
            amplitude *= self.persistence
            freq *= self.lacunarity

        return total

    def __repr__(self):
        return (
            f"FractalSum(octaves={self.octaves}, persistence={self.persistence}, "
            f"lacunarity={self.lacunarity}, frequency={self.frequency})"
        )
