"""
Scale, bias and clamp module for PyNoisey.
"""

import math

from ..errors import ConfigError
from ..noise.base import require_sampler


class Scale:
    """
    Multiply an upstream sampler by ``scale``, add ``bias`` and clamp the
    result into [min_value, max_value].

    Args:
        source: Upstream sampler
        scale: Multiplier applied to the upstream value
        bias: Constant added after scaling
        min_value: Lowest value returned
        max_value: Highest value returned

    Raises:
        ConfigError: If min_value > max_value or either bound is NaN
        TypeError: If source does not implement sample_2d
    """

    def __init__(
        self,
        source,
        scale: float = 1.0,
        bias: float = 0.0,
        min_value: float = -1.0,
        max_value: float = 1.0,
    ):
        min_value = float(min_value)
        max_value = float(max_value)
        if math.isnan(min_value) or math.isnan(max_value):
            raise ConfigError(f"min_value and max_value must be numbers, got {min_value} and {max_value}")
        if min_value > max_value:
            raise ConfigError(f"min_value ({min_value}) must not exceed max_value ({max_value})")

        self.source = require_sampler(source, "source")
        self.scale = float(scale)
        self.bias = float(bias)
        self.min_value = min_value
        self.max_value = max_value

    def sample_2d(self, x: float, y: float) -> float:
        v = self.source.sample_2d(x, y) * self.scale + self.bias
        return max(self.min_value, min(self.max_value, v))

    def __repr__(self):
        return (
            f"Scale(scale={self.scale}, bias={self.bias}, "
            f"min_value={self.min_value}, max_value={self.max_value})"
        )
