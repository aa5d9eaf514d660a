"""
Threshold selection module for PyNoisey.

A control sampler decides, point by point, whether the output comes from a
low branch or a high branch sampler. An optional edge falloff replaces the
hard step with a quintic S-curve blend so the result stays continuous.

Boundary policy:
- Hard mode (edge_falloff <= 0): the high branch is returned only when the
  control value is strictly greater than upper_bound. Every other control
  value, below lower_bound, equal to either bound or in between, returns the
  low branch.
- Soft mode (edge_falloff > 0): each bound gets a blending band of width
  edge_falloff centered on it. Both sides of lower_bound select the low
  branch, so its band is flat and the visible transition is the low-to-high
  blend across [upper_bound - edge_falloff / 2, upper_bound + edge_falloff / 2].
"""

import math

from ..errors import ConfigError
from ..general_algorithms.math_utils import lerp, quintic_s_curve
from ..noise.base import require_sampler


class Select:
    """
    Choose between two samplers according to a control sampler.

    Args:
        control: Sampler whose value drives the selection
        low: Sampler returned for control values at or below upper_bound
        high: Sampler returned for control values above upper_bound
        lower_bound: Bottom of the low selection range
        upper_bound: Threshold above which the high branch is selected
        edge_falloff: Width of the blending band around each bound; values
                      <= 0 disable blending

    Raises:
        ConfigError: If lower_bound > upper_bound, a bound is NaN or
            edge_falloff is not finite
        TypeError: If any of the three samplers does not implement sample_2d
    """

    def __init__(
        self,
        control,
        low,
        high,
        lower_bound: float = -1.0,
        upper_bound: float = 0.0,
        edge_falloff: float = 0.0,
    ):
        lower_bound = float(lower_bound)
        upper_bound = float(upper_bound)
        edge_falloff = float(edge_falloff)
        if math.isnan(lower_bound) or math.isnan(upper_bound):
            raise ConfigError(f"lower_bound and upper_bound must be numbers, got {lower_bound} and {upper_bound}")
        if not math.isfinite(edge_falloff):
            raise ConfigError(f"edge_falloff must be finite, got {edge_falloff}")
        if lower_bound > upper_bound:
            raise ConfigError(
                f"lower_bound ({lower_bound}) must not exceed upper_bound ({upper_bound})"
            )

        self.control = require_sampler(control, "control")
        self.low = require_sampler(low, "low")
        self.high = require_sampler(high, "high")
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        self.edge_falloff = edge_falloff

    def _side(self, c: float, x: float, y: float) -> float:
        """Value of the branch selected by the hard-mode rule"""
        if c > self.upper_bound:
            return self.high.sample_2d(x, y)
        return self.low.sample_2d(x, y)

    def sample_2d(self, x: float, y: float) -> float:
        c = self.control.sample_2d(x, y)

        if self.edge_falloff <= 0.0:
            return self._side(c, x, y)

        half = 0.5 * self.edge_falloff
        start = self.upper_bound - half
        if c <= start or c >= self.upper_bound + half:
            return self._side(c, x, y)

        alpha = quintic_s_curve((c - start) / self.edge_falloff)
        return lerp(self.low.sample_2d(x, y), self.high.sample_2d(x, y), alpha)

    def __repr__(self):
        return (
            f"Select(lower_bound={self.lower_bound}, upper_bound={self.upper_bound}, "
            f"edge_falloff={self.edge_falloff})"
        )
