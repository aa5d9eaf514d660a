"""
Perlin gradient noise for PyNoisey.

Lattice noise with one pseudo-random unit gradient per grid point. Each
sample takes the dot products of the four surrounding corner gradients with
the offsets to the sample point, smooths the fractional offsets with the
quintic S-curve and interpolates bilinearly.

Output range: [-1, 1]. With unit gradients the raw 2D value never exceeds
sqrt(0.5) in magnitude, and the result is rescaled by sqrt(2).
"""

import math

from .. import constants as cte
from ..general_algorithms.math_utils import lerp, quintic_s_curve
from .base import permutation_table


class PerlinSampler:
    """
    2D Perlin noise sampler.

    The RandomSource is consumed once, here: a permutation of PERM_SIZE
    entries selects gradients, and PERM_SIZE uniform floats define the
    gradient angles. Sampling afterwards is a pure function of (x, y).

    Args:
        rng: RandomSource used to build the permutation and gradient tables

    Example:
        perlin = PerlinSampler(NumpyRandomSource(42))
        h = perlin.sample_2d(0.3, 1.7)
    """

    def __init__(self, rng):
        self.perm = permutation_table(rng)

        gradients = []
        for _ in range(cte.PERM_SIZE):
            angle = 2.0 * math.pi * rng.uniform_float()
            gradients.append((math.cos(angle), math.sin(angle)))
        self.gradients = tuple(gradients)

    def _gradient_dot(self, ix: int, iy: int, dx: float, dy: float) -> float:
        """Dot product of the corner gradient at (ix, iy) with the offset (dx, dy)"""
        gx, gy = self.gradients[self.perm[self.perm[ix] + iy]]
        return gx * dx + gy * dy

    def sample_2d(self, x: float, y: float) -> float:
        # Unit grid cell containing the point
        x0 = math.floor(x)
        y0 = math.floor(y)
        fx = x - x0
        fy = y - y0
        ix = x0 & cte.PERM_MASK
        iy = y0 & cte.PERM_MASK

        u = quintic_s_curve(fx)
        v = quintic_s_curve(fy)

        n00 = self._gradient_dot(ix, iy, fx, fy)
        n10 = self._gradient_dot(ix + 1, iy, fx - 1.0, fy)
        n01 = self._gradient_dot(ix, iy + 1, fx, fy - 1.0)
        n11 = self._gradient_dot(ix + 1, iy + 1, fx - 1.0, fy - 1.0)

        return lerp(lerp(n00, n10, u), lerp(n01, n11, u), v) * cte.PERLIN_SCALE

    def __repr__(self):
        return "PerlinSampler()"
