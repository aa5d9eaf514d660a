"""
Simplex noise for PyNoisey (the "opensimplex" source type).

The input coordinate is skewed onto a triangular lattice; the sample is the
sum of the contributions of the three corners of the containing triangle.
Each corner contributes ``(r^2 - d^2)^4 * (g . offset)`` with a fixed kernel
radius, and nothing once ``d^2 >= r^2``, so every sample touches exactly
three gradients.

Output range: within [-1, 1] after the fixed SIMPLEX_SCALE factor.
"""

import math

from .. import constants as cte
from .base import permutation_table

_N_GRADIENTS = len(cte.SIMPLEX_GRADIENTS)


def _corner(gradient, dx: float, dy: float) -> float:
    t = cte.SIMPLEX_RADIUS_SQ - dx * dx - dy * dy
    if t <= 0.0:
        return 0.0
    t *= t
    return t * t * (gradient[0] * dx + gradient[1] * dy)


class SimplexSampler:
    """
    2D simplex noise sampler.

    Only the permutation table is drawn from the RandomSource; gradients come
    from the fixed SIMPLEX_GRADIENTS set.

    Args:
        rng: RandomSource used to build the permutation table
    """

    def __init__(self, rng):
        self.perm = permutation_table(rng)

    def sample_2d(self, x: float, y: float) -> float:
        perm = self.perm
        grads = cte.SIMPLEX_GRADIENTS

        # Skew into simplex space to find the containing cell
        s = (x + y) * cte.SIMPLEX_F2
        i = math.floor(x + s)
        j = math.floor(y + s)

        # Unskew the cell origin back to (x, y) space
        t = (i + j) * cte.SIMPLEX_G2
        x0 = x - (i - t)
        y0 = y - (j - t)

        # Lower or upper triangle of the cell
        if x0 > y0:
            i1, j1 = 1, 0
        else:
            i1, j1 = 0, 1

        x1 = x0 - i1 + cte.SIMPLEX_G2
        y1 = y0 - j1 + cte.SIMPLEX_G2
        x2 = x0 - 1.0 + 2.0 * cte.SIMPLEX_G2
        y2 = y0 - 1.0 + 2.0 * cte.SIMPLEX_G2

        ii = i & cte.PERM_MASK
        jj = j & cte.PERM_MASK
        g0 = grads[perm[ii + perm[jj]] % _N_GRADIENTS]
        g1 = grads[perm[ii + i1 + perm[jj + j1]] % _N_GRADIENTS]
        g2 = grads[perm[ii + 1 + perm[jj + 1]] % _N_GRADIENTS]

        n = _corner(g0, x0, y0) + _corner(g1, x1, y1) + _corner(g2, x2, y2)
        return cte.SIMPLEX_SCALE * n

    def __repr__(self):
        return "SimplexSampler()"
