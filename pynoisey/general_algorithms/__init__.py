"""
General algorithms for PyNoisey.

Small numerical helpers used by the coherent noise kernels and the
combinator modules:

- cubic_s_curve: 3v^2 - 2v^3 ease curve
- quintic_s_curve: 6v^5 - 15v^4 + 10v^3 ease curve (C2 continuous)
- lerp: linear interpolation a(1-t) + bt
"""

from .math_utils import cubic_s_curve, quintic_s_curve, lerp

__all__ = ["cubic_s_curve", "quintic_s_curve", "lerp"]
