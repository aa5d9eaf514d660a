"""
Noise modules for PyNoisey.

Combinators that wrap one or more samplers behind the same ``sample_2d``
interface, so modules can be chained and nested freely:

- FractalSum: fractional Brownian motion over one sampler
- Select: choose between a low and a high sampler from a control sampler
- Scale: scale, bias and clamp one sampler

Usage:
    import pynoisey as pn

    rng = pn.rng.NumpyRandomSource(7)
    base = pn.modules.FractalSum(pn.noise.PerlinSampler(rng), octaves=4)
    height = pn.modules.Scale(base, scale=0.5, bias=0.5, min=0.0, max=1.0)
"""

from .fractal import FractalSum
from .select import Select
from .scale import Scale

__all__ = ["FractalSum", "Select", "Scale"]
