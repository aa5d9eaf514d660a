"""
PyNoisey: deterministic coherent noise for procedural textures and terrain.

Subpackages:
- noise: Perlin and simplex samplers
- modules: FractalSum, Select and Scale combinators
- graph: declarative, name-addressed noise graphs
- rng: RandomSource capability and its numpy-backed default
- general_algorithms: interpolation curves
- cli: command line tools

Usage:
    import pynoisey as pn

    rng = pn.rng.NumpyRandomSource(1)
    fbm = pn.modules.FractalSum(pn.noise.PerlinSampler(rng), octaves=5,
                                persistence=0.25)
    value = fbm.sample_2d(0.3, 0.6)
"""

__version__ = "0.1.0"

from . import constants
from . import errors
from . import general_algorithms
from . import rng
from . import noise
from . import modules
from . import graph
from . import cli

__all__ = [
    "constants",
    "errors",
    "general_algorithms",
    "rng",
    "noise",
    "modules",
    "graph",
    "cli",
]
