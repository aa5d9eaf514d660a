"""
Declarative noise graphs for PyNoisey.

Describe seeds, sources and generators by name, then let NoiseGraph build
and wire them:

- NoiseConfig: in-memory graph description (from_dict / to_dict)
- SourceSpec: source kernel type plus seed name
- FractalSumSpec, SelectSpec, ScaleSpec: one description type per generator
- NoiseGraph: two-pass builder exposing built samplers by name

Usage:
    import pynoisey as pn

    graph = pn.graph.NoiseGraph.from_dict({
        "Seeds": {"Default": 1},
        "Sources": {"perlin": {"SourceType": "perlin", "Seed": "Default"}},
        "Generators": [
            {"Name": "basic", "GeneratorType": "fractalSum",
             "Sources": ["perlin"], "Octaves": 5},
        ],
    })
    graph.build()
    value = graph.get_generator("basic").sample_2d(0.5, 0.5)
"""

from .specs import (
    NoiseConfig,
    SourceSpec,
    GeneratorSpec,
    FractalSumSpec,
    SelectSpec,
    ScaleSpec,
    GENERATOR_SPECS,
    generator_spec_from_dict,
    generator_spec_to_dict,
)
from .builder import NoiseGraph, SOURCE_BUILDERS, GENERATOR_BUILDERS

__all__ = [
    "NoiseConfig",
    "SourceSpec",
    "GeneratorSpec",
    "FractalSumSpec",
    "SelectSpec",
    "ScaleSpec",
    "GENERATOR_SPECS",
    "generator_spec_from_dict",
    "generator_spec_to_dict",
    "NoiseGraph",
    "SOURCE_BUILDERS",
    "GENERATOR_BUILDERS",
]
