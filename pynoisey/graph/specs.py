"""
Noise graph configuration for PyNoisey.

A graph description names its seeds, its noise sources and an ordered list
of generators. Each generator type has its own frozen dataclass carrying only
the parameters that type uses; references to sources and generators are plain
names resolved later by the graph builder.

The mapping form read by ``NoiseConfig.from_dict`` and produced by
``NoiseConfig.to_dict`` looks like:

    {
      "Seeds": {"Default": 1},
      "Sources": {
        "perlin": {"SourceType": "perlin", "Seed": "Default"}
      },
      "Generators": [
        {
          "Name": "basic",
          "GeneratorType": "fractalSum",
          "Sources": ["perlin"],
          "Octaves": 5,
          "Persistence": 0.25,
          "Lacunarity": 2.0,
          "Frequency": 1.0
        }
      ]
    }

Numeric keys that are absent take the dataclass defaults below. Decoding the
mapping from a file is left to the caller.
"""

import math
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Mapping, Tuple

from .. import constants as cte
from ..errors import ConfigError, UnknownTypeError


@dataclass(frozen=True)
class SourceSpec:
    """A coherent noise source: its kernel type and the name of its seed."""

    source_type: str
    seed: str


@dataclass(frozen=True)
class GeneratorSpec:
    """
    Fields common to every generator description.

    Subclasses set ``generator_type`` and list their numeric parameters in
    ``param_keys`` (dataclass field name -> configuration key).
    """

    name: str
    sources: Tuple[str, ...] = ()
    generators: Tuple[str, ...] = ()

    generator_type: ClassVar[str] = ""
    param_keys: ClassVar[Dict[str, str]] = {}

    def __post_init__(self):
        object.__setattr__(self, "sources", tuple(self.sources))
        object.__setattr__(self, "generators", tuple(self.generators))


@dataclass(frozen=True)
class FractalSumSpec(GeneratorSpec):
    """Fractal sum over ``sources[0]``."""

    octaves: int = 1
    persistence: float = 0.5
    lacunarity: float = 2.0
    frequency: float = 1.0

    generator_type: ClassVar[str] = cte.GENERATOR_FRACTAL_SUM
    param_keys: ClassVar[Dict[str, str]] = {
        "octaves": "Octaves",
        "persistence": "Persistence",
        "lacunarity": "Lacunarity",
        "frequency": "Frequency",
    }


@dataclass(frozen=True)
class SelectSpec(GeneratorSpec):
    """Selection with ``generators[0..2]`` as control, low and high."""

    lower_bound: float = -1.0
    upper_bound: float = 0.0
    edge_falloff: float = 0.0

    generator_type: ClassVar[str] = cte.GENERATOR_SELECT
    param_keys: ClassVar[Dict[str, str]] = {
        "lower_bound": "LowerBound",
        "upper_bound": "UpperBound",
        "edge_falloff": "EdgeFalloff",
    }


@dataclass(frozen=True)
class ScaleSpec(GeneratorSpec):
    """Scale, bias and clamp of ``generators[0]``."""

    scale: float = 1.0
    bias: float = 0.0
    min_value: float = -1.0
    max_value: float = 1.0

    generator_type: ClassVar[str] = cte.GENERATOR_SCALE
    param_keys: ClassVar[Dict[str, str]] = {
        "scale": "Scale",
        "bias": "Bias",
        "min_value": "Min",
        "max_value": "Max",
    }


GENERATOR_SPECS = {
    spec_cls.generator_type: spec_cls
    for spec_cls in (FractalSumSpec, SelectSpec, ScaleSpec)
}


def _as_names(value, what: str, owner: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ConfigError(f"{what} of '{owner}' must be a list of names", name=owner)
    for item in value:
        if not isinstance(item, str):
            raise ConfigError(f"{what} of '{owner}' must only contain names, got {item!r}", name=owner)
    return tuple(value)


def _as_number(value, key: str, owner: str, integer: bool = False):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"'{key}' of '{owner}' must be a number, got {value!r}", name=owner)
    if isinstance(value, float) and not math.isfinite(value):
        raise ConfigError(f"'{key}' of '{owner}' must be finite, got {value!r}", name=owner)
    if integer:
        if int(value) != value:
            raise ConfigError(f"'{key}' of '{owner}' must be an integer, got {value!r}", name=owner)
        return int(value)
    return float(value)


def _require(entry: Mapping[str, Any], key: str, owner: str):
    if key not in entry:
        raise ConfigError(f"'{owner}' is missing required key '{key}'", name=owner)
    return entry[key]


def generator_spec_from_dict(entry: Mapping[str, Any]) -> GeneratorSpec:
    """
    Build the GeneratorSpec variant matching ``entry["GeneratorType"]``.

    Raises:
        UnknownTypeError: If the generator type is not registered
        ConfigError: If a key is missing or holds a value of the wrong type
    """
    if not isinstance(entry, Mapping):
        raise ConfigError(f"Generator entries must be mappings, got {type(entry).__name__}")

    name = _require(entry, "Name", "generator")
    if not isinstance(name, str):
        raise ConfigError(f"Generator name must be a string, got {name!r}")

    gen_type = _require(entry, "GeneratorType", name)
    if not isinstance(gen_type, str):
        raise ConfigError(f"GeneratorType of '{name}' must be a string, got {gen_type!r}", name=name)
    gen_type = cte.GENERATOR_ALIASES.get(gen_type, gen_type)
    spec_cls = GENERATOR_SPECS.get(gen_type)
    if spec_cls is None:
        raise UnknownTypeError(
            f"Undefined generator type '{gen_type}' for generator '{name}'",
            name=name,
            reference=gen_type,
        )

    params = {}
    int_fields = {f.name for f in fields(spec_cls) if f.type is int}
    for attr, key in spec_cls.param_keys.items():
        if key in entry:
            params[attr] = _as_number(entry[key], key, name, integer=attr in int_fields)

    return spec_cls(
        name=name,
        sources=_as_names(entry.get("Sources"), "Sources", name),
        generators=_as_names(entry.get("Generators"), "Generators", name),
        **params,
    )


def generator_spec_to_dict(spec: GeneratorSpec) -> Dict[str, Any]:
    """Inverse of generator_spec_from_dict"""
    out = {
        "Name": spec.name,
        "GeneratorType": spec.generator_type,
        "Sources": list(spec.sources),
        "Generators": list(spec.generators),
    }
    for attr, key in spec.param_keys.items():
        out[key] = getattr(spec, attr)
    return out


@dataclass
class NoiseConfig:
    """
    In-memory description of a noise graph.

    Attributes:
        seeds: Seed name -> int64 seed value
        sources: Source name -> SourceSpec
        generators: Ordered generator descriptions; the order is the build
                    order, and a generator may only reference generators that
                    appear before it.
    """

    seeds: Dict[str, int] = field(default_factory=dict)
    sources: Dict[str, SourceSpec] = field(default_factory=dict)
    generators: List[GeneratorSpec] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NoiseConfig":
        """
        Load a configuration from a decoded mapping (e.g. parsed JSON).

        Args:
            data: Mapping with optional "Seeds", "Sources" and "Generators" keys

        Returns:
            NoiseConfig

        Generator types are checked here, so an unregistered type is reported
        at load time instead of waiting for ``NoiseGraph.build_generators``.

        Raises:
            UnknownTypeError: If a generator type is not registered
            ConfigError: If the mapping does not have the expected shape, or a
                numeric value is not a finite number
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Noise configuration must be a mapping, got {type(data).__name__}")

        raw_seeds = data.get("Seeds") or {}
        if not isinstance(raw_seeds, Mapping):
            raise ConfigError("Seeds must be a mapping of seed name to integer")
        seeds = {}
        for seed_name, value in raw_seeds.items():
            seeds[seed_name] = _as_number(value, seed_name, "Seeds", integer=True)

        raw_sources = data.get("Sources") or {}
        if not isinstance(raw_sources, Mapping):
            raise ConfigError("Sources must be a mapping of source name to source entry")
        sources = {}
        for source_name, entry in raw_sources.items():
            if not isinstance(entry, Mapping):
                raise ConfigError(f"Source '{source_name}' must be a mapping", name=source_name)
            source_type = _require(entry, "SourceType", source_name)
            seed = _require(entry, "Seed", source_name)
            if not isinstance(source_type, str) or not isinstance(seed, str):
                raise ConfigError(
                    f"SourceType and Seed of source '{source_name}' must be strings",
                    name=source_name,
                )
            sources[source_name] = SourceSpec(source_type=source_type, seed=seed)

        raw_generators = data.get("Generators") or []
        if not isinstance(raw_generators, (list, tuple)):
            raise ConfigError("Generators must be an ordered list")
        generators = [generator_spec_from_dict(entry) for entry in raw_generators]

        return cls(seeds=seeds, sources=sources, generators=generators)

    def to_dict(self) -> Dict[str, Any]:
        """Mapping form of the configuration, suitable for json.dump"""
        return {
            "Seeds": dict(self.seeds),
            "Sources": {
                name: {"SourceType": spec.source_type, "Seed": spec.seed}
                for name, spec in self.sources.items()
            },
            "Generators": [generator_spec_to_dict(spec) for spec in self.generators],
        }
