"""
Noise graph builder for PyNoisey.

NoiseGraph turns a NoiseConfig into ready-to-sample objects in two passes:

1. build_sources(): every SourceSpec becomes a leaf sampler seeded through a
   RandomSeedBuilder (the numpy-backed default unless one is injected).
2. build_generators(): GeneratorSpecs are built in list order, each one
   resolving its references by name against the built sources and the
   generators built before it.

References only ever point to objects built earlier, so cycles cannot be
expressed: a forward or self reference is simply a reference that cannot be
resolved yet, and fails the build.

Reference order consumed by each generator type:
- fractalSum: sources[0]
- select: generators[0], generators[1], generators[2] as control, low, high
- scale: generators[0]

Example:
    graph = NoiseGraph.from_dict(json.load(fh))
    graph.build_sources(lambda seed: NumpyRandomSource(seed))
    graph.build_generators()
    terrain = graph.get_generator("terrain")
    h = terrain.sample_2d(12.5, 3.0)
"""

import logging
from collections import namedtuple
from types import MappingProxyType
from typing import Mapping, Optional

from .. import constants as cte
from ..errors import (
    ConfigError,
    InsufficientReferencesError,
    ReferenceNotFoundError,
    UnknownSeedError,
    UnknownTypeError,
)
from ..modules import FractalSum, Scale, Select
from ..noise import PerlinSampler, SimplexSampler
from ..rng import default_seed_builder
from .specs import NoiseConfig

logger = logging.getLogger(__name__)

# Source type -> sampler class taking a RandomSource
SOURCE_BUILDERS = {
    cte.SOURCE_PERLIN: PerlinSampler,
    cte.SOURCE_OPENSIMPLEX: SimplexSampler,
}

GeneratorBuilder = namedtuple("GeneratorBuilder", ["build", "n_sources", "n_generators"])


def _build_fractal_sum(spec, sources, generators):
    return FractalSum(sources[0], spec.octaves, spec.persistence, spec.lacunarity, spec.frequency)


def _build_select(spec, sources, generators):
    control, low, high = generators[:3]
    return Select(control, low, high, spec.lower_bound, spec.upper_bound, spec.edge_falloff)


def _build_scale(spec, sources, generators):
    return Scale(generators[0], spec.scale, spec.bias, spec.min_value, spec.max_value)


# Generator type -> builder and the number of source/generator references it consumes
GENERATOR_BUILDERS = {
    cte.GENERATOR_FRACTAL_SUM: GeneratorBuilder(_build_fractal_sum, 1, 0),
    cte.GENERATOR_SELECT: GeneratorBuilder(_build_select, 0, 3),
    cte.GENERATOR_SCALE: GeneratorBuilder(_build_scale, 0, 1),
}


class NoiseGraph:
    """
    Named graph of seeds, noise sources and generators.

    The configuration is copied at construction and exposed read-only. The
    built maps are filled once by build_sources() and build_generators(),
    which must run in that order and are not safe to call concurrently with
    each other or with lookups. Once built, the samplers are immutable and
    can be shared across threads.

    Args:
        config: NoiseConfig describing the graph (empty graph if None)
    """

    def __init__(self, config: Optional[NoiseConfig] = None):
        config = NoiseConfig() if config is None else config
        self.seeds = MappingProxyType(dict(config.seeds))
        self.sources = MappingProxyType(dict(config.sources))
        self.generators = tuple(config.generators)

        self._built_sources = {}
        self._built_generators = {}
        self._sources_built = False
        self._generators_built = False

    @classmethod
    def from_dict(cls, data: Mapping) -> "NoiseGraph":
        """Create a graph from a decoded configuration mapping"""
        return cls(NoiseConfig.from_dict(data))

    # ------------------------------------------------------------------
    # Built instances
    # ------------------------------------------------------------------
    @property
    def built_sources(self):
        return MappingProxyType(self._built_sources)

    @property
    def built_generators(self):
        return MappingProxyType(self._built_generators)

    def get_source(self, name: str):
        """Return the built source sampler called name, or None"""
        return self._built_sources.get(name)

    def get_generator(self, name: str):
        """
        Return the built generator called name.

        Returns None when no generator of that name has been built, which
        includes calling this before build_generators().
        """
        return self._built_generators.get(name)

    # ------------------------------------------------------------------
    # Build phases
    # ------------------------------------------------------------------
    def build_sources(self, seed_builder=None):
        """
        Build a sampler for every configured source.

        Args:
            seed_builder: Callable mapping an int64 seed to a RandomSource.
                          Defaults to pynoisey.rng.default_seed_builder.

        Raises:
            UnknownSeedError: If a source references an undefined seed
            UnknownTypeError: If a source type has no registered sampler
            RuntimeError: If sources were already built
        """
        if self._sources_built:
            raise RuntimeError("Sources already built for this graph")
        if seed_builder is None:
            seed_builder = default_seed_builder

        built = {}
        for name, spec in self.sources.items():
            if spec.seed not in self.seeds:
                raise UnknownSeedError(
                    f"Source '{name}' referenced seed '{spec.seed}' which wasn't found",
                    name=name,
                    reference=spec.seed,
                )

            sampler_cls = SOURCE_BUILDERS.get(spec.source_type)
            if sampler_cls is None:
                raise UnknownTypeError(
                    f"Undefined source type '{spec.source_type}' for source '{name}'",
                    name=name,
                    reference=spec.source_type,
                )

            seed = self.seeds[spec.seed]
            built[name] = sampler_cls(seed_builder(seed))
            logger.debug("Built source '%s' (%s, seed '%s'=%d)", name, spec.source_type, spec.seed, seed)

        self._built_sources = built
        self._sources_built = True
        logger.info("Built %d noise source(s)", len(built))

    def _resolve(self, gen_name: str, ref: str, pool: dict, kind: str):
        try:
            return pool[ref]
        except KeyError:
            raise ReferenceNotFoundError(
                f"Generator '{gen_name}' creation failed: couldn't find built {kind} '{ref}'",
                name=gen_name,
                reference=ref,
            ) from None

    def build_generators(self):
        """
        Build every configured generator in list order.

        Raises:
            ReferenceNotFoundError: If a reference names a source that does
                not exist or a generator that is not built yet
            UnknownTypeError: If a generator type has no registered builder
            InsufficientReferencesError: If a generator lists fewer
                references than its type consumes
            ConfigError: If a generator's numeric parameters are invalid
            RuntimeError: If sources are not built yet, or generators were
                already built
        """
        if not self._sources_built:
            raise RuntimeError("Sources not built yet. Call build_sources first.")
        if self._generators_built:
            raise RuntimeError("Generators already built for this graph")

        built = {}
        for spec in self.generators:
            name = spec.name
            if name in built:
                raise ConfigError(f"Generator '{name}' is defined more than once", name=name)

            sources = [self._resolve(name, ref, self._built_sources, "source") for ref in spec.sources]
            generators = [self._resolve(name, ref, built, "generator") for ref in spec.generators]

            builder = GENERATOR_BUILDERS.get(spec.generator_type)
            if builder is None:
                raise UnknownTypeError(
                    f"Undefined generator type '{spec.generator_type}' for generator '{name}'",
                    name=name,
                    reference=spec.generator_type,
                )

            if len(sources) < builder.n_sources or len(generators) < builder.n_generators:
                raise InsufficientReferencesError(
                    f"Generator '{name}' of type '{spec.generator_type}' needs "
                    f"{builder.n_sources} source(s) and {builder.n_generators} generator(s), "
                    f"got {len(sources)} and {len(generators)}",
                    name=name,
                )
            if len(sources) > builder.n_sources or len(generators) > builder.n_generators:
                logger.warning("Generator '%s' lists references its type does not use; ignoring them", name)

            try:
                built[name] = builder.build(spec, sources, generators)
            except ConfigError as e:
                raise ConfigError(f"Generator '{name}': {e}", name=name) from e
            logger.debug("Built generator '%s': %r", name, built[name])

        self._built_generators = built
        self._generators_built = True
        logger.info("Built %d noise generator(s)", len(built))

    def build(self, seed_builder=None):
        """Run build_sources() then build_generators(); returns self"""
        self.build_sources(seed_builder)
        self.build_generators()
        return self

    def __repr__(self):
        return (
            f"NoiseGraph(seeds={len(self.seeds)}, sources={len(self.sources)}, "
            f"generators={len(self.generators)})"
        )
