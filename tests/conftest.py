"""
Pytest configuration and fixtures for PyNoisey test suite.

Shared fixtures, marker registration and small sampler/random-source doubles
used across the unit and integration tests.
"""
import os
import random
import sys

import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker, help_text in (
        ("unit", "fast tests of a single component"),
        ("integration", "tests wiring several components together"),
        ("importtest", "module import checks"),
        ("slow", "tests sampling large coordinate grids"),
    ):
        config.addinivalue_line("markers", f"{marker}: {help_text}")


def pytest_collection_modifyitems(config, items):
    """Mark import tests for easy selection."""
    for item in items:
        if "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


class ConstantSampler:
    """Sampler returning the same value everywhere."""

    def __init__(self, value):
        self.value = value

    def sample_2d(self, x, y):
        return self.value


class RecordingSampler:
    """Sampler returning x + y and remembering every coordinate it saw."""

    def __init__(self):
        self.calls = []

    def sample_2d(self, x, y):
        self.calls.append((x, y))
        return x + y


class StdlibRandomSource:
    """RandomSource backed by random.Random, as a caller might inject."""

    def __init__(self, seed):
        self._r = random.Random(seed)

    def uniform_float(self):
        return self._r.random()

    def permutation(self, n):
        p = list(range(n))
        self._r.shuffle(p)
        return p


class ConfigFactory:
    """Helper class building configuration mappings for tests."""

    @staticmethod
    def fbm_then_scale(seed=1, source_type="perlin"):
        return {
            "Seeds": {"Default": seed},
            "Sources": {"S": {"SourceType": source_type, "Seed": "Default"}},
            "Generators": [
                {
                    "Name": "A",
                    "GeneratorType": "fractalSum",
                    "Sources": ["S"],
                    "Octaves": 3,
                    "Persistence": 0.5,
                    "Lacunarity": 2.0,
                    "Frequency": 1.0,
                },
                {
                    "Name": "B",
                    "GeneratorType": "scale",
                    "Generators": ["A"],
                    "Scale": 0.5,
                    "Bias": 0.5,
                    "Min": 0.0,
                    "Max": 1.0,
                },
            ],
        }

    @staticmethod
    def terrain(seed_a=7, seed_b=11):
        """Two sources, fBm over each, a selector and a final scale."""
        return {
            "Seeds": {"land": seed_a, "detail": seed_b},
            "Sources": {
                "perlin": {"SourceType": "perlin", "Seed": "land"},
                "simplex": {"SourceType": "opensimplex", "Seed": "detail"},
            },
            "Generators": [
                {"Name": "control", "GeneratorType": "fBm2d", "Sources": ["perlin"],
                 "Octaves": 2, "Persistence": 0.5, "Lacunarity": 2.0, "Frequency": 0.5},
                {"Name": "plains", "GeneratorType": "fractalSum", "Sources": ["simplex"],
                 "Octaves": 1, "Persistence": 0.5, "Lacunarity": 2.0, "Frequency": 1.0},
                {"Name": "hills", "GeneratorType": "fractalSum", "Sources": ["perlin"],
                 "Octaves": 4, "Persistence": 0.6, "Lacunarity": 2.0, "Frequency": 2.0},
                {"Name": "mixed", "GeneratorType": "select2d",
                 "Generators": ["control", "plains", "hills"],
                 "LowerBound": -0.25, "UpperBound": 0.1, "EdgeFalloff": 0.2},
                {"Name": "height", "GeneratorType": "scale2d", "Generators": ["mixed"],
                 "Scale": 0.5, "Bias": 0.5, "Min": 0.0, "Max": 1.0},
            ],
        }


@pytest.fixture
def config_factory():
    """Provide access to configuration mapping builders."""
    return ConfigFactory()


@pytest.fixture
def numpy_seed_builder():
    """Explicit seed builder equivalent to the package default."""
    from pynoisey.rng import NumpyRandomSource

    return lambda seed: NumpyRandomSource(seed)


@pytest.fixture
def stdlib_seed_builder():
    """Seed builder backed by the standard library generator."""
    return lambda seed: StdlibRandomSource(seed)


@pytest.fixture
def perlin():
    from pynoisey.noise import PerlinSampler
    from pynoisey.rng import NumpyRandomSource

    return PerlinSampler(NumpyRandomSource(42))


@pytest.fixture
def simplex():
    from pynoisey.noise import SimplexSampler
    from pynoisey.rng import NumpyRandomSource

    return SimplexSampler(NumpyRandomSource(42))


@pytest.fixture(scope="session")
def coordinate_grid():
    """Non-lattice coordinates covering a few hundred cells, including negatives."""
    step = 0.137
    return [(-20.0 + i * step, -15.0 + j * step) for i in range(60) for j in range(60)]
