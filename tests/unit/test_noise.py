"""
Unit tests for the coherent noise samplers.
"""
import math

import numpy as np
import pytest

from pynoisey.noise import PerlinSampler, Sampler, SimplexSampler, permutation_table
from pynoisey.rng import NumpyRandomSource
from tests.conftest import StdlibRandomSource

SAMPLERS = [PerlinSampler, SimplexSampler]


def _values(sampler, coords):
    return np.array([sampler.sample_2d(x, y) for x, y in coords])


class TestPermutationTable:
    """Test permutation table construction."""

    @pytest.mark.unit
    def test_table_is_doubled(self):
        table = permutation_table(NumpyRandomSource(5))
        assert len(table) == 512
        assert table[:256] == table[256:]
        assert sorted(table[:256]) == list(range(256))

    @pytest.mark.unit
    def test_rejects_non_permutation(self):
        class BrokenSource:
            def uniform_float(self):
                return 0.5

            def permutation(self, n):
                return [0] * n

        with pytest.raises(ValueError, match="permutation"):
            permutation_table(BrokenSource())


class TestSamplerContract:
    """Properties shared by every leaf sampler."""

    @pytest.mark.unit
    @pytest.mark.parametrize("sampler_cls", SAMPLERS)
    def test_implements_sampler_protocol(self, sampler_cls):
        assert isinstance(sampler_cls(NumpyRandomSource(1)), Sampler)

    @pytest.mark.unit
    @pytest.mark.parametrize("sampler_cls", SAMPLERS)
    def test_deterministic(self, sampler_cls, coordinate_grid):
        sampler = sampler_cls(NumpyRandomSource(8))
        first = _values(sampler, coordinate_grid)
        second = _values(sampler, coordinate_grid)
        np.testing.assert_array_equal(first, second)

    @pytest.mark.unit
    @pytest.mark.parametrize("sampler_cls", SAMPLERS)
    def test_same_seed_same_field(self, sampler_cls, coordinate_grid):
        a = sampler_cls(NumpyRandomSource(8))
        b = sampler_cls(NumpyRandomSource(8))
        np.testing.assert_array_equal(_values(a, coordinate_grid), _values(b, coordinate_grid))

    @pytest.mark.unit
    @pytest.mark.parametrize("sampler_cls", SAMPLERS)
    def test_seed_sensitivity(self, sampler_cls, coordinate_grid):
        a = _values(sampler_cls(NumpyRandomSource(1)), coordinate_grid)
        b = _values(sampler_cls(NumpyRandomSource(2)), coordinate_grid)
        assert not np.array_equal(a, b)

    @pytest.mark.unit
    @pytest.mark.parametrize("sampler_cls", SAMPLERS)
    def test_bounded_range(self, sampler_cls, coordinate_grid):
        values = _values(sampler_cls(NumpyRandomSource(21)), coordinate_grid)
        assert np.all(np.abs(values) <= 1.0 + 1e-9)
        assert np.all(np.isfinite(values))

    @pytest.mark.unit
    @pytest.mark.parametrize("sampler_cls", SAMPLERS)
    def test_field_is_not_flat(self, sampler_cls, coordinate_grid):
        values = _values(sampler_cls(NumpyRandomSource(21)), coordinate_grid)
        assert values.std() > 0.05
        assert values.min() < 0.0 < values.max()

    @pytest.mark.unit
    @pytest.mark.parametrize("sampler_cls", SAMPLERS)
    def test_continuity(self, sampler_cls, coordinate_grid):
        sampler = sampler_cls(NumpyRandomSource(4))
        h = 1e-6
        for x, y in coordinate_grid[::37]:
            v = sampler.sample_2d(x, y)
            assert abs(sampler.sample_2d(x + h, y) - v) < 1e-3
            assert abs(sampler.sample_2d(x, y + h) - v) < 1e-3

    @pytest.mark.unit
    @pytest.mark.parametrize("sampler_cls", SAMPLERS)
    def test_injected_random_source(self, sampler_cls, coordinate_grid):
        a = _values(sampler_cls(StdlibRandomSource(3)), coordinate_grid)
        b = _values(sampler_cls(StdlibRandomSource(3)), coordinate_grid)
        np.testing.assert_array_equal(a, b)
        assert np.all(np.abs(a) <= 1.0 + 1e-9)


class TestPerlinSampler:
    """Perlin-specific behaviour."""

    @pytest.mark.unit
    def test_zero_on_lattice_points(self, perlin):
        for x in range(-3, 4):
            for y in range(-3, 4):
                assert perlin.sample_2d(float(x), float(y)) == 0.0

    @pytest.mark.unit
    def test_gradients_are_unit_vectors(self, perlin):
        assert len(perlin.gradients) == 256
        for gx, gy in perlin.gradients:
            assert math.hypot(gx, gy) == pytest.approx(1.0)

    @pytest.mark.unit
    def test_lattice_wraps_every_256_cells(self, perlin):
        for x, y in [(0.3, 0.7), (12.25, -4.5), (-100.1, 55.9)]:
            assert perlin.sample_2d(x + 256.0, y) == pytest.approx(perlin.sample_2d(x, y), abs=1e-9)

    @pytest.mark.unit
    def test_tables_immutable(self, perlin):
        assert isinstance(perlin.perm, tuple)
        assert isinstance(perlin.gradients, tuple)


class TestSimplexSampler:
    """Simplex-specific behaviour."""

    @pytest.mark.unit
    def test_zero_at_origin(self, simplex):
        assert simplex.sample_2d(0.0, 0.0) == 0.0

    @pytest.mark.unit
    def test_table_immutable(self, simplex):
        assert isinstance(simplex.perm, tuple)
        assert len(simplex.perm) == 512
