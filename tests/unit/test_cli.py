"""Unit tests for CLI functionality."""

import json

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    """Provide Click test runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path, config_factory):
    path = tmp_path / "noise.json"
    path.write_text(json.dumps(config_factory.fbm_then_scale(seed=4)), encoding="utf-8")
    return path


class TestGraphCheck:
    """Test the pny-check command."""

    @pytest.mark.unit
    def test_help(self, runner):
        from pynoisey.cli.graph_commands import graph_check

        result = runner.invoke(graph_check, ["--help"])
        assert result.exit_code == 0
        assert "Validate a noise graph configuration" in result.output

    @pytest.mark.unit
    def test_requires_args(self, runner):
        from pynoisey.cli.graph_commands import graph_check

        result = runner.invoke(graph_check, [])
        assert result.exit_code != 0

    @pytest.mark.unit
    def test_valid_configuration(self, runner, config_file):
        from pynoisey.cli.graph_commands import graph_check

        result = runner.invoke(graph_check, [str(config_file)])
        assert result.exit_code == 0
        assert "OK: 1 seed(s), 1 source(s), 2 generator(s)" in result.output

    @pytest.mark.unit
    def test_verbose_lists_generators(self, runner, config_file):
        from pynoisey.cli.graph_commands import graph_check

        result = runner.invoke(graph_check, ["-v", str(config_file)])
        assert result.exit_code == 0
        assert "A: FractalSum(" in result.output
        assert "B: Scale(" in result.output

    @pytest.mark.unit
    def test_invalid_configuration(self, runner, tmp_path, config_factory):
        from pynoisey.cli.graph_commands import graph_check

        data = config_factory.fbm_then_scale()
        data["Generators"].reverse()
        path = tmp_path / "broken.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        result = runner.invoke(graph_check, [str(path)])
        assert result.exit_code == 1
        assert "invalid configuration" in result.output
        assert "'A'" in result.output

    @pytest.mark.unit
    def test_not_json(self, runner, tmp_path):
        from pynoisey.cli.graph_commands import graph_check

        path = tmp_path / "noise.json"
        path.write_text("{not json", encoding="utf-8")
        result = runner.invoke(graph_check, [str(path)])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestGraphSample:
    """Test the pny-sample command."""

    @pytest.mark.unit
    def test_prints_generator_value(self, runner, config_file):
        from pynoisey.cli.graph_commands import graph_sample, load_graph

        expected = load_graph(str(config_file)).get_generator("B").sample_2d(0.3, 1.9)
        result = runner.invoke(graph_sample, [str(config_file), "B", "0.3", "1.9"])
        assert result.exit_code == 0
        assert float(result.output.strip()) == expected

    @pytest.mark.unit
    def test_negative_coordinates(self, runner, config_file):
        from pynoisey.cli.graph_commands import graph_sample

        result = runner.invoke(graph_sample, [str(config_file), "A", "--", "-2.5", "-0.75"])
        assert result.exit_code == 0
        float(result.output.strip())

    @pytest.mark.unit
    def test_unknown_generator(self, runner, config_file):
        from pynoisey.cli.graph_commands import graph_sample

        result = runner.invoke(graph_sample, [str(config_file), "nope", "0", "0"])
        assert result.exit_code == 1
        assert "generator 'nope' not found" in result.output
