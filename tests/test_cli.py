"""CLI tests using typer's CliRunner."""

import json

import pytest
from typer.testing import CliRunner

from tiles import __version__
from tiles.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(config_path):
    """Keep every CLI test away from the user's real preferences."""
    return config_path


class TestCLIBasics:
    def test_cli_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("run", "show", "demo", "version"):
            assert command in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"tiles version {__version__}" in result.stdout

    def test_invalid_command(self):
        result = runner.invoke(app, ["nonexistent-command"])
        assert result.exit_code != 0


class TestShow:
    def test_default_registry_single(self):
        result = runner.invoke(app, ["show"])
        assert result.exit_code == 0
        assert "registry layout" in result.stdout
        assert "Hello 0" in result.stdout

    def test_tree_pair(self):
        result = runner.invoke(app, ["show", "-r", "tree"])
        assert result.exit_code == 0
        assert "tree layout" in result.stdout
        assert "Hello 0" in result.stdout
        assert "Hello 1" in result.stdout

    def test_uses_saved_representation(self, config_path):
        config_path.write_text(json.dumps({"representation": "tree", "initial_layout": "single"}))
        result = runner.invoke(app, ["show"])
        assert result.exit_code == 0
        assert "tree layout" in result.stdout
        assert "split" not in result.stdout

    def test_invalid_representation(self):
        result = runner.invoke(app, ["show", "-r", "grid"])
        assert result.exit_code == 1
        assert "Unknown representation" in result.stdout

    def test_invalid_layout(self):
        result = runner.invoke(app, ["show", "-l", "triple"])
        assert result.exit_code == 1


class TestDemo:
    @pytest.mark.parametrize("representation", ["registry", "tree"])
    def test_walkthrough_ends_empty(self, representation):
        result = runner.invoke(app, ["demo", "-r", representation])
        assert result.exit_code == 0, result.stdout
        assert "Start" in result.stdout
        assert "4. Close the last panel" in result.stdout
        assert "empty" in result.stdout

    def test_tree_walkthrough_titles(self):
        result = runner.invoke(app, ["demo", "-r", "tree"])
        assert "2. Split the remaining panel vertically" in result.stdout
        assert "Hello 2" in result.stdout


class TestAxisOption:
    def test_vertical_pair(self):
        result = runner.invoke(app, ["show", "-r", "registry", "-l", "pair", "--axis", "v"])
        assert result.exit_code == 0
        assert "vertical split" in result.stdout

    def test_invalid_axis(self):
        result = runner.invoke(app, ["show", "--axis", "diagonal"])
        assert result.exit_code == 1
        assert "Invalid axis" in result.stdout
