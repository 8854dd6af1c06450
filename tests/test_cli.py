"""
Tests for the coordkit command line interface.
"""

import io
import json
import logging
import math
import sys

import pytest

from coordkit import __version__
from coordkit.cli import cli
from coordkit.cli.utils import setup_logging


class TestConvert:
    """Test the convert command."""

    def test_cartesian_to_spheric(self, runner):
        result = runner.invoke(cli, ["convert", "cartesian:1,0,0"])
        assert result.exit_code == 0
        assert result.output.strip() == "spheric:0.000000,1.570796,1.000000"

    def test_spheric_to_cartesian(self, runner):
        result = runner.invoke(cli, ["convert", "spheric:0,0,1"])
        assert result.exit_code == 0
        assert result.output.strip() == "cartesian:0.000000,0.000000,1.000000"

    def test_explicit_target(self, runner):
        result = runner.invoke(cli, ["convert", "--to", "cartesian", "cartesian:1,2,3"])
        assert result.output.strip() == "cartesian:1.000000,2.000000,3.000000"

    def test_json_output(self, runner):
        result = runner.invoke(cli, ["convert", "--json", "cartesian:0,0,-2"])
        data = json.loads(result.output)
        assert data["system"] == "spheric"
        assert data["theta"] == pytest.approx(math.pi)
        assert data["radius"] == pytest.approx(2.0)

    def test_origin_uses_convention(self, runner):
        result = runner.invoke(cli, ["convert", "cartesian:0,0,0"])
        assert result.exit_code == 0
        assert result.output.strip() == "spheric:0.000000,0.000000,0.000000"

    def test_origin_strict_fails(self, runner):
        result = runner.invoke(cli, ["convert", "--strict", "cartesian:0,0,0"])
        assert result.exit_code == 1
        assert "undefined" in result.output

    def test_out_of_range_spheric_rejected(self, runner):
        result = runner.invoke(cli, ["convert", "spheric:3.5,0,1"])
        assert result.exit_code == 2
        assert "phi" in result.output

    @pytest.mark.parametrize("argument", [
        "1,0,0",
        "polar:1,0,0",
        "cartesian:1,0",
        "cartesian:a,b,c",
    ])
    def test_malformed_coordinate(self, runner, argument):
        result = runner.invoke(cli, ["convert", argument])
        assert result.exit_code == 2


class TestMeasurements:
    """Test the distance, angle and equal commands."""

    def test_distance(self, runner):
        result = runner.invoke(cli, ["distance", "cartesian:0,0,1", "cartesian:0,0,-1"])
        assert result.exit_code == 0
        assert result.output.strip() == "2.000000"

    def test_distance_json(self, runner):
        result = runner.invoke(cli, ["distance", "--json", "cartesian:0,0,1", "spheric:0,0,1"])
        assert json.loads(result.output) == {"distance": 0.0}

    def test_angle_pole_to_pole(self, runner):
        result = runner.invoke(cli, ["angle", "spheric:0,0,1", f"spheric:0,{math.pi!r},1"])
        assert result.exit_code == 0
        assert float(result.output) == pytest.approx(math.pi, abs=1e-6)

    def test_equal_mixed(self, runner):
        result = runner.invoke(cli, ["equal", "cartesian:1,0,0", f"spheric:0,{math.pi / 2!r},1"])
        assert result.exit_code == 0
        assert result.output.strip() == "true"

    def test_not_equal(self, runner):
        result = runner.invoke(cli, ["equal", "cartesian:0,0,0", "cartesian:1,0,0"])
        assert result.exit_code == 1
        assert result.output.strip() == "false"

    def test_non_finite_json_rejected(self, runner):
        # inf - inf leaves a NaN component
        result = runner.invoke(
            cli, ["distance", "--json", "cartesian:inf,0,0", "cartesian:inf,0,0"]
        )
        assert result.exit_code == 1
        assert "not finite" in result.output

    def test_non_finite_text_output(self, runner):
        result = runner.invoke(cli, ["distance", "cartesian:inf,0,0", "cartesian:0,0,0"])
        assert result.exit_code == 0
        assert result.output.strip() == "inf"


class TestConfigCommands:
    """Test configuration handling on the command line."""

    def test_init_and_show(self, runner, tmp_path):
        path = tmp_path / "coordkit.toml"

        result = runner.invoke(cli, ["config", "init", "-o", str(path)])
        assert result.exit_code == 0
        assert path.exists()

        result = runner.invoke(cli, ["-c", str(path), "config", "show"])
        assert result.exit_code == 0
        assert "equality_tolerance: 1e-05" in result.output

    def test_init_refuses_overwrite(self, runner, tmp_path):
        path = tmp_path / "coordkit.yaml"
        path.write_text("")

        result = runner.invoke(cli, ["config", "init", "--format", "yaml", "-o", str(path)])
        assert result.exit_code == 1

    def test_tolerance_from_config(self, runner, tmp_path):
        path = tmp_path / "loose.yaml"
        path.write_text("geometry:\n  equality_tolerance: 0.5\n")

        result = runner.invoke(cli, ["-c", str(path), "equal", "cartesian:0,0,0", "cartesian:0.1,0,0"])
        assert result.exit_code == 0

    def test_json_format_from_config(self, runner, tmp_path):
        path = tmp_path / "json.toml"
        path.write_text('[output]\nformat = "json"\n')

        result = runner.invoke(cli, ["-c", str(path), "distance", "cartesian:0,0,0", "cartesian:3,4,0"])
        assert json.loads(result.output) == {"distance": 5.0}

    def test_invalid_config(self, runner, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[geometry]\nequality_tolerance = -1\n")

        result = runner.invoke(cli, ["config", "validate", str(path)])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestInfo:
    """Test informational commands."""

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert __version__ in result.output

    def test_info(self, runner):
        result = runner.invoke(cli, ["info"])
        assert result.exit_code == 0
        assert f"coordkit Version: {__version__}" in result.output
        assert "Equality tolerance: 1e-05" in result.output


class TestLogging:
    """Test the console logging setup shared by all commands."""

    def test_later_call_updates_level(self):
        setup_logging("WARNING")
        logger = setup_logging("DEBUG")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.DEBUG

    def test_handler_follows_current_stderr(self, monkeypatch):
        setup_logging("WARNING")
        replacement = io.StringIO()
        monkeypatch.setattr(sys, "stderr", replacement)

        logger = setup_logging("INFO")
        logger.info("routed")

        assert logger.handlers[0].stream is replacement
        assert "routed" in replacement.getvalue()

        monkeypatch.undo()
        setup_logging("WARNING")
