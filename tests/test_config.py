"""
Unit tests for configuration loading and validation.
"""

import pytest
from pydantic import ValidationError

from coordkit.config import Config, GeometryConfig, OutputConfig, OutputFormat


class TestDefaults:
    """Test default configuration values."""

    def test_geometry_defaults(self):
        config = Config()
        assert config.geometry.equality_tolerance == 1e-5
        assert config.geometry.domain_epsilon == 1e-9
        assert config.geometry.strict_degenerate is False

    def test_output_defaults(self):
        config = Config()
        assert config.output.precision == 6
        assert config.output.format == OutputFormat.TEXT


class TestValidation:
    """Test field validation."""

    def test_tolerance_must_be_positive(self):
        with pytest.raises(ValidationError):
            GeometryConfig(equality_tolerance=0.0)

    def test_precision_bounds(self):
        with pytest.raises(ValidationError):
            OutputConfig(precision=18)

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValidationError):
            Config(geometry={"tolerance": 1.0})

    def test_format_case_insensitive(self):
        assert OutputConfig(format="JSON").format == OutputFormat.JSON


class TestFiles:
    """Test loading and saving configuration files."""

    def test_toml_round_trip(self, tmp_path):
        path = tmp_path / "coordkit.toml"
        config = Config(geometry=GeometryConfig(equality_tolerance=0.01, strict_degenerate=True))
        config.to_toml(path)

        assert Config.from_file(path) == config

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "coordkit.yaml"
        path.write_text("output:\n  precision: 3\n  format: json\n")

        config = Config.from_file(path)
        assert config.output.precision == 3
        assert config.output.format == OutputFormat.JSON
        assert config.geometry == GeometryConfig()

    def test_empty_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert Config.from_yaml(path) == Config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.from_toml(tmp_path / "missing.toml")

    def test_unsupported_suffix(self, tmp_path):
        with pytest.raises(ValueError, match="Unsupported config format"):
            Config.from_file(tmp_path / "coordkit.ini")

    def test_yaml_round_trip(self, tmp_path):
        path = tmp_path / "coordkit.yaml"
        config = Config(output=OutputConfig(precision=2, format="json"))
        config.to_yaml(path)

        assert "format: json" in path.read_text()
        assert Config.from_file(path) == config

    def test_yaml_list_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- geometry\n- output\n")

        with pytest.raises(ValueError, match="expected a mapping"):
            Config.from_yaml(path)

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.from_yaml(tmp_path)
