"""
Configuration for coordkit.

Numeric tolerances and output settings as Pydantic models, readable from
and writable to TOML or YAML files.
"""

import sys
from enum import Enum
from pathlib import Path
from typing import Any, Union

import tomli_w
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from coordkit.core.geometry.operations import DOMAIN_EPSILON, EQUALITY_TOLERANCE

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

__all__ = [
    "GeometryConfig",
    "OutputConfig",
    "Config",
    "OutputFormat",
]


class OutputFormat(str, Enum):
    """Output formats for command results."""

    TEXT = "text"
    JSON = "json"


class GeometryConfig(BaseModel):
    """Configuration for coordinate comparisons and conversions."""

    model_config = ConfigDict(extra="forbid")

    equality_tolerance: float = Field(
        default=EQUALITY_TOLERANCE,
        gt=0.0,
        description="Manhattan-distance threshold for tolerance-based equality",
    )
    domain_epsilon: float = Field(
        default=DOMAIN_EPSILON,
        ge=0.0,
        le=1e-3,
        description="Tolerated overshoot of acos arguments before raising",
    )
    strict_degenerate: bool = Field(
        default=False,
        description="Raise when converting the origin to spherical instead of using phi = theta = 0",
    )


class OutputConfig(BaseModel):
    """Configuration for result formatting."""

    model_config = ConfigDict(extra="forbid")

    precision: int = Field(
        default=6,
        ge=0,
        le=17,
        description="Decimal places in text output",
    )
    format: OutputFormat = Field(
        default=OutputFormat.TEXT,
        description="Result format (text or json)",
    )

    @field_validator("format", mode="before")
    @classmethod
    def validate_format(cls, v: Any) -> Any:
        """Accept format names case-insensitively."""
        return v.lower() if isinstance(v, str) else v


class Config(BaseModel):
    """
    Main configuration class for coordkit.

    Example:
        >>> config = Config.from_toml("coordkit.toml")
        >>> config = Config(geometry=GeometryConfig(strict_degenerate=True))
    """

    model_config = ConfigDict(extra="forbid")

    geometry: GeometryConfig = Field(
        default_factory=GeometryConfig,
        description="Geometry configuration",
    )
    output: OutputConfig = Field(
        default_factory=OutputConfig,
        description="Output configuration",
    )

    @classmethod
    def from_toml(cls, path: Union[str, Path]) -> "Config":
        """Read a TOML file; a missing file raises ``FileNotFoundError``."""
        path = _existing(path)
        with open(path, "rb") as f:
            return cls.model_validate(tomllib.load(f))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "Config":
        """
        Read a YAML file.

        An empty document yields the defaults. Any top level other than a
        mapping raises ``ValueError``.
        """
        path = _existing(path)
        with open(path, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"{path}: expected a mapping at the top level, got {type(data).__name__}"
            )
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Config":
        """Dispatch on the suffix: ``.toml``, ``.yaml`` or ``.yml``."""
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix == ".toml":
            return cls.from_toml(path)
        elif suffix in (".yaml", ".yml"):
            return cls.from_yaml(path)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    def to_toml(self, path: Union[str, Path]) -> None:
        with open(path, "wb") as f:
            tomli_w.dump(self.model_dump(mode="json"), f)

    def to_yaml(self, path: Union[str, Path]) -> None:
        with open(path, "w") as f:
            yaml.safe_dump(self.model_dump(mode="json"), f, sort_keys=False)


def _existing(path: Union[str, Path]) -> Path:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    return path
