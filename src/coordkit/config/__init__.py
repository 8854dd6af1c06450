"""
Configuration management for coordkit.

This module provides Pydantic-based configuration schemas with support
for loading from TOML and YAML files.
"""

from coordkit.config.schema import (
    Config,
    GeometryConfig,
    OutputConfig,
    OutputFormat,
)

__all__ = [
    "Config",
    "GeometryConfig",
    "OutputConfig",
    "OutputFormat",
]
