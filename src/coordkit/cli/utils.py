"""
CLI utility functions.

Helper functions for the command-line interface.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

import click

from coordkit.config import Config, OutputFormat
from coordkit.core.geometry import (
    BaseCoordinate,
    CartesianCoordinate,
    CoordinateError,
    SphericCoordinate,
)

__all__ = [
    "setup_logging",
    "load_config",
    "parse_coordinate",
    "format_coordinate",
    "format_value",
    "CoordinateParamType",
    "COORDINATE",
]

# Accepted spellings of each coordinate system on the command line
_SYSTEMS: Dict[str, type] = {
    "cartesian": CartesianCoordinate,
    "c": CartesianCoordinate,
    "spheric": SphericCoordinate,
    "spherical": SphericCoordinate,
    "s": SphericCoordinate,
}

_console_handler: Optional[logging.Handler] = None


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Route the coordkit logger to stderr at the given level.

    Every call replaces the console handler from the previous call, so a
    later invocation in the same process picks up its own level and the
    current ``sys.stderr``.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)

    Returns:
        The ``coordkit`` logger
    """
    global _console_handler

    log_level = getattr(logging, level.upper())
    logger = logging.getLogger("coordkit")
    logger.setLevel(log_level)

    if _console_handler is not None:
        logger.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stderr)
    _console_handler.setLevel(log_level)
    _console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    ))
    logger.addHandler(_console_handler)

    return logger


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load configuration for a CLI invocation.

    Args:
        path: Optional configuration file; defaults apply when omitted

    Returns:
        Config instance

    Raises:
        click.ClickException: If the file cannot be read or is invalid
    """
    if path is None:
        return Config()

    try:
        return Config.from_file(path)
    except (OSError, ValueError) as e:
        # pydantic.ValidationError is a ValueError
        raise click.ClickException(f"Invalid configuration {path}: {e}") from e


def parse_coordinate(text: str) -> BaseCoordinate:
    """
    Parse a coordinate argument.

    Args:
        text: ``cartesian:x,y,z`` or ``spheric:phi,theta,r``

    Returns:
        CartesianCoordinate or SphericCoordinate

    Raises:
        ValueError: If the text is malformed or the values are out of range
    """
    system, sep, values = text.partition(":")
    if not sep:
        raise ValueError(
            f"Expected 'cartesian:x,y,z' or 'spheric:phi,theta,r', got {text!r}"
        )

    cls = _SYSTEMS.get(system.strip().lower())
    if cls is None:
        raise ValueError(f"Unknown coordinate system: {system!r}")

    parts = [part.strip() for part in values.split(",")]
    if len(parts) != 3:
        raise ValueError(f"Expected 3 comma-separated values, got {len(parts)}")

    try:
        numbers = [float(part) for part in parts]
    except ValueError:
        raise ValueError(f"Coordinate values must be numbers: {values!r}") from None

    return cls(*numbers)


def _dump_json(data: Dict[str, Any]) -> str:
    # NaN and inf have no JSON spelling
    try:
        return json.dumps(data, allow_nan=False)
    except ValueError:
        raise click.ClickException(
            f"Result is not finite and cannot be written as JSON: {data!r}"
        ) from None


def format_coordinate(
    coord: BaseCoordinate,
    config: Config,
) -> str:
    """Format a coordinate for output, in the same syntax it is parsed from."""
    if config.output.format == OutputFormat.JSON:
        return _dump_json(coord.to_dict())

    system = "cartesian" if isinstance(coord, CartesianCoordinate) else "spheric"
    precision = config.output.precision
    values = ",".join(f"{value:.{precision}f}" for value in coord.as_tuple())
    return f"{system}:{values}"


def format_value(name: str, value: Any, config: Config) -> str:
    """Format a scalar result for output."""
    if config.output.format == OutputFormat.JSON:
        return _dump_json({name: value})

    if isinstance(value, bool):
        return "true" if value else "false"
    return f"{value:.{config.output.precision}f}"


class CoordinateParamType(click.ParamType):
    """Click parameter type accepting ``system:a,b,c`` coordinates."""

    name = "coordinate"

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> BaseCoordinate:
        if isinstance(value, BaseCoordinate):
            return value

        try:
            return parse_coordinate(value)
        except (CoordinateError, ValueError) as e:
            self.fail(str(e), param, ctx)


COORDINATE = CoordinateParamType()
