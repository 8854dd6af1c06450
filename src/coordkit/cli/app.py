"""
coordkit Command Line Interface.

Main entry point for the coordkit CLI application.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from coordkit import __version__
from coordkit.cli.utils import (
    COORDINATE,
    format_coordinate,
    format_value,
    load_config,
    setup_logging,
)
from coordkit.config import Config, OutputFormat
from coordkit.core.geometry import (
    BaseCoordinate,
    CartesianCoordinate,
    CoordinateError,
    operations,
)

logger = logging.getLogger(__name__)


def _config_for(ctx: click.Context, as_json: bool) -> Config:
    """Return the invocation config, switched to JSON output if requested."""
    config: Config = ctx.obj["config"]
    if as_json:
        output = config.output.model_copy(update={"format": OutputFormat.JSON})
        config = config.model_copy(update={"output": output})
    return config


json_option = click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the result as JSON"
)


# Create main CLI group
@click.group()
@click.version_option(version=__version__, prog_name="coordkit")
@click.option(
    "-v", "--verbose",
    count=True,
    help="Increase verbosity (use -vv for debug output)"
)
@click.option(
    "-q", "--quiet",
    is_flag=True,
    help="Suppress non-error output"
)
@click.option(
    "-c", "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Configuration file (.toml, .yaml or .yml)"
)
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: bool, config_file: Optional[str]) -> None:
    """
    coordkit: Cartesian and spherical coordinates.

    Convert points between representations and measure the distance
    between them.

    \b
    Coordinates are written as:
      cartesian:x,y,z
      spheric:phi,theta,r   (radians)

    Use 'coordkit COMMAND --help' for command-specific help.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Setup logging based on verbosity
    log_level = "ERROR" if quiet else "DEBUG" if verbose > 1 else "INFO" if verbose else "WARNING"
    setup_logging(log_level)

    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config"] = load_config(config_file)

    if config_file:
        logger.info("Loaded configuration from %s", config_file)


@cli.command()
def info() -> None:
    """Show package and numeric settings."""
    import platform

    import numpy

    click.echo("\ncoordkit Information")
    click.echo("=" * 40)

    click.echo(f"coordkit Version: {__version__}")
    click.echo(f"Python Version: {platform.python_version()}")
    click.echo(f"NumPy Version: {numpy.__version__}")

    click.echo("\nDefaults:")
    click.echo(f"  Equality tolerance: {operations.EQUALITY_TOLERANCE:g}")
    click.echo(f"  acos domain epsilon: {operations.DOMAIN_EPSILON:g}")


@cli.command()
@click.argument("coordinate", type=COORDINATE)
@click.option(
    "--to",
    "target",
    type=click.Choice(["cartesian", "spheric"]),
    default=None,
    help="Target system (defaults to the other system)"
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on the origin instead of mapping it to phi = theta = 0"
)
@json_option
@click.pass_context
def convert(
    ctx: click.Context,
    coordinate: BaseCoordinate,
    target: Optional[str],
    strict: bool,
    as_json: bool,
) -> None:
    """Convert COORDINATE to another coordinate system."""
    config = _config_for(ctx, as_json)

    if target is None:
        target = "spheric" if isinstance(coordinate, CartesianCoordinate) else "cartesian"
    strict = strict or config.geometry.strict_degenerate

    try:
        if target == "cartesian":
            result = coordinate.as_cartesian()
        elif isinstance(coordinate, CartesianCoordinate):
            result = coordinate.as_spherical(strict=strict)
        else:
            result = coordinate.as_spherical()
    except CoordinateError as e:
        raise click.ClickException(str(e)) from e

    logger.debug("Converted %r to %r", coordinate, result)
    click.echo(format_coordinate(result, config))


@cli.command()
@click.argument("first", type=COORDINATE)
@click.argument("second", type=COORDINATE)
@json_option
@click.pass_context
def distance(ctx: click.Context, first: BaseCoordinate, second: BaseCoordinate, as_json: bool) -> None:
    """Print the Euclidean distance between FIRST and SECOND."""
    config = _config_for(ctx, as_json)
    click.echo(format_value("distance", first.cartesian_distance(second), config))


@cli.command()
@click.argument("first", type=COORDINATE)
@click.argument("second", type=COORDINATE)
@json_option
@click.pass_context
def angle(ctx: click.Context, first: BaseCoordinate, second: BaseCoordinate, as_json: bool) -> None:
    """Print the central angle between FIRST and SECOND in radians."""
    config = _config_for(ctx, as_json)

    try:
        value = operations.central_angle(first, second, epsilon=config.geometry.domain_epsilon)
    except CoordinateError as e:
        raise click.ClickException(str(e)) from e

    click.echo(format_value("central_angle", value, config))


@cli.command()
@click.argument("first", type=COORDINATE)
@click.argument("second", type=COORDINATE)
@json_option
@click.pass_context
def equal(ctx: click.Context, first: BaseCoordinate, second: BaseCoordinate, as_json: bool) -> None:
    """
    Check whether FIRST equals SECOND.

    Exits with status 0 when equal and 1 otherwise. A spheric FIRST is
    compared field by field; any other FIRST is compared within the
    configured tolerance.
    """
    config = _config_for(ctx, as_json)

    result = first.is_equal(second, tolerance=config.geometry.equality_tolerance)

    click.echo(format_value("equal", result, config))
    ctx.exit(0 if result else 1)


@cli.group()
def config() -> None:
    """Manage configuration settings."""
    pass


@config.command("init")
@click.option(
    "--format",
    type=click.Choice(["toml", "yaml"]),
    default="toml",
    help="Configuration format"
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path"
)
def config_init(format: str, output: Optional[str]) -> None:
    """Write a configuration file with default settings."""
    if output is None:
        output = f"coordkit.{format}"

    output_path = Path(output)
    if output_path.exists():
        raise click.ClickException(f"File already exists: {output_path}")

    defaults = Config()
    if format == "toml":
        defaults.to_toml(output_path)
    else:
        defaults.to_yaml(output_path)

    click.echo(f"Created configuration file: {output_path}")


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration."""
    current: Config = ctx.obj["config"]

    click.echo("\nCurrent Configuration:")
    click.echo("=" * 40)

    # Show as YAML-like format
    def show_dict(d, indent=0):
        for key, value in d.items():
            prefix = "  " * indent
            if isinstance(value, dict):
                click.echo(f"{prefix}{key}:")
                show_dict(value, indent + 1)
            else:
                click.echo(f"{prefix}{key}: {value}")

    show_dict(current.model_dump(mode="json"))


@config.command("validate")
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
def config_validate(config_file: str) -> None:
    """Validate a configuration file."""
    load_config(config_file)
    click.echo(f"Configuration is valid: {config_file}")


def main() -> None:
    """Main entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
