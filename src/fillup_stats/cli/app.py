"""Command-line interface for fillup-stats."""

import logging
import sys
from pathlib import Path

import click
import yaml
from rich.console import Console

from fillup_stats.cli import elements
from fillup_stats.config import (
    ConfigError,
    create_default_config,
    get_config_path,
    load_settings,
)
from fillup_stats.models import LocaleConventions, Settings, UnitSystem
from fillup_stats.records import TripDataError, load_trip_data
from fillup_stats.report.generator import RenderContext, StatisticsMonthTable
from fillup_stats.utils.env import get_cache_dir
from fillup_stats.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _get_log_file() -> Path:
    """Get the path to the log file."""
    return get_cache_dir() / "fillup-stats.log"


def _setup_logging() -> None:
    """Setup logging to user's cache directory.

    Truncates log file on each run to keep it manageable.
    """
    setup_logging(_get_log_file())


def _parse_locale(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> LocaleConventions | None:
    """Parse a --locale value into locale conventions.

    Raises:
        click.BadParameter: If the locale has no built-in conventions
    """
    if value is None:
        return None
    try:
        return LocaleConventions.for_locale(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def _apply_overrides(
    settings: Settings,
    units: str | None,
    locale: LocaleConventions | None,
) -> Settings:
    """Apply command line overrides on top of loaded settings."""
    update: dict[str, object] = {}
    if units:
        update["units"] = UnitSystem(units)
    if locale:
        update["locale"] = locale
    return settings.model_copy(update=update) if update else settings


def _write_output(path: Path, content: str, force: bool) -> None:
    """Write rendered output to a file.

    Raises:
        FileExistsError: If the file exists and force is False
    """
    if path.exists() and not force:
        raise FileExistsError(
            f"Output file already exists: {path}. Use --force to overwrite."
        )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@click.group()
@click.version_option(package_name="fillup-stats")
def cli() -> None:
    """FillUp Statistics - monthly fuel economy and cost tables."""


@cli.command()
@click.argument(
    "trip_file", type=click.Path(dir_okay=False, path_type=Path)
)
@click.option("--title", help="Table title (default: title from the trip file)")
@click.option(
    "--units",
    type=click.Choice([system.value for system in UnitSystem], case_sensitive=False),
    help="Override unit system for labels",
)
@click.option(
    "--locale",
    callback=_parse_locale,
    help="Override locale for numbers and currency (e.g. en_US, de_DE)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["html", "table"], case_sensitive=False),
    default="html",
    help="Output format (default: html)",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write HTML to a file instead of stdout (html format only)",
)
@click.option("--force", is_flag=True, help="Overwrite an existing output file")
def render(  # noqa: PLR0913  # CLI commands need many options for flexibility
    trip_file: Path,
    title: str | None,
    units: str | None,
    locale: LocaleConventions | None,
    output_format: str,
    output: Path | None,
    force: bool,
) -> None:
    """Render the statistics table for a trip data file."""
    if output is not None and output_format.lower() == "table":
        raise click.UsageError("--output can only be used with --format html")

    console = Console()

    try:
        settings = _apply_overrides(load_settings(), units, locale)
        trip = load_trip_data(trip_file)
        table_title = title or trip.title or trip_file.stem

        table = StatisticsMonthTable(
            trip.records,
            trip.summary,
            table_title,
            RenderContext.from_settings(settings),
        )

        if output_format.lower() == "table":
            elements.display_statistics_table(console, table.report)
            return

        if output is None:
            click.echo(table.html, nl=False)
            return

        _write_output(output, table.html, force)
        click.secho(f"✓ Statistics table written to {output}", fg="green")

    except ConfigError as e:
        click.secho(f"Configuration error: {e}", fg="red", err=True)
        click.echo("\nRun 'fillup-stats config --init' to reset the configuration.")
        sys.exit(1)
    except TripDataError as e:
        click.secho(f"Trip data error: {e}", fg="red", err=True)
        sys.exit(1)
    except FileExistsError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.option("--path", is_flag=True, help="Show path to configuration file")
@click.option("--show", is_flag=True, help="Display current configuration")
@click.option("--init", is_flag=True, help="Create a configuration file with defaults")
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file")
def config(path: bool, show: bool, init: bool, force: bool) -> None:
    """Show or create fillup-stats settings."""
    config_path = get_config_path()

    if path:
        click.echo(str(config_path))
        return

    try:
        if init:
            created = create_default_config(force=force)
            click.secho(f"✓ Configuration saved to {created}", fg="green")
            return

        settings = load_settings()
        if show:
            yaml_str = yaml.safe_dump(
                settings.model_dump(mode="json"),
                default_flow_style=False,
                sort_keys=False,
                indent=2,
                allow_unicode=True,
            )
            click.echo(yaml_str)
            return

        click.secho("✓ Configuration is valid", fg="green")
        click.echo(f"Configuration file: {config_path}")
    except ConfigError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI.

    Sets up logging and provides a generic catch-all error handler
    for unexpected errors.
    """
    _setup_logging()
    try:
        cli()
    except Exception:
        # Full traceback goes to the log file only
        logger.exception("Fatal error occurred")

        click.secho(
            "\nFatal error occurred.",
            fg="red",
            err=True,
        )
        click.secho(
            f"Check logs for details: {_get_log_file()}",
            fg="yellow",
            err=True,
        )

        sys.exit(1)


if __name__ == "__main__":
    main()
