"""seesharp CLI — top-level command group."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from seesharp import __version__
from seesharp.config import load_config, validate_config
from seesharp.loader import load
from seesharp.parsing.xunit_xml import DecodeError
from seesharp.reporters.json_reporter import JSONReporter
from seesharp.reporters.terminal import CLIReporter, reporter

logger = logging.getLogger(__name__)
console = Console()

_BANNER = r"""
 _____           _____ _
/  ___|         /  ___| |
\ `--.  ___  ___\ `--.| |__   __ _ _ __ _ __
 `--. \/ _ \/ _ \`--. \ '_ \ / _` | '__| '_ \
/\__/ /  __/  __/\__/ / | | | (_| | |  | |_) |
\____/ \___|\___\____/|_| |_|\__,_|_|  | .__/
                                       | |
                                       |_|"""


def _configure_logging(*, verbose: bool) -> None:
    """Send seesharp's log records to stderr through rich."""
    package_logger = logging.getLogger("seesharp")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.version_option(version=__version__, prog_name="seesharp")
@click.pass_context
def cli(ctx: click.Context, *, verbose: bool) -> None:
    """seesharp — readable reports from .NET xUnit test results."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose=verbose)


@cli.command()
@click.argument(
    "results_file",
    required=False,
    type=click.Path(dir_okay=False, resolve_path=True),
)
@click.option(
    "--path",
    default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Project root directory holding `.seesharp.yml`.",
)
@click.option(
    "--json-output",
    "as_json",
    is_flag=True,
    help="Output as JSON instead of the terminal report.",
)
def show(results_file: str | None, path: str, *, as_json: bool) -> None:
    """Show the tests stored in an xUnit v2+ XML results file.

    Example:
      seesharp show TestResults/results.xml
      seesharp show --json-output
    """
    try:
        config = load_config(path)
    except Exception as e:
        reporter.print_error(f"Failed to load configuration: {e}")
        raise click.Abort from e

    source = Path(results_file) if results_file else Path(path) / config.report.input
    if not source.is_file():
        reporter.print_error(f"Results file not found: {source}")
        raise click.Abort

    try:
        with source.open("rb") as stream:
            test_run = load(stream, keep_words=config.naming.keep_words)
    except DecodeError as e:
        reporter.print_error(f"Failed to read {source}: {e}")
        raise click.Abort from e

    logger.debug("Loaded %d assemblies from %s", len(test_run.assemblies), source)

    if as_json or config.report.format == "json":
        click.echo(JSONReporter().generate_string(test_run))
        return

    console.print(_BANNER, markup=False, highlight=False)
    console.print(f"  Version: {__version__}")
    console.print()

    CLIReporter(
        fast_threshold=config.report.fast_threshold,
        slow_threshold=config.report.slow_threshold,
    ).print_test_run(test_run, str(source))


@cli.group("config")
def config_group() -> None:
    """Manage `.seesharp.yml` configuration values."""


@config_group.command("validate")
@click.option(
    "--path",
    default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Project root directory.",
)
def config_validate(path: str) -> None:
    """Validate `.seesharp.yml` configuration.

    Example:
      seesharp config validate
    """
    try:
        config = load_config(path)
    except Exception as e:
        reporter.print_error(f"Failed to load configuration: {e}")
        raise click.Abort from e

    errors = validate_config(config)

    if not errors:
        reporter.print_success("Configuration is valid!")
        return

    reporter.print_error(f"Found {len(errors)} configuration error(s):")
    console.print()

    for idx, error in enumerate(errors, start=1):
        console.print(f"  {idx}. [red]{escape(error)}[/red]")

    console.print()
    raise click.Abort
