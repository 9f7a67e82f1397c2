"""Rich-click command line interface for widget exports.

Purpose
-------
Let operators export widgets from a JSON file, write the sample widgets, and
inspect an export as a table.

Contents
--------
* :func:`cli` - command group with global options.
* ``info``, ``export``, ``sample``, ``show`` subcommands.
* :func:`main` - entry point wrapping :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer. Reads configuration via :mod:`lib_widget_export.config`,
installs a Rich logging handler, and delegates to the public façade.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource
from rich.console import Console
from rich.logging import RichHandler

from . import __init__conf__
from . import config as config_module
from .adapters import RichTableAdapter, read_rows
from .domain import ExportIOError
from .lib_widget_export import (
    export_widgets,
    load_widgets_json,
    render_widgets,
    sample_widgets,
    summary_info,
)

CLICK_CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])
_LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LOG_HANDLER: logging.Handler | None = None


def _configure_logging(level: int) -> None:
    """Attach a single Rich handler to the package logger.

    Propagation is switched off so a root handler configured by a host does
    not print every record a second time.
    """

    global _LOG_HANDLER
    package_logger = logging.getLogger(__init__conf__.name)
    if _LOG_HANDLER is not None:
        package_logger.removeHandler(_LOG_HANDLER)
    _LOG_HANDLER = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    package_logger.addHandler(_LOG_HANDLER)
    package_logger.propagate = False
    package_logger.setLevel(level)


def _settings(ctx: click.Context) -> config_module.ExportSettings:
    settings = (ctx.obj or {}).get("settings")
    return settings if settings is not None else config_module.load_settings()


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env (also enabled by {config_module.DOTENV_ENV_VAR}=1).",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVEL_CHOICES, case_sensitive=False),
    default=None,
    help=f"Logging threshold (defaults to {config_module.LOG_LEVEL_ENV_VAR} or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool, log_level: str | None) -> None:
    """Root command storing global flags and printing the banner when bare."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    try:
        settings = config_module.load_settings(log_level=log_level)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    _configure_logging(settings.log_level_number)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("export", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Destination CSV file (defaults to LIB_WIDGET_EXPORT_PATH or widgets.csv).",
)
@click.option("--dry-run", is_flag=True, default=False, help="Print the CSV instead of writing it.")
@click.pass_context
def cli_export(ctx: click.Context, source, output: Path | None, dry_run: bool) -> None:
    """Export widgets from a JSON array file (``-`` reads stdin)."""

    try:
        widgets = load_widgets_json(source.read())
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="SOURCE") from exc

    if dry_run:
        click.echo(render_widgets(widgets), nl=False)
        return

    destination = output if output is not None else _settings(ctx).default_path
    try:
        summary = export_widgets(widgets, destination)
    except ExportIOError as exc:
        raise click.FileError(str(exc.path), hint=exc.reason) from exc
    click.echo(f"Exported {summary.record_count} widget(s) to {summary.path}")


@cli.command("sample", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Destination CSV file (defaults to LIB_WIDGET_EXPORT_PATH or widgets.csv).",
)
@click.pass_context
def cli_sample(ctx: click.Context, output: Path | None) -> None:
    """Export the two demonstration widgets."""

    destination = output if output is not None else _settings(ctx).default_path
    try:
        summary = export_widgets(sample_widgets(), destination)
    except ExportIOError as exc:
        raise click.FileError(str(exc.path), hint=exc.reason) from exc
    click.echo(f"Exported {summary.record_count} widget(s) to {summary.path}")


@cli.command("show", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--no-color", is_flag=True, default=False, help="Disable colour in the table.")
def cli_show(path: Path, no_color: bool) -> None:
    """Render an exported CSV file as a table."""

    try:
        rows = read_rows(path)
    except ExportIOError as exc:
        raise click.FileError(str(exc.path), hint=exc.reason) from exc
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    RichTableAdapter(no_color=no_color).show(rows, title=str(path))


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    so embedding callers keep their own settings.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
