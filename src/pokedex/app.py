"""Typer application and CLI entry point for pokedex.

Running ``pokedex`` with no sub-command starts the interactive REPL.  The
root callback resolves configuration (flags > environment > config file >
defaults) and installs the global :class:`~pokedex.output.OutputManager`
before any sub-command runs.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``.  :class:`~pokedex.exceptions.PokedexError` exits with
its own exit code; anything else writes a crash log under the data
directory.
"""

from __future__ import annotations

import asyncio
import math
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer

from pokedex import __version__
from pokedex.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="pokedex",
    help="Explore the PokeAPI from an interactive Pokedex.",
    add_completion=False,
    rich_markup_mode="rich",
)

config_app = typer.Typer(no_args_is_help=True)
app.add_typer(config_app, name="config", help="Configuration management.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pokedex {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output."),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show cache hits and misses."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="PokeAPI root URL."
    ),
    cache_ttl: Optional[float] = typer.Option(
        None, "--cache-ttl", help="Cache TTL in seconds."
    ),
) -> None:
    """Initialise output and configuration, then start the REPL if no sub-command was given."""
    from pokedex.config import resolve_config
    from pokedex.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))

    ctx.ensure_object(dict)
    ctx.obj["config"] = resolve_config(cli_base_url=base_url, cli_cache_ttl=cache_ttl)

    if ctx.invoked_subcommand is None:
        _run_repl(ctx.obj["config"])


@app.command("repl")
def repl_command(ctx: typer.Context) -> None:
    """Start the interactive Pokedex."""
    _run_repl(ctx.obj["config"])


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Print the resolved configuration."""
    from pokedex.output import format_response

    format_response(ctx.obj["config"].model_dump(mode="json"))


@config_app.command("set-ttl")
def config_set_ttl(
    seconds: float = typer.Argument(..., help="New cache TTL in seconds."),
) -> None:
    """Persist a new cache TTL to the config file."""
    from pokedex.config import load_config, save_config
    from pokedex.exceptions import InvalidUsageError
    from pokedex.models import CacheConfig
    from pokedex.output import success

    if not math.isfinite(seconds) or seconds <= 0:
        raise InvalidUsageError(f"TTL must be a positive number of seconds, got {seconds}")

    config = load_config()
    config.cache = CacheConfig(ttl_seconds=seconds)
    path = save_config(config)
    success(f"Cache TTL set to {seconds:g}s in {path}")


def _run_repl(config: Any) -> None:
    from pokedex.repl import start_repl

    try:
        asyncio.run(start_repl(config))
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        raise typer.Exit(code=130)


def _write_crash_log(exc: Exception) -> str:
    """Write the current traceback to the data directory and return its path."""
    from pokedex.config import get_logs_dir

    logs_dir = get_logs_dir()
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``pokedex`` console script.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from pokedex.exceptions import PokedexError
        from pokedex.output import error

        if isinstance(exc, PokedexError):
            error(str(exc))
            sys.exit(exc.exit_code)
        log_path = _write_crash_log(exc)
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
