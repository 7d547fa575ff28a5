"""Main command: scan, measure and summarize recent work."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import InvalidPathError, VibeCheckError
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from ..pipeline import run_pipeline
from . import app
from ._common import console, err_console, resolve_config


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    ctx: typer.Context,
    root: Optional[Path] = typer.Option(
        None,
        "-r",
        "--root",
        help="Directory to scan for git repositories (default: $VIBE_ROOT or ~/code)",
    ),
    days: Optional[int] = typer.Option(
        None,
        "-d",
        "--days",
        help="Number of days to analyze (default: 7)",
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Print key=value lines instead of the summary tables",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers (default: auto-detect)",
        min=1,
        max=64,
        hidden=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Hide warnings about unreadable directories and repositories",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Append log records to this file as well",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Summarize commit activity and languages across every repository under a root.

    [bold cyan]Examples:[/bold cyan]

      vibe-check

      vibe-check --days 30 --root ~/src

      vibe-check --raw | grep commit_distribution
    """
    if ctx.invoked_subcommand is not None:
        return

    from .. import __version__

    if version:
        console.print(f"[bold cyan]vibe-check[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    if raw and json_output:
        err_console.print("[red]Error:[/red] --raw and --json cannot be combined")
        raise typer.Exit(1)

    # Not configured until the settings are known
    logger = get_logger()

    try:
        settings = resolve_config(
            config=config,
            root=root,
            days=days,
            workers=workers,
            verbose=verbose,
            quiet=quiet,
            log_file=log_file,
        )
        try:
            logger = setup_logging(verbosity=settings.verbosity, log_file=settings.log_file)
        except OSError as e:
            raise InvalidPathError(Path(settings.log_file), f"cannot be opened: {e}")

        result = run_pipeline(settings.root, settings.days, config=settings)

        if raw:
            formatter = get_formatter("raw")
        elif json_output:
            formatter = get_formatter("json")
        else:
            formatter = get_formatter("rich")
            if result.summary.total_repos == 0:
                err_console.print("[yellow]No git repositories found.[/yellow]")

        formatter.render(result.summary)

    except VibeCheckError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)
