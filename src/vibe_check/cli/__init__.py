"""CLI entry point: registers the main command."""

import typer

app = typer.Typer(
    name="vibe-check",
    help="vibe-check - summarize how your recent work was spread across repositories",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .main import main as _main_callback  # noqa: F401, E402
