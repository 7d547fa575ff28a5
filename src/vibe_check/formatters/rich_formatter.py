"""Rich terminal formatter for vibe-check."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..models import CommitDistribution, WorkPatternSummary
from .base import BaseFormatter

DISTRIBUTION_LABELS = {
    CommitDistribution.FOCUSED: "[green]focused[/green] - all work in one repository",
    CommitDistribution.CLUSTERED: "[yellow]clustered[/yellow] - concentrated in a few repositories",
    CommitDistribution.SPREAD: "[cyan]spread[/cyan] - evenly across repositories",
    CommitDistribution.SPARSE: "[dim]sparse[/dim] - no commits in this window",
}


class RichFormatter(BaseFormatter):
    """Summary panel plus language and repository tables."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, summary: WorkPatternSummary) -> None:
        start = summary.time_range.start.strftime("%Y-%m-%d")
        end = summary.time_range.end.strftime("%Y-%m-%d")

        self.console.print(
            Panel(
                f"[bold]{summary.total_repos}[/bold] repositories, "
                f"[green]{summary.active_repos} active[/green], "
                f"[dim]{summary.cold_repos} cold[/dim]\n"
                f"[bold]{summary.total_commits}[/bold] commits\n"
                f"{DISTRIBUTION_LABELS[summary.commit_distribution]}",
                title=f"[bold cyan]Work patterns {start} .. {end}[/bold cyan]",
                expand=False,
            )
        )

        if summary.top_languages:
            table = Table(title="Top languages", show_header=True, header_style="bold")
            table.add_column("Language")
            table.add_column("Share", justify="right")
            for stat in summary.top_languages:
                table.add_row(stat.language, f"{stat.percentage}%")
            self.console.print(table)

        if summary.most_active_repos:
            table = Table(title="Most active", show_header=True, header_style="bold")
            table.add_column("#", justify="right")
            table.add_column("Repository")
            for index, name in enumerate(summary.most_active_repos, start=1):
                table.add_row(str(index), name)
            self.console.print(table)

    def format(self, summary: WorkPatternSummary) -> str:
        with self.console.capture() as capture:
            self.render(summary)
        return capture.get()
