"""Statistics dashboard for music catalog insights."""

from typing import List, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .domain.catalog.repositories import CatalogRepository
from .domain.catalog.services import CatalogStatistics, CatalogStatisticsService


class CatalogDashboard:
    """Renders catalog statistics using Rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show(self, repository: CatalogRepository, top_n: int = 5) -> CatalogStatistics:
        """Compute and render statistics for a repository."""
        stats = CatalogStatisticsService(repository).get_statistics(top_n=top_n)
        self.render(stats)
        return stats

    def render(self, stats: CatalogStatistics) -> None:
        """Render a statistics snapshot."""
        self.console.print(Panel.fit("[bold cyan]Music Catalog Statistics[/bold cyan]"))

        summary = Table(title="Overview")
        summary.add_column("Metric", style="cyan")
        summary.add_column("Value", justify="right")
        summary.add_row("Users", str(stats.total_users))
        summary.add_row("Artists", str(stats.total_artists))
        summary.add_row("Albums", str(stats.total_albums))
        summary.add_row("Songs", str(stats.total_songs))
        summary.add_row("Playlists", str(stats.total_playlists))
        summary.add_row("Song likes", str(stats.total_song_likes))
        summary.add_row("Most popular artist", stats.most_popular_artist or "-")
        summary.add_row("Most popular song", stats.most_popular_song or "-")
        self.console.print(summary)

        self._render_ranking("Top Artists", "Artist", stats.top_artists, "No artists yet")
        self._render_ranking("Top Songs", "Song", stats.top_songs, "No songs yet")

    def _render_ranking(self, title: str, label: str, entries: List[Tuple[str, int]], empty: str) -> None:
        if not entries:
            self.console.print(f"[yellow]{empty}[/yellow]")
            return

        table = Table(title=title)
        table.add_column("#", justify="right", style="dim")
        table.add_column(label, style="green")
        table.add_column("Likes", justify="right")
        for rank, (name, likes) in enumerate(entries, 1):
            table.add_row(str(rank), name, str(likes))
        self.console.print(table)
