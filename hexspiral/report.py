"""Console rendering for search progress and results."""

from __future__ import annotations

import polars as pl
from rich import box
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from .neighbors import DISPLAY_ORDER
from .search import SearchResult
from .tiles import Tile, TileLookup


def progress_line(ring: int, start_index: int, found: int) -> str:
    return f"Checking Ring {ring} (start index {start_index}), found {found} tiles so far."


class ConsoleReporter:
    """Ring hook printing one progress line per ring entered."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.lines = 0

    def __call__(self, ring: int, start_index: int, found: int) -> None:
        self.console.print(progress_line(ring, start_index, found), highlight=False)
        self.lines += 1


def summary_line(result: SearchResult) -> str:
    return f"Found {len(result.matches)} matches in {result.elapsed:.3f}s"


def _neighbor_table(lookup: TileLookup, tile: Tile) -> Table:
    table = Table(title=f"Neighbors of {tile.index}", expand=True, box=box.SIMPLE_HEAVY)
    table.add_column("Dir", style="bold")
    table.add_column("Index", justify="right")
    table.add_column("Ring", justify="right")
    table.add_column("Position")
    for d in DISPLAY_ORDER:
        n = lookup.neighbor(tile, d)
        if n is None:
            table.add_row(d.label, "-", "-", str(tile.cube.neighbor(d)))
        else:
            table.add_row(d.label, str(n.index), str(n.ring), str(n.cube))
    return table


def render_summary(result: SearchResult, lookup: TileLookup) -> RenderableType:
    """Summary panel: totals, the last match and its six neighbors."""

    if not result.matches:
        return Panel(summary_line(result), title="Search Result", border_style="red")

    stats = Table.grid(padding=(0, 1), expand=True)
    stats.add_row("[bold]Matches[/bold]", str(len(result.matches)))
    stats.add_row("[bold]Checked[/bold]", str(result.checked))
    stats.add_row("[bold]Rings[/bold]", str(result.rings))
    stats.add_row("[bold]Elapsed[/bold]", f"{result.elapsed:.3f}s")
    stats.add_row("[bold]Last match[/bold]", str(result.last))
    body = Group(summary_line(result), stats, _neighbor_table(lookup, result.last))
    return Panel(body, title="Search Result", border_style="cyan")


def render_ring_breakdown(frame: pl.DataFrame, *, limit: int = 10) -> Table:
    """Table of the rings holding the most matches."""

    table = Table(title="Matches by Ring", expand=True, box=box.SIMPLE_HEAVY)
    table.add_column("Ring", justify="right")
    table.add_column("Matches", justify="right")
    table.add_column("First", justify="right")
    table.add_column("Last", justify="right")
    top = frame.sort(["matches", "ring"], descending=[True, False]).head(limit)
    for row in top.iter_rows(named=True):
        table.add_row(
            str(row["ring"]),
            str(row["matches"]),
            str(row["first_index"]),
            str(row["last_index"]),
        )
    return table
