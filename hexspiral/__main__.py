"""Command line entry point for the spiral divisibility search."""

from __future__ import annotations

import sys

from rich.console import Console

from .config import SearchConfig
from .frames import matches_by_ring
from .report import ConsoleReporter, render_ring_breakdown, render_summary
from .search import run_search


def main() -> None:
    """Search for the configured number of matches and print the last one."""

    config = SearchConfig()
    console = Console()
    result, lookup = run_search(config, on_ring=ConsoleReporter(console))
    console.print(render_summary(result, lookup))
    console.print(render_ring_breakdown(matches_by_ring(result)))
    if config.pause and sys.stdin.isatty():
        console.input("Hit Enter to exit.")


if __name__ == "__main__":  # pragma: no cover - module entry point
    main()
