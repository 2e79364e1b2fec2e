"""Sequential scan of the spiral for tiles dividing their neighbors' product."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

from .config import ExhaustionPolicy, SearchConfig
from .neighbors import SEARCH_ORDER
from .tiles import Tile, TileLookup, build_lookup

# Called as on_ring(ring, start_index, found_so_far) when the scan enters a ring.
RingHook = Callable[[int, int, int], None]


class PrefixExhaustedError(RuntimeError):
    """The scan reached the outer ring of a bounded map before the target."""

    def __init__(self, *, ring_bound: int, checked: int, found: int) -> None:
        super().__init__(
            f"ran off the generated prefix of {ring_bound} rings at index {checked} "
            f"with {found} matches"
        )
        self.ring_bound = ring_bound
        self.checked = checked
        self.found = found


@dataclass
class SearchResult:
    matches: list[Tile] = field(default_factory=list)
    checked: int = 0
    rings: int = 0
    elapsed: float = 0.0

    @property
    def last(self) -> Tile:
        if not self.matches:
            raise LookupError("search produced no matches")
        return self.matches[-1]


def neighbor_product(lookup: TileLookup, tile: Tile) -> int | None:
    """Product of the six neighbor indices, or ``None`` if one is not available."""

    product = 1
    for d in SEARCH_ORDER:
        n = lookup.neighbor(tile, d)
        if n is None:
            return None
        product *= n.index
    return product


def is_match(tile: Tile, product: int) -> bool:
    return product % tile.index == 0


class SpiralSearch:
    """Tests every tile from index 1 upward until ``target_count`` matches."""

    def __init__(
        self,
        lookup: TileLookup,
        *,
        target_count: int,
        on_ring: RingHook | None = None,
    ) -> None:
        if target_count < 1:
            raise ValueError("target_count must be >= 1")
        self.lookup = lookup
        self.target_count = target_count
        self.on_ring = on_ring

    def run(self) -> SearchResult:
        started = time.perf_counter()
        result = SearchResult()
        ring = 0
        index = 1
        while len(result.matches) < self.target_count:
            tile = self.lookup.tile_from_index(index)
            if tile.ring != ring:
                ring = tile.ring
                result.rings = ring
                if self.on_ring is not None:
                    self.on_ring(ring, tile.index, len(result.matches))

            product = neighbor_product(self.lookup, tile)
            if product is None:
                ring_bound = getattr(self.lookup, "ring_bound", ring)
                raise PrefixExhaustedError(
                    ring_bound=ring_bound, checked=index, found=len(result.matches)
                )
            if is_match(tile, product):
                result.matches.append(tile)
            result.checked = index
            index += 1

        result.elapsed = time.perf_counter() - started
        return result


def run_search(
    config: SearchConfig, *, on_ring: RingHook | None = None
) -> tuple[SearchResult, TileLookup]:
    """Run the search described by ``config``, growing a bounded map on demand.

    A regrown map is scanned from index 1 again; rings already reported to
    ``on_ring`` by an earlier attempt are not reported twice.  ``elapsed``
    covers every attempt.
    """

    started = time.perf_counter()
    reported = 0

    def report_new_rings(ring: int, start_index: int, found: int) -> None:
        nonlocal reported
        if ring > reported:
            reported = ring
            if on_ring is not None:
                on_ring(ring, start_index, found)

    ring_bound = config.ring_bound
    while True:
        lookup = build_lookup(config.strategy, ring_bound=ring_bound)
        try:
            result = SpiralSearch(
                lookup, target_count=config.target_count, on_ring=report_new_rings
            ).run()
        except PrefixExhaustedError:
            if config.on_exhaustion is ExhaustionPolicy.FAIL:
                raise
            ring_bound *= config.growth_factor
            continue
        result.elapsed = time.perf_counter() - started
        return result, lookup
