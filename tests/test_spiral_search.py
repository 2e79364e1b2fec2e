from types import SimpleNamespace

import pytest

from hexspiral import (
    Cube,
    ExhaustionPolicy,
    FormulaLookup,
    LookupStrategy,
    PrefixExhaustedError,
    SearchConfig,
    SpiralSearch,
    TileMap,
    is_match,
    neighbor_product,
    run_search,
)
from hexspiral import search

FIRST_MATCHES = [1, 2, 3, 4, 5, 6, 8, 9, 12]


def test_neighbor_product_of_centre_is_factorial():
    lookup = FormulaLookup()
    assert neighbor_product(lookup, lookup.tile_from_index(1)) == 2 * 3 * 4 * 5 * 6 * 7


def test_neighbor_product_of_tile_seven():
    lookup = FormulaLookup()
    tile = lookup.tile_from_index(7)
    product = neighbor_product(lookup, tile)
    assert product == 19 * 6 * 2 * 1 * 17 * 18
    assert not is_match(tile, product)


def test_neighbor_product_exceeds_fixed_width_integers():
    lookup = FormulaLookup()
    product = neighbor_product(lookup, lookup.tile_from_index(10_000_000))
    assert product > 2**128


def test_neighbor_product_is_none_on_outer_ring_of_map():
    tile_map = TileMap(2)
    assert neighbor_product(tile_map, tile_map.tile_from_index(8)) is None
    assert neighbor_product(tile_map, tile_map.tile_from_index(7)) is not None


def test_first_matches_in_index_order():
    result = SpiralSearch(FormulaLookup(), target_count=len(FIRST_MATCHES)).run()
    assert [t.index for t in result.matches] == FIRST_MATCHES
    assert result.checked == 12
    assert result.rings == 2
    assert result.last.index == 12
    assert result.elapsed >= 0.0


def test_ring_hook_reports_each_new_ring():
    events: list[tuple[int, int, int]] = []
    SpiralSearch(
        FormulaLookup(),
        target_count=len(FIRST_MATCHES),
        on_ring=lambda ring, start, found: events.append((ring, start, found)),
    ).run()
    assert events == [(1, 2, 1), (2, 8, 6)]


def test_search_halts_exactly_at_target():
    result = SpiralSearch(FormulaLookup(), target_count=1).run()
    assert [t.index for t in result.matches] == [1]
    assert result.checked == 1


def test_search_rejects_empty_target():
    with pytest.raises(ValueError):
        SpiralSearch(FormulaLookup(), target_count=0)


def test_bounded_map_raises_when_prefix_runs_out():
    with pytest.raises(PrefixExhaustedError) as excinfo:
        SpiralSearch(TileMap(1), target_count=5).run()
    assert excinfo.value.ring_bound == 1
    assert excinfo.value.checked == 2
    assert excinfo.value.found == 1


def test_run_search_fail_policy_propagates():
    config = SearchConfig(
        target_count=len(FIRST_MATCHES),
        strategy=LookupStrategy.MAP,
        ring_bound=1,
        on_exhaustion=ExhaustionPolicy.FAIL,
    )
    with pytest.raises(PrefixExhaustedError):
        run_search(config)


def test_run_search_extend_policy_regrows_the_map():
    config = SearchConfig(
        target_count=len(FIRST_MATCHES),
        strategy=LookupStrategy.MAP,
        ring_bound=1,
        on_exhaustion=ExhaustionPolicy.EXTEND,
    )
    result, lookup = run_search(config)
    assert isinstance(lookup, TileMap)
    assert lookup.ring_bound == 4
    assert [t.index for t in result.matches] == FIRST_MATCHES


def test_extend_policy_reports_each_ring_once_and_times_every_attempt(monkeypatch) -> None:
    clock = iter([0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
    monkeypatch.setattr(search, "time", SimpleNamespace(perf_counter=lambda: next(clock)))
    events: list[tuple[int, int, int]] = []
    config = SearchConfig(
        target_count=len(FIRST_MATCHES), strategy=LookupStrategy.MAP, ring_bound=1
    )
    result, lookup = run_search(
        config, on_ring=lambda ring, start, found: events.append((ring, start, found))
    )
    assert lookup.ring_bound == 4
    assert events == [(1, 2, 1), (2, 8, 6)]
    # run_search start, one per failed attempt, two for the last attempt, run_search end
    assert result.elapsed == 5.0


class _BoundedView:
    """Lookup exposing a bound without being a TileMap."""

    def __init__(self, tile_map: TileMap, *, ring_bound: int | None) -> None:
        self._tile_map = tile_map
        if ring_bound is not None:
            self.ring_bound = ring_bound

    def tile_from_index(self, index):
        return self._tile_map.tile_from_index(index)

    def tile_from_cube(self, c):
        return self._tile_map.tile_from_cube(c)

    def neighbor(self, tile, direction):
        return self._tile_map.neighbor(tile, direction)


def test_exhaustion_reads_bound_from_any_lookup():
    with pytest.raises(PrefixExhaustedError) as excinfo:
        SpiralSearch(_BoundedView(TileMap(2), ring_bound=2), target_count=50).run()
    assert excinfo.value.ring_bound == 2
    assert excinfo.value.checked == 8


def test_exhaustion_falls_back_to_current_ring_without_a_bound():
    with pytest.raises(PrefixExhaustedError) as excinfo:
        SpiralSearch(_BoundedView(TileMap(2), ring_bound=None), target_count=50).run()
    assert excinfo.value.ring_bound == 2


def test_strategies_and_brute_force_agree_on_first_matches():
    formula, _ = run_search(SearchConfig(target_count=300))
    mapped, _ = run_search(
        SearchConfig(target_count=300, strategy=LookupStrategy.MAP, ring_bound=40)
    )
    assert formula.matches == mapped.matches
    assert formula.checked == mapped.checked == formula.last.index

    tile_map = TileMap(mapped.rings + 1)
    expected = []
    for i in range(1, formula.checked + 1):
        tile = tile_map.tile_from_index(i)
        if is_match(tile, neighbor_product(tile_map, tile)):
            expected.append(i)
    assert [t.index for t in formula.matches] == expected


def test_two_thousandth_match():
    result, lookup = run_search(
        SearchConfig(target_count=2000, strategy=LookupStrategy.MAP, ring_bound=400)
    )
    assert isinstance(lookup, TileMap)
    assert lookup.ring_bound == 400
    assert len(result.matches) == 2000
    assert result.checked == result.last.index == 462364
    assert result.last.cube == Cube(-194, 393, -199)
    assert result.last.ring == 393
    assert FormulaLookup().tile_from_index(462364) == result.last
