from hexspiral import Direction, FormulaLookup, SpiralSearch
from hexspiral.report import progress_line

lookup = FormulaLookup()


def on_ring(ring: int, start: int, found: int) -> None:
    print(progress_line(ring, start, found))


if __name__ == "__main__":
    result = SpiralSearch(lookup, target_count=50, on_ring=on_ring).run()
    last = result.last
    print("last:", last)
    for d in Direction:
        print(f"{d.label:<2}:", lookup.neighbor(last, d))
