from __future__ import annotations

from .coords import ORIGIN, Cube, Direction, ring_of
from .neighbors import LEG_ORDER, ring_legs
from .rings import index_from_ring, ring_from_index, ring_start


def _steps_along(start: Cube, target: Cube, d: Direction) -> int:
    """Signed number of ``d`` steps from ``start`` to ``target``, or -1 if off the line."""

    dx, dy, dz = d.delta
    if dx:
        steps = (target.x - start.x) * dx
    else:
        steps = (target.y - start.y) * dy
    if start.neighbor(d, steps) != target:
        return -1
    return steps


def index_from_cube(c: Cube) -> int:
    if c == ORIGIN:
        return 1

    ring = ring_of(c)
    index = index_from_ring(ring)
    current = ring_start(ring)
    if current == c:
        return index

    # Walk SW -> S -> SE -> NE -> N -> NW, leaping whole legs that miss the target.
    for d, length in ring_legs(ring):
        steps = _steps_along(current, c, d)
        if 0 < steps <= length:
            return index + steps
        current = current.neighbor(d, length)
        index += length

    raise ValueError(f"{c!r} does not lie on ring {ring}")


def cube_from_index(index: int) -> Cube:
    if index < 1:
        raise ValueError("index must be >= 1")
    if index == 1:
        return ORIGIN

    ring = ring_from_index(index)
    remaining = index - index_from_ring(ring)
    position = ring_start(ring)

    for d in LEG_ORDER:
        if remaining <= 0:
            break
        step = min(remaining, ring)
        position = position.neighbor(d, step)
        remaining -= step

    return position
