"""Closed-form ring arithmetic for the hexagonal spiral.

Ring ``k`` (``k >= 1``) holds ``6 * k`` tiles and ring 0 is the single centre
tile, so the area covered by radius ``r`` is the Gauss sum::

    1 + 6 * (1 + 2 + ... + r) = 1 + 6 * r * (r + 1) / 2
"""

from __future__ import annotations

import math

from .coords import Cube


def tiles_in_ring(ring: int) -> int:
    if ring < 0:
        raise ValueError("ring must be non-negative")
    return 6 * ring if ring else 1


def tiles_in_area(radius: int) -> int:
    """Number of tiles within ``radius`` of the centre, centre included."""

    if radius < 0:
        raise ValueError("radius must be non-negative")
    return 1 + 6 * ((radius * (radius + 1)) >> 1)


def ring_from_index(index: int) -> int:
    """Return the smallest ring whose area reaches ``index``."""

    if index < 1:
        raise ValueError("index must be >= 1")
    # Solve 3r^2 + 3r + 1 >= index for r, then correct the integer estimate.
    ring = max(0, (math.isqrt(12 * index - 3) - 3) // 6)
    while tiles_in_area(ring) < index:
        ring += 1
    while ring > 0 and tiles_in_area(ring - 1) >= index:
        ring -= 1
    return ring


def index_from_ring(ring: int) -> int:
    """First spiral index on ``ring`` (``ring >= 1``)."""

    if ring < 1:
        raise ValueError("ring must be >= 1; the centre tile is index 1")
    return tiles_in_area(ring - 1) + 1


def ring_start(ring: int) -> Cube:
    """Topmost tile of ``ring``, where its walk begins."""

    if ring < 0:
        raise ValueError("ring must be non-negative")
    return Cube(0, ring, -ring)
