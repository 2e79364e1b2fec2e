from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Cube:
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise ValueError("For cube coords, x + y + z must be 0")

    @property
    def ring(self) -> int:
        return ring_of(self)

    def neighbor(self, direction: Direction, distance: int = 1) -> Cube:
        dx, dy, dz = direction.delta
        return Cube(
            self.x + dx * distance,
            self.y + dy * distance,
            self.z + dz * distance,
        )

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.z}"


ORIGIN = Cube(0, 0, 0)


class Direction(Enum):
    NORTH = (0, +1, -1)
    NORTH_WEST = (-1, +1, 0)
    SOUTH_WEST = (-1, 0, +1)
    SOUTH = (0, -1, +1)
    SOUTH_EAST = (+1, -1, 0)
    NORTH_EAST = (+1, 0, -1)

    @property
    def delta(self) -> tuple[int, int, int]:
        return self.value

    @property
    def opposite(self) -> Direction:
        dx, dy, dz = self.value
        return Direction((-dx, -dy, -dz))

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Direction.NORTH: "N",
    Direction.NORTH_WEST: "NW",
    Direction.SOUTH_WEST: "SW",
    Direction.SOUTH: "S",
    Direction.SOUTH_EAST: "SE",
    Direction.NORTH_EAST: "NE",
}


def ring_of(c: Cube) -> int:
    return max(abs(c.x), abs(c.y), abs(c.z))
