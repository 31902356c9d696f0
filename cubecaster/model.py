"""Core data types shared by the parser, the player logic and the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class CubError(Exception):
    """Raised when a scene description or its resources are invalid."""


class Face(IntEnum):
    """Wall faces, each with its own texture."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3


@dataclass
class Vector:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0


# Facing letter -> (direction, camera plane).
_ORIENTATIONS = {
    "N": ((0.0, -1.0), (0.66, 0.0)),
    "S": ((0.0, 1.0), (-0.66, 0.0)),
    "E": ((1.0, 0.0), (0.0, 0.66)),
    "W": ((-1.0, 0.0), (0.0, -0.66)),
}


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    pos: Vector = field(default_factory=Vector)
    dir: Vector = field(default_factory=Vector)
    plane: Vector = field(default_factory=Vector)

    def face(self, direction: str) -> None:
        """Point the player towards 'N', 'S', 'E' or 'W'."""
        try:
            (dx, dy), (px, py) = _ORIENTATIONS[direction]
        except KeyError:
            raise CubError(f"Error: invalid player orientation {direction!r}") from None
        self.dir = Vector(dx, dy)
        self.plane = Vector(px, py)


@dataclass
class GameMap:
    """The map grid, one string per row."""

    grid: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0

    def is_wall(self, x: int, y: int) -> bool:
        """Return True if cell (x, y) is a wall; cells off the grid count as walls."""
        if y < 0 or y >= len(self.grid):
            return True
        row = self.grid[y]
        if x < 0 or x >= len(row):
            return True
        return row[x] == "1"


@dataclass
class Config:
    """Everything a scene description file defines."""

    textures: dict[Face, str] = field(default_factory=dict)
    floor_color: int | None = None
    ceil_color: int | None = None
    map: GameMap = field(default_factory=GameMap)
    player: Player = field(default_factory=Player)
    path_seen: bool = False
    color_seen: bool = False