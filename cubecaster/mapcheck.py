"""Validation of the map description: walls, player and enclosure."""

from __future__ import annotations

from collections import deque
from collections.abc import MutableSequence, Sequence

from .lines import WHITESPACE
from .model import Config, CubError, Player, Vector

PLAYER_CHARS = frozenset("NSEW")
_OPEN_CHARS = frozenset("0NSEW")
_BLOCKING_CHARS = frozenset("1F")
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _check_edge_row(row: str) -> None:
    if any(c != "1" and c not in WHITESPACE for c in row):
        raise CubError("Map error: walls required!")


def _check_middle_row(row: str) -> None:
    trimmed = row.strip(" \t\n\r")
    if not trimmed or trimmed[0] != "1" or trimmed[-1] != "1":
        raise CubError("Map error: Invalid row!")


def check_walls(rows: Sequence[str]) -> None:
    """Check that the first and last rows are walls and every row is closed."""
    last = len(rows) - 1
    for index, row in enumerate(rows):
        if index in (0, last):
            _check_edge_row(row)
        else:
            _check_middle_row(row)


def normalize(rows: Sequence[str]) -> list[str]:
    """Pad every row with spaces to the width of the widest one."""
    width = max((len(row) for row in rows), default=0)
    return [row.ljust(width) for row in rows]


def find_player(rows: Sequence[str]) -> Player:
    """Locate the single player start and return the player it describes.

    The x position is taken from the first player letter of the row and
    the orientation from the last one.
    """
    player: Player | None = None
    for y, row in enumerate(rows):
        letters = [(x, c) for x, c in enumerate(row) if c in PLAYER_CHARS]
        if not letters:
            continue
        if player is not None:
            raise CubError("Map error: single player required!")
        player = Player(pos=Vector(letters[0][0] + 0.5, y + 0.5))
        player.face(letters[-1][1])
    if player is None:
        raise CubError("Error: Player not found")
    return player


def flood_fill_space(rows: Sequence[MutableSequence[str]], x: int, y: int) -> bool:
    """Fill the empty region around (x, y) with 'F' in place.

    Returns False as soon as the region touches a walkable cell, which
    means the map leaks; True when the region is closed.
    """
    height = len(rows)
    width = len(rows[0]) if rows else 0
    queue = deque([(x, y)])
    while queue:
        px, py = queue.popleft()
        if not (0 <= px < width and 0 <= py < height):
            continue
        cell = rows[py][px]
        if cell in _BLOCKING_CHARS:
            continue
        if cell in _OPEN_CHARS:
            return False
        rows[py][px] = "F"
        queue.extend((px + dx, py + dy) for dx, dy in _NEIGHBOURS)
    return True


def detect_map_leaks(rows: Sequence[str]) -> bool:
    """Return True if any space of the normalized map reaches a walkable cell."""
    cells = [list(row) for row in rows]
    for y, row in enumerate(cells):
        for x in range(len(row)):
            if row[x] == " " and not flood_fill_space(cells, x, y):
                return True
    return False


def validate_map(config: Config) -> None:
    """Validate the map of a config and fill in its width and player."""
    rows = config.map.grid
    check_walls(rows)
    padded = normalize(rows)
    config.map.width = len(padded[0]) if padded else 0
    config.player = find_player(padded)
    if detect_map_leaks(padded):
        raise CubError("Map error: leak detected!")