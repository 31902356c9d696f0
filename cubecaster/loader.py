"""Loading and validation of a whole scene description file."""

from __future__ import annotations

import os

from .elements import parse_elements
from .mapcheck import validate_map
from .model import Config, CubError, Face


def read_lines(filename: str | os.PathLike[str]) -> list[str]:
    """Read a file as lines split on '\\n', each keeping its line ending."""
    try:
        with open(filename, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except OSError:
        raise CubError("Error opening file") from None
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    if not lines:
        raise CubError("Error: the map is empty")
    return lines


def _readable(path: str) -> bool:
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def validate_config(config: Config) -> None:
    """Check that all four wall textures are declared and can be opened."""
    if any(face not in config.textures for face in Face):
        raise CubError("Map error: element path missing")
    if not all(_readable(config.textures[face]) for face in Face):
        raise CubError("Map error: Invalid path; file not found!")


def load_cub(filename: str | os.PathLike[str]) -> Config:
    """Parse and validate a .cub scene description file."""
    name = os.fspath(filename)
    if not name.endswith(".cub"):
        raise CubError("Error: invalid file; need .cub extension file")
    config = parse_elements(read_lines(name))
    validate_config(config)
    validate_map(config)
    x, y = int(config.player.pos.x), int(config.player.pos.y)
    row = config.map.grid[y]
    config.map.grid[y] = row[:x] + "0" + row[x + 1:]
    return config