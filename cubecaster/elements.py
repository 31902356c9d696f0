"""Parsing of the texture, color and map lines of a scene description."""

from __future__ import annotations

import re
from collections.abc import Sequence

from .lines import (
    WHITESPACE,
    is_color_line,
    is_empty_line,
    is_map_config_line,
    is_map_desc_line,
    is_path_line,
)
from .model import Config, CubError, Face

_PATH_FACES = {
    "NO ": Face.NORTH,
    "SO ": Face.SOUTH,
    "EA ": Face.EAST,
    "WE ": Face.WEST,
}

_SPACE_RUN = re.compile(f"[{re.escape(WHITESPACE)}]+")
_DIGITS = frozenset("0123456789")


def clean_path(text: str) -> str:
    """Trim the whitespace around a texture path; reject an empty one."""
    path = text.lstrip(WHITESPACE).strip(" \t\n\r")
    if not path:
        raise CubError("Error: Empty or invalid texture path")
    return path


def _leading_int(text: str) -> int:
    digits = ""
    for c in text.lstrip(WHITESPACE):
        if c not in _DIGITS:
            break
        digits += c
    return int(digits) if digits else 0


def parse_color(text: str) -> int:
    """Parse 'R,G,B' into a packed 0xRRGGBB integer."""
    parts = [p for p in text.split(",") if p]
    for part in parts:
        if len([t for t in _SPACE_RUN.split(part) if t]) > 1:
            raise CubError("Error: invalid Number in the color")
    if len(parts) != 3:
        raise CubError("Map error: Only 3 integers needed for a color!")
    for part in parts:
        if not all(c in _DIGITS or c in WHITESPACE for c in part):
            raise CubError("Error: Only digits are needed for each color!")
    red, green, blue = (_leading_int(p) for p in parts)
    if not all(0 <= v <= 255 for v in (red, green, blue)):
        raise CubError("Error: Each color need to be between 0 and 255")
    return (red << 16) | (green << 8) | blue


def _handle_config_line(config: Config, line: str) -> None:
    if is_path_line(line):
        config.path_seen = True
        face = _PATH_FACES[line[:3]]
        if face in config.textures:
            raise CubError("Error: Element configuration line duplicated!")
        config.textures[face] = clean_path(line[3:])
    elif is_color_line(line):
        config.color_seen = True
        is_floor = line.startswith("F ")
        current = config.floor_color if is_floor else config.ceil_color
        if current is not None:
            raise CubError("Error: Color configuration line duplicated")
        color = parse_color(line[2:])
        if is_floor:
            config.floor_color = color
        else:
            config.ceil_color = color


def parse_elements(lines: Sequence[str]) -> Config:
    """Build a Config from the lines of a scene description.

    The map rows are stored without their line endings; the map width and
    the player are left for map validation to fill in.
    """
    config = Config()
    map_rows: list[int] = []
    for index, line in enumerate(lines):
        if is_map_config_line(line):
            _handle_config_line(config, line)
        elif is_map_desc_line(line):
            if not config.path_seen or not config.color_seen:
                raise CubError("Error: the map content must be the last!")
            map_rows.append(index)
        elif not is_empty_line(line):
            raise CubError("Error: Invalid configuration line!")
    if map_rows and len(map_rows) != map_rows[-1] - map_rows[0] + 1:
        raise CubError("Error: Empty lines inside map description!")
    if config.floor_color is None or config.ceil_color is None:
        raise CubError("Map error: Color configuration line missing")
    config.map.grid = [lines[i].rstrip("\n") for i in map_rows]
    config.map.height = len(map_rows)
    return config