"""Classification of the lines of a scene description file."""

WHITESPACE = " \t\n\v\f\r"

PATH_PREFIXES = ("NO ", "SO ", "EA ", "WE ")
COLOR_PREFIXES = ("F ", "C ")
MAP_CHARS = frozenset("10NSEW")


def is_empty_line(line: str) -> bool:
    """True if the line holds only whitespace (or nothing)."""
    return all(c in WHITESPACE for c in line)


def is_path_line(line: str) -> bool:
    """True if the line declares a wall texture path."""
    return line.startswith(PATH_PREFIXES)


def is_color_line(line: str) -> bool:
    """True if the line declares the floor or ceiling color."""
    return line.startswith(COLOR_PREFIXES)


def is_map_config_line(line: str) -> bool:
    """True if the line is a texture or color declaration."""
    return is_path_line(line) or is_color_line(line)


def is_map_desc_line(line: str) -> bool:
    """True if the line is a non-empty row of the map description."""
    if not all(c in MAP_CHARS or c in WHITESPACE for c in line):
        return False
    return not is_empty_line(line)