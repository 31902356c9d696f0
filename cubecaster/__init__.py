"""Textured raycasting maze explorer: .cub scene parsing, validation, movement and rendering."""

__version__ = "0.1.0"
__all__ = ["__version__"]