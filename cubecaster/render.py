"""Software rendering of a frame: background, textured wall columns, textures."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

import numpy as np
from PIL import Image

from .model import Config, CubError, Face, Player
from .raycast import Ray, cast_ray

WIDTH = 1280
HEIGHT = 720


@dataclass
class Texture:
    """A wall texture: a grid of 0xRRGGBB pixels, indexed [y, x]."""

    pixels: np.ndarray

    def __post_init__(self) -> None:
        self.pixels = np.asarray(self.pixels, dtype=np.uint32)
        if self.pixels.ndim != 2 or self.pixels.size == 0:
            raise ValueError("texture pixels must be a non-empty 2D array")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Texture:
        """Load an image file as a texture."""
        try:
            with Image.open(path) as image:
                rgb = np.asarray(image.convert("RGB"), dtype=np.uint32)
        except (OSError, ValueError) as exc:
            raise CubError(f"Error: failed to load texture {os.fspath(path)}") from exc
        return cls((rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2])

    def pixel(self, x: int, y: int) -> int:
        """The 0xRRGGBB color at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texture pixel ({x}, {y}) out of range")
        return int(self.pixels[y, x])


@dataclass
class Frame:
    """The screen image being drawn, indexed [y, x]."""

    width: int = WIDTH
    height: int = HEIGHT
    pixels: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.pixels = np.zeros((self.height, self.width), dtype=np.uint32)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; drawing outside the frame is an error."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise CubError("mlx error: Failed to put pixel")
        self.pixels[y, x] = color & 0xFFFFFFFF


def draw_background(frame: Frame, ceil_color: int, floor_color: int) -> None:
    """Fill the upper half with the ceiling color and the rest with the floor."""
    half = frame.height // 2
    frame.pixels[:half, :] = ceil_color & 0xFFFFFFFF
    frame.pixels[half:, :] = floor_color & 0xFFFFFFFF


def _shade_factor(distance: float, side: int) -> float:
    factor = max(1.0 / (1.0 + distance * 0.1), 0.2)
    if side == 1:
        factor *= 0.7
    return factor


def draw_column(frame: Frame, ray: Ray, texture: Texture, player: Player, x: int) -> None:
    """Draw the textured, shaded wall slice that a ray hit into column x."""
    if not 0 <= x < frame.width:
        raise CubError("Ray casting error")
    start = max(ray.draw_start, 0)
    end = min(ray.draw_end, frame.height - 1)
    if end < start:
        return
    tex_x = min(max(ray.texture_x(player, texture.width), 0), texture.width - 1)
    line_height = max(ray.line_height, 1)
    step = texture.height / line_height
    tex_pos = (start - frame.height // 2 + line_height // 2) * step

    steps = np.full(end - start + 1, step, dtype=np.float64)
    steps[0] = tex_pos
    positions = np.add.accumulate(steps)
    tex_ys = np.clip(positions.astype(np.int64), 0, texture.height - 1)
    colors = texture.pixels[tex_ys, tex_x].astype(np.int64)

    factor = _shade_factor(ray.perp_wall_dist, ray.side)
    red = (((colors >> 16) & 0xFF) * factor).astype(np.int64)
    green = (((colors >> 8) & 0xFF) * factor).astype(np.int64)
    blue = ((colors & 0xFF) * factor).astype(np.int64)
    frame.pixels[start:end + 1, x] = ((red << 16) | (green << 8) | blue).astype(np.uint32)


def render_frame(frame: Frame, config: Config, textures: Mapping[Face, Texture]) -> Frame:
    """Draw the whole view of the player into the frame and return it."""
    draw_background(frame, config.ceil_color or 0, config.floor_color or 0)
    for x in range(frame.width):
        ray = cast_ray(config.player, config.map, x, frame.width, frame.height)
        draw_column(frame, ray, textures[ray.texture_face()], config.player, x)
    return frame