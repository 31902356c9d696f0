"""Casting of one ray per screen column through the map grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .model import Face, GameMap, Player, Vector

_MIN_DIR = 1e-6
_MIN_DIST = 0.0001


@dataclass
class Ray:
    """The result of casting a ray: the wall it hit and its screen projection."""

    dir: Vector
    map_x: int
    map_y: int
    side: int = 0
    perp_wall_dist: float = 0.0
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0

    def texture_face(self) -> Face:
        """Which wall texture the hit face uses."""
        if self.side == 0:
            return Face.EAST if self.dir.x > 0 else Face.WEST
        return Face.NORTH if self.dir.y < 0 else Face.SOUTH

    def texture_x(self, player: Player, tex_width: int) -> int:
        """The texture column for the point where the ray hit the wall."""
        if self.side == 0:
            wall_x = player.pos.y + self.perp_wall_dist * self.dir.y
        else:
            wall_x = player.pos.x + self.perp_wall_dist * self.dir.x
        wall_x -= math.floor(wall_x)
        tex_x = int(wall_x * tex_width)
        if (self.side == 0 and self.dir.x > 0) or (self.side == 1 and self.dir.y < 0):
            tex_x = tex_width - tex_x - 1
        return tex_x


def _delta(component: float) -> float:
    return math.inf if abs(component) < _MIN_DIR else abs(1 / component)


def _start(pos: float, cell: int, component: float, delta: float) -> tuple[int, float]:
    if component < 0:
        return -1, (pos - cell) * delta
    return 1, (cell + 1 - pos) * delta


def cast_ray(player: Player, game_map: GameMap, column: int, width: int, height: int) -> Ray:
    """Cast the ray of one screen column and project the wall it hits."""
    camera_x = 2 * column / width - 1
    ray_dir = Vector(
        player.dir.x + player.plane.x * camera_x,
        player.dir.y + player.plane.y * camera_x,
    )
    delta_x = _delta(ray_dir.x)
    delta_y = _delta(ray_dir.y)
    map_x = int(player.pos.x)
    map_y = int(player.pos.y)
    step_x, side_x = _start(player.pos.x, map_x, ray_dir.x, delta_x)
    step_y, side_y = _start(player.pos.y, map_y, ray_dir.y, delta_y)

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if game_map.is_wall(map_x, map_y):
            break

    dist = side_x - delta_x if side == 0 else side_y - delta_y
    if dist < _MIN_DIST:
        dist = _MIN_DIST
    line_height = int(height / dist)
    half = height // 2
    return Ray(
        dir=ray_dir,
        map_x=map_x,
        map_y=map_y,
        side=side,
        perp_wall_dist=dist,
        line_height=line_height,
        draw_start=-(line_height // 2) + half,
        draw_end=line_height // 2 + half,
    )


def apply_shadow(color: int, distance: float, side: int) -> int:
    """Darken a 0xRRGGBB color with distance, and more on y-side faces."""
    factor = max(1.0 / (1.0 + distance * 0.1), 0.2)
    if side == 1:
        factor *= 0.7
    red = int(((color >> 16) & 0xFF) * factor)
    green = int(((color >> 8) & 0xFF) * factor)
    blue = int((color & 0xFF) * factor)
    return (red << 16) | (green << 8) | blue