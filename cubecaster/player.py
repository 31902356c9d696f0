"""Keyboard state, player movement and camera rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .model import GameMap, Player

MOVE_SPEED = 0.1
ROT_SPEED = 0.05


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESCAPE = 53
    LEFT = 123
    RIGHT = 124


_HELD_KEYS = {
    Key.W: "w",
    Key.A: "a",
    Key.S: "s",
    Key.D: "d",
    Key.LEFT: "left",
    Key.RIGHT: "right",
}


def _as_key(key: int) -> Key | None:
    try:
        return Key(key)
    except ValueError:
        return None


@dataclass
class Keys:
    """Which movement keys are currently held down."""

    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    left: bool = False
    right: bool = False

    def press(self, key: int) -> bool:
        """Mark a key as held; return True when the key asks to quit."""
        known = _as_key(key)
        if known is Key.ESCAPE:
            return True
        if known is not None:
            setattr(self, _HELD_KEYS[known], True)
        return False

    def release(self, key: int) -> None:
        """Mark a key as no longer held."""
        known = _as_key(key)
        if known in _HELD_KEYS:
            setattr(self, _HELD_KEYS[known], False)


def _step(player: Player, game_map: GameMap, dx: float, dy: float) -> None:
    """Move by (dx, dy), each axis only if it does not enter a wall."""
    next_x = player.pos.x + dx
    next_y = player.pos.y + dy
    if not game_map.is_wall(int(next_x), int(player.pos.y)):
        player.pos.x = next_x
    if not game_map.is_wall(int(player.pos.x), int(next_y)):
        player.pos.y = next_y


def move_forward(player: Player, game_map: GameMap, speed: float) -> None:
    """Walk along the view direction."""
    _step(player, game_map, player.dir.x * speed, player.dir.y * speed)


def move_backward(player: Player, game_map: GameMap, speed: float) -> None:
    """Walk against the view direction."""
    _step(player, game_map, -player.dir.x * speed, -player.dir.y * speed)


def strafe_left(player: Player, game_map: GameMap, speed: float) -> None:
    """Step sideways to the left of the view direction."""
    _step(player, game_map, -player.plane.x * speed, -player.plane.y * speed)


def strafe_right(player: Player, game_map: GameMap, speed: float) -> None:
    """Step sideways to the right of the view direction."""
    _step(player, game_map, player.plane.x * speed, player.plane.y * speed)


def rotate(player: Player, angle: float) -> None:
    """Rotate the view direction and camera plane by an angle in radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    d, p = player.dir, player.plane
    d.x, d.y = d.x * cos_a - d.y * sin_a, d.x * sin_a + d.y * cos_a
    p.x, p.y = p.x * cos_a - p.y * sin_a, p.x * sin_a + p.y * cos_a


def rotate_left(player: Player, speed: float) -> None:
    """Turn the camera to the left."""
    rotate(player, -speed)


def rotate_right(player: Player, speed: float) -> None:
    """Turn the camera to the right."""
    rotate(player, speed)


def update_player(player: Player, game_map: GameMap, keys: Keys) -> None:
    """Apply one frame of movement for the keys currently held."""
    if keys.w:
        move_forward(player, game_map, MOVE_SPEED)
    if keys.s:
        move_backward(player, game_map, MOVE_SPEED)
    if keys.a:
        strafe_left(player, game_map, MOVE_SPEED)
    if keys.d:
        strafe_right(player, game_map, MOVE_SPEED)
    if keys.left:
        rotate_left(player, ROT_SPEED)
    if keys.right:
        rotate_right(player, ROT_SPEED)