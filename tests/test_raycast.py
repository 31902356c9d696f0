import math

import pytest

from cubecaster.model import Face, GameMap, Player, Vector
from cubecaster.raycast import Ray, apply_shadow, cast_ray

WIDTH = 1280
HEIGHT = 720


@pytest.fixture
def box():
    rows = ["11111", "10001", "10001", "10001", "11111"]
    return GameMap(grid=rows, width=5, height=5)


def make_player(facing, x=2.5, y=2.5):
    player = Player(pos=Vector(x, y))
    player.face(facing)
    return player


@pytest.mark.parametrize(
    "facing, face, cell",
    [("E", Face.EAST, (4, 2)), ("W", Face.WEST, (0, 2)),
     ("N", Face.NORTH, (2, 0)), ("S", Face.SOUTH, (2, 4))],
)
def test_center_ray_hits_facing_wall(box, facing, face, cell):
    ray = cast_ray(make_player(facing), box, WIDTH // 2, WIDTH, HEIGHT)
    assert (ray.map_x, ray.map_y) == cell
    assert ray.texture_face() is face
    assert math.isclose(ray.perp_wall_dist, 1.5)


def test_center_ray_side_matches_axis(box):
    east = cast_ray(make_player("E"), box, WIDTH // 2, WIDTH, HEIGHT)
    north = cast_ray(make_player("N"), box, WIDTH // 2, WIDTH, HEIGHT)
    assert east.side == 0
    assert north.side == 1


def test_projection_is_centered(box):
    ray = cast_ray(make_player("E"), box, WIDTH // 2, WIDTH, HEIGHT)
    assert ray.line_height == int(HEIGHT / ray.perp_wall_dist)
    assert ray.draw_end - ray.draw_start == ray.line_height
    assert ray.draw_start + ray.draw_end == HEIGHT


def test_every_column_hits_a_wall(box):
    player = make_player("N", 1.7, 3.2)
    for column in range(0, WIDTH, 37):
        ray = cast_ray(player, box, column, WIDTH, HEIGHT)
        assert box.is_wall(ray.map_x, ray.map_y)
        assert ray.perp_wall_dist >= 0.0001
        assert ray.draw_start <= HEIGHT // 2 <= ray.draw_end


def test_edge_columns_are_symmetric(box):
    player = make_player("E")
    left = cast_ray(player, box, 0, WIDTH, HEIGHT)
    right = cast_ray(player, box, WIDTH, WIDTH, HEIGHT)
    assert math.isclose(left.perp_wall_dist, right.perp_wall_dist)
    assert math.isclose(left.dir.y, -right.dir.y)


def test_distance_is_clamped_against_wall(box):
    player = make_player("W", 1.00001)
    ray = cast_ray(player, box, WIDTH // 2, WIDTH, HEIGHT)
    assert ray.perp_wall_dist == 0.0001


def test_texture_x_stays_in_range(box):
    player = make_player("S", 1.3, 2.8)
    for column in range(0, WIDTH, 53):
        ray = cast_ray(player, box, column, WIDTH, HEIGHT)
        assert 0 <= ray.texture_x(player, 64) < 64


def test_texture_x_is_mirrored_on_east_face():
    player = make_player("E", 2.5, 2.25)
    east = Ray(dir=Vector(1.0, 0.0), map_x=4, map_y=2, side=0, perp_wall_dist=1.5)
    west = Ray(dir=Vector(-1.0, 0.0), map_x=0, map_y=2, side=0, perp_wall_dist=1.5)
    assert east.texture_x(player, 64) + west.texture_x(player, 64) == 63


@pytest.mark.parametrize(
    "direction, side, face",
    [((1.0, 0.5), 0, Face.EAST), ((-1.0, 0.5), 0, Face.WEST),
     ((0.2, -1.0), 1, Face.NORTH), ((0.2, 1.0), 1, Face.SOUTH)],
)
def test_texture_face_from_side_and_direction(direction, side, face):
    ray = Ray(dir=Vector(*direction), map_x=0, map_y=0, side=side)
    assert ray.texture_face() is face


def test_shadow_at_zero_distance_keeps_color():
    assert apply_shadow(0x123456, 0.0, 0) == 0x123456


def test_shadow_keeps_black():
    assert apply_shadow(0x000000, 3.0, 1) == 0


def test_y_side_is_darker():
    near = apply_shadow(0xFFFFFF, 2.0, 0)
    shaded = apply_shadow(0xFFFFFF, 2.0, 1)
    for shift in (16, 8, 0):
        assert (shaded >> shift) & 0xFF < (near >> shift) & 0xFF


def test_shadow_darkens_with_distance_until_floor():
    colors = [apply_shadow(0xC8C8C8, d, 0) for d in (0.0, 5.0, 20.0)]
    assert colors[0] > colors[1] > colors[2]
    assert apply_shadow(0xC8C8C8, 1000.0, 0) == apply_shadow(0xC8C8C8, 10000.0, 0)


def test_shadow_ignores_bits_above_rgb():
    assert apply_shadow(0xFF123456, 4.0, 1) == apply_shadow(0x123456, 4.0, 1)