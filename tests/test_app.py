import numpy as np
import pytest

from cubecaster.app import Game, main
from cubecaster.model import Config, Face, GameMap, Player, Vector
from cubecaster.player import Keys
from cubecaster.render import Frame, Texture, render_frame

FACE_COLORS = {
    Face.NORTH: 0xFF0000,
    Face.SOUTH: 0x00FF00,
    Face.WEST: 0x0000FF,
    Face.EAST: 0xFFFF00,
}


def make_config():
    grid = ["11111", "10001", "10001", "10001", "11111"]
    player = Player(pos=Vector(2.5, 2.5))
    player.face("N")
    return Config(
        floor_color=0x00AA00,
        ceil_color=0x0000AA,
        map=GameMap(grid, 5, 5),
        player=player,
    )


def make_game():
    textures = {
        face: Texture(np.full((4, 4), color, dtype=np.uint32))
        for face, color in FACE_COLORS.items()
    }
    return Game(make_config(), textures, frame=Frame(64, 48))


def test_tick_without_keys_matches_render_frame():
    game = make_game()
    frame = game.tick()
    assert game.config.player.pos == Vector(2.5, 2.5)
    expected = render_frame(Frame(64, 48), make_config(), game.textures)
    assert np.array_equal(frame.pixels, expected.pixels)
    assert frame.pixels[0, 0] == game.config.ceil_color


def test_tick_moves_forward_when_w_held():
    game = make_game()
    game.keys = Keys(w=True)
    game.tick()
    assert game.config.player.pos.x == 2.5
    assert game.config.player.pos.y == pytest.approx(2.4)


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err
    assert main(["a.cub", "b.cub"]) == 1


def test_main_rejects_extension(tmp_path, capsys):
    path = tmp_path / "scene.txt"
    path.write_text("")
    assert main([str(path)]) == -1
    assert "need .cub extension" in capsys.readouterr().err


def test_main_reports_missing_textures(tmp_path, capsys):
    scene = tmp_path / "scene.cub"
    scene.write_text(
        "NO ./missing_no.xpm\n"
        "SO ./missing_so.xpm\n"
        "WE ./missing_we.xpm\n"
        "EA ./missing_ea.xpm\n"
        "F 10,20,30\n"
        "C 40,50,60\n"
        "\n"
        "111\n"
        "1N1\n"
        "111\n"
    )
    assert main([str(scene)]) == -1
    assert "file not found" in capsys.readouterr().err