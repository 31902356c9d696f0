# cubecaster

A small first-person maze explorer. It reads a `.cub` scene description,
checks it, and draws the maze with textured, distance-shaded walls using a
grid raycaster in a 1280×720 pygame window.

## Installing

```
pip install .
```

## Running

```
cubecaster path/to/scene.cub
```

Exactly one argument is expected. Otherwise a usage line is printed to
standard error and the command exits with status 1. If the scene or one of
its textures is invalid, the error message is printed to standard error and
the command exits with a failure status.

### Controls

| Key        | Action            |
|------------|-------------------|
| W / S      | move forward/back |
| A / D      | strafe left/right |
| ← / →      | turn left/right   |
| Esc        | quit              |

Closing the window also quits. Movement stops at walls, checked one axis
at a time, so you slide along a wall instead of sticking to it.

## The `.cub` format

A scene file holds configuration lines followed by the map:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

- The file name must end in `.cub`, and the file must not be empty.
- `NO`, `SO`, `WE` and `EA` give the wall texture for each face. Each must
  appear exactly once and name a file that can be opened. Textures are read
  with Pillow, so any image format it understands will do.
- `F` and `C` give the floor and ceiling colours as exactly three integers
  from 0 to 255, separated by commas. Each may appear only once, and both
  are required.
- Each keyword starts its line and is followed by a space.
- Blank lines may appear between configuration lines. Any other line that
  is neither configuration nor map is an error.
- The map comes after at least one texture line and one colour line. It
  uses `1` for walls, `0` for floor, spaces for void, and exactly one of
  `N`, `S`, `E`, `W` for the player's start and facing.
- The first and last map rows may hold only walls and spaces. Every other
  row must begin and end with a wall, ignoring surrounding spaces.
- No void may touch floor or the player's start, and there may be no blank
  lines inside the map.

Error messages start with `Error`, `Map error` or `mlx error`.

## Using it as a library

```python
from cubecaster.loader import load_cub
from cubecaster.model import CubError

try:
    config = load_cub("scene.cub")
except CubError as exc:
    print(exc)
else:
    print(config.player.pos, config.map.width, config.map.height)
```

`load_cub` returns a `cubecaster.model.Config`. It holds the texture path
for each `Face`, the packed `0xRRGGBB` floor and ceiling colours, the
`GameMap`, and the `Player` with its position, direction and camera plane.
The player's start cell is turned into floor (`0`) in the returned grid.

The pieces can also be used on their own, without opening a window:

- `cubecaster.lines` classifies scene lines, and `cubecaster.elements`
  parses them (`parse_color`, `clean_path`, `parse_elements`).
- `cubecaster.mapcheck` checks walls, finds the player and detects leaks
  (`validate_map`, `find_player`, `detect_map_leaks`, and others).
- `cubecaster.player` tracks held keys (`Keys`) and moves or rotates a
  player (`move_forward`, `strafe_left`, `rotate_right`, `update_player`, …).
- `cubecaster.raycast.cast_ray` casts the ray of one screen column and
  returns a `Ray` with its hit face, distance and projected wall slice.
  `apply_shadow` darkens a colour by distance.
- `cubecaster.render` draws into an in-memory `Frame` (`draw_background`,
  `draw_column`, `render_frame`) from `Texture` objects loaded with
  `Texture.load`.
- `cubecaster.app.Game` holds a loaded scene. `Game.tick()` advances the
  player one step and redraws the frame, and `Game.run()` opens the window.

## What it does not do

It has walls, floor and ceiling only. There are no sprites, items, enemies
or doors, no minimap, no mouse look, and no shooting.

## Running the tests

```
pip install ".[test]"
pytest
```