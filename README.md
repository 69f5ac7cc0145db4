# cubraycaster

A small first-person raycasting engine. It reads a `.cub` scene file that holds
the wall textures, the floor and ceiling colours and a map. It then opens a
1280×720 pygame window where you walk through the maze.

## Installing

```
pip install .
```

## Running

```
cubraycaster path/to/scene.cub
```

The command takes exactly one argument. The argument must name a readable file
that ends in `.cub` and holds something other than whitespace. If the arguments
or the scene are not valid, the command prints `Error` and a short reason to
standard error, then exits with status 1.

## Controls

| Key            | Action                  |
| -------------- | ----------------------- |
| W / Up arrow   | walk forward            |
| S / Down arrow | walk backward           |
| A / D          | strafe left / right     |
| Left / Right   | turn                    |
| Esc            | quit                    |

Closing the window also quits. Movement stops at walls.

## The `.cub` format

A scene file starts with six identifier lines, in any order. Blank lines may sit
between them. The map follows them.

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

- `NO`, `SO`, `WE` and `EA` each give the path of the texture for one wall
  side. The file must exist and be readable, and pygame must be able to load it
  as an image.
- `F` and `C` give the floor and ceiling colour. Each is three numbers from 0 to
  255, separated by exactly two commas, with no other characters.
- Each identifier may appear only once.
- The map uses `1` for walls, `0` for floor, and spaces or tabs for nothing. It
  holds exactly one of `N`, `S`, `E` or `W`, which places the player and sets
  which way the player faces.
- Walls must close the map. The map may not hold empty lines, and its last line
  must not end in a newline.

## Using it as a library

```python
from cubraycaster.scene import load_scene
from cubraycaster.player import spawn_player
from cubraycaster.render import render_frame
from cubraycaster.app import load_textures

scene = load_scene("maps/small.cub")
player = spawn_player(scene)
textures = load_textures(scene)
frame = render_frame(scene.rows, player, textures, scene.ceiling, scene.floor)
```

- `cubraycaster.scene` has `load_scene` and `parse_scene`, which build a
  `Scene`, and the helpers `parse_color`, `parse_info`, `is_closed`,
  `find_player`, `check_args` and `read_lines`. Invalid input raises
  `CubError`.
- `cubraycaster.player` has `Player`, with `press`, `release`, `step` and
  `move_towards`. It also has the `Key` codes, `spawn_player` and the collision
  test `hits_wall`.
- `cubraycaster.render` has `cast_ray`, `wall_side`, `draw_floor_sky`,
  `draw_wall_column` and `render_frame`. Frames are NumPy `uint32` arrays of
  packed `0xRRGGBB` pixels, 720 rows by 1280 columns, one row per screen line.
  A `Texture` wraps such an array.
- `cubraycaster.app` has `load_textures`, `run`, which opens the window and
  runs the game loop, and `main`, the command's entry point.

## What it does not do

There is no minimap, no mouse look, no sprites or doors, and no window size
other than 1280×720.