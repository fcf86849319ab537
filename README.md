# cubraycast

A small first-person maze explorer. It reads a `.cub` scene file that names
wall textures, floor and ceiling colours and holds a grid map, then draws the
maze with a grid raycaster in a 1600x1000 pygame window, with a minimap in the
top-left corner.

## Installing

```
pip install .
```

Installing with the `test` extra (`pip install .[test]`) adds pytest.

## Running

```
cubraycast path/to/level.cub
```

The command takes exactly one argument: the path of a scene file. The part of
the name after its first dot must be `cub`. Any problem with the arguments,
the file or a texture is printed as `Error` followed by a line saying what is
wrong, and the command exits with status 1. When the game ends it writes
`GAME OVER !!` to standard error.

## Scene files

A scene file starts with a header of identifiers, each followed by its value,
in any order:

```
NO textures/north.xpm
SO textures/south.xpm
WE textures/west.xpm
EA textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE`, `EA`: the image for each side of a wall. Each may be given
  only once, and all four must be given before the map starts.
- `F`, `C`: the floor and ceiling colours as `R,G,B`, each part from 0 to 255.
  Each may be given only once and both are required.

Textures are read with Pillow, so any image format it can open works. The door
texture is always read from `textures/door.xpm`, relative to the current
directory.

After the header comes the map, which must be the last thing in the file:

```
111111
100101
1D0001
1100N1
111111
```

- `1`: wall, `0`: empty floor, `D`: door, space: outside the map.
- `N`, `S`, `E`, `W`: the player's start cell and the direction the player
  faces. There must be exactly one.
- The map must be closed by walls, and no line may follow an empty line.
- A tab in the map counts as four spaces.
- The character `;` may not appear anywhere in the file.

## Controls

| Key                  | Action                                   |
|----------------------|------------------------------------------|
| `W` / Up arrow       | move forward                             |
| `S` / Down arrow     | move back                                |
| `A` / `D`            | step left / right                        |
| Left / Right arrow   | turn                                     |
| Mouse movement       | turn                                     |
| Space                | open the last door a ray landed on       |
| `F`                  | run the weapon animation timer           |
| Escape, closing      | quit                                     |

Walls and closed doors block movement.

## Using the library

The parsing and raycasting parts work without a window:

```python
from cubraycast.scene import load_scene
from cubraycast.raycast import Raycaster, wall_height

scene = load_scene("level.cub")
caster = Raycaster(scene.rows, scene.width, scene.height)
hits = caster.cast_frame(90.0, 96.0, 96.0, width=320)
heights = [wall_height(hit.distance) for hit in hits]
```

- `cubraycast.scene.parse_scene` takes the text of a scene file instead of a
  path; both return a `Scene` with the `header`, padded `rows`, the `player`
  start and the map size. Invalid scenes raise `cubraycast.tools.ParseError`.
- `cubraycast.colors.parse_rgb` turns `"R,G,B"` into a `0xRRGGBB` integer.
- `cubraycast.player.Player` holds position and view angle and applies the
  movement keys from `cubraycast.settings.Key`.
- `cubraycast.render.FrameBuffer`, `draw_column` and
  `cubraycast.minimap.draw_minimap` draw into plain pixel buffers;
  `cubraycast.app.Game` ties them together without opening a window.

## What it does not do

The `F` key only runs the weapon animation's frame counter, redrawing the view
as it steps; no weapon image is loaded or shown. The window size is fixed, and
there are no sprites, enemies or sound.