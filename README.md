# dungeonwalk

A small third-person dungeon walker. You start on a title screen, then walk
an animated soldier through a chain of five walled rooms while the camera
follows behind the player. It uses pyglet for the window and drawing, and
needs OpenGL 3.2 or later.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
dungeonwalk
```

The window opens on the **DUNGEONS** title menu. Click **Start Game** to enter
the dungeon, or **Quit** to close the window.

The game reads the player sprite sheet from `Soldier.png` in the assets
directory. By default this is `./assets`, relative to the directory you run
it from. You can choose another directory:

```
dungeonwalk --assets path/to/assets
```

If the sheet is missing, the game prints a warning and runs without drawing
the player. The sheet holds 100×100 frames. Row 0 is the idle animation,
which uses its first six frames. Row 1 is the walk animation, which uses its
first eight frames. The sprite that faces left is the same sheet mirrored.

### Controls

| Key          | Action                           |
|--------------|----------------------------------|
| W / S        | Move away from / toward the camera |
| A / D        | Strafe left / right              |
| Left Shift   | Run                              |
| Q / E        | Rotate the camera around the player |
| Mouse wheel  | Zoom the camera in or out        |

- The player speeds up and slows down smoothly. Walking speed is 2 units per
  second and running speed is 4.
- The sprite faces the last direction you strafed.
- The camera stays between 5 and 7 units from the player and eases toward
  its place behind the player.

## What it does not do

- There is nothing to fight or collect.
- The walls do not block the player.
- The game states `PAUSED` and `GAME_OVER` exist, but no screen uses them.
- The actions `ATTACK_*` and `DIE_*` have no animations.

## Using the pieces

The game logic works without a window, so you can use it on its own:

```python
from dungeonwalk.dungeon import Dungeon, static_walls
from dungeonwalk.game import Game, GameState
from dungeonwalk.menu import create_main_menu
from dungeonwalk.player import CameraState, Controls, Player
from dungeonwalk.vectors import Vector2

dungeon = Dungeon()
dungeon.load_first()
dungeon.build()                 # one Room with four walls per corner layout
print(len(dungeon.rooms))       # 5

player = Player()
camera = CameraState(target=player.position)
player.update(1 / 60, camera, Controls(frozenset({"w", "shift"})))
print(player.position, player.action, player.current_frame_rect())

game = Game()
menu = create_main_menu()
start = menu.buttons[0].bounds
menu.update(game, Vector2(start.x + 1, start.y + 1), clicked=True)
assert game.game_state is GameState.PLAYING
```

The modules:

- `dungeonwalk.vectors` holds `Vector2`, `Vector3` (length, normalized, scale,
  lerp and move_towards), `Rectangle` (contains) and `clamp`.
- `dungeonwalk.constants` holds the window, sprite, camera and room constants
  and the `Color` palette.
- `dungeonwalk.room` holds `Wall`, `Room` and `build_room`. `build_room` takes
  four corners in this order: upper right, lower right, lower left, upper left.
- `dungeonwalk.dungeon` holds `Dungeon` (with `load_first`, `build` and
  `build_starter_room`), `first_dungeon_layout` and `static_walls`.
  `static_walls` lists the hand-placed walls, including doorways, that the
  game window draws.
- `dungeonwalk.player` holds `Player`, `Action`, `Direction`, `AnimationData`,
  `CameraState`, `Controls`, `movement_input`, `update_camera` and
  `load_sprites_into_rectangles`. The key names are `"w"`, `"a"`, `"s"`,
  `"d"`, `"q"`, `"e"` and `"shift"`.
- `dungeonwalk.game` holds `Game` and `GameState`.
- `dungeonwalk.menu` holds `Button`, `MainMenu` and `create_main_menu`.
- `dungeonwalk.app` holds `main`, which opens the window, and `cube_vertices`.