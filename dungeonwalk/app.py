"""Window, rendering and main loop of the game."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from dungeonwalk.constants import (
    BLACK,
    DARKGRAY,
    PLAYER_FRAME_HEIGHT,
    PLAYER_FRAME_WIDTH,
    PLAYER_SPRITE_SCALE,
    SKYBLUE,
    TITLE_FONT_SIZE,
    WHITE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Color,
)
from dungeonwalk.dungeon import Dungeon, static_walls
from dungeonwalk.game import Game, GameState
from dungeonwalk.menu import create_main_menu
from dungeonwalk.player import (
    KEY_BACK,
    KEY_FORWARD,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_ROTATE_LEFT,
    KEY_ROTATE_RIGHT,
    KEY_RUN,
    CameraState,
    Controls,
    Player,
)
from dungeonwalk.vectors import Rectangle, Vector2, Vector3

TARGET_FPS = 60
GRID_COLOR = Color(127, 127, 127)
FLOOR_POSITION = Vector3(0.0, -1.0, 0.0)
FLOOR_SIZE = Vector3(200.0, 0.1, 200.0)

# Corners of each cube face, counter-clockwise seen from outside.
_CUBE_FACES = (
    ((-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1)),
    ((1, -1, -1), (-1, -1, -1), (-1, 1, -1), (1, 1, -1)),
    ((-1, 1, 1), (1, 1, 1), (1, 1, -1), (-1, 1, -1)),
    ((-1, -1, -1), (1, -1, -1), (1, -1, 1), (-1, -1, 1)),
    ((1, -1, 1), (1, -1, -1), (1, 1, -1), (1, 1, 1)),
    ((-1, -1, -1), (-1, -1, 1), (-1, 1, 1), (-1, 1, -1)),
)
_QUAD = (0, 1, 2, 0, 2, 3)

_VERTEX_SHADER = """#version 150 core
in vec3 position;
in vec4 colors;
in vec2 tex_coords;
out vec4 vertex_color;
out vec2 uv;
uniform mat4 projection_view;
void main()
{
    gl_Position = projection_view * vec4(position, 1.0);
    vertex_color = colors;
    uv = tex_coords;
}
"""

_FRAGMENT_SHADER = """#version 150 core
in vec4 vertex_color;
in vec2 uv;
out vec4 final_color;
uniform sampler2D sprite_texture;
uniform float textured;
void main()
{
    vec4 color = mix(vertex_color, texture(sprite_texture, uv), textured);
    if (color.a < 0.01) discard;
    final_color = color;
}
"""


def cube_vertices(position: Vector3, size: Vector3) -> list[Vector3]:
    """Triangle vertices (12 triangles) of a box centred on ``position``."""
    half = size.scale(0.5)
    return [
        Vector3(position.x + sx * half.x, position.y + sy * half.y, position.z + sz * half.z)
        for face in _CUBE_FACES
        for sx, sy, sz in (face[i] for i in _QUAD)
    ]


def _grid_lines(slices: int, spacing: float) -> list[tuple[Vector3, Vector3]]:
    """Line segments of a square ground grid centred on the origin."""
    half = slices // 2
    extent = half * spacing
    lines = []
    for i in range(-half, half + 1):
        offset = i * spacing
        lines.append((Vector3(offset, 0.0, -extent), Vector3(offset, 0.0, extent)))
        lines.append((Vector3(-extent, 0.0, offset), Vector3(extent, 0.0, offset)))
    return lines


def _frame_uvs(rect: Rectangle, width: float, height: float, flipped: bool) -> tuple[float, float, float, float]:
    """Texture coordinates (left, bottom, right, top) of a sheet rectangle given y-down."""
    left, right = rect.x / width, (rect.x + rect.width) / width
    if flipped:
        left, right = 1.0 - left, 1.0 - right
    return left, 1.0 - (rect.y + rect.height) / height, right, 1.0 - rect.y / height


def _billboard_corners(camera: CameraState, center: Vector3, width: float, height: float) -> list[Vector3]:
    """Corners of an upright billboard facing the camera, counter-clockwise from bottom-left."""
    forward = camera.target - camera.position
    right = Vector3(-forward.z, 0.0, forward.x)
    right = right.normalized().scale(width / 2) if right.length() > 0 else Vector3(width / 2, 0.0, 0.0)
    up = Vector3(0.0, height / 2, 0.0)
    return [center - right - up, center + right - up, center + right + up, center - right + up]


def _flatten(vectors: Iterable[Vector3]) -> list[float]:
    return [component for vector in vectors for component in vector]


class _App:
    """The game window: input, per-frame updates and drawing."""

    def __init__(self, assets_dir: Path) -> None:
        import pyglet
        from pyglet import gl
        from pyglet.graphics.shader import Shader, ShaderProgram
        from pyglet.window import key

        self._pyglet, self._gl = pyglet, gl
        self._key_names = {
            key.W: KEY_FORWARD, key.S: KEY_BACK, key.A: KEY_LEFT, key.D: KEY_RIGHT,
            key.Q: KEY_ROTATE_LEFT, key.E: KEY_ROTATE_RIGHT, key.LSHIFT: KEY_RUN,
        }
        self.window = pyglet.window.Window(WINDOW_WIDTH, WINDOW_HEIGHT, "DUNGEONS")
        self._keys = key.KeyStateHandler()
        self.window.push_handlers(self._keys, self)

        self._game = Game()
        sprite = assets_dir / "Soldier.png"
        if sprite.is_file():
            texture = pyglet.image.load(str(sprite)).get_texture()
            self._game.textures = [(texture, False), (texture, True)]
        else:
            print(f"warning: sprite sheet {sprite} not found", file=sys.stderr)
        self._player = Player()
        self._menu = create_main_menu()
        self._dungeon = Dungeon()
        self._dungeon.load_first()
        self._dungeon.build()
        self._camera = CameraState(target=self._player.position)
        self._mouse, self._clicked, self._wheel = Vector2(), False, 0.0

        self._program = ShaderProgram(
            Shader(_VERTEX_SHADER, "vertex"), Shader(_FRAGMENT_SHADER, "fragment")
        )
        self._batch = pyglet.graphics.Batch()
        self._lists = [self._add(cube_vertices(FLOOR_POSITION, FLOOR_SIZE), DARKGRAY, gl.GL_TRIANGLES)]
        self._lists += [
            self._add(cube_vertices(wall.position, wall.size), wall.color, gl.GL_TRIANGLES)
            for wall in static_walls()
        ]
        grid = [point for line in _grid_lines(11, 20.0) for point in line]
        self._lists.append(self._add(grid, GRID_COLOR, gl.GL_LINES))
        self._sprite = self._program.vertex_list(
            6, gl.GL_TRIANGLES, position=("f", [0.0] * 18),
            colors=("Bn", tuple(WHITE) * 6), tex_coords=("f", [0.0] * 12),
        )
        self._build_menu()

    def _add(self, vertices: Sequence[Vector3], color: Color, mode: int) -> Any:
        return self._program.vertex_list(
            len(vertices), mode, batch=self._batch,
            position=("f", _flatten(vertices)), colors=("Bn", tuple(color) * len(vertices)),
        )

    def _build_menu(self) -> None:
        pyglet, height = self._pyglet, self.window.height
        self._menu_batch = pyglet.graphics.Batch()
        self._menu_items: list[Any] = [pyglet.text.Label(
            self._menu.title, font_size=TITLE_FONT_SIZE * 0.75, x=self.window.width / 2,
            y=height - 150.0, anchor_x="center", anchor_y="top", color=tuple(WHITE),
            batch=self._menu_batch,
        )]
        self._button_rects = []
        for button in self._menu.buttons:
            b = button.bounds
            y = height - b.y - b.height
            rect = pyglet.shapes.Rectangle(
                b.x, y, b.width, b.height, color=tuple(button.current_color()), batch=self._menu_batch
            )
            self._button_rects.append((button, rect))
            self._menu_items += [rect, pyglet.text.Label(
                button.text, font_size=15, x=b.x + b.width / 2, y=y + b.height / 2,
                anchor_x="center", anchor_y="center", color=tuple(WHITE), batch=self._menu_batch,
            )]

    def on_mouse_motion(self, x, y, dx, dy):
        self._mouse = Vector2(x, self.window.height - y)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self._mouse = Vector2(x, self.window.height - y)

    def on_mouse_press(self, x, y, button, modifiers):
        self._mouse = Vector2(x, self.window.height - y)
        self._clicked = self._clicked or button == self._pyglet.window.mouse.LEFT

    def on_mouse_scroll(self, x, y, scroll_x, scroll_y):
        self._wheel += scroll_y

    def update(self, delta_time: float) -> None:
        """Advance the game by one frame."""
        if self._game.game_state is GameState.MENU:
            self._menu.update(self._game, self._mouse, self._clicked)
        elif self._game.game_state is GameState.PLAYING:
            held = frozenset(name for symbol, name in self._key_names.items() if self._keys[symbol])
            self._player.update(delta_time, self._camera, Controls(held, self._wheel))
        self._clicked, self._wheel = False, 0.0
        if self._game.should_close:
            self._pyglet.clock.unschedule(self.update)
            self.window.close()
            self._pyglet.app.exit()

    def on_draw(self):
        gl = self._gl
        if self._game.game_state is GameState.MENU:
            gl.glDisable(gl.GL_DEPTH_TEST)
            gl.glClearColor(*(c / 255 for c in BLACK))
            self.window.clear()
            for button, rect in self._button_rects:
                rect.color = tuple(button.current_color())
            self._menu_batch.draw()
        elif self._game.game_state is GameState.PLAYING:
            self._draw_world()

    def _draw_world(self) -> None:
        from pyglet.math import Mat4, Vec3

        gl, camera = self._gl, self._camera
        gl.glClearColor(*(c / 255 for c in SKYBLUE))
        self.window.clear()
        gl.glEnable(gl.GL_DEPTH_TEST)
        projection = Mat4.perspective_projection(
            self.window.width / self.window.height, 0.01, 1000.0, camera.fovy
        )
        view = Mat4.look_at(Vec3(*camera.position), Vec3(*camera.target), Vec3(*camera.up))
        self._program.use()
        self._program["projection_view"] = projection @ view
        self._program["textured"] = 0.0
        self._batch.draw()

        rect = self._player.current_frame_rect()
        if self._game.textures and rect is not None:
            texture, flipped = self._game.textures[self._player.direction]
            left, bottom, right, top = _frame_uvs(rect, texture.width, texture.height, flipped)
            corners = _billboard_corners(
                camera, self._player.position,
                PLAYER_FRAME_WIDTH * PLAYER_SPRITE_SCALE, PLAYER_FRAME_HEIGHT * PLAYER_SPRITE_SCALE,
            )
            uvs = ((left, bottom), (right, bottom), (right, top), (left, top))
            self._sprite.position[:] = _flatten(corners[i] for i in _QUAD)
            self._sprite.tex_coords[:] = [c for i in _QUAD for c in uvs[i]]
            gl.glEnable(gl.GL_BLEND)
            gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
            gl.glActiveTexture(gl.GL_TEXTURE0)
            gl.glBindTexture(texture.target, texture.id)
            self._program["textured"] = 1.0
            self._sprite.draw(gl.GL_TRIANGLES)
        self._program.stop()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="dungeonwalk", description="Walk through a small 3D dungeon.")
    parser.add_argument("--assets", type=Path, default=Path("assets"),
                        help="directory holding the player sprite sheet (default: ./assets)")
    args = parser.parse_args(argv)

    import pyglet

    app = _App(args.assets)
    pyglet.clock.schedule_interval(app.update, 1 / TARGET_FPS)
    pyglet.app.run(1 / TARGET_FPS)
    return 0


if __name__ == "__main__":
    sys.exit(main())