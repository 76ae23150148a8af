"""Game-wide constants: window, sprites, camera, rooms and colours."""

from typing import NamedTuple

from dungeonwalk.vectors import Vector2


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


GRAY = Color(130, 130, 130)
DARKGRAY = Color(80, 80, 80)
RED = Color(230, 41, 55)
GREEN = Color(0, 228, 48)
PURPLE = Color(200, 122, 255)
BLUE = Color(0, 121, 241)
SKYBLUE = Color(102, 191, 255)
PINK = Color(255, 109, 194)
BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

TITLE_FONT_SIZE = 50

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800

PLAYER_SPRITE_SHEET_WIDTH = 900
PLAYER_SPRITE_SHEET_HEIGHT = 700

PLAYER_FRAME_WIDTH = 100
PLAYER_FRAME_HEIGHT = 100
PLAYER_FRAME_NUM = 9

PLAYER_IDLE_INDEX = 0
PLAYER_WALK_INDEX = 1

PLAYER_IDLE_SPEED = 0.5
PLAYER_WALK_SPEED = 0.1

PLAYER_SPRITE_SCALE = 0.0625

CAMERA_ROTATION_SPEED = 1.5
CAMERA_MIN_DISTANCE = 5.0
CAMERA_MAX_DISTANCE = 7.0
CAMERA_ZOOM_SPEED = 75.0
CAMERA_HEIGHT = 2.0
CAMERA_FOLLOW_SPEED = 5.0

ROOM_UPPER_RIGHT_CORNER = Vector2(20.0, -20.0)
ROOM_LOWER_RIGHT_CORNER = Vector2(20.0, 0.0)
ROOM_LOWER_LEFT_CORNER = Vector2(0.0, 0.0)
ROOM_UPPER_LEFT_CORNER = Vector2(0.0, -20.0)
ROOM_WIDTH = 20.0
ROOM_HEIGHT = ROOM_WIDTH

STARTER_ROOM_CORNERS = (
    ROOM_UPPER_RIGHT_CORNER,
    ROOM_LOWER_RIGHT_CORNER,
    ROOM_LOWER_LEFT_CORNER,
    ROOM_UPPER_LEFT_CORNER,
)