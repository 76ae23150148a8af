"""A dungeon: a list of room layouts and the rooms built from them."""

from __future__ import annotations

from dataclasses import dataclass, field

from dungeonwalk.constants import (
    GRAY,
    GREEN,
    PURPLE,
    RED,
    STARTER_ROOM_CORNERS,
    Color,
)
from dungeonwalk.room import Room, Wall, build_room
from dungeonwalk.vectors import Vector2, Vector3

WALL_THICKNESS = 1.0
WALL_HEIGHT = 5.0
WALL_LENGTH = 20.0


def first_dungeon_layout() -> list[list[Vector2]]:
    """Corner lists of the five rooms of the first dungeon."""
    return [
        list(STARTER_ROOM_CORNERS),
        [Vector2(20.0, -40.0), Vector2(20.0, -20.0), Vector2(0.0, -20.0), Vector2(0.0, -40.0)],
        [Vector2(20.0, -60.0), Vector2(20.0, -40.0), Vector2(0.0, -40.0), Vector2(0.0, -60.0)],
        [Vector2(40.0, -60.0), Vector2(40.0, -40.0), Vector2(20.0, -40.0), Vector2(20.0, -60.0)],
        [Vector2(40.0, -80.0), Vector2(40.0, -60.0), Vector2(20.0, -60.0), Vector2(20.0, -80.0)],
    ]


def _wall(position: tuple[float, float, float], size: tuple[float, float, float], color: Color) -> Wall:
    return Wall(Vector3(*position), *size, color)


def static_walls() -> list[Wall]:
    """The hand-placed walls of the first dungeon, doorways included."""
    return [
        # first room
        _wall((20.0, 2.5, -10.0), (1.0, 10.0, 20.0), GRAY),
        _wall((10.0, 2.5, 0.0), (20.0, 10.0, 1.0), GRAY),
        _wall((0.0, 2.5, -10.0), (1.0, 10.0, 20.0), GRAY),
        _wall((2.5, 2.5, -20.0), (5.0, 10.0, 1.0), GRAY),
        _wall((17.5, 2.5, -20.0), (5.0, 10.0, 1.0), GRAY),
        # second room
        _wall((10.0, 2.5, -40.0), (20.0, 10.0, 1.0), RED),
        _wall((0.0, 2.5, -30.0), (1.0, 10.0, 20.0), RED),
        _wall((20.0, 2.5, -37.5), (1.0, 10.0, 5.0), RED),
        _wall((20.0, 2.5, -22.5), (1.0, 10.0, 5.0), RED),
        # third room
        _wall((40.0, 2.5, -30.0), (1.0, 10.0, 20.0), GREEN),
        _wall((30.0, 2.5, -20.0), (20.0, 10.0, 1.0), GREEN),
        _wall((22.5, 2.5, -40.0), (5.0, 10.0, 1.0), GREEN),
        _wall((37.5, 2.5, -40.0), (5.0, 10.0, 1.0), GREEN),
        # fourth room
        _wall((40.0, 2.5, -50.0), (1.0, 10.0, 20.0), PURPLE),
        _wall((20.0, 2.5, -50.0), (1.0, 10.0, 20.0), PURPLE),
        _wall((22.5, 2.5, -60.0), (5.0, 10.0, 1.0), PURPLE),
        _wall((37.5, 2.5, -60.0), (5.0, 10.0, 1.0), PURPLE),
        # fifth room
        _wall((40.0, 2.5, -70.0), (1.0, 10.0, 20.0), RED),
        _wall((20.0, 2.5, -70.0), (1.0, 10.0, 20.0), RED),
        _wall((30.0, 2.5, -80.0), (20.0, 10.0, 1.0), RED),
    ]


@dataclass
class Dungeon:
    """Rooms of a dungeon and the corner layouts they are built from."""

    rooms: list[Room] = field(default_factory=list)
    room_corners: list[list[Vector2]] = field(default_factory=list)

    def build_starter_room(self) -> None:
        """Append the starter room."""
        self.rooms.append(
            build_room(STARTER_ROOM_CORNERS, WALL_THICKNESS, WALL_HEIGHT, WALL_LENGTH)
        )

    def build(self) -> None:
        """Append one room for each corner layout."""
        self.rooms.extend(
            build_room(corners, WALL_THICKNESS, WALL_HEIGHT, WALL_LENGTH)
            for corners in self.room_corners
        )

    def load_first(self) -> None:
        """Load the corner layouts of the first dungeon."""
        self.room_corners = first_dungeon_layout()