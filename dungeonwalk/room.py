"""Rooms made of four box-shaped walls."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from dungeonwalk.constants import GRAY, RED, ROOM_HEIGHT, ROOM_WIDTH, Color
from dungeonwalk.vectors import Vector2, Vector3

WALL_CENTER_HEIGHT = 2.5


@dataclass
class Wall:
    """A box centred on ``position`` with extents along x, y and z."""

    position: Vector3
    width: float
    height: float
    length: float
    color: Color

    @property
    def size(self) -> Vector3:
        """Extents of the box as a vector."""
        return Vector3(self.width, self.height, self.length)


@dataclass
class Room:
    """A room located at ``position`` holding its walls."""

    width: float = 0.0
    height: float = 0.0
    position: Vector2 = field(default_factory=Vector2)
    walls: list[Wall] = field(default_factory=list)

    def add_wall(self, wall: Wall) -> None:
        """Append a wall to the room."""
        self.walls.append(wall)

    def init_walls(self) -> None:
        """Add four thin walls spaced by half the room width along x."""
        for i in range(4):
            self.walls.append(
                Wall(
                    Vector3(
                        self.position.x + self.width / 2 * i,
                        WALL_CENTER_HEIGHT,
                        self.position.y,
                    ),
                    1.0,
                    1.0,
                    20.0,
                    RED,
                )
            )

    def add_sample_walls(self) -> None:
        """Add a row of four sample walls near the origin."""
        for i in range(4):
            self.add_wall(Wall(Vector3(5.0 + 2 * i, 0.1, 0.0), 1.0, 5.0, 10.0, RED))


def build_room(corners: Sequence[Vector2], width: float, height: float, length: float) -> Room:
    """Build a room from its corners: upper right, lower right, lower left, upper left.

    ``width`` is the wall thickness, ``height`` its height and ``length`` its span.
    """
    if len(corners) < 4:
        raise ValueError(f"a room needs 4 corners, got {len(corners)}")
    upper_right, lower_right, lower_left, upper_left = corners[:4]

    east = Wall(
        Vector3(upper_right.x, WALL_CENTER_HEIGHT, upper_right.y + ROOM_HEIGHT / 2),
        width, height, length, GRAY,
    )
    south = Wall(
        Vector3(lower_right.x - ROOM_WIDTH / 2, WALL_CENTER_HEIGHT, lower_right.y),
        length, height, width, GRAY,
    )
    west = Wall(
        Vector3(lower_left.x, WALL_CENTER_HEIGHT, lower_left.y - ROOM_HEIGHT / 2),
        width, height, length, GRAY,
    )
    north = Wall(
        Vector3(upper_left.x + ROOM_WIDTH / 2, WALL_CENTER_HEIGHT, upper_left.y),
        length, height, width, GRAY,
    )
    return Room(walls=[east, south, west, north])