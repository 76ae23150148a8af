"""Small immutable vector and rectangle types used by the game."""

from __future__ import annotations

import math
from dataclasses import dataclass


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the closed range ``[low, high]``."""
    result = low if value < low else value
    return high if result > high else result


@dataclass(frozen=True)
class Vector2:
    """A point or direction in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Vector3:
    """A point or direction in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vector3:
        return self.scale(factor)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector is returned unchanged."""
        length = self.length()
        if length == 0.0:
            return self
        return self.scale(1.0 / length)

    def scale(self, factor: float) -> Vector3:
        """Vector multiplied by a scalar."""
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def lerp(self, other: Vector3, amount: float) -> Vector3:
        """Linear interpolation from this vector towards ``other``."""
        return Vector3(
            self.x + amount * (other.x - self.x),
            self.y + amount * (other.y - self.y),
            self.z + amount * (other.z - self.z),
        )

    def move_towards(self, target: Vector3, max_distance: float) -> Vector3:
        """Step towards ``target`` by at most ``max_distance``."""
        delta = target - self
        squared = delta.x * delta.x + delta.y * delta.y + delta.z * delta.z
        if squared == 0.0 or (max_distance >= 0 and squared <= max_distance * max_distance):
            return target
        distance = math.sqrt(squared)
        return self + delta.scale(max_distance / distance)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Vector2) -> bool:
        """Whether ``point`` lies inside; the right and bottom edges are excluded."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )