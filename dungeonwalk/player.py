"""The player: movement, facing, sprite animation and the following camera."""

from __future__ import annotations

import math
from collections.abc import Container
from dataclasses import dataclass, field
from enum import IntEnum

from dungeonwalk.constants import (
    CAMERA_FOLLOW_SPEED,
    CAMERA_HEIGHT,
    CAMERA_MAX_DISTANCE,
    CAMERA_MIN_DISTANCE,
    CAMERA_ROTATION_SPEED,
    CAMERA_ZOOM_SPEED,
    PLAYER_FRAME_HEIGHT,
    PLAYER_FRAME_NUM,
    PLAYER_FRAME_WIDTH,
    PLAYER_IDLE_INDEX,
    PLAYER_IDLE_SPEED,
    PLAYER_WALK_INDEX,
    PLAYER_WALK_SPEED,
)
from dungeonwalk.vectors import Rectangle, Vector3, clamp

KEY_FORWARD = "w"
KEY_BACK = "s"
KEY_LEFT = "a"
KEY_RIGHT = "d"
KEY_ROTATE_LEFT = "q"
KEY_ROTATE_RIGHT = "e"
KEY_RUN = "shift"


class Action(IntEnum):
    """What the player is doing; doubles as the index of its animation."""

    IDLE_RIGHT = 0
    IDLE_LEFT = 1
    WALK_RIGHT = 2
    WALK_LEFT = 3
    ATTACK_RIGHT = 4
    ATTACK_LEFT = 5
    DIE_RIGHT = 6
    DIE_LEFT = 7


class Direction(IntEnum):
    """The way the player faces; doubles as the index of its texture."""

    RIGHT = 0
    LEFT = 1


@dataclass(frozen=True)
class AnimationData:
    frame_duration: float


@dataclass(frozen=True)
class Controls:
    """Input of one frame: keys held down and mouse wheel movement."""

    keys: frozenset[str] = frozenset()
    wheel: float = 0.0


@dataclass
class CameraState:
    """A perspective camera orbiting the player."""

    position: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, -5.0))
    target: Vector3 = field(default_factory=Vector3)
    up: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    fovy: float = 55.0
    rotation_angle: float = 0.0
    distance: float = 5.0


def load_sprites_into_rectangles(frame_count, row_index, frame_offset, frame_width, frame_height):
    """Frame rectangles of one sprite-sheet row, forwards and mirrored."""

    def frame(column: int) -> Rectangle:
        return Rectangle(
            float(column * frame_width), float(row_index * frame_height),
            float(frame_width), float(frame_height),
        )

    frames = [frame(i) for i in range(frame_count - frame_offset)]
    flipped = [frame(i) for i in range(frame_count - 1, frame_offset - 1, -1)]
    return frames, flipped


def movement_input(rotation_angle: float, keys: Container[str]) -> Vector3:
    """Unit movement direction relative to the camera, or the zero vector."""
    forward = Vector3(math.sin(rotation_angle), 0.0, math.cos(rotation_angle)).normalized()
    movement = Vector3()
    if KEY_FORWARD in keys:
        movement = movement + -forward
    if KEY_BACK in keys:
        movement = movement + forward
    if KEY_LEFT in keys:
        movement = movement + Vector3(-forward.z, 0.0, forward.x)
    if KEY_RIGHT in keys:
        movement = movement + Vector3(forward.z, 0.0, -forward.x)
    return movement.normalized() if movement.length() > 0 else movement


def update_camera(camera: CameraState, player_position: Vector3, controls: Controls, delta_time: float) -> None:
    """Rotate and zoom the camera from input, then ease it towards the player."""
    if KEY_ROTATE_LEFT in controls.keys:
        camera.rotation_angle -= CAMERA_ROTATION_SPEED * delta_time
    if KEY_ROTATE_RIGHT in controls.keys:
        camera.rotation_angle += CAMERA_ROTATION_SPEED * delta_time
    if controls.wheel != 0:
        camera.distance = clamp(
            camera.distance - controls.wheel * CAMERA_ZOOM_SPEED * delta_time,
            CAMERA_MIN_DISTANCE, CAMERA_MAX_DISTANCE,
        )
    camera.rotation_angle = math.fmod(camera.rotation_angle, 2 * math.pi)
    if camera.rotation_angle < 0:
        camera.rotation_angle += 2 * math.pi

    offset = Vector3(
        math.sin(camera.rotation_angle) * camera.distance,
        CAMERA_HEIGHT,
        math.cos(camera.rotation_angle) * camera.distance,
    )
    camera.position = camera.position.lerp(player_position + offset, CAMERA_FOLLOW_SPEED * delta_time)
    camera.target = player_position


@dataclass
class Player:
    """The player character."""

    position: Vector3 = field(default_factory=lambda: Vector3(10.0, 0.1, -10.0))
    size: Vector3 = field(default_factory=lambda: Vector3(5.0, 5.0, 5.0))
    current_velocity: Vector3 = field(default_factory=Vector3)
    acceleration: float = 10.0
    deceleration: float = 15.0
    walk_speed: float = 2.0
    run_speed: float = 4.0
    animations: list[list[Rectangle]] = field(default_factory=list)
    animation_data: list[AnimationData] = field(default_factory=list)
    current_frame: int = 0
    anim_time: float = 0.0
    action: Action = Action.IDLE_RIGHT
    direction: Direction = Direction.RIGHT

    def __post_init__(self) -> None:
        if not self.animations:
            self.load_animations(PLAYER_FRAME_NUM, PLAYER_FRAME_WIDTH, PLAYER_FRAME_HEIGHT)

    def load_animations(self, num_frames: int, frame_width: int, frame_height: int) -> None:
        """Replace the animations with idle and walk, each facing right and left."""
        self.animations = []
        self.animation_data = []
        for row, offset, duration in (
            (PLAYER_IDLE_INDEX, 3, PLAYER_IDLE_SPEED),
            (PLAYER_WALK_INDEX, 1, PLAYER_WALK_SPEED),
        ):
            self.animations.extend(
                load_sprites_into_rectangles(num_frames, row, offset, frame_width, frame_height)
            )
            self.animation_data.extend((AnimationData(duration),) * 2)

    def update_facing_direction(self, keys: Container[str]) -> None:
        if KEY_RIGHT in keys:
            self.direction = Direction.RIGHT
        if KEY_LEFT in keys:
            self.direction = Direction.LEFT

    def apply_movement(self, movement: Vector3, delta_time: float, running: bool) -> None:
        """Accelerate towards the wanted velocity and move by it."""
        rate = self.acceleration if movement.length() > 0 else self.deceleration
        target = movement.scale(self.run_speed if running else self.walk_speed)
        self.current_velocity = self.current_velocity.move_towards(target, rate * delta_time)
        self.position = self.position + self.current_velocity.scale(delta_time)

    def update_action_state(self) -> None:
        right = self.direction == Direction.RIGHT
        if self.current_velocity.length() > 0.1:
            self.action = Action.WALK_RIGHT if right else Action.WALK_LEFT
        else:
            self.action = Action.IDLE_RIGHT if right else Action.IDLE_LEFT

    def update_animation(self, delta_time: float) -> None:
        self.anim_time += delta_time
        if self.anim_time >= self.animation_data[self.action].frame_duration:
            self.anim_time = 0.0
            self.current_frame = (self.current_frame + 1) % len(self.animations[self.action])

    def update(self, delta_time: float, camera: CameraState, controls: Controls) -> None:
        """Run one frame of player logic and move the camera after the player."""
        previous = self.action
        movement = movement_input(camera.rotation_angle, controls.keys)
        self.update_facing_direction(controls.keys)
        self.apply_movement(movement, delta_time, KEY_RUN in controls.keys)
        self.update_action_state()
        if self.action != previous:
            progress = self.anim_time / self.animation_data[previous].frame_duration
            self.current_frame = 0
            self.anim_time = progress * self.animation_data[self.action].frame_duration
        self.update_animation(delta_time)
        update_camera(camera, self.position, controls, delta_time)

    def current_frame_rect(self) -> Rectangle | None:
        """Sprite-sheet rectangle of the frame to draw, or None if there is none."""
        if self.action >= len(self.animations):
            return None
        frames = self.animations[self.action]
        return frames[self.current_frame] if 0 <= self.current_frame < len(frames) else None