import math

import pytest

from dungeonwalk.constants import (
    CAMERA_FOLLOW_SPEED,
    CAMERA_HEIGHT,
    CAMERA_MAX_DISTANCE,
    CAMERA_MIN_DISTANCE,
    PLAYER_FRAME_HEIGHT,
    PLAYER_FRAME_NUM,
    PLAYER_FRAME_WIDTH,
    PLAYER_IDLE_INDEX,
    PLAYER_IDLE_SPEED,
    PLAYER_WALK_INDEX,
    PLAYER_WALK_SPEED,
)
from dungeonwalk.player import (
    Action,
    AnimationData,
    CameraState,
    Controls,
    Direction,
    Player,
    load_sprites_into_rectangles,
    movement_input,
    update_camera,
)
from dungeonwalk.vectors import Rectangle, Vector3


def test_sprite_rectangles_forward_and_flipped():
    frames, flipped = load_sprites_into_rectangles(9, 1, 3, 100, 50)
    assert len(frames) == 9 - 3
    assert len(flipped) == 9 - 3
    assert frames[0] == Rectangle(0.0, 50.0, 100.0, 50.0)
    assert flipped[0] == Rectangle(800.0, 50.0, 100.0, 50.0)
    assert flipped[-1].x == 3 * 100
    xs = [r.x for r in flipped]
    assert xs == sorted(xs, reverse=True)
    assert all(r.y == 50.0 for r in frames + flipped)


def test_sprite_rectangles_zero_offset_mirror_each_other():
    frames, flipped = load_sprites_into_rectangles(4, 0, 0, 10, 10)
    assert flipped == list(reversed(frames))


def test_player_defaults_load_animations():
    player = Player()
    idle, idle_flipped = load_sprites_into_rectangles(
        PLAYER_FRAME_NUM, PLAYER_IDLE_INDEX, 3, PLAYER_FRAME_WIDTH, PLAYER_FRAME_HEIGHT
    )
    walk, walk_flipped = load_sprites_into_rectangles(
        PLAYER_FRAME_NUM, PLAYER_WALK_INDEX, 1, PLAYER_FRAME_WIDTH, PLAYER_FRAME_HEIGHT
    )
    assert player.animations == [idle, idle_flipped, walk, walk_flipped]
    assert player.animation_data == [
        AnimationData(PLAYER_IDLE_SPEED),
        AnimationData(PLAYER_IDLE_SPEED),
        AnimationData(PLAYER_WALK_SPEED),
        AnimationData(PLAYER_WALK_SPEED),
    ]
    assert player.action is Action.IDLE_RIGHT
    assert player.direction is Direction.RIGHT
    assert player.position == Vector3(10.0, 0.1, -10.0)


def test_load_animations_replaces_previous():
    player = Player()
    player.load_animations(PLAYER_FRAME_NUM, PLAYER_FRAME_WIDTH, PLAYER_FRAME_HEIGHT)
    assert len(player.animations) == 4
    assert len(player.animation_data) == 4


def test_movement_input_forward_at_zero_angle():
    movement = movement_input(0.0, {"w"})
    assert movement.x == pytest.approx(0.0)
    assert movement.y == pytest.approx(0.0)
    assert movement.z == pytest.approx(-1.0)


def test_movement_input_no_keys_is_zero():
    assert movement_input(1.0, set()) == Vector3()


def test_movement_input_opposite_keys_cancel():
    assert movement_input(0.3, {"w", "s"}).length() == pytest.approx(0.0)


def test_movement_input_diagonal_is_unit():
    assert movement_input(0.7, {"w", "d"}).length() == pytest.approx(1.0)


def test_movement_input_left_and_right_are_opposite():
    left = movement_input(0.4, {"a"})
    right = movement_input(0.4, {"d"})
    assert (left + right).length() == pytest.approx(0.0)


def test_update_facing_direction():
    player = Player()
    player.update_facing_direction({"a"})
    assert player.direction is Direction.LEFT
    player.update_facing_direction({"w"})
    assert player.direction is Direction.LEFT
    player.update_facing_direction({"d"})
    assert player.direction is Direction.RIGHT


def test_apply_movement_accelerates_by_rate():
    player = Player()
    start = player.position
    dt = 0.1
    player.apply_movement(Vector3(1.0, 0.0, 0.0), dt, running=False)
    assert player.current_velocity.length() == pytest.approx(player.acceleration * dt)
    expected = start + player.current_velocity.scale(dt)
    assert player.position.x == pytest.approx(expected.x)
    assert player.position.z == pytest.approx(expected.z)


@pytest.mark.parametrize("running", [False, True])
def test_apply_movement_reaches_target_speed(running):
    player = Player()
    player.apply_movement(Vector3(0.0, 0.0, 1.0), 10.0, running=running)
    speed = player.run_speed if running else player.walk_speed
    assert player.current_velocity == Vector3(0.0, 0.0, speed)


def test_apply_movement_decelerates_to_rest():
    player = Player(current_velocity=Vector3(1.0, 0.0, 0.0))
    player.apply_movement(Vector3(), 1.0, running=False)
    assert player.current_velocity == Vector3()


def test_action_state_walk_and_idle():
    player = Player(current_velocity=Vector3(1.0, 0.0, 0.0), direction=Direction.LEFT)
    player.update_action_state()
    assert player.action is Action.WALK_LEFT
    player.current_velocity = Vector3(0.05, 0.0, 0.0)
    player.update_action_state()
    assert player.action is Action.IDLE_LEFT
    player.direction = Direction.RIGHT
    player.update_action_state()
    assert player.action is Action.IDLE_RIGHT


def test_update_animation_below_duration_keeps_frame():
    player = Player()
    player.update_animation(PLAYER_IDLE_SPEED / 4)
    assert player.current_frame == 0
    assert player.anim_time == pytest.approx(PLAYER_IDLE_SPEED / 4)


def test_update_animation_advances_and_wraps():
    player = Player()
    player.update_animation(PLAYER_IDLE_SPEED)
    assert player.current_frame == 1
    assert player.anim_time == 0.0
    player.current_frame = len(player.animations[Action.IDLE_RIGHT]) - 1
    player.update_animation(PLAYER_IDLE_SPEED)
    assert player.current_frame == 0


def test_update_camera_zoom_is_clamped():
    camera = CameraState()
    update_camera(camera, Vector3(), Controls(wheel=100.0), 1.0)
    assert camera.distance == CAMERA_MIN_DISTANCE
    update_camera(camera, Vector3(), Controls(wheel=-100.0), 1.0)
    assert camera.distance == CAMERA_MAX_DISTANCE


def test_update_camera_rotation_wraps_into_range():
    camera = CameraState()
    update_camera(camera, Vector3(), Controls(keys=frozenset({"q"})), 0.5)
    assert 0.0 <= camera.rotation_angle < 2 * math.pi
    assert camera.rotation_angle > math.pi


def test_update_camera_follows_player():
    camera = CameraState()
    target = Vector3(3.0, 1.0, -4.0)
    update_camera(camera, target, Controls(), 1.0 / CAMERA_FOLLOW_SPEED)
    assert camera.target == target
    assert camera.position.x == pytest.approx(target.x)
    assert camera.position.y == pytest.approx(target.y + CAMERA_HEIGHT)
    assert camera.position.z == pytest.approx(target.z + camera.distance)


def test_player_update_walks_and_moves_camera_target():
    player = Player()
    camera = CameraState()
    controls = Controls(keys=frozenset({"d"}))
    start = player.position
    for _ in range(10):
        player.update(0.05, camera, controls)
    assert player.action is Action.WALK_RIGHT
    assert player.position.x > start.x
    assert camera.target == player.position


def test_player_update_action_change_rescales_time():
    player = Player()
    player.anim_time = PLAYER_IDLE_SPEED / 2
    player.current_frame = 3
    dt = 0.02
    player.update(dt, CameraState(), Controls(keys=frozenset({"a"})))
    assert player.action is Action.WALK_LEFT
    assert player.current_frame == 0
    assert player.anim_time == pytest.approx(PLAYER_WALK_SPEED / 2 + dt)


def test_current_frame_rect():
    player = Player()
    assert player.current_frame_rect() == player.animations[Action.IDLE_RIGHT][0]
    player.current_frame = len(player.animations[Action.IDLE_RIGHT])
    assert player.current_frame_rect() is None
    player.current_frame = 0
    player.action = Action.DIE_LEFT
    assert player.current_frame_rect() is None