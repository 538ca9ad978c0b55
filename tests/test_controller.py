import math

import pytest

from sphflow.controller import (
    MOVEMENT_GAIN,
    ROTATION_GAIN,
    Key,
    MoveLookController,
    Vec3,
)


@pytest.fixture
def ctrl():
    c = MoveLookController()
    c.position = Vec3(0.0, 0.0, 0.0)
    c.pitch = 0.0
    c.yaw = 0.0
    return c


def test_initial_state():
    c = MoveLookController()
    assert c.position == pytest.approx((-1.6, 7.9, 9.6))
    assert c.pitch == pytest.approx(-0.65)
    assert c.yaw == pytest.approx(-3.61)
    assert not c.move_in_use and not c.look_in_use


def test_update_without_input_keeps_position(ctrl):
    ctrl.update()
    assert ctrl.position == pytest.approx((0.0, 0.0, 0.0))


def test_forward_key_moves_along_z(ctrl):
    ctrl.key_down(Key.W)
    ctrl.update()
    assert ctrl.position == pytest.approx((0.0, 0.0, MOVEMENT_GAIN))


def test_forward_and_back_cancel(ctrl):
    ctrl.key_down(Key.W)
    ctrl.key_down(Key.S)
    ctrl.update()
    assert ctrl.position == pytest.approx((0.0, 0.0, 0.0))


def test_up_and_down_keys(ctrl):
    ctrl.key_down("x")
    ctrl.update()
    assert ctrl.position.y == pytest.approx(MOVEMENT_GAIN)
    ctrl.key_up("x")
    ctrl.key_down("space")
    ctrl.update()
    assert ctrl.position.y == pytest.approx(0.0)


def test_diagonal_movement_is_normalised(ctrl):
    ctrl.key_down(Key.W)
    ctrl.key_down(Key.D)
    ctrl.update()
    assert math.dist(ctrl.position, (0.0, 0.0, 0.0)) == pytest.approx(MOVEMENT_GAIN)


def test_key_up_stops_movement(ctrl):
    ctrl.key_down(Key.A)
    ctrl.update()
    first = ctrl.position
    ctrl.key_up(Key.A)
    ctrl.update()
    assert ctrl.position == pytest.approx(first)


def test_unknown_key_is_ignored(ctrl):
    ctrl.key_down("q")
    ctrl.update()
    assert ctrl.position == pytest.approx((0.0, 0.0, 0.0))


def test_movement_follows_yaw(ctrl):
    ctrl.yaw = 0.7
    ctrl.key_down(Key.W)
    ctrl.update()
    target = ctrl.look_target()
    # forward moves in the horizontal plane by the gain
    assert ctrl.position.y == pytest.approx(0.0)
    assert math.hypot(ctrl.position.x, ctrl.position.z) == pytest.approx(MOVEMENT_GAIN)
    assert math.dist(target, ctrl.position) == pytest.approx(1.0)


def test_look_target_is_unit_distance():
    c = MoveLookController()
    assert math.dist(c.look_target(), c.position) == pytest.approx(1.0)


def test_look_pointer_rotates(ctrl):
    ctrl.press_pointer(1, 500.0, 100.0, True)
    assert ctrl.look_in_use
    ctrl.move_pointer(1, 510.0, 105.0)
    assert ctrl.yaw == pytest.approx(-10.0 * ROTATION_GAIN)
    assert ctrl.pitch == pytest.approx(-5.0 * ROTATION_GAIN)


def test_pitch_is_clamped(ctrl):
    ctrl.press_pointer(1, 500.0, 100.0, True)
    ctrl.move_pointer(1, 500.0, -100000.0)
    assert ctrl.pitch == pytest.approx(math.pi / 2)
    ctrl.move_pointer(1, 500.0, 100000.0)
    assert ctrl.pitch == pytest.approx(-math.pi / 2)


def test_mouse_in_joystick_zone_is_look(ctrl):
    ctrl.press_pointer(1, 100.0, 400.0, True)
    assert ctrl.look_in_use
    assert not ctrl.move_in_use


def test_touch_joystick_moves(ctrl):
    ctrl.press_pointer(2, 100.0, 400.0, False)
    assert ctrl.move_in_use and ctrl.move_pointer_id == 2
    ctrl.move_pointer(2, 150.0, 400.0)
    ctrl.update()
    assert ctrl.position == pytest.approx((-MOVEMENT_GAIN, 0.0, 0.0))


def test_joystick_dead_zone(ctrl):
    ctrl.press_pointer(2, 100.0, 400.0, False)
    ctrl.move_pointer(2, 110.0, 390.0)
    ctrl.update()
    assert ctrl.position == pytest.approx((0.0, 0.0, 0.0))


def test_release_joystick_stops(ctrl):
    ctrl.press_pointer(2, 100.0, 400.0, False)
    ctrl.move_pointer(2, 150.0, 400.0)
    ctrl.release_pointer(2)
    assert not ctrl.move_in_use
    assert ctrl.move_pointer_id == 0
    ctrl.update()
    assert ctrl.position == pytest.approx((0.0, 0.0, 0.0))


def test_release_look_pointer(ctrl):
    ctrl.press_pointer(3, 600.0, 100.0, False)
    ctrl.release_pointer(3)
    assert not ctrl.look_in_use
    assert ctrl.look_pointer_id == 0


def test_second_look_press_ignored(ctrl):
    ctrl.press_pointer(3, 600.0, 100.0, False)
    ctrl.press_pointer(4, 700.0, 100.0, False)
    assert ctrl.look_pointer_id == 3