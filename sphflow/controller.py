"""First-person camera controller driven by keys and pointer input."""

from __future__ import annotations

import math
from enum import Enum
from typing import NamedTuple

ROTATION_GAIN = 0.004
MOVEMENT_GAIN = 0.1

_DEAD_ZONE = 16.0
_JOYSTICK_MAX_X = 300.0
_JOYSTICK_MIN_Y = 380.0


class Vec3(NamedTuple):
    """A 3D point or vector."""

    x: float
    y: float
    z: float


class Key(Enum):
    """Keys that steer the camera."""

    W = "w"
    S = "s"
    A = "a"
    D = "d"
    X = "x"
    SPACE = "space"


class MoveLookController:
    """Camera controller with a touch joystick, pointer look and WASD keys.

    A touch pressed in the lower-left corner of the screen acts as a
    movement joystick; any other press (and every mouse press) steers the
    view direction. Key presses accumulate into the movement command that
    ``update`` applies once per frame.
    """

    def __init__(self) -> None:
        self.position = Vec3(-1.6, 7.9, 9.6)
        self.pitch = -0.65
        self.yaw = -3.61

        self.move_in_use = False
        self.move_pointer_id = 0
        self.move_first_down = (0.0, 0.0)
        self.move_pointer_position = (0.0, 0.0)
        self._move_command = [0.0, 0.0, 0.0]

        self.look_in_use = False
        self.look_pointer_id = 0
        self.look_last_point = (0.0, 0.0)

        self._held: set[Key] = set()

    def press_pointer(self, pointer_id: int, x: float, y: float, is_mouse: bool) -> None:
        """Start a joystick or look gesture with the given pointer."""
        position = (x, y)
        in_joystick = x < _JOYSTICK_MAX_X and y > _JOYSTICK_MIN_Y
        if in_joystick and not is_mouse:
            if not self.move_in_use:
                self.move_first_down = position
                self.move_pointer_position = position
                self.move_pointer_id = pointer_id
                self.move_in_use = True
        elif not self.look_in_use:
            self.look_last_point = position
            self.look_pointer_id = pointer_id
            self.look_in_use = True

    def move_pointer(self, pointer_id: int, x: float, y: float) -> None:
        """Track a pointer; the look pointer turns the camera."""
        if pointer_id == self.move_pointer_id:
            self.move_pointer_position = (x, y)
        elif pointer_id == self.look_pointer_id:
            last_x, last_y = self.look_last_point
            self.look_last_point = (x, y)
            # Screen y grows downwards while pitch grows upwards.
            self.pitch -= (y - last_y) * ROTATION_GAIN
            self.yaw -= (x - last_x) * ROTATION_GAIN
            half_pi = math.pi / 2
            self.pitch = min(half_pi, max(-half_pi, self.pitch))

    def release_pointer(self, pointer_id: int) -> None:
        """End the gesture that the pointer was driving."""
        if pointer_id == self.move_pointer_id:
            self.move_in_use = False
            self.move_pointer_id = 0
        elif pointer_id == self.look_pointer_id:
            self.look_in_use = False
            self.look_pointer_id = 0

    @staticmethod
    def _as_key(key: Key | str) -> Key | None:
        if isinstance(key, Key):
            return key
        try:
            return Key(str(key).lower())
        except ValueError:
            return None

    def key_down(self, key: Key | str) -> None:
        """Record a pressed key; keys that do not steer are ignored."""
        resolved = self._as_key(key)
        if resolved is not None:
            self._held.add(resolved)

    def key_up(self, key: Key | str) -> None:
        """Record a released key."""
        resolved = self._as_key(key)
        if resolved is not None:
            self._held.discard(resolved)

    def look_target(self) -> Vec3:
        """Point one unit ahead of the camera along its view direction."""
        y = math.sin(self.pitch)
        r = math.cos(self.pitch)
        z = r * math.cos(self.yaw)
        x = r * math.sin(self.yaw)
        px, py, pz = self.position
        return Vec3(x + px, y + py, z + pz)

    def update(self) -> None:
        """Apply the accumulated movement command for one frame."""
        command = self._move_command
        if self.move_in_use:
            dx = self.move_pointer_position[0] - self.move_first_down[0]
            dy = self.move_pointer_position[1] - self.move_first_down[1]
            if dx > _DEAD_ZONE:
                command[0] = 1.0
            elif dx < -_DEAD_ZONE:
                command[0] = -1.0
            if dy > _DEAD_ZONE:
                command[1] = -1.0
            elif dy < -_DEAD_ZONE:
                command[1] = 1.0

        held = self._held
        if Key.W in held:
            command[1] += 1.0
        if Key.S in held:
            command[1] -= 1.0
        if Key.A in held:
            command[0] -= 1.0
        if Key.D in held:
            command[0] += 1.0
        if Key.X in held:
            command[2] += 1.0
        if Key.SPACE in held:
            command[2] -= 1.0

        cx, cy, cz = command
        if abs(cx) > 0.1 or abs(cy) > 0.1 or abs(cz) > 0.1:
            length = math.sqrt(cx * cx + cy * cy + cz * cz)
            cx, cy, cz = cx / length, cy / length, cz / length

        cos_yaw = math.cos(self.yaw)
        sin_yaw = math.sin(self.yaw)
        wx = (cx * cos_yaw - cy * sin_yaw) * MOVEMENT_GAIN
        wy = (cx * sin_yaw + cy * cos_yaw) * MOVEMENT_GAIN
        wz = cz * MOVEMENT_GAIN

        # y is the vertical axis of the world.
        px, py, pz = self.position
        self.position = Vec3(px - wx, py + wz, pz + wy)

        self._move_command = [0.0, 0.0, 0.0]