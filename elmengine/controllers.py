"""Keyboard and mouse driven controllers for the cameras."""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from elmengine.cameras import OrthographicCamera, PerspectiveCamera
from elmengine.events import Event, EventDispatcher, MouseMovedEvent, MouseScrolledEvent
from elmengine.input import InputState, Key, MouseButton
from elmengine.transforms import euler_to_mat4, rotate, translate

_IDENTITY = np.identity(4)


def _aspect(width: int, height: int) -> float:
    if height == 0:
        raise ValueError("viewport height must be non-zero")
    return float(width) / float(height)


class OrthographicCameraController:
    """Pans with WASD, optionally rotates with Q/E, zooms with the scroll wheel."""

    def __init__(
        self,
        aspect_ratio: float,
        enable_rotation: bool = False,
        *,
        input_state: InputState | None = None,
    ) -> None:
        self.input = input_state if input_state is not None else InputState()
        self._aspect_ratio = aspect_ratio
        self._zoom_level = 1.0
        self._enable_rotation = enable_rotation
        self._position = np.zeros(3)
        self._rotation_deg = 0.0  # anti-clockwise
        self._translation_speed = 1.0
        self._rotation_speed = 50.0
        self._camera = OrthographicCamera(*self._bounds())

    def _bounds(self) -> tuple[float, float, float, float]:
        a, z = self._aspect_ratio, self._zoom_level
        return -a * z, a * z, -z, z

    def on_update(self, ts: object) -> None:
        dt = float(ts)  # type: ignore[arg-type]
        step = self._translation_speed * dt
        angle = math.radians(self._rotation_deg)
        c, s = math.cos(angle), math.sin(angle)
        dirty = False

        if self.input.is_key_pressed(Key.A):
            self._position[0] -= c * step
            self._position[1] -= s * step
            dirty = True
        elif self.input.is_key_pressed(Key.D):
            self._position[0] += c * step
            self._position[1] += s * step
            dirty = True

        if self.input.is_key_pressed(Key.W):
            self._position[0] += -s * step
            self._position[1] += c * step
            dirty = True
        elif self.input.is_key_pressed(Key.S):
            self._position[0] -= -s * step
            self._position[1] -= c * step
            dirty = True

        if self._enable_rotation:
            if self.input.is_key_pressed(Key.Q):
                self._rotation_deg += self._rotation_speed * dt
                dirty = True
            elif self.input.is_key_pressed(Key.E):
                self._rotation_deg -= self._rotation_speed * dt
                dirty = True

        if dirty:
            if self._rotation_deg > 180.0:
                self._rotation_deg -= 360.0
            elif self._rotation_deg <= -180.0:
                self._rotation_deg += 360.0
            self._recalculate_view_matrix()

    def on_event(self, event: Event) -> None:
        EventDispatcher(event).dispatch(MouseScrolledEvent, self._on_mouse_scrolled)

    def resize_viewport(self, width: int, height: int) -> None:
        self._aspect_ratio = _aspect(width, height)
        self._camera.set_projection(*self._bounds())

    @property
    def zoom_level(self) -> float:
        return self._zoom_level

    @zoom_level.setter
    def zoom_level(self, level: float) -> None:
        self._zoom_level = level

    @property
    def camera(self) -> OrthographicCamera:
        return self._camera

    def _on_mouse_scrolled(self, event: MouseScrolledEvent) -> bool:
        self._zoom_level = max(self._zoom_level - event.offset_y * 0.25, 0.25)
        self._camera.set_projection(*self._bounds())
        self._translation_speed = self._zoom_level
        return False

    def _recalculate_view_matrix(self) -> None:
        transform = translate(_IDENTITY, self._position) @ rotate(
            _IDENTITY, math.radians(self._rotation_deg), (0.0, 0.0, 1.0)
        )
        self._camera.set_view_matrix(np.linalg.inv(transform))


class PerspectiveCameraController:
    """Flies with WASD/QE and looks around while the right mouse button is held.

    ``cursor_callback`` is told True when the cursor should be captured and
    False when it should be released.
    """

    def __init__(
        self,
        fov: float,
        aspect_ratio: float,
        near_clip: float = 0.01,
        far_clip: float = 10_000.0,
        *,
        input_state: InputState | None = None,
        cursor_callback: Callable[[bool], None] | None = None,
    ) -> None:
        self.input = input_state if input_state is not None else InputState()
        self._cursor_callback = cursor_callback
        self._camera = PerspectiveCamera(fov, aspect_ratio, near_clip, far_clip)

        self._movement_speed = 2.0
        self._sensitivity = 0.003

        self._position = np.zeros(3)
        self._pitch_rad = 0.0
        self._yaw_rad = 0.0
        self._roll_rad = 0.0

        self._last_mouse_x = 0.0
        self._last_mouse_y = 0.0
        self._is_panning = False

        self._moving_left = False
        self._moving_right = False
        self._moving_forward = False
        self._moving_backwards = False
        self._moving_up = False
        self._moving_down = False

    def on_update(self, ts: object) -> None:
        dt = float(ts)  # type: ignore[arg-type]
        step = self._movement_speed * dt
        c, s = math.cos(-self._yaw_rad), math.sin(-self._yaw_rad)
        pressed = self.input.is_key_pressed
        pos = self._position
        dirty = False

        if not self._moving_right and pressed(Key.A):
            self._moving_left = True
            pos[0] -= c * step
            pos[1] -= s * step
            dirty = True
        else:
            self._moving_left = False

        if not self._moving_left and pressed(Key.D):
            self._moving_right = True
            pos[0] += c * step
            pos[1] += s * step
            dirty = True
        else:
            self._moving_right = False

        if not self._moving_backwards and pressed(Key.W):
            self._moving_forward = True
            pos[0] += -s * step
            pos[1] += c * step
            dirty = True
        else:
            self._moving_forward = False

        if not self._moving_forward and pressed(Key.S):
            self._moving_backwards = True
            pos[0] -= -s * step
            pos[1] -= c * step
            dirty = True
        else:
            self._moving_backwards = False

        if not self._moving_down and pressed(Key.E):
            self._moving_up = True
            pos[2] += step
            dirty = True
        else:
            self._moving_up = False

        if not self._moving_up and pressed(Key.Q):
            self._moving_down = True
            pos[2] -= step
            dirty = True
        else:
            self._moving_down = False

        if self.input.is_mouse_button_pressed(MouseButton.BUTTON_1):
            if not self._is_panning:
                self._set_cursor_captured(True)
                self._last_mouse_x = self.input.mouse_x
                self._last_mouse_y = self.input.mouse_y
            self._is_panning = True
        else:
            if self._is_panning:
                self._set_cursor_captured(False)
            self._is_panning = False

        if dirty:
            self._recalculate_view_matrix()

    def on_event(self, event: Event) -> None:
        EventDispatcher(event).dispatch(MouseMovedEvent, self._on_mouse_moved)

    def resize_viewport(self, width: int, height: int) -> None:
        self._camera.aspect_ratio = _aspect(width, height)

    @property
    def camera(self) -> PerspectiveCamera:
        return self._camera

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: object) -> None:
        pos = np.array(value, dtype=float).reshape(-1)
        if pos.shape != (3,):
            raise ValueError("position needs three components")
        self._position = pos
        self._recalculate_view_matrix()

    @property
    def pitch_rad(self) -> float:
        return self._pitch_rad

    @pitch_rad.setter
    def pitch_rad(self, value: float) -> None:
        self._pitch_rad = value
        self._recalculate_view_matrix()

    @property
    def yaw_rad(self) -> float:
        return self._yaw_rad

    @yaw_rad.setter
    def yaw_rad(self, value: float) -> None:
        self._yaw_rad = value
        self._recalculate_view_matrix()

    @property
    def roll_rad(self) -> float:
        return self._roll_rad

    @roll_rad.setter
    def roll_rad(self, value: float) -> None:
        self._roll_rad = value
        self._recalculate_view_matrix()

    @property
    def pitch_deg(self) -> float:
        return math.degrees(self._pitch_rad)

    @pitch_deg.setter
    def pitch_deg(self, value: float) -> None:
        self.pitch_rad = math.radians(value)

    @property
    def yaw_deg(self) -> float:
        return math.degrees(self._yaw_rad)

    @yaw_deg.setter
    def yaw_deg(self, value: float) -> None:
        self.yaw_rad = math.radians(value)

    @property
    def roll_deg(self) -> float:
        return math.degrees(self._roll_rad)

    @roll_deg.setter
    def roll_deg(self, value: float) -> None:
        self.roll_rad = math.radians(value)

    def _set_cursor_captured(self, captured: bool) -> None:
        if self._cursor_callback is not None:
            self._cursor_callback(captured)

    def _on_mouse_moved(self, event: MouseMovedEvent) -> bool:
        if not self._is_panning:
            return False

        delta_x = event.x - self._last_mouse_x
        delta_y = event.y - self._last_mouse_y
        self._last_mouse_x = event.x
        self._last_mouse_y = event.y

        self._pitch_rad = min(max(self._pitch_rad + delta_y * self._sensitivity, -180.0), 0.0)
        self._yaw_rad += delta_x * self._sensitivity

        self._recalculate_view_matrix()
        return False

    def _recalculate_view_matrix(self) -> None:
        orientation = euler_to_mat4((-self._pitch_rad, -self._roll_rad, -self._yaw_rad))
        transform = translate(_IDENTITY, self._position) @ orientation
        self._camera.set_view_matrix(np.linalg.inv(transform))