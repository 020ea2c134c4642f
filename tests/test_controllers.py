import math

import numpy as np
import pytest

from elmengine.controllers import OrthographicCameraController, PerspectiveCameraController
from elmengine.events import MouseMovedEvent, MouseScrolledEvent
from elmengine.input import InputState, Key, MouseButton
from elmengine.timestep import Timestep
from elmengine.transforms import ortho, rotate

I4 = np.identity(4)


def _camera_world(controller):
    return np.linalg.inv(controller.camera.view_matrix)


# --- Orthographic -----------------------------------------------------------


def test_ortho_initial_projection_uses_zoom_one():
    ctrl = OrthographicCameraController(1.5)
    assert ctrl.zoom_level == 1.0
    assert np.allclose(ctrl.camera.projection_matrix, ortho(-1.5, 1.5, -1.0, 1.0, -1.0, 1.0))


def test_ortho_moves_right_with_d():
    state = InputState()
    ctrl = OrthographicCameraController(1.0, input_state=state)
    state.press_key(Key.D)
    ctrl.on_update(Timestep(0.5))
    assert np.allclose(_camera_world(ctrl)[:3, 3], [0.5, 0.0, 0.0])


def test_ortho_a_takes_precedence_over_d():
    state = InputState()
    ctrl = OrthographicCameraController(1.0, input_state=state)
    state.press_key(Key.A)
    state.press_key(Key.D)
    ctrl.on_update(Timestep(0.5))
    assert _camera_world(ctrl)[0, 3] < 0.0


def test_ortho_no_input_leaves_view_untouched():
    ctrl = OrthographicCameraController(1.0)
    ctrl.on_update(Timestep(1.0))
    assert np.allclose(ctrl.camera.view_matrix, I4)


def test_ortho_rotation_disabled_ignores_q():
    state = InputState()
    ctrl = OrthographicCameraController(1.0, input_state=state)
    state.press_key(Key.Q)
    ctrl.on_update(Timestep(1.0))
    assert np.allclose(ctrl.camera.view_matrix, I4)


def test_ortho_rotation_wraps_but_keeps_orientation():
    state = InputState()
    ctrl = OrthographicCameraController(1.0, enable_rotation=True, input_state=state)
    state.press_key(Key.Q)
    ctrl.on_update(Timestep(4.0))
    assert np.allclose(_camera_world(ctrl), rotate(I4, math.radians(200.0), (0.0, 0.0, 1.0)))


def test_ortho_scroll_zooms_in_and_clamps():
    ctrl = OrthographicCameraController(1.0)
    event = MouseScrolledEvent(0.0, 1.0)
    ctrl.on_event(event)
    assert ctrl.zoom_level < 1.0
    assert event.handled is False
    ctrl.on_event(MouseScrolledEvent(0.0, 100.0))
    assert ctrl.zoom_level == pytest.approx(0.25)
    z = ctrl.zoom_level
    assert np.allclose(ctrl.camera.projection_matrix, ortho(-z, z, -z, z, -1.0, 1.0))


def test_ortho_scroll_out_increases_zoom():
    ctrl = OrthographicCameraController(1.0)
    ctrl.on_event(MouseScrolledEvent(0.0, -2.0))
    assert ctrl.zoom_level > 1.0


def test_ortho_ignores_other_events():
    ctrl = OrthographicCameraController(1.0)
    ctrl.on_event(MouseMovedEvent(3.0, 4.0))
    assert ctrl.zoom_level == 1.0


def test_ortho_resize_viewport():
    ctrl = OrthographicCameraController(1.0)
    ctrl.resize_viewport(1600, 900)
    a = 1600 / 900
    assert np.allclose(ctrl.camera.projection_matrix, ortho(-a, a, -1.0, 1.0, -1.0, 1.0))


def test_ortho_resize_rejects_zero_height():
    ctrl = OrthographicCameraController(1.0)
    with pytest.raises(ValueError):
        ctrl.resize_viewport(100, 0)


# --- Perspective ------------------------------------------------------------


def test_perspective_forward_with_w():
    state = InputState()
    ctrl = PerspectiveCameraController(45.0, 1.0, input_state=state)
    state.press_key(Key.W)
    ctrl.on_update(Timestep(1.0))
    assert np.allclose(ctrl.position, [0.0, 2.0, 0.0])
    assert np.allclose(_camera_world(ctrl)[:3, 3], ctrl.position)


def test_perspective_w_blocks_s_in_same_frame():
    state = InputState()
    ctrl = PerspectiveCameraController(45.0, 1.0, input_state=state)
    state.press_key(Key.W)
    state.press_key(Key.S)
    ctrl.on_update(Timestep(0.5))
    assert ctrl.position[1] > 0.0


def test_perspective_up_with_e():
    state = InputState()
    ctrl = PerspectiveCameraController(45.0, 1.0, input_state=state)
    state.press_key(Key.E)
    ctrl.on_update(Timestep(0.25))
    assert ctrl.position[2] > 0.0
    assert ctrl.position[0] == 0.0


def test_perspective_mouse_ignored_without_panning():
    ctrl = PerspectiveCameraController(45.0, 1.0)
    ctrl.on_event(MouseMovedEvent(100.0, 50.0))
    assert ctrl.yaw_rad == 0.0
    assert ctrl.pitch_rad == 0.0


def test_perspective_panning_captures_and_releases_cursor():
    calls = []
    state = InputState()
    ctrl = PerspectiveCameraController(45.0, 1.0, input_state=state, cursor_callback=calls.append)
    state.press_mouse_button(MouseButton.BUTTON_1)
    ctrl.on_update(Timestep(0.1))
    ctrl.on_update(Timestep(0.1))
    state.release_mouse_button(MouseButton.BUTTON_1)
    ctrl.on_update(Timestep(0.1))
    assert calls == [True, False]


def test_perspective_panning_turns_and_clamps_pitch():
    state = InputState()
    ctrl = PerspectiveCameraController(45.0, 1.0, input_state=state)
    state.move_mouse(0.0, 0.0)
    state.press_mouse_button(MouseButton.BUTTON_1)
    ctrl.on_update(Timestep(0.1))

    ctrl.on_event(MouseMovedEvent(100.0, 10.0))
    assert ctrl.yaw_rad > 0.0
    assert ctrl.pitch_rad == 0.0

    ctrl.on_event(MouseMovedEvent(100.0, -1.0e6))
    assert ctrl.pitch_rad == -180.0


def test_perspective_angle_setters():
    ctrl = PerspectiveCameraController(45.0, 1.0)
    ctrl.yaw_deg = 90.0
    assert ctrl.yaw_rad == pytest.approx(math.radians(90.0))
    ctrl.pitch_rad = -0.5
    assert ctrl.pitch_deg == pytest.approx(math.degrees(-0.5))
    ctrl.roll_deg = 30.0
    assert ctrl.roll_rad == pytest.approx(math.radians(30.0))


def test_perspective_position_setter_updates_view():
    ctrl = PerspectiveCameraController(45.0, 1.0)
    ctrl.position = (1.0, -2.0, 3.0)
    assert np.allclose(_camera_world(ctrl)[:3, 3], [1.0, -2.0, 3.0])


def test_perspective_resize_viewport_sets_aspect():
    ctrl = PerspectiveCameraController(45.0, 1.0)
    ctrl.resize_viewport(1920, 1080)
    assert ctrl.camera.aspect_ratio == pytest.approx(1920 / 1080)