import math

import numpy as np
import pytest

from elmengine.cameras import Camera, OrthographicCamera, PerspectiveCamera
from elmengine.transforms import ortho, perspective, translate


def test_camera_is_abstract():
    with pytest.raises(TypeError):
        Camera()


def test_orthographic_initial_state():
    cam = OrthographicCamera(-2.0, 2.0, -1.0, 1.0)
    assert np.allclose(cam.view_matrix, np.identity(4))
    assert np.allclose(cam.projection_matrix, ortho(-2.0, 2.0, -1.0, 1.0, -1.0, 1.0))
    assert np.allclose(cam.view_projection_matrix, cam.projection_matrix)


def test_orthographic_set_view_updates_cache():
    cam = OrthographicCamera(-2.0, 2.0, -1.0, 1.0)
    view = translate(np.identity(4), (0.5, -0.25, 0.0))
    cam.set_view_matrix(view)
    assert np.allclose(cam.view_matrix, view)
    assert np.allclose(cam.view_projection_matrix, cam.projection_matrix @ view)


def test_orthographic_set_projection_keeps_view():
    cam = OrthographicCamera(-1.0, 1.0, -1.0, 1.0)
    view = translate(np.identity(4), (1.0, 2.0, 0.0))
    cam.set_view_matrix(view)
    cam.set_projection(-3.0, 3.0, -2.0, 2.0)
    expected = ortho(-3.0, 3.0, -2.0, 2.0, -1.0, 1.0)
    assert np.allclose(cam.projection_matrix, expected)
    assert np.allclose(cam.view_projection_matrix, expected @ view)


def test_orthographic_matrices_are_read_only():
    cam = OrthographicCamera(-1.0, 1.0, -1.0, 1.0)
    with pytest.raises(ValueError):
        cam.view_projection_matrix[0, 0] = 5.0
    assert cam.view_projection_matrix[0, 0] == pytest.approx(1.0)
    assert np.allclose(cam.view_projection_matrix, ortho(-1.0, 1.0, -1.0, 1.0, -1.0, 1.0))


def test_orthographic_set_view_rejects_bad_shape():
    cam = OrthographicCamera(-1.0, 1.0, -1.0, 1.0)
    with pytest.raises(ValueError):
        cam.set_view_matrix(np.identity(3))


def test_perspective_defaults():
    cam = PerspectiveCamera(45.0, 1.5)
    assert cam.near_clip == pytest.approx(0.01)
    assert cam.far_clip == pytest.approx(10_000.0)
    assert np.allclose(cam.projection_matrix, perspective(math.radians(45.0), 1.5, 0.01, 10_000.0))


def test_perspective_setters_recompute_projection():
    cam = PerspectiveCamera(45.0, 1.5, 0.1, 100.0)
    cam.fov = 70.0
    cam.aspect_ratio = 2.0
    cam.near_clip = 0.5
    cam.far_clip = 50.0
    assert (cam.fov, cam.aspect_ratio, cam.near_clip, cam.far_clip) == (70.0, 2.0, 0.5, 50.0)
    expected = perspective(math.radians(70.0), 2.0, 0.5, 50.0)
    assert np.allclose(cam.projection_matrix, expected)
    assert np.allclose(cam.view_projection_matrix, expected @ cam.view_matrix)


def test_perspective_view_projection_after_view_change():
    cam = PerspectiveCamera(60.0, 1.0)
    view = translate(np.identity(4), (0.0, 0.0, -5.0))
    cam.set_view_matrix(view)
    assert np.allclose(cam.view_projection_matrix, cam.projection_matrix @ view)
    cam.fov = 30.0
    assert np.allclose(cam.view_matrix, view)
    assert np.allclose(cam.view_projection_matrix, cam.projection_matrix @ view)