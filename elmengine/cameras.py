"""Orthographic and perspective cameras with cached view-projection."""

from __future__ import annotations

import abc
import math

import numpy as np

from elmengine.transforms import ortho, perspective


def _frozen(matrix: object) -> np.ndarray:
    arr = np.array(matrix, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


class Camera(abc.ABC):
    """Anything that provides a combined view-projection matrix."""

    @property
    @abc.abstractmethod
    def view_projection_matrix(self) -> np.ndarray:
        """Projection times view."""


class OrthographicCamera(Camera):
    """A 2D camera with near/far planes fixed at -1 and 1."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = _frozen(ortho(left, right, bottom, top, -1.0, 1.0))
        self._view = _frozen(np.identity(4))
        self._recalculate()

    def _recalculate(self) -> None:
        self._view_projection = _frozen(self._projection @ self._view)

    def set_projection(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = _frozen(ortho(left, right, bottom, top, -1.0, 1.0))
        self._recalculate()

    def set_view_matrix(self, view_matrix: object) -> None:
        self._view = _frozen(view_matrix)
        self._recalculate()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection


class PerspectiveCamera(Camera):
    """A 3D camera; the field of view is given in degrees."""

    def __init__(
        self,
        fov: float,
        aspect_ratio: float,
        near_clip: float = 0.01,
        far_clip: float = 10_000.0,
    ) -> None:
        self._fov = fov
        self._aspect_ratio = aspect_ratio
        self._near_clip = near_clip
        self._far_clip = far_clip
        self._view = _frozen(np.identity(4))
        self._recalculate_projection()

    def _recalculate_projection(self) -> None:
        self._projection = _frozen(
            perspective(math.radians(self._fov), self._aspect_ratio, self._near_clip, self._far_clip)
        )
        self._view_projection = _frozen(self._projection @ self._view)

    def set_view_matrix(self, view_matrix: object) -> None:
        self._view = _frozen(view_matrix)
        self._view_projection = _frozen(self._projection @ self._view)

    @property
    def fov(self) -> float:
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self._fov = value
        self._recalculate_projection()

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @aspect_ratio.setter
    def aspect_ratio(self, value: float) -> None:
        self._aspect_ratio = value
        self._recalculate_projection()

    @property
    def near_clip(self) -> float:
        return self._near_clip

    @near_clip.setter
    def near_clip(self, value: float) -> None:
        self._near_clip = value
        self._recalculate_projection()

    @property
    def far_clip(self) -> float:
        return self._far_clip

    @far_clip.setter
    def far_clip(self, value: float) -> None:
        self._far_clip = value
        self._recalculate_projection()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection