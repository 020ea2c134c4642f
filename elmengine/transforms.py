"""4x4 transform helpers for column vectors (``M @ v``)."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

_EPSILON = float(np.finfo(np.float32).eps)


def _as_matrix(matrix: object) -> np.ndarray:
    arr = np.array(matrix, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    return arr


def _as_vec3(vector: Sequence[float]) -> np.ndarray:
    arr = np.array(vector, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"expected 3 components, got {arr.shape[0]}")
    return arr


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """Right-handed orthographic projection to a -1..1 clip volume."""
    if right == left or top == bottom or far == near:
        raise ValueError("orthographic volume must have non-zero extent")
    result = np.identity(4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    return result


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection; ``fovy`` is in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if far == near:
        raise ValueError("near and far clip planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must be non-zero")
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * far * near) / (far - near)
    return result


def translate(matrix: object, offset: Sequence[float]) -> np.ndarray:
    """``matrix`` followed by a translation by ``offset``."""
    translation = np.identity(4)
    translation[:3, 3] = _as_vec3(offset)
    return _as_matrix(matrix) @ translation


def rotate(matrix: object, angle: float, axis: Sequence[float]) -> np.ndarray:
    """``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    a = _as_vec3(axis)
    norm = float(np.linalg.norm(a))
    if norm == 0.0:
        raise ValueError("rotation axis must be non-zero")
    a = a / norm
    c, s = math.cos(angle), math.sin(angle)
    cross = np.array(
        [
            [0.0, -a[2], a[1]],
            [a[2], 0.0, -a[0]],
            [-a[1], a[0], 0.0],
        ]
    )
    rotation = np.identity(4)
    rotation[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return _as_matrix(matrix) @ rotation


def euler_to_mat4(angles: Sequence[float]) -> np.ndarray:
    """Rotation matrix for Euler angles (x, y, z) in radians, applied x then y then z."""
    x, y, z = _as_vec3(angles)
    identity = np.identity(4)
    return (
        rotate(identity, z, (0.0, 0.0, 1.0))
        @ rotate(identity, y, (0.0, 1.0, 0.0))
        @ rotate(identity, x, (1.0, 0.0, 0.0))
    )


def decompose_transform(transform: object) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split a transform into (translation, euler rotation, scale).

    Raises ValueError when the matrix cannot be normalised.
    """
    local = _as_matrix(transform)

    if abs(local[3, 3]) < _EPSILON:
        raise ValueError("transform cannot be decomposed: w component is zero")

    if any(abs(local[3, i]) >= _EPSILON for i in range(3)):
        local[3, :3] = 0.0
        local[3, 3] = 1.0

    translation = local[:3, 3].copy()
    local[:3, 3] = 0.0

    columns = [local[:3, i].copy() for i in range(3)]
    scale = np.array([np.linalg.norm(col) for col in columns])
    rows = [col / length for col, length in zip(columns, scale)]

    rotation = np.zeros(3)
    rotation[1] = math.asin(float(np.clip(-rows[0][2], -1.0, 1.0)))
    if math.cos(rotation[1]) != 0.0:
        rotation[0] = math.atan2(rows[1][2], rows[2][2])
        rotation[2] = math.atan2(rows[0][1], rows[0][0])
    else:
        rotation[0] = math.atan2(-rows[2][0], rows[1][1])
        rotation[2] = 0.0

    return translation, rotation, scale