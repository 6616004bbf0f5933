"""Small 4x4 matrix helpers for 3D transforms, using column-vector conventions.

Matrices are ``numpy`` arrays of shape ``(4, 4)``. A point ``p`` is transformed
as ``matrix @ [x, y, z, 1]``.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

__all__ = [
    "translate",
    "scale",
    "yaw_pitch_roll",
    "look_at",
    "perspective",
    "ortho",
    "transform_point",
    "transform_direction",
]


def _vector(values: Sequence[float], size: int, what: str) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.shape != (size,):
        raise ValueError(f"{what} must have {size} components, got shape {array.shape}")
    return array


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


def translate(offset: Sequence[float]) -> np.ndarray:
    """Return a matrix that moves points by ``offset``."""
    matrix = np.eye(4)
    matrix[:3, 3] = _vector(offset, 3, "offset")
    return matrix


def scale(factors: Sequence[float]) -> np.ndarray:
    """Return a matrix that scales each axis by the matching factor."""
    matrix = np.eye(4)
    matrix[:3, :3] = np.diag(_vector(factors, 3, "factors"))
    return matrix


def yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """Return the rotation ``Ry(yaw) @ Rx(pitch) @ Rz(roll)`` (angles in radians)."""
    cy, sy = math.cos(yaw), math.sin(yaw)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cr, sr = math.cos(roll), math.sin(roll)
    rot_y = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rot_x = np.array([[1.0, 0.0, 0.0], [0.0, cp, -sp], [0.0, sp, cp]])
    rot_z = np.array([[cr, -sr, 0.0], [sr, cr, 0.0], [0.0, 0.0, 1.0]])
    matrix = np.eye(4)
    matrix[:3, :3] = rot_y @ rot_x @ rot_z
    return matrix


def look_at(
    eye: Sequence[float], center: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """Return a right-handed view matrix looking from ``eye`` towards ``center``."""
    eye_v = _vector(eye, 3, "eye")
    forward = _normalize(_vector(center, 3, "center") - eye_v)
    side = _normalize(np.cross(forward, _vector(up, 3, "up")))
    upward = np.cross(side, forward)
    matrix = np.eye(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -np.dot(side, eye_v)
    matrix[1, 3] = -np.dot(upward, eye_v)
    matrix[2, 3] = np.dot(forward, eye_v)
    return matrix


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a right-handed perspective projection with depth mapped to [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Return a right-handed orthographic projection with depth mapped to [-1, 1]."""
    if right == left or top == bottom or far == near:
        raise ValueError("orthographic volume must have non-zero extent")
    matrix = np.eye(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


def transform_point(matrix: np.ndarray, point: Sequence[float]) -> np.ndarray:
    """Apply ``matrix`` to a point (w = 1) and keep the xyz part without dividing by w."""
    homogeneous = np.append(_vector(point, 3, "point"), 1.0)
    return (np.asarray(matrix, dtype=float) @ homogeneous)[:3]


def transform_direction(matrix: np.ndarray, vector: Sequence[float]) -> np.ndarray:
    """Apply ``matrix`` to a direction (w = 0), ignoring translation."""
    homogeneous = np.append(_vector(vector, 3, "vector"), 0.0)
    return (np.asarray(matrix, dtype=float) @ homogeneous)[:3]