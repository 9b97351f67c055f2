"""Camera with view and projection matrices, and a scene that holds one."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

Vector3 = tuple[float, float, float]


class ProjectionType(enum.Enum):
    """Kind of projection a camera applies."""

    ORTHOGRAPHIC = enum.auto()
    PERSPECTIVE = enum.auto()


def _vec3(v: Sequence[float]) -> np.ndarray:
    return np.asarray(v, dtype=float).reshape(3)


def _normalize(v: np.ndarray) -> np.ndarray:
    # A zero vector yields NaNs rather than an error.
    with np.errstate(invalid="ignore", divide="ignore"):
        return v / np.linalg.norm(v)


@dataclass
class Camera:
    """A camera placed in the world, looking towards a point.

    Matrices are returned in mathematical (row, column) layout and act on
    column vectors.
    """

    position: Vector3 = (0.0, 0.0, 0.0)
    look_at: Vector3 = (0.0, 0.0, 1.0)
    view_up: Vector3 = (0.0, 1.0, 0.0)
    projection_type: ProjectionType = ProjectionType.ORTHOGRAPHIC
    near: float = 0.1
    far: float = 1000.0
    bottom: float = -500.0
    top: float = 500.0
    left: float = -500.0
    right: float = 500.0

    def view_matrix(self) -> np.ndarray:
        """World-to-camera transformation."""
        position = _vec3(self.position)
        k = _normalize(position - _vec3(self.look_at))
        i = _normalize(np.cross(_vec3(self.view_up), k))
        j = _normalize(np.cross(k, i))

        matrix = np.eye(4)
        matrix[0, :3] = i
        matrix[1, :3] = j
        matrix[2, :3] = k
        matrix[:3, 3] = [-np.dot(i, position), -np.dot(j, position), -np.dot(k, position)]
        return matrix

    def projection_matrix(self) -> np.ndarray:
        """Camera-to-clip transformation for the current projection type."""
        near, far = float(self.near), float(self.far)
        left, right = float(self.left), float(self.right)
        bottom, top = float(self.bottom), float(self.top)
        matrix = np.zeros((4, 4))

        if self.projection_type is ProjectionType.PERSPECTIVE:
            matrix[0, 0] = (2.0 * near) / (right - left)
            matrix[1, 1] = (2.0 * near) / (top - bottom)
            matrix[0, 2] = (right + left) / (right - left)
            matrix[1, 2] = (top + bottom) / (top - bottom)
            matrix[2, 2] = -(far + near) / (far - near)
            matrix[3, 2] = -1.0
            matrix[2, 3] = -(2.0 * far * near) / (far - near)
        else:
            matrix[0, 0] = 2.0 / (right - left)
            matrix[1, 1] = 2.0 / (top - bottom)
            matrix[2, 2] = -2.0 / (far - near)
            matrix[0, 3] = -(right + left) / (right - left)
            matrix[1, 3] = -(top + bottom) / (top - bottom)
            matrix[2, 3] = -(far + near) / (far - near)
            matrix[3, 3] = 1.0

        return matrix


@dataclass
class Scene:
    """A scene viewed through a single camera."""

    camera: Camera = field(default_factory=Camera)