"""A first-person camera and the matrices it needs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

PITCH_LIMIT = 89.0


def _normalize(v: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(v)
    if norm == 0:
        raise ValueError("cannot normalize a zero vector")
    return v / norm


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye)
    matrix[1, 3] = -np.dot(u, eye)
    matrix[2, 3] = np.dot(f, eye)
    return matrix


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection onto clip space with depth in [-1, 1].

    ``fovy`` is in radians.
    """
    if aspect == 0:
        raise ValueError("aspect must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must not be zero")
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def _vec(*values: float):
    return field(default_factory=lambda: np.array(values, dtype=float))


@dataclass
class Camera:
    """Camera position and orientation, steered by keyboard and mouse."""

    position: np.ndarray = _vec(0.0, 0.0, 3.0)
    front: np.ndarray = _vec(0.0, 0.0, -1.0)
    up: np.ndarray = _vec(0.0, 1.0, 0.0)
    speed: float = 2.5
    yaw: float = -90.0
    pitch: float = 0.0
    fov: float = 45.0
    aspect: float = 800.0 / 600.0
    near: float = 0.1
    far: float = 100.0

    def view(self) -> np.ndarray:
        return look_at(self.position, self.position + self.front, self.up)

    def projection(self) -> np.ndarray:
        return perspective(math.radians(self.fov), self.aspect, self.near, self.far)

    def set_fov(self, fov: float) -> None:
        self.fov = fov

    def look_around(self, yoffset: float, xoffset: float) -> None:
        """Turn by the given pitch and yaw offsets in degrees; pitch stays within ±89."""
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch + yoffset))
        self.yaw += xoffset
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.front = np.array(
            [math.cos(yaw) * math.cos(pitch), math.sin(pitch), math.sin(yaw) * math.cos(pitch)]
        )

    def _right(self) -> np.ndarray:
        return _normalize(np.cross(self.front, self.up))

    def move_forward(self, delta_time: float) -> None:
        self.position = self.position + delta_time * self.speed * self.front

    def move_backward(self, delta_time: float) -> None:
        self.position = self.position - delta_time * self.speed * self.front

    def move_right(self, delta_time: float) -> None:
        self.position = self.position + self._right() * self.speed * delta_time

    def move_left(self, delta_time: float) -> None:
        self.position = self.position - self._right() * self.speed * delta_time