"""Perspective camera with a fixed Y-up axis, using row-vector matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

_Y_AXIS = np.array([0.0, 1.0, 0.0])
_MIN_FOV = math.radians(10.0)
_MAX_FOV = math.radians(150.0)


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3).copy()


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _transform_normal(v: np.ndarray, m: np.ndarray) -> np.ndarray:
    return v @ m[:3, :3]


def _transform_coord(v: np.ndarray, m: np.ndarray) -> np.ndarray:
    out = np.append(v, 1.0) @ m
    return out[:3] / out[3]


def _rotation_y(radians: float) -> np.ndarray:
    c, s = math.cos(radians), math.sin(radians)
    return np.array(
        [
            [c, 0.0, -s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def _rotation_axis(axis: np.ndarray, radians: float) -> np.ndarray:
    x, y, z = _normalize(axis)
    c, s = math.cos(radians), math.sin(radians)
    t = 1.0 - c
    column_form = np.array(
        [
            [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
            [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
            [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
        ]
    )
    m = np.identity(4)
    m[:3, :3] = column_form.T
    return m


@dataclass
class Ray:
    """A ray with an origin and a unit direction."""

    origin: np.ndarray
    direction: np.ndarray


class Camera:
    """A camera that always treats +Y as up."""

    def __init__(self) -> None:
        self._position = np.zeros(3)
        self._look = np.array([0.0, 0.0, 1.0])
        self._fov = math.radians(60.0)
        self._aspect_ratio = 0.0
        self.near_plane = 0.01
        self.far_plane = 1000.0

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = _vec3(value)

    @property
    def direction(self) -> np.ndarray:
        return self._look.copy()

    @property
    def fov(self) -> float:
        """Vertical field of view in radians, clamped to 10..150 degrees."""
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self._fov = min(max(float(value), _MIN_FOV), _MAX_FOV)

    @property
    def aspect_ratio(self) -> float:
        """Width over height; 0 means use the back buffer's ratio."""
        return self._aspect_ratio

    @aspect_ratio.setter
    def aspect_ratio(self, value: float) -> None:
        self._aspect_ratio = max(float(value), 0.0)

    def set_direction(self, direction) -> None:
        self._look = _normalize(_vec3(direction))

    def set_look_at(self, target) -> None:
        self._look = _normalize(_vec3(target) - self._position)

    def _right(self) -> np.ndarray:
        return _normalize(np.cross(_Y_AXIS, self._look))

    def walk(self, distance: float) -> None:
        self._position = self._position + self._look * distance

    def strafe(self, distance: float) -> None:
        self._position = self._position + self._right() * distance

    def rise(self, distance: float) -> None:
        self._position = self._position + _Y_AXIS * distance

    def yaw(self, degree: float) -> None:
        self._look = _transform_normal(self._look, _rotation_y(math.radians(degree)))

    def pitch(self, degree: float) -> None:
        """Tilt up or down; ignored if it would look almost straight up or down."""
        rotation = _rotation_axis(self._right(), math.radians(degree))
        new_look = _transform_normal(self._look, rotation)
        if abs(float(np.dot(new_look, _Y_AXIS))) < 0.995:
            self._look = new_look

    def view_matrix(self) -> np.ndarray:
        l = self._look
        r = _normalize(np.cross(_Y_AXIS, l))
        u = _normalize(np.cross(l, r))
        dx = -float(np.dot(r, self._position))
        dy = -float(np.dot(u, self._position))
        dz = -float(np.dot(l, self._position))
        return np.array(
            [
                [r[0], u[0], l[0], 0.0],
                [r[1], u[1], l[1], 0.0],
                [r[2], u[2], l[2], 0.0],
                [dx, dy, dz, 1.0],
            ]
        )

    def projection_matrix(self, back_buffer_aspect: float | None = None) -> np.ndarray:
        if self._aspect_ratio != 0.0:
            aspect = self._aspect_ratio
        elif back_buffer_aspect is not None:
            aspect = float(back_buffer_aspect)
        else:
            raise ValueError("no aspect ratio set and no back buffer aspect given")
        h = 1.0 / math.tan(self._fov * 0.5)
        w = h / aspect
        f = self.far_plane
        n = self.near_plane
        d = f / (f - n)
        return np.array(
            [
                [w, 0.0, 0.0, 0.0],
                [0.0, h, 0.0, 0.0],
                [0.0, 0.0, d, 1.0],
                [0.0, 0.0, -n * d, 0.0],
            ]
        )

    def screen_point_to_ray(
        self, screen_x: int, screen_y: int, screen_width: int, screen_height: int
    ) -> Ray:
        aspect = screen_width / screen_height
        half_width = screen_width * 0.5
        half_height = screen_height * 0.5
        tan_fov = math.tan(self._fov * 0.5)
        dx = tan_fov * (screen_x / half_width - 1.0) * aspect
        dy = tan_fov * (1.0 - screen_y / half_height)
        direction = _normalize(np.array([dx, dy, 1.0]))
        inverse_view = np.linalg.inv(self.view_matrix())
        return Ray(
            origin=_transform_coord(np.zeros(3), inverse_view),
            direction=_transform_normal(direction, inverse_view),
        )