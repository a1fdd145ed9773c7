"""Line-list geometry for debug shapes.

Each function returns a flat list of points in which consecutive pairs
are the end points of one line segment. World-space shapes return
``(x, y, z)`` tuples and screen-space shapes return ``(x, y)`` tuples.
Matrices use the row-vector convention: a point is transformed as
``p @ m`` with the translation in the last row.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np

Point2 = Tuple[float, float]
Point3 = Tuple[float, float, float]

_CIRCLE_SEGMENTS = 16
_MIN_SLICES = 3
_MIN_RINGS = 2


def _xyz(value: Iterable[float]) -> Point3:
    x, y, z = (float(c) for c in value)
    return x, y, z


def _xy(value: Iterable[float]) -> Point2:
    x, y = (float(c) for c in value)
    return x, y


def aabb_lines(center: Sequence[float], extend: Sequence[float]) -> List[Point3]:
    """The 12 edges (24 points) of an axis-aligned box given by centre and half size."""
    cx, cy, cz = _xyz(center)
    ex, ey, ez = _xyz(extend)
    min_x, min_y, min_z = cx - ex, cy - ey, cz - ez
    max_x, max_y, max_z = cx + ex, cy + ey, cz + ez
    return [
        (min_x, min_y, min_z), (min_x, min_y, max_z),
        (min_x, min_y, max_z), (max_x, min_y, max_z),
        (max_x, min_y, max_z), (max_x, min_y, min_z),
        (max_x, min_y, min_z), (min_x, min_y, min_z),
        (min_x, min_y, min_z), (min_x, max_y, min_z),
        (min_x, min_y, max_z), (min_x, max_y, max_z),
        (max_x, min_y, max_z), (max_x, max_y, max_z),
        (max_x, min_y, min_z), (max_x, max_y, min_z),
        (min_x, max_y, min_z), (min_x, max_y, max_z),
        (min_x, max_y, max_z), (max_x, max_y, max_z),
        (max_x, max_y, max_z), (max_x, max_y, min_z),
        (max_x, max_y, min_z), (min_x, max_y, min_z),
    ]


def _quaternion_matrix(orientation: Sequence[float]) -> np.ndarray:
    """Row-vector rotation matrix for a quaternion given as (x, y, z, w)."""
    x, y, z, w = (float(c) for c in orientation)
    m = np.identity(4)
    m[:3, :3] = [
        [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y + z * w), 2.0 * (x * z - y * w)],
        [2.0 * (x * y - z * w), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z + x * w)],
        [2.0 * (x * z + y * w), 2.0 * (y * z - x * w), 1.0 - 2.0 * (x * x + y * y)],
    ]
    return m


def obb_lines(
    center: Sequence[float], extend: Sequence[float], orientation: Sequence[float]
) -> List[Point3]:
    """The 12 edges of an oriented box; *orientation* is a quaternion (x, y, z, w)."""
    scale = np.diag([*_xyz(extend), 1.0])
    translation = np.identity(4)
    translation[3, :3] = _xyz(center)
    to_world = scale @ _quaternion_matrix(orientation) @ translation

    corners = np.array(
        [
            [-1.0, -1.0, -1.0, 1.0],
            [-1.0, 1.0, -1.0, 1.0],
            [1.0, 1.0, -1.0, 1.0],
            [1.0, -1.0, -1.0, 1.0],
            [-1.0, -1.0, 1.0, 1.0],
            [-1.0, 1.0, 1.0, 1.0],
            [1.0, 1.0, 1.0, 1.0],
            [1.0, -1.0, 1.0, 1.0],
        ]
    ) @ to_world
    points = [_xyz(row[:3] / row[3]) for row in corners]

    edges = [
        (0, 1), (1, 2), (2, 3), (3, 0),
        (0, 4), (1, 5), (2, 6), (3, 7),
        (4, 5), (5, 6), (6, 7), (7, 4),
    ]
    return [points[i] for edge in edges for i in edge]


def sphere_line_count(slices: int, rings: int) -> int:
    """Number of points :func:`sphere_lines` yields for these subdivisions."""
    slices = max(_MIN_SLICES, slices)
    rings = max(_MIN_RINGS, rings)
    return 4 * slices * rings - 2 * slices


def sphere_lines(
    center: Sequence[float], radius: float, slices: int = 8, rings: int = 4
) -> List[Point3]:
    """A wire sphere of meridians and parallels (at least 3 slices, 2 rings)."""
    x, y, z = _xyz(center)
    radius = float(radius)
    slices = max(_MIN_SLICES, slices)
    rings = max(_MIN_RINGS, rings)
    theta_step = math.pi / rings
    phi_step = 2.0 * math.pi / slices

    points: List[Point3] = []
    for j in range(slices):
        theta = j * phi_step
        phi = theta + phi_step
        for i in range(rings):
            a = i * theta_step
            b = a + theta_step
            ay = radius * math.cos(a)
            by = radius * math.cos(b)
            ar = math.sqrt(max(radius * radius - ay * ay, 0.0))
            br = math.sqrt(max(radius * radius - by * by, 0.0))

            p0 = (x + ar * math.sin(theta), y + ay, z + ar * math.cos(theta))
            p1 = (x + br * math.sin(theta), y + by, z + br * math.cos(theta))
            points += [p0, p1]
            if i < rings - 1:
                p2 = (x + br * math.sin(phi), y + by, z + br * math.cos(phi))
                points += [p1, p2]
    return points


def transform_axes(transform) -> List[Point3]:
    """Lines from a transform's origin along its right, up and forward axes."""
    m = np.asarray(transform, dtype=float).reshape(4, 4)
    position = m[3, :3]
    return [
        point
        for axis in (m[0, :3], m[1, :3], m[2, :3])
        for point in (_xyz(position), _xyz(position + axis))
    ]


def screen_rect_lines(
    left: float, top: float, right: float, bottom: float, pixel_size: int = 1
) -> List[Point2]:
    """Outline of a rectangle of cells, drawn *pixel_size* screen pixels thick."""
    l = float(left) * pixel_size
    t = float(top) * pixel_size
    r = (float(right) + 1.0) * pixel_size - 1.0
    b = (float(bottom) + 1.0) * pixel_size - 1.0

    points: List[Point2] = []
    for _ in range(pixel_size):
        points += [
            (l, t), (r, t),
            (r, t), (r, b),
            (r, b), (l, b),
            (l, b), (l, t),
        ]
        l += 1.0
        t += 1.0
        r -= 1.0
        b -= 1.0
    return points


def circle_lines(center: Sequence[float], radius: float) -> List[Point2]:
    """A 16-segment circle starting at angle 0 on the +Y side."""
    x, y = _xy(center)
    r = float(radius)
    step = math.pi / 8.0
    points: List[Point2] = []
    for i in range(_CIRCLE_SEGMENTS):
        alpha = i * step
        beta = alpha + step
        points.append((x + r * math.sin(alpha), y + r * math.cos(alpha)))
        points.append((x + r * math.sin(beta), y + r * math.cos(beta)))
    return points


def arc_lines(
    center: Sequence[float], radius: float, from_angle: float, to_angle: float
) -> List[Point2]:
    """A 16-segment arc between two angles in radians, measured from +X."""
    x, y = _xy(center)
    r = float(radius)
    step = (float(to_angle) - float(from_angle)) / _CIRCLE_SEGMENTS
    points: List[Point2] = []
    for i in range(_CIRCLE_SEGMENTS):
        alpha = i * step + from_angle
        beta = alpha + step
        points.append((x + r * math.cos(alpha), y + r * math.sin(alpha)))
        points.append((x + r * math.cos(beta), y + r * math.sin(beta)))
    return points


def diamond_lines(center: Sequence[float], size: float) -> List[Point2]:
    """A diamond whose corners lie *size* away from the centre along each axis."""
    x, y = _xy(center)
    s = float(size)
    top = (x, y - s)
    right = (x + s, y)
    bottom = (x, y + s)
    left = (x - s, y)
    return [top, right, right, bottom, bottom, left, left, top]


def grid_lines(cell_size: int, width: int, height: int) -> List[Point2]:
    """Vertical then horizontal grid lines every *cell_size* pixels."""
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    w = float(width)
    h = float(height)
    points: List[Point2] = []
    for x in range(cell_size, width + 1, cell_size):
        points += [(float(x), 0.0), (float(x), h)]
    for y in range(cell_size, height + 1, cell_size):
        points += [(0.0, float(y)), (w, float(y))]
    return points


def pixel_points(x: int, y: int, pixel_size: int = 1) -> List[Point2]:
    """Screen points covering one enlarged pixel, row by row."""
    pos_x = x * pixel_size
    pos_y = y * pixel_size
    return [
        (float(pos_x + xx), float(pos_y + yy))
        for yy in range(pixel_size)
        for xx in range(pixel_size)
    ]