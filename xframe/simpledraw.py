"""Immediate-mode debug drawing of lines, shapes and pixels.

Geometry is collected during a frame and handed out as draw calls by
:meth:`SimpleDraw.render`, which then clears the collected geometry.
Matrices use the row-vector convention (``p @ m``).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from xframe import shapes

Color = Tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)
RED: Color = (1.0, 0.0, 0.0, 1.0)
GREEN: Color = (0.0, 1.0, 0.0, 1.0)
BLUE: Color = (0.0, 0.0, 1.0, 1.0)

DEFAULT_MAX_VERTICES = 10000


def _color(value: Iterable[float]) -> Color:
    r, g, b, a = (float(c) for c in value)
    return r, g, b, a


class Topology(enum.Enum):
    """How the vertices of a draw call are assembled."""

    LINE_LIST = "line_list"
    POINT_LIST = "point_list"


@dataclass(frozen=True)
class Vertex:
    """A position with a colour."""

    position: Tuple[float, float, float]
    color: Color


@dataclass(frozen=True)
class DrawCall:
    """One batch of vertices to draw with a transform to clip space."""

    topology: Topology
    vertices: Tuple[Vertex, ...]
    transform: np.ndarray


class SimpleDraw:
    """Collects debug geometry for one frame, bounded by fixed capacities."""

    def __init__(
        self,
        back_buffer_width: int,
        back_buffer_height: int,
        max_vertices: int = DEFAULT_MAX_VERTICES,
    ) -> None:
        self.back_buffer_width = int(back_buffer_width)
        self.back_buffer_height = int(back_buffer_height)
        self.max_vertices = int(max_vertices)
        self.max_pixels = self.back_buffer_width * self.back_buffer_height

        self._vertices_3d: List[Vertex] = []
        self._vertices_2d: List[Vertex] = []
        self._pixels: List[Vertex] = []

        self._transform = np.identity(4)
        self._screen_width = 0
        self._screen_height = 0
        self.pixel_size = 1

        self._grid_color: Color | None = None
        self._grid_cell_size = 0
        self._show_grid = False

    # Settings ---------------------------------------------------------------

    def set_transform(self, transform) -> None:
        """Transform applied to screen-space geometry before projection."""
        self._transform = np.asarray(transform, dtype=float).reshape(4, 4).copy()

    def set_screen_size(self, width: int, height: int) -> None:
        """Logical screen size; 0 means use the back buffer's size."""
        self._screen_width = int(width)
        self._screen_height = int(height)

    def set_pixel_size(self, pixel_size: int) -> None:
        self.pixel_size = int(pixel_size)

    # World space ------------------------------------------------------------

    def _add_3d(self, points: Sequence[Sequence[float]], color) -> None:
        if len(self._vertices_3d) + len(points) <= self.max_vertices:
            c = _color(color)
            self._vertices_3d.extend(Vertex(shapes._xyz(p), c) for p in points)

    def add_line(self, v0, v1, color) -> None:
        self._add_3d([v0, v1], color)

    def add_aabb(self, center, extend, color) -> None:
        self._add_3d(shapes.aabb_lines(center, extend), color)

    def add_aabb_min_max(self, minimum, maximum, color) -> None:
        lo = np.asarray(minimum, dtype=float)
        hi = np.asarray(maximum, dtype=float)
        self.add_aabb((lo + hi) * 0.5, (hi - lo) * 0.5, color)

    def add_obb(self, center, extend, orientation, color) -> None:
        """Add an oriented box; each edge is added on its own, space allowing."""
        points = shapes.obb_lines(center, extend, orientation)
        for start, end in zip(points[::2], points[1::2]):
            self.add_line(start, end, color)

    def add_sphere(self, center, radius, color, slices: int = 8, rings: int = 4) -> None:
        if len(self._vertices_3d) + shapes.sphere_line_count(slices, rings) <= self.max_vertices:
            self._add_3d(shapes.sphere_lines(center, radius, slices, rings), color)

    def add_transform(self, transform) -> None:
        """Draw a transform's right, up and forward axes in red, green and blue."""
        points = shapes.transform_axes(transform)
        for (start, end), color in zip(zip(points[::2], points[1::2]), (RED, GREEN, BLUE)):
            self.add_line(start, end, color)

    # Screen space -----------------------------------------------------------

    def add_pixel(self, x: int, y: int, color) -> None:
        count = self.pixel_size * self.pixel_size
        if len(self._pixels) + count < self.max_pixels:
            c = _color(color)
            self._pixels.extend(
                Vertex((px, py, 0.0), c)
                for px, py in shapes.pixel_points(x, y, self.pixel_size)
            )

    def _add_2d(self, points: Sequence[Sequence[float]], color, needed: int) -> None:
        if len(self._vertices_2d) + needed <= self.max_vertices:
            c = _color(color)
            self._vertices_2d.extend(
                Vertex((*shapes._xy(p), 0.0), c) for p in points
            )

    def add_screen_line(self, v0, v1, color) -> None:
        self._add_2d([v0, v1], color, 2)

    def add_screen_rect(self, left, top, right, bottom, color) -> None:
        points = shapes.screen_rect_lines(left, top, right, bottom, self.pixel_size)
        self._add_2d(points, color, 8 * self.pixel_size)

    def add_screen_circle(self, center, radius, color) -> None:
        self._add_2d(shapes.circle_lines(center, radius), color, 32)

    def add_screen_arc(self, center, radius, from_angle, to_angle, color) -> None:
        self._add_2d(shapes.arc_lines(center, radius, from_angle, to_angle), color, 32)

    def add_screen_diamond(self, center, size, color) -> None:
        self._add_2d(shapes.diamond_lines(center, size), color, 8)

    def add_screen_grid(self, cell_size: int, color) -> None:
        """Show a grid this frame; a cell size of 0 hides it."""
        self._grid_color = _color(color)
        self._grid_cell_size = int(cell_size)
        self._show_grid = cell_size > 0

    # Rendering --------------------------------------------------------------

    def render(self, camera) -> List[DrawCall]:
        """Return this frame's draw calls and clear the collected geometry."""
        calls: List[DrawCall] = []
        aspect = self.back_buffer_width / self.back_buffer_height
        world = camera.view_matrix() @ camera.projection_matrix(aspect)

        if self._vertices_3d:
            calls.append(DrawCall(Topology.LINE_LIST, tuple(self._vertices_3d), world))

        if self._vertices_2d or self._pixels or self._show_grid:
            w = self._screen_width or self.back_buffer_width
            h = self._screen_height or self.back_buffer_height
            inv_screen = np.array(
                [
                    [2.0 / w, 0.0, 0.0, 0.0],
                    [0.0, -2.0 / h, 0.0, 0.0],
                    [0.0, 0.0, 1.0, 0.0],
                    [-1.0, 1.0, 0.0, 1.0],
                ]
            )
            screen = self._transform @ inv_screen

            if self._show_grid:
                grid = tuple(
                    Vertex((x, y, 0.0), self._grid_color)
                    for x, y in shapes.grid_lines(self._grid_cell_size, w, h)
                )
                calls.append(DrawCall(Topology.LINE_LIST, grid, screen))
            if self._pixels:
                calls.append(DrawCall(Topology.POINT_LIST, tuple(self._pixels), screen))
            if self._vertices_2d:
                calls.append(DrawCall(Topology.LINE_LIST, tuple(self._vertices_2d), screen))

        self._vertices_3d = []
        self._vertices_2d = []
        self._pixels = []
        self._show_grid = False
        return calls