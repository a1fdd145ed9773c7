import math

import numpy as np
import pytest

from xframe.shapes import (
    aabb_lines,
    arc_lines,
    circle_lines,
    diamond_lines,
    grid_lines,
    obb_lines,
    pixel_points,
    screen_rect_lines,
    sphere_line_count,
    sphere_lines,
    transform_axes,
)


def _segments(points):
    return list(zip(points[0::2], points[1::2]))


def _edge_set(points, digits=6):
    return {
        frozenset((tuple(round(c, digits) for c in a), tuple(round(c, digits) for c in b)))
        for a, b in _segments(points)
    }


def test_aabb_has_twelve_distinct_axis_aligned_edges():
    points = aabb_lines((1.0, 2.0, 3.0), (0.5, 1.0, 2.0))
    assert len(points) == 24
    assert len(_edge_set(points)) == 12
    for a, b in _segments(points):
        differing = sum(1 for p, q in zip(a, b) if p != q)
        assert differing == 1


def test_aabb_corners_are_min_and_max():
    points = aabb_lines((0.0, 0.0, 0.0), (1.0, 2.0, 3.0))
    xs = {p[0] for p in points}
    ys = {p[1] for p in points}
    zs = {p[2] for p in points}
    assert xs == {-1.0, 1.0}
    assert ys == {-2.0, 2.0}
    assert zs == {-3.0, 3.0}


def test_obb_identity_orientation_matches_aabb_edges():
    center = (1.0, -2.0, 0.5)
    extend = (2.0, 1.0, 3.0)
    obb = obb_lines(center, extend, (0.0, 0.0, 0.0, 1.0))
    aabb = aabb_lines(center, extend)
    assert len(obb) == 24
    assert _edge_set(obb) == _edge_set(aabb)


def test_obb_rotation_preserves_edge_lengths():
    s = math.sqrt(0.5)
    extend = (1.0, 2.0, 3.0)
    rotated = obb_lines((0.0, 0.0, 0.0), extend, (0.0, 0.0, s, s))
    plain = obb_lines((0.0, 0.0, 0.0), extend, (0.0, 0.0, 0.0, 1.0))
    rotated_lengths = sorted(math.dist(a, b) for a, b in _segments(rotated))
    plain_lengths = sorted(math.dist(a, b) for a, b in _segments(plain))
    assert rotated_lengths == pytest.approx(plain_lengths)


def test_obb_quarter_turn_about_z_swaps_x_and_y_extents():
    s = math.sqrt(0.5)
    points = obb_lines((0.0, 0.0, 0.0), (1.0, 2.0, 3.0), (0.0, 0.0, s, s))
    max_x = max(abs(p[0]) for p in points)
    max_y = max(abs(p[1]) for p in points)
    max_z = max(abs(p[2]) for p in points)
    assert max_x == pytest.approx(2.0)
    assert max_y == pytest.approx(1.0)
    assert max_z == pytest.approx(3.0)


@pytest.mark.parametrize("slices,rings", [(8, 4), (3, 2), (12, 6), (1, 1)])
def test_sphere_point_count_matches_line_count(slices, rings):
    points = sphere_lines((0.0, 0.0, 0.0), 1.0, slices, rings)
    assert len(points) == sphere_line_count(slices, rings)
    assert len(points) % 2 == 0


def test_sphere_line_count_clamps_minimum_subdivisions():
    assert sphere_line_count(0, 0) == sphere_line_count(3, 2)
    assert sphere_line_count(1, 5) == sphere_line_count(3, 5)


def test_sphere_points_lie_on_surface():
    center = (1.0, 2.0, -3.0)
    radius = 2.5
    for point in sphere_lines(center, radius, 8, 4):
        assert math.dist(point, center) == pytest.approx(radius)


def test_sphere_starts_at_top_pole():
    points = sphere_lines((0.0, 0.0, 0.0), 2.0)
    assert points[0] == pytest.approx((0.0, 2.0, 0.0))


def test_transform_axes_from_translation():
    m = np.identity(4)
    m[3, :3] = [1.0, 2.0, 3.0]
    points = transform_axes(m)
    assert points == [
        (1.0, 2.0, 3.0), (2.0, 2.0, 3.0),
        (1.0, 2.0, 3.0), (1.0, 3.0, 3.0),
        (1.0, 2.0, 3.0), (1.0, 2.0, 4.0),
    ]


def test_screen_rect_single_pixel_outline():
    points = screen_rect_lines(0, 0, 9, 4, 1)
    assert len(points) == 8
    assert set(points) == {(0.0, 0.0), (9.0, 0.0), (9.0, 4.0), (0.0, 4.0)}


def test_screen_rect_thick_outline_shrinks_each_ring():
    points = screen_rect_lines(1, 1, 3, 3, 2)
    assert len(points) == 16
    outer = points[:8]
    inner = points[8:]
    assert outer[0] == (2.0, 2.0)
    assert inner[0] == (outer[0][0] + 1.0, outer[0][1] + 1.0)
    assert inner[2] == (outer[2][0] - 1.0, outer[2][1] + 1.0)


def test_circle_points_on_radius_and_closed():
    center = (10.0, 20.0)
    points = circle_lines(center, 5.0)
    assert len(points) == 32
    for p in points:
        assert math.dist(p, center) == pytest.approx(5.0)
    assert points[0] == pytest.approx((10.0, 25.0))
    assert points[-1] == pytest.approx(points[0])
    for (_, end), (start, _) in zip(_segments(points), _segments(points)[1:]):
        assert end == pytest.approx(start)


def test_arc_runs_from_start_to_end_angle():
    center = (0.0, 0.0)
    points = arc_lines(center, 2.0, 0.0, math.pi / 2)
    assert len(points) == 32
    assert points[0] == pytest.approx((2.0, 0.0))
    assert points[-1] == pytest.approx((0.0, 2.0), abs=1e-9)
    for p in points:
        assert math.dist(p, center) == pytest.approx(2.0)


def test_diamond_corners():
    points = diamond_lines((5.0, 5.0), 2.0)
    assert len(points) == 8
    assert set(points) == {(5.0, 3.0), (7.0, 5.0), (5.0, 7.0), (3.0, 5.0)}
    assert points[-1] == points[0]


def test_grid_lines_cover_screen():
    points = grid_lines(10, 30, 20)
    vertical = [seg for seg in _segments(points) if seg[0][0] == seg[1][0]]
    horizontal = [seg for seg in _segments(points) if seg[0][1] == seg[1][1]]
    assert [seg[0][0] for seg in vertical] == [10.0, 20.0, 30.0]
    assert [seg[0][1] for seg in horizontal] == [10.0, 20.0]
    assert all(seg[1][1] == 20.0 for seg in vertical)
    assert all(seg[1][0] == 30.0 for seg in horizontal)


def test_grid_rejects_non_positive_cell_size():
    with pytest.raises(ValueError):
        grid_lines(0, 100, 100)


def test_pixel_points_fill_enlarged_pixel():
    points = pixel_points(3, 4, 2)
    assert points == [(6.0, 8.0), (7.0, 8.0), (6.0, 9.0), (7.0, 9.0)]


def test_pixel_points_count_is_square_of_size():
    for size in (1, 3, 5):
        points = pixel_points(0, 0, size)
        assert len(points) == size * size
        assert len(set(points)) == size * size