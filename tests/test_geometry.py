import math

import pytest

from algokit.geometry import (
    Line,
    Point,
    angle,
    angle_travelled,
    bisector,
    cross,
    dist,
    dot,
    in_disk,
    in_polygon,
    is_convex,
    is_point_in_angle,
    on_segment,
    orientation,
    oriented_angle,
    polar_sort,
    polygon_area,
    rotate_ccw,
    rotate_cw,
    segment_intersection,
    segment_intersection_points,
    segment_point_distance,
    segment_segment_distance,
    triangle_area,
    winding_number,
)

SQUARE = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]


def test_point_arithmetic_round_trip():
    a, b = Point(1.5, -2), Point(3, 7)
    assert (a + b) - b == a
    assert (a * 3) / 3 == a
    assert -a + a == Point(0, 0)


def test_point_approximate_equality_and_order():
    assert Point(1, 2) == Point(1 + 1e-12, 2)
    assert Point(1, 2) < Point(1, 3)
    assert Point(1, 5) < Point(2, 0)
    assert Point(2, 0) > Point(1, 5)


def test_point_norms_and_arg():
    p = Point(3.5, -1.25)
    assert p.norm() ** 2 == pytest.approx(p.norm2())
    assert Point(0, 2).arg() == pytest.approx(math.pi / 2)
    assert dot(p, p.perp()) == pytest.approx(0)


def test_dot_cross_dist():
    a, b = Point(2, 3), Point(-1, 4)
    assert cross(a, b) == -cross(b, a)
    assert dot(a, b) == dot(b, a)
    assert dist(a, b) == pytest.approx((a - b).norm())


def test_orientation_signs():
    a, b = Point(0, 0), Point(1, 0)
    assert orientation(a, b, Point(0, 1)) == 1
    assert orientation(a, b, Point(0, -1)) == -1
    assert orientation(a, b, Point(5, 0)) == 0


def test_angle_between_perpendicular_vectors():
    assert angle(Point(2, 0), Point(0, 5)) == pytest.approx(math.pi / 2)
    assert angle(Point(1, 1), Point(-1, -1)) == pytest.approx(math.pi)


def test_angle_of_zero_vector_raises():
    with pytest.raises(ValueError):
        angle(Point(0, 0), Point(1, 0))


def test_rotations_round_trip():
    p = Point(3, -2)
    assert rotate_cw(rotate_ccw(p, 0.7), 0.7) == p
    assert rotate_ccw(p, math.pi / 2) == p.perp()
    assert rotate_ccw(p, 1.1).norm() == pytest.approx(p.norm())


def test_point_in_angle():
    a, b, c = Point(0, 0), Point(1, 0), Point(0, 1)
    assert is_point_in_angle(a, b, c, Point(1, 1))
    assert is_point_in_angle(a, c, b, Point(1, 1))
    assert not is_point_in_angle(a, b, c, Point(-1, -1))


def test_point_in_angle_collinear_raises():
    with pytest.raises(ValueError):
        is_point_in_angle(Point(0, 0), Point(1, 0), Point(2, 0), Point(1, 1))


def test_oriented_angles_sum_to_full_turn():
    a, b, c = Point(0, 0), Point(3, 1), Point(-1, 2)
    assert oriented_angle(a, b, c) + oriented_angle(a, c, b) == pytest.approx(2 * math.pi)
    assert oriented_angle(a, b, c) == pytest.approx(angle(b - a, c - a))


def test_polar_sort_follows_direction_angle():
    pts = [Point(1, 1), Point(-1, 0), Point(0, -2), Point(2, 0), Point(-1, 1), Point(1, -3)]
    result = polar_sort(pts)
    assert result == sorted(pts, key=lambda p: p.arg())


def test_polar_sort_around_other_origin_and_by_distance():
    o = Point(10, 10)
    pts = [o + Point(2, 2), o + Point(-1, 0), o + Point(1, 1)]
    result = polar_sort(pts, o)
    assert result == [o + Point(1, 1), o + Point(2, 2), o + Point(-1, 0)]


def test_is_convex():
    assert is_convex(SQUARE)
    arrow = [Point(0, 0), Point(4, 0), Point(2, 1), Point(2, 4)]
    assert not is_convex(arrow)


def test_line_projection_and_reflection():
    line = Line.through(Point(0, 1), Point(4, 3))
    p = Point(2, 7)
    foot = line.proj(p)
    assert line.side(foot) == pytest.approx(0)
    assert line.refl(line.refl(p)) == p
    assert (line.refl(p) + p) / 2 == foot
    assert dist(p, foot) == pytest.approx(line.distance(p))
    assert line.sq_distance(p) == pytest.approx(line.distance(p) ** 2)


def test_line_side_signs():
    line = Line.through(Point(0, 0), Point(1, 0))
    assert line.side(Point(0, 2)) > 0
    assert line.side(Point(0, -2)) < 0


def test_line_perpendicular_translate_shift():
    line = Line.through(Point(1, 1), Point(3, 2))
    p = Point(-2, 5)
    perp = line.perp_through(p)
    assert perp.side(p) == pytest.approx(0)
    assert dot(perp.v, line.v) == pytest.approx(0)
    t = Point(4, -3)
    assert line.translate(t).side(Point(1, 1) + t) == pytest.approx(0)
    shifted = line.shift_left(2.5)
    assert shifted.distance(Point(1, 1)) == pytest.approx(2.5)
    assert shifted.side(Point(1, 1)) < 0


def test_line_cmp_proj():
    line = Line.through(Point(0, 0), Point(1, 1))
    assert line.cmp_proj(Point(0, 0), Point(2, 1))
    assert not line.cmp_proj(Point(2, 1), Point(0, 0))


def test_bisector_is_equidistant():
    l1 = Line.through(Point(0, 0), Point(1, 0))
    l2 = Line.through(Point(0, 3), Point(2, 5))
    for interior in (True, False):
        b = bisector(l1, l2, interior)
        for q in (Point(0, 0), Point(5, 7)):
            on_b = b.proj(q)
            assert l1.distance(on_b) == pytest.approx(l2.distance(on_b))


def test_bisector_of_parallel_lines_raises():
    l1 = Line.through(Point(0, 0), Point(1, 0))
    l2 = Line.through(Point(0, 1), Point(1, 1))
    with pytest.raises(ValueError):
        bisector(l1, l2, True)


def test_disk_and_segment_membership():
    a, b = Point(0, 0), Point(4, 4)
    assert in_disk(a, b, Point(4, 0))
    assert not in_disk(a, b, Point(5, 0))
    assert on_segment(a, b, (a + b) / 2)
    assert not on_segment(a, b, Point(5, 5))


def test_segment_intersection_of_diagonals():
    a, b, c, d = Point(0, 0), Point(4, 4), Point(0, 4), Point(4, 0)
    assert segment_intersection(a, b, c, d) == (a + b) / 2
    assert segment_intersection(a, Point(1, 1), c, d) is None


def test_segment_intersection_points_cases():
    assert segment_intersection_points(Point(0, 0), Point(2, 0), Point(1, 0), Point(3, 0)) == [
        Point(1, 0),
        Point(2, 0),
    ]
    assert segment_intersection_points(Point(0, 0), Point(1, 1), Point(1, 1), Point(2, 0)) == [Point(1, 1)]
    assert segment_intersection_points(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)) == []


def test_segment_distances():
    a, b = Point(0, 0), Point(4, 0)
    assert segment_point_distance(a, b, Point(2, 3)) == pytest.approx(Line.through(a, b).distance(Point(2, 3)))
    far = Point(7, 4)
    assert segment_point_distance(a, b, far) == pytest.approx(dist(b, far))
    assert segment_segment_distance(a, Point(4, 4), Point(0, 4), b) == 0.0
    assert segment_segment_distance(a, b, Point(1, 2), Point(3, 2)) == pytest.approx(
        segment_point_distance(a, b, Point(1, 2))
    )


def test_areas_agree():
    a, b, c, d = SQUARE
    assert polygon_area(SQUARE) == pytest.approx(triangle_area(a, b, c) + triangle_area(a, c, d))
    assert polygon_area(list(reversed(SQUARE))) == pytest.approx(polygon_area(SQUARE))


def test_in_polygon():
    assert in_polygon(SQUARE, Point(2, 2))
    assert not in_polygon(SQUARE, Point(9, 2))
    assert not in_polygon(SQUARE, Point(4, 2))
    assert in_polygon(SQUARE, Point(4, 2), strict=False)


def test_angle_travelled_is_antisymmetric():
    a, p, q = Point(0, 0), Point(3, 1), Point(-1, 2)
    assert angle_travelled(a, p, q) == pytest.approx(-angle_travelled(a, q, p))
    assert angle_travelled(a, p, q) == pytest.approx(angle(p, q))


def test_winding_number():
    centre = Point(2, 2)
    assert winding_number(SQUARE, centre) == 1
    assert winding_number(list(reversed(SQUARE)), centre) == -winding_number(SQUARE, centre)
    assert winding_number(SQUARE, Point(10, 10)) == 0
    assert winding_number(SQUARE + SQUARE, centre) == 2 * winding_number(SQUARE, centre)


def test_winding_number_on_boundary_raises():
    with pytest.raises(ValueError):
        winding_number(SQUARE, Point(2, 0))