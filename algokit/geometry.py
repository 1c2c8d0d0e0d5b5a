"""Two-dimensional computational geometry on floating-point points.

Comparisons treat values within ``EPS`` of each other as equal.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cmp_to_key

EPS = 1e-9


def sign(x: float) -> int:
    """Return -1, 0 or 1 for the sign of ``x``, treating tiny values as zero."""
    return (x > EPS) - (x < -EPS)


@dataclass(frozen=True, eq=False)
class Point:
    """A point, or a vector from the origin, in the plane."""

    x: float = 0.0
    y: float = 0.0

    __hash__ = None  # equality is approximate

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Point:
        return Point(self.x / divisor, self.y / divisor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return sign(other.x - self.x) == 0 and sign(other.y - self.y) == 0

    def __lt__(self, other: Point) -> bool:
        if sign(other.x - self.x) == 0:
            return self.y < other.y
        return self.x < other.x

    def __gt__(self, other: Point) -> bool:
        return other < self

    def perp(self):
        """Return the vector rotated a quarter turn counter-clockwise."""
        return Point(-self.y, self.x)

    def arg(self):
        """Return the direction angle in radians, in ``(-pi, pi]``."""
        return math.atan2(self.y, self.x)

    def norm(self):
        """Return the Euclidean length."""
        return math.hypot(self.x, self.y)

    def norm2(self):
        """Return the squared Euclidean length."""
        return self.x * self.x + self.y * self.y


_ORIGIN = Point(0.0, 0.0)


def dot(a, b):
    """Return the dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def cross(a, b):
    """Return the z component of the cross product of two vectors."""
    return a.x * b.y - a.y * b.x


def orientation(a, b, c):
    """Return 1 if ``a, b, c`` turn left, -1 if they turn right, 0 if collinear."""
    return sign(cross(b - a, c - a))


def dist(a, b):
    """Return the distance between two points."""
    return (a - b).norm()


def angle(a, b):
    """Return the unsigned angle between two non-zero vectors, in ``[0, pi]``."""
    na, nb = a.norm(), b.norm()
    if na == 0 or nb == 0:
        raise ValueError("angle is undefined for a zero vector")
    cos_theta = dot(a, b) / na / nb
    return math.acos(max(-1.0, min(1.0, cos_theta)))


def rotate_ccw(a, t):
    """Rotate ``a`` counter-clockwise about the origin by ``t`` radians."""
    c, s = math.cos(t), math.sin(t)
    return Point(a.x * c - a.y * s, a.x * s + a.y * c)


def rotate_cw(a, t):
    """Rotate ``a`` clockwise about the origin by ``t`` radians."""
    c, s = math.cos(t), math.sin(t)
    return Point(a.x * c + a.y * s, -a.x * s + a.y * c)


def is_point_in_angle(a, b, c, p):
    """Return True if ``p`` lies inside or on the angle ``bac``."""
    turn = orientation(a, b, c)
    if turn == 0:
        raise ValueError("the angle's sides must not be collinear")
    if turn < 0:
        b, c = c, b
    return orientation(a, b, p) >= 0 and orientation(a, c, p) <= 0


def oriented_angle(a, b, c):
    """Return the counter-clockwise angle from ``ab`` to ``ac``, in ``[0, 2*pi)``."""
    theta = angle(b - a, c - a)
    if orientation(a, b, c) >= 0:
        return theta
    return 2 * math.pi - theta


def _half(p: Point) -> bool:
    if p.x == 0 and p.y == 0:
        raise ValueError("direction of a zero vector is undefined")
    return p.y > 0 or (p.y == 0 and p.x < 0)


def polar_sort(points, origin=None):
    """Return ``points`` sorted counter-clockwise around ``origin``.

    Angles run from just above ``-pi`` up to ``pi``; points in the same
    direction are ordered by distance.
    """
    o = _ORIGIN if origin is None else origin

    def before(a: Point, b: Point) -> bool:
        da, db = a - o, b - o
        return (_half(da), 0.0, da.norm2()) < (_half(db), cross(da, db), db.norm2())

    def compare(a: Point, b: Point) -> int:
        if before(a, b):
            return -1
        if before(b, a):
            return 1
        return 0

    return sorted(points, key=cmp_to_key(compare))


def is_convex(points):
    """Return True if the polygon never turns both left and right."""
    pts = list(points)
    n = len(pts)
    turns = {orientation(pts[i], pts[(i + 1) % n], pts[(i + 2) % n]) for i in range(n)}
    return not (1 in turns and -1 in turns)


@dataclass(frozen=True)
class Line:
    """The line of points ``p`` with ``cross(v, p) == c``; ``v`` is its direction."""

    v: Point
    c: float

    @staticmethod
    def through(p, q):
        """Return the line through ``p`` and ``q``, directed from ``p`` to ``q``."""
        v = q - p
        return Line(v, cross(v, p))

    def side(self, p):
        """Return a value positive left of the line, negative right, zero on it."""
        return cross(self.v, p) - self.c

    def distance(self, p):
        """Return the distance from ``p`` to the line."""
        return abs(self.side(p)) / self.v.norm()

    def sq_distance(self, p):
        """Return the squared distance from ``p`` to the line."""
        s = self.side(p)
        return s * s / self.v.norm2()

    def perp_through(self, p):
        """Return the perpendicular line through ``p``."""
        return Line.through(p, p + self.v.perp())

    def cmp_proj(self, p, q):
        """Return True if ``p`` comes before ``q`` along the line's direction."""
        return dot(self.v, p) < dot(self.v, q)

    def translate(self, t):
        """Return the line moved by the vector ``t``."""
        return Line(self.v, self.c + cross(self.v, t))

    def shift_left(self, d):
        """Return the parallel line at distance ``d`` to the left."""
        return Line(self.v, self.c + d * self.v.norm())

    def proj(self, p):
        """Return the orthogonal projection of ``p`` onto the line."""
        return p - self.v.perp() * (self.side(p) / self.v.norm2())

    def refl(self, p):
        """Return the mirror image of ``p`` in the line."""
        return p - self.v.perp() * (2 * self.side(p) / self.v.norm2())


def bisector(l1, l2, interior=True):
    """Return a bisector of two crossing lines; the interior one or the other."""
    if cross(l1.v, l2.v) == 0:
        raise ValueError("parallel lines have no angle bisector")
    s = 1 if interior else -1
    n1, n2 = l1.v.norm(), l2.v.norm()
    return Line(l2.v / n2 + l1.v / n1 * s, l2.c / n2 + l1.c / n1 * s)


def in_disk(a, b, p):
    """Return True if ``p`` lies in the closed disk with diameter ``ab``."""
    return dot(a - p, b - p) <= 0


def on_segment(a, b, p):
    """Return True if ``p`` lies on the closed segment ``ab``."""
    return orientation(a, b, p) == 0 and in_disk(a, b, p)


def segment_intersection(a, b, c, d):
    """Return the point where ``ab`` and ``cd`` properly cross, or ``None``."""
    oa = cross(d - c, a - c)
    ob = cross(d - c, b - c)
    oc = cross(b - a, c - a)
    od = cross(b - a, d - a)
    if sign(oa) * sign(ob) < 0 and sign(oc) * sign(od) < 0:
        return (a * ob - b * oa) / (ob - oa)
    return None


def segment_intersection_points(a, b, c, d):
    """Return the distinct endpoints describing the intersection of ``ab`` and ``cd``.

    An empty list means no intersection, one point a single common point,
    and two points the ends of a shared piece. Points are sorted by x, then y.
    """
    crossing = segment_intersection(a, b, c, d)
    if crossing is not None:
        return [crossing]
    candidates = []
    if on_segment(c, d, a):
        candidates.append(a)
    if on_segment(c, d, b):
        candidates.append(b)
    if on_segment(a, b, c):
        candidates.append(c)
    if on_segment(a, b, d):
        candidates.append(d)
    unique = {(p.x, p.y): p for p in candidates}
    return [unique[key] for key in sorted(unique)]


def segment_point_distance(a, b, p):
    """Return the distance from ``p`` to the closed segment ``ab``."""
    if a != b:
        line = Line.through(a, b)
        if line.cmp_proj(a, p) and line.cmp_proj(p, b):
            return line.distance(p)
    return min((p - a).norm(), (p - b).norm())


def segment_segment_distance(a, b, c, d):
    """Return the distance between the closed segments ``ab`` and ``cd``."""
    if segment_intersection(a, b, c, d) is not None:
        return 0.0
    return min(
        segment_point_distance(a, b, c),
        segment_point_distance(a, b, d),
        segment_point_distance(c, d, a),
        segment_point_distance(c, d, b),
    )


def triangle_area(a, b, c):
    """Return the area of the triangle ``abc``."""
    return abs(cross(b - a, c - a)) / 2.0


def polygon_area(points):
    """Return the area of a simple polygon given by its vertices in order."""
    pts = list(points)
    n = len(pts)
    total = sum(cross(pts[i], pts[(i + 1) % n]) for i in range(n))
    return abs(total) / 2.0


def _above(a: Point, p: Point) -> bool:
    return p.y >= a.y


def _crosses_ray(a: Point, p: Point, q: Point) -> bool:
    return (_above(a, q) - _above(a, p)) * orientation(a, p, q) > 0


def in_polygon(points, a, strict=True):
    """Return True if ``a`` is inside the polygon.

    A point on the boundary counts as inside only when ``strict`` is False.
    """
    pts = list(points)
    n = len(pts)
    crossings = 0
    for i in range(n):
        p, q = pts[i], pts[(i + 1) % n]
        if on_segment(p, q, a):
            return not strict
        crossings += _crosses_ray(a, p, q)
    return crossings % 2 == 1


def angle_travelled(a, p, q):
    """Return the signed angle swept when moving from ``p`` to ``q`` as seen from ``a``."""
    amplitude = angle(p - a, q - a)
    return amplitude if orientation(a, p, q) > 0 else -amplitude


@dataclass(frozen=True)
class _Turn:
    d: Point
    t: int = 0

    def t180(self) -> _Turn:
        return _Turn(self.d * -1, self.t + _half(self.d))

    def __lt__(self, other: _Turn) -> bool:
        return (self.t, _half(self.d), 0.0) < (other.t, _half(other.d), cross(self.d, other.d))


def _move_to(a: _Turn, new_d: Point) -> _Turn:
    if on_segment(a.d, new_d, _ORIGIN):
        raise ValueError("the path passes through the reference point")
    t = a.t
    if a.t180() < _Turn(new_d, t):
        t -= 1
    if _Turn(new_d, t).t180() < a:
        t += 1
    return _Turn(new_d, t)


def winding_number(points, x):
    """Return how many times the closed polygon winds counter-clockwise around ``x``.

    Raises ``ValueError`` if ``x`` lies on the boundary.
    """
    directions = [p - x for p in points]
    if not directions:
        return 0
    turn = _Turn(directions[-1])
    for d in directions:
        turn = _move_to(turn, d)
    return turn.t