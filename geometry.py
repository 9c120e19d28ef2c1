import math

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from fractions import Fraction
from functools import cmp_to_key
from numbers import Integral, Real

from errors import InvalidPointSetError


@dataclass(frozen=True, order=True)
class Point:
    x: float
    y: float

    @classmethod
    def of(cls, value) -> "Point":
        """
        Coerce a Point or any (x, y) pair into a Point.
        Coordinates must be finite real numbers.
        """
        if isinstance(value, Point):
            coords = (value.x, value.y)
        else:
            try:
                coords = tuple(value)
            except TypeError:
                raise InvalidPointSetError(f'Not a 2D point: {value!r}') from None
        if len(coords) != 2:
            raise InvalidPointSetError(f'Expected 2 coordinates, got {len(coords)}: {value!r}')

        normalized = []
        for c in coords:
            if isinstance(c, bool) or not isinstance(c, Real):
                raise InvalidPointSetError(f'Non-numeric coordinate in {value!r}')
            if not math.isfinite(c):
                raise InvalidPointSetError(f'Non-finite coordinate in {value!r}')
            # numpy scalars become Python numbers so integer products stay exact
            normalized.append(int(c) if isinstance(c, Integral) else float(c))
        return cls(*normalized)


class Orientation(IntEnum):
    RIGHT_TURN = -1
    COLLINEAR = 0
    LEFT_TURN = 1


def cross(p: Point, q: Point, r: Point) -> float:
    """
    Cross product of vectors pq and qr.
    Positive for a counter-clockwise turn at q.
    """
    return (q.x - p.x) * (r.y - q.y) - (q.y - p.y) * (r.x - q.x)


def orientation(p: Point, q: Point, r: Point, eps: float = 1e-9) -> Orientation:
    """
    Classify the turn p -> q -> r.

    Cross products within `eps` of zero are COLLINEAR. Integer coordinates
    are multiplied exactly (Python ints do not overflow), so any eps < 1
    classifies integer input exactly.
    """
    val = cross(p, q, r)
    if abs(val) <= eps:
        return Orientation.COLLINEAR
    return Orientation.LEFT_TURN if val > 0 else Orientation.RIGHT_TURN


# relative error bound of the float determinant below (Shewchuk's ccwerrboundA)
_CCW_ERRBOUND = 3.3306690738754716e-16


def _sign(val) -> Orientation:
    return Orientation((val > 0) - (val < 0))


def exact_orientation(p: Point, q: Point, r: Point) -> Orientation:
    """
    Exact sign of the turn p -> q -> r, with no tolerance.

    Integer input is exact as is. Float input is evaluated in floating
    point first and only recomputed with Fractions when the result is too
    close to zero for its sign to be trusted.
    """
    left = (q.x - p.x) * (r.y - p.y)
    right = (q.y - p.y) * (r.x - p.x)
    det = left - right
    if type(det) is int:
        return _sign(det)
    bound = _CCW_ERRBOUND * (abs(left) + abs(right))
    if det > bound or -det > bound:
        return _sign(det)
    px, py, qx, qy, rx, ry = map(Fraction, (p.x, p.y, q.x, q.y, r.x, r.y))
    return _sign((qx - px) * (ry - py) - (qy - py) * (rx - px))


def squared_distance(a: Point, b: Point) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def dot(o: Point, a: Point, b: Point) -> float:
    """
    Dot product of vectors oa and ob.
    """
    return (a.x - o.x) * (b.x - o.x) + (a.y - o.y) * (b.y - o.y)


def lowest_point(points: list[Point]) -> Point:
    """
    Lowest y, then lowest x.
    """
    return min(points, key=lambda p: (p.y, p.x))


def leftmost_point(points: list[Point]) -> Point:
    """
    Lowest x, then lowest y.
    """
    return min(points, key=lambda p: (p.x, p.y))


def as_points(points: Iterable | None) -> list[Point]:
    if points is None:
        raise InvalidPointSetError('Point collection is None')
    if isinstance(points, (str, bytes)):
        raise InvalidPointSetError('Point collection must not be a string')
    try:
        return [Point.of(p) for p in points]
    except TypeError:
        raise InvalidPointSetError(f'Point collection is not iterable: {points!r}') from None


def unique_points(points: list[Point]) -> list[Point]:
    """
    Drop duplicates, keeping first occurrences in input order.
    """
    return list(dict.fromkeys(points))


def canonical_order(points: list[Point]) -> list[Point]:
    """
    Order a degenerate (size <= 2) result so that it starts from the
    canonical lowest point.
    """
    if len(points) < 2:
        return list(points)
    start = lowest_point(points)
    return [start] + [p for p in points if p != start]


def rotate_to(hull: list[Point], start: Point) -> list[Point]:
    k = hull.index(start)
    return hull[k:] + hull[:k]


def _within_edge(a: Point, b: Point, r: Point, eps: float) -> bool:
    # r is eps-close to line ab and projects onto the segment
    return abs(cross(a, b, r)) <= eps and dot(a, b, r) >= 0 and dot(b, a, r) >= 0


def simplify_hull(hull: list[Point], eps: float) -> list[Point]:
    """
    Drop the vertices of an exact counter-clockwise hull whose turn is
    within `eps` of straight.

    The eligible vertex closest to the edge replacing it goes first, ties
    broken by point order, so the result depends only on the cyclic vertex
    sequence and not on where it starts. A vertex is eligible only when its
    turn is within `eps` and every vertex dropped between its neighbours,
    itself included, stays within `eps` of the edge that replaces it and
    projects onto that edge. Input points therefore never end up more than
    `eps` outside the result, and the two extremes of a nearly straight
    hull survive.
    """
    verts = list(hull)
    if len(verts) < 3 or eps <= 0:
        return verts
    # gaps[i] holds the vertices dropped between verts[i] and verts[i + 1]
    gaps = [[] for _ in verts]
    while len(verts) >= 3:
        n = len(verts)
        best = None
        for i in range(n):
            prev, v, nxt = verts[i - 1], verts[i], verts[(i + 1) % n]
            turn = cross(prev, v, nxt)
            if turn > eps:
                continue
            # squared distance from v to line (prev, nxt)
            key = (turn * turn / squared_distance(prev, nxt), v)
            if best is not None and key >= best[0]:
                continue
            dropped = gaps[i - 1] + [v] + gaps[i]
            if all(_within_edge(prev, nxt, r, eps) for r in dropped):
                best = (key, i, dropped)
        if best is None:
            break
        _, i, dropped = best
        gaps[i - 1] = dropped
        del verts[i]
        del gaps[i]
    return verts


class OrientationTest:
    """
    Counting orientation predicate shared by the hull builders.

    Calls return the exact turn, so the builders always see a consistent
    (transitive) ordering even for nearly collinear floats. The tolerance
    `eps` is applied once, to the finished hull, by `finish`. All hull
    builders route their geometric decisions through one instance, so
    `count` measures the work of a whole computation.
    """

    def __init__(self, eps: float = 1e-9):
        self.eps = eps
        self.count = 0

    def __call__(self, p: Point, q: Point, r: Point) -> Orientation:
        self.count += 1
        return exact_orientation(p, q, r)

    def reset(self):
        self.count = 0

    def supersedes(self, p: Point, current: Point, challenger: Point) -> bool:
        """
        Whether `challenger` should replace `current` as the next hull vertex after p.

        True if challenger lies strictly right of ray p -> current, or on
        that ray (same direction, not behind p) and farther from p.
        Collinear nearer points are skipped, which keeps intermediate
        boundary points out of the hull.
        """
        turn = self(p, current, challenger)
        if turn == Orientation.RIGHT_TURN:
            return True
        return (
            turn == Orientation.COLLINEAR
            and dot(p, current, challenger) > 0
            and squared_distance(p, challenger) > squared_distance(p, current)
        )

    def finish(self, hull: list[Point], start=lowest_point) -> list[Point]:
        """
        Apply the collinearity tolerance to an exact hull and rotate it so
        that it begins at `start(hull)`. Results of at most two points come
        back in canonical order.
        """
        hull = simplify_hull(hull, self.eps)
        if len(hull) <= 2:
            return canonical_order(hull)
        return rotate_to(hull, start(hull))


def _upper_half(pivot: Point, a: Point) -> bool:
    return a.y > pivot.y or (a.y == pivot.y and a.x > pivot.x)


def polar_order(pivot: Point, orient: OrientationTest):
    """
    Sort key ordering points by polar angle around `pivot`, closer first on ties.

    Angles in [0, pi) sort before angles in [pi, 2 pi), so the order is
    total for any pivot. With the lowest point as pivot every other point
    is in the first half.
    """
    def compare(a: Point, b: Point) -> int:
        ha, hb = _upper_half(pivot, a), _upper_half(pivot, b)
        if ha != hb:
            return -1 if ha else 1
        turn = orient(pivot, a, b)
        if turn == Orientation.LEFT_TURN:
            return -1
        if turn == Orientation.RIGHT_TURN:
            return 1
        da = squared_distance(pivot, a)
        db = squared_distance(pivot, b)
        return (da > db) - (da < db)

    return cmp_to_key(compare)
