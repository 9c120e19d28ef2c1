import itertools

import pytest

from geometry import Orientation, OrientationTest, Point, squared_distance
from graham_scan import GrahamScanBuilder
from tangent import TangentFinder


def brute_force_tangent(p: Point, hull: list[Point]) -> int:
    orient = OrientationTest()
    candidates = [
        i for i, v in enumerate(hull)
        if v != p and all(orient(p, v, w) != Orientation.RIGHT_TURN for w in hull)
    ]
    return max(candidates, key=lambda i: squared_distance(p, hull[i]))


def strictly_outside(p: Point, hull: list[Point]) -> bool:
    orient = OrientationTest()
    return any(
        orient(hull[i], hull[(i + 1) % len(hull)], p) == Orientation.RIGHT_TURN
        for i in range(len(hull))
    )


@pytest.fixture
def octagon():
    return [Point(x, y) for x, y in [(2, 0), (4, 0), (6, 2), (6, 4), (4, 6), (2, 6), (0, 4), (0, 2)]]


@pytest.fixture
def big_polygon():
    # strictly convex: lower parabola arc closed by one long chord
    return GrahamScanBuilder().compute_hull([Point(i, i * i) for i in range(-15, 16)])


def test_tangent_matches_brute_force_on_octagon(octagon):
    finder = TangentFinder()
    for x, y in itertools.product(range(-4, 11), repeat=2):
        p = Point(x, y)
        if not strictly_outside(p, octagon):
            continue
        assert finder.find(p, octagon) == brute_force_tangent(p, octagon), p


def test_tangent_matches_brute_force_on_big_polygon(big_polygon):
    finder = TangentFinder()
    assert len(big_polygon) == 31
    for x, y in itertools.product(range(-40, 41, 3), range(-60, 300, 7)):
        p = Point(x, y)
        if not strictly_outside(p, big_polygon):
            continue
        assert finder.find(p, big_polygon) == brute_force_tangent(p, big_polygon), p


def test_tangent_prefers_farther_collinear_vertex():
    square = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
    finder = TangentFinder()
    # p on the extension of the bottom edge: (0, 0) and (4, 0) are both on the tangent ray
    assert finder.find(Point(-3, 0), square) == 1
    assert finder.find(Point(4, -2), square) == 2


def test_tangent_small_hulls():
    finder = TangentFinder()
    assert finder.find(Point(5, 5), [Point(0, 0)]) == 0

    segment = [Point(0, 0), Point(4, 0)]
    # from above, the counter-clockwise wrap reaches (0, 0) first
    assert finder.find(Point(2, 3), segment) == 0
    # from below, it reaches (4, 0)
    assert finder.find(Point(2, -3), segment) == 1
    # on the segment's line: farther endpoint
    assert finder.find(Point(-1, 0), segment) == 1
    assert finder.find(Point(6, 0), segment) == 0


def test_tangent_is_logarithmic(big_polygon):
    orient = OrientationTest()
    finder = TangentFinder(orient)
    p = Point(0, -50)
    finder.find(p, big_polygon)
    assert finder.fallbacks == 0
    assert orient.count < len(big_polygon)


def test_tangent_rejects_empty_hull():
    with pytest.raises(AssertionError):
        TangentFinder().find(Point(0, 0), [])
