import numpy as np
import pytest

from convex_hull import ALGORITHMS, convex_hull
from errors import InvalidPointSetError
from geometry import Orientation, Point, orientation
from test_graham_scan import NEAR_DEGENERATE


def assert_convex(hull: list[Point]):
    n = len(hull)
    if n < 3:
        return
    for i in range(n):
        turn = orientation(hull[i - 1], hull[i], hull[(i + 1) % n])
        assert turn != Orientation.RIGHT_TURN, f"Turn at {hull[i]} is {turn.name}"


def assert_contains(hull: list[Point], points: list[Point]):
    n = len(hull)
    if n < 3:
        return
    for p in points:
        for i in range(n):
            assert orientation(hull[i], hull[(i + 1) % n], p) != Orientation.RIGHT_TURN, (
                f"{p} outside edge {hull[i]} -> {hull[(i + 1) % n]}"
            )


def assert_minimal(hull: list[Point], points: list[Point]):
    assert set(hull) <= set(points)
    assert len(hull) == len(set(hull))
    n = len(hull)
    if n < 3:
        return
    # dropping a vertex leaves that vertex strictly outside the shortcut edge
    for i in range(n):
        assert orientation(hull[i - 1], hull[(i + 1) % n], hull[i]) == Orientation.RIGHT_TURN


@pytest.fixture(params=sorted(ALGORITHMS))
def algorithm(request):
    return request.param


@pytest.fixture
def point_sets():
    rng = np.random.default_rng(123)
    sets = [
        [Point.of(row) for row in rng.uniform(-50, 50, size=(200, 2))],
        [Point.of(row) for row in rng.integers(0, 8, size=(100, 2))],
        [Point.of(row) for row in rng.normal(0, 10, size=(300, 2))],
        [Point(i, i * i) for i in range(-20, 21)],
    ]
    return sets


def test_hull_properties(algorithm, point_sets):
    for points in point_sets:
        hull = convex_hull(points, algorithm)
        assert_convex(hull)
        assert_contains(hull, points)
        assert_minimal(hull, points)


def test_hull_is_idempotent(algorithm, point_sets):
    for points in point_sets:
        hull = convex_hull(points, algorithm)
        again = convex_hull(hull, algorithm)
        assert set(again) == set(hull)


def test_hull_is_counter_clockwise(algorithm):
    hull = convex_hull([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2), (1, 3)], algorithm)
    area2 = sum(
        hull[i].x * hull[(i + 1) % len(hull)].y - hull[(i + 1) % len(hull)].x * hull[i].y
        for i in range(len(hull))
    )
    assert area2 > 0


@pytest.mark.parametrize(
    "coords, expected",
    [
        ([], []),
        ([(5, 5)], [(5, 5)]),
        ([(3, 4), (1, 2)], [(1, 2), (3, 4)]),
        ([(0, 0), (1, 1), (2, 2), (3, 3)], [(0, 0), (3, 3)]),
    ],
)
def test_degenerate_outputs(algorithm, coords, expected):
    assert convex_hull(coords, algorithm) == [Point(x, y) for x, y in expected]


def test_square_with_interior_points(algorithm):
    hull = convex_hull([(0, 0), (0, 3), (3, 3), (3, 0), (1, 1), (2, 2)], algorithm)
    assert hull == [Point(0, 0), Point(3, 0), Point(3, 3), Point(0, 3)]


def test_default_algorithm_is_chan():
    points = [(i, i * i) for i in range(-10, 11)]
    assert convex_hull(points) == convex_hull(points, 'graham')


def test_eps_override():
    # the right edge bulges outwards by 1e-7
    points = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0), (2.0 + 1e-7, 1.0)]
    assert len(convex_hull(points, 'graham')) == 5
    assert convex_hull(points, 'graham', eps=1e-6) == [
        Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)
    ]


def test_invalid_inputs():
    with pytest.raises(InvalidPointSetError):
        convex_hull(None)
    with pytest.raises(InvalidPointSetError):
        convex_hull([(0, 0), (1,)])
    with pytest.raises(InvalidPointSetError):
        convex_hull([(0, 0), (float('nan'), 1)])
    with pytest.raises(InvalidPointSetError):
        convex_hull([(0, 0)], algorithm='quickhull')
    with pytest.raises(ValueError):
        convex_hull(None, 'jarvis')


def test_lowest_point_within_eps_of_an_edge(algorithm):
    hull = convex_hull(NEAR_DEGENERATE, algorithm)
    assert hull == [Point(0, 0), Point(2, 0), Point(1, 1)]
    points = [Point.of(p) for p in NEAR_DEGENERATE]
    assert_convex(hull)
    assert_contains(hull, points)
    assert_minimal(hull, points)


@pytest.mark.parametrize("high", [1e-4, 1e-6])
def test_near_degenerate_floats(algorithm, high):
    rng = np.random.default_rng(31)
    for _ in range(50):
        points = [Point.of(row) for row in rng.uniform(0, high, size=(30, 2))]
        hull = convex_hull(points, algorithm)
        assert_convex(hull)
        assert_contains(hull, points)
        assert set(hull) <= set(points)
        assert len(hull) == len(set(hull))
