from config import CFG
from geometry import (
    Orientation,
    OrientationTest,
    Point,
    as_points,
    canonical_order,
    lowest_point,
    polar_order,
    unique_points,
)


class GrahamScanBuilder:
    """
    Polar-angle sweep hull. Also the per-group base case of ChanHullBuilder.
    """

    def __init__(self, orient: OrientationTest | None = None):
        self.orient = orient or OrientationTest(CFG.get('geometry', 'eps'))

    def compute_hull(self, points: list[Point]) -> list[Point]:
        """
        Convex hull in counter-clockwise order, starting from the lowest
        (then leftmost) point. Points strictly inside a hull edge are dropped,
        so a collinear set collapses to its two extremes.

        Time complexity: O(n*log(n)).
        """
        points = unique_points(as_points(points))
        return self.orient.finish(self.scan(points))

    def scan(self, points: list[Point]) -> list[Point]:
        """
        Exact hull of distinct points, before the collinearity tolerance is
        applied. ChanHullBuilder wraps around these polygons.
        """
        if len(points) <= 2:
            return canonical_order(points)

        start = lowest_point(points)
        rest = sorted((p for p in points if p != start), key=polar_order(start, self.orient))

        stack = [start]
        for p in rest:
            # closer collinear points come first and get evicted by farther ones
            while len(stack) >= 2 and self.orient(stack[-2], stack[-1], p) != Orientation.LEFT_TURN:
                stack.pop()
            stack.append(p)
        return stack
