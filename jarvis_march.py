from config import CFG
from errors import HullConvergenceError
from geometry import OrientationTest, Point, as_points, canonical_order, leftmost_point, unique_points


class JarvisMarchBuilder:
    def __init__(self, orient: OrientationTest | None = None):
        self.orient = orient or OrientationTest(CFG.get('geometry', 'eps'))

    def next_vertex(self, current: Point, points: list[Point]) -> Point:
        """
        The point every other point lies left of (or on, nearer) when seen from `current`.
        """
        best = None
        for p in points:
            if p == current:
                continue
            if best is None or self.orient.supersedes(current, best, p):
                best = p
        return best

    def compute_hull(self, points: list[Point]) -> list[Point]:
        """
        Gift wrapping from the leftmost (then lowest) point, counter-clockwise.
        Collinear boundary points are skipped in favour of the farthest one.

        Time complexity: O(n*h).
        """
        points = unique_points(as_points(points))
        if len(points) < 3:
            return canonical_order(points)
        return self.orient.finish(self.wrap(points), start=leftmost_point)

    def wrap(self, points: list[Point]) -> list[Point]:
        """
        Exact hull walk. Every step lands on a new strict hull vertex, so the
        walk is back at the start after at most len(points) steps.
        """
        start = leftmost_point(points)
        hull = [start]
        seen = {start}
        current = start
        for _ in range(len(points)):
            current = self.next_vertex(current, points)
            if current == start:
                return hull
            if current in seen:
                break
            hull.append(current)
            seen.add(current)

        raise HullConvergenceError(
            f'Gift wrap revisited {current} before closing ({len(hull)} vertices collected)'
        )
