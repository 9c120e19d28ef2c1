from config import CFG
from geometry import Orientation, OrientationTest, Point, squared_distance
from logger import get_logger

logger = get_logger(__name__)

LEFT = Orientation.LEFT_TURN
RIGHT = Orientation.RIGHT_TURN
COLLINEAR = Orientation.COLLINEAR


class TangentFinder:
    """
    Tangent queries from an outside point to a convex polygon.

    The polygon is a counter-clockwise vertex list with no collinear interior
    vertices, as produced by GrahamScanBuilder.scan. The query point must lie
    outside the polygon or be one of its vertices. The tangent vertex v is the
    one with no vertex strictly right of ray p -> v, i.e. the next vertex a
    counter-clockwise gift wrap from p would reach on this polygon.
    """

    def __init__(self, orient: OrientationTest | None = None):
        self.orient = orient or OrientationTest(CFG.get('geometry', 'eps'))
        self.fallbacks = 0

    def find(self, p: Point, hull: list[Point]) -> int:
        """
        Index of the tangent vertex of `hull` seen from `p`.
        Among vertices on the tangent ray, the farthest from p is returned.

        Time complexity: O(log(k)) for k hull vertices.
        """
        assert len(hull) > 0, 'Tangent requested for an empty hull'
        n = len(hull)
        if n == 1:
            return 0
        if n == 2:
            if hull[0] == p:
                return 1
            if hull[1] == p:
                return 0
            return 1 if self.orient.supersedes(p, hull[0], hull[1]) else 0

        c = self._binary_search(p, hull)
        if not self.is_tangent(p, hull, c):
            # the search assumes p strictly outside; p on the polygon can mislead it
            self.fallbacks += 1
            logger.debug('Binary tangent search missed for %s, scanning %d vertices', p, n)
            c = self._linear_search(p, hull)
        return self._farthest_on_ray(p, hull, c)

    def is_tangent(self, p: Point, hull: list[Point], c: int) -> bool:
        n = len(hull)
        v = hull[c]
        if v == p:
            return False
        return (
            self.orient(p, v, hull[c - 1]) != RIGHT
            and self.orient(p, v, hull[(c + 1) % n]) != RIGHT
        )

    def _binary_search(self, p: Point, hull: list[Point]) -> int:
        """
        Binary search over the cyclic vertex order. At every midpoint c, the
        turns from p towards c's neighbours tell whether c is the tangent;
        otherwise the side of c relative to the window start and the
        direction the window start is heading pick the half to keep.
        """
        n = len(hull)
        lo, hi = 0, n
        lo_before = self.orient(p, hull[0], hull[-1])
        lo_after = self.orient(p, hull[0], hull[1])
        while lo < hi:
            c = (lo + hi) // 2
            c_before = self.orient(p, hull[c], hull[c - 1])
            c_after = self.orient(p, hull[c], hull[(c + 1) % n])
            if c_before != RIGHT and c_after != RIGHT:
                return c

            c_side = self.orient(p, hull[lo], hull[c])
            if (
                c_side == LEFT and (lo_after == RIGHT or lo_before == lo_after)
                or c_side == RIGHT and c_before == RIGHT
            ):
                hi = c
            else:
                lo = c + 1
            lo_before = Orientation(-c_after)
            lo_after = self.orient(p, hull[lo % n], hull[(lo + 1) % n])
        return lo % n

    def _linear_search(self, p: Point, hull: list[Point]) -> int:
        best = None
        for i, v in enumerate(hull):
            if v == p:
                continue
            if best is None or self.orient.supersedes(p, hull[best], v):
                best = i
        return best if best is not None else 0

    def _farthest_on_ray(self, p: Point, hull: list[Point], c: int) -> int:
        n = len(hull)
        for _ in range(n - 1):
            nxt = (c + 1) % n
            if (
                self.orient(p, hull[c], hull[nxt]) != COLLINEAR
                or squared_distance(p, hull[nxt]) <= squared_distance(p, hull[c])
            ):
                break
            c = nxt
        return c
