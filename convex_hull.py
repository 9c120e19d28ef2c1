from chan_hull import ChanHullBuilder
from config import CFG
from errors import InvalidPointSetError
from geometry import OrientationTest, Point, as_points
from graham_scan import GrahamScanBuilder
from jarvis_march import JarvisMarchBuilder

ALGORITHMS = {
    'graham': GrahamScanBuilder,
    'jarvis': JarvisMarchBuilder,
    'chan': ChanHullBuilder,
}


def convex_hull(points, algorithm: str = 'chan', eps: float | None = None) -> list[Point]:
    """
    Convex hull of a finite planar point set, counter-clockwise, no duplicate
    and no collinear boundary-interior points.

    Points may be Point instances or (x, y) pairs. Degenerate inputs give
    [] for no points, [p] for a single distinct point, and the two extremes
    (lowest, then leftmost, first) for two distinct or all-collinear points.
    """
    if algorithm not in ALGORITHMS:
        raise InvalidPointSetError(f'Unknown algorithm {algorithm!r}, expected one of {sorted(ALGORITHMS)}')
    points = as_points(points)
    orient = OrientationTest(CFG.get('geometry', 'eps') if eps is None else eps)
    return ALGORITHMS[algorithm](orient).compute_hull(points)
