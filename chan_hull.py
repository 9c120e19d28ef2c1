import math

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np

from config import CFG, Config
from geometry import OrientationTest, Point, as_points, lowest_point, unique_points
from graham_scan import GrahamScanBuilder
from jarvis_march import JarvisMarchBuilder
from logger import get_logger
from tangent import TangentFinder

logger = get_logger(__name__)


@dataclass
class RoundStats:
    t: int
    group_size: int
    groups: int
    steps: int
    closed: bool


class ChanHullBuilder:
    """
    Output-sensitive hull: Graham scan on small groups, gift wrapping across
    the group hulls through tangent queries, with a squared group-size guess.
    """

    def __init__(
        self,
        orient: OrientationTest | None = None,
        config: Config | None = None,
        rng: np.random.Generator | None = None,
        max_rounds: int | None = None,
    ):
        cfg = config or CFG
        self.orient = orient or OrientationTest(cfg.get('geometry', 'eps'))
        self.small_input_threshold: int = cfg.get('chan', 'small_input_threshold')
        self.shuffle: bool = cfg.get('partition', 'shuffle')
        self.workers: int = cfg.get('partition', 'workers')
        self.rng = rng if rng is not None else np.random.default_rng(cfg.get('partition', 'seed'))
        self.max_rounds = max_rounds

        self.graham = GrahamScanBuilder(self.orient)
        self.tangents = TangentFinder(self.orient)
        self.rounds: list[RoundStats] = []
        self.fell_back = False

    def round_limit(self, n: int) -> int:
        """
        Rounds needed for 2^(2^t) to reach n. The round with m == n has a
        single group and always closes, so no margin is added.
        """
        if self.max_rounds is not None:
            return self.max_rounds
        return max(math.ceil(math.log2(math.log2(n))), 1) if n > 2 else 1

    def compute_hull(self, points: list[Point]) -> list[Point]:
        """
        Convex hull in counter-clockwise order, starting from the lowest
        (then leftmost) point, with the same collinearity policy as
        GrahamScanBuilder.

        Time complexity: O(n*log(h)).
        """
        points = unique_points(as_points(points))
        self.rounds = []
        self.fell_back = False

        n = len(points)
        if n <= max(self.small_input_threshold, 2):
            return self.graham.compute_hull(points)

        start = lowest_point(points)
        for t in range(1, self.round_limit(n) + 1):
            m = min(n, 2 ** (2 ** t))
            hull = self.wrap_groups(points, m, start, t)
            if hull is not None:
                return self.orient.finish(hull)
            if m == n:
                break

        logger.warning('No closed walk after %d rounds on %d points, falling back to gift wrap', len(self.rounds), n)
        self.fell_back = True
        return self.orient.finish(JarvisMarchBuilder(self.orient).wrap(points))

    def partition(self, points: list[Point], m: int) -> list[list[Point]]:
        """
        Split into ceil(n / m) non-empty groups of at most m points.
        """
        if self.shuffle:
            order = self.rng.permutation(len(points))
            points = [points[i] for i in order]
        return [points[i:i + m] for i in range(0, len(points), m)]

    def group_hulls(self, groups: list[list[Point]]) -> list[list[Point]]:
        if self.workers <= 1 or len(groups) == 1:
            return [self.graham.scan(group) for group in groups]

        builders = [GrahamScanBuilder(OrientationTest(self.orient.eps)) for _ in groups]
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            hulls = list(pool.map(lambda job: job[0].scan(job[1]), zip(builders, groups)))
        self.orient.count += sum(b.orient.count for b in builders)
        return hulls

    def wrap_groups(self, points: list[Point], m: int, start: Point, t: int = 0) -> list[Point] | None:
        """
        One round with group size m. Returns the exact hull if the wrap
        closes within m steps, None otherwise. `start` must be a hull vertex
        of the whole set, such as its lowest point.
        """
        groups = self.partition(points, m)
        hulls = self.group_hulls(groups)

        g = next(k for k, h in enumerate(hulls) if start in h)
        current = (g, hulls[g].index(start))
        hull = [start]
        for step in range(1, m + 1):
            current = self.next_vertex(hulls, current)
            vertex = hulls[current[0]][current[1]]
            if vertex == start:
                self._record(t, m, len(groups), step, True)
                return hull
            hull.append(vertex)

        self._record(t, m, len(groups), m, False)
        return None

    def next_vertex(self, hulls: list[list[Point]], current: tuple[int, int]) -> tuple[int, int]:
        """
        (group, vertex) of the hull vertex after `current`: the successor in
        its own group hull competes with the tangent point of every other group.
        """
        g, i = current
        p = hulls[g][i]
        own = hulls[g]
        best = (g, (i + 1) % len(own)) if len(own) > 1 else None

        for k, h in enumerate(hulls):
            if k == g:
                continue
            s = self.tangents.find(p, h)
            if best is None or self.orient.supersedes(p, hulls[best[0]][best[1]], h[s]):
                best = (k, s)
        return best

    def _record(self, t: int, m: int, groups: int, steps: int, closed: bool):
        self.rounds.append(RoundStats(t, m, groups, steps, closed))
        logger.debug(
            'Round t=%d: m=%d, %d groups, %d steps, %s',
            t, m, groups, steps, 'closed' if closed else 'open',
        )
