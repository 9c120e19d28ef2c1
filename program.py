import argparse
import sys
import time

import matplotlib.pyplot as plt
import numpy as np

from chan_hull import ChanHullBuilder
from convex_hull import ALGORITHMS
from errors import HullError
from geometry import OrientationTest, Point, unique_points
from logger import get_logger, set_level
from visualization import plot_hull, plot_partial_hulls, plot_points

logger = get_logger(__name__)

DISTRIBUTIONS = ('uniform', 'uniform_int', 'gaussian', 'circle', 'clusters')


def generate_points(n: int, distribution: str, seed: int | None = 42) -> list[Point]:
    rng = np.random.default_rng(seed)

    if distribution == 'uniform':
        xy = rng.uniform(0, 1000, size=(n, 2))
    elif distribution == 'uniform_int':
        xy = rng.integers(0, 1000, size=(n, 2))
    elif distribution == 'gaussian':
        xy = rng.normal(500, 150, size=(n, 2))
    elif distribution == 'circle':
        # every point on the hull
        angles = rng.uniform(0, 2 * np.pi, size=n)
        xy = np.column_stack([500 + 500 * np.cos(angles), 500 + 500 * np.sin(angles)])
    elif distribution == 'clusters':
        n_clusters = 5
        centers = rng.uniform(100, 900, size=(n_clusters, 2))
        labels = rng.integers(0, n_clusters, size=n)
        xy = centers[labels] + rng.normal(0, 50, size=(n, 2))
    else:
        raise ValueError(f'Unknown distribution: {distribution}')

    return [Point.of(row) for row in xy]


def run(points: list[Point], algorithm: str) -> tuple[list[Point], float, int]:
    orient = OrientationTest()
    builder = ALGORITHMS[algorithm](orient)

    start_time = time.perf_counter()
    hull = builder.compute_hull(points)
    execution_time = time.perf_counter() - start_time

    logger.info(
        '%s: %d hull vertices in %.4f sec, %d orientation tests',
        algorithm, len(hull), execution_time, orient.count,
    )
    return hull, execution_time, orient.count


def compare(points: list[Point]) -> bool:
    """
    Run every algorithm on the same points; True if all vertex sets agree.
    """
    results = {name: run(points, name) for name in ALGORITHMS}
    for name, (hull, execution_time, count) in results.items():
        print(f'{name:>8}: {len(hull):6d} vertices {execution_time:10.4f} sec {count:12d} tests')

    vertex_sets = {name: set(hull) for name, (hull, _, _) in results.items()}
    agree = len({frozenset(s) for s in vertex_sets.values()}) == 1
    if not agree:
        logger.error('Algorithms disagree: %s', {k: len(v) for k, v in vertex_sets.items()})
    return agree


def save_plot(points: list[Point], hull: list[Point], path: str, group_size: int | None = None):
    fig, ax = plt.subplots(figsize=(8, 8))
    plot_points(points, ax=ax, s=2, c='gray')
    if group_size:
        chan = ChanHullBuilder()
        groups = chan.partition(unique_points(points), group_size)
        plot_partial_hulls(chan.group_hulls(groups), ax=ax)
    plot_hull(hull, ax=ax)
    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)
    fig.savefig(path)
    plt.close(fig)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Convex hull of random planar points')
    parser.add_argument('-n', '--points', type=int, default=1000, help='number of points. defaults to 1000')
    parser.add_argument('-d', '--distribution', choices=DISTRIBUTIONS, default='uniform')
    parser.add_argument('-a', '--algorithm', choices=sorted(ALGORITHMS), default='chan')
    parser.add_argument('-s', '--seed', type=int, default=42)
    parser.add_argument('--compare', action='store_true', help='run every algorithm and check they agree')
    parser.add_argument('--plot', metavar='PATH', help='save a plot of the points and hull')
    parser.add_argument('--groups', type=int, metavar='M', help='also plot partial hulls for group size M')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    if args.verbose:
        set_level('DEBUG')

    points = generate_points(args.points, args.distribution, args.seed)
    try:
        if args.compare:
            if not compare(points):
                return 1
            hull, _, _ = run(points, args.algorithm)
        else:
            hull, _, _ = run(points, args.algorithm)
            for p in hull:
                print(p.x, p.y)
    except HullError as e:
        logger.error('Hull computation failed: %s', e)
        return 2

    if args.plot:
        save_plot(points, hull, args.plot, args.groups)
    return 0


if __name__ == '__main__':
    sys.exit(main())
