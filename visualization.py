import itertools
import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None, **kwargs):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y, **kwargs)
    else:
        ax.scatter(x, y, **kwargs)


def plot_hull(hull: list[Point], ax: Axes | None = None, color: str = 'r'):
    """
    Draw the hull as a closed polygon with its vertices marked.
    """
    ax = ax or plt.gca()
    if not hull:
        return
    closed = hull + [hull[0]]
    ax.plot([p.x for p in closed], [p.y for p in closed], c=color)
    ax.scatter([p.x for p in hull], [p.y for p in hull], c=color, s=12, zorder=3)


def plot_partial_hulls(hulls: list[list[Point]], ax: Axes | None = None):
    clrs = ['g', 'b', 'm', 'c', 'y', 'k']
    color_cycle = itertools.cycle(clrs)

    ax = ax or plt.gca()
    for hull in hulls:
        clr = next(color_cycle)
        closed = hull + [hull[0]]
        ax.plot([p.x for p in closed], [p.y for p in closed], c=clr, linewidth=0.7, alpha=0.6)
