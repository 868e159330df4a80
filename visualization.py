import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None, **kwargs):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        ax = plt.gca()
    return ax.scatter(x, y, **kwargs)


def plot_hull(hull: list[Point], ax: Axes | None = None, color: str = 'r'):
    """
    Draw hull edges in order. The 3-point hull comes without the closing
    vertex, so the polygon is closed here if needed.
    """
    if ax is None:
        ax = plt.gca()
    if not hull:
        return []

    vertices = list(hull)
    if vertices[0] != vertices[-1]:
        vertices.append(vertices[0])

    xs = [pt.x for pt in vertices]
    ys = [pt.y for pt in vertices]
    lines = ax.plot(xs, ys, c=color)
    ax.scatter(xs[:-1], ys[:-1], c=color, s=8)
    return lines


def save_hull_figure(filename, points: list[Point], hull: list[Point] | None):
    fig, ax = plt.subplots(figsize=(8, 8))
    plot_points(points, ax=ax, s=4, c='b')
    if hull is not None:
        plot_hull(hull, ax=ax)
    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, alpha=0.3)
    ax.set_title(f'Concave hull: {len(points)} points' if hull is not None else 'No hull found')
    fig.savefig(filename)
    plt.close(fig)
