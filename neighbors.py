import numpy as np

from geometry import Point, angle, normalize_angle


def nearest(points: list[Point], point: Point, k: int) -> list[Point]:
    """
    Return up to k points closest to `point`, ascending by euclidean distance.
    Equal distances keep the order of `points`.
    """
    if not points or k <= 0:
        return []

    coords = np.array([(p.x, p.y) for p in points], dtype=float)
    dx = coords[:, 0] - point.x
    dy = coords[:, 1] - point.y
    dists = np.sqrt(dx * dx + dy * dy)

    order = np.argsort(dists, kind="stable")[:min(k, len(points))]
    return [points[i] for i in order]


def turn_angle(candidate: Point, point: Point, prev_angle: float) -> float:
    """
    Right-hand turn from the previous edge towards `candidate`, in [0, 2*pi).
    """
    return normalize_angle(prev_angle - angle(candidate, point))


def rank_by_angle(points: list[Point], point: Point, prev_angle: float) -> list[Point]:
    """
    Sort candidates in descending order of right-hand turn, so the first
    element is the first candidate for the next hull vertex.
    Equal angles keep the order of `points`.
    """
    ranked = sorted(
        enumerate(points),
        key=lambda item: (-turn_angle(item[1], point, prev_angle), item[0]),
    )
    return [p for _, p in ranked]
