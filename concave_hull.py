"""
Concave hull of a planar point set, following the k-nearest neighbours
approach of Moreira and Santos, "Concave hull: a k-nearest neighbours approach
for the computation of the region occupied by a set of points" (2007).
"""
import enum
import logging
import math
import numbers

from collections.abc import Iterable

from geometry import Point, angle, point_in_polygon, segments_intersect
from neighbors import nearest, rank_by_angle
from point_set import PointSet, deduplicate, select_seed

logger = logging.getLogger(__name__)

MIN_NEIGHBORS = 3
DEFAULT_NEIGHBORS = 3


class HullFailure(enum.Enum):
    INSUFFICIENT_POINTS = "insufficient_points"
    NEIGHBOR_COUNT_TOO_LARGE = "neighbor_count_too_large"
    ATTEMPTS_EXHAUSTED = "attempts_exhausted"


class ConcaveHullBuilder:
    def __init__(self, max_attempts: int | None = None):
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f'max_attempts must be positive, got {max_attempts}')
        self.max_attempts = max_attempts
        self.failure: HullFailure | None = None
        self.attempts: int = 0
        self.k: int | None = None

    def compute_hull(self, points: Iterable[Point], k: int = DEFAULT_NEIGHBORS) -> list[Point] | None:
        """
        Compute the concave hull of `points` considering `k` neighbours per step.

        Returns the closed polygon (first vertex repeated as the last one) or
        None when no hull can be built; the reason is stored in `self.failure`.
        A set of exactly 3 distinct points is returned as is, without the
        closing vertex.

        Every failed attempt restarts the computation from scratch with k + 1
        until a valid hull is found or k reaches the number of points.
        """
        if isinstance(k, bool) or not isinstance(k, numbers.Integral):
            raise TypeError(f'k must be an integer, got {type(k).__name__}')
        k = int(k)

        self.failure = None
        self.attempts = 0
        self.k = None

        dataset = deduplicate(points)
        if len(dataset) < 3:
            return self._fail(HullFailure.INSUFFICIENT_POINTS, len(dataset), k)
        if len(dataset) == 3:
            return dataset

        kk = max(k, MIN_NEIGHBORS)
        while kk < len(dataset):
            if self.max_attempts is not None and self.attempts >= self.max_attempts:
                return self._fail(HullFailure.ATTEMPTS_EXHAUSTED, len(dataset), kk)

            self.attempts += 1
            self.k = kk
            hull = self.try_hull(dataset, kk)
            if hull is not None:
                logger.debug('Hull of %d vertices found with k=%d after %d attempt(s)',
                             len(hull) - 1, kk, self.attempts)
                return hull
            kk += 1

        return self._fail(HullFailure.NEIGHBOR_COUNT_TOO_LARGE, len(dataset), kk)

    def _fail(self, reason: HullFailure, n_points: int, k: int) -> None:
        logger.info('No hull for %d distinct points with k=%d: %s', n_points, k, reason.value)
        self.failure = reason
        return None

    @staticmethod
    def intersects_hull(hull: list[Point], candidate: Point, closing: bool) -> bool:
        """
        Check whether edge (last hull vertex, candidate) crosses the hull,
        ignoring the edge adjacent to the current vertex and, when the
        candidate closes the polygon, the edge adjacent to the seed.
        """
        current = hull[-1]
        n = len(hull)
        last = 1 if closing else 0
        for j in range(2, n - last):
            if segments_intersect((current, candidate), (hull[n - 1 - j], hull[n - j])):
                return True
        return False

    def try_hull(self, points: list[Point], k: int) -> list[Point] | None:
        """
        Single attempt with a fixed k over deduplicated points.
        Returns None when the attempt has to be escalated.
        """
        first_point = select_seed(points)
        hull = [first_point]

        dataset = PointSet(points, closing_point=first_point)
        dataset.remove(first_point)

        current_point = first_point
        previous_angle = math.pi
        step = 2
        # the seed becomes a candidate again once k vertices follow it
        stop = step + k

        while current_point != first_point or step == 2:
            if step == stop:
                dataset.enable_closing()
            # with k < n the seed is eligible before the working set runs out
            assert dataset, 'working set exhausted before the hull was closed'

            candidates = rank_by_angle(
                nearest(dataset.to_list(), current_point, k),
                current_point,
                previous_angle,
            )

            chosen = None
            for candidate in candidates:
                if not self.intersects_hull(hull, candidate, closing=candidate == first_point):
                    chosen = candidate
                    break

            if chosen is None:
                logger.debug('All %d candidates intersect the hull at step %d, k=%d',
                             len(candidates), step, k)
                return None

            current_point = chosen
            hull.append(current_point)
            previous_angle = angle(hull[-2], hull[-1])
            dataset.remove(current_point)
            step += 1

        for p in reversed(dataset.to_list()):
            if not point_in_polygon(p, hull):
                logger.debug('Point %s is outside the hull, k=%d', p, k)
                return None

        return hull


def _to_point(item) -> Point:
    if isinstance(item, Point):
        return item
    x, y = item
    return Point(float(x), float(y))


def calculate(points: Iterable, k: int = DEFAULT_NEIGHBORS) -> list[tuple[float, float]] | None:
    """
    Concave hull of (x, y) pairs as a list of (x, y) pairs, or None if no hull exists.
    """
    hull = ConcaveHullBuilder().compute_hull([_to_point(p) for p in points], k)
    if hull is None:
        return None
    return [p.as_tuple() for p in hull]
