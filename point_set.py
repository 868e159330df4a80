from collections.abc import Iterable, Iterator

from geometry import Point


class PointNotFoundError(LookupError):
    """
    Raised when a point is removed from a working set that does not hold it.
    Hull construction never does this unless one of its invariants is broken.
    """


def deduplicate(points: Iterable[Point]) -> list[Point]:
    """
    Remove value-duplicates, keeping the first occurrence of each point.
    """
    return list(dict.fromkeys(points))


def select_seed(points: list[Point]) -> Point:
    """
    Seed of the hull: the first point with the maximum y coordinate.
    In the algorithm's coordinate convention this is the "lowest" point.
    """
    seed = points[0]
    for p in points[1:]:
        if p.y > seed.y:
            seed = p
    return seed


class PointSet:
    """
    Working set of candidate points.

    Members keep insertion order, which drives tie-breaking during neighbor
    search. The seed point is never a regular member: once closing is enabled
    it is yielded after all members as a candidate that closes the polygon.
    """

    def __init__(self, points: Iterable[Point] = (), closing_point: Point | None = None):
        self._points: dict[Point, None] = dict.fromkeys(points)
        self.closing_point = closing_point
        self.closing_eligible = False

    def __len__(self) -> int:
        return len(self._points) + int(self._closing_active())

    def __iter__(self) -> Iterator[Point]:
        yield from self._points
        if self._closing_active():
            yield self.closing_point

    def __contains__(self, point: Point) -> bool:
        return point in self._points or (self._closing_active() and point == self.closing_point)

    def _closing_active(self) -> bool:
        return self.closing_eligible and self.closing_point is not None

    def enable_closing(self):
        self.closing_eligible = True

    def add(self, point: Point):
        self._points[point] = None

    def remove(self, point: Point):
        if self._closing_active() and point == self.closing_point:
            self.closing_eligible = False
            self.closing_point = None
            return
        try:
            del self._points[point]
        except KeyError:
            raise PointNotFoundError(f'Point is not in the working set: {point}') from None

    def to_list(self) -> list[Point]:
        return list(self)
