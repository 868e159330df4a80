import math

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y


Segment = tuple[Point, Point]


def normalize_angle(theta: float) -> float:
    """
    Wrap an angle into [0, 2*pi).
    """
    if theta < 0:
        theta += 2 * math.pi
    if theta >= 2 * math.pi:
        theta -= 2 * math.pi
    return theta


def distance(a: Point, b: Point) -> float:
    return math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2)


def angle(a: Point, b: Point) -> float:
    """
    Angle of the directed segment a -> b, measured from the negative X axis
    and normalized into [0, 2*pi).
    """
    return normalize_angle(math.pi - math.atan2(b.y - a.y, b.x - a.x))


def segments_intersect(seg_a: Segment, seg_b: Segment) -> bool:
    """
    Parametric intersection test of two finite segments.
    Parallel segments, collinear overlapping ones included, never intersect.
    """
    p0, p1 = seg_a
    p2, p3 = seg_b

    s10_x = p1.x - p0.x
    s10_y = p1.y - p0.y
    s32_x = p3.x - p2.x
    s32_y = p3.y - p2.y

    denom = s10_x * s32_y - s32_x * s10_y
    if denom == 0:
        return False
    denom_positive = denom > 0

    s02_x = p0.x - p2.x
    s02_y = p0.y - p2.y

    s_numer = s10_x * s02_y - s10_y * s02_x
    if (s_numer < 0) == denom_positive:
        return False

    t_numer = s32_x * s02_y - s32_y * s02_x
    if (t_numer < 0) == denom_positive:
        return False

    if (s_numer > denom) == denom_positive or (t_numer > denom) == denom_positive:
        return False
    return True


def point_in_polygon(point: Point, polygon: list[Point]) -> bool:
    """
    Even-odd ray casting. Points on the boundary may land on either side.
    """
    x, y = point.x, point.y
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def polygon_edges(polygon: list[Point]) -> list[Segment]:
    """
    Edges of a closed polygon (first vertex repeated as the last one).
    """
    return [(polygon[i], polygon[i + 1]) for i in range(len(polygon) - 1)]


def is_simple_polygon(polygon: list[Point]) -> bool:
    """
    Checks that no two non-adjacent edges of a closed polygon intersect.
    """
    edges = polygon_edges(polygon)
    n = len(edges)
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                # first and last edges share the seed vertex
                continue
            if segments_intersect(edges[j], edges[i]):
                return False
    return True
