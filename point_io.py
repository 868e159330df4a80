import csv
import os

from geometry import Point


def _parse_pair(values: list[str], line_no: int, filename) -> Point:
    if len(values) < 2:
        raise ValueError(f'{filename}:{line_no}: expected two coordinates, got {values!r}')
    try:
        return Point(float(values[0]), float(values[1]))
    except ValueError:
        raise ValueError(f'{filename}:{line_no}: coordinates are not numbers: {values!r}') from None


def load_points_csv(filename) -> list[Point]:
    """
    Two numeric columns per row, no header. Blank rows are skipped.
    """
    points = []
    with open(filename, 'r', newline='', encoding='utf-8') as f:
        for line_no, row in enumerate(csv.reader(f), start=1):
            row = [v.strip() for v in row if v.strip()]
            if not row:
                continue
            points.append(_parse_pair(row, line_no, filename))
    return points


def load_points_txt(filename) -> list[Point]:
    """
    Point count on the first line, then one whitespace separated "x y" pair per line.
    """
    points = []
    with open(filename, 'r', encoding='utf-8') as f:
        header = f.readline().strip()
        try:
            n = int(header)
        except ValueError:
            raise ValueError(f'{filename}:1: expected point count, got {header!r}') from None
        for line_no in range(2, n + 2):
            line = f.readline()
            if not line:
                raise ValueError(f'{filename}: expected {n} points, file ended after {line_no - 2}')
            points.append(_parse_pair(line.split(), line_no, filename))
    return points


def load_points(filename) -> list[Point]:
    if os.path.splitext(str(filename))[1].lower() == '.txt':
        return load_points_txt(filename)
    return load_points_csv(filename)


def save_hull_csv(filename, hull: list[Point]):
    with open(filename, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        for pt in hull:
            writer.writerow([pt.x, pt.y])
