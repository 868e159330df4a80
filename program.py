import argparse
import logging
import os
import sys
import time

from concave_hull import DEFAULT_NEIGHBORS, ConcaveHullBuilder, HullFailure
from geometry import is_simple_polygon
from point_io import load_points, save_hull_csv

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = 'sample-out.csv'

FAILURE_MESSAGES = {
    HullFailure.INSUFFICIENT_POINTS: 'at least 3 distinct points are required',
    HullFailure.NEIGHBOR_COUNT_TOO_LARGE: 'the neighbour count reached the number of distinct points',
    HullFailure.ATTEMPTS_EXHAUSTED: 'the maximum number of attempts was reached',
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='concave-hull',
        description='Compute the concave hull of a set of 2D points (k-nearest neighbours approach).',
    )
    parser.add_argument('input', nargs='?', help='input file: CSV with two columns, or .txt with a count header')
    parser.add_argument('output', nargs='?', default=DEFAULT_OUTPUT, help='output CSV (default: %(default)s)')
    parser.add_argument('--file', dest='file', help='input file, alternative to the positional argument')
    parser.add_argument('-k', '--neighbors', type=int, default=DEFAULT_NEIGHBORS,
                        help='initial number of neighbours, at least 3 (default: %(default)s)')
    parser.add_argument('--max-attempts', type=int, default=None,
                        help='give up after this many escalations of k')
    parser.add_argument('--plot', metavar='PATH', help='save a plot of the points and the hull')
    parser.add_argument('--validate', action='store_true',
                        help='check that the resulting polygon does not self-intersect')
    parser.add_argument('-v', '--verbose', action='count', default=0)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    input_filepath = args.file or args.input
    if input_filepath is None:
        print('Input file required. Please specify the file path after a --file argument.', file=sys.stderr)
        return 2
    if not os.path.exists(input_filepath):
        print(f'File does not exist: {input_filepath}', file=sys.stderr)
        return 2

    try:
        points = load_points(input_filepath)
    except (OSError, ValueError) as e:
        print(f'Could not load points: {e}', file=sys.stderr)
        return 2
    logger.info('Loaded %d points from %s', len(points), input_filepath)

    try:
        builder = ConcaveHullBuilder(max_attempts=args.max_attempts)
    except ValueError as e:
        parser.error(str(e))

    start_time = time.time()
    hull = builder.compute_hull(points, args.neighbors)
    logger.info('Finished in %.4fs after %d attempt(s)', time.time() - start_time, builder.attempts)

    if args.plot:
        from visualization import save_hull_figure
        save_hull_figure(args.plot, points, hull)

    if hull is None:
        print(f'No hull found: {FAILURE_MESSAGES[builder.failure]}')
        return 1

    for pt in hull:
        print(f'{pt.x} {pt.y}')

    if args.validate and hull[0] == hull[-1] and not is_simple_polygon(hull):
        print('The calculated hull is not a simple polygon', file=sys.stderr)
        return 1

    try:
        save_hull_csv(args.output, hull)
    except OSError as e:
        print(f'Could not save hull: {e}', file=sys.stderr)
        return 2
    print(f'The calculated hull has been saved to {args.output}')
    return 0


if __name__ == "__main__":
    sys.exit(main())
