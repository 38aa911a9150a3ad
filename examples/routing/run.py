"""
Routing demo

Parses an ASCII map, routes between two cells with the chosen algorithm and
prints the map with the route drawn over it.

Run: python examples/routing/run.py --algorithm bestfirst --start 0,0 --goal 9,5
"""

import argparse
from pathlib import Path
from typing import Tuple

from gridsim import (
    Config,
    Unreachable,
    describe_flood,
    describe_route,
    parse_ascii,
    render_ascii,
)
from gridsim.logging_utils import log_error, log_info, log_success

DEFAULT_MAP = """
..........
.####.....
....#..#..
.##.#..#..
....#..##.
..#....#..
"""


def _coord(text: str) -> Tuple[int, int]:
    i, j = text.split(",")
    return int(i), int(j)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid routing demo")
    parser.add_argument("--map", type=Path, help="ASCII map file ('.' floor, '#' wall)")
    parser.add_argument(
        "--algorithm",
        default=Config.DEFAULT_ALGORITHM,
        help="wave (Lee) or bestfirst",
    )
    parser.add_argument("--start", type=_coord, default=(0, 0), help="Start cell as i,j")
    parser.add_argument("--goal", type=_coord, default=(9, 5), help="Goal cell as i,j")
    parser.add_argument(
        "--flood",
        action="store_true",
        help="Also report the floor region connected to the start",
    )
    return parser.parse_args()


def main(args: argparse.Namespace) -> int:
    Config.validate()
    text = args.map.read_text() if args.map else DEFAULT_MAP
    grid = parse_ascii(text)

    def floor(value, coord):
        return value == 0

    log_info(f"Routing {args.start} -> {args.goal} with '{args.algorithm}'")
    try:
        result = describe_route(grid, args.start, args.goal, walkable=floor, algorithm=args.algorithm)
    except Unreachable as exc:
        log_error(str(exc))
        print(render_ascii(grid))
        return 1

    print(render_ascii(grid, [(c.i, c.j) for c in result.route]))
    log_success(f"{result.distance} step(s): {' '.join(result.directions)}")

    if args.flood:
        region = describe_flood(grid, args.start, floor)
        log_info(f"{region.count} floor cell(s) connected to {args.start}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(parse_args()))
