"""Command line entry point for searching sorted and rotated sequences."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from bisectkit.occurrences import floor_and_ceil
from bisectkit.rotated import find_min
from bisectkit.search import contains_iterative


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bisectkit",
        description="Binary searches over integers. Numbers are read from stdin when none are given.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    contains = commands.add_parser("contains", help="report whether a target is in a sorted list")
    contains.add_argument("target", type=int)
    contains.add_argument("numbers", type=int, nargs="*")

    floor_ceil = commands.add_parser("floor-ceil", help="floor and ceiling of a value in a sorted list")
    floor_ceil.add_argument("target", type=int)
    floor_ceil.add_argument("numbers", type=int, nargs="*")

    minimum = commands.add_parser("min", help="minimum of a rotated sorted list")
    minimum.add_argument("numbers", type=int, nargs="*")

    return parser


def _numbers(parser: argparse.ArgumentParser, given: list[int]) -> list[int]:
    if given:
        return given
    try:
        return [int(token) for token in sys.stdin.read().split()]
    except ValueError as exc:
        parser.error(f"invalid number on stdin: {exc}")
        raise  # unreachable: parser.error exits


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    nums = _numbers(parser, args.numbers)

    if args.command == "contains":
        print("Found" if contains_iterative(nums, args.target) else "Not Found")
    elif args.command == "floor-ceil":
        floor, ceil = floor_and_ceil(nums, args.target)
        print(f"Floor and Ceil of {args.target} are {floor} {ceil}")
    else:
        if not nums:
            parser.error("min needs at least one number")
        print(f"Minimum element in rotated sorted array: {find_min(nums)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())