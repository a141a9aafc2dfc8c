#!/usr/bin/env python
# encoding: utf-8
#
"""Command line entry point: print the fuel totals for a list of masses."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .fuel import div_trunc, part_one, part_two, total_fuel_for
from .masses import DEFAULT_INPUT, STDIN, InvalidMassError, read_masses

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="day-01",
        description="Compute the fuel required to launch a list of module masses.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=str(DEFAULT_INPUT),
        help=f"File with one mass per line, or '{STDIN}' for stdin "
             "(default: the bundled puzzle input).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log how the fuel of each mass is derived.",
    )
    return parser


def trace(masses):
    for m in masses:
        q = div_trunc(m.value, 3)
        logger.debug(
            f"{m} --(/3)-> {q} --(-2)-> {q - 2} "
            f"[total_fuel: {total_fuel_for(m)}]"
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        masses = read_masses(args.input)
    except InvalidMassError as e:
        logger.error(f"Invalid input in {args.input}, {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not read {args.input}: {e}")
        return 1

    logger.info("Read %d masses", len(masses))
    if logger.isEnabledFor(logging.DEBUG):
        trace(masses)

    print(f"Part 1 answer: {part_one(masses)}")
    print(f"Part 2 answer: {part_two(masses)}")
    return 0
