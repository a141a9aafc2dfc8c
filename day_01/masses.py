#!/usr/bin/env python
# encoding: utf-8
#
"""Reading module masses, one integer per line."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, List, Union

from .fuel import Mass

logger = logging.getLogger(__name__)

# shipped next to this module so the program runs from any directory
DEFAULT_INPUT: Path = Path(__file__).with_name("input_01.txt")

STDIN = "-"


class InvalidMassError(ValueError):
    """A line of input that is not a base-10 integer."""

    def __init__(self, line_number: int, content: str) -> None:
        self.line_number = line_number
        self.content = content
        super().__init__(
            f"line {line_number}: expected an integer mass, got {content!r}"
        )


def parse_masses(lines: Iterable[Union[str, bytes]]) -> List[Mass]:
    """Parse ``lines`` into masses, preserving order.

    Lines may be text or UTF-8 encoded bytes. Blank lines are skipped. The
    first line that is not an integer (or not valid UTF-8) raises
    :class:`InvalidMassError`; nothing is returned in that case.
    """
    masses = []
    for line_number, line in enumerate(lines, start=1):
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError:
                content = line.decode("utf-8", "backslashreplace").strip()
                raise InvalidMassError(line_number, content) from None
        if not line.strip():
            continue
        try:
            masses.append(Mass.parse(line))
        except ValueError:
            raise InvalidMassError(line_number, line.strip()) from None
    return masses


def read_masses(path: Union[str, Path] = DEFAULT_INPUT) -> List[Mass]:
    if str(path) == STDIN:
        logger.info("Reading masses from stdin")
        # decode line by line so bad bytes are reported with their line number
        return parse_masses(getattr(sys.stdin, "buffer", sys.stdin))

    logger.info("Reading masses from %s", path)
    with open(path, "rb") as f:
        return parse_masses(f)
