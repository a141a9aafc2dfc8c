#!/usr/bin/env python
# encoding: utf-8
#
"""Mass and fuel quantities plus the two fuel calculations.

Masses and fuel are kept as separate types so a mass can never be summed
into a fuel total by accident. The only bridge from fuel back to mass is
:func:`mass_of` (one unit of fuel weighs one unit of mass).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

_INTEGER = re.compile(r"[+-]?[0-9]+")


def div_trunc(n: int, d: int) -> int:
    # Python's // floors; masses divide toward zero
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


@dataclass(frozen=True)
class Fuel:
    value: int

    def __add__(self, other):
        if not isinstance(other, Fuel):
            return NotImplemented
        return Fuel(self.value + other.value)

    def __radd__(self, other):
        # lets sum() start from its default of 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __int__(self):
        return self.value

    def __lt__(self, other):
        if not isinstance(other, Fuel):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if not isinstance(other, Fuel):
            return NotImplemented
        return self.value <= other.value

    def __str__(self):
        return str(self.value)

    def mass(self) -> Mass:
        """How much this amount of fuel weighs."""
        return Mass(self.value)


@dataclass(frozen=True)
class Mass:
    value: int

    @classmethod
    def parse(cls, text: str) -> Mass:
        """Parse a base-10 signed integer such as ``"1969"`` or ``"-4"``.

        Surrounding whitespace is ignored. Raises :class:`ValueError` for
        anything else, including forms Python's ``int()`` would accept
        (``"1_000"``, non-ASCII digits).
        """
        token = text.strip()
        if not _INTEGER.fullmatch(token):
            raise ValueError(f"not a base-10 integer: {text!r}")
        return cls(int(token))

    def __add__(self, other):
        if not isinstance(other, Mass):
            return NotImplemented
        return Mass(self.value + other.value)

    def __int__(self):
        return self.value

    def __str__(self):
        return str(self.value)

    def fuel(self) -> Optional[Fuel]:
        return fuel_for(self)

    def total_fuel(self) -> Fuel:
        return total_fuel_for(self)


def mass_of(fuel: Fuel) -> Mass:
    return fuel.mass()


def fuel_for(mass: Mass) -> Optional[Fuel]:
    """Fuel required to launch ``mass``.

    Returns ``None`` when no fuel is required, i.e. when the formula would
    give zero or a negative amount.
    """
    intermediate = div_trunc(mass.value, 3) - 2
    if intermediate > 0:
        return Fuel(intermediate)
    else:
        return None


def total_fuel_for(mass: Mass) -> Fuel:
    """Fuel required to launch ``mass``, including fuel for the fuel, and so
    on recursively until no more fuel is needed."""
    fuel = fuel_for(mass)
    if fuel is None:
        return Fuel(0)
    return fuel + total_fuel_for(mass_of(fuel))


def total(fuels: Iterable[Fuel]) -> Fuel:
    return sum(fuels, Fuel(0))


def part_one(masses: Iterable[Mass]) -> Fuel:
    """Sum of the direct fuel of every mass."""
    return total(fuel_for(m) or Fuel(0) for m in masses)


def part_two(masses: Iterable[Mass]) -> Fuel:
    """Sum of the total fuel (fuel for the fuel included) of every mass."""
    return total(map(total_fuel_for, masses))
