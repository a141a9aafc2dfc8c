#!/usr/bin/env python
# encoding: utf-8
#
"""Day 1: fuel required to launch spacecraft modules."""

from .fuel import (
    Fuel,
    Mass,
    fuel_for,
    mass_of,
    part_one,
    part_two,
    total,
    total_fuel_for,
)
from .masses import DEFAULT_INPUT, InvalidMassError, parse_masses, read_masses

__all__ = [
    "Fuel",
    "Mass",
    "fuel_for",
    "mass_of",
    "part_one",
    "part_two",
    "total",
    "total_fuel_for",
    "DEFAULT_INPUT",
    "InvalidMassError",
    "parse_masses",
    "read_masses",
]
