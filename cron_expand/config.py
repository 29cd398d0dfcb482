"""
Configuration module for cron-expand.

This module contains the fixed field bounds table, report layout constants
and exit codes used across the package.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FieldSpec:
    """Inclusive legal domain of one time field."""
    name: str
    minimum: int
    maximum: int


# Field bounds table, in input order
MINUTE = FieldSpec("minute", 0, 59)
HOUR = FieldSpec("hour", 0, 23)
DAY_OF_MONTH = FieldSpec("day of month", 1, 30)
MONTH = FieldSpec("month", 1, 12)
DAY_OF_WEEK = FieldSpec("day of week", 1, 7)

FIELD_SPECS: Tuple[FieldSpec, ...] = (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK)
"""Tuple[FieldSpec, ...]: The five time fields in the order they appear on a schedule line.

Day of month stops at 30 and day of week runs 1-7; these are not
configurable.
"""

FIELD_NAMES: Tuple[str, ...] = tuple(spec.name for spec in FIELD_SPECS)
"""Tuple[str, ...]: Report labels for the time fields."""

COMMAND_LABEL = "command"
"""str: Report label for the trailing command field."""

FIELD_COUNT = len(FIELD_SPECS) + 1
"""int: Number of fields a schedule line must contain, command included."""

# Report layout
LABEL_WIDTH = 14
"""int: Column width the row labels are padded to.

Labels longer than this are printed as-is, never truncated.
"""

# Numeric tokens
MAX_TOKEN_VALUE = 255
"""int: Largest value a numeric token may hold (8-bit unsigned width)."""

# CLI behaviour
MISSING_ARGUMENT_MESSAGE = "Err: Couldn't parse input argument"
"""str: Printed on standard output when no schedule line is given."""

MISSING_ARGUMENT_EXIT_CODE = 2
"""int: Exit status when no schedule line is given."""

FAILURE_EXIT_CODE = 1
"""int: Exit status for parse, bounds and incomplete-line failures."""
