"""
Schedule line handling.

Splits a schedule line into its time fields and command, and expands every
time field against the fixed bounds table.
"""

import logging
from typing import List, Tuple

from . import config
from .parsing import ExpandedSchedule, IncompleteLineError, expand_field

logger = logging.getLogger(__name__)


def split_line(line: str) -> Tuple[List[str], str]:
    """
    Split a schedule line into the five time fields and the command.

    Fields are separated by single spaces; repeated spaces produce empty
    fields. Everything after the fifth separator is the command, spaces
    included.

    Args:
        line: Raw schedule line

    Returns:
        Tuple of (time fields, command)

    Raises:
        IncompleteLineError: If the line holds fewer than six fields
    """
    time_field_count = len(config.FIELD_SPECS)
    parts = line.split(" ", time_field_count)
    if len(parts) < config.FIELD_COUNT:
        raise IncompleteLineError(line, len(parts), config.FIELD_COUNT)
    return parts[:time_field_count], parts[time_field_count]


def expand_schedule(line: str) -> ExpandedSchedule:
    """
    Expand every time field of a schedule line.

    Args:
        line: Raw schedule line

    Returns:
        ExpandedSchedule with one value list per time field and the command

    Raises:
        CronFieldError: If the line is incomplete or any field is invalid
    """
    fields, command = split_line(line)
    schedule = ExpandedSchedule(command=command)

    for raw, spec in zip(fields, config.FIELD_SPECS):
        schedule.fields[spec.name] = expand_field(raw, spec)
        logger.debug(f"{spec.name}: '{raw}' -> {len(schedule.fields[spec.name])} values")

    return schedule
