"""
Report rendering for expanded schedules.

Each row is a label padded to a fixed column followed by either the
expanded values or the raw command string.
"""

from typing import Iterable, List, Union

from . import config
from .parsing.base import ExpandedSchedule


def pad_label(label: str) -> str:
    """Pad a label to the report column width; longer labels are kept whole."""
    return label.ljust(config.LABEL_WIDTH)


def format_values_row(label: str, values: Iterable[int]) -> str:
    """
    Format a row of expanded values.

    Every value is followed by a single space, the last one included.

    Args:
        label: Row label
        values: Values to print, in ascending order

    Returns:
        The formatted row
    """
    return pad_label(label) + "".join(f"{value} " for value in sorted(values))


def format_command_row(label: str, command: str) -> str:
    """Format a row holding the command string verbatim."""
    return pad_label(label) + command


def render_row(label: str, value: Union[Iterable[int], str]) -> str:
    """Format a row from either an expanded value set or a raw string."""
    if isinstance(value, str):
        return format_command_row(label, value)
    return format_values_row(label, value)


def render_report(schedule: ExpandedSchedule) -> List[str]:
    """
    Render every row of an expanded schedule.

    Args:
        schedule: Expanded schedule

    Returns:
        One formatted line per field, command last
    """
    return [render_row(label, value) for label, value in schedule.rows()]
