"""
Base types for schedule parsing.

This module defines the value types passed between the term parser, the field
expander and the report renderer, together with the error types raised when a
schedule line cannot be expanded.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .. import config


class CronFieldError(ValueError):
    """Base class for every error raised while expanding a schedule line."""


class MalformedTokenError(CronFieldError):
    """
    Raised when a token is not a valid non-negative integer of the allowed
    width, or a term is structurally invalid (zero step, extra separators).
    """

    def __init__(self, message: str, token: str = ''):
        self.token = token
        super().__init__(message)


class OutOfBoundsError(CronFieldError):
    """Raised when a resolved range falls outside its field's legal bounds."""

    def __init__(self, lower: int, upper: int, minimum: int, maximum: int):
        self.lower = lower
        self.upper = upper
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Range {lower}-{upper} is outside the bounds {minimum}-{maximum}"
        )


class IncompleteLineError(CronFieldError):
    """Raised when a schedule line holds fewer fields than required."""

    def __init__(self, line: str, found: int, expected: int):
        self.line = line
        self.found = found
        self.expected = expected
        super().__init__(
            f"Expected {expected} space-separated fields but found {found} in '{line}'"
        )


@dataclass(frozen=True)
class Term:
    """
    One parsed comma-segment of a field.

    ``lower``/``upper`` of None mean the field's own bounds (from ``*``).
    """
    lower: Optional[int]
    upper: Optional[int]
    step: int = 1


@dataclass
class ExpandedSchedule:
    """
    Result of expanding one schedule line.

    Holds the expanded value list of each time field, keyed by field name,
    and the raw command string.
    """
    fields: Dict[str, List[int]] = field(default_factory=dict)
    command: str = ''

    def rows(self) -> Iterator[Tuple[str, Union[List[int], str]]]:
        """
        Yield ``(label, value)`` pairs in report order.

        Time fields follow ``config.FIELD_NAMES``; a field that was never
        expanded yields an empty list. The command comes last.
        """
        for name in config.FIELD_NAMES:
            yield name, self.fields.get(name, [])
        yield config.COMMAND_LABEL, self.command
