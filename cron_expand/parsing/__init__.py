"""
Schedule parsing package.

This package provides the term parser, the field expander and the types and
errors they share.
"""

from .base import (
    CronFieldError, MalformedTokenError, OutOfBoundsError, IncompleteLineError,
    Term, ExpandedSchedule
)
from .term_parser import parse_number, parse_term
from .field_expander import expand_term, expand_field

__all__ = [
    'CronFieldError', 'MalformedTokenError', 'OutOfBoundsError', 'IncompleteLineError',
    'Term', 'ExpandedSchedule',
    'parse_number', 'parse_term',
    'expand_term', 'expand_field'
]
