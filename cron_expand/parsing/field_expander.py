"""
Field expansion.

Turns a full field such as "1-3,8-10" or "*/15" into the ascending list of
values it matches, validating each term against the field's bounds.
"""

import logging
from typing import List, Set

from .base import OutOfBoundsError, Term
from .term_parser import parse_term
from ..config import FieldSpec

logger = logging.getLogger(__name__)


def expand_term(term: Term, spec: FieldSpec) -> Set[int]:
    """
    Expand a single term against a field's bounds.

    Missing bounds on the term are filled from the field. Stepping is
    counted from the resolved lower bound, so "4-10/3" yields 4, 7, 10.

    Args:
        term: Parsed term
        spec: Bounds of the field the term belongs to

    Returns:
        Set of matching values

    Raises:
        OutOfBoundsError: If the resolved range leaves the field's bounds
    """
    lower = term.lower if term.lower is not None else spec.minimum
    upper = term.upper if term.upper is not None else spec.maximum

    if lower < spec.minimum or upper > spec.maximum:
        raise OutOfBoundsError(lower, upper, spec.minimum, spec.maximum)

    if lower > upper:
        logger.warning(f"Range {lower}-{upper} in field '{spec.name}' is empty")

    logger.debug(f"{spec.name}: resolved {lower}-{upper} step {term.step}")
    return {i for i in range(lower, upper + 1) if (i - lower) % term.step == 0}


def expand_field(field: str, spec: FieldSpec) -> List[int]:
    """
    Expand a full field into its matching values.

    Args:
        field: Raw field text, one or more comma-separated terms
        spec: Bounds of the field

    Returns:
        Ascending list of unique values

    Raises:
        MalformedTokenError: If any term fails to parse
        OutOfBoundsError: If any term resolves outside the bounds
    """
    values: Set[int] = set()
    for segment in field.split(","):
        values |= expand_term(parse_term(segment), spec)
    return sorted(values)
