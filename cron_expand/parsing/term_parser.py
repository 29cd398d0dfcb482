"""
Term parsing for schedule fields.

A term is one comma-separated segment of a field, e.g. "7", "1-5", "*" or
"*/15". This module only checks syntax; bounds are validated by the field
expander.
"""

from .base import MalformedTokenError, Term
from .. import config


def parse_number(token: str) -> int:
    """
    Parse a non-negative integer token.

    Only ASCII decimal digits are accepted, and the value must fit
    ``config.MAX_TOKEN_VALUE``.

    Args:
        token: Raw text of the number

    Returns:
        The parsed integer

    Raises:
        MalformedTokenError: If the token is empty, non-numeric or too large
    """
    if not token or not (token.isascii() and token.isdigit()):
        raise MalformedTokenError(f"Couldn't parse '{token}' to number", token)

    value = int(token)
    if value > config.MAX_TOKEN_VALUE:
        raise MalformedTokenError(
            f"Number '{token}' exceeds the maximum of {config.MAX_TOKEN_VALUE}", token
        )
    return value


def parse_term(segment: str) -> Term:
    """
    Parse one comma-segment into a Term.

    Supported formats:
    - "*"        every value of the field
    - "*/n"      every n-th value of the field
    - "a"        a single value (a trailing "/n" is accepted and has no effect)
    - "a-b"      an inclusive range
    - "a-b/n"    every n-th value of the range, counted from a

    Args:
        segment: One comma-separated part of a field

    Returns:
        Term with lower/upper set to None for "*", and step defaulting to 1

    Raises:
        MalformedTokenError: On any non-numeric part, a zero step, or
            repeated "/" or "-" separators
    """
    parts = segment.split("/")
    if len(parts) > 2:
        raise MalformedTokenError(f"Multiple '/' in term '{segment}'", segment)

    step = 1
    if len(parts) == 2:
        step = parse_number(parts[1])
        if step < 1:
            raise MalformedTokenError(f"Step must be at least 1 in term '{segment}'", parts[1])

    base = parts[0]
    if base == "*":
        return Term(None, None, step)

    if "-" in base:
        bounds = base.split("-")
        if len(bounds) != 2:
            raise MalformedTokenError(f"Invalid range '{base}' in term '{segment}'", base)
        return Term(parse_number(bounds[0]), parse_number(bounds[1]), step)

    value = parse_number(base)
    return Term(value, value, step)
