"""
Attribute Value Parser

Converts the text of a single export cell into a numeric attribute value.

Football Manager writes "-" for unknown values and, when attributes are
masked by scouting knowledge, an inclusive range such as "14-16". Both are
handled here; anything that still is not a number parses as 0.
"""

import re

from models.constants import MISSING_MARKER

# Plain decimal numbers only ("12", "-3.5", ".5", "1e3"); rejects "nan", "inf", "1_000"
_NUMBER_PATTERN = re.compile(r'[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')


def _parse_number(text: str):
    """Parse a decimal number, returning None if the text is not one (no surrounding spaces)."""
    if not _NUMBER_PATTERN.fullmatch(text):
        return None
    return float(text)


def parse_attribute_value(value) -> float:
    """
    Parse a cell value into an attribute number.

    Args:
        value: Raw cell text

    Returns:
        Parsed value, or 0.0 if the cell is missing or unparseable

    Examples:
        "15" → 15.0
        "14-16" → 15.0 (range midpoint)
        "-5" → -5.0 (negative number, not a range)
        "-" → 0.0
        "abc" → 0.0
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return 0.0

    value = value.strip()
    if not value or value == MISSING_MARKER:
        return 0.0

    # Range shorthand: "14-16" → midpoint. A leading "-" is a sign.
    if '-' in value and not value.startswith('-'):
        parts = value.split('-')
        if len(parts) == 2 and parts[0] and parts[1]:
            low = _parse_number(parts[0])
            high = _parse_number(parts[1])
            if low is not None and high is not None:
                return (low + high) / 2

    number = _parse_number(value)
    return number if number is not None else 0.0
