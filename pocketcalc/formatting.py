"""Display formatting and tolerant parsing of display text.

format_number() is purely cosmetic: it strips an integral ".0" suffix and
inserts thousands separators. It never rounds beyond Python's own float
rendering.
"""

from __future__ import annotations

import math

_GROUP_SEPARATOR = ","

# Textual forms for values IEEE-754 lets through (e.g. 1e308 * 10).
_NON_FINITE = {
    math.inf: "Infinity",
    -math.inf: "-Infinity",
}


def parse_display(text: str) -> float:
    """Parse display text as a number, treating anything unparsable as 0.0.

    Grouped text such as "1,001" does not parse and therefore reads as 0.0.
    """
    try:
        return float(text)
    except (ValueError, OverflowError):
        return 0.0


def add_commas(digits: str) -> str:
    """Group an integer digit string in threes from the right.

    '12454' → '12,454', '-1234567' → '-1,234,567'
    """
    neg = digits.startswith("-")
    if neg:
        digits = digits[1:]
    out = []
    for i, ch in enumerate(digits):
        if i > 0 and (len(digits) - i) % 3 == 0:
            out.append(_GROUP_SEPARATOR)
        out.append(ch)
    grouped = "".join(out)
    return f"-{grouped}" if neg else grouped


def _group_mantissa(text: str) -> str:
    """Drop a trailing '.0' and group the integer part of a plain decimal."""
    if text.endswith(".0"):
        text = text[:-2]
    if "." in text:
        int_part, frac_part = text.split(".", 1)
        return f"{add_commas(int_part)}.{frac_part}"
    return add_commas(text)


def format_number(value: float) -> str:
    """Format a result for the display.

    Examples:
        12454.0  → '12,454'
        -12454.0 → '-12,454'
        1234.5   → '1,234.5'
        5.0      → '5'
        1e+16    → '1e+16'  (exponent kept as rendered)
    """
    if math.isnan(value):
        return "NaN"
    if value in _NON_FINITE:
        return _NON_FINITE[value]

    text = repr(float(value))
    if "e" in text:
        mantissa, exponent = text.split("e", 1)
        return f"{_group_mantissa(mantissa)}e{exponent}"
    return _group_mantissa(text)
