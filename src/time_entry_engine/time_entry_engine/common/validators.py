from __future__ import annotations

import math
import re
from typing import Optional

from ..core.exceptions import ParseError

# Leading decimal number, optionally signed or in exponent form: "1.5 h" -> "1.5"
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number_strict(value: Optional[str]) -> float:
    """Read the number a form field starts with; decimal comma or dot ("0,5", "1,5 h").

    Only the first comma counts as decimal separator, so "1,2,3" reads 1.2.
    Raises ParseError when the text does not start with a number.
    """
    if value is None:
        raise ParseError("Kein Zahlenwert angegeben")
    text = str(value).strip().replace(",", ".", 1)
    match = _LEADING_NUMBER.match(text)
    if not match:
        raise ParseError(f"Ungültiger Zahlenwert: {value!r}")
    parsed = float(match.group(0))
    if not math.isfinite(parsed):
        raise ParseError(f"Ungültiger Zahlenwert: {value!r}")
    return parsed


def parse_locale_number(value: Optional[str], default: float = 0) -> float:
    """Parse-or-default: never raises."""
    try:
        return parse_number_strict(value)
    except ParseError:
        return default
