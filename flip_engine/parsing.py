"""
Input Parsing

Turns raw form text or JSON values into numbers.
Anything that cannot be read as a number becomes zero, so the deal is
always computable.
"""

import logging
import math
import re

logger = logging.getLogger(__name__)

# Currency symbols, thousands separators, percent signs etc. are dropped
_NON_NUMERIC = re.compile(r"[^0-9.\-]+")
_LEADING_FLOAT = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _is_number(raw) -> bool:
    return isinstance(raw, (int, float)) and not isinstance(raw, bool)


def parse_amount(raw) -> float:
    """
    Parse a money or rate value.

    "$150,000.00" -> 150000.0, "6.5%" -> 6.5, "abc" -> 0.0
    """
    if _is_number(raw):
        try:
            value = float(raw)
        except OverflowError:
            value = math.inf
        if math.isfinite(value):
            return value
        logger.debug("Coercing non-finite amount %r to 0", raw)
        return 0.0

    if isinstance(raw, str):
        match = _LEADING_FLOAT.match(_NON_NUMERIC.sub("", raw))
        if match:
            value = float(match.group(0))
            if math.isfinite(value):
                return value

    logger.debug("Coercing non-numeric amount %r to 0", raw)
    return 0.0


def parse_count(raw) -> int:
    """
    Parse a whole-number value (months, years).

    Only the leading integer is read: "30 years" -> 30, "3.9" -> 3.
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if _is_number(raw):
        if math.isfinite(raw):
            return int(raw)
        logger.debug("Coercing non-finite count %r to 0", raw)
        return 0

    if isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        if match:
            try:
                return int(match.group(1))
            except ValueError:
                # past the interpreter's int string conversion limit
                pass

    logger.debug("Coercing non-numeric count %r to 0", raw)
    return 0
