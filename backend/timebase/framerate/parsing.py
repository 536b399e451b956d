"""
Multi-format rate parsing.

Turns caller input into one of three raw kinds the construction chain
understands:

    int       whole numbers, exact
    Decimal   decimal numbers, keeping the base-10 digits the caller typed
    Fraction  rational values, exact

Strings are tried against RATE_PARSERS in order and the first parser that
consumes the whole string wins:

    1. integer           "24", "-1"
    2. decimal           "23.98", "24.0", "2.4e1"
    3. rational literal  "24000/1001"

No whitespace is trimmed and digit separators are not accepted.

Size limits:
    Strings and Decimals are rejected as UNRECOGNIZED_FORMAT when they carry
    more than MAX_RATE_DIGITS significant digits or a decimal exponent
    (Decimal.adjusted()) beyond +/-MAX_RATE_EXPONENT. Without the bound a
    short string such as "1e30000000" would rationalize to a
    30-million-digit integer.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Callable, Optional, Tuple, Union

from . import rational
from .errors import FramerateParseError, ParseErrorReason

RawRate = Union[int, Decimal, Fraction]

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_DECIMAL_PATTERN = re.compile(r"[+-]?\d+(\.\d+)?([eE][+-]?\d+)?")

MAX_RATE_DIGITS = 1000
MAX_RATE_EXPONENT = 1000


def decimal_in_range(value: Decimal) -> bool:
    """True when value is small enough to rationalize cheaply."""
    return (
        len(value.as_tuple().digits) <= MAX_RATE_DIGITS
        and abs(value.adjusted()) <= MAX_RATE_EXPONENT
    )


def parse_integer(text: str) -> Optional[int]:
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    if len(text.lstrip("+-")) > MAX_RATE_DIGITS:
        return None
    return int(text)


def parse_decimal(text: str) -> Optional[Decimal]:
    if not _DECIMAL_PATTERN.fullmatch(text):
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not decimal_in_range(value):
        return None
    return value


def parse_rational_string(text: str) -> Optional[Fraction]:
    """Parse 'N/D' where both sides are integers. '24/0' does not parse."""
    parts = text.split("/")
    if len(parts) != 2:
        return None

    numerator, denominator = (parse_integer(part) for part in parts)
    if numerator is None or denominator is None:
        return None

    try:
        return rational.make(numerator, denominator)
    except ZeroDivisionError:
        return None


RATE_PARSERS: Tuple[Callable[[str], Optional[RawRate]], ...] = (
    parse_integer,
    parse_decimal,
    parse_rational_string,
)


def parse_rate_string(text: str) -> RawRate:
    """
    Parse a rate string with the ordered RATE_PARSERS.

    Raises:
        FramerateParseError: UNRECOGNIZED_FORMAT if no parser matches.
    """
    for parser in RATE_PARSERS:
        value = parser(text)
        if value is not None:
            return value

    raise FramerateParseError(ParseErrorReason.UNRECOGNIZED_FORMAT, repr(text))


def parse_rate_value(value: object) -> RawRate:
    """
    Normalize any supported input into a raw rate.

    Args:
        value: int, float, Decimal, Fraction or str

    Returns:
        int, Decimal or Fraction

    Raises:
        FramerateParseError: UNRECOGNIZED_FORMAT for unsupported or
            non-finite input.
    """
    if isinstance(value, bool):
        raise FramerateParseError(ParseErrorReason.UNRECOGNIZED_FORMAT, repr(value))

    if isinstance(value, str):
        return parse_rate_string(value)

    if isinstance(value, (int, Fraction)):
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            raise FramerateParseError(ParseErrorReason.UNRECOGNIZED_FORMAT, repr(value))
        # repr() gives the shortest digits that round-trip, i.e. what was typed.
        return Decimal(repr(value))

    if isinstance(value, Decimal):
        if not value.is_finite() or not decimal_in_range(value):
            raise FramerateParseError(ParseErrorReason.UNRECOGNIZED_FORMAT, repr(value))
        return value

    raise FramerateParseError(
        ParseErrorReason.UNRECOGNIZED_FORMAT,
        f"unsupported type {type(value).__name__}",
    )


def is_fractional_decimal(value: RawRate) -> bool:
    """True for a Decimal with a non-zero fractional part."""
    return isinstance(value, Decimal) and value != value.to_integral_value()
