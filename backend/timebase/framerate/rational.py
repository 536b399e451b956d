"""
Exact rational primitives used by the framerate pipeline.

fractions.Fraction is the rational value: it always keeps the denominator
positive and compares by value, so 48/2 == 24/1. Nothing in this module
touches a binary float except to_approximate_float(), which exists for
display only.

Rounding rule:
    round_to_int() rounds half AWAY FROM ZERO (23.5 -> 24, -23.5 -> -24).
    This decides which decimal inputs coerce to which NTSC rate, so it is
    pinned by tests at the x.5 boundaries. Python's round() is half-to-even
    and must not be used here.
"""

import math
from decimal import Decimal
from fractions import Fraction


NTSC_FACTOR = Fraction(1000, 1001)
ZERO = Fraction(0)
HALF = Fraction(1, 2)


def make(numerator: int, denominator: int = 1) -> Fraction:
    """
    Build an exact rational.

    Raises:
        ZeroDivisionError: If denominator is 0.
    """
    if denominator == 0:
        raise ZeroDivisionError(f"rational denominator cannot be zero: {numerator}/0")
    return Fraction(numerator, denominator)


def invert(rate: Fraction) -> Fraction:
    """Swap numerator and denominator (1/24 -> 24/1)."""
    if rate.numerator == 0:
        raise ZeroDivisionError("cannot invert a zero rational")
    return Fraction(rate.denominator, rate.numerator)


def round_to_int(rate: Fraction) -> int:
    """Round to the nearest integer, ties away from zero."""
    whole = math.floor(abs(rate) + HALF)
    return whole if rate >= 0 else -whole


def multiply(a: Fraction, b: Fraction) -> Fraction:
    return a * b


def equals(a: Fraction, b: Fraction) -> bool:
    """Exact equality by cross-multiplication, independent of reduction."""
    return a.numerator * b.denominator == b.numerator * a.denominator


def greater_than(a: Fraction, b: Fraction) -> bool:
    # Denominators are always positive, so the inequality direction holds.
    return a.numerator * b.denominator > b.numerator * a.denominator


def to_approximate_float(rate: Fraction) -> float:
    """
    Approximate value for diagnostics. Never use for validation.

    Rates beyond the float range approximate to +/-inf; rates too small
    for a float approximate to 0.0.
    """
    try:
        return rate.numerator / rate.denominator
    except OverflowError:
        return math.inf if rate.numerator > 0 else -math.inf


def from_decimal(value: Decimal) -> Fraction:
    """
    Convert a finite Decimal to an exact Fraction using its base-10 digits.

    Decimal("23.98") -> 1199/50, where a binary float round-trip would
    produce 6749670516475904/281474976710656.
    """
    if not value.is_finite():
        raise ValueError(f"cannot rationalize non-finite decimal: {value}")
    return Fraction(value)


def ntsc_rate(whole_frame: int) -> Fraction:
    """The NTSC playback rate for a nominal whole rate: 24 -> 24000/1001."""
    return Fraction(whole_frame * 1000, 1001)
