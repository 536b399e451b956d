"""
Framerate construction chain.

parse_framerate() is the single source of truth for building a Framerate.
It runs a fixed, short-circuiting sequence of stages; the first stage to
fail decides the error and no later stage runs:

    0. parse input format          -> UNRECOGNIZED_FORMAT
    1. float precision             -> IMPRECISE
    2. ntsc tag                    -> INVALID_NTSC
    3. rationalize
    4. positivity                  -> NON_POSITIVE
    5. invert (optional)
    6. ntsc coercion / exactness   -> INVALID_NTSC_RATE (NON_POSITIVE if the
                                      coerced whole rate is zero)
    7. drop-frame legality         -> BAD_DROP_RATE
    8. build Framerate

new_framerate() is the raising variant and adds no logic of its own.
"""

import logging
from decimal import Decimal
from fractions import Fraction
from typing import Optional

from . import rational
from .drop_frame import drop_allowed
from .errors import FramerateParseError, ParseErrorReason
from .models import Framerate, FramerateOptions, FramerateResult, Ntsc
from .parsing import RawRate, is_fractional_decimal, parse_rate_value

logger = logging.getLogger(__name__)


def parse_framerate(
    rate: object,
    options: Optional[FramerateOptions] = None,
    **overrides,
) -> FramerateResult:
    """
    Build a Framerate from a playback rate or timebase.

    Args:
        rate: int, float, Decimal, Fraction, or a string such as "24",
            "23.98" or "24000/1001".
        options: Construction options. Defaults to FramerateOptions().
        **overrides: Individual option fields (ntsc=, invert=, coerce_ntsc=)
            applied on top of options.

    Returns:
        FramerateResult holding either the framerate or the parse error.

    Examples:
        parse_framerate(24, ntsc=None)                   -> <24.0 fps>
        parse_framerate("24000/1001")                    -> <23.98 NTSC>
        parse_framerate(23.98, coerce_ntsc=True)         -> <23.98 NTSC>
        parse_framerate(30, ntsc=Ntsc.DROP, coerce_ntsc=True) -> <29.97 NTSC DF>
    """
    options = _resolve_options(options, overrides)

    try:
        framerate = _build(rate, options)
    except FramerateParseError as e:
        logger.debug(f"Rejected framerate {rate!r} ({options}): {e.reason.value}")
        return FramerateResult(error=e)

    return FramerateResult(framerate=framerate)


def new_framerate(
    rate: object,
    options: Optional[FramerateOptions] = None,
    **overrides,
) -> Framerate:
    """
    As parse_framerate() but returns the Framerate directly.

    Raises:
        FramerateParseError: If the framerate cannot be constructed.
    """
    return parse_framerate(rate, options, **overrides).unwrap()


def _resolve_options(options: Optional[FramerateOptions], overrides: dict) -> FramerateOptions:
    unknown = set(overrides) - {"ntsc", "invert", "coerce_ntsc"}
    if unknown:
        raise TypeError(f"Unknown framerate options: {sorted(unknown)}")

    base = options if options is not None else FramerateOptions()
    return FramerateOptions(
        ntsc=overrides.get("ntsc", base.ntsc),
        invert=overrides.get("invert", base.invert),
        coerce_ntsc=overrides.get("coerce_ntsc", base.coerce_ntsc),
    )


def _build(rate: object, options: FramerateOptions) -> Framerate:
    raw = parse_rate_value(rate)

    validate_float(raw, options.ntsc)
    ntsc = validate_ntsc(options.ntsc)

    playback = rationalize(raw)
    validate_positive(playback)

    if options.invert:
        playback = rational.invert(playback)

    playback = coerce_ntsc_rate(playback, ntsc, options.coerce_ntsc)
    validate_drop(playback, ntsc)

    return Framerate(playback=playback, ntsc=ntsc)


# =============================================================================
# Stages
# =============================================================================


def validate_float(raw: RawRate, ntsc: object) -> None:
    """Fractional decimals are only trusted when they become an NTSC rate."""
    if ntsc is None and is_fractional_decimal(raw):
        raise FramerateParseError(ParseErrorReason.IMPRECISE, str(raw))


def validate_ntsc(ntsc: object) -> Optional[Ntsc]:
    """
    Check the ntsc option and return it as an Ntsc member (or None).

    The plain strings "non_drop" and "drop" are accepted for their members.
    """
    if ntsc is None or isinstance(ntsc, Ntsc):
        return ntsc

    if isinstance(ntsc, str):
        try:
            return Ntsc(ntsc)
        except ValueError:
            pass

    raise FramerateParseError(ParseErrorReason.INVALID_NTSC, repr(ntsc))


def rationalize(raw: RawRate) -> Fraction:
    if isinstance(raw, Decimal):
        return rational.from_decimal(raw)
    return Fraction(raw)


def validate_positive(rate: Fraction) -> None:
    if not rational.greater_than(rate, rational.ZERO):
        raise FramerateParseError(ParseErrorReason.NON_POSITIVE, str(rate))


def coerce_ntsc_rate(rate: Fraction, ntsc: Optional[Ntsc], coerce: bool) -> Fraction:
    """
    Apply the NTSC convention to rate.

    - ntsc None: rate passes through unchanged.
    - coerce: rate becomes round(rate) * 1000/1001. Whole rates above 500
      have no NTSC rate that rounds back to them and fail.
    - otherwise: rate must already equal round(rate) * 1000/1001.
    """
    if ntsc is None:
        return rate

    whole_frame = rational.round_to_int(rate)
    ntsc_playback = rational.multiply(Fraction(whole_frame), rational.NTSC_FACTOR)

    if coerce:
        if whole_frame <= 0:
            raise FramerateParseError(
                ParseErrorReason.NON_POSITIVE,
                f"{rate} rounds to a whole rate of {whole_frame}",
            )
        # Above 500 fps, whole * 1000/1001 rounds to a different whole rate.
        if rational.round_to_int(ntsc_playback) != whole_frame:
            raise FramerateParseError(
                ParseErrorReason.INVALID_NTSC_RATE,
                f"no NTSC rate for a whole rate of {whole_frame}",
            )
        return ntsc_playback

    if not rational.equals(ntsc_playback, rate):
        raise FramerateParseError(ParseErrorReason.INVALID_NTSC_RATE, str(rate))

    return rate


def validate_drop(rate: Fraction, ntsc: Optional[Ntsc]) -> None:
    if ntsc == Ntsc.DROP and not drop_allowed(rate):
        raise FramerateParseError(ParseErrorReason.BAD_DROP_RATE, str(rate))
