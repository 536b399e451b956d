"""
Framerate-specific error types.

All errors inherit from FramerateError for easy catching.
Every parse failure carries exactly one reason code.
"""

from enum import Enum
from typing import Optional


class ParseErrorReason(str, Enum):
    """
    Why a framerate could not be constructed.

    Each code maps to exactly one stage of the construction chain.
    Codes never overlap.
    """

    UNRECOGNIZED_FORMAT = "unrecognized_format"
    """Textual input matched none of the supported numeric/rational shapes."""

    IMPRECISE = "imprecise"
    """A fractional decimal was supplied for a whole (non-NTSC) rate."""

    NON_POSITIVE = "non_positive"
    """The resulting rate is zero or negative."""

    INVALID_NTSC = "invalid_ntsc"
    """The ntsc option is not a known NTSC tag or None."""

    INVALID_NTSC_RATE = "invalid_ntsc_rate"
    """An NTSC rate was requested without coercion and is not exactly whole * 1000/1001."""

    BAD_DROP_RATE = "bad_drop_rate"
    """Drop-frame was requested for a rate that cannot carry drop-frame timecode."""


_DEFAULT_MESSAGES = {
    ParseErrorReason.UNRECOGNIZED_FORMAT: "framerate string format not recognized",
    ParseErrorReason.IMPRECISE: "floats are not precise enough to create a non-NTSC framerate",
    ParseErrorReason.NON_POSITIVE: "framerates must be positive",
    ParseErrorReason.INVALID_NTSC: "ntsc is not a valid atom. must be NON_DROP, DROP, or None",
    ParseErrorReason.INVALID_NTSC_RATE: (
        "NTSC rates must be equivalent to (whole * 1000) / 1001; "
        "pass coerce_ntsc=True to round to the nearest NTSC rate"
    ),
    ParseErrorReason.BAD_DROP_RATE: "drop-frame rates must be divisible by 30000/1001",
}


class FramerateError(Exception):
    """Base exception for all framerate-related failures."""
    pass


class FramerateParseError(FramerateError):
    """
    Raised (or returned inside a FramerateResult) when a framerate
    cannot be constructed.
    """

    def __init__(self, reason: ParseErrorReason, detail: Optional[str] = None):
        self.reason = reason
        self.detail = detail
        message = _DEFAULT_MESSAGES[reason]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"FramerateParseError(reason={self.reason.value!r})"
