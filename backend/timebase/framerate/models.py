"""
Framerate data models.

A Framerate is an exact playback rate plus the NTSC convention it follows.
Instances are immutable and check their invariants on construction, so a
Framerate built directly is held to the same rules as one produced by the
construction chain in validation.py:

- playback > 0
- ntsc in (NON_DROP, DROP) implies playback == round(playback) * 1000/1001
- ntsc == DROP implies playback is a drop-frame rate

A violation raises FramerateParseError with the reason the chain would give.
"""

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Any, Dict, Optional

from . import rational
from .drop_frame import drop_allowed
from .errors import FramerateParseError, ParseErrorReason


class Ntsc(str, Enum):
    """
    NTSC convention of a framerate.

    None (not a member) means the rate follows no NTSC convention:
    a whole rate such as 24 or 25 fps.
    """

    NON_DROP = "non_drop"
    DROP = "drop"


@dataclass(frozen=True)
class FramerateOptions:
    """
    Options for building a framerate.

    Attributes:
        ntsc: NTSC convention to apply. None for whole (non-NTSC) rates.
        invert: Flip the rate, for inputs given in seconds-per-frame (1/24 -> 24).
        coerce_ntsc: Round NTSC rates to the nearest legal value, so 24 and
            23.98 both become 24000/1001. Required when passing a fractional
            decimal with an NTSC tag.
    """

    ntsc: Optional[Ntsc] = Ntsc.NON_DROP
    invert: bool = False
    coerce_ntsc: bool = False


@dataclass(frozen=True)
class Framerate:
    """
    The rate at which video frames are played back, in frames-per-second.

    Attributes:
        playback: Real-world playback speed as an exact fraction.
        ntsc: NTSC convention, or None for whole rates.
    """

    playback: Fraction
    ntsc: Optional[Ntsc]

    def __post_init__(self):
        if self.ntsc is not None and not isinstance(self.ntsc, Ntsc):
            raise FramerateParseError(ParseErrorReason.INVALID_NTSC, repr(self.ntsc))

        if not rational.greater_than(self.playback, rational.ZERO):
            raise FramerateParseError(ParseErrorReason.NON_POSITIVE, str(self.playback))

        if self.ntsc is not None:
            nominal = rational.ntsc_rate(rational.round_to_int(self.playback))
            if not rational.equals(nominal, self.playback):
                raise FramerateParseError(ParseErrorReason.INVALID_NTSC_RATE, str(self.playback))

        if self.ntsc == Ntsc.DROP and not drop_allowed(self.playback):
            raise FramerateParseError(ParseErrorReason.BAD_DROP_RATE, str(self.playback))

    @property
    def smpte_timebase(self) -> Fraction:
        """
        The 'logical' rate SMPTE timecode counts at.

        Equal to playback for whole rates. For NTSC rates this is the
        nominal whole rate: 24000/1001 -> 24.
        """
        if self.ntsc is None:
            return self.playback
        return Fraction(rational.round_to_int(self.playback))

    @property
    def timebase(self) -> Fraction:
        return self.smpte_timebase

    @property
    def is_ntsc(self) -> bool:
        return self.ntsc is not None

    @property
    def is_drop_frame(self) -> bool:
        return self.ntsc == Ntsc.DROP

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-safe dictionary."""
        return {
            "playback": f"{self.playback.numerator}/{self.playback.denominator}",
            "ntsc": self.ntsc.value if self.ntsc else None,
        }

    def __str__(self) -> str:
        from .render import render
        return render(self)


@dataclass(frozen=True)
class FramerateResult:
    """
    Outcome of parse_framerate(): exactly one of framerate / error is set.
    """

    framerate: Optional[Framerate] = None
    error: Optional[FramerateParseError] = None

    def __post_init__(self):
        if (self.framerate is None) == (self.error is None):
            raise ValueError("FramerateResult needs exactly one of framerate or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Framerate:
        """Return the framerate or raise the parse error."""
        if self.error is not None:
            raise self.error
        return self.framerate
