"""
Exact framerates for broadcast timecode.

A framerate is an exact rational playback rate plus its NTSC convention.
"23.98" is not 23.98: it is a rounding of 24000/1001, and this package
refuses to guess between the two unless asked to coerce.

Usage:
    from timebase.framerate import new_framerate, parse_framerate, Ntsc

    rate = new_framerate("24000/1001")
    print(rate)                    # <23.98 NTSC>
    print(rate.smpte_timebase)     # 24

    result = parse_framerate(23.98, ntsc=None)
    result.error.reason            # ParseErrorReason.IMPRECISE
"""

from .errors import (
    FramerateError,
    FramerateParseError,
    ParseErrorReason,
)
from .models import (
    Framerate,
    FramerateOptions,
    FramerateResult,
    Ntsc,
)
from .drop_frame import (
    drop_allowed,
    dropped_frames_per_minute,
)
from .validation import (
    parse_framerate,
    new_framerate,
)
from .render import (
    render,
    describe,
)

__all__ = [
    # Errors
    "FramerateError",
    "FramerateParseError",
    "ParseErrorReason",
    # Models
    "Framerate",
    "FramerateOptions",
    "FramerateResult",
    "Ntsc",
    # Drop-frame
    "drop_allowed",
    "dropped_frames_per_minute",
    # Construction
    "parse_framerate",
    "new_framerate",
    # Rendering
    "render",
    "describe",
]
