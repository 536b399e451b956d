"""
timebase: exact framerates for broadcast timecode.

Usage:
    from timebase import new_framerate, Ntsc

    rate = new_framerate(30, ntsc=Ntsc.DROP, coerce_ntsc=True)
    print(rate)    # <29.97 NTSC DF>
"""

from .framerate import (
    Framerate,
    FramerateError,
    FramerateOptions,
    FramerateParseError,
    FramerateResult,
    Ntsc,
    ParseErrorReason,
    describe,
    drop_allowed,
    new_framerate,
    parse_framerate,
    render,
)

__version__ = "0.1.0"

__all__ = [
    "Framerate",
    "FramerateError",
    "FramerateOptions",
    "FramerateParseError",
    "FramerateResult",
    "Ntsc",
    "ParseErrorReason",
    "describe",
    "drop_allowed",
    "new_framerate",
    "parse_framerate",
    "render",
]
