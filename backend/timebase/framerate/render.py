"""
Diagnostic rendering of framerates.

Read-only: nothing here feeds back into validation.
"""

from . import rational
from .drop_frame import drop_allowed, dropped_frames_per_minute
from .models import Framerate, Ntsc


def render(framerate: Framerate) -> str:
    """
    Short canonical form, e.g. '<23.98 NTSC>', '<29.97 NTSC DF>', '<24.0 fps>'.

    ' NDF' is appended to a non-drop rate only when the same rate could also
    be tagged drop-frame, so the two are distinguishable at a glance.
    """
    approximate = round(rational.to_approximate_float(framerate.playback), 2)
    unit = " NTSC" if framerate.is_ntsc else " fps"
    return f"<{approximate}{unit}{_drop_string(framerate)}>"


def _drop_string(framerate: Framerate) -> str:
    if framerate.ntsc == Ntsc.DROP:
        return " DF"
    if framerate.ntsc == Ntsc.NON_DROP and drop_allowed(framerate.playback):
        return " NDF"
    return ""


def describe(framerate: Framerate) -> str:
    """
    Longer human-readable description.

    '29.97 NTSC DF (30000/1001 fps, timebase 30, drops 2 frames/minute)'
    """
    playback = framerate.playback
    summary = render(framerate)[1:-1]
    parts = [f"{playback.numerator}/{playback.denominator} fps"]

    if framerate.is_ntsc:
        parts.append(f"timebase {framerate.smpte_timebase}")
    if framerate.ntsc == Ntsc.DROP:
        parts.append(f"drops {dropped_frames_per_minute(playback)} frames/minute")

    return f"{summary} ({', '.join(parts)})"
