"""
Drop-frame legality.

Drop-frame timecode skips frame numbers at the top of every minute except
each tenth minute so that NTSC timecode stays close to wall-clock time.
It is only defined for NTSC rates whose timebase is a multiple of 30:

    29.97  (30000/1001)   drops 2 numbers per minute
    59.94  (60000/1001)   drops 4 numbers per minute
    119.88 (120000/1001)  drops 8 numbers per minute

23.976 has a timebase of 24 and cannot carry drop-frame timecode.
"""

from fractions import Fraction

from .rational import ZERO

DROP_FRAME_BASE = Fraction(30000, 1001)
DROPPED_PER_BASE = 2


def drop_allowed(rate: Fraction) -> bool:
    """
    Return True if rate is a legal drop-frame playback rate.

    Total over all rationals: zero and negative rates are never legal.
    """
    rate = Fraction(rate)
    if rate <= ZERO:
        return False
    return (rate / DROP_FRAME_BASE).denominator == 1


def dropped_frames_per_minute(rate: Fraction) -> int:
    """
    Number of frame numbers skipped at each non-tenth minute.

    Raises:
        ValueError: If rate is not a drop-frame rate.
    """
    rate = Fraction(rate)
    if not drop_allowed(rate):
        raise ValueError(f"{rate} is not a drop-frame rate")
    return int(rate / DROP_FRAME_BASE) * DROPPED_PER_BASE
