"""
Column mapping for storing a Framerate in SQLite.

SQLite has no composite types, so a framerate field named `rate` is stored
as three columns:

    rate_playback_num   INTEGER NOT NULL
    rate_playback_den   INTEGER NOT NULL
    rate_ntsc           TEXT            ('non_drop', 'drop' or NULL)

framerate_constraints_sql() adds CHECK constraints so the database rejects
rows that no valid Framerate could produce:

    {field}_rate_positive     playback > 0
    {field}_ntsc_tags         tag is a known NTSC tag or NULL
    {field}_ntsc_valid        NTSC rates equal round(playback) * 1000 / 1001
    {field}_ntsc_drop_valid   drop rates are a multiple of 30000/1001

All checks use integer arithmetic only. For positive values SQLite's
integer division truncates, so (2n + d) / (2d) is round-half-up of n/d,
which agrees with rational.round_to_int().
"""

from fractions import Fraction
from typing import List, Optional, Tuple

from ..framerate import Framerate, FramerateParseError, Ntsc, new_framerate
from .errors import LoadError, SaveError

FramerateColumns = Tuple[int, int, Optional[str]]

# Largest numerator or denominator the CHECK arithmetic handles without
# leaving SQLite's 64-bit integer range (30000 * den is the widest product).
MAX_STORED_COMPONENT = (2 ** 63 - 1) // 30000


def column_names(field: str) -> Tuple[str, str, str]:
    return (f"{field}_playback_num", f"{field}_playback_den", f"{field}_ntsc")


def framerate_column_sql(field: str) -> List[str]:
    """Column definitions for a framerate field."""
    num, den, ntsc = column_names(field)
    return [
        f"{num} INTEGER NOT NULL",
        f"{den} INTEGER NOT NULL",
        f"{ntsc} TEXT",
    ]


def framerate_constraints_sql(field: str) -> List[str]:
    """Named CHECK constraints for a framerate field."""
    num, den, ntsc = column_names(field)
    ntsc_tags = ", ".join(f"'{tag.value}'" for tag in Ntsc)

    return [
        f"CONSTRAINT {field}_rate_positive CHECK ({num} > 0 AND {den} > 0)",
        f"CONSTRAINT {field}_ntsc_tags CHECK ({ntsc} IS NULL OR {ntsc} IN ({ntsc_tags}))",
        (
            f"CONSTRAINT {field}_ntsc_valid CHECK ("
            f"{ntsc} IS NULL "
            f"OR ((2 * {num} + {den}) / (2 * {den})) * 1000 * {den} = {num} * 1001)"
        ),
        (
            f"CONSTRAINT {field}_ntsc_drop_valid CHECK ("
            f"{ntsc} IS NULL OR {ntsc} != '{Ntsc.DROP.value}' "
            f"OR ({num} * 1001) % (30000 * {den}) = 0)"
        ),
    ]


def dump_framerate(framerate: Framerate) -> FramerateColumns:
    """
    Framerate -> (numerator, denominator, ntsc) column values.

    Raises:
        SaveError: If the numerator or denominator exceeds MAX_STORED_COMPONENT.
    """
    playback = framerate.playback
    if max(playback.numerator, playback.denominator) > MAX_STORED_COMPONENT:
        raise SaveError(
            f"Framerate is too large to store: numerator and denominator "
            f"must not exceed {MAX_STORED_COMPONENT}"
        )

    ntsc = framerate.ntsc.value if framerate.ntsc else None
    return (playback.numerator, playback.denominator, ntsc)


def load_framerate(numerator: int, denominator: int, ntsc: Optional[str]) -> Framerate:
    """
    Column values -> Framerate, revalidated through the construction chain.

    Raises:
        LoadError: If the stored values do not form a valid framerate.
    """
    if denominator == 0:
        raise LoadError(f"Stored framerate has a zero denominator: {numerator}/0")

    try:
        return new_framerate(Fraction(numerator, denominator), ntsc=ntsc)
    except FramerateParseError as e:
        raise LoadError(
            f"Stored framerate {numerator}/{denominator} ({ntsc}) is invalid: {e}"
        ) from e
