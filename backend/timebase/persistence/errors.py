"""
Persistence errors for stored framerates.

Everything raised by PersistenceManager derives from PersistenceError, so
callers can catch one type. sqlite3 errors never escape the manager.
"""


class PersistenceError(Exception):
    """Base exception for persistence operations."""
    pass


class SchemaError(PersistenceError):
    """
    The database schema cannot be used.

    Raised when the stored schema_version is newer than this code knows,
    or when a migration fails.
    """
    pass


class LoadError(PersistenceError):
    """
    A stored row is not a valid framerate.

    Rows are revalidated through the construction chain on load. A row that
    slipped past the CHECK constraints (a zero denominator, an NTSC tag on a
    whole rate, an unknown tag) raises this, with the chain's reason attached
    as __cause__.
    """
    pass


class SaveError(PersistenceError):
    """
    A framerate could not be written.

    Raised when the numerator or denominator exceeds MAX_STORED_COMPONENT,
    or when the database rejects the row (a CHECK constraint or any other
    integrity failure).
    """
    pass
