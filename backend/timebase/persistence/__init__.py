"""
Persistence layer for framerates.

SQLite-backed storage: a framerate field maps to numerator, denominator
and NTSC tag columns guarded by CHECK constraints.
"""

from .manager import PersistenceManager, SavedFramerate
from .errors import PersistenceError, SchemaError, LoadError, SaveError
from .columns import (
    MAX_STORED_COMPONENT,
    dump_framerate,
    load_framerate,
    framerate_column_sql,
    framerate_constraints_sql,
)

__all__ = [
    "PersistenceManager",
    "SavedFramerate",
    "PersistenceError",
    "SchemaError",
    "LoadError",
    "SaveError",
    "dump_framerate",
    "load_framerate",
    "framerate_column_sql",
    "framerate_constraints_sql",
    "MAX_STORED_COMPONENT",
]
