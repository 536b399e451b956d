"""
SQLite persistence manager for named framerates.

Single-file SQLite database.
Explicit save/load only - no auto-persistence.

Framerates are stored through the column mapping in columns.py, so the
database itself enforces the same invariants as the construction chain,
and every load is revalidated on the way out.
"""

import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ..framerate import Framerate
from .columns import (
    column_names,
    dump_framerate,
    framerate_column_sql,
    framerate_constraints_sql,
    load_framerate,
)
from .errors import PersistenceError, SchemaError, SaveError

logger = logging.getLogger(__name__)


# Database schema version for migrations
SCHEMA_VERSION = 1

RATE_FIELD = "rate"


@dataclass(frozen=True)
class SavedFramerate:
    """A framerate stored under an id, with an optional human label."""

    id: str
    framerate: Framerate
    label: Optional[str] = None
    created_at: Optional[str] = None


class PersistenceManager:
    """
    Manages SQLite persistence for named framerates.

    Stores:
    - Framerate playback (numerator / denominator) and NTSC tag
    - An optional label per framerate

    Does NOT store:
    - Rendered strings (always derived)
    - Timebases (always derived)
    """

    def __init__(self, db_path: Optional[str] = None):
        """
        Initialize persistence manager.

        Args:
            db_path: Path to SQLite database file (defaults to ./timebase.db)
        """
        if db_path is None:
            db_path = str(Path.cwd() / "timebase.db")

        self.db_path = db_path
        self._ensure_schema()

    @contextmanager
    def _connect(self):
        """Context manager for database connections."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row  # Access columns by name
        try:
            yield conn
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            raise SaveError(f"Framerate rejected by database constraints: {e}") from e
        except sqlite3.Error as e:
            conn.rollback()
            raise PersistenceError(f"Database operation failed: {e}") from e
        finally:
            conn.close()

    def _ensure_schema(self):
        """Create schema if it doesn't exist."""
        with self._connect() as conn:
            cursor = conn.cursor()

            # Schema version tracking
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS schema_version (
                    version INTEGER PRIMARY KEY,
                    applied_at TEXT NOT NULL
                )
            """)

            # Check current version
            cursor.execute("SELECT version FROM schema_version ORDER BY version DESC LIMIT 1")
            row = cursor.fetchone()
            current_version = row[0] if row else 0

            if current_version > SCHEMA_VERSION:
                raise SchemaError(
                    f"Database schema version {current_version} is newer than "
                    f"supported version {SCHEMA_VERSION}: {self.db_path}"
                )

            if current_version < SCHEMA_VERSION:
                self._migrate_schema(conn, current_version)

    def _migrate_schema(self, conn, from_version: int):
        """Apply schema migrations."""
        cursor = conn.cursor()

        if from_version < 1:
            # Initial schema
            definitions = [
                "id TEXT PRIMARY KEY",
                "label TEXT",
                *framerate_column_sql(RATE_FIELD),
                "created_at TEXT NOT NULL",
                *framerate_constraints_sql(RATE_FIELD),
            ]
            body = ",\n                    ".join(definitions)
            cursor.execute(f"""
                CREATE TABLE IF NOT EXISTS framerates (
                    {body}
                )
            """)

            # Record migration
            cursor.execute(
                "INSERT INTO schema_version (version, applied_at) VALUES (?, ?)",
                (1, datetime.now().isoformat())
            )
            logger.info(f"Applied framerate schema v1 to {self.db_path}")

    # Framerate persistence

    def save_framerate(
        self,
        framerate_id: str,
        framerate: Framerate,
        label: Optional[str] = None,
    ) -> SavedFramerate:
        """
        Save or update a framerate.

        Args:
            framerate_id: Unique id to store the framerate under
            framerate: A framerate built by the construction chain
            label: Optional human-readable label

        Returns:
            The stored record

        Raises:
            SaveError: If the framerate is too large to store or the
                database rejects the values
        """
        num_col, den_col, ntsc_col = column_names(RATE_FIELD)
        num, den, ntsc = dump_framerate(framerate)
        created_at = datetime.now().isoformat()

        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(f"""
                INSERT INTO framerates (id, label, {num_col}, {den_col}, {ntsc_col}, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    label = excluded.label,
                    {num_col} = excluded.{num_col},
                    {den_col} = excluded.{den_col},
                    {ntsc_col} = excluded.{ntsc_col}
            """, (framerate_id, label, num, den, ntsc, created_at))

        logger.info(f"Saved framerate {framerate_id}: {framerate}")
        return self.load_framerate(framerate_id)

    def load_framerate(self, framerate_id: str) -> Optional[SavedFramerate]:
        """
        Load a framerate.

        Args:
            framerate_id: Framerate id

        Returns:
            SavedFramerate or None if not found

        Raises:
            LoadError: If the stored row is not a valid framerate
        """
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM framerates WHERE id = ?", (framerate_id,))
            row = cursor.fetchone()

        if not row:
            return None

        return self._row_to_saved(row)

    def list_framerates(self) -> List[SavedFramerate]:
        """Load all persisted framerates, ordered by id."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM framerates ORDER BY id")
            rows = cursor.fetchall()

        return [self._row_to_saved(row) for row in rows]

    def delete_framerate(self, framerate_id: str) -> bool:
        """
        Delete a framerate.

        Returns:
            True if a row was deleted
        """
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM framerates WHERE id = ?", (framerate_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Deleted framerate {framerate_id}")
        return deleted

    def _row_to_saved(self, row: sqlite3.Row) -> SavedFramerate:
        num_col, den_col, ntsc_col = column_names(RATE_FIELD)
        return SavedFramerate(
            id=row["id"],
            framerate=load_framerate(row[num_col], row[den_col], row[ntsc_col]),
            label=row["label"],
            created_at=row["created_at"],
        )
