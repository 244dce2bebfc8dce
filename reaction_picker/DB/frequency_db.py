# frequency_db.py
# Description: SQLite persistence for frequently used emoji counters
#
"""
frequency_db.py
---------------

A SQLite-based module persisting how often each emoji was picked.
This module provides functionality to:
- Create or increment a usage counter for an emoji in one UPSERT
- Read every counter together with its last-write sequence number
- Track the schema version in a small metadata table

One row exists per emoji ever selected, keyed by its textual id (the
standard short code, or the custom emoji's content name). Rows are never
deleted by normal operation.

Connections are thread-local for file databases so the module can be
driven from `asyncio.to_thread`. An in-memory database only exists on the
connection that created it, so ':memory:' handles share a single connection
guarded by a lock.
"""

import sqlite3
import threading
from contextlib import contextmanager, nullcontext
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from loguru import logger

from .base_db import BaseDB, DatabaseError, SchemaError

# Database Schema Version
SCHEMA_VERSION = 1

TABLE_NAME = "frequently_used_emojis"


class FrequencyDBError(DatabaseError):
    """Raised when the frequency database cannot complete an operation."""
    pass


class FrequencySchemaError(FrequencyDBError, SchemaError):
    """Raised when the database was written by a newer schema version."""
    pass


class FrequentlyUsedEmojisDB(BaseDB):
    """Database manager for per-emoji selection counters."""

    def __init__(self, db_path: Union[str, Path]):
        self._local = threading.local()
        self._connections: List[sqlite3.Connection] = []
        self._connections_lock = threading.Lock()
        self._shared_connection: Optional[sqlite3.Connection] = None
        self._memory_lock = threading.RLock()
        self._closed = False
        super().__init__(db_path)

    def _open_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path_str, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        if not self.is_memory_db:
            conn.execute("PRAGMA journal_mode = WAL")
        with self._connections_lock:
            self._connections.append(conn)
        return conn

    def _get_connection(self) -> sqlite3.Connection:
        """The connection for the calling thread (the shared one for ':memory:')."""
        if self._closed:
            raise FrequencyDBError(f"Database {self.db_path_str} is closed")
        if self.is_memory_db:
            if self._shared_connection is None:
                self._shared_connection = self._open_connection()
            return self._shared_connection
        conn = getattr(self._local, "connection", None)
        if conn is None:
            conn = self._open_connection()
            self._local.connection = conn
        return conn

    @contextmanager
    def transaction(self, immediate: bool = False) -> Iterator[sqlite3.Connection]:
        """
        Yield a connection inside a transaction.

        Commits on success and rolls back on failure. Any `sqlite3.Error`
        leaves as `FrequencyDBError`.

        Args:
            immediate: Take the write lock up front (BEGIN IMMEDIATE)
        """
        guard = self._memory_lock if self.is_memory_db else nullcontext()
        with guard:
            try:
                conn = self._get_connection()
            except sqlite3.Error as e:
                raise FrequencyDBError(f"Could not connect to {self.db_path_str}: {e}") from e
            try:
                if immediate:
                    conn.execute("BEGIN IMMEDIATE")
                yield conn
                conn.commit()
            except sqlite3.Error as e:
                self._rollback(conn)
                raise FrequencyDBError(f"Frequency database operation failed: {e}") from e
            except Exception:
                self._rollback(conn)
                raise

    def _rollback(self, conn: sqlite3.Connection):
        try:
            conn.rollback()
        except sqlite3.Error:
            logger.warning(f"Rollback failed on {self.db_path_str}")

    def _initialize_schema(self):
        """Create tables or validate the stored schema version."""
        with self.transaction() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS metadata (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            row = conn.execute(
                "SELECT value FROM metadata WHERE key = 'schema_version'"
            ).fetchone()

            if row is None:
                self._create_schema(conn)
                conn.execute(
                    "INSERT INTO metadata (key, value) VALUES ('schema_version', ?)",
                    (str(SCHEMA_VERSION),)
                )
            else:
                current_version = int(row["value"])
                if current_version > SCHEMA_VERSION:
                    raise FrequencySchemaError(
                        f"Database schema version {current_version} is newer than "
                        f"supported version {SCHEMA_VERSION}"
                    )

    def _create_schema(self, conn: sqlite3.Connection):
        conn.execute(f"""
            CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
                id TEXT PRIMARY KEY,
                is_custom INTEGER NOT NULL DEFAULT 0,
                extension TEXT,
                count INTEGER NOT NULL DEFAULT 1 CHECK (count >= 1),
                last_used_at TEXT NOT NULL,
                write_seq INTEGER NOT NULL
            )
        """)
        conn.execute(f"""
            CREATE INDEX IF NOT EXISTS idx_frequently_used_rank
            ON {TABLE_NAME} (count DESC, write_seq DESC)
        """)

    @staticmethod
    def _row_to_dict(row: sqlite3.Row) -> Dict[str, Any]:
        return {
            'id': row['id'],
            'is_custom': bool(row['is_custom']),
            'extension': row['extension'],
            'count': row['count'],
            'last_used_at': row['last_used_at'],
            'write_seq': row['write_seq'],
        }

    def increment(self, emoji_id: str, is_custom: bool, extension: Optional[str] = None) -> Dict[str, Any]:
        """
        Record one selection of an emoji.

        Creates the row with count 1 on the first selection, otherwise adds
        one to the stored count. Kind and extension follow the latest write.

        Args:
            emoji_id: Standard short code or custom emoji content name
            is_custom: Whether the id names a custom emoji
            extension: Asset extension for custom emoji

        Returns:
            The stored record after the write
        """
        now = datetime.now(timezone.utc).isoformat()
        query = f"""
            INSERT INTO {TABLE_NAME} (id, is_custom, extension, count, last_used_at, write_seq)
            VALUES (?, ?, ?, 1, ?, (SELECT COALESCE(MAX(write_seq), 0) + 1 FROM {TABLE_NAME}))
            ON CONFLICT(id) DO UPDATE SET
                count = count + 1,
                is_custom = excluded.is_custom,
                extension = excluded.extension,
                last_used_at = excluded.last_used_at,
                write_seq = excluded.write_seq
        """
        with self.transaction(immediate=True) as conn:
            conn.execute(query, (emoji_id, int(is_custom), extension, now))
            row = conn.execute(
                f"SELECT * FROM {TABLE_NAME} WHERE id = ?", (emoji_id,)
            ).fetchone()
        record = self._row_to_dict(row)
        logger.debug(f"Frequency of '{emoji_id}' is now {record['count']}")
        return record

    def get_record(self, emoji_id: str) -> Optional[Dict[str, Any]]:
        """Return the stored record for an id, or None if never selected."""
        with self.transaction() as conn:
            row = conn.execute(
                f"SELECT * FROM {TABLE_NAME} WHERE id = ?", (emoji_id,)
            ).fetchone()
        return self._row_to_dict(row) if row else None

    def fetch_records(self) -> List[Dict[str, Any]]:
        """
        Return every stored record, most recently written first.

        Callers apply their own ranking on top of this order.
        """
        with self.transaction() as conn:
            rows = conn.execute(
                f"SELECT * FROM {TABLE_NAME} ORDER BY write_seq DESC"
            ).fetchall()
        return [self._row_to_dict(row) for row in rows]

    def count_records(self) -> int:
        with self.transaction() as conn:
            row = conn.execute(f"SELECT COUNT(*) AS total FROM {TABLE_NAME}").fetchone()
        return row['total']

    def get_schema_version(self) -> int:
        with self.transaction() as conn:
            row = conn.execute(
                "SELECT value FROM metadata WHERE key = 'schema_version'"
            ).fetchone()
        return int(row['value'])

    def clear_all(self):
        """Delete every counter. Used by maintenance tooling and tests."""
        with self.transaction() as conn:
            conn.execute(f"DELETE FROM {TABLE_NAME}")
        logger.warning(f"Cleared all emoji frequency records in {self.db_path_str}")

    def close(self):
        """Close every connection opened by this handle."""
        self._closed = True
        with self._connections_lock:
            connections, self._connections = self._connections, []
        for conn in connections:
            try:
                conn.close()
            except sqlite3.Error as e:
                logger.warning(f"Error closing connection to {self.db_path_str}: {e}")
        self._shared_connection = None
        self._local = threading.local()
        logger.debug(f"{self.__class__.__name__} closed: {self.db_path_str}")
