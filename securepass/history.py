#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Persistent password history for SecurePass"""

import asyncio
import enum
import os
import sqlite3
import time
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone

from securepass.constants import HISTORY_LIMIT, SCHEMA_VERSION
from securepass.exceptions import StorageError

# Schema migrations, indexed by the version they upgrade from
MIGRATIONS = {
    0: (
        """
        CREATE TABLE IF NOT EXISTS history (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            password TEXT NOT NULL,
            created INTEGER NOT NULL  -- milliseconds since the epoch
        )
        """,
        "CREATE INDEX IF NOT EXISTS history_created ON history(created)",
    ),
}


class StoreState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    OPENING = "opening"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class HistoryEntry:
    """A generated password as recorded in the history"""

    id: int
    password: str = field(repr=False)
    created: int

    @property
    def created_at(self):
        """Insertion time as an aware UTC datetime"""
        return datetime.fromtimestamp(self.created / 1000, tz=timezone.utc)


class HistoryStore:
    """
    Append-only log of generated passwords backed by SQLite

    The connection is opened lazily and lives on a single worker thread
    owned by the store, so every database call runs there in issue order.
    Each operation is its own transaction.
    """

    def __init__(self, db_path, logger=None):
        """
        Initialize the history store

        Args:
            db_path: Path to the SQLite database file
            logger: Optional logger instance
        """
        self.db_path = os.fspath(db_path)
        self.logger = logger

        self._conn = None
        self._executor = None
        self._state = StoreState.UNINITIALIZED
        self._opening = None
        self._error = None

    @property
    def state(self):
        return self._state

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def open(self):
        """
        Open the database, creating or upgrading the schema on first use

        Concurrent callers share one open. Opening a ready store does nothing.

        Returns:
            The store itself

        Raises:
            StorageError: The database could not be opened; the store is
                now FAILED and every later call raises as well
        """
        if self._state is StoreState.READY:
            return self
        if self._state is StoreState.FAILED:
            raise self._failed_error()

        if self._opening is None:
            self._state = StoreState.OPENING
            self._opening = asyncio.ensure_future(self._open())
        await asyncio.shield(self._opening)
        return self

    async def add(self, password):
        """
        Append a password to the history

        Args:
            password: Password string, stored as given

        Returns:
            HistoryEntry with the id assigned by the database

        Raises:
            StorageError: The entry was not stored
        """
        if not isinstance(password, str):
            raise TypeError(f"password must be a string, got {type(password).__name__}")

        await self._ensure_open()
        created = int(time.time() * 1000)
        entry = await self._run(self._insert, password, created, action="add history entry")

        if self.logger:
            self.logger.info(f"Added history entry {entry.id}")
        return entry

    async def list(self, limit=HISTORY_LIMIT):
        """
        Get the most recent entries, newest first

        Args:
            limit: Maximum number of entries to return

        Returns:
            List of HistoryEntry, at most limit long
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValueError(f"limit must be a non-negative integer, got {limit!r}")

        await self._ensure_open()
        rows = await self._run(self._select_all, action="read history")
        if limit == 0:
            return []

        recent = rows[-limit:]
        recent.reverse()
        return [HistoryEntry(*row) for row in recent]

    async def clear(self):
        """Delete every entry. Ids are not reused afterwards."""
        await self._ensure_open()
        removed = await self._run(self._delete_all, action="clear history")

        if self.logger:
            self.logger.info(f"Cleared history ({removed} entries removed)")

    async def close(self):
        """Close the connection; a later operation opens it again"""
        if self._opening is not None:
            try:
                await asyncio.shield(self._opening)
            except StorageError:
                pass

        if self._conn is None:
            return

        conn, executor = self._conn, self._executor
        self._conn = None
        self._executor = None
        self._state = StoreState.UNINITIALIZED

        loop = asyncio.get_running_loop()
        await loop.run_in_executor(executor, conn.close)
        executor.shutdown(wait=False)

        if self.logger:
            self.logger.info("History database closed")

    async def _open(self):
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="securepass-history")
        loop = asyncio.get_running_loop()
        try:
            conn = await loop.run_in_executor(executor, self._connect)
        except (sqlite3.Error, OSError) as e:
            executor.shutdown(wait=False)
            self._state = StoreState.FAILED
            self._error = e
            self._opening = None
            if self.logger:
                self.logger.error(f"Could not open history database {self.db_path}: {e}")
            raise self._failed_error() from e

        self._conn = conn
        self._executor = executor
        self._state = StoreState.READY
        self._opening = None
        if self.logger:
            self.logger.info(f"History database ready: {self.db_path}")

    def _connect(self):
        parent = os.path.dirname(os.path.abspath(self.db_path))
        os.makedirs(parent, exist_ok=True)

        conn = sqlite3.connect(self.db_path, isolation_level=None, check_same_thread=False)
        try:
            conn.execute("PRAGMA journal_mode = WAL")
            with self._transaction(conn):
                version = conn.execute("PRAGMA user_version").fetchone()[0]
                if version < SCHEMA_VERSION:
                    self._upgrade(conn, version)
        except sqlite3.Error:
            conn.close()
            raise
        return conn

    def _upgrade(self, conn, version):
        for from_version in range(version, SCHEMA_VERSION):
            for statement in MIGRATIONS[from_version]:
                conn.execute(statement)
        # PRAGMA does not accept bound parameters
        conn.execute(f"PRAGMA user_version = {int(SCHEMA_VERSION)}")

        if self.logger:
            self.logger.info(f"Upgraded history schema from version {version} to {SCHEMA_VERSION}")

    @contextmanager
    def _transaction(self, conn, mode="IMMEDIATE"):
        conn.execute(f"BEGIN {mode}")
        try:
            yield conn
            conn.execute("COMMIT")
        except BaseException:
            # a failed COMMIT can leave the transaction open
            if conn.in_transaction:
                conn.execute("ROLLBACK")
            raise

    def _insert(self, password, created):
        with self._transaction(self._conn) as conn:
            cursor = conn.execute(
                "INSERT INTO history (password, created) VALUES (?, ?)", (password, created)
            )
        return HistoryEntry(cursor.lastrowid, password, created)

    def _select_all(self):
        with self._transaction(self._conn, mode="DEFERRED") as conn:
            return conn.execute("SELECT id, password, created FROM history ORDER BY id").fetchall()

    def _delete_all(self):
        with self._transaction(self._conn) as conn:
            cursor = conn.execute("DELETE FROM history")
        return cursor.rowcount

    async def _ensure_open(self):
        if self._state is not StoreState.READY:
            await self.open()

    async def _run(self, func, *args, action):
        loop = asyncio.get_running_loop()
        try:
            # the statement runs to completion even if the caller stops waiting
            return await asyncio.shield(loop.run_in_executor(self._executor, func, *args))
        except sqlite3.Error as e:
            if self.logger:
                self.logger.error(f"Could not {action}: {e}")
            raise StorageError(f"Could not {action}: {e}") from e

    def _failed_error(self):
        error = StorageError(f"History database {self.db_path} failed to open: {self._error}")
        error.__cause__ = self._error
        return error
