from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .base import KeyValueStorage


class MySQLStorage(KeyValueStorage):
    """Key-value storage on the `kv_store` table (see database/schema.sql)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT storage_value FROM kv_store WHERE storage_key=%s", (key,))
                r = fetchone(cur)
                return r["storage_value"] if r else None
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot read {key!r}: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO kv_store(storage_key, storage_value)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE storage_value=VALUES(storage_value)
                    """,
                    (key, value),
                )
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot write {key!r}: {e}") from e

    def remove(self, key: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM kv_store WHERE storage_key=%s", (key,))
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot remove {key!r}: {e}") from e
