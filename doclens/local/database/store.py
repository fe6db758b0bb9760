import sqlite3
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from doclens.local.database.base import BaseDBManager
from doclens.local.database.errors import StoreOpenFailure
from doclens.local.database.schema import SCHEMA

log = logging.getLogger(__name__)

QueryResult = Union[List[Dict[str, Any]], Dict[str, Any]]


class StoreDBManager(BaseDBManager):
    """
    Manages the application's persistent document store.

    Constructed once at bootstrap and handed to every consumer that needs
    the store; there is no module-level handle.
    """

    def __init__(self, db_path: Path, timeout: float = 10):
        """
        Initializes the StoreDBManager.

        :param db_path: The path to the store SQLite file.
        :param timeout: Seconds to wait on a locked database.
        """
        super().__init__(db_path, enable_wal=True, enable_foreign_keys=True, timeout=timeout)

    def open(self) -> sqlite3.Connection:
        """
        Opens or creates the store and applies the additive schema.
        Returns the existing connection if already open.

        :raises StoreOpenFailure: If the file cannot be opened or the schema applied.
        """
        if self.is_open:
            return self.conn

        log.info(f"Initializing store at: {self.db_path}")
        try:
            conn = self.connect()
            self.execute_script(SCHEMA)
        except (sqlite3.Error, OSError) as e:
            log.critical(f"Error opening store '{self.db_path}': {e}", exc_info=True)
            self.close()
            raise StoreOpenFailure(self.db_path, e) from e

        log.info(f"Store '{self.db_path}' opened in WAL mode with foreign keys enforced.")
        return conn

    #* --- Store surface used by the UI/domain layer ---
    def query(self, sql: str, params: Optional[Sequence[Any]] = None) -> QueryResult:
        """
        Runs one parameterized statement.

        :return: Rows as dictionaries for any statement that yields a result set
            (including `INSERT ... RETURNING`), otherwise
            `{"changes": <rows changed>, "last_row_id": <rowid>}`.
        """
        cursor = self.run(sql, tuple(params or ()))
        if cursor.description is not None:
            return [dict(row) for row in cursor.fetchall()]
        return {"changes": cursor.rowcount, "last_row_id": cursor.lastrowid}

    def exec(self, sql: str) -> None:
        """Runs raw administrative SQL, possibly several statements."""
        self.execute_script(sql)

    #* --- Introspection helpers ---
    def table_exists(self, table: str) -> bool:
        row = self.fetch_one("SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?", (table,))
        return row is not None

    def table_has_column(self, table: str, column: str) -> bool:
        rows = self.fetch_all(f"PRAGMA table_info({table})")
        return any(row["name"] == column for row in rows)

    def count(self, table: str, where: str = "", params: Optional[Sequence[Any]] = None) -> int:
        sql = f"SELECT COUNT(*) FROM {table}" + (f" WHERE {where}" if where else "")
        return int(self.fetch_value(sql, tuple(params or ())))
