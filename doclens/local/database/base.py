import sqlite3
import logging
import threading
from pathlib import Path
from contextlib import contextmanager
from typing import List, Optional, Tuple, Any, Generator

log = logging.getLogger(__name__)


class BaseDBManager:
    """
    Shared plumbing for SQLite-backed managers.

    A single connection is opened once and reused. It runs in autocommit
    mode; multi-statement writes go through `transaction()`.
    """

    def __init__(self, db_path: Path, enable_wal: bool = False, enable_foreign_keys: bool = False,
                 timeout: float = 10):
        """
        :param db_path: Location of the SQLite file. Its directory is created on connect.
        :param enable_wal: Switch the journal to write-ahead logging.
        :param enable_foreign_keys: Turn on `PRAGMA foreign_keys` for the connection.
        :param timeout: Seconds to wait on a locked database.
        """
        self.db_path = Path(db_path)
        self.enable_wal = enable_wal
        self.enable_foreign_keys = enable_foreign_keys
        self.timeout = timeout
        self.lock = threading.RLock()
        self.conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self.conn is not None

    def connect(self) -> sqlite3.Connection:
        """
        Opens the connection, creating the file and its directory if needed.
        Returns the existing connection when already open.
        """
        with self.lock:
            if self.conn is not None:
                return self.conn

            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path, timeout=self.timeout,
                                   isolation_level=None, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            try:
                if self.enable_foreign_keys:
                    conn.execute("PRAGMA foreign_keys = ON;")
                if self.enable_wal:
                    mode = conn.execute("PRAGMA journal_mode=WAL;").fetchone()[0]
                    if str(mode).lower() != "wal":
                        log.warning(f"Database '{self.db_path}' is using journal mode '{mode}' instead of WAL.")
            except sqlite3.Error:
                conn.close()
                raise
            self.conn = conn
            return conn

    def close(self) -> None:
        """Closes the connection if open."""
        with self.lock:
            if self.conn is not None:
                self.conn.close()
                self.conn = None

    @contextmanager
    def _get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Yields the shared connection while holding the manager's lock."""
        with self.lock:
            yield self.connect()

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """
        Runs the enclosed statements atomically. Rolls back on any exception.
        Nested use joins the outer transaction.
        """
        with self._get_connection() as conn:
            if conn.in_transaction:
                yield conn
                return
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
            except BaseException:
                conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")

    #* --- Statement helpers ---
    # Failures are logged with the database name, then the sqlite3 error is re-raised.

    def run(self, sql: str, params: Optional[Tuple[Any, ...]] = None) -> sqlite3.Cursor:
        """
        Runs one statement and hands back its cursor, for callers that need
        `rowcount` or `lastrowid`.

        :param sql: A single SQL statement with `?` placeholders.
        :param params: Values bound to the placeholders.
        """
        try:
            with self._get_connection() as conn:
                return conn.execute(sql, params or ())
        except sqlite3.Error as e:
            log.error(f"Statement failed on '{self.db_path.name}': {e}")
            raise

    def execute(self, sql: str, params: Optional[Tuple[Any, ...]] = None) -> List[sqlite3.Row]:
        """Runs one statement and returns whatever rows it produced."""
        return self.run(sql, params).fetchall()

    def execute_many(self, sql: str, params: List[Tuple[Any, ...]]) -> int:
        """
        Runs the same statement once per parameter tuple.

        :return: Total rows changed.
        """
        try:
            with self._get_connection() as conn:
                return conn.executemany(sql, params).rowcount
        except sqlite3.Error as e:
            log.error(f"Batch statement failed on '{self.db_path.name}' ({len(params)} rows): {e}")
            raise

    def execute_script(self, script: str) -> None:
        """
        Runs a semicolon-separated script.
        Must not be called inside `transaction()`; sqlite3 commits first.
        """
        try:
            with self._get_connection() as conn:
                conn.executescript(script)
        except sqlite3.Error as e:
            log.error(f"Script failed on '{self.db_path.name}': {e}")
            raise

    def fetch_all(self, sql: str, params: Optional[Tuple[Any, ...]] = None) -> List[sqlite3.Row]:
        return self.execute(sql, params)

    def fetch_one(self, sql: str, params: Optional[Tuple[Any, ...]] = None) -> Optional[sqlite3.Row]:
        """Returns the first row of a query, or None when it matched nothing."""
        return self.run(sql, params).fetchone()

    def fetch_value(self, sql: str, params: Optional[Tuple[Any, ...]] = None) -> Any:
        """Returns the first column of the first row, or None."""
        row = self.fetch_one(sql, params)
        return row[0] if row is not None else None
