import sqlite3

import pytest

from doclens.local.database import StoreDBManager, StoreOpenFailure


class TestOpen:
    def test_open_is_idempotent(self, store):
        first = store.open()
        assert store.open() is first

    def test_wal_and_foreign_keys(self, store):
        store.open()
        assert store.fetch_value("PRAGMA journal_mode").lower() == "wal"
        assert store.fetch_value("PRAGMA foreign_keys") == 1

    def test_creates_missing_directory_and_tables(self, store):
        store.open()
        assert store.db_path.exists()
        for table in ("projects", "documents", "project_documents", "keyword_lists", "settings", "collections"):
            assert store.table_exists(table)

    def test_unopenable_location(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        manager = StoreDBManager(blocker / "store.db")

        with pytest.raises(StoreOpenFailure) as exc_info:
            manager.open()
        assert exc_info.value.db_path == blocker / "store.db"
        assert manager.is_open is False

    def test_reopen_after_close(self, store):
        store.open()
        store.query("INSERT INTO settings (key, value) VALUES (?, ?)", ["theme", "dark"])
        store.close()
        store.open()
        assert store.query("SELECT value FROM settings WHERE key = ?", ["theme"]) == [{"value": "dark"}]


class TestQuery:
    def test_write_reports_changes(self, store):
        store.open()
        result = store.query("INSERT INTO projects (id, name) VALUES (?, ?)", ["p1", "Annual reports"])
        assert result["changes"] == 1
        assert isinstance(result["last_row_id"], int)

    def test_read_returns_dicts(self, store):
        store.open()
        store.query("INSERT INTO projects (id, name) VALUES (?, ?)", ["p1", "Annual reports"])
        assert store.query("SELECT id, name FROM projects") == [{"id": "p1", "name": "Annual reports"}]

    def test_result_shape_follows_the_statement_not_its_first_word(self, store):
        store.open()
        result = store.query(
            "WITH v(id, name) AS (VALUES (?, ?)) INSERT INTO projects (id, name) SELECT id, name FROM v",
            ["p2", "Two"],
        )
        assert result["changes"] == 1

        rows = store.query("-- every project\n  SELECT id FROM projects")
        assert rows == [{"id": "p2"}]
        assert store.query("SELECT id FROM projects WHERE id = ?", ["missing"]) == []

    @pytest.mark.skipif(sqlite3.sqlite_version_info < (3, 35, 0), reason="RETURNING needs SQLite 3.35")
    def test_write_with_returning_yields_rows(self, store):
        store.open()
        rows = store.query("INSERT INTO projects (id, name) VALUES (?, ?) RETURNING id, name", ["p3", "Three"])
        assert rows == [{"id": "p3", "name": "Three"}]
        assert store.count("projects") == 1

    def test_foreign_keys_are_enforced(self, store):
        store.open()
        with pytest.raises(sqlite3.IntegrityError):
            store.query("INSERT INTO project_documents (project_id, document_id) VALUES (?, ?)", ["x", "y"])

    def test_exec_runs_several_statements(self, store):
        store.open()
        store.exec("INSERT INTO settings (key, value) VALUES ('a', '1'); "
                   "INSERT INTO settings (key, value) VALUES ('b', '2');")
        assert store.count("settings") == 2
        assert store.count("settings", "key = ?", ["b"]) == 1


class TestTransaction:
    def test_rolls_back_on_error(self, store):
        store.open()
        with pytest.raises(sqlite3.IntegrityError):
            with store.transaction():
                store.run("INSERT INTO settings (key, value) VALUES ('a', '1')")
                store.run("INSERT INTO settings (key, value) VALUES ('a', '2')")
        assert store.count("settings") == 0

    def test_nested_transaction_joins_outer(self, store):
        store.open()
        with pytest.raises(RuntimeError):
            with store.transaction():
                with store.transaction():
                    store.run("INSERT INTO settings (key, value) VALUES ('a', '1')")
                raise RuntimeError("abort")
        assert store.count("settings") == 0
