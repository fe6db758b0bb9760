"""
Forward-only, idempotent migrations for the local store.

Nothing here records a "done" marker. Each step detects its own pending work
from the live data (missing columns, unmirrored project references), so a
step interrupted mid-way is simply completed on the next launch.
"""
import sqlite3
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Dict, Generator, List

from doclens.local.database.catalog import FRAMEWORK_KEYWORDS
from doclens.local.database.errors import MigrationFailure
from doclens.local.database.schema import COLUMN_MIGRATIONS, MIGRATION_INDEXES

if TYPE_CHECKING:
    from .store import StoreDBManager

log = logging.getLogger(__name__)

ASSOCIATION_BATCH_SIZE = 500

_PENDING_ASSOCIATIONS_SQL = """
    SELECT d.project_id, d.id
    FROM documents d
    JOIN projects p ON p.id = d.project_id
    WHERE d.project_id IS NOT NULL
      AND NOT EXISTS (
          SELECT 1 FROM project_documents pd
          WHERE pd.project_id = d.project_id AND pd.document_id = d.id
      )
    LIMIT ?
"""

_ORPHANED_REFERENCES_SQL = """
    SELECT COUNT(*) FROM documents d
    WHERE d.project_id IS NOT NULL
      AND NOT EXISTS (SELECT 1 FROM projects p WHERE p.id = d.project_id)
"""


@contextmanager
def migration_step(name: str) -> Generator[None, None, None]:
    """Converts database errors raised inside a step into `MigrationFailure`."""
    try:
        yield
    except sqlite3.Error as e:
        log.error(f"Store step '{name}' failed: {e}", exc_info=True)
        raise MigrationFailure(name, e) from e


def migrate_associations(store: "StoreDBManager", batch_size: int = ASSOCIATION_BATCH_SIZE) -> int:
    """
    Mirrors legacy `documents.project_id` references into `project_documents`.

    Each batch is inserted in its own transaction. References to projects
    that no longer exist are left alone.

    :return: The number of association rows inserted.
    """
    inserted = 0
    with migration_step("migrate_associations"):
        while True:
            with store.transaction():
                rows = store.fetch_all(_PENDING_ASSOCIATIONS_SQL, (batch_size,))
                if not rows:
                    break
                store.execute_many(
                    "INSERT INTO project_documents (project_id, document_id) VALUES (?, ?)",
                    [(row["project_id"], row["id"]) for row in rows],
                )
            inserted += len(rows)
            log.debug(f"Migrated a batch of {len(rows)} project/document associations.")

        orphaned = store.fetch_value(_ORPHANED_REFERENCES_SQL)
    if orphaned:
        log.warning(f"{orphaned} document(s) reference a project that no longer exists. Skipped.")
    if inserted:
        log.info(f"Migrated {inserted} legacy project reference(s) into project_documents.")
    return inserted


def add_missing_columns(store: "StoreDBManager") -> List[str]:
    """
    Adds every column from `COLUMN_MIGRATIONS` that the live table lacks.

    :return: The added columns as 'table.column'.
    """
    added: List[str] = []
    with migration_step("add_missing_columns"), store.transaction():
        for table, column, definition in COLUMN_MIGRATIONS:
            if not store.table_exists(table) or store.table_has_column(table, column):
                continue
            store.run(f"ALTER TABLE {table} ADD COLUMN {column} {definition}")
            added.append(f"{table}.{column}")
            log.info(f"Added column {table}.{column}")
    return added


def backfill_keyword_categories(store: "StoreDBManager", catalog: List[Dict[str, Any]] = FRAMEWORK_KEYWORDS) -> int:
    """
    Tags builtin keyword lists seeded before `category` existed.
    Only rows still lacking a category are touched.

    :return: The number of rows updated.
    """
    updated = 0
    with migration_step("backfill_keyword_categories"), store.transaction():
        if not store.table_has_column("keyword_lists", "category"):
            log.warning("keyword_lists.category is missing. Skipping category back-fill.")
            return 0
        for framework in catalog:
            if not framework.get("category"):
                continue
            cursor = store.run(
                "UPDATE keyword_lists SET category = ? "
                "WHERE is_builtin = 1 AND framework = ? AND category IS NULL",
                (framework["category"], framework["id"]),
            )
            updated += cursor.rowcount
    if updated:
        log.info(f"Back-filled category on {updated} builtin keyword list(s).")
    return updated


def migrate_columns(store: "StoreDBManager", catalog: List[Dict[str, Any]] = FRAMEWORK_KEYWORDS) -> Dict[str, Any]:
    """Adds missing columns, then back-fills values that depend on them."""
    added = add_missing_columns(store)
    backfilled = backfill_keyword_categories(store, catalog)
    return {"added": added, "backfilled": backfilled}


def ensure_indexes(store: "StoreDBManager") -> None:
    """Creates indexes that depend on migrated columns."""
    with migration_step("ensure_indexes"), store.transaction():
        for ddl in MIGRATION_INDEXES:
            store.run(ddl)
