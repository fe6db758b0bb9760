import sqlite3
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from doclens.local.database import migrations, seeding
from doclens.local.database.catalog import FRAMEWORK_KEYWORDS
from doclens.local.database.errors import MigrationFailure
from doclens.local.database.store import StoreDBManager

log = logging.getLogger(__name__)


@dataclass
class InitReport:
    """Outcome of one bootstrap pass over the store."""
    completed: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class StoreInitializer:
    """
    Brings the store up to date on every launch.

    Order: open (fatal on failure), column migration, dependent indexes,
    association migration, reference-data seeding. A failing step is rolled
    back and recorded; the remaining steps still run and the failed one is
    retried in full on the next launch.
    """

    def __init__(self, store: StoreDBManager, catalog: Optional[List[Dict[str, Any]]] = None):
        self.store = store
        self.catalog = catalog if catalog is not None else FRAMEWORK_KEYWORDS
        self.report = InitReport()

    def open(self) -> sqlite3.Connection:
        """Opens the store and applies the schema. Raises `StoreOpenFailure`."""
        return self.store.open()

    def migrate_associations(self) -> int:
        return migrations.migrate_associations(self.store)

    def migrate_columns(self) -> Dict[str, Any]:
        return migrations.migrate_columns(self.store, self.catalog)

    def seed_reference_data(self) -> Dict[str, Any]:
        """Seeds each reference dataset independently of the others."""
        results: Dict[str, Any] = {}
        for name, step in (
            ("seed_countries", lambda: seeding.seed_countries(self.store)),
            ("seed_industries", lambda: seeding.seed_industries(self.store)),
            ("seed_settings", lambda: seeding.seed_settings(self.store)),
            ("seed_keyword_frameworks", lambda: seeding.seed_keyword_frameworks(self.store, self.catalog)),
        ):
            if self._run_step(name, step):
                results[name] = self.report.details[name]
        return results

    def initialize(self) -> InitReport:
        """
        Runs the full bootstrap sequence.

        :raises StoreOpenFailure: If the store cannot be opened.
        :return: The report of completed and failed steps.
        """
        self.report = InitReport()
        self.open()

        self._run_step("migrate_columns", self.migrate_columns)
        self._run_step("ensure_indexes", lambda: migrations.ensure_indexes(self.store))
        self._run_step("migrate_associations", self.migrate_associations)
        self.seed_reference_data()

        if self.report.ok:
            log.info(f"Store ready ({len(self.report.completed)} steps completed).")
        else:
            log.error(
                f"Store ready with {len(self.report.failed)} failed step(s): "
                f"{', '.join(self.report.failed)}. They will be retried on next launch."
            )
        return self.report

    def _run_step(self, name: str, step: Callable[[], Any]) -> bool:
        try:
            self.report.details[name] = step()
        except MigrationFailure as e:
            self.report.failed[name] = str(e)
            return False
        self.report.completed.append(name)
        return True
