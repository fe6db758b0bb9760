from pathlib import Path


class StoreError(Exception):
    """Base class for persistent-store failures."""


class StoreOpenFailure(StoreError):
    """The store file could not be opened or created. Fatal to startup."""

    def __init__(self, db_path: Path, cause: Exception):
        self.db_path = db_path
        self.cause = cause
        super().__init__(f"Could not open the local store at '{db_path}': {cause}")


class MigrationFailure(StoreError):
    """A migration or seeding step failed and was rolled back. Retried on next launch."""

    def __init__(self, step: str, cause: Exception):
        self.step = step
        self.cause = cause
        super().__init__(f"Store step '{step}' failed and was rolled back: {cause}")
