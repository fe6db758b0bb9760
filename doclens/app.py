import time
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from doclens.local.config import effective_settings
from doclens.local.database import InitReport, StoreDBManager, StoreInitializer
from doclens.local.supervisor import SidecarError, SidecarStatus, SidecarSupervisor

log = logging.getLogger(__name__)


class Application:
    """
    Owns the two bootstrap components and their teardown.

    The store must come up or startup halts with `StoreOpenFailure`. The
    sidecar may fail to start, in which case the application runs in
    offline mode with sidecar-dependent features unavailable.
    """

    def __init__(self, store: Optional[StoreDBManager] = None,
                 supervisor: Optional[SidecarSupervisor] = None,
                 db_path: Optional[Path] = None,
                 sidecar_config: Optional[Dict[str, Any]] = None) -> None:
        self.store = store or StoreDBManager(db_path or effective_settings.STORE_DB_PATH,
                                             timeout=effective_settings.STORE_CONNECT_TIMEOUT)
        self.supervisor = supervisor or SidecarSupervisor(sidecar_config)
        self.init_report: Optional[InitReport] = None
        self.sidecar_error: Optional[SidecarError] = None
        self.start_time: Optional[float] = None

    @property
    def offline(self) -> bool:
        """True when the sidecar failed to start."""
        return self.sidecar_error is not None

    def bootstrap(self) -> "Application":
        """
        Initializes the store, then starts the sidecar.

        :raises StoreOpenFailure: If the store cannot be opened.
        """
        log.info("=" * 20 + " Application Starting " + "=" * 20)
        self.start_time = time.time()

        self.init_report = StoreInitializer(self.store).initialize()

        try:
            self.supervisor.start()
            self.sidecar_error = None
        except SidecarError as e:
            self.sidecar_error = e
            log.warning(f"Sidecar unavailable, continuing in offline mode: {e}")

        log.info(f"Application started in {time.time() - self.start_time:.2f} seconds"
                 f"{' (offline mode)' if self.offline else ''}.")
        return self

    def sidecar_status(self) -> SidecarStatus:
        return self.supervisor.get_status()

    def shutdown(self) -> None:
        """Stops the sidecar, then closes the store. Safe to call more than once."""
        log.info("Application shutting down...")
        self.supervisor.stop()
        self.store.close()
        if self.start_time:
            runtime = time.strftime('%H:%M:%S', time.gmtime(time.time() - self.start_time))
            log.info(f"Application stop sequence completed. Total runtime: {runtime}")
        else:
            log.info("Application stop sequence completed.")
