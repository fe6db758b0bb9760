import psutil
import logging
import threading
import subprocess
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from doclens.local.config import effective_settings
from doclens.local.supervisor import process_utils
from doclens.local.supervisor.errors import (
    BinaryNotFound, HealthCheckFailure, SidecarError, SpawnFailure, StartupTimeout,
)
from doclens.local.supervisor.health import HealthMonitor, check_health, wait_for_ready
from doclens.local.supervisor.shutdown import graceful_shutdown_sequence
from doclens.local.supervisor.status import SidecarState, SidecarStatus

log = logging.getLogger(__name__)

SIDECAR_NAME = "sidecar"


class SidecarSupervisor:
    """
    Starts, observes and stops the bundled analysis server.

    At most one sidecar process is tracked at a time. The OS process is owned
    exclusively by this object; callers only ever see `SidecarStatus` snapshots.
    In development (unpackaged, no explicit executable) nothing is spawned and
    an externally run server on the development port is assumed.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 on_unhealthy: Optional[Callable[["SidecarSupervisor", int], None]] = None) -> None:
        """
        Initializes the supervisor state.

        :param config: Setting overrides, merged over the effective settings.
        :param on_unhealthy: Called with the consecutive-failure count after each
            failed monitoring probe. This is the hook for a restart policy;
            without it monitoring is passive.
        """
        self.config: Dict[str, Any] = {**effective_settings.get_all_settings(), **(config or {})}
        self.on_unhealthy = on_unhealthy

        explicit = self.config.get("SIDECAR_EXECUTABLE")
        self.explicit_executable: Optional[Path] = Path(explicit) if explicit else None
        self.is_external = not self.config["IS_PACKAGED"] and self.explicit_executable is None

        self.host: str = self.config["SIDECAR_HOST"]
        self.port: int = int(self.config["SIDECAR_DEV_PORT"] if self.is_external else self.config["SIDECAR_PORT"])

        self.last_error: Optional[SidecarError] = None
        self._lock = threading.RLock()
        self._popen: Optional[subprocess.Popen] = None
        self._proc: Optional[psutil.Process] = None
        self._exited: Optional[threading.Event] = None
        self._stopping = False
        self._closed = False
        self._hook_thread: Optional[threading.Thread] = None
        self._state = SidecarState.UNKNOWN
        self._monitor: Optional[HealthMonitor] = None

    #* --- Read-only views ---
    @property
    def state(self) -> SidecarState:
        with self._lock:
            return self._state

    @property
    def pid(self) -> Optional[int]:
        with self._lock:
            return self._popen.pid if self._popen is not None else None

    @property
    def health_url(self) -> str:
        return self.get_url() + self.config["SIDECAR_HEALTH_PATH"]

    def get_url(self) -> str:
        """Base URL of the sidecar. Never performs I/O."""
        return f"http://{self.host}:{self.port}"

    def get_status(self) -> SidecarStatus:
        """
        Cheap snapshot for the UI. No I/O. An external development server is
        reported as running without checking.
        """
        with self._lock:
            running = self.is_external or self._popen is not None
            return SidecarStatus(running=running, url=self.get_url(), pid=self.pid)

    def is_running(self) -> bool:
        """Authoritative check: a single live probe, True only on HTTP 200."""
        return check_health(self.health_url, self.config["SIDECAR_PROBE_TIMEOUT"])

    #* --- Lifecycle ---
    def start(self) -> None:
        """
        Spawns the sidecar and blocks until it reports healthy.

        Starting while a process is tracked is a no-op. On `StartupTimeout` the
        process is left running and tracked as unhealthy; call `stop()` to
        reclaim it.

        :raises BinaryNotFound: Packaged binary missing from every location.
        :raises SpawnFailure: The process could not be created or exited early.
        :raises StartupTimeout: Readiness not observed within the budget.
        """
        with self._lock:
            if self._closed and threading.current_thread() is self._hook_thread:
                log.info("Supervisor was stopped. Ignoring start from the unhealthy-sidecar handler.")
                return
            self._closed = False

            if self._popen is not None:
                log.warning(f"Sidecar already running (PID {self._popen.pid}). Ignoring start request.")
                return

            if self.is_external:
                log.info(f"Development mode: assuming sidecar is running externally at {self.get_url()}")
                return

            try:
                executable = self._resolve_executable()
                process_utils.ensure_executable(executable)
                popen = process_utils.launch_process(
                    executable, self.host, self.port,
                    env=process_utils.get_process_env(
                        self.host, self.port,
                        self.config["SIDECAR_PORT_ENV_VAR"], self.config["SIDECAR_HOST_ENV_VAR"],
                    ),
                    name=SIDECAR_NAME,
                )
            except SidecarError as e:
                self._state = SidecarState.STOPPED
                self.last_error = e
                log.error(f"Sidecar could not be started: {e}")
                raise

            exited = threading.Event()
            self._popen = popen
            self._exited = exited
            self._stopping = False
            self._state = SidecarState.STARTING
            try:
                self._proc = psutil.Process(popen.pid)
            except psutil.NoSuchProcess:
                self._proc = None
            process_utils.watch_process(
                popen, lambda p, code: self._on_process_exit(p, code, exited), name=SIDECAR_NAME
            )

        try:
            ready = wait_for_ready(
                self.health_url,
                timeout=self.config["SIDECAR_STARTUP_TIMEOUT"],
                grace_delay=self.config["SIDECAR_STARTUP_GRACE_DELAY"],
                retry_interval=self.config["SIDECAR_READY_RETRY_INTERVAL"],
                probe_timeout=self.config["SIDECAR_PROBE_TIMEOUT"],
                abort_event=exited,
            )
        except StartupTimeout as e:
            with self._lock:
                if self._popen is popen:
                    self._state = SidecarState.UNHEALTHY
            self.last_error = e
            log.error(f"{e} The process (PID {popen.pid}) is left running.")
            raise

        if not ready:
            error = SpawnFailure(
                f"Sidecar exited during startup with code {popen.returncode}.", exit_code=popen.returncode
            )
            self.last_error = error
            log.error(str(error))
            raise error

        with self._lock:
            if self._popen is popen:
                self._state = SidecarState.HEALTHY
        self.last_error = None
        log.info(f"Sidecar is up at {self.get_url()} (PID {popen.pid}).")
        self._start_monitor()

    def stop(self) -> None:
        """
        Stops monitoring and the sidecar process. Idempotent.

        Sends a graceful termination, escalates to a kill after the grace
        period, and returns only once the process has exited. A restart
        attempted afterwards by the unhealthy-sidecar handler is ignored.
        """
        with self._lock:
            self._closed = True
        self._halt()

    def restart(self) -> None:
        """Stops the sidecar if needed and starts a fresh one."""
        self._halt()
        self.start()

    #* --- Internals ---
    def _halt(self) -> None:
        self._stop_monitor()

        with self._lock:
            popen, proc, exited = self._popen, self._proc, self._exited
            if popen is None or exited is None:
                log.debug("No sidecar process tracked. Nothing to stop.")
                return
            self._stopping = True

        log.info(f"Stopping sidecar (PID {popen.pid})...")
        grace_period = self.config["SIDECAR_STOP_GRACE_PERIOD"]
        if proc is not None:
            graceful = graceful_shutdown_sequence(proc, exited, grace_period)
        else:
            exited.wait()
            graceful = True

        if graceful:
            log.info("Sidecar stopped.")
        else:
            log.warning(f"Sidecar did not exit within {grace_period:.1f}s and was killed.")

    def _resolve_executable(self) -> Path:
        if self.explicit_executable is not None:
            if not self.explicit_executable.is_file():
                raise BinaryNotFound([self.explicit_executable])
            return self.explicit_executable
        path = process_utils.resolve_sidecar_path(
            True,
            Path(self.config["RESOURCES_DIR"]),
            self.config["SIDECAR_BINARY_NAME"],
            self.config["SIDECAR_SEARCH_SUBDIRS"],
        )
        log.info(f"Resolved sidecar executable: {path}")
        return path

    def _on_process_exit(self, popen: subprocess.Popen, returncode: int, exited: threading.Event) -> None:
        """Exit watcher callback. Clears the handle, then releases waiters."""
        with self._lock:
            expected = self._stopping
            if self._popen is popen:
                self._popen = None
                self._proc = None
                self._exited = None
                self._stopping = False
                self._state = SidecarState.STOPPED

        if expected:
            log.info(f"Sidecar process exited with code {returncode}.")
        else:
            log.warning(f"Sidecar process exited unexpectedly with code {returncode}.")
        exited.set()

    def _start_monitor(self) -> None:
        if self._closed or (self._monitor is not None and self._monitor.is_active):
            return
        self._monitor = HealthMonitor(
            self.health_url,
            interval=self.config["SIDECAR_HEALTH_CHECK_INTERVAL"],
            probe_timeout=self.config["SIDECAR_PROBE_TIMEOUT"],
            on_success=self._on_monitor_success,
            on_failure=self._on_monitor_failure,
        )
        self._monitor.start()

    def _stop_monitor(self) -> None:
        monitor, self._monitor = self._monitor, None
        if monitor is not None:
            monitor.stop()

    def _on_monitor_success(self) -> None:
        with self._lock:
            if self._popen is not None:
                self._state = SidecarState.HEALTHY

    def _on_monitor_failure(self, consecutive_failures: int, error: HealthCheckFailure) -> None:
        with self._lock:
            if self._popen is not None:
                self._state = SidecarState.UNHEALTHY
        if not self.on_unhealthy:
            return
        self._hook_thread = threading.current_thread()
        try:
            self.on_unhealthy(self, consecutive_failures)
        except SidecarError as e:
            self.last_error = e
            log.error(f"Unhealthy-sidecar handler failed: {e}")
        except Exception as e:
            log.error(f"Unhealthy-sidecar handler raised an unexpected error: {e}", exc_info=True)
        finally:
            self._hook_thread = None
