import time
import logging
import threading
from typing import Callable, Optional

import requests

from doclens.local.supervisor.errors import HealthCheckFailure, StartupTimeout

log = logging.getLogger(__name__)

# Floor for a probe's own timeout when the startup budget is nearly spent.
MIN_PROBE_TIMEOUT = 0.05


def probe(url: str, timeout: float) -> None:
    """
    Issues a single liveness probe.

    :param url: The full health endpoint URL.
    :param timeout: Timeout for this request alone.
    :raises HealthCheckFailure: On any non-200 status, transport error or timeout.
    """
    try:
        response = requests.get(url, timeout=timeout)
    except requests.exceptions.Timeout as e:
        raise HealthCheckFailure(url, f"timed out after {timeout:.2f}s") from e
    except requests.exceptions.RequestException as e:
        raise HealthCheckFailure(url, str(e)) from e

    if response.status_code != 200:
        raise HealthCheckFailure(url, f"status {response.status_code}", status_code=response.status_code)


def check_health(url: str, timeout: float) -> bool:
    """Returns True only on a definitive HTTP 200."""
    try:
        probe(url, timeout)
        return True
    except HealthCheckFailure as e:
        log.debug(f"{e}")
        return False


def wait_for_ready(url: str, timeout: float, grace_delay: float, retry_interval: float,
                   probe_timeout: float, abort_event: threading.Event) -> bool:
    """
    Blocks until the endpoint reports healthy, the budget runs out, or
    `abort_event` is set (the process exited).

    The first probe fires after `grace_delay`; later ones every `retry_interval`.
    Each probe is bounded by `probe_timeout` and by what is left of the budget.

    :return: True once ready, False if aborted.
    :raises StartupTimeout: If readiness was not observed within `timeout`.
    """
    deadline = time.monotonic() + timeout
    log.info(f"Waiting for sidecar at {url} (budget {timeout:.1f}s)...")

    if abort_event.wait(min(grace_delay, timeout)):
        return False

    attempt = 0
    while True:
        attempt += 1
        remaining = deadline - time.monotonic()
        try:
            probe(url, max(min(probe_timeout, remaining), MIN_PROBE_TIMEOUT))
            log.info(f"Sidecar is ready after {attempt} probe(s).")
            return True
        except HealthCheckFailure as e:
            log.debug(f"Readiness probe #{attempt} not ready yet: {e.reason}")

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise StartupTimeout(timeout, url)
        if abort_event.wait(min(retry_interval, remaining)):
            return False


class HealthMonitor:
    """
    Polls the sidecar on a fixed interval from a daemon thread.

    Probes run one at a time. Failures are logged and reported through
    `on_failure`; the monitor itself takes no corrective action.
    """

    def __init__(self, url: str, interval: float, probe_timeout: float,
                 on_success: Optional[Callable[[], None]] = None,
                 on_failure: Optional[Callable[[int, HealthCheckFailure], None]] = None):
        self.url = url
        self.interval = interval
        self.probe_timeout = probe_timeout
        self.on_success = on_success
        self.on_failure = on_failure
        self.consecutive_failures = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_active(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_active:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, daemon=True, name="SidecarHealthMonitor")
        self._thread.start()
        log.debug(f"Health monitor started (every {self.interval:.1f}s).")

    def stop(self) -> None:
        self._stop_event.set()
        thread, self._thread = self._thread, None
        if thread and thread is not threading.current_thread():
            thread.join(timeout=self.probe_timeout + 1)
        log.debug("Health monitor stopped.")

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval):
            self.tick()

    def tick(self) -> bool:
        """Runs one probe and dispatches the result. Returns True if healthy."""
        try:
            probe(self.url, self.probe_timeout)
        except HealthCheckFailure as e:
            self.consecutive_failures += 1
            log.warning(f"Sidecar health check failed ({self.consecutive_failures} in a row): {e.reason}")
            if self.on_failure:
                self.on_failure(self.consecutive_failures, e)
            return False

        if self.consecutive_failures:
            log.info(f"Sidecar healthy again after {self.consecutive_failures} failed check(s).")
        self.consecutive_failures = 0
        if self.on_success:
            self.on_success()
        return True
