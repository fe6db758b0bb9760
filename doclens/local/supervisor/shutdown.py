import sys
import psutil
import logging
import threading

log = logging.getLogger(__name__)


def supports_graceful_signal() -> bool:
    """POSIX platforms accept SIGTERM; elsewhere stopping is always a kill."""
    return sys.platform != "win32"


def _terminate_process(proc: psutil.Process) -> None:
    """Sends SIGTERM on POSIX, or kills outright where signals are unsupported."""
    try:
        if supports_graceful_signal():
            log.debug(f"Sending SIGTERM to PID {proc.pid}")
            proc.terminate()
        else:
            log.debug(f"Killing PID {proc.pid} (no graceful signal on this platform)")
            proc.kill()
    except psutil.NoSuchProcess:
        log.debug(f"Process {proc.pid} no longer exists, skipping termination.")


def _forceful_kill(proc: psutil.Process) -> None:
    """Forcefully kills a process that did not terminate gracefully."""
    try:
        log.warning(f"Killing stubborn process PID {proc.pid}.")
        proc.kill()
    except psutil.NoSuchProcess:
        log.debug(f"Process {proc.pid} no longer exists, skipping forceful kill.")


def graceful_shutdown_sequence(proc: psutil.Process, exited: threading.Event, grace_period: float) -> bool:
    """
    Terminates a process, escalating to a kill once the grace period elapses.
    Returns only after `exited` confirms the process is gone.

    :param proc: The process to stop.
    :param exited: Set by the exit watcher once the process has been reaped.
    :param grace_period: Seconds to wait for a graceful exit.
    :return: True if the process exited gracefully, False if it had to be killed.
    """
    if exited.is_set():
        return True

    _terminate_process(proc)
    if exited.wait(grace_period):
        return True

    _forceful_kill(proc)
    while not exited.wait(grace_period):
        log.error(f"Process {proc.pid} still alive after SIGKILL. Waiting for exit...")
    return False
