import os
import sys
import stat
import logging
import threading
import subprocess
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from doclens.local.supervisor.errors import BinaryNotFound, SpawnFailure

log = logging.getLogger(__name__)


#* --- Executable Resolution ---
def get_executable_path(base_path: Path) -> Path:
    """Appends `.exe` on Windows."""
    return base_path.with_suffix(".exe") if sys.platform == "win32" else base_path

def get_candidate_paths(resources_dir: Path, binary_name: str, search_subdirs: List[str]) -> List[Path]:
    """Lists every install location the packaged sidecar may live in, in lookup order."""
    return [get_executable_path(resources_dir / subdir / binary_name) for subdir in search_subdirs]

def resolve_sidecar_path(is_packaged: bool, resources_dir: Path, binary_name: str,
                         search_subdirs: List[str]) -> Optional[Path]:
    """
    Locates the bundled sidecar executable.

    :param is_packaged: False in development, where the sidecar runs externally.
    :param resources_dir: The application's resources directory.
    :param binary_name: The executable's name without platform suffix.
    :param search_subdirs: Subdirectories of `resources_dir` to search, in order.
    :return: The executable path, or None when no embedded binary applies.
    :raises BinaryNotFound: If packaged and no candidate location holds the binary.
    """
    if not is_packaged:
        return None

    candidates = get_candidate_paths(resources_dir, binary_name, search_subdirs)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise BinaryNotFound(candidates)

def ensure_executable(path: Path) -> None:
    """Adds the executable bits on POSIX. Failures are logged, not raised."""
    if sys.platform == "win32":
        return
    try:
        mode = path.stat().st_mode
        path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as e:
        log.warning(f"Could not set executable permission on '{path}': {e}")


#* --- Process Creation ---
def _get_popen_creation_flags() -> Dict[str, Any]:
    """Keeps a console window from opening for the sidecar on Windows."""
    if sys.platform == "win32":
        return {"creationflags": subprocess.CREATE_NO_WINDOW}
    return {}

def get_process_args(executable: Path, host: str, port: int) -> List[str]:
    """Returns the command line for the sidecar."""
    return [str(executable), "--port", str(port), "--host", host]

def get_process_env(host: str, port: int, port_var: str, host_var: str) -> Dict[str, str]:
    """Inherits the parent's environment and mirrors host/port into it."""
    env = dict(os.environ)
    env[port_var] = str(port)
    env[host_var] = host
    return env

def _read_pipe(pipe, process_name: str, level: int, line_handler: Optional[Callable] = None):
    """Relays each non-empty line of a child pipe to the `proc.<name>` logger until EOF."""
    proc_logger = logging.getLogger(f"proc.{process_name}")
    try:
        for line_bytes in iter(pipe.readline, b""):
            line = line_bytes.decode("utf-8", errors="replace").strip()
            if not line:
                continue
            if line_handler:
                line_handler(line)
            else:
                proc_logger.log(level, line)
    except (OSError, ValueError) as e:
        proc_logger.debug(f"Pipe reader for {process_name} stream exited: {e}")
    finally:
        pipe.close()

def log_process_output(process: subprocess.Popen, name: str, line_handler: Optional[Callable] = None) -> None:
    """Drains stdout (INFO) and stderr (ERROR) on daemon threads."""
    if process.stdout:
        threading.Thread(target=_read_pipe, args=(process.stdout, name, logging.INFO, line_handler),
                         daemon=True, name=f"{name}-stdout").start()
    if process.stderr:
        threading.Thread(target=_read_pipe, args=(process.stderr, name, logging.ERROR),
                         daemon=True, name=f"{name}-stderr").start()

def launch_process(executable: Path, host: str, port: int, env: Dict[str, str],
                   name: str = "sidecar") -> subprocess.Popen:
    """
    Spawns the sidecar and attaches output loggers.

    :raises SpawnFailure: If the OS refuses to create the process.
    """
    args = get_process_args(executable, host, port)
    log.info(f"Starting process: {name} ({' '.join(args)})...")
    try:
        p = subprocess.Popen(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            stdin=subprocess.DEVNULL,
            cwd=str(executable.parent),
            env=env,
            **_get_popen_creation_flags(),
        )
    except OSError as e:
        log.critical(f"Failed to start process '{name}': {e}", exc_info=True)
        raise SpawnFailure(f"Could not spawn '{executable}': {e}") from e

    log_process_output(p, name)
    log.info(f"{name.capitalize()} started with PID: {p.pid}")
    return p

def watch_process(process: subprocess.Popen, on_exit: Callable[[subprocess.Popen, int], None],
                  name: str = "sidecar") -> threading.Thread:
    """
    Starts a daemon thread that waits for the process and reports its exit code.
    This is the single exit signal the supervisor relies on.
    """
    def _wait() -> None:
        returncode = process.wait()
        on_exit(process, returncode)

    watcher = threading.Thread(target=_wait, daemon=True, name=f"{name}-exit-watcher")
    watcher.start()
    return watcher
