import sys
import signal
import logging
import threading
from typing import Callable, Dict, List, Optional

import setproctitle

from doclens.app import Application
from doclens.local.config import effective_settings as config
from doclens.local.database import StoreDBManager, StoreInitializer, StoreOpenFailure
from doclens.local.supervisor import SidecarSupervisor
from doclens.log.setup import setup_logging

log = logging.getLogger("console")


def run_application(app: Optional[Application] = None) -> int:
    """
    Bootstraps the application and blocks until SIGINT/SIGTERM.

    Either signal during bootstrap aborts the startup. The sidecar is stopped
    and the store closed on every exit path.
    """
    setproctitle.setproctitle(config.PROCESS_TITLE)
    app = app or Application()
    stop_requested = threading.Event()

    def _interrupt_startup(signum, _frame) -> None:
        raise KeyboardInterrupt(signal.Signals(signum).name)

    def _request_stop(signum, _frame) -> None:
        log.info(f"Received signal {signal.Signals(signum).name}.")
        stop_requested.set()

    previous_handlers = {sig: signal.getsignal(sig) for sig in (signal.SIGINT, signal.SIGTERM)}
    try:
        signal.signal(signal.SIGINT, _interrupt_startup)
        signal.signal(signal.SIGTERM, _interrupt_startup)
        try:
            app.bootstrap()
        except StoreOpenFailure as e:
            log.critical(f"Cannot start: {e}")
            print(f"\nDocument Lens could not open its local store.\n  {e}\n"
                  f"Check that '{e.db_path.parent}' is writable and not full.", file=sys.stderr)
            return 1
        except KeyboardInterrupt as e:
            log.warning(f"Startup interrupted ({str(e) or 'SIGINT'}). Shutting down.")
            return 130

        signal.signal(signal.SIGINT, _request_stop)
        signal.signal(signal.SIGTERM, _request_stop)

        if app.offline:
            print("Running in offline mode: analysis features are unavailable.")
        print(f"Sidecar: {app.sidecar_status().to_dict()}")

        while not stop_requested.wait(1):
            pass
        return 0
    finally:
        signal.signal(signal.SIGINT, _request_stop)
        signal.signal(signal.SIGTERM, _request_stop)
        app.shutdown()
        for sig, handler in previous_handlers.items():
            signal.signal(sig, handler)


def display_status() -> int:
    """Probes the configured sidecar once and prints its status."""
    supervisor = SidecarSupervisor()
    reachable = supervisor.is_running()
    print(f"Sidecar URL: {supervisor.get_url()}")
    print(f"Mode:        {'external (development)' if supervisor.is_external else 'embedded'}")
    print(f"Reachable:   {'yes' if reachable else 'no'}")
    return 0 if reachable else 1


def init_store() -> int:
    """Runs the store bootstrap on its own and reports each step."""
    store = StoreDBManager(config.STORE_DB_PATH, timeout=config.STORE_CONNECT_TIMEOUT)
    try:
        report = StoreInitializer(store).initialize()
    except StoreOpenFailure as e:
        log.critical(str(e))
        return 1
    finally:
        store.close()

    for step in report.completed:
        print(f"  ok      {step}: {report.details.get(step)}")
    for step, reason in report.failed.items():
        print(f"  FAILED  {step}: {reason}")
    return 0 if report.ok else 2


def handle_config_command(args: List[str]) -> int:
    """Shows or changes modifiable settings. Usage: config [set KEY VALUE]."""
    if not args or args[0] == "show":
        print("\n--- Current Configuration ---")
        for key in sorted(config.MODIFIABLE_SETTINGS):
            print(f"  {key} = {config.get(key)}")
        print("-----------------------------\n")
        return 0

    if args[0] == "set" and len(args) == 3:
        key, value = args[1].upper(), args[2]
        if key not in config.MODIFIABLE_SETTINGS:
            log.error(f"Setting '{key}' is not modifiable.")
            return 1
        try:
            config.save_overrides({**{k: config.get(k) for k in config.MODIFIABLE_SETTINGS}, key: value})
        except (ValueError, TypeError) as e:
            log.error(f"Could not convert value '{value}' for key '{key}'. Error: {e}")
            return 1
        print(f"Setting '{key}' updated to '{config.get(key)}'. Restart to apply.")
        return 0

    print("Usage: config [show | set <KEY> <VALUE>]")
    return 1


def print_help() -> int:
    """Prints the help text for the console."""
    print("\nAvailable commands:")
    print("  run                    - Initialize the store, start the sidecar and run until interrupted.")
    print("  status                 - Probe the sidecar once and report whether it is reachable.")
    print("  init-store             - Create or migrate the local store and seed reference data.")
    print("  config [show|set K V]  - Show or change modifiable settings.")
    print("  help                   - Show this text.")
    print("\nAdd --verbose to any command for DEBUG console output.\n")
    return 0


def execute_command(command: str, args: List[str]) -> int:
    """
    Executes a single command.

    :param command: The main command string (e.g., 'run', 'status').
    :param args: A list of arguments for the command.
    :return: The process exit code.
    """
    log.debug(f"Executing command: {command}, args: {args}")
    command_map: Dict[str, Callable[[], int]] = {
        "run": run_application,
        "status": display_status,
        "init-store": init_store,
        "config": lambda: handle_config_command(args),
        "help": print_help,
    }
    if command not in command_map:
        log.info(f"Unknown command: '{command}'. Type 'help' for a list of commands.")
        return 2
    return command_map[command]()


def resolve_log_level(name: object) -> int:
    """Maps a level name such as 'debug' or 'WARNING' to its number. Unknown names give INFO."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def main() -> None:
    """The main entry point for the console application."""
    args = sys.argv[1:]
    verbose = "--verbose" in args
    if verbose:
        args.remove("--verbose")

    setup_logging(logging.DEBUG if verbose else resolve_log_level(config.LOG_LEVEL))

    command, command_args = (args[0].lower(), args[1:]) if args else ("run", [])
    sys.exit(execute_command(command, command_args))


if __name__ == "__main__":
    main()
