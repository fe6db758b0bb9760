import sys
import logging
from pathlib import Path
from typing import Optional

from doclens.local.config import effective_settings as config

MAIN_FORMAT = '%(asctime)s - %(levelname)-8s - [%(name)s] - %(message)s'


class MainFormatter(logging.Formatter):
    """Formats application logs normally and sidecar output lines raw."""

    def __init__(self) -> None:
        super().__init__(MAIN_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        # Lines relayed from the sidecar's stdout/stderr ('proc.' loggers)
        # already carry the sidecar's own formatting.
        if record.name.startswith('proc.'):
            return f"[{record.name[len('proc.'):]}] {record.getMessage()}"
        return super().format(record)


def setup_logging(console_level: int = logging.INFO, log_file: Optional[Path] = None) -> None:
    """
    Configures the root logger for the application.
    This sets up a console handler and a file handler, clearing any
    previously configured handlers to prevent duplication.

    :param console_level: The logging level for the console output (e.g., logging.INFO).
    :param log_file: Where to write the full DEBUG log. Defaults to LOG_FILE_PATH.
    """
    root_logger = logging.getLogger()
    # Set root level to lowest to capture all messages for handler filtering
    root_logger.setLevel(logging.DEBUG)

    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    # --- Console Handler ---
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(MainFormatter())
    root_logger.addHandler(console_handler)

    # --- File Handler (all levels) ---
    log_file = Path(log_file or config.LOG_FILE_PATH)
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(MainFormatter())
        root_logger.addHandler(file_handler)
    except OSError as e:
        root_logger.error(f"Failed to initialize file logging at '{log_file}': {e}. Logging to file is disabled.")

    # Keep urllib3's per-probe connection chatter out of the debug log.
    logging.getLogger("urllib3").setLevel(logging.WARNING)
