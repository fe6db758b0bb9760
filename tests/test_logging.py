import logging

import pytest

from doclens.log.setup import MainFormatter, setup_logging


def _record(name, msg, level=logging.INFO):
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


def test_relayed_sidecar_lines_are_raw():
    assert MainFormatter().format(_record("proc.sidecar", "Uvicorn running")) == "[sidecar] Uvicorn running"


def test_application_records_carry_level_and_logger():
    line = MainFormatter().format(_record("doclens.app", "Application starting", logging.WARNING))
    assert "WARNING" in line
    assert "[doclens.app]" in line
    assert line.endswith("Application starting")


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_debug_to_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "app.log"
    setup_logging(logging.WARNING, log_file=log_file)

    logging.getLogger("doclens.test").debug("only in the file")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert "only in the file" in log_file.read_text(encoding="utf-8")
    assert restore_root_logger.handlers[0].level == logging.WARNING
    assert logging.getLogger("urllib3").level == logging.WARNING
