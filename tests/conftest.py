import sys
import time
import textwrap
from pathlib import Path
from typing import Callable

import pytest

from doclens.local.database import StoreDBManager

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="uses a shebang script as the sidecar binary")


@pytest.fixture
def store(tmp_path):
    manager = StoreDBManager(tmp_path / "data" / "store.db", timeout=2)
    yield manager
    manager.close()


@pytest.fixture
def make_sidecar(tmp_path) -> Callable[[str], Path]:
    """Writes an executable Python script that stands in for the sidecar binary."""

    def _make(body: str, name: str = "document-lens-api") -> Path:
        script = tmp_path / "bin" / name
        script.parent.mkdir(parents=True, exist_ok=True)
        script.write_text(f"#!{sys.executable}\n" + textwrap.dedent(body))
        script.chmod(0o755)
        return script

    return _make


@pytest.fixture
def sidecar_config():
    """Settings that make the supervisor spawn a given executable with short timeouts."""

    def _config(executable, **overrides):
        config = {
            "IS_PACKAGED": True,
            "SIDECAR_EXECUTABLE": str(executable) if executable else None,
            "SIDECAR_HOST": "127.0.0.1",
            "SIDECAR_PORT": 8765,
            "SIDECAR_STARTUP_TIMEOUT": 5.0,
            "SIDECAR_STARTUP_GRACE_DELAY": 0.05,
            "SIDECAR_READY_RETRY_INTERVAL": 0.05,
            "SIDECAR_PROBE_TIMEOUT": 0.2,
            "SIDECAR_HEALTH_CHECK_INTERVAL": 60.0,
            "SIDECAR_STOP_GRACE_PERIOD": 1.0,
        }
        config.update(overrides)
        return config

    return _config


def wait_until(predicate: Callable[[], bool], timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return predicate()
