import os
import signal
import threading
import time
from unittest.mock import MagicMock, patch

import psutil
import pytest
import requests

from conftest import posix_only, wait_until
from doclens.local.supervisor import (
    BinaryNotFound, SidecarState, SidecarSupervisor, SpawnFailure, StartupTimeout,
)
from doclens.local.supervisor import health
from doclens.local.supervisor.errors import HealthCheckFailure

SLEEPER = """
import time
while True:
    time.sleep(0.1)
"""

SIGTERM_IGNORER = """
import sys
import signal
import time
from pathlib import Path

signal.signal(signal.SIGTERM, signal.SIG_IGN)
Path(sys.argv[0] + ".ready").touch()
while True:
    time.sleep(0.1)
"""

EXIT_EARLY = """
import sys
sys.exit(3)
"""


def _healthy(url, timeout):
    return None


def _refused(url, timeout):
    raise HealthCheckFailure(url, "connection refused")


class TestUrlAndStatus:
    def test_get_url_uses_configured_host_and_port(self, sidecar_config):
        supervisor = SidecarSupervisor(sidecar_config(None, SIDECAR_HOST="127.0.0.1", SIDECAR_PORT=9123))
        assert supervisor.get_url() == "http://127.0.0.1:9123"
        assert supervisor.health_url == "http://127.0.0.1:9123/health"

    def test_status_before_start(self, sidecar_config):
        supervisor = SidecarSupervisor(sidecar_config(None))
        status = supervisor.get_status()
        assert status.running is False
        assert status.pid is None
        assert status.to_dict() == {"running": False, "url": "http://127.0.0.1:8765", "pid": None}

    def test_development_mode_assumes_external_server(self, sidecar_config):
        supervisor = SidecarSupervisor(sidecar_config(None, IS_PACKAGED=False))
        assert supervisor.is_external is True
        assert supervisor.get_url() == "http://127.0.0.1:8000"
        assert supervisor.get_status().running is True

        with patch("doclens.local.supervisor.process_utils.launch_process") as launch:
            supervisor.start()
            assert supervisor._monitor is None
            supervisor.stop()
        launch.assert_not_called()

    def test_is_running_requires_http_200(self, sidecar_config):
        supervisor = SidecarSupervisor(sidecar_config(None))
        ok, unavailable = MagicMock(status_code=200), MagicMock(status_code=503)
        with patch("doclens.local.supervisor.health.requests.get", side_effect=[ok, unavailable]):
            assert supervisor.is_running() is True
            assert supervisor.is_running() is False
        with patch("doclens.local.supervisor.health.requests.get",
                   side_effect=requests.exceptions.ConnectionError()):
            assert supervisor.is_running() is False


class TestStartFailures:
    def test_missing_packaged_binary(self, sidecar_config, tmp_path):
        supervisor = SidecarSupervisor(sidecar_config(None, RESOURCES_DIR=tmp_path / "resources"))
        with pytest.raises(BinaryNotFound) as exc_info:
            supervisor.start()

        searched = [str(p) for p in exc_info.value.candidates]
        assert len(searched) == 2
        assert any("app.asar.unpacked" in p for p in searched)
        assert supervisor.state == SidecarState.STOPPED
        assert supervisor.last_error is exc_info.value
        assert supervisor.get_status().running is False

    def test_missing_explicit_binary(self, sidecar_config, tmp_path):
        supervisor = SidecarSupervisor(sidecar_config(tmp_path / "nope"))
        with pytest.raises(BinaryNotFound):
            supervisor.start()

    @posix_only
    def test_exit_during_startup(self, sidecar_config, make_sidecar):
        supervisor = SidecarSupervisor(sidecar_config(make_sidecar(EXIT_EARLY)))
        with patch.object(health, "probe", _refused):
            with pytest.raises(SpawnFailure) as exc_info:
                supervisor.start()
        assert exc_info.value.exit_code == 3
        assert supervisor.pid is None
        assert supervisor.state == SidecarState.STOPPED

    @posix_only
    def test_startup_timeout_leaves_process_tracked(self, sidecar_config, make_sidecar):
        budget, interval = 0.5, 0.1
        supervisor = SidecarSupervisor(sidecar_config(
            make_sidecar(SLEEPER), SIDECAR_STARTUP_TIMEOUT=budget, SIDECAR_READY_RETRY_INTERVAL=interval,
        ))
        try:
            with patch.object(health, "probe", _refused):
                started = time.monotonic()
                with pytest.raises(StartupTimeout):
                    supervisor.start()
                elapsed = time.monotonic() - started

            assert budget <= elapsed <= budget + interval + 0.5
            assert supervisor.state == SidecarState.UNHEALTHY
            assert supervisor.pid is not None
        finally:
            supervisor.stop()
        assert supervisor.pid is None


@posix_only
class TestLifecycle:
    def test_start_and_stop(self, sidecar_config, make_sidecar):
        supervisor = SidecarSupervisor(sidecar_config(make_sidecar(SLEEPER)))
        with patch.object(health, "probe", _healthy):
            supervisor.start()
        pid = supervisor.pid
        try:
            assert pid is not None
            assert supervisor.state == SidecarState.HEALTHY
            assert supervisor.get_status().to_dict() == {
                "running": True, "url": "http://127.0.0.1:8765", "pid": pid,
            }
        finally:
            supervisor.stop()

        assert supervisor.pid is None
        assert supervisor.state == SidecarState.STOPPED
        assert not psutil.pid_exists(pid)

    def test_start_twice_keeps_one_process(self, sidecar_config, make_sidecar):
        supervisor = SidecarSupervisor(sidecar_config(make_sidecar(SLEEPER)))
        with patch.object(health, "probe", _healthy):
            supervisor.start()
            first = supervisor.pid
            supervisor.start()
        try:
            assert supervisor.pid == first
        finally:
            supervisor.stop()

    def test_stop_is_idempotent(self, sidecar_config, make_sidecar):
        supervisor = SidecarSupervisor(sidecar_config(make_sidecar(SLEEPER)))
        supervisor.stop()
        with patch.object(health, "probe", _healthy):
            supervisor.start()
        supervisor.stop()
        supervisor.stop()
        assert supervisor.get_status().running is False

    def test_start_after_crash_spawns_fresh_process(self, sidecar_config, make_sidecar):
        supervisor = SidecarSupervisor(sidecar_config(make_sidecar(SLEEPER)))
        with patch.object(health, "probe", _healthy):
            supervisor.start()
            crashed = supervisor.pid
            os.kill(crashed, signal.SIGKILL)
            assert wait_until(lambda: supervisor.pid is None)
            assert supervisor.state == SidecarState.STOPPED
            assert supervisor.get_status().running is False

            supervisor.start()
        try:
            assert supervisor.pid not in (None, crashed)
        finally:
            supervisor.stop()

    def test_stop_escalates_to_kill(self, sidecar_config, make_sidecar):
        grace = 0.5
        script = make_sidecar(SIGTERM_IGNORER)
        marker = script.with_name(script.name + ".ready")
        supervisor = SidecarSupervisor(sidecar_config(script, SIDECAR_STOP_GRACE_PERIOD=grace))

        def ready_once_handler_installed(url, timeout):
            if not marker.exists():
                raise HealthCheckFailure(url, "not ready")

        with patch.object(health, "probe", ready_once_handler_installed):
            supervisor.start()
        pid = supervisor.pid

        started = time.monotonic()
        supervisor.stop()
        elapsed = time.monotonic() - started

        assert grace <= elapsed <= grace + 2.0
        assert not psutil.pid_exists(pid)

    def test_restart(self, sidecar_config, make_sidecar):
        supervisor = SidecarSupervisor(sidecar_config(make_sidecar(SLEEPER)))
        with patch.object(health, "probe", _healthy):
            supervisor.start()
            first = supervisor.pid
            supervisor.restart()
        try:
            assert supervisor.pid not in (None, first)
            assert supervisor.state == SidecarState.HEALTHY
        finally:
            supervisor.stop()


class TestMonitoring:
    def test_failed_checks_reach_the_unhealthy_handler(self, sidecar_config):
        handler = MagicMock()
        supervisor = SidecarSupervisor(sidecar_config(None), on_unhealthy=handler)
        supervisor._popen = MagicMock(pid=1234)
        failure = HealthCheckFailure(supervisor.health_url, "status 500", status_code=500)

        supervisor._on_monitor_failure(1, failure)
        supervisor._on_monitor_failure(2, failure)

        assert supervisor.state == SidecarState.UNHEALTHY
        assert [c.args for c in handler.call_args_list] == [(supervisor, 1), (supervisor, 2)]

        supervisor._on_monitor_success()
        assert supervisor.state == SidecarState.HEALTHY

    def test_handler_errors_do_not_stop_monitoring(self, sidecar_config, caplog):
        handler = MagicMock(side_effect=[RuntimeError("boom"), None])
        supervisor = SidecarSupervisor(sidecar_config(None), on_unhealthy=handler)
        supervisor._popen = MagicMock(pid=1234)
        failure = HealthCheckFailure(supervisor.health_url, "timed out")

        supervisor._on_monitor_failure(1, failure)
        supervisor._on_monitor_failure(2, failure)

        assert handler.call_count == 2
        assert supervisor.state == SidecarState.UNHEALTHY
        assert "boom" in caplog.text
        assert supervisor._hook_thread is None


def _run_unhealthy_handler(supervisor):
    failure = HealthCheckFailure(supervisor.health_url, "status 500", status_code=500)
    worker = threading.Thread(target=supervisor._on_monitor_failure, args=(3, failure))
    worker.start()
    worker.join(timeout=10)
    assert not worker.is_alive()


@posix_only
class TestRestartFromHandler:
    def test_handler_restart_replaces_the_process(self, make_sidecar, sidecar_config):
        supervisor = SidecarSupervisor(
            sidecar_config(make_sidecar(SLEEPER)), on_unhealthy=lambda s, n: s.restart()
        )
        with patch.object(health, "probe", _healthy):
            supervisor.start()
            first = supervisor.pid
            try:
                _run_unhealthy_handler(supervisor)
                assert supervisor.pid is not None
                assert supervisor.pid != first
                assert not psutil.pid_exists(first)
            finally:
                supervisor.stop()
        assert supervisor.pid is None

    def test_handler_restart_after_stop_is_ignored(self, make_sidecar, sidecar_config):
        supervisor = SidecarSupervisor(
            sidecar_config(make_sidecar(SLEEPER)), on_unhealthy=lambda s, n: s.restart()
        )
        with patch.object(health, "probe", _healthy):
            supervisor.start()
            supervisor.stop()
            _run_unhealthy_handler(supervisor)

        assert supervisor.pid is None
        assert supervisor._monitor is None

    def test_explicit_start_after_stop_is_allowed(self, make_sidecar, sidecar_config):
        supervisor = SidecarSupervisor(sidecar_config(make_sidecar(SLEEPER)))
        with patch.object(health, "probe", _healthy):
            supervisor.start()
            supervisor.stop()
            supervisor.start()
            try:
                assert supervisor.pid is not None
            finally:
                supervisor.stop()
