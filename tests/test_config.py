import json
from pathlib import Path

import pytest

from doclens.local.config import MergedSettings


@pytest.fixture
def overrides_path(tmp_path) -> Path:
    return tmp_path / "overrides.json"


def test_defaults_without_overrides_file(overrides_path):
    settings = MergedSettings(overrides_path)
    assert settings.SIDECAR_STARTUP_TIMEOUT == 30.0
    assert settings.SIDECAR_DEV_PORT == 8000
    assert settings.OVERRIDES_JSON_PATH == overrides_path


def test_overrides_apply_only_to_modifiable_settings(overrides_path):
    overrides_path.write_text(json.dumps({
        "SIDECAR_STARTUP_TIMEOUT": "12",
        "SIDECAR_PORT": "9001",
        "SIDECAR_DEV_PORT": 1234,
        "NOT_A_SETTING": 1,
    }))
    settings = MergedSettings(overrides_path)

    assert settings.SIDECAR_STARTUP_TIMEOUT == 12.0
    assert settings.SIDECAR_PORT == 9001
    assert settings.SIDECAR_DEV_PORT == 8000
    assert settings.get("NOT_A_SETTING") is None


def test_unconvertible_override_keeps_default(overrides_path):
    overrides_path.write_text(json.dumps({"SIDECAR_PROBE_TIMEOUT": "soon"}))
    assert MergedSettings(overrides_path).SIDECAR_PROBE_TIMEOUT == 5.0


def test_malformed_overrides_file_is_ignored(overrides_path):
    overrides_path.write_text("{not json")
    assert MergedSettings(overrides_path).SIDECAR_STARTUP_TIMEOUT == 30.0

    overrides_path.write_text(json.dumps(["SIDECAR_STARTUP_TIMEOUT", 1]))
    assert MergedSettings(overrides_path).SIDECAR_STARTUP_TIMEOUT == 30.0


def test_save_overrides_persists_and_applies(overrides_path):
    settings = MergedSettings(overrides_path)
    settings.save_overrides({"SIDECAR_STOP_GRACE_PERIOD": "2.5", "IS_PACKAGED": True})

    assert settings.SIDECAR_STOP_GRACE_PERIOD == 2.5
    assert json.loads(overrides_path.read_text()) == {"SIDECAR_STOP_GRACE_PERIOD": 2.5}
    assert MergedSettings(overrides_path).SIDECAR_STOP_GRACE_PERIOD == 2.5


def test_save_overrides_rejects_bad_values_before_writing(overrides_path):
    settings = MergedSettings(overrides_path)
    with pytest.raises(ValueError):
        settings.save_overrides({"SIDECAR_PORT": "not-a-port"})

    assert not overrides_path.exists()
    assert settings.SIDECAR_PORT != "not-a-port"


def test_log_level_override_is_normalized(overrides_path):
    settings = MergedSettings(overrides_path)
    settings.save_overrides({"LOG_LEVEL": "debug"})

    assert settings.LOG_LEVEL == "DEBUG"
    assert json.loads(overrides_path.read_text()) == {"LOG_LEVEL": "DEBUG"}


def test_lowercase_log_level_in_existing_file_is_upper_cased(overrides_path):
    overrides_path.write_text(json.dumps({"LOG_LEVEL": "warning"}))
    assert MergedSettings(overrides_path).LOG_LEVEL == "WARNING"


def test_unknown_log_level_is_rejected(overrides_path):
    settings = MergedSettings(overrides_path)
    with pytest.raises(ValueError):
        settings.save_overrides({"LOG_LEVEL": "chatty"})
    assert not overrides_path.exists()

    overrides_path.write_text(json.dumps({"LOG_LEVEL": "debugging"}))
    assert MergedSettings(overrides_path).LOG_LEVEL == settings.LOG_LEVEL
