import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

import doclens.settings as default_settings

log = logging.getLogger(__name__)


class MergedSettings:
    """
    Merges default settings with runtime overrides.

    Precedence:
    1. Base values from `settings.py`.
    2. Overrides from the `.env` file (handled by `python-dotenv` in settings.py).
    3. Overrides from `overrides.json` for settings in `MODIFIABLE_SETTINGS`.
    """

    def __init__(self, overrides_path: Optional[Path] = None) -> None:
        """
        Initializes the settings object by loading defaults and overrides.

        :param overrides_path: Alternative location of the overrides file.
        """
        self.OVERRIDES_JSON_PATH: Path = overrides_path or default_settings.OVERRIDES_JSON_PATH

        self._load_defaults()
        self._load_overrides()

    def _load_defaults(self) -> None:
        """Loads all uppercase attributes from the settings module as defaults."""
        for key in dir(default_settings):
            if key.isupper() and key != "OVERRIDES_JSON_PATH":
                setattr(self, key, getattr(default_settings, key))

    def _load_overrides(self) -> None:
        """
        Applies settings from `overrides.json`, limited to the keys listed
        in `MODIFIABLE_SETTINGS`.
        """
        if not self.OVERRIDES_JSON_PATH.exists():
            return

        try:
            with self.OVERRIDES_JSON_PATH.open('r') as f:
                overrides = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            log.error(f"Failed to load or parse overrides file '{self.OVERRIDES_JSON_PATH}': {e}")
            return

        if not isinstance(overrides, dict):
            log.error(f"Overrides file '{self.OVERRIDES_JSON_PATH}' does not contain an object. Ignoring.")
            return

        log.info(f"Applying Document Lens setting overrides from {self.OVERRIDES_JSON_PATH}")
        for key, value in overrides.items():
            if not hasattr(self, key):
                log.warning(f"Unknown setting '{key}' in overrides file. Ignoring.")
                continue
            if key not in self.MODIFIABLE_SETTINGS:
                log.warning(f"Setting '{key}' cannot be changed at runtime. Ignoring.")
                continue

            default_value = getattr(self, key)
            try:
                setattr(self, key, self._coerce(default_value, value, key))
            except (ValueError, TypeError) as e:
                log.error(f"Could not convert override '{key}'='{value}': {e}")
                continue
            log.debug(f"Setting override applied: {key} = {value!r}")

    @staticmethod
    def _coerce(default_value: Any, value: Any, key: str = "") -> Any:
        """
        Converts an override to the type of the default it replaces.
        Log levels are upper-cased and must name a known level.
        """
        if key == "LOG_LEVEL":
            level_name = str(value).upper()
            if not isinstance(logging.getLevelName(level_name), int):
                raise ValueError(f"Unknown log level '{value}'")
            return level_name
        if isinstance(default_value, Path):
            return Path(value)
        if isinstance(default_value, bool):
            return str(value).lower() in ('true', '1', 't', 'yes', 'y')
        if default_value is not None:
            return type(default_value)(value)
        return value

    def get(self, item: str, default: Any = None) -> Any:
        """Provides dictionary-like access to settings with a default value."""
        return getattr(self, item, default)

    def get_all_settings(self) -> Dict[str, Any]:
        """Returns a copy of every uppercase setting as a dictionary."""
        return {key: value for key, value in vars(self).items() if key.isupper()}

    def save_overrides(self, overrides_to_save: Dict[str, Any]) -> None:
        """
        Saves the provided settings to the overrides JSON file and applies them.
        Keys outside `MODIFIABLE_SETTINGS` are dropped.

        :param overrides_to_save: A dictionary of settings to persist.
        :raises ValueError: If a value cannot be converted to its setting's type.
        """
        coerced = {
            key: self._coerce(getattr(self, key), value, key)
            for key, value in overrides_to_save.items()
            if key in self.MODIFIABLE_SETTINGS
        }

        if not coerced:
            log.warning("Nothing to save: none of the given settings may be changed at runtime.")
            return

        try:
            self.OVERRIDES_JSON_PATH.parent.mkdir(parents=True, exist_ok=True)
            with self.OVERRIDES_JSON_PATH.open('w') as f:
                json.dump(coerced, f, indent=4, default=str)
            log.info(f"Saved {len(coerced)} setting override(s) to {self.OVERRIDES_JSON_PATH}")
        except IOError as e:
            log.error(f"Failed to write to overrides file '{self.OVERRIDES_JSON_PATH}': {e}")
            return

        for key, value in coerced.items():
            setattr(self, key, value)


# Process-wide default; components also accept explicit settings.
effective_settings = MergedSettings()
