"""
This module contains the configuration settings for the Document Lens desktop core.
It defines paths, sidecar supervision parameters, and store locations.
It is used throughout the application to ensure consistent settings and paths.
"""

import os
import sys
import pathlib
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv(override=True)


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ('true', '1', 't', 'yes', 'y')


#* --- Core Paths ---
BASE_DIR = pathlib.Path(__file__).resolve().parent.parent  # Project Root
APP_DATA_DIR = pathlib.Path(os.getenv("DOCUMENT_LENS_DATA_DIR", str(pathlib.Path.home() / ".document-lens")))
LOGS_DIR = APP_DATA_DIR / "logs"

#* --- Packaging ---
# A frozen interpreter (PyInstaller) always counts as packaged.
IS_PACKAGED = bool(getattr(sys, "frozen", False)) or _env_flag("DOCUMENT_LENS_PACKAGED")

if getattr(sys, "frozen", False):
    RESOURCES_DIR = pathlib.Path(getattr(sys, "_MEIPASS", BASE_DIR))
else:
    RESOURCES_DIR = pathlib.Path(os.getenv("DOCUMENT_LENS_RESOURCES_DIR", str(BASE_DIR / "resources")))

#* --- Application File Paths ---
STORE_DB_PATH = APP_DATA_DIR / "document-lens.db"
LOG_FILE_PATH = LOGS_DIR / "document-lens.log"
OVERRIDES_JSON_PATH = APP_DATA_DIR / "overrides.json"

#* --- Sidecar Process ---
SIDECAR_BINARY_NAME = "document-lens-api"
SIDECAR_SEARCH_SUBDIRS = ["backend", "app.asar.unpacked/backend"]
SIDECAR_HOST = os.getenv("DOCUMENT_LENS_HOST", "127.0.0.1")
SIDECAR_PORT = int(os.getenv("DOCUMENT_LENS_PORT", "8765"))
SIDECAR_DEV_PORT = 8000
SIDECAR_HEALTH_PATH = "/health"
SIDECAR_PORT_ENV_VAR = "DOCUMENT_LENS_PORT"
SIDECAR_HOST_ENV_VAR = "DOCUMENT_LENS_HOST"
# Explicit sidecar executable, e.g. a local build. Skips the packaged lookup.
SIDECAR_EXECUTABLE = os.getenv("DOCUMENT_LENS_SIDECAR_PATH") or None
PROCESS_TITLE = "Document Lens - Main"

#* --- Modifiable Settings ---
# Only these keys may be changed at runtime through overrides.json.
MODIFIABLE_SETTINGS = {
    # Sidecar
    "SIDECAR_PORT", "SIDECAR_STARTUP_TIMEOUT", "SIDECAR_STARTUP_GRACE_DELAY",
    "SIDECAR_READY_RETRY_INTERVAL", "SIDECAR_PROBE_TIMEOUT",
    "SIDECAR_HEALTH_CHECK_INTERVAL", "SIDECAR_STOP_GRACE_PERIOD",
    # Logging
    "LOG_LEVEL",
}

#* --- Default Values for Modifiable Settings ---
SIDECAR_STARTUP_TIMEOUT = 30.0
SIDECAR_STARTUP_GRACE_DELAY = 1.0
SIDECAR_READY_RETRY_INTERVAL = 0.5
SIDECAR_PROBE_TIMEOUT = 5.0
SIDECAR_HEALTH_CHECK_INTERVAL = 30.0
SIDECAR_STOP_GRACE_PERIOD = 5.0
LOG_LEVEL = os.getenv("DOCUMENT_LENS_LOG_LEVEL", "INFO").upper()

#* --- Store Defaults ---
STORE_CONNECT_TIMEOUT = 10
DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_THEME = "system"
