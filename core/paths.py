"""
core/paths.py — TRANSPORTDESK
==============================
Single source of truth for every filesystem location the application uses.

  - BASE_DIR / config_path() → files shipped with the project (read-only)
  - get_user_data_dir()      → writable user data
      - Windows   : %APPDATA%/TRANSPORTDESK/
      - Linux/Mac : ~/.local/share/TRANSPORTDESK/
    The directory can be moved with TRANSPORTDESK_HOME.

Usage:
    from core.paths import get_user_data_dir, logs_path

    db_file = get_user_data_dir() / "transportdesk.db"
"""

import os
import sys
from pathlib import Path

from version import APP_NAME


# Project root (core/paths.py → one level up)
BASE_DIR = Path(__file__).resolve().parent.parent


def config_path(filename: str = "") -> Path:
    """Path of the config directory, or of a file inside it."""
    p = BASE_DIR / "config"
    return p / filename if filename else p


def get_user_data_dir() -> Path:
    """
    Return the writable user data directory, creating it if needed.
    """
    override = os.getenv("TRANSPORTDESK_HOME")
    if override:
        base_dir = Path(override).expanduser()
        base_dir.mkdir(parents=True, exist_ok=True)
        return base_dir

    if sys.platform == "win32":
        appdata = os.getenv("APPDATA")
        if not appdata:
            appdata = str(Path.home() / "AppData" / "Roaming")
        base = Path(appdata)
    else:
        base = Path.home() / ".local" / "share"

    user_dir = base / APP_NAME
    user_dir.mkdir(parents=True, exist_ok=True)
    return user_dir


def logs_path(filename: str = "") -> Path:
    """Logs directory inside the user data dir."""
    p = get_user_data_dir() / "logs"
    p.mkdir(parents=True, exist_ok=True)
    return p / filename if filename else p


def exports_path(filename: str = "") -> Path:
    """Spreadsheet exports directory inside the user data dir."""
    p = get_user_data_dir() / "exports"
    p.mkdir(parents=True, exist_ok=True)
    return p / filename if filename else p


def default_db_path() -> Path:
    """SQLite file used when no database URL is configured."""
    return get_user_data_dir() / "transportdesk.db"
