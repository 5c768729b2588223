# File: docreader/core/config/settings.py

import os
from pathlib import Path
from typing import Optional

from docreader.core.common.errors import PersistenceError


def home_dir() -> Optional[Path]:
    """
    Resolves the user's home directory from the environment.
    Tries HOME, then USERPROFILE, then HOMEDRIVE + HOMEPATH (Windows).
    """
    for var in ("HOME", "USERPROFILE"):
        value = os.environ.get(var)
        if value:
            return Path(value)

    drive = os.environ.get("HOMEDRIVE")
    path = os.environ.get("HOMEPATH")
    if drive and path:
        return Path(drive + path)

    return None


class Settings:
    # --- Identity ---
    APP_PREFIX: str = "docreader"
    SCAN_PROGRESS_EVENT: str = "docreader_scan_progress"

    # --- Recent Paths ---
    RECENT_LIMIT_DEFAULT: int = 20

    # --- Scanner ---
    # Minimum gap between two "progress" events of the same scan
    SCAN_PROGRESS_INTERVAL_MS: int = int(os.getenv("DOCREADER_SCAN_PROGRESS_INTERVAL_MS", "120"))

    # --- Paths ---
    # Resolved on every access so tests (and the host) can redirect them via env vars.
    @property
    def DATA_DIR(self) -> Path:
        override = os.getenv("DOCREADER_DATA_DIR")
        if override:
            return Path(override)

        home = home_dir()
        if home is None:
            raise PersistenceError("Unable to determine the user home directory")
        return home / f".{self.APP_PREFIX}"

    @property
    def CONFIG_FILE(self) -> Path:
        return self.DATA_DIR / "config"

    @property
    def RECENT_FILE(self) -> Path:
        return self.DATA_DIR / "recent"

    def ensure_dirs(self):
        """Creates the data directory if it doesn't exist."""
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
