import logging
import os
from pathlib import Path
from typing import Optional

from docreader.core.common.errors import PersistenceError

logger = logging.getLogger(__name__)


def temp_path_for(path: Path) -> Path:
    """Sibling scratch file used while writing: config -> config.tmp"""
    return path.with_name(f"{path.name}.tmp")


def read_text_or_none(path: Path) -> Optional[str]:
    """
    Reads a UTF-8 state file.
    Returns None when the file does not exist, raises PersistenceError for anything else.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise PersistenceError(f"Failed to read {path}: {e}") from e


def atomic_write_text(path: Path, content: str) -> None:
    """
    Writes content so readers never observe a partial file.

    1. Write everything to a sibling temp file.
    2. os.replace() it over the destination.
    3. If that fails, remove the destination and replace once more.
    """
    parent = path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PersistenceError(f"Failed to create directory {parent}: {e}") from e

    tmp_path = temp_path_for(path)
    try:
        # newline="" keeps "\n" terminators on every platform
        with open(tmp_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except (OSError, UnicodeError) as e:
        _discard(tmp_path)
        raise PersistenceError(f"Failed to write {tmp_path}: {e}") from e

    try:
        os.replace(tmp_path, path)
        return
    except OSError as e:
        logger.debug(f"Replace of {path} failed ({e}), removing destination and retrying")

    try:
        path.unlink()
    except OSError as e:
        logger.debug(f"Could not remove {path} before retry: {e}")

    try:
        os.replace(tmp_path, path)
    except OSError as e:
        raise PersistenceError(f"Failed to replace {path}: {e}") from e


def _discard(tmp_path: Path) -> None:
    try:
        tmp_path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.debug(f"Could not remove {tmp_path}: {e}")
