import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from docreader.core.common.errors import PersistenceError
from docreader.core.config.settings import settings
from ..domain.interfaces import IRecentStore
from .atomic_file import atomic_write_text, read_text_or_none

logger = logging.getLogger(__name__)


def sanitize_entry(value: str) -> Optional[str]:
    """
    Trims a recent-list entry and strips embedded line breaks.
    Returns None for entries that end up blank.
    """
    value = value.strip()
    if not value:
        return None
    value = value.replace("\n", "").replace("\r", "").strip()
    return value or None


def lossy_text(path: Union[str, Path]) -> str:
    """
    Path as storable UTF-8 text.
    Bytes that are not valid UTF-8 become U+FFFD.
    """
    return os.fsencode(path).decode("utf-8", "replace")


def dedupe(entries: List[str]) -> List[str]:
    """Drops repeats, first occurrence wins."""
    seen = set()
    unique = []
    for entry in entries:
        if entry in seen:
            continue
        seen.add(entry)
        unique.append(entry)
    return unique


class FileRecentStore(IRecentStore):
    """
    Newline-delimited list of absolute paths, most recent first.
    Holds nothing but the file location, every call goes to disk.
    """

    def __init__(self, path: Path, max_entries: int = settings.RECENT_LIMIT_DEFAULT):
        self.path = path
        self.max_entries = max_entries

    def load(self, limit: Optional[int] = None) -> List[str]:
        if limit is None or limit <= 0:
            limit = self.max_entries

        return self._load_all()[:limit]

    def record(self, path: Union[str, Path]) -> None:
        value = sanitize_entry(lossy_text(path))
        if value is None:
            return

        try:
            entries = self._load_all()
        except PersistenceError as e:
            logger.warning(f"Recent list unreadable, starting fresh: {e}")
            entries = []

        entries = [existing for existing in entries if existing != value]
        entries.insert(0, value)
        self.save(entries[:self.max_entries])

    def save(self, entries: List[str]) -> None:
        content = "".join(f"{entry}\n" for entry in entries)
        atomic_write_text(self.path, content)

    def _load_all(self) -> List[str]:
        content = read_text_or_none(self.path)
        if content is None:
            return []

        # Only "\n" separates entries, a stray "\r" is stripped by sanitize_entry
        entries = []
        for line in content.split("\n"):
            entry = sanitize_entry(line)
            if entry is not None:
                entries.append(entry)
        return dedupe(entries)
