import logging
from pathlib import Path
from typing import List, Optional, Union

from docreader.core.common.errors import PersistenceError
from docreader.core.config.settings import settings
from ..data.config_store import JsonConfigStore
from ..data.recent_store import FileRecentStore
from ..domain.interfaces import IRecentStore
from ..domain.models import AppConfig

logger = logging.getLogger(__name__)


class SettingsRecentStore(IRecentStore):
    """
    Recent store whose file location is looked up on every call.
    A missing home directory therefore fails inside load()/record(),
    where callers already handle PersistenceError.
    """

    def _store(self) -> FileRecentStore:
        return FileRecentStore(settings.RECENT_FILE, settings.RECENT_LIMIT_DEFAULT)

    def load(self, limit: Optional[int] = None) -> List[str]:
        return self._store().load(limit)

    def record(self, path: Union[str, Path]) -> None:
        self._store().record(path)

class PreferencesService:
    """
    Facade for the Preferences Feature.
    Nothing is cached between invocations, every call reads the files again.
    """

    def __init__(self):
        self.recent = SettingsRecentStore()

    def get_recent_paths(self, limit: Optional[int] = None) -> List[str]:
        """
        Returns up to `limit` recently opened paths, most recent first.
        A missing, zero or negative limit means the default of 20.
        An unreadable list is reported as empty.
        """
        try:
            return self.recent.load(limit)
        except PersistenceError as e:
            logger.warning(f"Recent list unavailable: {e}")
            return []

    def record_recent_path(self, path: Union[str, Path]) -> None:
        self.recent.record(path)

    def load_app_config(self) -> AppConfig:
        return JsonConfigStore(settings.CONFIG_FILE).load()

    def save_app_config(self, config: AppConfig) -> AppConfig:
        """
        Partial update: only the fields set on `config` are written,
        everything else keeps its persisted value.
        """
        return JsonConfigStore(settings.CONFIG_FILE).save(config)

# Singleton Instance for easy import
preferences = PreferencesService()
