from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

from .models import AppConfig

class IRecentStore(ABC):
    """
    Contract for the most-recently-used list of opened paths.
    """
    @abstractmethod
    def load(self, limit: Optional[int] = None) -> List[str]:
        """Most recent first, deduplicated, at most `limit` entries."""
        pass

    @abstractmethod
    def record(self, path: Union[str, Path]) -> None:
        """Moves (or inserts) path to the front and persists the list."""
        pass

class IConfigStore(ABC):
    @abstractmethod
    def load(self) -> AppConfig:
        """Missing file yields defaults; a malformed file is an error."""
        pass

    @abstractmethod
    def save(self, partial: AppConfig) -> AppConfig:
        """
        Read-merge-write. Only fields set in `partial` are changed.
        Returns the merged config that was persisted.
        """
        pass
