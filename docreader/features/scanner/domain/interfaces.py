from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, List, Optional, Union

from docreader.core.common.enums import FileCategory
from .models import FileEntry, ScanProgress

# emit(event_name, payload). Delivery is best-effort.
EmitSink = Callable[[str, ScanProgress], None]

# Stand-in for the native file dialog: returns the chosen path or None on cancel.
PathPicker = Callable[[], Optional[Path]]


class IFileClassifier(ABC):
    """
    Contract for mapping a file name to a viewer category.
    Must not touch the filesystem.
    """
    @abstractmethod
    def classify(self, path: Union[str, Path]) -> FileCategory:
        """Returns FileCategory.NONE for unsupported files."""
        pass


class IDirectoryScanner(ABC):
    """
    Contract for walking a directory tree and collecting previewable files.
    """
    @abstractmethod
    def scan(self,
             root: Path,
             scan_id: Optional[str] = None,
             emit: Optional[EmitSink] = None) -> List[FileEntry]:
        """
        Walks the tree below root and returns matched files sorted by virtual path.

        Args:
            root: Canonical absolute directory to scan.
            scan_id: Token copied into every progress event.
            emit: Sink receiving start/progress/done events.
        """
        pass
