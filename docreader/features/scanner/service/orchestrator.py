import logging
from pathlib import Path
from typing import Optional

from docreader.core.common.errors import (
    NotAFileOrFolderError,
    NotAFolderError,
    PathAccessError,
    PersistenceError,
    UnsupportedFileTypeError,
)
from docreader.features.preferences.domain.interfaces import IRecentStore

from ..data.classifier import ExtensionClassifier
from ..data.directory_walker import StackDirectoryScanner
from ..data.path_normalizer import normalize_file_url
from ..domain.interfaces import EmitSink, IDirectoryScanner, IFileClassifier
from ..domain.models import FileEntry, ScanRequest, ScanResult

logger = logging.getLogger(__name__)


def display_label(path: Path) -> str:
    """Final path segment, or the whole path for a filesystem root."""
    return path.name or str(path)


class ScanOrchestrator:
    """
    Turns whatever the user selected into a ScanResult.
    Normalizes and canonicalizes the input, then either walks a folder
    or wraps a single file, and remembers the path as recently opened.
    """

    def __init__(self,
                 recent: IRecentStore,
                 scanner: Optional[IDirectoryScanner] = None,
                 classifier: Optional[IFileClassifier] = None):
        self.recent = recent
        self.classifier = classifier or ExtensionClassifier()
        self.scanner = scanner or StackDirectoryScanner(classifier=self.classifier)

    def resolve_and_scan(self,
                         request: ScanRequest,
                         emit: Optional[EmitSink] = None) -> Optional[ScanResult]:
        """
        Returns None when nothing was selected (blank input).

        Raises:
            PathAccessError: the path cannot be canonicalized.
            UnsupportedFileTypeError: a single file with an unknown extension.
            NotAFileOrFolderError: the target is a socket, device, etc.
        """
        raw = request.input_path.strip()
        if not raw:
            return None

        normalized = normalize_file_url(raw)
        try:
            abs_path = Path(normalized).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise PathAccessError(f"Path does not exist or cannot be accessed: {normalized} ({e})") from e

        return self._open(abs_path, request.scan_id, emit)

    def scan_picked_folder(self,
                           picked: Optional[Path],
                           scan_id: Optional[str] = None,
                           emit: Optional[EmitSink] = None) -> Optional[ScanResult]:
        if picked is None:
            return None
        if not picked.is_dir():
            raise NotAFolderError(f"Selected path is not a folder: {picked}")

        return self._scan_directory(self._canonical_or_raw(picked), scan_id, emit)

    def scan_picked_file(self,
                         picked: Optional[Path],
                         scan_id: Optional[str] = None,
                         emit: Optional[EmitSink] = None) -> Optional[ScanResult]:
        if picked is None:
            return None
        return self._open(self._canonical_or_raw(picked), scan_id, emit)

    def _open(self, abs_path: Path, scan_id: Optional[str], emit: Optional[EmitSink]) -> ScanResult:
        if abs_path.is_dir():
            return self._scan_directory(abs_path, scan_id, emit)
        if abs_path.is_file():
            return self._wrap_file(abs_path)
        raise NotAFileOrFolderError(f"Path is not a file or folder: {abs_path}")

    def _scan_directory(self, root: Path, scan_id: Optional[str], emit: Optional[EmitSink]) -> ScanResult:
        self._remember(root)

        logger.info(f"Starting scan of: {root}")
        files = self.scanner.scan(root, scan_id, emit)
        logger.info(f"Scan complete. Matched {len(files)} files under {root}")

        return ScanResult(root=str(root), label=display_label(root), files=tuple(files))

    def _wrap_file(self, abs_path: Path) -> ScanResult:
        category = self.classifier.classify(abs_path)
        if not category.is_supported:
            raise UnsupportedFileTypeError(
                f"Unsupported file type (only previewable extensions can be opened): {abs_path.name}"
            )
        self._remember(abs_path)

        name = display_label(abs_path)
        entry = FileEntry(virtual_path=name, absolute_path=str(abs_path), category=category)
        return ScanResult(root=str(abs_path), label=name, files=(entry,))

    def _remember(self, path: Path) -> None:
        # Best-effort: the scan result is still returned if this fails
        try:
            self.recent.record(path)
        except PersistenceError as e:
            logger.warning(f"Could not record recent path {path}: {e}")

    @staticmethod
    def _canonical_or_raw(path: Path) -> Path:
        try:
            return path.resolve(strict=True)
        except (OSError, RuntimeError):
            return path
