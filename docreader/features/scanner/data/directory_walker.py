import logging
import os
from pathlib import Path
from typing import List, Optional

from docreader.core.config.settings import settings
from ..domain.interfaces import EmitSink, IDirectoryScanner, IFileClassifier
from ..domain.models import FileEntry
from .classifier import ExtensionClassifier
from .progress import Clock, ProgressReporter, ProgressThrottle

logger = logging.getLogger(__name__)


def to_virtual_path(relative: str) -> str:
    """Rewrites host separators so virtual paths are always '/'-separated."""
    return relative.replace(os.sep, "/").replace("\\", "/")


class StackDirectoryScanner(IDirectoryScanner):
    """
    Iterative depth-first walk with an explicit stack.
    Avoids recursion limits on deep trees and never follows symlinks.
    Unreadable directories and entries are skipped instead of failing the scan.
    """

    def __init__(self,
                 classifier: Optional[IFileClassifier] = None,
                 interval_ms: Optional[int] = None,
                 clock: Optional[Clock] = None):
        self.classifier = classifier or ExtensionClassifier()
        self.interval_ms = settings.SCAN_PROGRESS_INTERVAL_MS if interval_ms is None else interval_ms
        self.clock = clock

    def scan(self,
             root: Path,
             scan_id: Optional[str] = None,
             emit: Optional[EmitSink] = None) -> List[FileEntry]:
        root_str = str(root)
        throttle = ProgressThrottle(self.interval_ms / 1000.0, self.clock)
        progress = ProgressReporter(settings.SCAN_PROGRESS_EVENT, scan_id, emit, throttle)

        files: List[FileEntry] = []
        stack: List[str] = [root_str]

        progress.start(root_str)

        while stack:
            directory = stack.pop()
            progress.scanned_dirs += 1
            progress.checkpoint(directory)

            try:
                iterator = os.scandir(directory)
            except OSError as e:
                logger.debug(f"Skipping unreadable directory {directory}: {e}")
                continue

            with iterator:
                while True:
                    try:
                        entry = next(iterator)
                    except StopIteration:
                        break
                    except OSError as e:
                        # The rest of this listing is lost, siblings elsewhere still get scanned
                        logger.debug(f"Listing of {directory} interrupted: {e}")
                        break

                    self._visit(entry, root, files, stack, progress)

        progress.done(root_str)

        files.sort(key=lambda item: item.virtual_path)
        return files

    def _visit(self,
               entry: "os.DirEntry[str]",
               root: Path,
               files: List[FileEntry],
               stack: List[str],
               progress: ProgressReporter) -> None:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = not is_dir and entry.is_file(follow_symlinks=False)
        except OSError as e:
            logger.debug(f"Cannot determine type of {entry.path}: {e}")
            return

        if is_dir:
            progress.checkpoint(entry.path)
            stack.append(entry.path)
            return
        if not is_file:
            return

        progress.scanned_files += 1
        category = self.classifier.classify(entry.name)
        if not category.is_supported:
            progress.checkpoint(entry.path)
            return
        progress.matched_files += 1

        try:
            relative = os.fspath(Path(entry.path).relative_to(root))
        except ValueError:
            return

        files.append(FileEntry(
            virtual_path=to_virtual_path(relative),
            absolute_path=entry.path,
            category=category,
        ))
        progress.checkpoint(entry.path)
