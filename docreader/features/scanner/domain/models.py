from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from docreader.core.common.enums import FileCategory, ScanStage

@dataclass(frozen=True)
class ScanRequest:
    """
    User intent to open a file or folder.
    scan_id is an opaque token echoed back in every progress event.
    """
    input_path: str
    scan_id: Optional[str] = None

@dataclass(frozen=True)
class FileEntry:
    """
    One previewable file found by a scan.
    virtual_path is root-relative and always '/'-separated.
    """
    virtual_path: str
    absolute_path: str
    category: FileCategory

    def to_payload(self) -> Dict[str, Any]:
        return {
            "virtualPath": self.virtual_path,
            "absPath": self.absolute_path,
            "category": self.category.value,
        }

@dataclass(frozen=True)
class ScanResult:
    """
    Report returned to the front end once a scan completes.
    """
    root: str
    label: str
    files: Tuple[FileEntry, ...] = field(default_factory=tuple)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "root": self.root,
            "label": self.label,
            "files": [entry.to_payload() for entry in self.files],
        }

@dataclass(frozen=True)
class ScanProgress:
    scan_id: Optional[str]
    stage: ScanStage
    scanned_dirs: int
    scanned_files: int
    matched_files: int
    current_path: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "scanId": self.scan_id,
            "stage": self.stage.value,
            "scannedDirs": self.scanned_dirs,
            "scannedFiles": self.scanned_files,
            "matchedFiles": self.matched_files,
            "currentPath": self.current_path,
        }
