from typing import Optional

from docreader.features.preferences.service.api import preferences

from ..domain.interfaces import EmitSink, PathPicker
from ..domain.models import ScanRequest, ScanResult
from .orchestrator import ScanOrchestrator

class ScannerService:
    """
    Operations exposed to the GUI shell.
    Each returns a ScanResult, None when the user selected nothing,
    or raises a DocReaderError whose message is shown to the user.
    """

    def orchestrator(self) -> ScanOrchestrator:
        return ScanOrchestrator(recent=preferences.recent)

    def scan_path(self,
                  path: str,
                  scan_id: Optional[str] = None,
                  emit: Optional[EmitSink] = None) -> Optional[ScanResult]:
        """Opens a typed, dropped or command-line path (plain or file:// URI)."""
        return self.orchestrator().resolve_and_scan(ScanRequest(input_path=path, scan_id=scan_id), emit)

    def pick_and_scan_folder(self,
                             picker: PathPicker,
                             scan_id: Optional[str] = None,
                             emit: Optional[EmitSink] = None) -> Optional[ScanResult]:
        """`picker` shows the native folder dialog and returns None on cancel."""
        return self.orchestrator().scan_picked_folder(picker(), scan_id, emit)

    def pick_and_scan_file(self,
                           picker: PathPicker,
                           scan_id: Optional[str] = None,
                           emit: Optional[EmitSink] = None) -> Optional[ScanResult]:
        return self.orchestrator().scan_picked_file(picker(), scan_id, emit)

# Singleton Instance for easy import
scanner = ScannerService()
