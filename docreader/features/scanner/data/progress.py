import logging
import time
from typing import Callable, Optional

from docreader.core.common.enums import ScanStage
from ..domain.interfaces import EmitSink
from ..domain.models import ScanProgress

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class ProgressThrottle:
    """
    Rate limit for "progress" events.
    ready() is polled at natural checkpoints and only answers True once
    the interval has elapsed since the last accepted checkpoint.
    """

    def __init__(self, interval_seconds: float, clock: Optional[Clock] = None):
        self.interval = interval_seconds
        self.clock = clock or time.monotonic
        self.last_emit = self.clock()

    def ready(self) -> bool:
        now = self.clock()
        if now - self.last_emit >= self.interval:
            self.last_emit = now
            return True
        return False


class ProgressReporter:
    """
    Owns the counters of one scan and pushes snapshots to the emit sink.
    Sink failures never propagate into the walk.
    """

    def __init__(self,
                 event_name: str,
                 scan_id: Optional[str],
                 emit: Optional[EmitSink],
                 throttle: ProgressThrottle):
        self.event_name = event_name
        self.scan_id = scan_id
        self.emit = emit
        self.throttle = throttle

        self.scanned_dirs = 0
        self.scanned_files = 0
        self.matched_files = 0

    def snapshot(self, stage: ScanStage, current_path: str) -> ScanProgress:
        return ScanProgress(
            scan_id=self.scan_id,
            stage=stage,
            scanned_dirs=self.scanned_dirs,
            scanned_files=self.scanned_files,
            matched_files=self.matched_files,
            current_path=current_path,
        )

    def start(self, root: str) -> None:
        self._send(self.snapshot(ScanStage.START, root))

    def checkpoint(self, current_path: str) -> None:
        if self.throttle.ready():
            self._send(self.snapshot(ScanStage.PROGRESS, current_path))

    def done(self, root: str) -> None:
        self._send(self.snapshot(ScanStage.DONE, root))

    def _send(self, payload: ScanProgress) -> None:
        if self.emit is None:
            return
        try:
            self.emit(self.event_name, payload)
        except Exception as e:
            logger.debug(f"Dropped {payload.stage.value} event for scan {self.scan_id}: {e}")
