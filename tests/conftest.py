# File: tests/conftest.py

import logging
from typing import List, Tuple

import pytest

from docreader.features.scanner.domain.models import ScanProgress


@pytest.fixture(scope="function", autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """
    Runs before EVERY test.
    Points the persisted state (recent list, config) at a throwaway folder
    so no test ever touches the real ~/.docreader.
    """
    data_dir = tmp_path / "docreader_home"
    monkeypatch.setenv("DOCREADER_DATA_DIR", str(data_dir))
    yield data_dir


class RecordingSink:
    """Emit sink that keeps every (event_name, payload) it receives."""

    def __init__(self):
        self.events: List[Tuple[str, ScanProgress]] = []

    def __call__(self, event_name: str, payload: ScanProgress) -> None:
        self.events.append((event_name, payload))

    @property
    def stages(self) -> List[str]:
        return [payload.stage.value for _, payload in self.events]

    @property
    def payloads(self) -> List[ScanProgress]:
        return [payload for _, payload in self.events]


class FakeClock:
    """Monotonic clock that only moves when told to (or by `step` per read)."""

    def __init__(self, step: float = 0.0):
        self.now = 1000.0
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def frozen_clock():
    return FakeClock(step=0.0)


@pytest.fixture
def racing_clock():
    """Every read is 1s later than the previous one, so every checkpoint emits."""
    return FakeClock(step=1.0)


@pytest.fixture
def library_folder(tmp_path):
    """
    Creates a small document library:
    - 4 previewable files spread over nested folders
    - 2 unsupported files (.exe, extensionless)
    - 1 empty folder
    """
    root = tmp_path / "library"
    root.mkdir()

    (root / "readme.md").write_text("# hello")
    (root / "notes.txt").write_text("plain text")

    talks = root / "talks"
    talks.mkdir()
    (talks / "intro.ppt.md").write_text("---\nmarp: true\n---")
    (talks / "cover.PNG").write_bytes(b"\x89PNG")

    (talks / "setup.exe").write_bytes(b"MZ")
    (root / "LICENSE").write_text("MIT")

    (root / "empty").mkdir()

    return root


@pytest.fixture(autouse=True)
def capture_docreader_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="docreader")
    yield
