import os
import sys

import pytest

from docreader.core.common.errors import PersistenceError
from docreader.features.preferences.data import recent_store
from docreader.features.preferences.data.recent_store import FileRecentStore, dedupe, lossy_text, sanitize_entry


@pytest.fixture
def store(tmp_path):
    return FileRecentStore(tmp_path / "state" / "recent")


def test_missing_file_is_empty_list(store):
    assert store.load() == []


def test_empty_file_is_empty_list(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("")
    assert store.load() == []


def test_record_puts_path_first(store):
    store.record("/docs/a")
    store.record("/docs/b")

    assert store.load(1) == ["/docs/b"]
    assert store.load() == ["/docs/b", "/docs/a"]


def test_record_twice_keeps_single_occurrence(store):
    store.record("/docs/a")
    store.record("/docs/b")
    store.record("/docs/a")
    store.record("/docs/a")

    assert store.load() == ["/docs/a", "/docs/b"]


def test_file_format_one_path_per_line(store):
    store.record("/docs/a")
    store.record("/docs/b")

    assert store.path.read_text(encoding="utf-8") == "/docs/b\n/docs/a\n"


def test_record_enforces_maximum(store):
    """
    Recording a 21st distinct path drops the least recently used one.
    """
    for i in range(21):
        store.record(f"/docs/{i:02d}")

    entries = store.load(100)
    assert len(entries) == 20
    assert entries[0] == "/docs/20"
    assert entries[-1] == "/docs/01"
    assert "/docs/00" not in entries
    assert len(store.path.read_text(encoding="utf-8").splitlines()) == 20


def test_custom_maximum(tmp_path):
    store = FileRecentStore(tmp_path / "recent", max_entries=3)
    for name in "abcde":
        store.record(f"/{name}")

    assert store.load() == ["/e", "/d", "/c"]


@pytest.mark.parametrize("limit, expected", [
    (None, 5),
    (0, 5),
    (-3, 5),
    (2, 2),
    (50, 5),
])
def test_load_limit(store, limit, expected):
    for i in range(5):
        store.record(f"/docs/{i}")

    assert len(store.load(limit)) == expected


def test_load_sanitizes_hand_edited_file(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_bytes(
        b"  /docs/a  \r\n"
        b"\n"
        b"   \n"
        b"/docs/b\n"
        b"/docs/a\n"
        b"/docs/c"
    )

    assert store.load() == ["/docs/a", "/docs/b", "/docs/c"]


def test_record_cleans_up_a_dirty_file(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("/x\n\n/x\n  /y \n")

    store.record("/z")

    assert store.path.read_text(encoding="utf-8") == "/z\n/x\n/y\n"


def test_record_blank_is_a_noop(store):
    store.record("   ")
    assert not store.path.exists()


def test_record_tolerates_unreadable_list(store, caplog):
    store.path.parent.mkdir(parents=True)
    store.path.write_bytes(b"\xff\xfe broken")

    store.record("/docs/fresh")

    assert store.load() == ["/docs/fresh"]
    assert "starting fresh" in caplog.text


def test_load_surfaces_read_errors(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_bytes(b"\xff\xfe broken")

    with pytest.raises(PersistenceError):
        store.load()


def test_record_surfaces_write_errors(store, monkeypatch):
    def failing_write(path, content):
        raise PersistenceError(f"Failed to write {path}")

    monkeypatch.setattr(recent_store, "atomic_write_text", failing_write)

    with pytest.raises(PersistenceError):
        store.record("/docs/a")


@pytest.mark.parametrize("raw, expected", [
    ("/docs/a", "/docs/a"),
    ("  /docs/a \t", "/docs/a"),
    ("/docs/\na", "/docs/a"),
    ("/docs/\r\na\r", "/docs/a"),
    ("", None),
    ("   ", None),
    ("\r\n", None),
])
def test_sanitize_entry(raw, expected):
    assert sanitize_entry(raw) == expected


def test_dedupe_keeps_first_seen_order():
    assert dedupe(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX byte file names")
def test_record_non_utf8_name_is_stored_lossily(store):
    raw = os.fsdecode(b"/docs/lib\xff")

    store.record(raw)

    assert store.load() == ["/docs/lib\ufffd"]
    assert store.path.read_bytes() == "/docs/lib\ufffd\n".encode("utf-8")


def test_lossy_text():
    assert lossy_text("/docs/a") == "/docs/a"
    assert lossy_text(os.fsdecode(b"/docs/caf\xc3\xa9")) == "/docs/café"
