"""Tests for momentum/storage.py: persistence adapters."""

from momentum.storage import (
    FileStorage,
    MemoryStorage,
    NullStorage,
    select_storage,
)
from momentum.workspace import store_key_path


def test_file_storage_loads_seeded_values(workspace):
    fs = FileStorage(workspace)
    assert fs.load("streak") == 3
    assert fs.load("points") == 40
    assert fs.load("habits")[0]["id"] == "reading"


def test_file_storage_missing_key(workspace):
    assert FileStorage(workspace).load("nothing-here") is None


def test_file_storage_round_trip(tmp_path):
    fs = FileStorage(tmp_path)
    value = {"Sunday": [{"id": "1", "title": "שלום", "time": "", "completed": False}], "Monday": []}
    fs.save("schedule", value)
    assert fs.load("schedule") == value
    assert store_key_path("schedule", tmp_path).exists()


def test_file_storage_corrupt_file_is_absent(workspace):
    store_key_path("points", workspace).write_text("{not json", encoding="utf-8")
    assert FileStorage(workspace).load("points") is None


def test_file_storage_save_failure_is_skipped(tmp_path):
    blocker = tmp_path / "blocked"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    fs = FileStorage(blocker)
    fs.save("points", 10)
    assert fs.load("points") is None


def test_memory_storage_round_trip():
    ms = MemoryStorage()
    assert ms.load("habits") is None
    ms.save("habits", [{"id": "a", "current": 1}])
    assert ms.load("habits") == [{"id": "a", "current": 1}]
    assert isinstance(ms.data["habits"], str)


def test_memory_storage_returns_copies():
    ms = MemoryStorage()
    ms.save("schedule", {"Sunday": []})
    loaded = ms.load("schedule")
    loaded["Sunday"].append("x")
    assert ms.load("schedule") == {"Sunday": []}


def test_null_storage():
    ns = NullStorage()
    ns.save("points", 10)
    assert ns.load("points") is None


def test_select_storage_file(tmp_path):
    storage = select_storage(tmp_path / "fresh")
    assert isinstance(storage, FileStorage)
    assert (tmp_path / "fresh" / "store").is_dir()


def test_select_storage_unavailable(tmp_path):
    blocker = tmp_path / "blocked"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    assert isinstance(select_storage(blocker), NullStorage)
