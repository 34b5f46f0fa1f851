# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from ticklist.storage.memory import MemoryByteStore
from ticklist.tasks.task_store import TaskListStore

from .fakes import RecordingListener


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="ticklist-test",
        log_level="DEBUG",
        log_to_file=False,
        storage_backend="sqlite",
        data_dir=tmp_path,
        db_path=tmp_path / "store.sqlite3",
        store_dir=tmp_path / "store",
    )


@pytest.fixture()
def byte_store() -> MemoryByteStore:
    return MemoryByteStore()


@pytest.fixture()
def store(byte_store: MemoryByteStore) -> TaskListStore:
    """A loaded (empty) store on an in-memory byte store."""
    s = TaskListStore(byte_store)
    s.load()
    return s


@pytest.fixture()
def listener(store: TaskListStore) -> RecordingListener:
    rec = RecordingListener()
    store.subscribe(rec)
    return rec
