# tests/fakes.py

from __future__ import annotations

from ticklist.errors import PersistenceError
from ticklist.tasks.task_models import Task


class RecordingListener:
    """Captures every snapshot a store publishes."""

    def __init__(self) -> None:
        self.snapshots: list[tuple[Task, ...]] = []

    def __call__(self, tasks: tuple[Task, ...]) -> None:
        self.snapshots.append(tasks)

    @property
    def last(self) -> tuple[Task, ...]:
        return self.snapshots[-1]


class FlakyByteStore:
    """
    Byte store that fails the first `fail_writes` writes, then works.

    Reads always succeed. Used to check that failures do not break the
    in-memory store and that durability comes back afterwards.
    """

    def __init__(self, fail_writes: int) -> None:
        self.data: dict[str, bytes] = {}
        self.remaining_failures = fail_writes
        self.attempts = 0

    def read(self, key: str) -> bytes | None:
        return self.data.get(key)

    def write(self, key: str, data: bytes) -> None:
        self.attempts += 1
        if self.remaining_failures > 0:
            self.remaining_failures -= 1
            raise PersistenceError("disk full")
        self.data[key] = data


def titles(tasks) -> list[str]:
    return [t.title for t in tasks]


class BrokenByteStore:
    """Byte store that fails with a raw OSError, not a PersistenceError."""

    def read(self, key: str) -> bytes | None:
        raise OSError("disk gone")

    def write(self, key: str, data: bytes) -> None:
        raise OSError("disk gone")
