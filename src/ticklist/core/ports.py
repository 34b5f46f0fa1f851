# src/ticklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task store.

The store depends on Protocols instead of concrete implementations.
This keeps storage backends swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class ByteStore(Protocol):
    """
    Durable key -> bytes storage.

    Implementations must replace a value as a whole: a failed write leaves
    the previous value readable. Backend failures are raised as
    ticklist.errors.PersistenceError.
    """

    def read(self, key: str) -> bytes | None: ...
    def write(self, key: str, data: bytes) -> None: ...


class TaskListener(Protocol):
    """
    Presentation-side hook: called with a read-only snapshot after every
    successful mutation (and after load).
    """

    def __call__(self, tasks: tuple[Task, ...]) -> None: ...
