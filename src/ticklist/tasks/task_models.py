# src/ticklist/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import StrEnum

from ..errors import TicklistError


def new_task_id() -> str:
    return str(uuid.uuid4()).upper()


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do entry.

    Instances are immutable snapshots: the store replaces a record when it
    changes, so a Task handed to a caller never mutates under them.
    """

    id: str
    title: str
    is_completed: bool = False

    @classmethod
    def create(cls, title: str) -> Task:
        return cls(id=new_task_id(), title=title, is_completed=False)


class LoadStatus(StrEnum):
    LOADED = "loaded"
    EMPTY = "empty"  # key absent
    CORRUPT = "corrupt"  # blob present but undecodable
    UNAVAILABLE = "unavailable"  # byte store read failed


@dataclass(frozen=True, slots=True)
class LoadResult:
    status: LoadStatus
    tasks: tuple[Task, ...] = ()

    @property
    def ok(self) -> bool:
        """True when stored data was found and decoded."""
        return self.status is LoadStatus.LOADED


@dataclass(frozen=True, slots=True)
class OpResult:
    """
    Outcome of a store operation.

    `error` is None on success. On failure it holds a ValidationError,
    NotFoundError or RangeError instance; nothing was changed.
    """

    error: TicklistError | None = None
    task: Task | None = None
    removed: tuple[Task, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> OpResult:
        if self.error is not None:
            raise self.error
        return self

    @classmethod
    def success(cls, *, task: Task | None = None, removed: tuple[Task, ...] = ()) -> OpResult:
        return cls(error=None, task=task, removed=removed)

    @classmethod
    def failure(cls, error: TicklistError) -> OpResult:
        return cls(error=error)
