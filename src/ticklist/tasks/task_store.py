# src/ticklist/tasks/task_store.py

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable, Iterator

from ..core.ports import ByteStore, TaskListener
from ..errors import NotFoundError, RangeError, ValidationError
from .task_codec import TaskDecodeError, decode_tasks, encode_tasks
from .task_models import LoadResult, LoadStatus, OpResult, Task

logger = logging.getLogger(__name__)

# Storage key of the serialized list. Part of the on-disk contract.
TASKS_KEY = "SavedTasks"


class TaskListStore:
    """
    Ordered to-do list mirrored to a byte store.

    Every successful mutation rewrites the whole list under one key and then
    notifies listeners with a snapshot. Persistence is best-effort:
    - read failures and corrupt data load as an empty list
    - write failures are logged, the in-memory list stays authoritative

    Not thread-safe: callers serialize access (e.g. a single UI thread).
    """

    def __init__(self, byte_store: ByteStore, *, key: str = TASKS_KEY) -> None:
        self._byte_store = byte_store
        self._key = key
        self._tasks: list[Task] = []
        self._listeners: list[TaskListener] = []
        self._loaded = False
        self._durable = True

    # ---- read-only view ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def durable(self) -> bool:
        """False when the last write to the byte store failed."""
        return self._durable

    @property
    def pending_count(self) -> int:
        return sum(1 for t in self._tasks if not t.is_completed)

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.is_completed)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def get(self, task_id: str) -> Task | None:
        i = self.index_of(task_id)
        return None if i is None else self._tasks[i]

    # ---- listeners ----

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        """Register a change listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.tasks
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Task listener %r crashed.", listener)

    # ---- persistence ----

    def load(self) -> LoadResult:
        """
        Replace in-memory state with the stored list.

        Absent, unreadable and corrupt data all load as an empty list.
        Never writes back: a corrupt blob stays on disk untouched.
        """
        try:
            raw = self._byte_store.read(self._key)
        except Exception:
            logger.warning("Task list read failed key=%s; starting empty.", self._key, exc_info=True)
            result = LoadResult(LoadStatus.UNAVAILABLE)
        else:
            if raw is None:
                result = LoadResult(LoadStatus.EMPTY)
            else:
                try:
                    result = LoadResult(LoadStatus.LOADED, tuple(decode_tasks(raw)))
                except TaskDecodeError as e:
                    logger.warning("Stored task list is corrupt key=%s (%s); starting empty.", self._key, e)
                    result = LoadResult(LoadStatus.CORRUPT)

        self._tasks = list(result.tasks)
        self._loaded = True
        logger.info("TaskListStore loaded key=%s status=%s total=%d", self._key, result.status, len(self._tasks))
        self._notify()
        return result

    def persist(self) -> bool:
        """
        Write the whole list under the store key.

        Returns False (and logs) if the byte store failed; the previous
        stored value is then left as it was.
        """
        data = encode_tasks(self._tasks)
        try:
            self._byte_store.write(self._key, data)
        except Exception:
            self._durable = False
            logger.warning(
                "Task list write failed key=%s total=%d; keeping in-memory state.",
                self._key,
                len(self._tasks),
                exc_info=True,
            )
            return False
        self._durable = True
        logger.debug("Task list persisted key=%s total=%d bytes=%d", self._key, len(self._tasks), len(data))
        return True

    def _commit(self) -> None:
        self.persist()
        self._notify()

    # ---- mutations ----

    def add(self, title_input: str) -> OpResult:
        title = title_input.strip()
        if not title:
            return OpResult.failure(ValidationError("title is empty"))

        task = Task.create(title)
        self._tasks.append(task)
        logger.debug("Task added id=%s total=%d", task.id, len(self._tasks))
        self._commit()
        return OpResult.success(task=task)

    def toggle_completion(self, task_id: str) -> OpResult:
        i = self.index_of(task_id)
        if i is None:
            return OpResult.failure(NotFoundError(f"no task with id {task_id}"))

        task = dataclasses.replace(self._tasks[i], is_completed=not self._tasks[i].is_completed)
        self._tasks[i] = task
        logger.debug("Task toggled id=%s completed=%s", task.id, task.is_completed)
        self._commit()
        return OpResult.success(task=task)

    def delete(self, positions: Iterable[int]) -> OpResult:
        """
        Remove the tasks at the given positions in one update.

        Positions that no longer exist are skipped silently.
        """
        wanted = {p for p in positions if 0 <= p < len(self._tasks)}
        return self._remove_where(lambda i, _t: i in wanted)

    def delete_ids(self, ids: Iterable[str]) -> OpResult:
        """Remove the tasks with the given ids; unknown ids are skipped."""
        wanted = set(ids)
        return self._remove_where(lambda _i, t: t.id in wanted)

    def _remove_where(self, match: Callable[[int, Task], bool]) -> OpResult:
        kept: list[Task] = []
        removed: list[Task] = []
        for i, t in enumerate(self._tasks):
            (removed if match(i, t) else kept).append(t)

        if not removed:
            return OpResult.success()

        self._tasks = kept
        logger.debug("Tasks deleted n=%d total=%d", len(removed), len(kept))
        self._commit()
        return OpResult.success(removed=tuple(removed))

    def reorder(self, from_positions: Iterable[int], to: int) -> OpResult:
        """
        Move the tasks at `from_positions` so they sit before the element
        currently at `to` (or at the end when `to == len`).

        Positions refer to the list before the move. Moved tasks keep their
        relative order. Any out-of-range position rejects the whole move.
        """
        n = len(self._tasks)
        offsets = sorted(set(from_positions))

        bad = [p for p in offsets if not 0 <= p < n]
        if bad:
            return OpResult.failure(RangeError(f"source positions out of range 0..{n - 1}: {bad}"))
        if not 0 <= to <= n:
            return OpResult.failure(RangeError(f"target position {to} out of range 0..{n}"))
        if not offsets:
            return OpResult.success()

        moving = set(offsets)
        block = [self._tasks[p] for p in offsets]
        rest = [t for i, t in enumerate(self._tasks) if i not in moving]
        insert_at = to - sum(1 for p in offsets if p < to)
        reordered = rest[:insert_at] + block + rest[insert_at:]

        if reordered == self._tasks:
            return OpResult.success()

        self._tasks = reordered
        logger.debug("Tasks reordered from=%s to=%d", offsets, to)
        self._commit()
        return OpResult.success()
