"""
ticklist: an ordered to-do list kept in memory and mirrored to a
key-value byte store.

Components:
- tasks/: Task model, JSON codec, TaskListStore
- storage/: byte store backends (memory, sqlite, file)
- bootstrap.py: wires settings, logging and storage together
"""

from .errors import NotFoundError, PersistenceError, RangeError, TicklistError, ValidationError
from .tasks.task_models import LoadResult, LoadStatus, OpResult, Task
from .tasks.task_store import TASKS_KEY, TaskListStore

__all__ = [
    "TASKS_KEY",
    "LoadResult",
    "LoadStatus",
    "NotFoundError",
    "OpResult",
    "PersistenceError",
    "RangeError",
    "Task",
    "TaskListStore",
    "TicklistError",
    "ValidationError",
]
