# src/ticklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskListStore
from .ports import ByteStore


@dataclass
class AppState:
    # Settings kept on the state for easy access by the presentation layer.
    settings: object

    byte_store: ByteStore
    task_store: TaskListStore
