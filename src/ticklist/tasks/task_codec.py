# src/ticklist/tasks/task_codec.py

"""
JSON codec for the persisted task list.

Wire format: a JSON array of {"id": str, "title": str, "isCompleted": bool}
objects in list order. Field names are part of the on-disk contract and must
not change between versions. Unknown extra fields are ignored on read.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from .task_models import Task

FIELD_ID = "id"
FIELD_TITLE = "title"
FIELD_COMPLETED = "isCompleted"


class TaskDecodeError(ValueError):
    """Stored blob does not describe a valid task list."""


def _task_to_record(task: Task) -> dict[str, Any]:
    return {
        FIELD_ID: task.id,
        FIELD_TITLE: task.title,
        FIELD_COMPLETED: task.is_completed,
    }


def _record_to_task(raw: Any, pos: int) -> Task:
    if not isinstance(raw, dict):
        raise TaskDecodeError(f"record {pos} is not an object")

    task_id = raw.get(FIELD_ID)
    title = raw.get(FIELD_TITLE)
    done = raw.get(FIELD_COMPLETED)

    if not isinstance(task_id, str) or not task_id:
        raise TaskDecodeError(f"record {pos}: bad {FIELD_ID!r}")
    if not isinstance(title, str) or not title.strip():
        raise TaskDecodeError(f"record {pos}: bad {FIELD_TITLE!r}")
    # bool only: json ints (0/1) are not accepted as flags
    if not isinstance(done, bool):
        raise TaskDecodeError(f"record {pos}: bad {FIELD_COMPLETED!r}")

    return Task(id=task_id, title=title, is_completed=done)


def encode_tasks(tasks: Sequence[Task]) -> bytes:
    records = [_task_to_record(t) for t in tasks]
    return json.dumps(records, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def decode_tasks(data: bytes) -> list[Task]:
    """
    Decode a stored blob into an ordered task list.

    Raises TaskDecodeError for anything that is not a well-formed list of
    task records, including duplicate ids.
    """
    try:
        payload = json.loads(data.decode("utf-8"))
    except (ValueError, RecursionError) as e:
        raise TaskDecodeError(f"not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise TaskDecodeError("top level is not an array")

    tasks = [_record_to_task(raw, pos) for pos, raw in enumerate(payload)]

    seen: set[str] = set()
    for t in tasks:
        if t.id in seen:
            raise TaskDecodeError(f"duplicate id {t.id}")
        seen.add(t.id)

    return tasks
