# tests/test_task_codec.py

from __future__ import annotations

import json

import pytest

from ticklist.tasks.task_codec import TaskDecodeError, decode_tasks, encode_tasks
from ticklist.tasks.task_models import Task


def test_encoded_records_use_stable_field_names() -> None:
    blob = encode_tasks([Task(id="A1", title="Buy milk", is_completed=True)])
    assert json.loads(blob) == [{"id": "A1", "title": "Buy milk", "isCompleted": True}]


def test_non_ascii_titles_survive() -> None:
    tasks = [Task(id="1", title="Купить чай ☕"), Task(id="2", title="b", is_completed=True)]
    assert decode_tasks(encode_tasks(tasks)) == tasks


def test_decode_ignores_unknown_fields() -> None:
    blob = b'[{"id": "x", "title": "t", "isCompleted": false, "priority": 3}]'
    assert decode_tasks(blob) == [Task(id="x", title="t", is_completed=False)]


def test_decode_empty_array() -> None:
    assert decode_tasks(b"[]") == []


@pytest.mark.parametrize(
    "blob",
    [
        b"",
        b"\xff\xfe",
        b"{not json",
        b'{"id": "x"}',
        b"[1, 2]",
        b'[{"title": "t", "isCompleted": false}]',
        b'[{"id": 5, "title": "t", "isCompleted": false}]',
        b'[{"id": "", "title": "t", "isCompleted": false}]',
        b'[{"id": "x", "title": null, "isCompleted": false}]',
        b'[{"id": "x", "title": "", "isCompleted": false}]',
        b'[{"id": "x", "title": " \\t", "isCompleted": false}]',
        b'[{"id": "x", "title": "t", "isCompleted": 1}]',
        b'[{"id": "x", "title": "t"}]',
        b'[{"id": "x", "title": "a", "isCompleted": false}, {"id": "x", "title": "b", "isCompleted": true}]',
    ],
)
def test_decode_rejects_malformed_blobs(blob: bytes) -> None:
    with pytest.raises(TaskDecodeError):
        decode_tasks(blob)


@pytest.mark.parametrize(
    "blob",
    [b"[" + b"1" * 5000 + b"]", b"[" * 200000 + b"]" * 200000],
    ids=["huge-int", "deep-nesting"],
)
def test_decode_rejects_blobs_the_json_parser_cannot_handle(blob: bytes) -> None:
    with pytest.raises(TaskDecodeError):
        decode_tasks(blob)
