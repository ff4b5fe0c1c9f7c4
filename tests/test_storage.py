# tests/test_storage.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from dodo.errors import CorruptRecordError, DodoError, ErrorKind, StorageError
from dodo.tasks import storage
from dodo.tasks.storage import TaskFile, parse_record, serialize_task
from dodo.tasks.task_models import Task


def _done(task: Task) -> Task:
    task.mark_done()
    return task


def test_serialize_records() -> None:
    assert serialize_task(Task.todo("read book")) == "T | N | read book"
    assert (
        serialize_task(Task.deadline("submit report", date(2024, 3, 15)))
        == "D | N | submit report | 2024-03-15"
    )
    assert serialize_task(_done(Task.event("party", date(2024, 4, 1)))) == "E | Y | party | 2024-04-01"


@pytest.mark.parametrize(
    "task",
    [
        Task.todo("read book"),
        _done(Task.todo("eat")),
        Task.deadline("pay bill", date(2024, 1, 1)),
        _done(Task.event("team dinner /by the river", date(2025, 12, 31))),
    ],
)
def test_record_round_trip(task: Task) -> None:
    assert parse_record(serialize_task(task)) == task


def test_parse_record_tolerates_spacing_and_case() -> None:
    assert parse_record("t|y|eat") == _done(Task.todo("eat"))
    assert parse_record("  D |  n | pay bill   |2024-01-01 ") == Task.deadline(
        "pay bill", date(2024, 1, 1)
    )


@pytest.mark.parametrize(
    "line",
    [
        "T | N",
        "T | N | eat | 2024-01-01",
        "D | N | pay bill",
        "E | N | party | 2024-01-01 | extra",
        "X | N | eat",
        "T | maybe | eat",
        "D | N | pay bill | 2024-02-30",
        "T | N |   ",
    ],
)
def test_parse_record_rejects_corrupt_lines(line: str) -> None:
    with pytest.raises(CorruptRecordError) as exc:
        parse_record(line, line_number=7)
    assert exc.value.kind is ErrorKind.CORRUPT_RECORD
    assert exc.value.line_number == 7
    assert exc.value.line == line


def test_append_separates_records_with_newlines(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    tf = TaskFile(path)
    tf.append_task(Task.todo("a"))
    assert path.read_text(encoding="utf-8") == "T | N | a"
    tf.append_task(Task.deadline("b", date(2024, 1, 1)))
    assert path.read_text(encoding="utf-8") == "T | N | a\nD | N | b | 2024-01-01"


def test_append_to_existing_empty_file_has_no_leading_newline(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("", encoding="utf-8")
    TaskFile(path).append_task(Task.todo("a"))
    assert path.read_text(encoding="utf-8") == "T | N | a"


def test_rewrite_all_replaces_contents(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("garbage\nmore garbage\n", encoding="utf-8")
    tf = TaskFile(path)
    tf.rewrite_all([Task.todo("a"), Task.todo("b")])
    assert path.read_text(encoding="utf-8") == "T | N | a\nT | N | b"
    tf.rewrite_all([])
    assert path.read_text(encoding="utf-8") == ""


def test_load_missing_file_creates_it(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "tasks.txt"
    assert TaskFile(path).load() == []
    assert path.exists()
    assert path.read_text(encoding="utf-8") == ""


def test_load_sorts_and_rewrites_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T | Y | eat\nD | N | pay bill | 2024-01-01", encoding="utf-8")

    tasks = TaskFile(path).load()

    assert len(tasks) == 2
    assert tasks == [Task.deadline("pay bill", date(2024, 1, 1)), _done(Task.todo("eat"))]
    assert path.read_text(encoding="utf-8") == "D | N | pay bill | 2024-01-01\nT | Y | eat"


def test_load_normalizes_hand_edited_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text(
        "e|n|party|2024-05-01\n\n  t | y |  eat  \nd|N|tax|2024-04-15\n\n",
        encoding="utf-8",
    )
    TaskFile(path).load()
    assert path.read_text(encoding="utf-8") == (
        "D | N | tax | 2024-04-15\nE | N | party | 2024-05-01\nT | Y | eat"
    )


def test_load_twice_is_stable(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text(
        "T | N | a\nE | Y | b | 2024-02-02\nD | N | c | 2024-01-01\nT | Y | d",
        encoding="utf-8",
    )
    tf = TaskFile(path)
    first = tf.load()
    text_after_first = path.read_text(encoding="utf-8")
    second = tf.load()
    assert first == second
    assert path.read_text(encoding="utf-8") == text_after_first


def test_corrupt_record_aborts_load_and_leaves_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    original = "T | N | a\nD | N | no date here\nT | N | b"
    path.write_text(original, encoding="utf-8")

    with pytest.raises(CorruptRecordError) as exc:
        TaskFile(path).load()

    assert exc.value.line_number == 2
    assert path.read_text(encoding="utf-8") == original


def test_read_failure_is_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.mkdir()
    with pytest.raises(StorageError) as exc:
        TaskFile(path).load()
    assert exc.value.kind is ErrorKind.IO_ERROR
    assert isinstance(exc.value.__cause__, OSError)


def test_append_failure_is_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "missing-dir" / "tasks.txt"
    with pytest.raises(StorageError):
        TaskFile(path).append_task(Task.todo("a"))


def test_undecodable_file_aborts_load_and_leaves_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    original = b"T | N | tea\nT | N | caf\xe9"
    path.write_bytes(original)

    with pytest.raises(DodoError) as exc:
        TaskFile(path).load()

    assert isinstance(exc.value, CorruptRecordError)
    assert exc.value.kind is ErrorKind.CORRUPT_RECORD
    assert exc.value.line_number == 2
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)
    assert path.read_bytes() == original


def test_failed_rewrite_removes_temp_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T | N | keep me", encoding="utf-8")

    def _refuse(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(storage.os, "replace", _refuse)

    with pytest.raises(StorageError) as exc:
        TaskFile(path).rewrite_all([Task.todo("a")])

    assert exc.value.kind is ErrorKind.IO_ERROR
    assert path.read_text(encoding="utf-8") == "T | N | keep me"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["tasks.txt"]
