# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from dodo.core.state import AppState
from dodo.tasks.storage import TaskFile
from dodo.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="dodo-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.txt",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with a real TaskFile under tmp_path.

    The file is part of what we want to test, so it is not faked here.
    """
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)
    storage = TaskFile(settings.tasks_path)
    return AppState(settings=settings, store=TaskStore(storage.load()), storage=storage)
