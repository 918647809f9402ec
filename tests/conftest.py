# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tkit.core.engine import CommandEngine
from tkit.tasks.task_store import TaskStore

from .fakes import FakeTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and TaskStore.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="tkit-test",
        tasks_file=tmp_path / "data" / "tkit.txt",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_file, app_name=settings.app_name)


@pytest.fixture()
def engine(store: TaskStore) -> CommandEngine:
    """Engine backed by a real TaskStore in a tmp dir (persistence is part of the contract)."""
    return CommandEngine(store)


@pytest.fixture()
def fake_store() -> FakeTaskStore:
    return FakeTaskStore()
