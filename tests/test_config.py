# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_tracker.config import Settings
from task_tracker.logging_setup import _ConsoleNoiseFilter

_VARS = (
    "TASKS_APP_NAME",
    "TASKS_LOG_LEVEL",
    "TASKS_LOG_TO_FILE",
    "TASKS_CONSOLE_ENABLED",
    "TASKS_SEED_DEMO",
    "TASKS_DATA_DIR",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env) -> None:
    s = Settings.from_env()

    assert s.app_name == "tasks"
    assert s.log_level == "INFO"
    assert s.log_to_file is True
    assert s.console_enabled is True
    assert s.seed_demo_tasks is False
    assert s.data_dir == Path(".local/tasks")


def test_settings_from_env(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKS_APP_NAME", "todo")
    clean_env.setenv("TASKS_LOG_LEVEL", "debug")
    clean_env.setenv("TASKS_LOG_TO_FILE", "no")
    clean_env.setenv("TASKS_CONSOLE_ENABLED", "0")
    clean_env.setenv("TASKS_SEED_DEMO", "yes")
    clean_env.setenv("TASKS_DATA_DIR", str(tmp_path))

    s = Settings.from_env()

    assert (s.app_name, s.log_level) == ("todo", "DEBUG")
    assert s.log_to_file is False
    assert s.console_enabled is False
    assert s.seed_demo_tasks is True
    assert s.data_dir == tmp_path


def test_blank_values_fall_back_to_defaults(clean_env) -> None:
    clean_env.setenv("TASKS_APP_NAME", "  ")
    clean_env.setenv("TASKS_CONSOLE_ENABLED", "")

    s = Settings.from_env()

    assert s.app_name == "tasks"
    assert s.console_enabled is True


def test_console_filter_keeps_own_logs_and_quiets_others() -> None:
    f = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert f.filter(rec("task_tracker.tasks.task_store", logging.DEBUG))
    assert not f.filter(rec("asyncio", logging.WARNING))
    assert f.filter(rec("asyncio", logging.ERROR))
    assert not f.filter(rec("py.warnings", logging.WARNING))
