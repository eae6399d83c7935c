import io
import logging
import os
from pathlib import Path

import pytest
from rich.console import Console

from remove_print_cli.config import get_settings

SCENARIO_LINES = ["void main() {", "  print('hi');", "}"]


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    for name in list(os.environ):
        if name.startswith("REMOVE_PRINT_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("REMOVE_PRINT_HISTORY_PATH", str(tmp_path / "state" / "cli_history.json"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), soft_wrap=True, highlight=False, emoji=False, width=200)


@pytest.fixture
def history_path(tmp_path) -> Path:
    return tmp_path / "state" / "cli_history.json"


@pytest.fixture
def dart_project(tmp_path) -> Path:
    """Project with one Dart file holding a single print statement."""

    root = tmp_path / "app"
    (root / "lib").mkdir(parents=True)
    (root / "lib" / "main.dart").write_text("\n".join(SCENARIO_LINES) + "\n", encoding="utf-8")
    return root
