"""Project path checks."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console

from remove_print_cli.config import DEFAULT_SOURCE_SUFFIX
from remove_print_cli.walker import iter_source_files


def count_source_files(root: Path, suffix: str = DEFAULT_SOURCE_SUFFIX) -> int:
    return sum(1 for _ in iter_source_files(root, suffix))


def is_valid_project_path(
    path: str,
    *,
    suffix: str = DEFAULT_SOURCE_SUFFIX,
    label: str = "Dart",
    console: Optional[Console] = None,
) -> bool:
    """Return True when ``path`` is a directory holding at least one source file.

    The check prints what it looked at; a missing or empty project is a
    ``False`` result, not an exception.
    """

    console = console or Console(soft_wrap=True, highlight=False, emoji=False)
    directory = Path(path)
    exists = directory.is_dir()

    console.print(f"Checking directory: {path}", markup=False)
    console.print(f"Directory exists: {str(exists).lower()}", markup=False)
    if not exists:
        return False

    found = count_source_files(directory, suffix)
    console.print(f"{label} files found: {found}", markup=False)
    return found > 0


__all__ = ["count_source_files", "is_valid_project_path"]
