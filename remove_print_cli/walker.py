"""Recursive scan of a project tree."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, Optional

from rich.console import Console

from remove_print_cli.config import DEFAULT_SOURCE_SUFFIX
from remove_print_cli.line_filter import FilterResult, strip_print_statements

FileStats = Dict[str, int]


def iter_source_files(root: Path, suffix: str = DEFAULT_SOURCE_SUFFIX) -> Iterator[Path]:
    """Yield regular files below ``root`` whose name ends with ``suffix``."""

    for path in sorted(Path(root).rglob("*")):
        if path.name.endswith(suffix) and path.is_file():
            yield path


def _report(console: Console, result: FilterResult, verbose: bool) -> None:
    console.print(
        f"Processed: {result.path} ({result.removed} print statements removed)",
        markup=False,
    )
    if verbose:
        console.print("File Content Before:\n" + "\n".join(result.original_lines), markup=False)
        console.print("File Content After:\n" + "\n".join(result.kept_lines), markup=False)


def remove_print_statements(
    root: Path,
    *,
    suffix: str = DEFAULT_SOURCE_SUFFIX,
    verbose: bool = False,
    console: Optional[Console] = None,
) -> FileStats:
    """Filter every source file under ``root``.

    Returns a mapping of file path to removed-line count that only contains
    files which actually lost lines.
    """

    console = console or Console(soft_wrap=True, highlight=False, emoji=False)
    stats: FileStats = {}
    for path in iter_source_files(root, suffix):
        result = strip_print_statements(path)
        if not result.changed:
            continue
        stats[str(path)] = result.removed
        _report(console, result, verbose)
    return stats


__all__ = ["FileStats", "iter_source_files", "remove_print_statements"]
