"""Remove single-line ``print(...);`` statements from one source file."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

LOGGER = logging.getLogger(__name__)

# Anchored at the line start; a call continued on the next line never matches.
PRINT_STATEMENT_RE = re.compile(r"^\s*print\(.*\);")


@dataclass(frozen=True)
class FilterResult:
    """Outcome of filtering one file."""

    path: Path
    original_lines: List[str]
    kept_lines: List[str]

    @property
    def removed(self) -> int:
        return len(self.original_lines) - len(self.kept_lines)

    @property
    def changed(self) -> bool:
        return self.removed > 0


def is_print_statement(line: str) -> bool:
    return PRINT_STATEMENT_RE.match(line) is not None


def read_lines(path: Path) -> List[str]:
    """Read ``path`` as text lines without their terminators.

    ``\\r\\n`` and lone ``\\r`` are treated as line breaks and a trailing line
    break does not produce an empty final line.
    """

    with open(path, "r", encoding="utf-8", newline=None) as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def filter_lines(lines: List[str]) -> List[str]:
    return [line for line in lines if not is_print_statement(line)]


def strip_print_statements(path: Path) -> FilterResult:
    """Drop matching lines from ``path`` and rewrite it if anything changed.

    Untouched files are never written, so their bytes stay identical.
    """

    path = Path(path)
    original = read_lines(path)
    kept = filter_lines(original)
    result = FilterResult(path=path, original_lines=original, kept_lines=kept)
    if result.changed:
        path.write_text("\n".join(kept), encoding="utf-8", newline="")
        LOGGER.debug(
            "rewrote source file",
            extra={"extra": {"path": str(path), "removed": result.removed}},
        )
    return result


__all__ = [
    "FilterResult",
    "PRINT_STATEMENT_RE",
    "filter_lines",
    "is_print_statement",
    "read_lines",
    "strip_print_statements",
]
