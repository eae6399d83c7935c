"""Append-only JSON history of cleaning runs."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, TypeAdapter, ValidationError, model_validator

from remove_print_cli.errors import CorruptHistoryError

LOGGER = logging.getLogger(__name__)

HistoryStatus = Literal["absent", "ok", "corrupt"]


def format_duration(seconds: float) -> str:
    """Render a duration as ``"<seconds>.<millis> seconds"``."""

    total_ms = max(int(seconds * 1000), 0)
    return f"{total_ms // 1000}.{total_ms % 1000:03d} seconds"


class HistoryEntry(BaseModel):
    """One recorded run. Serialized with camelCase keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: str
    project_path: str = Field(alias="projectPath")
    file_stats: Dict[str, NonNegativeInt] = Field(default_factory=dict, alias="fileStats")
    total_statements_removed: NonNegativeInt = Field(alias="totalStatementsRemoved")
    duration: str

    @model_validator(mode="after")
    def total_matches_stats(self) -> "HistoryEntry":
        expected = sum(self.file_stats.values())
        if self.total_statements_removed != expected:
            raise ValueError(
                f"totalStatementsRemoved is {self.total_statements_removed} "
                f"but fileStats sum to {expected}"
            )
        return self

    @classmethod
    def from_run(
        cls,
        project_path: str,
        file_stats: Mapping[str, int],
        duration_seconds: float,
        *,
        timestamp: Optional[datetime] = None,
    ) -> "HistoryEntry":
        stats = dict(file_stats)
        moment = timestamp or datetime.now().astimezone()
        return cls(
            timestamp=moment.isoformat(),
            project_path=str(project_path),
            file_stats=stats,
            total_statements_removed=sum(stats.values()),
            duration=format_duration(duration_seconds),
        )

    def to_json(self) -> Dict[str, object]:
        return self.model_dump(by_alias=True)


_ENTRIES = TypeAdapter(List[HistoryEntry])


@dataclass(frozen=True)
class HistoryRead:
    """Result of reading the history file."""

    status: HistoryStatus
    entries: Tuple[HistoryEntry, ...] = field(default_factory=tuple)
    reason: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.entries


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    where = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid entry")
    if where:
        return f"entry {where}: {message}"
    return message


class HistoryStore:
    """JSON array of :class:`HistoryEntry` records at ``path``.

    Every write replaces the whole file; concurrent writers are not
    coordinated and the last one wins.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def read_all(self) -> HistoryRead:
        if not self.path.exists():
            return HistoryRead(status="absent")
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            return self._corrupt(f"invalid JSON ({exc})")
        if not isinstance(payload, list):
            return self._corrupt(f"expected a JSON array, found {type(payload).__name__}")
        try:
            entries = _ENTRIES.validate_python(payload)
        except ValidationError as exc:
            return self._corrupt(_describe(exc))
        return HistoryRead(status="ok", entries=tuple(entries))

    def append(self, entry: HistoryEntry) -> None:
        """Add ``entry`` to the end of the log, creating the file if needed."""

        current = self.read_all()
        if current.status == "corrupt":
            raise CorruptHistoryError(self.path, current.reason or "unreadable")
        self._write([*current.entries, entry])
        LOGGER.info(
            "history entry appended",
            extra={
                "extra": {
                    "path": str(self.path),
                    "project": entry.project_path,
                    "removed": entry.total_statements_removed,
                }
            },
        )

    def clear(self) -> bool:
        """Empty the log. Returns False when there was no file to clear."""

        if not self.path.exists():
            return False
        self._write([])
        LOGGER.info("history cleared", extra={"extra": {"path": str(self.path)}})
        return True

    def _write(self, entries: List[HistoryEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [entry.to_json() for entry in entries]
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    def _corrupt(self, reason: str) -> HistoryRead:
        LOGGER.warning(
            "history file is corrupt",
            extra={"extra": {"path": str(self.path), "reason": reason}},
        )
        return HistoryRead(status="corrupt", reason=reason)


__all__ = [
    "HistoryEntry",
    "HistoryRead",
    "HistoryStatus",
    "HistoryStore",
    "format_duration",
]
