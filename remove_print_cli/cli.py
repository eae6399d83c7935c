"""Typer entry point for remove_print_cli.

The command takes a raw argument list and picks exactly one action: help,
history display, history reset, or a scan-and-clean run over a project
directory. Every outcome prints a message and exits with status 0.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Sequence

import typer
from rich.console import Console
from rich.markup import escape

from remove_print_cli.config import Settings, get_settings
from remove_print_cli.errors import CorruptHistoryError
from remove_print_cli.history import HistoryEntry, HistoryRead, HistoryStore
from remove_print_cli.logging import setup_logging
from remove_print_cli.validator import is_valid_project_path
from remove_print_cli.walker import remove_print_statements

PROG = "remove_print_cli"
HELP_FLAGS = ("--help", "-h")
VERBOSE_FLAG = "--verbose"
HISTORY_COMMAND = "history"
CLEAN_HISTORY_COMMAND = "clean-history"

USAGE = f"""\
Usage: {PROG} [options] <project_path>

Options:
  --help, -h         Show this help message
  history            Display the history of CLI usage
  clean-history      Clear all history logs
  --verbose          Show detailed logs of file content before and after modifications

Example:
  {PROG} /path/to/flutter/project
  {PROG} history
  {PROG} clean-history
  {PROG} /path/to/flutter/project --verbose
"""

app = typer.Typer(add_completion=False, help="Remove print statements from a Dart project")
console = Console(soft_wrap=True, highlight=False, emoji=False)
LOGGER = logging.getLogger(__name__)


def show_help(out: Console) -> None:
    out.print(USAGE, markup=False)


def _render_entry(out: Console, entry: HistoryEntry) -> None:
    out.print(f"\nDate: {entry.timestamp}", markup=False)
    out.print(f"Project Path: {entry.project_path}", markup=False)
    if entry.file_stats:
        out.print("Files Processed:")
        for path, count in entry.file_stats.items():
            out.print(f"  {escape(path)}: {count} print statements removed")
    else:
        out.print("No files were processed or logged.")
    out.print(f"Total Removed: {entry.total_statements_removed}")
    out.print(f"Duration: {escape(entry.duration)}")


def _report_corrupt(out: Console, history: HistoryRead, store: HistoryStore) -> None:
    out.print(
        f"[red]History file {escape(str(store.path))} is corrupt: {escape(history.reason or 'unreadable')}[/red]"
    )
    out.print(f"Run '{PROG} {CLEAN_HISTORY_COMMAND}' to reset it.", markup=False)


def show_history(store: HistoryStore, out: Console) -> None:
    history = store.read_all()
    if history.status == "absent":
        out.print("No history found.")
        return
    if history.status == "corrupt":
        _report_corrupt(out, history, store)
        return

    out.print(f"[bold]==== {PROG} History ====[/bold]")
    if history.is_empty:
        out.print("No entries recorded.")
        return
    for entry in history.entries:
        _render_entry(out, entry)


def clear_history(store: HistoryStore, out: Console) -> None:
    if not store.clear():
        out.print("No history to clear.")
        return
    out.print("History has been cleared.")


def clean_project(
    project_path: str,
    *,
    verbose: bool,
    settings: Settings,
    store: HistoryStore,
    out: Console,
) -> Optional[HistoryEntry]:
    """Scan ``project_path``, strip print statements and record the run.

    Returns the recorded entry, or ``None`` when the path was rejected or the
    history could not be written.
    """

    valid = is_valid_project_path(
        project_path,
        suffix=settings.source_suffix,
        label=settings.source_label,
        console=out,
    )
    if not valid:
        out.print("[red]Invalid project path. Please provide a valid Flutter project directory.[/red]")
        return None

    out.print(f'Scanning project at "{project_path}" for print statements...', markup=False)
    started = time.perf_counter()
    file_stats = remove_print_statements(
        project_path,
        suffix=settings.source_suffix,
        verbose=verbose,
        console=out,
    )
    elapsed = time.perf_counter() - started
    out.print("[green]All print statements have been removed successfully.[/green]")

    entry = HistoryEntry.from_run(project_path, file_stats, elapsed)
    try:
        store.append(entry)
    except CorruptHistoryError as exc:
        LOGGER.warning("run not recorded", extra={"extra": {"reason": exc.reason}})
        _report_corrupt(out, HistoryRead(status="corrupt", reason=exc.reason), store)
        out.print("This run was not recorded in the history.")
        return None
    return entry


def dispatch(
    arguments: Sequence[str],
    *,
    settings: Optional[Settings] = None,
    out: Optional[Console] = None,
) -> int:
    """Run the action selected by ``arguments`` and return the exit status."""

    settings = settings or get_settings()
    out = out or console
    args = list(arguments)
    store = HistoryStore(settings.history_path)

    if not args or any(flag in args for flag in HELP_FLAGS):
        show_help(out)
    elif HISTORY_COMMAND in args:
        show_history(store, out)
    elif CLEAN_HISTORY_COMMAND in args:
        clear_history(store, out)
    else:
        clean_project(
            args[0],
            verbose=VERBOSE_FLAG in args,
            settings=settings,
            store=store,
            out=out,
        )
    return 0


@app.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def main(
    arguments: Optional[List[str]] = typer.Argument(
        None, help="Project path, a history subcommand, and flags"
    ),
) -> None:
    """Remove print statements from a project and keep a usage history."""

    settings = get_settings()
    setup_logging(settings.log_level)
    code = dispatch(arguments or [], settings=settings)
    raise typer.Exit(code=code)


def run() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    run()
