"""Rich terminal reporter for working directory status."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from stagewise.git.models import (
    AppFileStatusKind,
    ConflictedFileStatus,
    CopiedOrRenamedFileStatus,
)
from stagewise.selection.diff_selection import DiffSelectionType
from stagewise.status.file_change import WorkingDirectoryFileChange
from stagewise.status.working_directory import WorkingDirectoryStatus

_STATUS_STYLE = {
    AppFileStatusKind.NEW: "green",
    AppFileStatusKind.MODIFIED: "yellow",
    AppFileStatusKind.DELETED: "red",
    AppFileStatusKind.COPIED: "cyan",
    AppFileStatusKind.RENAMED: "cyan",
    AppFileStatusKind.CONFLICTED: "bold white on red",
    AppFileStatusKind.RESOLVED: "bold green",
}

_CHECKBOX = {
    DiffSelectionType.ALL: "[x]",
    DiffSelectionType.PARTIAL: "[-]",
    DiffSelectionType.NONE: "[ ]",
}


def _checkbox(include_all) -> str:
    if include_all is None:
        return _CHECKBOX[DiffSelectionType.PARTIAL]
    return _CHECKBOX[DiffSelectionType.ALL if include_all else DiffSelectionType.NONE]


def _status_cell(f: WorkingDirectoryFileChange) -> Text:
    status = f.status
    label = status.kind.value
    if isinstance(status, CopiedOrRenamedFileStatus):
        label = f"{label} from {status.old_path}"
    elif isinstance(status, ConflictedFileStatus):
        count = status.conflict_status.conflict_marker_count
        label = f"{label} (manual)" if count is None else f"{label} ({count} markers)"
    return Text(label, style=_STATUS_STYLE.get(status.kind, ""))


def render(
    status: WorkingDirectoryStatus,
    *,
    console: Console | None = None,
    show_summary: bool = True,
) -> None:
    """Print the working directory status to the terminal using Rich."""
    console = console or Console(stderr=True)

    if not len(status):
        console.print("[dim]No changes in the working directory.[/dim]")
        return

    table = Table(
        title=Text(f"{_checkbox(status.include_all)} Changes"),
        title_style="bold",
        border_style="dim",
    )
    table.add_column("", justify="center", width=3)
    table.add_column("Path", style="magenta")
    table.add_column("Status")

    for f in status.files:
        selection_type = f.selection.get_selection_type()
        table.add_row(Text(_CHECKBOX[selection_type]), Text(f.path), _status_cell(f))

    console.print(table)

    if show_summary:
        _print_summary(console, status)


def _print_summary(console: Console, status: WorkingDirectoryStatus) -> None:
    state = {True: "all", False: "none", None: "mixed"}[status.include_all]
    console.print()
    console.print(f"[dim]Files:[/dim]     {len(status)}")
    console.print(f"[dim]Included:[/dim]  {len(status.included_files())}")
    console.print(f"[dim]Include:[/dim]   {state}")
