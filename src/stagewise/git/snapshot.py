"""Status snapshot documents — entries already produced by a status reader.

A snapshot is a YAML (or JSON) document::

    files:
      - path: src/app.py
        kind: ordinary          # ordinary | renamed | copied | conflicted | untracked
        type: modified          # ordinary only: added | modified | deleted
        index: M
        working_tree: "."
        selection:              # optional: all | none | mapping
          default: all
          lines: [3, 4]         # lines diverging from the default
          selectable: [1, 2, 3, 4, 5]
      - path: new_name.py
        kind: renamed
        old_path: old_name.py
      - path: merge.txt
        kind: conflicted
        us: U
        them: U
        conflict_marker_count: 2

A bare list of entries is accepted too.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml

from stagewise.git.classify import to_app_status
from stagewise.git.models import (
    ConflictFileStatus,
    OrdinaryEntry,
    PorcelainEntry,
    RenamedOrCopiedEntry,
    StatusEntryCode,
    UnmergedEntry,
    UntrackedEntry,
)
from stagewise.selection.diff_selection import DiffSelection, DiffSelectionType
from stagewise.status.file_change import WorkingDirectoryFileChange
from stagewise.status.working_directory import WorkingDirectoryStatus


class SnapshotError(Exception):
    """Raised when a snapshot document is unreadable or malformed."""


@dataclass(frozen=True)
class SnapshotItem:
    """One entry of a snapshot with its optional conflict detail and selection."""

    entry: PorcelainEntry
    conflict_status: Optional[ConflictFileStatus] = None
    selection: Optional[DiffSelection] = None


_SELECTION_NAMES = {
    "all": DiffSelectionType.ALL,
    "none": DiffSelectionType.NONE,
}


def _code(raw: Dict[str, Any], key: str, required: bool = False) -> Optional[StatusEntryCode]:
    value = raw.get(key)
    if value is None:
        if required:
            raise SnapshotError(f"{raw.get('path')}: missing '{key}'")
        return None
    try:
        return StatusEntryCode(str(value))
    except ValueError:
        raise SnapshotError(f"{raw.get('path')}: invalid status code {value!r}") from None


def _parse_selection(raw: Any, path: str) -> Optional[DiffSelection]:
    if raw is None:
        return None
    if isinstance(raw, str):
        if raw.lower() not in _SELECTION_NAMES:
            raise SnapshotError(f"{path}: unknown selection {raw!r}")
        return DiffSelection.from_initial_selection(_SELECTION_NAMES[raw.lower()])
    if not isinstance(raw, dict):
        raise SnapshotError(f"{path}: selection must be a string or mapping")

    default = str(raw.get("default", "all")).lower()
    if default not in _SELECTION_NAMES:
        raise SnapshotError(f"{path}: unknown selection default {default!r}")
    try:
        lines = frozenset(int(i) for i in raw.get("lines") or [])
        selectable = raw.get("selectable")
        selection = DiffSelection(_SELECTION_NAMES[default], lines)
        if selectable is not None:
            selection = selection.with_selectable_lines(int(i) for i in selectable)
    except (TypeError, ValueError) as exc:
        raise SnapshotError(f"{path}: invalid selection lines: {exc}") from exc
    return selection


def _parse_entry(raw: Any) -> SnapshotItem:
    if not isinstance(raw, dict):
        raise SnapshotError(f"Snapshot entry must be a mapping, got {type(raw).__name__}")
    path = raw.get("path")
    if not path or not isinstance(path, str):
        raise SnapshotError(f"Snapshot entry without a path: {raw!r}")

    kind = raw.get("kind", "ordinary")
    conflict_status: Optional[ConflictFileStatus] = None
    entry: PorcelainEntry

    if kind == "ordinary":
        entry_type = raw.get("type", "modified")
        if entry_type not in ("added", "modified", "deleted"):
            raise SnapshotError(f"{path}: invalid ordinary type {entry_type!r}")
        entry = OrdinaryEntry(
            path=path,
            type=entry_type,
            index=_code(raw, "index"),
            working_tree=_code(raw, "working_tree"),
        )
    elif kind in ("renamed", "copied"):
        old_path = raw.get("old_path")
        if not old_path:
            raise SnapshotError(f"{path}: {kind} entry requires 'old_path'")
        entry = RenamedOrCopiedEntry(
            path=path,
            old_path=str(old_path),
            kind=kind,
            index=_code(raw, "index"),
            working_tree=_code(raw, "working_tree"),
        )
    elif kind == "conflicted":
        entry = UnmergedEntry(
            path=path,
            us=_code(raw, "us", required=True),  # type: ignore[arg-type]
            them=_code(raw, "them", required=True),  # type: ignore[arg-type]
        )
        markers = raw.get("conflict_marker_count")
        try:
            marker_count = int(markers) if markers is not None else None
        except (TypeError, ValueError):
            raise SnapshotError(f"{path}: invalid conflict_marker_count {markers!r}") from None
        conflict_status = ConflictFileStatus(entry=entry, conflict_marker_count=marker_count)
    elif kind == "untracked":
        entry = UntrackedEntry(path=path)
    else:
        raise SnapshotError(f"{path}: unknown entry kind {kind!r}")

    return SnapshotItem(
        entry=entry,
        conflict_status=conflict_status,
        selection=_parse_selection(raw.get("selection"), path),
    )


def parse_snapshot(data: Any) -> List[SnapshotItem]:
    """Build snapshot items from an already-decoded document."""
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("files") or []
    if not isinstance(data, list):
        raise SnapshotError("Snapshot must be a list of entries or a mapping with 'files'")
    return [_parse_entry(raw) for raw in data]


def load_snapshot(path: Path) -> List[SnapshotItem]:
    """Read and parse the snapshot at *path*."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise SnapshotError(f"Failed to read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SnapshotError(f"Failed to parse {path}: {exc}") from exc
    return parse_snapshot(data)


def build_status(
    items: Iterable[SnapshotItem],
    *,
    strict: bool = False,
    initial_selection: DiffSelectionType = DiffSelectionType.ALL,
) -> WorkingDirectoryStatus:
    """Classify every item and aggregate the result.

    Items without an explicit selection start with *initial_selection*.
    """
    files = []
    for item in items:
        status = to_app_status(item.entry, item.conflict_status)
        selection = item.selection or DiffSelection.from_initial_selection(initial_selection)
        files.append(WorkingDirectoryFileChange.create(item.entry.path, status, selection))
    return WorkingDirectoryStatus.from_files(files, strict=strict)
