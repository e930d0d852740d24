"""Shared test fixtures — file changes, selections, snapshot documents."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from stagewise.git.models import AppFileStatusKind, CopiedOrRenamedFileStatus, PlainFileStatus
from stagewise.selection.diff_selection import DiffSelection, DiffSelectionType
from stagewise.status.file_change import WorkingDirectoryFileChange


def make_file(
    path: str,
    kind: AppFileStatusKind = AppFileStatusKind.MODIFIED,
    selection: DiffSelectionType = DiffSelectionType.ALL,
    old_path: str | None = None,
) -> WorkingDirectoryFileChange:
    """Build a working directory change with a plain or renamed/copied status."""
    if old_path is not None:
        status = CopiedOrRenamedFileStatus(kind, old_path)
    else:
        status = PlainFileStatus(kind)
    return WorkingDirectoryFileChange.create(
        path, status, DiffSelection.from_initial_selection(selection)
    )


@pytest.fixture
def partial_selection() -> DiffSelection:
    """Lines 0-4 selectable, line 2 deselected."""
    return (
        DiffSelection.from_initial_selection(DiffSelectionType.ALL)
        .with_selectable_lines(range(5))
        .with_line_selection(2, False)
    )


@pytest.fixture
def sample_snapshot_yaml() -> str:
    """A snapshot with one entry of every kind."""
    return textwrap.dedent("""\
        files:
          - path: src/app.py
            kind: ordinary
            type: modified
            index: "."
            working_tree: M
          - path: README.md
            kind: ordinary
            type: added
            index: A
            selection: none
          - path: new_name.py
            kind: renamed
            old_path: old_name.py
            index: R
          - path: notes.txt
            kind: untracked
          - path: merge.txt
            kind: conflicted
            us: U
            them: U
            conflict_marker_count: 3
          - path: done.txt
            kind: conflicted
            us: A
            them: A
            conflict_marker_count: 0
          - path: partial.py
            kind: ordinary
            type: modified
            selection:
              default: all
              lines: [2]
              selectable: [0, 1, 2, 3]
    """)


@pytest.fixture
def sample_snapshot(tmp_path: Path, sample_snapshot_yaml: str) -> Path:
    path = tmp_path / "status.yaml"
    path.write_text(sample_snapshot_yaml, encoding="utf-8")
    return path


@pytest.fixture
def duplicate_snapshot(tmp_path: Path) -> Path:
    """Two entries that resolve to the same id."""
    path = tmp_path / "dupes.json"
    path.write_text(
        '[{"path": "a.txt", "type": "modified", "selection": "all"},'
        ' {"path": "a.txt", "type": "modified", "selection": "none"}]',
        encoding="utf-8",
    )
    return path
