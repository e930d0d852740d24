"""Tests for file change identity and selection."""

import pytest

from conftest import make_file
from stagewise.git.models import (
    AppFileStatusKind,
    ConflictedFileStatus,
    ConflictFileStatus,
    CopiedOrRenamedFileStatus,
    PlainFileStatus,
    ResolvedFileStatus,
    StatusEntryCode,
    UnmergedEntry,
)
from stagewise.selection.diff_selection import DiffSelection, DiffSelectionType
from stagewise.status.file_change import (
    CommittedFileChange,
    FileChange,
    WorkingDirectoryFileChange,
    file_change_id,
)


class TestFileChangeId:
    def test_renamed_includes_old_path(self):
        change = FileChange("b.txt", CopiedOrRenamedFileStatus(AppFileStatusKind.RENAMED, "a.txt"))
        assert change.id == "Renamed+b.txt+a.txt"

    def test_copied_includes_old_path(self):
        change = FileChange("b.txt", CopiedOrRenamedFileStatus(AppFileStatusKind.COPIED, "a.txt"))
        assert change.id == "Copied+b.txt+a.txt"

    @pytest.mark.parametrize(
        "kind", [AppFileStatusKind.NEW, AppFileStatusKind.MODIFIED, AppFileStatusKind.DELETED]
    )
    def test_plain_kinds(self, kind):
        assert FileChange("x", PlainFileStatus(kind)).id == f"{kind.value}+x"

    def test_conflicted_and_resolved(self):
        entry = UnmergedEntry("m.txt", StatusEntryCode.ADDED, StatusEntryCode.ADDED)
        conflicted = FileChange("m.txt", ConflictedFileStatus(ConflictFileStatus(entry, 1)))
        resolved = FileChange("m.txt", ResolvedFileStatus())
        assert conflicted.id == "Conflicted+m.txt"
        assert resolved.id == "Resolved+m.txt"
        assert conflicted.id != resolved.id

    def test_same_path_different_kind(self):
        new = FileChange("x", PlainFileStatus(AppFileStatusKind.NEW))
        modified = FileChange("x", PlainFileStatus(AppFileStatusKind.MODIFIED))
        assert new.id == "New+x"
        assert modified.id == "Modified+x"

    def test_deterministic(self):
        status = CopiedOrRenamedFileStatus(AppFileStatusKind.RENAMED, "a.txt")
        assert FileChange("b.txt", status).id == FileChange("b.txt", status).id
        assert file_change_id("b.txt", status) == "Renamed+b.txt+a.txt"

    def test_id_not_settable(self):
        with pytest.raises(TypeError):
            FileChange("x", PlainFileStatus(AppFileStatusKind.NEW), id="other")  # type: ignore[call-arg]


class TestWorkingDirectoryFileChange:
    def test_exposes_change_fields(self):
        f = make_file("b.txt", AppFileStatusKind.RENAMED, old_path="a.txt")
        assert f.path == "b.txt"
        assert f.status.old_path == "a.txt"
        assert f.id == "Renamed+b.txt+a.txt"

    def test_with_include_all_false(self):
        f = make_file("a.py")
        excluded = f.with_include_all(False)
        assert excluded.selection.get_selection_type() == DiffSelectionType.NONE
        assert f.selection.get_selection_type() == DiffSelectionType.ALL
        assert excluded.id == f.id
        assert excluded.path == f.path
        assert excluded.status == f.status

    def test_with_include_all_true_from_partial(self, partial_selection):
        f = make_file("a.py").with_selection(partial_selection)
        assert f.selection.get_selection_type() == DiffSelectionType.PARTIAL
        included = f.with_include_all(True)
        assert included.selection.get_selection_type() == DiffSelectionType.ALL

    def test_with_selection_returns_new_instance(self):
        f = make_file("a.py")
        sel = DiffSelection.from_initial_selection(DiffSelectionType.NONE)
        updated = f.with_selection(sel)
        assert updated is not f
        assert updated.selection is sel
        assert updated.change == f.change

    def test_frozen(self):
        f = make_file("a.py")
        with pytest.raises(AttributeError):
            f.selection = DiffSelection.from_initial_selection(DiffSelectionType.NONE)  # type: ignore[misc]


class TestCommittedFileChange:
    def test_commitish(self):
        change = CommittedFileChange.create(
            "lib.py", PlainFileStatus(AppFileStatusKind.DELETED), "abc1234"
        )
        assert change.commitish == "abc1234"
        assert change.id == "Deleted+lib.py"
        assert change.path == "lib.py"
        assert change.status.kind == AppFileStatusKind.DELETED

    def test_same_identity_as_working_change(self):
        status = PlainFileStatus(AppFileStatusKind.MODIFIED)
        committed = CommittedFileChange.create("a.py", status, "HEAD")
        working = WorkingDirectoryFileChange.create(
            "a.py", status, DiffSelection.from_initial_selection(DiffSelectionType.ALL)
        )
        assert committed.id == working.id
