"""File changes in the working directory and in commits."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from stagewise.git.models import AppFileStatus, CopiedOrRenamedFileStatus
from stagewise.selection.diff_selection import DiffSelection


def file_change_id(path: str, status: AppFileStatus) -> str:
    """Return the identity of a change to *path* with *status*.

    Renames and copies include the old path, so the same destination reached
    from two sources yields two ids.
    """
    if isinstance(status, CopiedOrRenamedFileStatus):
        return f"{status.kind.value}+{path}+{status.old_path}"
    return f"{status.kind.value}+{path}"


@dataclass(frozen=True)
class FileChange:
    """A changed file, identified by path and status.

    ``id`` is derived from the other two fields at construction time.
    """

    path: str
    status: AppFileStatus
    id: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", file_change_id(self.path, self.status))


@dataclass(frozen=True)
class WorkingDirectoryFileChange:
    """A change in the working directory and the part of it selected for commit."""

    change: FileChange
    selection: DiffSelection

    @classmethod
    def create(
        cls, path: str, status: AppFileStatus, selection: DiffSelection
    ) -> WorkingDirectoryFileChange:
        return cls(FileChange(path, status), selection)

    @property
    def path(self) -> str:
        return self.change.path

    @property
    def status(self) -> AppFileStatus:
        return self.change.status

    @property
    def id(self) -> str:
        return self.change.id

    def with_include_all(self, include: bool) -> WorkingDirectoryFileChange:
        """Return a copy with everything (or nothing) selected."""
        selection = self.selection.with_select_all() if include else self.selection.with_select_none()
        return self.with_selection(selection)

    def with_selection(self, selection: DiffSelection) -> WorkingDirectoryFileChange:
        return replace(self, selection=selection)


@dataclass(frozen=True)
class CommittedFileChange:
    """A change to a file introduced by a commit.

    ``commitish`` dereferences to the commit holding the 'after' version of
    the file; its parent holds the 'before' version (or nothing, for a new
    file).
    """

    change: FileChange
    commitish: str

    @classmethod
    def create(cls, path: str, status: AppFileStatus, commitish: str) -> CommittedFileChange:
        return cls(FileChange(path, status), commitish)

    @property
    def path(self) -> str:
        return self.change.path

    @property
    def status(self) -> AppFileStatus:
        return self.change.status

    @property
    def id(self) -> str:
        return self.change.id
