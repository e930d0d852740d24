"""Data models for git status entries and application file status."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Union


class StatusEntryCode(str, Enum):
    """The status entry code as reported by git."""

    MODIFIED = "M"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UNCHANGED = "."
    UNTRACKED = "?"
    IGNORED = "!"
    # Valid in porcelain output; conflicts are classified separately below
    UPDATED_BUT_UNMERGED = "U"


class AppFileStatusKind(str, Enum):
    """How the application classifies a changed file."""

    NEW = "New"
    MODIFIED = "Modified"
    DELETED = "Deleted"
    COPIED = "Copied"
    RENAMED = "Renamed"
    CONFLICTED = "Conflicted"
    RESOLVED = "Resolved"


# --- Porcelain entries ---


@dataclass(frozen=True, slots=True)
class OrdinaryEntry:
    """An ordinary changed entry."""

    path: str
    type: Literal["added", "modified", "deleted"]
    index: Optional[StatusEntryCode] = None
    working_tree: Optional[StatusEntryCode] = None

    @property
    def kind(self) -> str:
        return "ordinary"


@dataclass(frozen=True, slots=True)
class RenamedOrCopiedEntry:
    """A renamed or copied entry."""

    path: str
    old_path: str
    kind: Literal["renamed", "copied"]
    index: Optional[StatusEntryCode] = None
    working_tree: Optional[StatusEntryCode] = None

    def __post_init__(self) -> None:
        if self.kind not in ("renamed", "copied"):
            raise ValueError(f"{self.kind!r} is not a renamed or copied entry kind")


@dataclass(frozen=True, slots=True)
class UnmergedEntry:
    """An unmerged entry. ``us`` and ``them`` are the two halves of the short code."""

    path: str
    us: StatusEntryCode
    them: StatusEntryCode

    @property
    def kind(self) -> str:
        return "conflicted"


@dataclass(frozen=True, slots=True)
class UntrackedEntry:
    path: str

    @property
    def kind(self) -> str:
        return "untracked"


PorcelainEntry = Union[OrdinaryEntry, RenamedOrCopiedEntry, UnmergedEntry, UntrackedEntry]


# --- Application status ---


@dataclass(frozen=True)
class ConflictFileStatus:
    """Conflict detail attached to a conflicted file.

    ``conflict_marker_count`` is ``None`` for conflicts that cannot be resolved
    by editing markers (binary files, modify/delete), otherwise the number of
    conflict markers still present in the working tree copy.
    """

    entry: UnmergedEntry
    conflict_marker_count: Optional[int] = None

    @property
    def is_manual(self) -> bool:
        return self.conflict_marker_count is None


_PLAIN_KINDS = frozenset(
    {AppFileStatusKind.NEW, AppFileStatusKind.MODIFIED, AppFileStatusKind.DELETED}
)
_COPIED_OR_RENAMED_KINDS = frozenset({AppFileStatusKind.COPIED, AppFileStatusKind.RENAMED})


@dataclass(frozen=True)
class PlainFileStatus:
    kind: AppFileStatusKind

    def __post_init__(self) -> None:
        if self.kind not in _PLAIN_KINDS:
            raise ValueError(f"{self.kind!r} is not a plain file status")


@dataclass(frozen=True)
class CopiedOrRenamedFileStatus:
    kind: AppFileStatusKind
    old_path: str

    def __post_init__(self) -> None:
        if self.kind not in _COPIED_OR_RENAMED_KINDS:
            raise ValueError(f"{self.kind!r} is not a copied or renamed status")
        if not self.old_path:
            raise ValueError("old_path is required for copied and renamed files")


@dataclass(frozen=True)
class ConflictedFileStatus:
    conflict_status: ConflictFileStatus

    @property
    def kind(self) -> AppFileStatusKind:
        return AppFileStatusKind.CONFLICTED


@dataclass(frozen=True)
class ResolvedFileStatus:
    """Placeholder until conflict resolution state carries more detail."""

    @property
    def kind(self) -> AppFileStatusKind:
        return AppFileStatusKind.RESOLVED


AppFileStatus = Union[
    PlainFileStatus, CopiedOrRenamedFileStatus, ConflictedFileStatus, ResolvedFileStatus
]
