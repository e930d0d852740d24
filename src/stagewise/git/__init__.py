"""Git status layer — status codes, porcelain entries, classification, snapshots."""

from stagewise.git.classify import ClassificationError, is_conflicted_entry, to_app_status
from stagewise.git.models import (
    AppFileStatus,
    AppFileStatusKind,
    ConflictedFileStatus,
    ConflictFileStatus,
    CopiedOrRenamedFileStatus,
    OrdinaryEntry,
    PlainFileStatus,
    PorcelainEntry,
    RenamedOrCopiedEntry,
    ResolvedFileStatus,
    StatusEntryCode,
    UnmergedEntry,
    UntrackedEntry,
)

__all__ = [
    "AppFileStatus",
    "AppFileStatusKind",
    "ClassificationError",
    "ConflictFileStatus",
    "ConflictedFileStatus",
    "CopiedOrRenamedFileStatus",
    "OrdinaryEntry",
    "PlainFileStatus",
    "PorcelainEntry",
    "RenamedOrCopiedEntry",
    "ResolvedFileStatus",
    "StatusEntryCode",
    "UnmergedEntry",
    "UntrackedEntry",
    "is_conflicted_entry",
    "to_app_status",
]
