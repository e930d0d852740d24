"""Map porcelain status entries to the application's file status."""

from __future__ import annotations

from typing import Optional

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
    UnmergedEntry,
    UntrackedEntry,
)


class ClassificationError(Exception):
    """Raised when an entry cannot be mapped to an application status."""


_ORDINARY_KINDS = {
    "added": AppFileStatusKind.NEW,
    "modified": AppFileStatusKind.MODIFIED,
    "deleted": AppFileStatusKind.DELETED,
}

_COPIED_OR_RENAMED_KINDS = {
    "renamed": AppFileStatusKind.RENAMED,
    "copied": AppFileStatusKind.COPIED,
}


def is_conflicted_entry(entry: PorcelainEntry) -> bool:
    return isinstance(entry, UnmergedEntry)


def to_app_status(
    entry: PorcelainEntry,
    conflict_status: Optional[ConflictFileStatus] = None,
) -> AppFileStatus:
    """Return the application status for *entry*.

    Conflicted entries need *conflict_status*. When the detail reports that no
    conflict markers are left, the file is classified as resolved.
    """
    if isinstance(entry, OrdinaryEntry):
        try:
            return PlainFileStatus(_ORDINARY_KINDS[entry.type])
        except KeyError:
            raise ClassificationError(
                f"Unknown ordinary entry type {entry.type!r} for {entry.path}"
            ) from None

    if isinstance(entry, UntrackedEntry):
        return PlainFileStatus(AppFileStatusKind.NEW)

    if isinstance(entry, RenamedOrCopiedEntry):
        try:
            kind = _COPIED_OR_RENAMED_KINDS[entry.kind]
        except KeyError:
            raise ClassificationError(
                f"Unknown renamed or copied entry kind {entry.kind!r} for {entry.path}"
            ) from None
        try:
            return CopiedOrRenamedFileStatus(kind, entry.old_path)
        except ValueError as exc:
            raise ClassificationError(f"{entry.path}: {exc}") from exc

    if isinstance(entry, UnmergedEntry):
        if conflict_status is None:
            raise ClassificationError(f"Conflicted file {entry.path} has no conflict detail")
        if conflict_status.entry.path != entry.path:
            raise ClassificationError(
                f"Conflict detail for {conflict_status.entry.path} "
                f"does not belong to {entry.path}"
            )
        if conflict_status.conflict_marker_count == 0:
            return ResolvedFileStatus()
        return ConflictedFileStatus(conflict_status)

    raise ClassificationError(f"Unsupported status entry: {entry!r}")
