"""JSON reporter for working directory status."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from stagewise.git.models import ConflictedFileStatus, CopiedOrRenamedFileStatus
from stagewise.status.file_change import WorkingDirectoryFileChange
from stagewise.status.working_directory import WorkingDirectoryStatus


def file_to_dict(f: WorkingDirectoryFileChange) -> Dict[str, Any]:
    status = f.status
    selection = f.selection
    extra: Dict[str, Any] = {}
    if isinstance(status, CopiedOrRenamedFileStatus):
        extra["old_path"] = status.old_path
    elif isinstance(status, ConflictedFileStatus):
        extra["conflict_marker_count"] = status.conflict_status.conflict_marker_count
    if selection.diverging_lines:
        extra["diverging_lines"] = sorted(selection.diverging_lines)

    return {
        "id": f.id,
        "path": f.path,
        "status": status.kind.value,
        "selection": selection.get_selection_type().value,
        **extra,
    }


def to_dict(status: WorkingDirectoryStatus) -> Dict[str, Any]:
    """Convert a WorkingDirectoryStatus to a JSON-serialisable dict."""
    files: List[Dict[str, Any]] = [file_to_dict(f) for f in status.files]
    return {
        "version": "1.0",
        "total_files": len(status),
        "included_files": len(status.included_files()),
        "include_all": status.include_all,
        "files": files,
    }


def render(status: WorkingDirectoryStatus) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(status), indent=2)
