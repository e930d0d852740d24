"""File changes and the working directory aggregate."""

from stagewise.status.file_change import (
    CommittedFileChange,
    FileChange,
    WorkingDirectoryFileChange,
    file_change_id,
)
from stagewise.status.working_directory import (
    DuplicateFileIdError,
    WorkingDirectoryStatus,
    get_include_all_state,
)

__all__ = [
    "CommittedFileChange",
    "DuplicateFileIdError",
    "FileChange",
    "WorkingDirectoryFileChange",
    "WorkingDirectoryStatus",
    "file_change_id",
    "get_include_all_state",
]
