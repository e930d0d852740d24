"""Working directory status — the set of changed files and their selection."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from stagewise.selection.diff_selection import DiffSelectionType
from stagewise.status.file_change import WorkingDirectoryFileChange

_LOGGER = logging.getLogger(__name__)


class DuplicateFileIdError(Exception):
    """Raised by strict construction when two files share an id."""

    def __init__(self, ids: Sequence[str]) -> None:
        self.ids = list(ids)
        super().__init__(f"duplicate file ids: {', '.join(self.ids)}")


def get_include_all_state(files: Sequence[WorkingDirectoryFileChange]) -> Optional[bool]:
    """Return True if every file is fully selected, False if none are, else None.

    An empty list counts as fully selected.
    """
    if not files:
        return True

    all_selected = all(
        f.selection.get_selection_type() == DiffSelectionType.ALL for f in files
    )
    none_selected = all(
        f.selection.get_selection_type() == DiffSelectionType.NONE for f in files
    )

    if all_selected:
        return True
    if none_selected:
        return False
    return None


def _find_duplicate_ids(files: Iterable[WorkingDirectoryFileChange]) -> List[str]:
    seen: set[str] = set()
    duplicates: List[str] = []
    for f in files:
        if f.id in seen and f.id not in duplicates:
            duplicates.append(f.id)
        seen.add(f.id)
    return duplicates


class WorkingDirectoryStatus:
    """The state of the working directory for a repository.

    Instances are immutable. Build one with :meth:`from_files`; every change
    to the file list produces a new instance.

    ``include_all`` drives the "include all" checkbox and is tracked apart
    from the per-file selections: ``None`` means some files are included and
    some are not.
    """

    __slots__ = ("_files", "_include_all", "_file_ix_by_id")

    def __init__(
        self,
        files: Iterable[WorkingDirectoryFileChange],
        include_all: Optional[bool] = True,
    ) -> None:
        self._files: Tuple[WorkingDirectoryFileChange, ...] = tuple(files)
        self._include_all = include_all
        # Later files shadow earlier ones that share an id
        self._file_ix_by_id: Dict[str, int] = {}
        for ix, f in enumerate(self._files):
            self._file_ix_by_id[f.id] = ix

    @classmethod
    def from_files(
        cls,
        files: Iterable[WorkingDirectoryFileChange],
        *,
        strict: bool = False,
    ) -> WorkingDirectoryStatus:
        """Create a status from *files*, deriving ``include_all`` from their selections.

        With ``strict``, files sharing an id raise :class:`DuplicateFileIdError`
        instead of the later file taking the lookup slot.
        """
        files = tuple(files)
        duplicates = _find_duplicate_ids(files)
        if duplicates:
            if strict:
                raise DuplicateFileIdError(duplicates)
            _LOGGER.debug("Duplicate file ids, later entries win lookup: %s", duplicates)
        return cls(files, get_include_all_state(files))

    @property
    def files(self) -> Tuple[WorkingDirectoryFileChange, ...]:
        return self._files

    @property
    def include_all(self) -> Optional[bool]:
        return self._include_all

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[WorkingDirectoryFileChange]:
        return iter(self._files)

    def __repr__(self) -> str:
        return f"WorkingDirectoryStatus(files={len(self._files)}, include_all={self._include_all!r})"

    def with_include_all_files(self, include_all: bool) -> WorkingDirectoryStatus:
        """Include or exclude every file.

        The new status reports ``include_all`` as given rather than
        recomputing it from the files.
        """
        files = [f.with_include_all(include_all) for f in self._files]
        return WorkingDirectoryStatus(files, include_all)

    def find_file_with_id(self, id: str) -> Optional[WorkingDirectoryFileChange]:
        ix = self._file_ix_by_id.get(id)
        return self._files[ix] if ix is not None else None

    def find_file_index_by_id(self, id: str) -> int:
        """Return the position of the file with *id*, or -1."""
        return self._file_ix_by_id.get(id, -1)

    def included_files(self) -> List[WorkingDirectoryFileChange]:
        """Files with at least part of their diff selected."""
        return [
            f for f in self._files
            if f.selection.get_selection_type() != DiffSelectionType.NONE
        ]

    def duplicate_ids(self) -> List[str]:
        return _find_duplicate_ids(self._files)
