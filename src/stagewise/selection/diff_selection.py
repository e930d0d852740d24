"""Immutable line selection within a single file's diff."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional


class DiffSelectionType(str, Enum):
    ALL = "All"
    PARTIAL = "Partial"
    NONE = "None"


@dataclass(frozen=True)
class DiffSelection:
    """Which lines of a diff are included.

    The selection is stored as a default (everything selected or nothing
    selected) plus the set of line indices that diverge from that default.
    When ``selectable_lines`` is known, diverging lines are always a subset
    of it.
    """

    default_selection_type: DiffSelectionType
    diverging_lines: FrozenSet[int] = field(default_factory=frozenset)
    selectable_lines: Optional[FrozenSet[int]] = None

    def __post_init__(self) -> None:
        if self.default_selection_type == DiffSelectionType.PARTIAL:
            raise ValueError("default selection must be All or None")
        if self.selectable_lines is not None and not self.diverging_lines <= self.selectable_lines:
            object.__setattr__(
                self, "diverging_lines", self.diverging_lines & self.selectable_lines
            )

    @classmethod
    def from_initial_selection(cls, selection_type: DiffSelectionType) -> DiffSelection:
        return cls(default_selection_type=selection_type)

    def get_selection_type(self) -> DiffSelectionType:
        """Return All, None or Partial for the current selection."""
        if not self.diverging_lines:
            return self.default_selection_type

        # Every selectable line diverges, so the selection is the inverse default
        if (
            self.selectable_lines is not None
            and self.diverging_lines == self.selectable_lines
        ):
            if self.default_selection_type == DiffSelectionType.ALL:
                return DiffSelectionType.NONE
            return DiffSelectionType.ALL

        return DiffSelectionType.PARTIAL

    def is_selectable(self, line: int) -> bool:
        return self.selectable_lines is None or line in self.selectable_lines

    def is_selected(self, line: int) -> bool:
        diverges = line in self.diverging_lines
        if self.default_selection_type == DiffSelectionType.ALL:
            return not diverges
        return diverges

    def with_line_selection(self, line: int, selected: bool) -> DiffSelection:
        return self.with_range_selection(line, 1, selected)

    def with_range_selection(self, start: int, length: int, selected: bool) -> DiffSelection:
        """Select or deselect ``length`` lines starting at ``start``.

        Lines that are not selectable are left untouched.
        """
        diverges = selected != (self.default_selection_type == DiffSelectionType.ALL)
        lines = {i for i in range(start, start + length) if self.is_selectable(i)}
        if diverges:
            diverging = self.diverging_lines | lines
        else:
            diverging = self.diverging_lines - lines
        if diverging == self.diverging_lines:
            return self
        return replace(self, diverging_lines=frozenset(diverging))

    def with_toggle_line_selection(self, line: int) -> DiffSelection:
        return self.with_line_selection(line, not self.is_selected(line))

    def with_select_all(self) -> DiffSelection:
        return DiffSelection(DiffSelectionType.ALL, frozenset(), self.selectable_lines)

    def with_select_none(self) -> DiffSelection:
        return DiffSelection(DiffSelectionType.NONE, frozenset(), self.selectable_lines)

    def with_selectable_lines(self, lines: Iterable[int]) -> DiffSelection:
        """Restrict the selection to *lines*, dropping divergence outside them."""
        selectable = frozenset(lines)
        return replace(
            self,
            diverging_lines=self.diverging_lines & selectable,
            selectable_lines=selectable,
        )

    def selected_lines(self) -> List[int]:
        """Return the sorted indices of selected lines.

        Only known when the selectable lines have been set, except for a
        None-default selection where the selected lines are the diverging ones.
        """
        if self.selectable_lines is None:
            if self.default_selection_type == DiffSelectionType.NONE:
                return sorted(self.diverging_lines)
            raise ValueError("selectable lines are unknown for this selection")
        return sorted(i for i in self.selectable_lines if self.is_selected(i))
