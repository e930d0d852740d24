"""Diff selection — which lines of a file's diff are included."""

from stagewise.selection.diff_selection import DiffSelection, DiffSelectionType

__all__ = ["DiffSelection", "DiffSelectionType"]
