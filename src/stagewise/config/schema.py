"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

SelectionDefault = Literal["all", "none"]
OutputFormat = Literal["terminal", "json"]


@dataclass
class StatusConfig:
    strict_ids: bool = False  # reject files that share an id instead of shadowing
    initial_selection: SelectionDefault = "all"  # selection for files without one


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True


@dataclass
class StagewiseConfig:
    version: str = "1.0"
    status: StatusConfig = field(default_factory=StatusConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
