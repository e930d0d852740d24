"""Load and merge configuration from .stagewise.toml and env vars."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from stagewise.config.schema import OutputConfig, StagewiseConfig, StatusConfig

CONFIG_FILENAME = ".stagewise.toml"

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    import dataclasses

    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: StagewiseConfig) -> None:
    if cfg.status.initial_selection not in ("all", "none"):
        raise ConfigError(
            f"Invalid status.initial_selection: {cfg.status.initial_selection!r}"
        )
    if cfg.output.format not in ("terminal", "json"):
        raise ConfigError(f"Invalid output.format: {cfg.output.format!r}")
    if not isinstance(cfg.status.strict_ids, bool):
        raise ConfigError("status.strict_ids must be a boolean")
    if not isinstance(cfg.output.show_summary, bool):
        raise ConfigError("output.show_summary must be a boolean")


def _merge_env_overrides(cfg: StagewiseConfig) -> None:
    """Apply STAGEWISE_* environment variable overrides. Invalid values are ignored."""
    if val := os.environ.get("STAGEWISE_FORMAT"):
        if val in ("terminal", "json"):
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("STAGEWISE_INITIAL_SELECTION"):
        if val in ("all", "none"):
            cfg.status.initial_selection = val  # type: ignore[assignment]
    if val := os.environ.get("STAGEWISE_STRICT_IDS"):
        if val.lower() in _TRUE_VALUES:
            cfg.status.strict_ids = True
        elif val.lower() in _FALSE_VALUES:
            cfg.status.strict_ids = False


def load_config(root: Path, config_override: Optional[str] = None) -> StagewiseConfig:
    """Load, validate, and return a StagewiseConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = StagewiseConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = StagewiseConfig(
            version=raw.get("version", "1.0"),
            status=_build_section(raw, StatusConfig, "status"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
