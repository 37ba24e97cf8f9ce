"""Configuration loading for wuw (.wuw.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .classifier import DEFAULT_STD_PREFIXES, LOOKUP_NAMES
from .imports import DEFAULT_STOP_AFTER

CONFIG_FILENAME = ".wuw.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class WuwConfig:
    """Settings defined in .wuw.yml."""

    root: Path
    no_std: bool = False
    source_suffix: str = ".go"
    stop_after: int = DEFAULT_STOP_AFTER
    std_prefixes: List[str] = field(default_factory=lambda: list(DEFAULT_STD_PREFIXES))
    std_lookup: str = "toolchain"
    go_binary: str = "go"


def load_config(config_path: Path) -> WuwConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return WuwConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = WuwConfig(root=root)

    no_std = _as_bool(data.get("no_std"))
    if no_std is not None:
        config.no_std = no_std

    suffix = _as_str(data.get("source_suffix"))
    if suffix:
        config.source_suffix = suffix if suffix.startswith(".") else f".{suffix}"

    if "stop_after" in data:
        stop_after = _as_int(data.get("stop_after"))
        if stop_after is None or stop_after < 1:
            raise ConfigError("stop_after must be a positive integer")
        config.stop_after = stop_after

    if "std_prefixes" in data:
        config.std_prefixes = _as_str_list(data.get("std_prefixes"))

    lookup = _as_str(data.get("std_lookup"))
    if lookup is not None:
        lookup = lookup.lower()
        if lookup not in LOOKUP_NAMES:
            choices = ", ".join(LOOKUP_NAMES)
            raise ConfigError(f"std_lookup must be one of: {choices}")
        config.std_lookup = lookup

    go_binary = _as_str(data.get("go_binary"))
    if go_binary:
        config.go_binary = go_binary

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "WuwConfig", "load_config"]
