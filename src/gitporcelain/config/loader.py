"""Load and merge configuration from .gitporcelain.toml and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitporcelain.config.schema import (
    OUTPUT_FORMATS,
    GitPorcelainConfig,
    OutputConfig,
    ParseConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".gitporcelain.toml"

_TRUTHY = ("1", "true", "yes")
_FALSY = ("0", "false", "no")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: GitPorcelainConfig) -> None:
    """Apply GITPORCELAIN_* environment variable overrides."""
    if val := os.environ.get("GITPORCELAIN_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
        else:
            logger.debug("ignoring invalid GITPORCELAIN_FORMAT=%r", val)
    if val := os.environ.get("GITPORCELAIN_NULL_TERMINATED"):
        if val.lower() in _TRUTHY:
            cfg.parse.null_terminated = True
        elif val.lower() in _FALSY:
            cfg.parse.null_terminated = False


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _check_bools(section: Any, name: str) -> None:
    """Reject non-boolean values for boolean fields."""
    for f in dataclasses.fields(section):
        if f.type in ("bool", bool):
            value = getattr(section, f.name)
            if not isinstance(value, bool):
                raise ConfigError(f"[{name}] {f.name} must be true or false, got {value!r}")


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> GitPorcelainConfig:
    """Load, validate, and return a GitPorcelainConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = GitPorcelainConfig()
    else:
        logger.debug("loading config from %s", config_path)
        raw = _parse_toml(config_path)
        cfg = GitPorcelainConfig(
            version=raw.get("version", "1.0"),
            parse=_build_section(raw, ParseConfig, "parse"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        if cfg.output.format not in OUTPUT_FORMATS:
            raise ConfigError(f"Invalid output format: {cfg.output.format!r}")
        _check_bools(cfg.parse, "parse")
        _check_bools(cfg.output, "output")

    _merge_env_overrides(cfg)
    return cfg
