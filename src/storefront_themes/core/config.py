"""
Engine configuration.

Settings are read from ``storefront_themes.toml`` in the project root, or
from the ``[tool.storefront_themes]`` table of ``pyproject.toml`` when no
dedicated file exists:

    fallback_color = "#70843d"
    fallback_gradient = "linear-gradient(135deg, #70843d 0%, #7bd63c 100%)"
    include_utilities = true
    platform_name = "Ecom"
    log_level = "INFO"

Environment variables override the file:
    STOREFRONT_THEMES_FALLBACK_COLOR - fallback color for missing lookups
    LOG_LEVEL                        - logging level
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .color import normalize_hex
from .defaults import DEFAULT_GRADIENT, DEFAULT_PRIMARY_COLOR
from .errors import ThemeFileError

logger = logging.getLogger(__name__)

CONFIG_FILE = "storefront_themes.toml"
PYPROJECT_FILE = "pyproject.toml"
TOOL_TABLE = "storefront_themes"

FALLBACK_COLOR_ENV = "STOREFRONT_THEMES_FALLBACK_COLOR"
LOG_LEVEL_ENV = "LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EngineConfig:
    """Theme engine settings."""

    fallback_color: str = DEFAULT_PRIMARY_COLOR
    fallback_gradient: str = DEFAULT_GRADIENT
    include_utilities: bool = True
    platform_name: str = "Ecom"
    log_level: str = "INFO"


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ThemeFileError(f"Invalid TOML in {path}: {e}") from e


def _find_config_table(project_root: Path) -> dict[str, Any]:
    config_path = project_root / CONFIG_FILE
    if config_path.exists():
        logger.debug(f"Reading config from {config_path}")
        return _read_toml(config_path)

    pyproject_path = project_root / PYPROJECT_FILE
    if pyproject_path.exists():
        table = _read_toml(pyproject_path).get("tool", {}).get(TOOL_TABLE, {})
        if table:
            logger.debug(f"Reading config from [tool.{TOOL_TABLE}] in {pyproject_path}")
        return dict(table)

    return {}


def _normalize_level(value: str) -> str:
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        expected = ", ".join(_LOG_LEVELS)
        raise ThemeFileError(f"Invalid log level {value!r} (expected one of {expected})")
    return level


def load_config(
    project_root: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> EngineConfig:
    """
    Load engine settings.

    Args:
        project_root: Directory holding the config file (default: cwd).
        env: Environment mapping (default: ``os.environ``).

    Raises:
        ThemeFileError: If the config file is malformed or holds an
            invalid value.
    """
    root = Path(project_root) if project_root is not None else Path.cwd()
    environ = os.environ if env is None else env
    data = _find_config_table(root)

    defaults = EngineConfig()
    fallback_color = environ.get(FALLBACK_COLOR_ENV) or data.get(
        "fallback_color", defaults.fallback_color
    )
    log_level = environ.get(LOG_LEVEL_ENV) or data.get("log_level", defaults.log_level)

    try:
        fallback_color = normalize_hex(fallback_color)
    except ValueError as e:
        raise ThemeFileError(f"Invalid fallback_color: {e}") from e

    return EngineConfig(
        fallback_color=fallback_color,
        fallback_gradient=str(data.get("fallback_gradient", defaults.fallback_gradient)),
        include_utilities=bool(data.get("include_utilities", defaults.include_utilities)),
        platform_name=str(data.get("platform_name", defaults.platform_name)),
        log_level=_normalize_level(str(log_level)),
    )
