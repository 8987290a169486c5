"""
Theme document persistence.

Reads and writes theme documents (a Theme, a ColorScheme, or an export
bundle) as JSON or YAML. The format is chosen from the file extension.
"""

from __future__ import annotations

import json
import logging
from enum import StrEnum
from pathlib import Path
from typing import Any

import yaml

from .errors import ThemeFileError

logger = logging.getLogger(__name__)


class DocumentFormat(StrEnum):
    """Supported theme document formats."""

    JSON = "json"
    YAML = "yaml"


_EXTENSIONS: dict[str, DocumentFormat] = {
    ".json": DocumentFormat.JSON,
    ".yaml": DocumentFormat.YAML,
    ".yml": DocumentFormat.YAML,
}


def detect_format(path: Path) -> DocumentFormat:
    """Pick the document format from the file extension.

    Raises:
        ThemeFileError: For unsupported extensions.
    """
    try:
        return _EXTENSIONS[path.suffix.lower()]
    except KeyError:
        raise ThemeFileError(
            f"Unsupported theme document type {path.suffix!r} (expected .json, .yaml or .yml)"
        ) from None


def load_theme_document(path: Path | str) -> dict[str, Any]:
    """
    Load a theme document.

    Args:
        path: ``.json``, ``.yaml`` or ``.yml`` file.

    Returns:
        The parsed top-level mapping.

    Raises:
        ThemeFileError: If the file is missing, unreadable, malformed, or
            does not contain a mapping.
    """
    path = Path(path)
    fmt = detect_format(path)

    if not path.exists():
        raise ThemeFileError(f"Theme document not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ThemeFileError(f"Cannot read {path}: {e}") from e

    try:
        if fmt is DocumentFormat.JSON:
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except json.JSONDecodeError as e:
        raise ThemeFileError(f"Invalid JSON in {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ThemeFileError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ThemeFileError(f"Expected a mapping at the top of {path}")

    logger.debug(f"Loaded theme document from {path}")
    return data


def save_theme_document(path: Path | str, data: dict[str, Any]) -> Path:
    """
    Write a theme document.

    Args:
        path: Target ``.json``, ``.yaml`` or ``.yml`` file.
        data: JSON-ready data (for models, use ``to_json_dict()``).

    Returns:
        Path to the written file.
    """
    path = Path(path)
    fmt = detect_format(path)

    if fmt is DocumentFormat.JSON:
        content = json.dumps(data, indent=2) + "\n"
    else:
        content = yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ThemeFileError(f"Cannot write {path}: {e}") from e

    logger.info(f"Saved theme document to {path}")
    return path
