"""
Theme export and import bundles.

A bundle is the JSON document admins download from one storefront and
upload to another:

    {
      "version": "1.0.0",
      "exportedAt": "...",
      "exportedBy": "admin@example.com",
      "themes": [{name, slug, description, colorScheme, ...}],
      "metadata": {"totalThemes": 1, "platform": "Ecom", "format": "json"}
    }
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from .defaults import DEFAULT_BORDERS, DEFAULT_SPACING, DEFAULT_TYPOGRAPHY
from .errors import ThemeError, ThemeValidationError
from .ir.theme import Theme
from .registry import ThemeRegistry
from .validation import validate_theme

logger = logging.getLogger(__name__)

BUNDLE_VERSION = "1.0.0"
DEFAULT_PLATFORM = "Ecom"

# Theme fields carried in a bundle, by JSON key
EXPORT_FIELDS: tuple[str, ...] = (
    "name",
    "slug",
    "description",
    "colorScheme",
    "typography",
    "spacing",
    "borders",
    "version",
    "tags",
    "preview",
)


@dataclass
class ImportResult:
    """Outcome of importing a bundle."""

    imported: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)

    def skip(self, message: str) -> None:
        self.skipped += 1
        self.errors.append(message)

    @property
    def message(self) -> str:
        return (
            f"Import completed. {self.imported} themes imported, {self.skipped} skipped."
        )


# =============================================================================
# Export
# =============================================================================


def export_filename(now: datetime | None = None) -> str:
    """Download filename for a bundle, stamped with epoch milliseconds."""
    moment = now or datetime.now(UTC)
    return f"ecom-themes-{int(moment.timestamp() * 1000)}.json"


def theme_to_export_dict(theme: Theme) -> dict[str, Any]:
    data = theme.to_json_dict()
    return {key: data[key] for key in EXPORT_FIELDS}


def export_themes(
    registry: ThemeRegistry,
    theme_id: str | None = None,
    include_system: bool = False,
    exported_by: str | None = None,
    now: datetime | None = None,
    platform: str = DEFAULT_PLATFORM,
) -> dict[str, Any]:
    """
    Build an export bundle.

    Args:
        registry: Theme catalog to export from.
        theme_id: Export only this theme (system or not).
        include_system: When exporting everything, include system themes.
        exported_by: Identity recorded in the bundle.
        now: Export timestamp (defaults to the current UTC time).
        platform: Platform name recorded in the metadata.

    Raises:
        ThemeNotFound: If theme_id is given and unknown.
    """
    if theme_id is not None:
        themes = [registry.get(theme_id)]
    else:
        themes = sorted(
            (t for t in registry.list_themes() if include_system or not t.is_system),
            key=lambda t: t.name,
        )

    exported = [theme_to_export_dict(t) for t in themes]
    logger.info("Exported %d theme(s)", len(exported))

    return {
        "version": BUNDLE_VERSION,
        "exportedAt": (now or datetime.now(UTC)).isoformat(),
        "exportedBy": exported_by,
        "themes": exported,
        "metadata": {
            "totalThemes": len(exported),
            "platform": platform,
            "format": "json",
        },
    }


# =============================================================================
# Import
# =============================================================================


def _theme_fields(theme_data: Mapping[str, Any]) -> dict[str, Any]:
    """Theme fields for an imported theme, filling token defaults."""
    return {
        "name": theme_data["name"],
        "description": theme_data.get("description"),
        "color_scheme": theme_data["colorScheme"],
        "typography": theme_data.get("typography") or DEFAULT_TYPOGRAPHY,
        "spacing": theme_data.get("spacing") or DEFAULT_SPACING,
        "borders": theme_data.get("borders") or DEFAULT_BORDERS,
        "version": theme_data.get("version") or "1.0.0",
        "tags": theme_data.get("tags") or [],
        "preview": theme_data.get("preview"),
        "is_active": True,
    }


def _import_one(
    registry: ThemeRegistry,
    theme_data: Mapping[str, Any],
    overwrite_existing: bool,
    created_by: str | None,
    result: ImportResult,
) -> None:
    slug = theme_data["slug"]
    existing = registry.get_by_slug(slug)

    if existing is None:
        registry.create(
            Theme(
                slug=slug,
                is_default=False,
                created_by=created_by,
                **_theme_fields(theme_data),
            )
        )
        result.imported += 1
    elif not overwrite_existing:
        result.skip(
            f'Skipped theme "{theme_data["name"]}": Theme with slug "{slug}" already exists'
        )
    elif existing.is_system:
        result.skip(f'Skipped theme "{theme_data["name"]}": cannot overwrite system theme')
    else:
        registry.update(existing.id, **_theme_fields(theme_data))
        result.imported += 1


def import_themes(
    registry: ThemeRegistry,
    bundle: Mapping[str, Any],
    overwrite_existing: bool = False,
    skip_invalid: bool = True,
    created_by: str | None = None,
) -> ImportResult:
    """
    Import the themes of a bundle into the registry.

    Imported themes are never system or default themes. Missing
    typography, spacing or borders fall back to the storefront defaults.

    Args:
        registry: Catalog to import into.
        bundle: Parsed bundle (only ``themes`` is required).
        overwrite_existing: Replace themes whose slug already exists;
            otherwise they are skipped.
        skip_invalid: Record invalid themes and continue; otherwise the
            first invalid theme aborts the import.
        created_by: Identity recorded on newly created themes.

    Raises:
        ThemeValidationError: If the bundle has no theme list, or a theme
            is invalid and skip_invalid is False.
    """
    themes = bundle.get("themes") if isinstance(bundle, Mapping) else None
    if not isinstance(themes, list):
        raise ThemeValidationError("Invalid import data. Expected array of themes.")

    result = ImportResult()
    for theme_data in themes:
        label = theme_data.get("name") if isinstance(theme_data, Mapping) else None
        label = label or "Unknown"

        check = validate_theme(theme_data)
        if not check.is_valid:
            if not skip_invalid:
                raise ThemeValidationError(f'Invalid theme data for theme "{label}"', check.errors)
            result.skip(f'Skipped theme "{label}": {"; ".join(check.errors)}')
            continue

        try:
            _import_one(registry, theme_data, overwrite_existing, created_by, result)
        except (ThemeError, ValidationError) as e:
            if not skip_invalid:
                raise ThemeValidationError(f'Error importing theme "{label}": {e}', [str(e)]) from e
            result.skip(f'Error importing theme "{label}": {e}')

    logger.info(result.message)
    return result
