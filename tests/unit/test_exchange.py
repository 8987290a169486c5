"""Tests for theme export / import bundles."""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from storefront_themes.core.composer import compose_scheme
from storefront_themes.core.defaults import DEFAULT_SPACING, DEFAULT_THEME_SLUG
from storefront_themes.core.errors import ThemeNotFound, ThemeValidationError
from storefront_themes.core.exchange import (
    EXPORT_FIELDS,
    export_filename,
    export_themes,
    import_themes,
)
from storefront_themes.core.ir import Theme
from storefront_themes.core.registry import ThemeRegistry

EXPORTED_AT = datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture
def populated(registry: ThemeRegistry, make_theme: Callable[..., Theme]) -> ThemeRegistry:
    registry.create(make_theme("Ocean", color_scheme=compose_scheme("#1e40af", "#0ea5e9")))
    registry.create(make_theme("Autumn", tags=["fall"]))
    return registry


class TestExport:
    """Test export_themes."""

    def test_bundle_shape(self, populated: ThemeRegistry):
        bundle = export_themes(populated, exported_by="admin@example.com", now=EXPORTED_AT)
        assert bundle["version"] == "1.0.0"
        assert bundle["exportedAt"] == "2024-01-01T00:00:00+00:00"
        assert bundle["exportedBy"] == "admin@example.com"
        assert bundle["metadata"] == {"totalThemes": 2, "platform": "Ecom", "format": "json"}

    def test_excludes_system_by_default(self, populated: ThemeRegistry):
        slugs = [t["slug"] for t in export_themes(populated)["themes"]]
        assert slugs == ["autumn", "ocean"]

    def test_include_system(self, populated: ThemeRegistry):
        slugs = [t["slug"] for t in export_themes(populated, include_system=True)["themes"]]
        assert DEFAULT_THEME_SLUG in slugs
        assert len(slugs) == 3

    def test_single_theme(self, populated: ThemeRegistry):
        ocean = populated.get_by_slug("ocean")
        assert ocean is not None
        bundle = export_themes(populated, theme_id=ocean.id)
        assert [t["slug"] for t in bundle["themes"]] == ["ocean"]
        assert bundle["metadata"]["totalThemes"] == 1

    def test_single_unknown_theme(self, populated: ThemeRegistry):
        with pytest.raises(ThemeNotFound):
            export_themes(populated, theme_id="missing")

    def test_exported_fields(self, populated: ThemeRegistry):
        theme = export_themes(populated)["themes"][0]
        assert tuple(theme) == EXPORT_FIELDS
        assert "id" not in theme
        assert "isSystem" not in theme

    def test_bundle_is_json_serializable(self, populated: ThemeRegistry):
        bundle = export_themes(populated, now=EXPORTED_AT)
        assert json.loads(json.dumps(bundle)) == bundle

    def test_filename(self):
        assert export_filename(EXPORTED_AT) == "ecom-themes-1704067200000.json"
        assert export_filename().startswith("ecom-themes-")


class TestImport:
    """Test import_themes."""

    def test_round_trip(self, populated: ThemeRegistry):
        bundle = export_themes(populated)
        target = ThemeRegistry()
        target.ensure_settings()

        result = import_themes(target, bundle)

        assert result.imported == 2
        assert result.skipped == 0
        ocean = target.get_by_slug("ocean")
        source = populated.get_by_slug("ocean")
        assert ocean is not None and source is not None
        assert ocean.color_scheme == source.color_scheme
        assert ocean.is_system is False
        assert ocean.is_default is False

    def test_missing_tokens_use_defaults(self, registry: ThemeRegistry):
        theme = _theme_data("Bare")
        result = import_themes(registry, {"themes": [theme]}, created_by="admin-1")
        assert result.imported == 1
        imported = registry.get_by_slug("bare")
        assert imported is not None
        assert imported.spacing == DEFAULT_SPACING
        assert imported.created_by == "admin-1"

    def test_existing_slug_skipped(self, populated: ThemeRegistry):
        result = import_themes(populated, {"themes": [_theme_data("Ocean")]})
        assert result.imported == 0
        assert result.skipped == 1
        assert 'slug "ocean" already exists' in result.errors[0]

    def test_existing_slug_overwritten(self, populated: ThemeRegistry):
        data = _theme_data("Ocean", description="Imported")
        result = import_themes(populated, {"themes": [data]}, overwrite_existing=True)
        assert result.imported == 1
        ocean = populated.get_by_slug("ocean")
        assert ocean is not None
        assert ocean.description == "Imported"

    def test_system_theme_never_overwritten(self, registry: ThemeRegistry):
        data = _theme_data("Ecom Green", slug=DEFAULT_THEME_SLUG)
        result = import_themes(registry, {"themes": [data]}, overwrite_existing=True)
        assert result.skipped == 1
        system = registry.get_by_slug(DEFAULT_THEME_SLUG)
        assert system is not None and system.is_system

    def test_invalid_theme_skipped(self, registry: ThemeRegistry):
        broken = _theme_data("Broken")
        del broken["slug"]
        result = import_themes(registry, {"themes": [broken, _theme_data("Good")]})
        assert result.imported == 1
        assert result.skipped == 1
        assert "Theme slug is required" in result.errors[0]

    def test_bad_color_scheme_skipped(self, registry: ThemeRegistry):
        broken = _theme_data("Broken")
        broken["colorScheme"]["primary"]["500"] = "not-a-color"
        result = import_themes(registry, {"themes": [broken]})
        assert result.skipped == 1
        assert result.errors[0].startswith('Error importing theme "Broken"')

    def test_invalid_theme_aborts_when_not_skipping(self, registry: ThemeRegistry):
        broken = _theme_data("Broken")
        del broken["colorScheme"]
        with pytest.raises(ThemeValidationError) as exc_info:
            import_themes(registry, {"themes": [broken]}, skip_invalid=False)
        assert "Color scheme is required" in exc_info.value.errors

    @pytest.mark.parametrize("bundle", [{}, {"themes": "nope"}, []])
    def test_bundle_without_theme_list(self, registry: ThemeRegistry, bundle: Any):
        with pytest.raises(ThemeValidationError):
            import_themes(registry, bundle)

    def test_result_message(self, registry: ThemeRegistry):
        result = import_themes(registry, {"themes": [_theme_data("One")]})
        assert result.message == "Import completed. 1 themes imported, 0 skipped."


def _theme_data(name: str, **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": name,
        "slug": name.lower().replace(" ", "-"),
        "colorScheme": compose_scheme("#1e40af", "#0ea5e9").to_json_dict(),
    }
    data.update(overrides)
    return data
