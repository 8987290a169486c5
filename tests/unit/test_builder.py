"""Tests for building themes from the admin form."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from storefront_themes.core.builder import ThemeForm, build_theme, generate_slug, parse_tags
from storefront_themes.core.composer import compose_scheme
from storefront_themes.core.defaults import (
    DEFAULT_BORDERS,
    DEFAULT_SPACING,
    DEFAULT_TYPOGRAPHY,
)
from storefront_themes.core.errors import InvalidColorFormat, ThemeError
from storefront_themes.core.overrides import set_ui_color


class TestSlugAndTags:
    """Test slug and tag helpers."""

    @pytest.mark.parametrize(
        ("name", "slug"),
        [
            ("Ocean Blue", "ocean-blue"),
            ("Summer Sale 2024!", "summer-sale-2024"),
            ("  Dark   Mode  ", "dark-mode"),
            ("Rose & Gold", "rose-gold"),
            ("already-a-slug", "already-a-slug"),
        ],
    )
    def test_generate_slug(self, name: str, slug: str):
        assert generate_slug(name) == slug

    def test_parse_tags(self):
        assert parse_tags("a, b,,c") == ["a", "b", "c"]
        assert parse_tags(" summer ,sale ") == ["summer", "sale"]
        assert parse_tags("") == []
        assert parse_tags(None) == []
        assert parse_tags(["x", " ", "y "]) == ["x", "y"]


class TestThemeForm:
    """Test the admin form model."""

    def test_defaults(self):
        form = ThemeForm(name="Ocean Blue")
        assert form.primary_color == "#70843d"
        assert form.secondary_color == "#7bd63c"
        assert form.tags == []
        assert form.is_default is False

    def test_camel_case_fields(self):
        form = ThemeForm.model_validate(
            {"name": "Ocean", "primaryColor": "#1E40AF", "isDefault": True, "tags": "sea, blue"}
        )
        assert form.primary_color == "#1E40AF"
        assert form.is_default is True
        assert form.tags == ["sea", "blue"]

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            ThemeForm(name="   ")

    def test_colors_kept_as_submitted(self):
        form = ThemeForm.model_validate({"name": "Ocean", "primaryColor": "#12"})
        assert form.primary_color == "#12"


class TestBuildTheme:
    """Test build_theme."""

    def test_builds_complete_theme(self):
        theme = build_theme(
            ThemeForm(name="Ocean Blue", primary_color="#1e40af", secondary_color="#0ea5e9")
        )
        assert theme.slug == "ocean-blue"
        assert theme.color_scheme.primary["500"] == "#1e40af"
        assert theme.color_scheme.secondary["500"] == "#0ea5e9"
        assert theme.typography == DEFAULT_TYPOGRAPHY
        assert theme.spacing == DEFAULT_SPACING
        assert theme.borders == DEFAULT_BORDERS
        assert theme.is_system is False
        assert theme.version == "1.0.0"

    def test_explicit_slug_kept(self):
        theme = build_theme(ThemeForm(name="Ocean Blue", slug="sea"))
        assert theme.slug == "sea"

    def test_keeps_previous_ui_colors(self):
        previous = set_ui_color(compose_scheme("#70843d", "#7bd63c"), "nav", "hover", "#abcdef")
        theme = build_theme(ThemeForm(name="Ocean", primary_color="#1e40af"), previous)
        assert theme.color_scheme.ui.nav.hover == "#abcdef"

    def test_normalizes_form_colors(self):
        theme = build_theme(ThemeForm.model_validate({"name": "Ocean", "primaryColor": "1E40AF"}))
        assert theme.color_scheme.primary["500"] == "#1e40af"

    @pytest.mark.parametrize(
        ("field", "value"),
        [("primaryColor", "#12"), ("secondaryColor", "not-a-color"), ("primaryColor", "")],
    )
    def test_bad_form_color_raises_invalid_color_format(self, field: str, value: str):
        form = ThemeForm.model_validate({"name": "Ocean", field: value})
        with pytest.raises(InvalidColorFormat) as exc_info:
            build_theme(form)
        assert exc_info.value.value == value
        assert isinstance(exc_info.value, ThemeError)

    def test_extra_theme_fields(self):
        theme = build_theme(ThemeForm(name="Ocean"), created_by="admin-1")
        assert theme.created_by == "admin-1"
