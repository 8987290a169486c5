"""Tests for color scheme composition."""

from __future__ import annotations

import logging

import pytest

from storefront_themes.core.color import lightness_of
from storefront_themes.core.composer import build_gradients, compose_scheme, linear_gradient
from storefront_themes.core.defaults import DEFAULT_COLOR_SCHEME
from storefront_themes.core.errors import InvalidColorFormat
from storefront_themes.core.ir import ColorScheme
from storefront_themes.core.overrides import set_ui_color
from storefront_themes.core.ramp import generate_palette


class TestComposeScheme:
    """Test compose_scheme."""

    def test_ecom_green_scenario(self):
        scheme = compose_scheme("#70843d", "#7bd63c")
        assert scheme.primary["500"] == "#70843d"
        assert scheme.secondary["500"] == "#7bd63c"
        assert scheme.gradients.button == "linear-gradient(135deg, #70843d 0%, #7bd63c 100%)"

    def test_black_primary_scenario(self):
        scheme = compose_scheme("#000000", "#7bd63c")
        assert lightness_of(scheme.primary["50"]) >= 90.0
        assert lightness_of(scheme.primary["900"]) <= 15.0

    def test_ramps_match_generator(self):
        scheme = compose_scheme("#1e40af", "#f59e0b")
        assert scheme.primary == generate_palette("#1e40af")
        assert scheme.secondary == generate_palette("#f59e0b")

    def test_link_and_focus_follow_primary(self):
        scheme = compose_scheme("#1E40AF", "#f59e0b")
        assert scheme.text.link == "#1e40af"
        assert scheme.text.link_hover == scheme.primary["600"]
        assert scheme.border.focus == "#1e40af"

    def test_gradients(self):
        scheme = compose_scheme("#1e40af", "#f59e0b")
        p600 = scheme.primary["600"]
        s600 = scheme.secondary["600"]
        assert scheme.gradients.primary == (
            f"linear-gradient(135deg, #1e40af 0%, {p600} 50%, #f59e0b 100%)"
        )
        assert scheme.gradients.secondary == f"linear-gradient(135deg, #f59e0b 0%, {s600} 100%)"
        assert scheme.gradients.accent == "linear-gradient(135deg, #f59e0b 0%, #1e40af 100%)"

    def test_hero_and_card_gradients_come_from_defaults(self):
        scheme = compose_scheme("#1e40af", "#f59e0b")
        assert scheme.gradients.hero == DEFAULT_COLOR_SCHEME.gradients.hero
        assert scheme.gradients.card == DEFAULT_COLOR_SCHEME.gradients.card

    def test_fixed_sections_come_from_defaults(self):
        scheme = compose_scheme("#1e40af", "#f59e0b")
        assert scheme.neutral == DEFAULT_COLOR_SCHEME.neutral
        assert scheme.error == DEFAULT_COLOR_SCHEME.error
        assert scheme.background == DEFAULT_COLOR_SCHEME.background
        assert scheme.ui == DEFAULT_COLOR_SCHEME.ui

    def test_deterministic(self):
        first = compose_scheme("#70843d", "#7bd63c")
        second = compose_scheme("#70843d", "#7bd63c")
        assert first.to_json() == second.to_json()

    def test_json_key_order(self):
        data = compose_scheme("#70843d", "#7bd63c").to_json_dict()
        assert list(data) == [
            "primary",
            "secondary",
            "neutral",
            "success",
            "error",
            "warning",
            "info",
            "background",
            "text",
            "border",
            "gradients",
            "ui",
        ]
        assert "linkHover" in data["text"]
        assert "outOfStock" in data["ui"]["badge"]

    def test_defaults_not_mutated(self):
        before = DEFAULT_COLOR_SCHEME.to_json()
        compose_scheme("#1e40af", "#f59e0b")
        assert DEFAULT_COLOR_SCHEME.to_json() == before

    def test_custom_defaults_template(self):
        template = set_ui_color(DEFAULT_COLOR_SCHEME, "nav", "background", "#000000")
        scheme = compose_scheme("#1e40af", "#f59e0b", defaults=template)
        assert scheme.ui.nav.background == "#000000"


class TestPreviousScheme:
    """UI customizations survive regeneration."""

    def test_preserves_ui_from_scheme(self):
        previous = set_ui_color(
            compose_scheme("#70843d", "#7bd63c"), "badge", "sale", "#123456"
        )
        scheme = compose_scheme("#1e40af", "#f59e0b", previous)
        assert scheme.ui.badge.sale == "#123456"
        assert scheme.primary["500"] == "#1e40af"

    def test_preserves_ui_from_partial_mapping(self):
        previous = {"ui": {"badge": {"sale": "#123456"}}}
        scheme = compose_scheme("#1e40af", "#f59e0b", previous)
        assert scheme.ui.badge.sale == "#123456"
        assert scheme.ui.badge.featured == DEFAULT_COLOR_SCHEME.ui.badge.featured
        assert scheme.ui.nav == DEFAULT_COLOR_SCHEME.ui.nav

    def test_previous_non_ui_sections_are_ignored(self):
        previous = {"text": {"link": "#ff0000"}, "ui": {}}
        scheme = compose_scheme("#1e40af", "#f59e0b", previous)
        assert scheme.text.link == "#1e40af"

    def test_unknown_ui_keys_dropped(self, caplog: pytest.LogCaptureFixture):
        previous = {
            "ui": {
                "sidebar": {"background": "#fff"},
                "badge": {"glitter": "#fff", "sale": "#123456"},
            }
        }
        with caplog.at_level(logging.WARNING, logger="storefront_themes.core.overrides"):
            scheme = compose_scheme("#1e40af", "#f59e0b", previous)

        assert scheme.ui.badge.sale == "#123456"
        assert "sidebar" not in scheme.to_json_dict()["ui"]
        assert "glitter" not in scheme.to_json_dict()["ui"]["badge"]
        assert "'sidebar'" in caplog.text
        assert "'badge.glitter'" in caplog.text

    def test_previous_scheme_not_mutated(self):
        previous = compose_scheme("#70843d", "#7bd63c")
        before = previous.to_json()
        compose_scheme("#1e40af", "#f59e0b", previous)
        assert previous.to_json() == before


class TestMalformedInput:
    """Malformed base colors fail fast."""

    @pytest.mark.parametrize("value", ["not-a-color", "#12", ""])
    def test_malformed_primary(self, value: str):
        with pytest.raises(InvalidColorFormat):
            compose_scheme(value, "#7bd63c")

    @pytest.mark.parametrize("value", ["not-a-color", "#12", ""])
    def test_malformed_secondary(self, value: str):
        with pytest.raises(InvalidColorFormat):
            compose_scheme("#70843d", value)

    def test_base_colors_checked_before_previous_scheme(self):
        with pytest.raises(InvalidColorFormat):
            compose_scheme("#12", "#7bd63c", {"ui": {"sidebar": {}}})


class TestGradientHelpers:
    """Test gradient formatting helpers."""

    def test_linear_gradient(self):
        assert linear_gradient(("#000000", 0), ("#ffffff", 100)) == (
            "linear-gradient(135deg, #000000 0%, #ffffff 100%)"
        )

    def test_build_gradients_keeps_base_hero(self, default_scheme: ColorScheme):
        primary_ramp = generate_palette("#1e40af")
        secondary_ramp = generate_palette("#f59e0b")
        gradients = build_gradients(
            "#1e40af", "#f59e0b", primary_ramp, secondary_ramp, default_scheme.gradients
        )
        assert gradients.hero == default_scheme.gradients.hero
        assert gradients.button == "linear-gradient(135deg, #1e40af 0%, #f59e0b 100%)"
