"""Tests for hex / RGB / HSL conversions and WCAG contrast."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from storefront_themes.core.color import (
    contrast_ratio,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    is_valid_hex,
    lightness_of,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
)
from storefront_themes.core.errors import InvalidColorFormat, ThemeError

hex_colors = st.integers(min_value=0, max_value=0xFFFFFF).map(lambda n: f"#{n:06x}")


def _channels_close(a: str, b: str, tolerance: int = 1) -> bool:
    return all(abs(x - y) <= tolerance for x, y in zip(hex_to_rgb(a), hex_to_rgb(b), strict=True))


class TestHexParsing:
    """Test hex validation and normalization."""

    @pytest.mark.parametrize("value", ["#70843d", "70843d", "#70843D", "#FFFFFF", "000000"])
    def test_valid_hex(self, value: str):
        assert is_valid_hex(value)

    @pytest.mark.parametrize("value", ["not-a-color", "#12", "", "#1234567", "#gggggg", None, 123])
    def test_invalid_hex(self, value: object):
        assert not is_valid_hex(value)

    def test_normalize_adds_hash_and_lowercases(self):
        assert normalize_hex("70843D") == "#70843d"
        assert normalize_hex("#7BD63C") == "#7bd63c"

    @pytest.mark.parametrize("value", ["not-a-color", "#12", "", "#fff"])
    def test_normalize_rejects_malformed(self, value: str):
        with pytest.raises(InvalidColorFormat) as exc_info:
            normalize_hex(value)
        assert exc_info.value.value == value

    def test_invalid_color_format_is_value_error(self):
        with pytest.raises(ValueError):
            hex_to_hsl("not-a-color")
        with pytest.raises(ThemeError):
            hex_to_hsl("#12")

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#70843d") == (112, 132, 61)

    def test_rgb_to_hex_clamps(self):
        assert rgb_to_hex(300, -5, 16) == "#ff0010"


class TestHSL:
    """Test HSL conversions."""

    def test_primary_colors(self):
        assert hex_to_hsl("#ff0000") == pytest.approx((0.0, 100.0, 50.0))
        assert hex_to_hsl("#00ff00") == pytest.approx((120.0, 100.0, 50.0))
        assert hex_to_hsl("#0000ff") == pytest.approx((240.0, 100.0, 50.0))

    def test_extremes(self):
        assert hex_to_hsl("#000000") == pytest.approx((0.0, 0.0, 0.0))
        _, saturation, lightness = hex_to_hsl("#ffffff")
        assert saturation == pytest.approx(0.0)
        assert lightness == pytest.approx(100.0)

    def test_hue_in_range(self):
        h, _, _ = hex_to_hsl("#ff0080")
        assert 0 <= h < 360

    def test_hue_wraps(self):
        assert hsl_to_hex(480, 100, 50) == "#00ff00"
        assert hsl_to_hex(-240, 100, 50) == "#00ff00"

    def test_saturation_and_lightness_clamp(self):
        assert hsl_to_hex(0, 150, 120) == "#ffffff"
        assert hsl_to_hex(0, -10, 50) == "#808080"
        assert hsl_to_hex(200, 50, -5) == "#000000"

    def test_lightness_of(self):
        assert lightness_of("#000000") == pytest.approx(0.0)
        assert lightness_of("#ffffff") == pytest.approx(100.0)

    @pytest.mark.parametrize("value", ["#000000", "#ffffff", "#70843d", "#7bd63c"])
    def test_round_trip_named_samples(self, value: str):
        assert _channels_close(hsl_to_hex(*hex_to_hsl(value)), value)

    @given(hex_colors)
    @settings(max_examples=1000)
    def test_round_trip_within_one_per_channel(self, value: str):
        """Invariant: hex -> HSL -> hex is stable within +/-1 per channel."""
        assert _channels_close(hsl_to_hex(*hex_to_hsl(value)), value)


class TestContrast:
    """Test WCAG luminance and contrast."""

    def test_luminance_bounds(self):
        assert relative_luminance("#000000") == pytest.approx(0.0)
        assert relative_luminance("#ffffff") == pytest.approx(1.0)

    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    def test_contrast_is_symmetric(self):
        assert contrast_ratio("#70843d", "#ffffff") == pytest.approx(
            contrast_ratio("#ffffff", "#70843d")
        )

    def test_same_color(self):
        assert contrast_ratio("#70843d", "#70843d") == pytest.approx(1.0)
