"""
Color space conversions between hex, RGB, and HSL.

HSL values use the CSS convention: hue in degrees (0-360), saturation and
lightness as percentages (0-100). Values are kept as floats so a hex color
survives a round trip through HSL unchanged.
"""

from __future__ import annotations

import colorsys
import re

from .errors import InvalidColorFormat

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def is_valid_hex(value: object) -> bool:
    """Check whether a value is a 6-digit hex color (leading '#' optional)."""
    return isinstance(value, str) and HEX_PATTERN.match(value) is not None


def normalize_hex(value: object) -> str:
    """Normalize a hex color to lower-case ``#rrggbb``.

    Raises:
        InvalidColorFormat: If the value is not a 6-digit hex string.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    match = HEX_PATTERN.match(value)
    if match is None:
        raise InvalidColorFormat(value)
    return "#" + "".join(match.groups()).lower()


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    normalized = normalize_hex(hex_color)
    return (int(normalized[1:3], 16), int(normalized[3:5], 16), int(normalized[5:7], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    r, g, b = (max(0, min(255, int(c))) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return (h * 360 % 360, s * 100, l * 100)


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """Convert HSL to RGB, wrapping hue and clamping saturation/lightness."""
    h = h % 360
    s = max(0.0, min(100.0, s))
    l = max(0.0, min(100.0, l))
    r, g, b = colorsys.hls_to_rgb(h / 360, l / 100, s / 100)
    return (round(r * 255), round(g * 255), round(b * 255))


def hex_to_hsl(hex_color: str) -> tuple[float, float, float]:
    """Convert a hex color to HSL.

    Args:
        hex_color: Color in ``#rrggbb`` (or ``rrggbb``) form.

    Returns:
        (h, s, l) with h in [0, 360) and s, l in [0, 100].

    Raises:
        InvalidColorFormat: If the input is not a 6-digit hex string.
    """
    return rgb_to_hsl(*hex_to_rgb(hex_color))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL to a 7-character ``#rrggbb`` string."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def lightness_of(hex_color: str) -> float:
    """HSL lightness (0-100) of a hex color."""
    return hex_to_hsl(hex_color)[2]


def relative_luminance(hex_color: str) -> float:
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c: int) -> float:
        v = c / 255
        return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

    r, g, b = hex_to_rgb(hex_color)
    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """Calculate the WCAG contrast ratio between two hex colors (1-21)."""
    lum_a = relative_luminance(color_a)
    lum_b = relative_luminance(color_b)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)
