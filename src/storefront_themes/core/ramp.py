"""
Shade ramp generation.

Expands one base color into a 10-step design-system scale (50 through 900)
in HSL space. Hue and saturation are held fixed; only lightness moves, so
every RGB channel changes monotonically across the ramp and the rounded
output stays ordered from lightest to darkest.
"""

from __future__ import annotations

from .color import hex_to_hsl, hsl_to_hex, normalize_hex
from .ir.scheme import SHADE_KEYS, ColorRamp

# Lightness targets the ends of the ramp approach.
_LIGHT_TARGET = 97.0
_DARK_TARGET = 8.0

# Each end of the ramp sits at least this far past the base lightness
# (capped at 100 and 0), so near-white and near-black bases still step.
_MIN_END_SPAN = 8.0

# Fraction of the distance from the base lightness to the target.
_TINT_WEIGHTS: tuple[tuple[str, float], ...] = (
    ("50", 0.95),
    ("100", 0.85),
    ("200", 0.65),
    ("300", 0.45),
    ("400", 0.25),
)
_SHADE_WEIGHTS: tuple[tuple[str, float], ...] = (
    ("600", 0.30),
    ("700", 0.55),
    ("800", 0.75),
    ("900", 0.95),
)


def _ramp_lightness(base_lightness: float) -> dict[str, float]:
    """Target lightness for every shade except 500."""
    top = max(_LIGHT_TARGET, min(100.0, base_lightness + _MIN_END_SPAN))
    bottom = min(_DARK_TARGET, max(0.0, base_lightness - _MIN_END_SPAN))

    stops: dict[str, float] = {}
    for name, weight in _TINT_WEIGHTS:
        stops[name] = base_lightness + (top - base_lightness) * weight
    for name, weight in _SHADE_WEIGHTS:
        stops[name] = base_lightness - (base_lightness - bottom) * weight
    return stops


def generate_palette(base_hex: str) -> ColorRamp:
    """Generate a 10-step shade ramp from one base color.

    Args:
        base_hex: Base color as ``#rrggbb`` (``#`` optional, any case).

    Returns:
        ColorRamp whose ``500`` is the normalized base color.

    Raises:
        InvalidColorFormat: If base_hex is not a 6-digit hex string.
    """
    base = normalize_hex(base_hex)
    hue, saturation, lightness = hex_to_hsl(base)

    stops = _ramp_lightness(lightness)
    shades: dict[str, str] = {}
    for key in SHADE_KEYS:
        if key == "500":
            shades[key] = base
        else:
            shades[key] = hsl_to_hex(hue, saturation, stops[key])

    return ColorRamp.model_validate(shades)


def generate_palette_dict(base_hex: str) -> dict[str, str]:
    """Same as generate_palette, as a plain ``{"50": "#...", ...}`` dict."""
    return generate_palette(base_hex).to_dict()
