"""
ColorScheme IR types.

A ColorScheme is the complete, render-ready color record of a theme: the
generated primary/secondary shade ramps, fixed neutral and semantic ramps,
text/border/background roles, CSS gradients, and the per-component UI
colors that admins may customize slot by slot.

All models are frozen and reject unknown keys. The JSON form uses the
camelCase keys the rendering layer reads (``linkHover``, ``outOfStock``),
and shade numbers as string keys (``"500"``).
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..color import normalize_hex
from ..errors import InvalidColorFormat

SHADE_KEYS: tuple[str, ...] = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900")

_UNSAFE_CSS_CHARS = frozenset(";{}<>\n\r")


def validate_css_value(value: str) -> str:
    """Check that a value can be emitted as a single CSS declaration value.

    Raises:
        InvalidColorFormat: If the value is empty or could terminate the
            declaration or rule it is written into.
    """
    stripped = value.strip()
    if not stripped or any(ch in _UNSAFE_CSS_CHARS for ch in stripped):
        raise InvalidColorFormat(value, f"Invalid CSS color value: {value!r}")
    return stripped


HexColor = Annotated[str, AfterValidator(normalize_hex)]
CssValue = Annotated[str, AfterValidator(validate_css_value)]


class _SchemeModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Shade ramps
# =============================================================================


class ColorRamp(BaseModel):
    """Ten-step shade ramp keyed 50 (lightest) to 900 (darkest).

    Supports ``ramp["500"]`` and ``ramp[500]`` lookups.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    shade_50: HexColor = Field(alias="50")
    shade_100: HexColor = Field(alias="100")
    shade_200: HexColor = Field(alias="200")
    shade_300: HexColor = Field(alias="300")
    shade_400: HexColor = Field(alias="400")
    shade_500: HexColor = Field(alias="500")
    shade_600: HexColor = Field(alias="600")
    shade_700: HexColor = Field(alias="700")
    shade_800: HexColor = Field(alias="800")
    shade_900: HexColor = Field(alias="900")

    def __getitem__(self, shade: str | int) -> str:
        key = str(shade)
        if key not in SHADE_KEYS:
            raise KeyError(shade)
        value: str = getattr(self, f"shade_{key}")
        return value

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate (shade, hex) pairs from 50 to 900."""
        for key in SHADE_KEYS:
            yield key, self[key]

    def to_dict(self) -> dict[str, str]:
        return dict(self.items())


# =============================================================================
# Semantic roles
# =============================================================================


class BackgroundColors(_SchemeModel):
    primary: CssValue
    secondary: CssValue
    tertiary: CssValue
    inverse: CssValue


class TextColors(_SchemeModel):
    primary: CssValue
    secondary: CssValue
    tertiary: CssValue
    inverse: CssValue
    link: CssValue
    link_hover: CssValue


class BorderColors(_SchemeModel):
    primary: CssValue
    secondary: CssValue
    focus: CssValue
    error: CssValue
    success: CssValue


class Gradients(_SchemeModel):
    """CSS ``linear-gradient(...)`` declarations."""

    primary: CssValue
    secondary: CssValue
    hero: CssValue
    card: CssValue
    button: CssValue
    accent: CssValue


# =============================================================================
# UI component colors
# =============================================================================


class BadgeColors(_SchemeModel):
    sale: CssValue
    featured: CssValue
    new: CssValue
    stock: CssValue
    out_of_stock: CssValue


class RatingColors(_SchemeModel):
    filled: CssValue
    empty: CssValue


class StatusColors(_SchemeModel):
    in_stock: CssValue
    out_of_stock: CssValue
    low_stock: CssValue
    processing: CssValue
    shipped: CssValue
    delivered: CssValue
    cancelled: CssValue


class InteractiveColors(_SchemeModel):
    hover: CssValue
    active: CssValue
    disabled: CssValue
    focus: CssValue
    selected: CssValue


class CardColors(_SchemeModel):
    background: CssValue
    border: CssValue
    shadow: CssValue
    hover_shadow: CssValue


class FormColors(_SchemeModel):
    input_background: CssValue
    input_border: CssValue
    input_focus: CssValue
    label: CssValue
    placeholder: CssValue
    error: CssValue
    success: CssValue


class NavColors(_SchemeModel):
    background: CssValue
    text: CssValue
    hover: CssValue
    active: CssValue
    border: CssValue


class FooterColors(_SchemeModel):
    background: CssValue
    text: CssValue
    link: CssValue
    link_hover: CssValue
    border: CssValue


class HeroColors(_SchemeModel):
    background: CssValue
    text: CssValue
    overlay: CssValue


class PaginationColors(_SchemeModel):
    background: CssValue
    text: CssValue
    hover: CssValue
    active: CssValue
    border: CssValue


class LoadingColors(_SchemeModel):
    spinner: CssValue
    background: CssValue
    text: CssValue


class AlertColors(_SchemeModel):
    info: CssValue
    warning: CssValue
    error: CssValue
    success: CssValue


class UIColors(_SchemeModel):
    """Per-component color slots, one sub-record per UI category."""

    badge: BadgeColors
    rating: RatingColors
    status: StatusColors
    interactive: InteractiveColors
    card: CardColors
    form: FormColors
    nav: NavColors
    footer: FooterColors
    hero: HeroColors
    pagination: PaginationColors
    loading: LoadingColors
    alert: AlertColors


# =============================================================================
# Root Model
# =============================================================================


class ColorScheme(_SchemeModel):
    """Complete theme color record consumed by the CSS variable publisher."""

    primary: ColorRamp
    secondary: ColorRamp
    neutral: ColorRamp
    success: ColorRamp
    error: ColorRamp
    warning: ColorRamp
    info: ColorRamp
    background: BackgroundColors
    text: TextColors
    border: BorderColors
    gradients: Gradients
    ui: UIColors

    def to_json_dict(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys, in declaration order."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_json_dict(), indent=indent)

    @classmethod
    def from_json_dict(cls, data: dict[str, Any]) -> ColorScheme:
        return cls.model_validate(data)


RAMP_SECTIONS: tuple[str, ...] = (
    "primary",
    "secondary",
    "neutral",
    "success",
    "error",
    "warning",
    "info",
)
