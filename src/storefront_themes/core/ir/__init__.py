"""
Theme Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .scheme import (
    RAMP_SECTIONS,
    SHADE_KEYS,
    AlertColors,
    BackgroundColors,
    BadgeColors,
    BorderColors,
    CardColors,
    ColorRamp,
    ColorScheme,
    CssValue,
    FooterColors,
    FormColors,
    Gradients,
    HeroColors,
    HexColor,
    InteractiveColors,
    LoadingColors,
    NavColors,
    PaginationColors,
    RatingColors,
    StatusColors,
    TextColors,
    UIColors,
    validate_css_value,
)
from .theme import (
    SLUG_PATTERN,
    Borders,
    FontFamilies,
    Spacing,
    Theme,
    ThemeSettings,
    Typography,
)

__all__ = [
    # Scheme
    "SHADE_KEYS",
    "RAMP_SECTIONS",
    "HexColor",
    "CssValue",
    "validate_css_value",
    "ColorRamp",
    "ColorScheme",
    "BackgroundColors",
    "TextColors",
    "BorderColors",
    "Gradients",
    "UIColors",
    "BadgeColors",
    "RatingColors",
    "StatusColors",
    "InteractiveColors",
    "CardColors",
    "FormColors",
    "NavColors",
    "FooterColors",
    "HeroColors",
    "PaginationColors",
    "LoadingColors",
    "AlertColors",
    # Theme
    "SLUG_PATTERN",
    "Theme",
    "ThemeSettings",
    "Typography",
    "FontFamilies",
    "Spacing",
    "Borders",
]
