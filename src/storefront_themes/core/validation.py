"""
Semantic validation for raw theme documents.

Works on the JSON form of a theme (camelCase keys) as it arrives from an
import bundle or a theme file, before it is parsed into a Theme model.
Produces errors (the theme cannot be used) and warnings (the theme works
but may render poorly).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .color import contrast_ratio, is_valid_hex

REQUIRED_FIELDS: tuple[str, ...] = ("name", "slug", "colorScheme")
_REQUIRED_MESSAGES = {
    "name": "Theme name is required",
    "slug": "Theme slug is required",
    "colorScheme": "Color scheme is required",
}
REQUIRED_SECTIONS: tuple[str, ...] = (
    "primary",
    "secondary",
    "neutral",
    "background",
    "text",
    "border",
)

# WCAG AA for large text / UI components
MIN_LINK_CONTRAST = 3.0


@dataclass
class ThemeValidationResult:
    """Errors and warnings collected while validating one theme."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _validate_required_fields(
    theme_data: Mapping[str, Any], result: ThemeValidationResult
) -> None:
    for name in REQUIRED_FIELDS:
        if not theme_data.get(name):
            result.add_error(_REQUIRED_MESSAGES[name])


def _validate_color_scheme(scheme: Mapping[str, Any], result: ThemeValidationResult) -> None:
    for section in REQUIRED_SECTIONS:
        if not scheme.get(section):
            result.add_error(f"Color scheme section '{section}' is required")

    primary = scheme.get("primary")
    if isinstance(primary, Mapping) and not primary.get("500"):
        result.add_error("Primary color shade '500' is required")

    _check_link_contrast(scheme, result)


def _check_link_contrast(scheme: Mapping[str, Any], result: ThemeValidationResult) -> None:
    text = scheme.get("text")
    background = scheme.get("background")
    if not isinstance(text, Mapping) or not isinstance(background, Mapping):
        return

    link = text.get("link")
    page = background.get("primary")
    # Only plain hex values can be measured
    if not (is_valid_hex(link) and is_valid_hex(page)):
        return

    ratio = contrast_ratio(link, page)
    if ratio < MIN_LINK_CONTRAST:
        result.add_warning(
            f"Link color {link} has low contrast against background {page} ({ratio:.2f}:1)"
        )


def validate_theme(theme_data: Mapping[str, Any]) -> ThemeValidationResult:
    """
    Validate a theme document.

    Args:
        theme_data: Theme in its JSON form (``name``, ``slug``,
            ``colorScheme``, ...).

    Returns:
        ThemeValidationResult; check ``is_valid`` before using the theme.
    """
    result = ThemeValidationResult()

    if not isinstance(theme_data, Mapping):
        result.add_error("Theme must be an object")
        return result

    _validate_required_fields(theme_data, result)

    scheme = theme_data.get("colorScheme")
    if isinstance(scheme, Mapping):
        _validate_color_scheme(scheme, result)
    elif scheme:
        result.add_error("Theme colorScheme must be an object")

    return result
