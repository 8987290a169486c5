"""
Color scheme composer.

Builds one complete ColorScheme from two admin-chosen base colors:

1. Validate both base colors (fail fast, nothing partial is built)
2. Generate the primary and secondary shade ramps
3. Derive link/focus colors and the four brand gradients
4. Merge previously customized UI colors over the defaults template
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .color import normalize_hex
from .defaults import DEFAULT_COLOR_SCHEME
from .errors import ThemeValidationError
from .ir.scheme import ColorRamp, ColorScheme, Gradients
from .overrides import merge_ui_overrides
from .ramp import generate_palette

logger = logging.getLogger(__name__)

GRADIENT_ANGLE = "135deg"


def linear_gradient(*stops: tuple[str, int]) -> str:
    """Format ``linear-gradient(135deg, #a 0%, #b 100%)`` from (color, percent) stops."""
    parts = ", ".join(f"{color} {percent}%" for color, percent in stops)
    return f"linear-gradient({GRADIENT_ANGLE}, {parts})"


def build_gradients(
    primary: str,
    secondary: str,
    primary_ramp: ColorRamp,
    secondary_ramp: ColorRamp,
    base: Gradients,
) -> Gradients:
    """Synthesize the brand gradients; ``hero`` and ``card`` come from ``base``."""
    return base.model_copy(
        update={
            "primary": linear_gradient((primary, 0), (primary_ramp["600"], 50), (secondary, 100)),
            "secondary": linear_gradient((secondary, 0), (secondary_ramp["600"], 100)),
            "button": linear_gradient((primary, 0), (secondary, 100)),
            "accent": linear_gradient((secondary, 0), (primary, 100)),
        }
    )


def _previous_ui(previous_scheme: ColorScheme | Mapping[str, Any] | None) -> Mapping[str, Any]:
    if previous_scheme is None:
        return {}
    if isinstance(previous_scheme, ColorScheme):
        return previous_scheme.ui.model_dump(by_alias=True)
    if isinstance(previous_scheme, Mapping):
        ui = previous_scheme.get("ui") or {}
        if not isinstance(ui, Mapping):
            raise ThemeValidationError("previous scheme 'ui' must be a mapping")
        return ui
    raise ThemeValidationError(
        f"previous scheme must be a ColorScheme or mapping, got {type(previous_scheme).__name__}"
    )


def compose_scheme(
    primary_hex: str,
    secondary_hex: str,
    previous_scheme: ColorScheme | Mapping[str, Any] | None = None,
    *,
    defaults: ColorScheme = DEFAULT_COLOR_SCHEME,
) -> ColorScheme:
    """Compose a complete ColorScheme from two base colors.

    Args:
        primary_hex: Primary brand color (``#rrggbb``).
        secondary_hex: Secondary brand color (``#rrggbb``).
        previous_scheme: Scheme being regenerated. Its ``ui`` colors are
            kept over the defaults so per-slot admin edits survive a
            base-color change. May be a ColorScheme or its JSON dict
            (partial ``ui`` sections are allowed).
        defaults: Template supplying every section not derived from the
            base colors.

    Returns:
        A new ColorScheme. Inputs are never modified.

    Raises:
        InvalidColorFormat: If either base color is malformed.
    """
    primary = normalize_hex(primary_hex)
    secondary = normalize_hex(secondary_hex)

    template = defaults.model_copy(deep=True)

    primary_ramp = generate_palette(primary)
    secondary_ramp = generate_palette(secondary)

    ui = merge_ui_overrides(template.ui, _previous_ui(previous_scheme))

    scheme = template.model_copy(
        update={
            "primary": primary_ramp,
            "secondary": secondary_ramp,
            "text": template.text.model_copy(
                update={"link": primary, "link_hover": primary_ramp["600"]}
            ),
            "border": template.border.model_copy(update={"focus": primary}),
            "gradients": build_gradients(
                primary, secondary, primary_ramp, secondary_ramp, template.gradients
            ),
            "ui": ui,
        }
    )
    logger.debug("Composed color scheme (primary=%s, secondary=%s)", primary, secondary)
    return scheme
