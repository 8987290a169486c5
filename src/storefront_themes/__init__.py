"""
storefront-themes - theme palette and CSS variable engine.

An admin picks a primary and a secondary base color; the engine expands
each into a 10-step shade ramp, composes a complete ColorScheme from the
default template, and publishes it as CSS custom properties.
"""

from __future__ import annotations

from ._version import __version__

# Re-export commonly used types for convenience
from .core import ir
from .core.composer import compose_scheme
from .core.errors import (
    InvalidColorFormat,
    ThemeError,
    ThemeValidationError,
    UnknownColorSlot,
)
from .core.ir import ColorRamp, ColorScheme, Theme
from .core.ramp import generate_palette
from .ui.css_generator import generate_theme_css, scheme_to_css_variables

__all__ = [
    "__version__",
    "ir",
    # Engine
    "generate_palette",
    "compose_scheme",
    "generate_theme_css",
    "scheme_to_css_variables",
    # Types
    "ColorRamp",
    "ColorScheme",
    "Theme",
    # Errors
    "ThemeError",
    "InvalidColorFormat",
    "UnknownColorSlot",
    "ThemeValidationError",
]
