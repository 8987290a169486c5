"""Rendering-layer output for storefront themes."""

from .css_generator import (
    generate_theme_css,
    scheme_to_css_variables,
    theme_to_css_variables,
    tokens_to_css,
)

__all__ = [
    "generate_theme_css",
    "scheme_to_css_variables",
    "theme_to_css_variables",
    "tokens_to_css",
]
