"""Shared pytest fixtures for storefront-themes tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from storefront_themes.core.defaults import DEFAULT_COLOR_SCHEME
from storefront_themes.core.ir import ColorScheme, Theme
from storefront_themes.core.registry import ThemeRegistry


@pytest.fixture
def default_scheme() -> ColorScheme:
    """Return the stock Ecom Green color scheme."""
    return DEFAULT_COLOR_SCHEME


@pytest.fixture
def make_theme() -> Callable[..., Theme]:
    """Return a factory for themes that differ only in the given fields."""

    def _make(name: str, slug: str | None = None, **fields: Any) -> Theme:
        return Theme(
            name=name,
            slug=slug or name.lower().replace(" ", "-"),
            color_scheme=fields.pop("color_scheme", DEFAULT_COLOR_SCHEME),
            **fields,
        )

    return _make


@pytest.fixture
def registry() -> ThemeRegistry:
    """Return a registry seeded with the stock system theme and settings."""
    reg = ThemeRegistry()
    reg.ensure_settings()
    return reg
