"""
Theme entity IR types.

A Theme owns exactly one ColorScheme plus optional typography, spacing and
border token sets. Themes are immutable values; the registry replaces them
wholesale when an admin edits one.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .scheme import ColorScheme

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class _ThemeModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Design tokens
# =============================================================================


class FontFamilies(_ThemeModel):
    sans: list[str]
    serif: list[str]
    mono: list[str]


class Typography(_ThemeModel):
    """Font stacks and type scales (name -> CSS value)."""

    font_family: FontFamilies
    font_size: dict[str, str] = Field(default_factory=dict)
    font_weight: dict[str, str] = Field(default_factory=dict)
    line_height: dict[str, str] = Field(default_factory=dict)
    letter_spacing: dict[str, str] = Field(default_factory=dict)


class Spacing(_ThemeModel):
    scale: dict[str, str] = Field(
        default_factory=dict, description="Spacing scale step -> CSS length"
    )
    container: dict[str, str] = Field(
        default_factory=dict, description="Container breakpoint -> max width"
    )


class Borders(_ThemeModel):
    radius: dict[str, str] = Field(default_factory=dict)
    width: dict[str, str] = Field(default_factory=dict)
    shadows: dict[str, str] = Field(default_factory=dict)


# =============================================================================
# Theme
# =============================================================================


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(UTC)


class Theme(_ThemeModel):
    """A named storefront theme.

    System themes keep their name and slug fixed; their colors remain
    editable. At most one theme should be flagged default; the registry
    enforces that.
    """

    id: str = Field(default_factory=_new_id)
    name: str = Field(min_length=1)
    slug: str = Field(pattern=SLUG_PATTERN)
    description: str | None = None
    color_scheme: ColorScheme
    typography: Typography | None = None
    spacing: Spacing | None = None
    borders: Borders | None = None
    is_active: bool = True
    is_default: bool = False
    is_system: bool = False
    tags: list[str] = Field(default_factory=list)
    version: str = "1.0.0"
    preview: str | None = None
    created_by: str | None = None
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ThemeSettings(_ThemeModel):
    """Storefront-wide theme settings."""

    id: str = Field(default_factory=_new_id)
    active_theme_id: str | None = None
    allow_user_themes: bool = True
    enable_dark_mode: bool = True
    updated_at: datetime = Field(default_factory=_now)
