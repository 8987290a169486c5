"""
Theme builder.

Turns the admin theme form (name, slug, two base colors, tags) into a
complete Theme. The color scheme is composed from the two base colors;
typography, spacing and borders come from the storefront defaults.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .composer import compose_scheme
from .defaults import (
    DEFAULT_BORDERS,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    DEFAULT_SPACING,
    DEFAULT_TYPOGRAPHY,
)
from .ir.scheme import ColorScheme
from .ir.theme import Theme

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9-]")
_REPEATED_HYPHENS = re.compile(r"-{2,}")


def generate_slug(name: str) -> str:
    """Derive a URL slug from a theme name.

    ``"Ocean Blue"`` -> ``"ocean-blue"``; punctuation is dropped.
    """
    slug = _WHITESPACE.sub("-", name.strip().lower())
    slug = _NON_SLUG_CHARS.sub("", slug)
    return _REPEATED_HYPHENS.sub("-", slug).strip("-")


def parse_tags(raw: str | list[str] | None) -> list[str]:
    """Split a comma-separated tag string, dropping blanks."""
    if not raw:
        return []
    items = raw.split(",") if isinstance(raw, str) else raw
    return [tag.strip() for tag in items if tag and tag.strip()]


class ThemeForm(BaseModel):
    """Fields submitted by the admin theme editor.

    Colors are kept as submitted. build_theme normalizes them and raises
    InvalidColorFormat for malformed values.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str = Field(min_length=1)
    slug: str | None = None
    description: str | None = None
    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR
    tags: list[str] = Field(default_factory=list)
    is_default: bool = False

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Theme name is required")
        return stripped

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return parse_tags(value)
        return value


def build_theme(
    form: ThemeForm,
    previous_scheme: ColorScheme | Mapping[str, Any] | None = None,
    **theme_fields: Any,
) -> Theme:
    """
    Build a Theme from the admin form.

    Args:
        form: Submitted form values.
        previous_scheme: Scheme of the theme being edited; its UI color
            customizations are carried over into the new scheme.
        **theme_fields: Extra Theme fields (``id``, ``created_by``, ...).

    Returns:
        New Theme with a freshly composed color scheme.

    Raises:
        InvalidColorFormat: If either form color is not a 6-digit hex string.
    """
    slug = form.slug or generate_slug(form.name)
    color_scheme = compose_scheme(form.primary_color, form.secondary_color, previous_scheme)

    theme = Theme(
        name=form.name,
        slug=slug,
        description=form.description,
        color_scheme=color_scheme,
        typography=DEFAULT_TYPOGRAPHY,
        spacing=DEFAULT_SPACING,
        borders=DEFAULT_BORDERS,
        tags=form.tags,
        is_default=form.is_default,
        **theme_fields,
    )
    logger.debug("Built theme %r (slug=%s)", theme.name, theme.slug)
    return theme
