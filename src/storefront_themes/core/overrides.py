"""
UI color slot editing and color lookup.

Admins customize individual UI colors (badge sale color, nav hover color,
...). Each edit names one (category, field) slot. Slots are checked
against the ColorScheme schema, so an edit can never add keys the
rendering layer does not know about.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic.alias_generators import to_camel

from .defaults import DEFAULT_GRADIENT, DEFAULT_PRIMARY_COLOR
from .errors import InvalidColorFormat, ThemeValidationError, UnknownColorSlot
from .ir.scheme import ColorScheme, UIColors, validate_css_value

logger = logging.getLogger(__name__)


def _build_slot_table() -> dict[str, dict[str, str]]:
    """Map each UI category to {camelCase key -> attribute name}."""
    table: dict[str, dict[str, str]] = {}
    for category, info in UIColors.model_fields.items():
        model = info.annotation
        assert model is not None
        table[category] = {to_camel(name): name for name in model.model_fields}
    return table


# category -> {json key -> attribute name}
UI_SLOTS: dict[str, dict[str, str]] = _build_slot_table()


@dataclass(frozen=True)
class UIColorSlot:
    """One (category, field) color slot in ``ColorScheme.ui``.

    ``field`` may be given as the JSON key (``outOfStock``) or the
    attribute name (``out_of_stock``); it is stored as the attribute name.
    """

    category: str
    field: str

    def __post_init__(self) -> None:
        fields = UI_SLOTS.get(self.category)
        if fields is None:
            raise UnknownColorSlot(self.category, self.field)
        if self.field in fields:
            object.__setattr__(self, "field", fields[self.field])
        elif self.field not in fields.values():
            raise UnknownColorSlot(self.category, self.field)

    @property
    def key(self) -> str:
        """JSON / CSS key of the field (camelCase)."""
        return to_camel(self.field)

    @property
    def path(self) -> str:
        return f"{self.category}.{self.key}"

    @classmethod
    def parse(cls, path: str) -> UIColorSlot:
        """Parse ``"badge.sale"`` or ``"ui.badge.sale"``."""
        parts = path.split(".")
        if parts and parts[0] == "ui":
            parts = parts[1:]
        if len(parts) != 2:
            raise UnknownColorSlot(path)
        return cls(parts[0], parts[1])

    @classmethod
    def all(cls) -> tuple[UIColorSlot, ...]:
        return tuple(
            cls(category, name) for category, fields in UI_SLOTS.items() for name in fields.values()
        )


def set_ui_color(scheme: ColorScheme, category: str, field: str, value: str) -> ColorScheme:
    """Return a copy of the scheme with one UI color slot replaced.

    Args:
        scheme: Scheme to edit.
        category: UI category (``badge``, ``nav``, ...).
        field: Field within the category, camelCase or snake_case.
        value: New CSS color value.

    Raises:
        UnknownColorSlot: If the slot is not part of the schema.
        InvalidColorFormat: If the value is not a safe CSS value.
    """
    slot = UIColorSlot(category, field)
    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    clean = validate_css_value(value)

    section = getattr(scheme.ui, slot.category)
    new_ui = scheme.ui.model_copy(
        update={slot.category: section.model_copy(update={slot.field: clean})}
    )
    logger.debug("Set UI color %s = %s", slot.path, clean)
    return scheme.model_copy(update={"ui": new_ui})


def merge_ui_overrides(base: UIColors, overrides: Mapping[str, Any] | None) -> UIColors:
    """Shallow-merge per-category overrides on top of a UI color set.

    Categories and fields absent from ``overrides`` keep the base values.
    Categories and fields outside the schema are logged and dropped, so a
    stored scheme with a stray key can still be recomposed.

    Raises:
        InvalidColorFormat: For values that are not safe CSS values.
        ThemeValidationError: If a category is not a mapping.
    """
    if not overrides:
        return base

    merged = base.model_dump(by_alias=True)
    for category, fields in overrides.items():
        if category not in UI_SLOTS:
            logger.warning("Dropping unknown UI color category %r", category)
            continue
        if not isinstance(fields, Mapping):
            raise ThemeValidationError(
                f"UI category {category!r} must be a mapping of field -> color"
            )
        for field, value in fields.items():
            try:
                slot = UIColorSlot(category, field)
            except UnknownColorSlot:
                logger.warning("Dropping unknown UI color slot %r", f"{category}.{field}")
                continue
            if not isinstance(value, str):
                raise InvalidColorFormat(value)
            merged[category][slot.key] = validate_css_value(value)

    return UIColors.model_validate(merged)


# =============================================================================
# Lookup
# =============================================================================


def get_theme_color(
    scheme: ColorScheme | None,
    path: str,
    fallback: str = DEFAULT_PRIMARY_COLOR,
) -> str:
    """Resolve a dotted color path such as ``primary.500`` or ``ui.badge.sale``.

    Returns the fallback when there is no scheme, the path does not
    exist, or it points at a section rather than a single value.
    """
    if scheme is None:
        return fallback

    value: Any = scheme.to_json_dict()
    for key in path.split("."):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            logger.debug("Theme color %r not found, using fallback", path)
            return fallback
    return value if isinstance(value, str) else fallback


def get_theme_gradient(
    scheme: ColorScheme | None,
    name: str,
    fallback: str = DEFAULT_GRADIENT,
) -> str:
    """Look up a named gradient (``primary``, ``button``, ...)."""
    if scheme is None:
        return fallback
    return scheme.gradients.model_dump(by_alias=True).get(name) or fallback
