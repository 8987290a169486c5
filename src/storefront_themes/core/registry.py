"""
In-memory theme registry.

Holds the storefront's theme catalog and the single ThemeSettings record,
and applies the catalog rules:

- slugs are unique
- at most one theme is the default
- system themes cannot be deleted, renamed or re-slugged
- deleting the active theme falls back to the default theme

Storage is a plain dict. Callers that persist themes load them into a
registry, apply changes through it, and write the results back.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from .defaults import create_default_theme
from .errors import (
    DuplicateThemeSlug,
    SystemThemeError,
    ThemeError,
    ThemeNotFound,
    ThemeValidationError,
)
from .ir.theme import Theme, ThemeSettings

logger = logging.getLogger(__name__)

# Fields an update can never change
PROTECTED_FIELDS = frozenset({"id", "is_system", "created_at", "created_by"})


def _now() -> datetime:
    return datetime.now(UTC)


class ThemeRegistry:
    """
    Theme catalog with the storefront's theme rules.

    Themes are immutable; every change stores a replacement Theme under
    the same id and returns it.
    """

    def __init__(
        self,
        themes: Iterable[Theme] = (),
        settings: ThemeSettings | None = None,
    ):
        """
        Initialize the registry.

        Args:
            themes: Existing themes, stored as-is (system flags included).
            settings: Existing settings record, if any.
        """
        self._themes: dict[str, Theme] = {}
        for theme in themes:
            self._store(theme)
        self._settings = settings

    def __len__(self) -> int:
        return len(self._themes)

    def __contains__(self, theme_id: object) -> bool:
        return theme_id in self._themes

    @property
    def settings(self) -> ThemeSettings | None:
        return self._settings

    # =========================================================================
    # Lookup
    # =========================================================================

    def get(self, theme_id: str) -> Theme:
        """Get a theme by id.

        Raises:
            ThemeNotFound: If no theme has this id.
        """
        try:
            return self._themes[theme_id]
        except KeyError:
            raise ThemeNotFound(theme_id) from None

    def get_by_slug(self, slug: str) -> Theme | None:
        for theme in self._themes.values():
            if theme.slug == slug:
                return theme
        return None

    def default_theme(self) -> Theme | None:
        for theme in self._themes.values():
            if theme.is_default:
                return theme
        return None

    def list_themes(self, active_only: bool = False) -> list[Theme]:
        """List themes: default first, then system themes, then by name."""
        themes = [t for t in self._themes.values() if t.is_active or not active_only]
        return sorted(themes, key=lambda t: (not t.is_default, not t.is_system, t.name))

    # =========================================================================
    # Catalog changes
    # =========================================================================

    def create(self, theme: Theme) -> Theme:
        """
        Add a new admin-created theme.

        The stored copy is never a system theme. If it is the default,
        every other theme loses its default flag.

        Raises:
            DuplicateThemeSlug: If the slug is already taken.
        """
        if theme.id in self._themes:
            raise ThemeError(f"Theme id already exists: {theme.id}")
        self._check_slug_free(theme.slug)

        if theme.is_default:
            self._clear_default()

        stored = theme.model_copy(update={"is_system": False})
        self._store(stored)
        logger.info("Created theme %r (%s)", stored.name, stored.id)
        return stored

    def update(self, theme_id: str, **changes: Any) -> Theme:
        """
        Replace fields of an existing theme.

        Args:
            theme_id: Id of the theme to change.
            **changes: Theme fields by attribute name (``name``,
                ``color_scheme``, ``is_default``, ...).

        Raises:
            ThemeNotFound: If the id is unknown.
            SystemThemeError: On renaming or re-slugging a system theme.
            DuplicateThemeSlug: If the new slug belongs to another theme.
            ThemeValidationError: If a protected field is being changed.
        """
        theme = self.get(theme_id)

        protected = sorted(PROTECTED_FIELDS.intersection(changes))
        if protected:
            raise ThemeValidationError(
                f"Cannot change protected theme fields: {', '.join(protected)}", protected
            )

        renamed = "name" in changes and changes["name"] != theme.name
        reslugged = "slug" in changes and changes["slug"] != theme.slug
        if theme.is_system and (renamed or reslugged):
            raise SystemThemeError(f"Cannot rename system theme {theme.name!r}")
        if reslugged:
            self._check_slug_free(changes["slug"], exclude_id=theme_id)

        current = {name: getattr(theme, name) for name in Theme.model_fields}
        updated = Theme.model_validate({**current, **changes, "updated_at": _now()})

        becomes_default = bool(changes.get("is_default"))
        if becomes_default and not theme.is_default:
            self._clear_default(exclude_id=theme_id)
        self._store(updated)

        if becomes_default:
            self._set_active_id(theme_id)

        logger.info("Updated theme %r (%s)", updated.name, theme_id)
        return updated

    def delete(self, theme_id: str) -> Theme:
        """
        Remove a theme and return it.

        If it was the active theme, the default theme becomes active.

        Raises:
            ThemeNotFound: If the id is unknown.
            SystemThemeError: If the theme is a system theme.
        """
        theme = self.get(theme_id)
        if theme.is_system:
            raise SystemThemeError(f"Cannot delete system theme {theme.name!r}")

        del self._themes[theme_id]

        if self._settings is not None and self._settings.active_theme_id == theme_id:
            fallback = self.default_theme()
            self._set_active_id(fallback.id if fallback else None)
            logger.info(
                "Deleted active theme %s, switched to %s",
                theme_id,
                fallback.id if fallback else "none",
            )

        logger.info("Deleted theme %r (%s)", theme.name, theme_id)
        return theme

    # =========================================================================
    # Active theme
    # =========================================================================

    def ensure_settings(self) -> ThemeSettings:
        """
        Return the settings, seeding them on first use.

        When no settings exist, the default theme becomes active. If there
        is no default theme either, the stock "Ecom Green" system theme is
        added first.
        """
        if self._settings is not None:
            return self._settings

        default = self.default_theme()
        if default is None:
            default = create_default_theme()
            if self.get_by_slug(default.slug) is not None:
                raise DuplicateThemeSlug(default.slug)
            self._store(default)
            logger.info("Seeded default theme %r", default.name)

        self._settings = ThemeSettings(active_theme_id=default.id)
        return self._settings

    def active_theme(self) -> Theme:
        """The theme the storefront renders with."""
        settings = self.ensure_settings()
        if settings.active_theme_id in self._themes:
            return self._themes[settings.active_theme_id]

        default = self.default_theme()
        if default is None:
            raise ThemeNotFound(settings.active_theme_id or "<active>")
        return default

    def switch_active(self, theme_id: str) -> ThemeSettings:
        """
        Make a theme the active storefront theme.

        Raises:
            ThemeNotFound: If the theme does not exist or is disabled.
        """
        theme = self._themes.get(theme_id)
        if theme is None or not theme.is_active:
            raise ThemeNotFound(theme_id)

        settings = self._set_active_id(theme_id)
        logger.info("Switched active theme to %r (%s)", theme.name, theme_id)
        return settings

    # =========================================================================
    # Internals
    # =========================================================================

    def _store(self, theme: Theme) -> None:
        self._themes[theme.id] = theme

    def _check_slug_free(self, slug: str, exclude_id: str | None = None) -> None:
        existing = self.get_by_slug(slug)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateThemeSlug(slug)

    def _clear_default(self, exclude_id: str | None = None) -> None:
        for theme in list(self._themes.values()):
            if theme.is_default and theme.id != exclude_id:
                self._store(theme.model_copy(update={"is_default": False, "updated_at": _now()}))

    def _set_active_id(self, theme_id: str | None) -> ThemeSettings:
        if self._settings is None:
            self._settings = ThemeSettings(active_theme_id=theme_id)
        else:
            self._settings = self._settings.model_copy(
                update={"active_theme_id": theme_id, "updated_at": _now()}
            )
        return self._settings
