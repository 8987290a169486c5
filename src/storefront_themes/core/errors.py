"""
Error types for theme palette generation, composition, and theme management.
"""

from __future__ import annotations


class ThemeError(Exception):
    """Base exception for all storefront theme errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidColorFormat(ThemeError, ValueError):
    """
    Raised when a color value fails format validation.

    Examples:
    - Base color that is not a 6-digit hex string ("#12", "not-a-color", "")
    - UI slot value that would break out of a CSS declaration
    """

    def __init__(self, value: object, message: str | None = None):
        self.value = value
        super().__init__(message or f"Invalid color format: {value!r} (expected #rrggbb)")


class UnknownColorSlot(ThemeError, KeyError):
    """
    Raised when a UI color category/field pair is not part of the scheme.

    Examples:
    - set_ui_color(scheme, "badge", "glitter", "#fff")
    - A previous scheme carrying a "sidebar" UI category
    """

    def __init__(self, category: str, field: str | None = None):
        self.category = category
        self.field = field
        slot = f"{category}.{field}" if field is not None else category
        super().__init__(f"Unknown UI color slot: {slot!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message


class ThemeValidationError(ThemeError):
    """Raised when theme data fails semantic validation."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = list(errors or [])
        super().__init__(message)


class ThemeNotFound(ThemeError):
    """Raised when a theme id does not exist in the registry."""

    def __init__(self, theme_id: str):
        self.theme_id = theme_id
        super().__init__(f"Theme not found: {theme_id}")


class DuplicateThemeSlug(ThemeError):
    """Raised when a theme slug is already taken by another theme."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Theme with slug {slug!r} already exists")


class SystemThemeError(ThemeError):
    """
    Raised when an operation is not permitted on a system theme.

    Examples:
    - Deleting a system theme
    - Renaming or re-slugging a system theme
    """

    pass


class ThemeFileError(ThemeError):
    """Error reading or writing a theme document."""

    pass
