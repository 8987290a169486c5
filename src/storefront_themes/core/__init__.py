"""Core theme engine: color math, shade ramps, scheme composition, theme catalog rules."""

from . import ir
from .errors import (
    DuplicateThemeSlug,
    InvalidColorFormat,
    SystemThemeError,
    ThemeError,
    ThemeFileError,
    ThemeNotFound,
    ThemeValidationError,
    UnknownColorSlot,
)

__all__ = [
    "ir",
    "ThemeError",
    "InvalidColorFormat",
    "UnknownColorSlot",
    "ThemeValidationError",
    "ThemeNotFound",
    "DuplicateThemeSlug",
    "SystemThemeError",
    "ThemeFileError",
]
