"""
Default theme templates.

DEFAULT_COLOR_SCHEME is the storefront's stock "Ecom Green" scheme. It is
the template the composer merges generated ramps into. It is a frozen
model, so callers cannot mutate it; the composer still deep-copies it per
call before building a new scheme.
"""

from __future__ import annotations

from .ir.scheme import ColorScheme
from .ir.theme import Borders, Spacing, Theme, Typography

DEFAULT_PRIMARY_COLOR = "#70843d"
DEFAULT_SECONDARY_COLOR = "#7bd63c"
DEFAULT_GRADIENT = "linear-gradient(135deg, #70843d 0%, #7bd63c 100%)"

DEFAULT_THEME_NAME = "Ecom Green"
DEFAULT_THEME_SLUG = "ecom-green"

# =============================================================================
# Color scheme
# =============================================================================

DEFAULT_COLOR_SCHEME = ColorScheme.model_validate(
    {
        "primary": {
            "50": "#f0f9f0",
            "100": "#dcf2dc",
            "200": "#bce5bc",
            "300": "#8dd18d",
            "400": "#70843d",
            "500": "#5a9f53",
            "600": "#4a8543",
            "700": "#3d6b36",
            "800": "#345530",
            "900": "#2c462a",
        },
        "secondary": {
            "50": "#f0fdf4",
            "100": "#dcfce7",
            "200": "#bbf7d0",
            "300": "#86efac",
            "400": "#7bd63c",
            "500": "#22c55e",
            "600": "#16a34a",
            "700": "#15803d",
            "800": "#166534",
            "900": "#14532d",
        },
        "neutral": {
            "50": "#f9fafb",
            "100": "#f3f4f6",
            "200": "#e5e7eb",
            "300": "#d1d5db",
            "400": "#9ca3af",
            "500": "#6b7280",
            "600": "#4b5563",
            "700": "#374151",
            "800": "#1f2937",
            "900": "#111827",
        },
        "success": {
            "50": "#f0fdf4",
            "100": "#dcfce7",
            "200": "#bbf7d0",
            "300": "#86efac",
            "400": "#4ade80",
            "500": "#22c55e",
            "600": "#16a34a",
            "700": "#15803d",
            "800": "#166534",
            "900": "#14532d",
        },
        "error": {
            "50": "#fef2f2",
            "100": "#fee2e2",
            "200": "#fecaca",
            "300": "#fca5a5",
            "400": "#f87171",
            "500": "#ef4444",
            "600": "#dc2626",
            "700": "#b91c1c",
            "800": "#991b1b",
            "900": "#7f1d1d",
        },
        "warning": {
            "50": "#fffbeb",
            "100": "#fef3c7",
            "200": "#fde68a",
            "300": "#fcd34d",
            "400": "#fbbf24",
            "500": "#f59e0b",
            "600": "#d97706",
            "700": "#b45309",
            "800": "#92400e",
            "900": "#78350f",
        },
        "info": {
            "50": "#eff6ff",
            "100": "#dbeafe",
            "200": "#bfdbfe",
            "300": "#93c5fd",
            "400": "#60a5fa",
            "500": "#3b82f6",
            "600": "#2563eb",
            "700": "#1d4ed8",
            "800": "#1e40af",
            "900": "#1e3a8a",
        },
        "background": {
            "primary": "#ffffff",
            "secondary": "#f9fafb",
            "tertiary": "#f3f4f6",
            "inverse": "#111827",
        },
        "text": {
            "primary": "#111827",
            "secondary": "#4b5563",
            "tertiary": "#6b7280",
            "inverse": "#ffffff",
            "link": "#70843d",
            "linkHover": "#5a9f53",
        },
        "border": {
            "primary": "#e5e7eb",
            "secondary": "#d1d5db",
            "focus": "#70843d",
            "error": "#ef4444",
            "success": "#22c55e",
        },
        "gradients": {
            "primary": "linear-gradient(135deg, #70843d 0%, #5a9f53 50%, #7bd63c 100%)",
            "secondary": "linear-gradient(135deg, #7bd63c 0%, #5a9f53 100%)",
            "hero": "linear-gradient(135deg, #f9fafb 0%, #ffffff 50%, #f0f9f0 100%)",
            "card": "linear-gradient(135deg, #ffffff 0%, #f9fafb 100%)",
            "button": DEFAULT_GRADIENT,
            "accent": "linear-gradient(135deg, #7bd63c 0%, #70843d 100%)",
        },
        "ui": {
            "badge": {
                "sale": "#ef4444",
                "featured": "#f59e0b",
                "new": "#22c55e",
                "stock": "#22c55e",
                "outOfStock": "#6b7280",
            },
            "rating": {
                "filled": "#fbbf24",
                "empty": "#d1d5db",
            },
            "status": {
                "inStock": "#22c55e",
                "outOfStock": "#ef4444",
                "lowStock": "#f59e0b",
                "processing": "#3b82f6",
                "shipped": "#8b5cf6",
                "delivered": "#22c55e",
                "cancelled": "#6b7280",
            },
            "interactive": {
                "hover": "#70843d",
                "active": "#5a6b34",
                "disabled": "#9ca3af",
                "focus": "#70843d",
                "selected": "#70843d",
            },
            "card": {
                "background": "#ffffff",
                "border": "#e5e7eb",
                "shadow": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -2px rgb(0 0 0 / 0.05)",
                "hoverShadow": (
                    "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 10px 10px -5px rgb(0 0 0 / 0.04)"
                ),
            },
            "form": {
                "inputBackground": "#ffffff",
                "inputBorder": "#d1d5db",
                "inputFocus": "#70843d",
                "label": "#374151",
                "placeholder": "#9ca3af",
                "error": "#ef4444",
                "success": "#22c55e",
            },
            "nav": {
                "background": "#ffffff",
                "text": "#374151",
                "hover": "#70843d",
                "active": "#70843d",
                "border": "#e5e7eb",
            },
            "footer": {
                "background": "#f9fafb",
                "text": "#6b7280",
                "link": "#70843d",
                "linkHover": "#5a6b34",
                "border": "#e5e7eb",
            },
            "hero": {
                "background": DEFAULT_GRADIENT,
                "text": "#ffffff",
                "overlay": "rgba(0, 0, 0, 0.1)",
            },
            "pagination": {
                "background": "#ffffff",
                "text": "#374151",
                "hover": "#f3f4f6",
                "active": "#70843d",
                "border": "#d1d5db",
            },
            "loading": {
                "spinner": "#70843d",
                "background": "#f9fafb",
                "text": "#6b7280",
            },
            "alert": {
                "info": "#3b82f6",
                "warning": "#f59e0b",
                "error": "#ef4444",
                "success": "#22c55e",
            },
        },
    }
)

# =============================================================================
# Typography, spacing, borders
# =============================================================================

DEFAULT_TYPOGRAPHY = Typography.model_validate(
    {
        "fontFamily": {
            "sans": ["Inter", "system-ui", "sans-serif"],
            "serif": ["Georgia", "serif"],
            "mono": ["Menlo", "Monaco", "monospace"],
        },
        "fontSize": {
            "xs": "0.75rem",
            "sm": "0.875rem",
            "base": "1rem",
            "lg": "1.125rem",
            "xl": "1.25rem",
            "2xl": "1.5rem",
            "3xl": "1.875rem",
            "4xl": "2.25rem",
            "5xl": "3rem",
            "6xl": "3.75rem",
        },
        "fontWeight": {
            "thin": "100",
            "light": "300",
            "normal": "400",
            "medium": "500",
            "semibold": "600",
            "bold": "700",
            "extrabold": "800",
        },
        "lineHeight": {
            "tight": "1.25",
            "normal": "1.5",
            "relaxed": "1.625",
            "loose": "2",
        },
        "letterSpacing": {
            "tight": "-0.025em",
            "normal": "0",
            "wide": "0.025em",
        },
    }
)

DEFAULT_SPACING = Spacing(
    scale={
        "0": "0",
        "1": "0.25rem",
        "2": "0.5rem",
        "3": "0.75rem",
        "4": "1rem",
        "5": "1.25rem",
        "6": "1.5rem",
        "8": "2rem",
        "10": "2.5rem",
        "12": "3rem",
        "16": "4rem",
        "20": "5rem",
        "24": "6rem",
        "32": "8rem",
        "40": "10rem",
        "48": "12rem",
        "56": "14rem",
        "64": "16rem",
    },
    container={
        "sm": "640px",
        "md": "768px",
        "lg": "1024px",
        "xl": "1280px",
        "2xl": "1536px",
    },
)

DEFAULT_BORDERS = Borders(
    radius={
        "none": "0",
        "sm": "0.125rem",
        "base": "0.25rem",
        "md": "0.375rem",
        "lg": "0.5rem",
        "xl": "0.75rem",
        "2xl": "1rem",
        "3xl": "1.5rem",
        "full": "9999px",
    },
    width={
        "0": "0",
        "1": "1px",
        "2": "2px",
        "4": "4px",
        "8": "8px",
    },
    shadows={
        "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
        "base": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
        "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
        "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
        "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
        "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
        "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
        "none": "0 0 #0000",
    },
)


def create_default_theme() -> Theme:
    """Build the stock system theme seeded into an empty registry."""
    return Theme(
        name=DEFAULT_THEME_NAME,
        slug=DEFAULT_THEME_SLUG,
        description="Default green theme for Ecom platform",
        color_scheme=DEFAULT_COLOR_SCHEME,
        typography=DEFAULT_TYPOGRAPHY,
        spacing=DEFAULT_SPACING,
        borders=DEFAULT_BORDERS,
        is_active=True,
        is_default=True,
        is_system=True,
        tags=["default", "green", "nature"],
    )
