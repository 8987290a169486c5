"""
CSS generator for storefront themes.

Publishes a theme as CSS custom properties on ``:root`` so templates and
stylesheets can read them with ``var(--color-primary-500)`` and friends.
Optionally appends the theme utility classes (``.btn-primary``,
``.card-theme``, ...) built on those properties.
"""

from __future__ import annotations

from collections.abc import Mapping

from storefront_themes.core.ir.scheme import RAMP_SECTIONS, ColorScheme, validate_css_value
from storefront_themes.core.ir.theme import Theme

# ColorScheme section -> CSS variable prefix for the flat role sections
_ROLE_PREFIXES: tuple[tuple[str, str], ...] = (
    ("background", "--color-bg"),
    ("text", "--color-text"),
    ("border", "--color-border"),
    ("gradients", "--gradient"),
)

# (selector, declarations) in output order
UTILITY_RULES: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (".theme-bg-primary", (("background-color", "var(--color-bg-primary)"),)),
    (".theme-bg-secondary", (("background-color", "var(--color-bg-secondary)"),)),
    (".theme-bg-tertiary", (("background-color", "var(--color-bg-tertiary)"),)),
    (".theme-text-primary", (("color", "var(--color-text-primary)"),)),
    (".theme-text-secondary", (("color", "var(--color-text-secondary)"),)),
    (".theme-text-tertiary", (("color", "var(--color-text-tertiary)"),)),
    (".theme-text-link", (("color", "var(--color-text-link)"),)),
    (".theme-border-primary", (("border-color", "var(--color-border-primary)"),)),
    (".theme-border-secondary", (("border-color", "var(--color-border-secondary)"),)),
    (".theme-border-focus", (("border-color", "var(--color-border-focus)"),)),
    (".theme-gradient-primary", (("background", "var(--gradient-primary)"),)),
    (".theme-gradient-secondary", (("background", "var(--gradient-secondary)"),)),
    (".theme-gradient-hero", (("background", "var(--gradient-hero)"),)),
    (".theme-gradient-button", (("background", "var(--gradient-button)"),)),
    (".gradient-bg", (("background", "var(--gradient-primary)"),)),
    (
        ".gradient-text",
        (
            ("background", "var(--gradient-primary)"),
            ("-webkit-background-clip", "text"),
            ("-webkit-text-fill-color", "transparent"),
            ("background-clip", "text"),
        ),
    ),
    (
        ".btn-primary",
        (
            ("background", "var(--gradient-button)"),
            ("color", "var(--color-text-inverse)"),
            ("border", "1px solid var(--color-primary-600)"),
        ),
    ),
    (
        ".btn-primary:hover",
        (
            ("background", "var(--gradient-accent)"),
            ("border-color", "var(--color-primary-700)"),
        ),
    ),
    (
        ".btn-secondary",
        (
            ("background", "transparent"),
            ("color", "var(--color-primary-600)"),
            ("border", "2px solid var(--color-primary-600)"),
        ),
    ),
    (
        ".btn-secondary:hover",
        (
            ("background", "var(--color-primary-50)"),
            ("color", "var(--color-primary-700)"),
        ),
    ),
    (
        ".container-custom",
        (
            ("max-width", "var(--container-xl, 1280px)"),
            ("margin-left", "auto"),
            ("margin-right", "auto"),
            ("padding-left", "var(--spacing-4, 1rem)"),
            ("padding-right", "var(--spacing-4, 1rem)"),
        ),
    ),
    (
        ".card-theme",
        (
            ("background", "var(--gradient-card)"),
            ("border", "1px solid var(--color-border-primary)"),
            ("border-radius", "var(--radius-lg, 0.5rem)"),
            ("box-shadow", "var(--shadow-md)"),
        ),
    ),
    (
        ".input-theme",
        (
            ("background", "var(--color-bg-primary)"),
            ("border", "1px solid var(--color-border-primary)"),
            ("border-radius", "var(--radius-base, 0.25rem)"),
            ("color", "var(--color-text-primary)"),
        ),
    ),
    (
        ".input-theme:focus",
        (
            ("border-color", "var(--color-border-focus)"),
            ("box-shadow", "0 0 0 3px var(--color-primary-100)"),
        ),
    ),
)


def scheme_to_css_variables(scheme: ColorScheme) -> dict[str, str]:
    """
    Map a ColorScheme to CSS custom properties.

    Args:
        scheme: Color scheme to publish

    Returns:
        Ordered mapping of ``--name`` to CSS value
    """
    tokens: dict[str, str] = {}
    data = scheme.to_json_dict()

    # Shade ramps
    for section in RAMP_SECTIONS:
        for shade, value in data[section].items():
            tokens[f"--color-{section}-{shade}"] = value

    # Roles and gradients
    for section, prefix in _ROLE_PREFIXES:
        for key, value in data[section].items():
            tokens[f"{prefix}-{key}"] = value

    # UI component colors (camelCase keys)
    for category, fields in data["ui"].items():
        for key, value in fields.items():
            tokens[f"--ui-{category}-{key}"] = value

    return tokens


def theme_to_css_variables(theme: Theme) -> dict[str, str]:
    """CSS custom properties for a theme: colors plus its design tokens."""
    tokens = scheme_to_css_variables(theme.color_scheme)

    if theme.typography is not None:
        families = theme.typography.font_family
        tokens["--font-sans"] = ", ".join(families.sans)
        tokens["--font-serif"] = ", ".join(families.serif)
        tokens["--font-mono"] = ", ".join(families.mono)
        for key, value in theme.typography.font_size.items():
            tokens[f"--text-{key}"] = value
        for key, value in theme.typography.font_weight.items():
            tokens[f"--font-{key}"] = value

    if theme.spacing is not None:
        for key, value in theme.spacing.scale.items():
            tokens[f"--spacing-{key}"] = value
        for key, value in theme.spacing.container.items():
            tokens[f"--container-{key}"] = value

    if theme.borders is not None:
        for key, value in theme.borders.radius.items():
            tokens[f"--radius-{key}"] = value
        for key, value in theme.borders.width.items():
            tokens[f"--border-{key}"] = value
        for key, value in theme.borders.shadows.items():
            tokens[f"--shadow-{key}"] = value

    return tokens


def _rule(
    selector: str,
    declarations: Mapping[str, str] | tuple[tuple[str, str], ...],
) -> list[str]:
    items = declarations.items() if isinstance(declarations, Mapping) else declarations
    lines = [f"{selector} {{"]
    for name, value in items:
        lines.append(f"  {name}: {validate_css_value(value)};")
    lines.append("}")
    return lines


def tokens_to_css(tokens: Mapping[str, str], selector: str = ":root") -> str:
    """
    Render custom properties as one CSS rule.

    Raises:
        InvalidColorFormat: If a value could break out of its declaration.
    """
    return "\n".join(_rule(selector, tokens))


def generate_theme_css(theme: Theme, include_utilities: bool = True) -> str:
    """
    Generate the stylesheet for a theme.

    Args:
        theme: Theme to publish
        include_utilities: Append the theme utility classes

    Returns:
        CSS string with a header comment, the :root block and, optionally,
        the utility classes
    """
    lines: list[str] = []

    # Header comment
    lines.append(f"/* Theme: {theme.name.replace('*/', '* /')} */")
    lines.append("/* Auto-generated - do not edit */")
    lines.append("")

    lines.extend(_rule(":root", theme_to_css_variables(theme)))
    lines.append("")

    if include_utilities:
        lines.append("/* Theme utility classes */")
        for selector, declarations in UTILITY_RULES:
            lines.extend(_rule(selector, declarations))
        lines.append("")

    return "\n".join(lines)
