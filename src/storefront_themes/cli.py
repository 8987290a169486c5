"""
storefront-themes command line.

Commands:
- palette:  Show the shade ramp generated from one base color
- compose:  Compose a complete color scheme from two base colors
- css:      Render a theme (or bare color scheme) as CSS custom properties
- validate: Check a theme document or export bundle
- lookup:   Resolve one color or gradient of a theme
- bundle:   Collect theme documents into an export bundle
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from storefront_themes._version import __version__
from storefront_themes.core.builder import generate_slug
from storefront_themes.core.color import lightness_of
from storefront_themes.core.composer import compose_scheme
from storefront_themes.core.config import LOG_LEVEL_ENV, EngineConfig, load_config
from storefront_themes.core.defaults import DEFAULT_BORDERS, DEFAULT_SPACING, DEFAULT_TYPOGRAPHY
from storefront_themes.core.errors import ThemeError, ThemeFileError
from storefront_themes.core.exchange import export_themes
from storefront_themes.core.ir.scheme import ColorScheme
from storefront_themes.core.ir.theme import Theme
from storefront_themes.core.overrides import get_theme_color, get_theme_gradient
from storefront_themes.core.ramp import generate_palette
from storefront_themes.core.registry import ThemeRegistry
from storefront_themes.core.theme_loader import load_theme_document, save_theme_document
from storefront_themes.core.validation import validate_theme
from storefront_themes.ui.css_generator import generate_theme_css

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Theme palette and CSS variable engine for storefront themes",
    no_args_is_help=True,
)

console = Console()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


@contextmanager
def _cli_errors() -> Iterator[None]:
    """Report theme errors in red and exit with status 1."""
    try:
        yield
    except ThemeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(1) from e
    except ValidationError as e:
        console.print(f"[red]Invalid theme data:[/red]\n{escape(str(e))}", highlight=False)
        raise typer.Exit(1) from e


def _config(ctx: typer.Context) -> EngineConfig:
    config: EngineConfig | None = ctx.obj
    return config if config is not None else EngineConfig()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"storefront-themes {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    project_root: Path | None = typer.Option(
        None,
        "--project-root",
        help="Directory holding storefront_themes.toml or pyproject.toml (default: cwd)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (overrides LOG_LEVEL and the config file)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Theme palette and CSS variable engine for storefront themes."""
    with _cli_errors():
        env = dict(os.environ)
        if log_level:
            env[LOG_LEVEL_ENV] = log_level
        config = load_config(project_root, env=env)
    _configure_logging(config.log_level)
    ctx.obj = config


# =============================================================================
# Commands
# =============================================================================


@app.command(name="palette")
def palette_command(
    base_color: str = typer.Argument(..., help="Base color (#rrggbb)"),
    as_json: bool = typer.Option(False, "--json", help="Print the ramp as JSON"),
) -> None:
    """Show the 10-step shade ramp generated from a base color."""
    with _cli_errors():
        ramp = generate_palette(base_color)

    if as_json:
        typer.echo(json.dumps(ramp.to_dict(), indent=2))
        return

    table = Table(title=f"Palette for {ramp['500']}")
    table.add_column("Shade", justify="right")
    table.add_column("Hex")
    table.add_column("Lightness", justify="right")
    table.add_column("Swatch")
    for shade, value in ramp.items():
        table.add_row(shade, value, f"{lightness_of(value):.1f}%", f"[on {value}]      [/]")
    console.print(table)


def _scheme_source(document: dict[str, Any]) -> dict[str, Any]:
    """Color scheme inside a theme document, or the document itself."""
    scheme = document.get("colorScheme", document)
    if not isinstance(scheme, dict):
        raise ThemeError("Document colorScheme must be an object")
    return scheme


@app.command(name="compose")
def compose_command(
    primary: str = typer.Argument(..., help="Primary base color (#rrggbb)"),
    secondary: str = typer.Argument(..., help="Secondary base color (#rrggbb)"),
    previous: Path | None = typer.Option(
        None,
        "--previous",
        "-p",
        help="Existing theme or scheme whose UI colors are kept",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the scheme to a .json/.yaml file instead of stdout",
    ),
) -> None:
    """Compose a complete color scheme from two base colors."""
    with _cli_errors():
        previous_scheme = _scheme_source(load_theme_document(previous)) if previous else None
        scheme = compose_scheme(primary, secondary, previous_scheme)

        if output is None:
            typer.echo(scheme.to_json())
            return

        path = save_theme_document(output, scheme.to_json_dict())
    console.print(f"[green]Wrote color scheme to {escape(str(path))}[/green]", highlight=False)


def _load_theme(path: Path) -> Theme:
    """Load a theme document; a bare color scheme becomes a theme named after the file."""
    document = load_theme_document(path)
    if "colorScheme" in document:
        return Theme.model_validate(document)

    name = path.stem.replace("_", " ").replace("-", " ").title() or "Theme"
    return Theme(
        name=name,
        slug=generate_slug(name) or "theme",
        color_scheme=ColorScheme.from_json_dict(document),
        typography=DEFAULT_TYPOGRAPHY,
        spacing=DEFAULT_SPACING,
        borders=DEFAULT_BORDERS,
    )


@app.command(name="css")
def css_command(
    ctx: typer.Context,
    theme_file: Path = typer.Argument(..., help="Theme or color scheme (.json/.yaml)"),
    no_utilities: bool = typer.Option(
        False,
        "--no-utilities",
        help="Leave out the theme utility classes",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the stylesheet to a file instead of stdout",
    ),
) -> None:
    """Render a theme as CSS custom properties."""
    include_utilities = _config(ctx).include_utilities and not no_utilities

    with _cli_errors():
        theme = _load_theme(theme_file)
        css = generate_theme_css(theme, include_utilities=include_utilities)

        if output is None:
            typer.echo(css)
            return

        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(css, encoding="utf-8")
        except OSError as e:
            raise ThemeFileError(f"Cannot write {output}: {e}") from e
    console.print(f"[green]Wrote stylesheet to {escape(str(output))}[/green]", highlight=False)


@app.command(name="validate")
def validate_command(
    theme_file: Path = typer.Argument(..., help="Theme document or export bundle"),
) -> None:
    """Validate a theme document or every theme in an export bundle."""
    with _cli_errors():
        document = load_theme_document(theme_file)

    themes = document["themes"] if isinstance(document.get("themes"), list) else [document]

    failed = 0
    for index, theme_data in enumerate(themes):
        label = theme_data.get("name") if isinstance(theme_data, dict) else None
        label = str(label or f"theme #{index + 1}")
        result = validate_theme(theme_data)

        for message in result.errors:
            console.print(f"[red]✗ {escape(label)}: {escape(message)}[/red]", highlight=False)
        for message in result.warnings:
            console.print(f"[yellow]! {escape(label)}: {escape(message)}[/yellow]", highlight=False)
        if result.is_valid:
            console.print(f"[green]✓ {escape(label)}[/green]", highlight=False)
        else:
            failed += 1

    if failed:
        console.print(f"[red]{failed} of {len(themes)} theme(s) invalid[/red]", highlight=False)
        raise typer.Exit(1)


@app.command(name="lookup")
def lookup_command(
    ctx: typer.Context,
    theme_file: Path = typer.Argument(..., help="Theme or color scheme (.json/.yaml)"),
    path: str = typer.Argument(
        ...,
        help="Dotted color path (primary.500, text.link, ui.badge.sale) or gradients.<name>",
    ),
) -> None:
    """Print one color or gradient of a theme, or the configured fallback."""
    config = _config(ctx)
    with _cli_errors():
        scheme = _load_theme(theme_file).color_scheme

    if path.startswith("gradients."):
        name = path.removeprefix("gradients.")
        value = get_theme_gradient(scheme, name, fallback=config.fallback_gradient)
    else:
        value = get_theme_color(scheme, path, fallback=config.fallback_color)
    typer.echo(value)


@app.command(name="bundle")
def bundle_command(
    ctx: typer.Context,
    theme_files: list[Path] = typer.Argument(..., help="Theme documents to include"),
    exported_by: str | None = typer.Option(
        None,
        "--exported-by",
        help="Identity recorded in the bundle",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the bundle to a file instead of stdout",
    ),
) -> None:
    """Collect theme documents into an export bundle."""
    config = _config(ctx)

    with _cli_errors():
        registry = ThemeRegistry()
        for theme_file in theme_files:
            registry.create(_load_theme(theme_file))
        bundle = export_themes(registry, exported_by=exported_by, platform=config.platform_name)

        if output is None:
            typer.echo(json.dumps(bundle, indent=2))
            return

        path = save_theme_document(output, bundle)
    console.print(
        f"[green]Wrote {len(bundle['themes'])} theme(s) to {escape(str(path))}[/green]",
        highlight=False,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
