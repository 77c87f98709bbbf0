"""Thin CLI wrapper — Typer commands that delegate to the toolbar controller.

All wiring is done through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from tri_a11y.bootstrap import Container
from tri_a11y.domain.errors import A11yError
from tri_a11y.domain.models.enums import LetterSpacing, LineSpacing
from tri_a11y.domain.models.preferences import TOGGLE_FIELDS
from tri_a11y.presentation.cli.formatters import (
    css_panel,
    error_message,
    preferences_table,
    success_panel,
)

app = typer.Typer(
    name="tri-a11y",
    help="♿ Accessibility display preferences for the TRI Sikkim website",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _container(ctx: typer.Context) -> Container:
    return ctx.ensure_object(Container)


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Annotated[
        Optional[Path],
        typer.Option("--config-dir", help="Directory holding the preference slot"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Manage persisted accessibility preferences."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )
    ctx.obj = Container(config_dir=config_dir)


# ---------------------------------------------------------------------------
# tri-a11y show / markers / css / path
# ---------------------------------------------------------------------------


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the current preferences and the markers they apply."""
    container = _container(ctx)
    toolbar = container.toolbar()
    preferences_table(toolbar.state, container.target.markers)


@app.command()
def markers(ctx: typer.Context) -> None:
    """Print the root element's class attribute."""
    container = _container(ctx)
    container.toolbar()
    target = container.target
    class_attribute = getattr(target, "class_attribute", None)
    typer.echo(class_attribute() if class_attribute else " ".join(sorted(target.markers)))


@app.command()
def css(
    root: Annotated[str, typer.Option("--root", help="Root selector")] = "html",
    plain: Annotated[bool, typer.Option("--plain", help="No syntax highlighting")] = False,
) -> None:
    """Print the stylesheet that gives each marker its effect."""
    from tri_a11y.domain.services.stylesheet import build_stylesheet

    stylesheet = build_stylesheet(root)
    if plain:
        typer.echo(stylesheet, nl=False)
    else:
        css_panel(stylesheet)


@app.command()
def path(ctx: typer.Context) -> None:
    """Print where preferences are stored."""
    container = _container(ctx)
    path_for = getattr(container.storage, "path_for", None)
    if path_for is None:
        typer.echo(f"(in-memory) {container.bridge.key}")
    else:
        typer.echo(str(path_for(container.bridge.key)))


# ---------------------------------------------------------------------------
# tri-a11y set / bigger / smaller / toggle / reset
# ---------------------------------------------------------------------------


@app.command("set")
def set_preferences(
    ctx: typer.Context,
    font_step: Annotated[
        Optional[int], typer.Option("--font-step", help="Text size step 0-4 (saturating)")
    ] = None,
    line_spacing: Annotated[
        Optional[LineSpacing], typer.Option("--line-spacing", help="Line spacing preset")
    ] = None,
    letter_spacing: Annotated[
        Optional[LetterSpacing], typer.Option("--letter-spacing", help="Letter spacing preset")
    ] = None,
    high_contrast: Annotated[
        Optional[bool], typer.Option("--high-contrast/--no-high-contrast")
    ] = None,
    grayscale: Annotated[Optional[bool], typer.Option("--grayscale/--no-grayscale")] = None,
    invert_colors: Annotated[
        Optional[bool], typer.Option("--invert-colors/--no-invert-colors")
    ] = None,
    highlight_links: Annotated[
        Optional[bool], typer.Option("--highlight-links/--no-highlight-links")
    ] = None,
    enhanced_focus: Annotated[
        Optional[bool], typer.Option("--enhanced-focus/--no-enhanced-focus")
    ] = None,
    reduce_motion: Annotated[
        Optional[bool], typer.Option("--reduce-motion/--no-reduce-motion")
    ] = None,
) -> None:
    """Change one or more preferences."""
    patch = {
        "font_step": font_step,
        "line_spacing": line_spacing,
        "letter_spacing": letter_spacing,
        "high_contrast": high_contrast,
        "grayscale": grayscale,
        "invert_colors": invert_colors,
        "highlight_links": highlight_links,
        "enhanced_focus": enhanced_focus,
        "reduce_motion": reduce_motion,
    }
    patch = {k: v for k, v in patch.items() if v is not None}
    if not patch:
        error_message("Nothing to change: pass at least one option.")
        raise typer.Exit(code=1)

    container = _container(ctx)
    toolbar = container.toolbar()
    toolbar.update(patch)
    preferences_table(toolbar.state, container.target.markers)


@app.command()
def bigger(ctx: typer.Context) -> None:
    """Increase the text size by one step."""
    toolbar = _container(ctx).toolbar()
    toolbar.increase_font()
    success_panel(f"🔠 Text size: [bold green]{toolbar.font_scale_label}[/]")


@app.command()
def smaller(ctx: typer.Context) -> None:
    """Decrease the text size by one step."""
    toolbar = _container(ctx).toolbar()
    toolbar.decrease_font()
    success_panel(f"🔡 Text size: [bold green]{toolbar.font_scale_label}[/]")


@app.command()
def toggle(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help=f"One of: {', '.join(TOGGLE_FIELDS)}")],
) -> None:
    """Flip one on/off option."""
    toolbar = _container(ctx).toolbar()
    field = name.replace("-", "_")
    try:
        state = toolbar.toggle_option(field)
    except A11yError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    value = "on" if getattr(state, field) else "off"
    success_panel(f"✅ {field.replace('_', ' ').title()}: [bold green]{value}[/]")


@app.command()
def reset(ctx: typer.Context) -> None:
    """Restore every preference to its default and forget the saved copy."""
    toolbar = _container(ctx).toolbar()
    toolbar.reset()
    success_panel("↺ All preferences restored to default")


if __name__ == "__main__":
    app()
