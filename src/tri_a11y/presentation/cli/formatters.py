"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) out of the command
module; nothing here knows how preferences are stored.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from tri_a11y.domain.models.preferences import PreferenceState

console = Console()

_LABELS: dict[str, str] = {
    "font_step": "Text Size",
    "line_spacing": "Line Spacing",
    "letter_spacing": "Letter Spacing",
    "high_contrast": "High Contrast",
    "grayscale": "Grayscale",
    "invert_colors": "Invert Colours",
    "highlight_links": "Highlight Links",
    "enhanced_focus": "Enhanced Focus",
    "reduce_motion": "Reduce Motion",
}


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Accessibility") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


# ---------------------------------------------------------------------------
# Preference table
# ---------------------------------------------------------------------------


def _format_value(field: str, state: PreferenceState) -> str:
    value = getattr(state, field)
    if field == "font_step":
        return f"{state.font_scale} (step {value})"
    if isinstance(value, bool):
        return "[bold green]on[/]" if value else "[dim]off[/]"
    return value.value


def preferences_table(state: PreferenceState, markers: Iterable[str]) -> None:
    """Print the current preferences and the markers they produce."""
    status = "[dim]defaults[/]" if state.is_default else "[bold yellow]● modified[/]"
    table = Table(
        title=f"♿ Display Preferences — {status}",
        show_header=True,
        border_style="blue",
    )
    table.add_column("Option", style="cyan", width=18)
    table.add_column("Value", style="green")

    for field, label in _LABELS.items():
        table.add_row(label, _format_value(field, state))

    applied = sorted(m for m in markers if m.startswith("a11y-"))
    table.add_row("", "")
    table.add_row("Markers", ", ".join(applied) if applied else "[dim](none)[/]")
    console.print(table)


def css_panel(css: str, title: str = "🎨 Marker Stylesheet") -> None:
    """Render CSS inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(css, "css", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )
