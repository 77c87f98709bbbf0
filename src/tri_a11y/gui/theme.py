"""Desktop theme — Qt stylesheets derived from the accessibility markers.

Qt has no ``<html>`` element, so the markers applied by the style
application layer are translated here into a palette, a stylesheet and
font adjustments for a top-level widget.

Usage::

    from tri_a11y.gui.theme import Theme

    widget.setStyleSheet(Theme.stylesheet_for({"a11y-contrast"}))
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields, replace

from tri_a11y.domain.models.enums import Marker
from tri_a11y.domain.models.preferences import FONT_SCALE_PERCENT
from tri_a11y.domain.services.style_application import FONT_STEP_MARKERS


@dataclass(frozen=True)
class _Palette:
    """Color tokens (``#RRGGBB`` only, so they can be transformed)."""

    # Surface
    bg_primary: str
    bg_secondary: str

    # Text
    text_primary: str
    text_muted: str
    text_inverse: str

    # Accent
    accent: str
    accent_hover: str
    accent_subtle: str

    # Emphasis
    link_bg: str
    focus_ring: str
    border: str


_LIGHT = _Palette(
    bg_primary="#FFFFFF",
    bg_secondary="#F8F7FC",
    text_primary="#1A1550",
    text_muted="#8C89A8",
    text_inverse="#FFFFFF",
    accent="#1077A6",
    accent_hover="#0E6590",
    accent_subtle="#E3F0F6",
    link_bg="#FFEB3B",
    focus_ring="#F4C430",
    border="#D6E6EE",
)

_HIGH_CONTRAST = _Palette(
    bg_primary="#000000",
    bg_secondary="#000000",
    text_primary="#FFFFFF",
    text_muted="#FFFF00",
    text_inverse="#000000",
    accent="#FFFF00",
    accent_hover="#FFD700",
    accent_subtle="#1A1A1A",
    link_bg="#FFFF00",
    focus_ring="#00FFFF",
    border="#FFFFFF",
)

FONT_FAMILY = "'Inter', 'Segoe UI', 'Roboto', system-ui, sans-serif"
BASE_POINT_SIZE = 10.0

# QFont percentage spacing per letter-spacing marker.
LETTER_SPACING_PERCENT: dict[Marker, float] = {
    Marker.LETTERS_WIDE: 105.0,
    Marker.LETTERS_WIDER: 110.0,
}

RADIUS_MD = "6px"
RADIUS_LG = "10px"
SPACING_SM = "4px"
SPACING_MD = "8px"


# ---------------------------------------------------------------------------
# Palette transforms
# ---------------------------------------------------------------------------


def _rgb(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def _hex(r: int, g: int, b: int) -> str:
    return f"#{r:02X}{g:02X}{b:02X}"


def _gray(color: str) -> str:
    r, g, b = _rgb(color)
    y = round(0.2126 * r + 0.7152 * g + 0.0722 * b)
    return _hex(y, y, y)


def _invert(color: str) -> str:
    r, g, b = _rgb(color)
    return _hex(255 - r, 255 - g, 255 - b)


def _map_palette(palette: _Palette, fn) -> _Palette:
    return replace(palette, **{f.name: fn(getattr(palette, f.name)) for f in fields(palette)})


# ---------------------------------------------------------------------------
# Marker → visual tokens
# ---------------------------------------------------------------------------


def palette_for(markers: Iterable[str]) -> _Palette:
    """Contrast, then grayscale, then invert, as CSS composes the filters."""
    active = set(markers)
    palette = _HIGH_CONTRAST if Marker.CONTRAST.value in active else Theme.palette()
    if Marker.GRAYSCALE.value in active:
        palette = _map_palette(palette, _gray)
    if Marker.INVERT.value in active:
        palette = _map_palette(palette, _invert)
    return palette


def font_scale_for(markers: Iterable[str]) -> int:
    """Text scale in percent implied by the font-step marker (100 if none)."""
    active = set(markers)
    for step, marker in enumerate(FONT_STEP_MARKERS):
        if marker is not None and marker.value in active:
            return FONT_SCALE_PERCENT[step]
    return FONT_SCALE_PERCENT[0]


def letter_spacing_for(markers: Iterable[str]) -> float:
    active = set(markers)
    for marker, percent in LETTER_SPACING_PERCENT.items():
        if marker.value in active:
            return percent
    return 100.0


class Theme:
    """Generates Qt stylesheets for a given marker set."""

    @classmethod
    def palette(cls) -> _Palette:
        return _LIGHT

    @classmethod
    def stylesheet_for(cls, markers: Iterable[str]) -> str:
        active = set(markers)
        p = palette_for(active)
        sheet = f"""
        * {{
            font-family: {FONT_FAMILY};
        }}

        QWidget {{
            background: {p.bg_primary};
            color: {p.text_primary};
        }}

        QPushButton {{
            background: {p.bg_secondary};
            color: {p.text_primary};
            border: 1px solid {p.border};
            border-radius: {RADIUS_MD};
            padding: {SPACING_SM} {SPACING_MD};
        }}
        QPushButton:hover {{
            background: {p.accent_subtle};
            color: {p.accent};
        }}
        QPushButton:checked {{
            background: {p.accent};
            color: {p.text_inverse};
        }}
        QPushButton:disabled {{
            color: {p.text_muted};
        }}

        QFrame#a11yPanel {{
            border: 1px solid {p.border};
            border-radius: {RADIUS_LG};
        }}
        QLabel#a11yModified {{
            color: {p.focus_ring};
        }}
        """
        if Marker.LINKS.value in active:
            sheet += f"""
        QLabel[role="link"], QCommandLinkButton {{
            background: {p.link_bg};
            color: #1A1550;
            text-decoration: underline;
        }}
        """
        if Marker.FOCUS.value in active:
            sheet += f"""
        *:focus {{
            border: 3px solid {p.focus_ring};
        }}
        """
        return sheet
