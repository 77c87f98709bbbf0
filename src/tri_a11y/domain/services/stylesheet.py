"""CSS for the root element markers.

The website's global stylesheet keys every display preference off a class
on ``<html>``.  ``build_stylesheet`` generates those rules from one table
so the marker names used here and in ``style_application`` cannot drift.

Usage::

    from tri_a11y.domain.services.stylesheet import build_stylesheet

    css = build_stylesheet()           # rules rooted at ``html``
    css = build_stylesheet(":root")    # alternative root selector
"""

from __future__ import annotations

from dataclasses import dataclass

from tri_a11y.domain.models.enums import Marker
from tri_a11y.domain.models.preferences import FONT_SCALE_PERCENT

FOCUS_RING_COLOR = "#f4c430"
LINK_HIGHLIGHT_BG = "#ffeb3b"
LINK_HIGHLIGHT_FG = "#1a1550"

# Filters compose through custom properties so that contrast, grayscale
# and invert can be active together.
_FILTER_VARS = ("--a11y-contrast", "--a11y-grayscale", "--a11y-invert")


@dataclass(frozen=True)
class CssRule:
    """One rule: ``<root>.<marker><descendant> { declarations }``."""

    marker: Marker
    declarations: tuple[tuple[str, str], ...]
    descendant: str = ""

    def render(self, root: str) -> str:
        selectors = [
            f"{root}.{self.marker.value}{part}" for part in self.descendant.split(",")
        ]
        body = "\n".join(f"  {prop}: {value};" for prop, value in self.declarations)
        return f"{', '.join(s.rstrip() for s in selectors)} {{\n{body}\n}}"


def _font_rules() -> list[CssRule]:
    markers = (Marker.TEXT_1, Marker.TEXT_2, Marker.TEXT_3, Marker.TEXT_4)
    return [
        CssRule(marker, (("font-size", f"{pct}%"),))
        for marker, pct in zip(markers, FONT_SCALE_PERCENT[1:])
    ]


_RULES: tuple[CssRule, ...] = (
    *_font_rules(),
    CssRule(Marker.LINE_RELAXED, (("line-height", "1.8"),), " *"),
    CssRule(Marker.LINE_LOOSE, (("line-height", "2.2"),), " *"),
    CssRule(
        Marker.LETTERS_WIDE,
        (("letter-spacing", "0.05em"), ("word-spacing", "0.1em")),
        " *",
    ),
    CssRule(
        Marker.LETTERS_WIDER,
        (("letter-spacing", "0.1em"), ("word-spacing", "0.2em")),
        " *",
    ),
    CssRule(Marker.CONTRAST, (("--a11y-contrast", "contrast(1.5)"),)),
    CssRule(Marker.GRAYSCALE, (("--a11y-grayscale", "grayscale(1)"),)),
    CssRule(Marker.INVERT, (("--a11y-invert", "invert(1) hue-rotate(180deg)"),)),
    # Re-invert media so photographs keep their natural colours.
    CssRule(
        Marker.INVERT,
        (("filter", "invert(1) hue-rotate(180deg)"),),
        " img, video, iframe",
    ),
    CssRule(
        Marker.LINKS,
        (
            ("background-color", f"{LINK_HIGHLIGHT_BG} !important"),
            ("color", f"{LINK_HIGHLIGHT_FG} !important"),
            ("text-decoration", "underline !important"),
        ),
        " a",
    ),
    CssRule(
        Marker.FOCUS,
        (
            ("outline", f"3px solid {FOCUS_RING_COLOR} !important"),
            ("outline-offset", "3px !important"),
        ),
        " *:focus-visible",
    ),
    CssRule(
        Marker.NO_MOTION,
        (
            ("animation-duration", "0.01ms !important"),
            ("animation-iteration-count", "1 !important"),
            ("transition-duration", "0.01ms !important"),
            ("scroll-behavior", "auto !important"),
        ),
        " *, *::before, *::after",
    ),
)


def marker_rules() -> dict[Marker, list[CssRule]]:
    """Group the rule table by marker."""
    grouped: dict[Marker, list[CssRule]] = {}
    for rule in _RULES:
        grouped.setdefault(rule.marker, []).append(rule)
    return grouped


def build_stylesheet(root: str = "html") -> str:
    """Return the full marker stylesheet rooted at *root*."""
    filter_value = " ".join(f"var({var},)" for var in _FILTER_VARS)
    parts = [f"{root} {{\n  filter: {filter_value};\n}}"]
    parts.extend(rule.render(root) for rule in _RULES)
    return "\n\n".join(parts) + "\n"
