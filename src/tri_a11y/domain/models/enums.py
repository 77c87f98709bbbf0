"""Enumerations for display preferences and document markers."""

from enum import Enum


class LineSpacing(str, Enum):
    """Line-height presets."""

    DEFAULT = "default"
    RELAXED = "relaxed"
    LOOSE = "loose"


class LetterSpacing(str, Enum):
    """Letter-spacing presets."""

    DEFAULT = "default"
    WIDE = "wide"
    WIDER = "wider"


class Visibility(str, Enum):
    """Open/closed state of the toolbar panel (never persisted)."""

    CLOSED = "closed"
    OPEN = "open"


class Marker(str, Enum):
    """Class tokens applied to the root ``<html>`` element."""

    TEXT_1 = "a11y-text-1"
    TEXT_2 = "a11y-text-2"
    TEXT_3 = "a11y-text-3"
    TEXT_4 = "a11y-text-4"

    LINE_RELAXED = "a11y-line-relaxed"
    LINE_LOOSE = "a11y-line-loose"

    LETTERS_WIDE = "a11y-letters-wide"
    LETTERS_WIDER = "a11y-letters-wider"

    CONTRAST = "a11y-contrast"
    GRAYSCALE = "a11y-grayscale"
    INVERT = "a11y-invert"
    LINKS = "a11y-links"
    FOCUS = "a11y-focus"
    NO_MOTION = "a11y-no-motion"
