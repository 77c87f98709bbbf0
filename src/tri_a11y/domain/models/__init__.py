"""Domain models — public API."""

from tri_a11y.domain.models.enums import LetterSpacing, LineSpacing, Marker, Visibility
from tri_a11y.domain.models.preferences import (
    FONT_SCALE_PERCENT,
    FONT_STEP_MAX,
    FONT_STEP_MIN,
    TOGGLE_FIELDS,
    PreferenceState,
    clamp_font_step,
    font_scale_label,
)

__all__ = [
    # Enums
    "LetterSpacing",
    "LineSpacing",
    "Marker",
    "Visibility",
    # Preferences
    "FONT_SCALE_PERCENT",
    "FONT_STEP_MAX",
    "FONT_STEP_MIN",
    "TOGGLE_FIELDS",
    "PreferenceState",
    "clamp_font_step",
    "font_scale_label",
]
