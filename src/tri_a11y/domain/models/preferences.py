"""Display preference model for the accessibility toolbar.

``PreferenceState`` is the only domain entity of the engine: a flat, frozen
record of display preferences.  Python code uses snake_case attributes;
the persisted JSON uses the camelCase aliases (``fontStep``,
``highContrast``...) so stored records stay compatible with the website.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from tri_a11y.domain.errors import InvalidPreferenceError, UnknownPreferenceError
from tri_a11y.domain.models.enums import LetterSpacing, LineSpacing

logger = logging.getLogger(__name__)

FONT_STEP_MIN = 0
FONT_STEP_MAX = 4

# Text scale per font step; step 0 is the baseline and applies no marker.
FONT_SCALE_PERCENT: tuple[int, ...] = (100, 113, 125, 138, 150)

TOGGLE_FIELDS: tuple[str, ...] = (
    "high_contrast",
    "grayscale",
    "invert_colors",
    "highlight_links",
    "enhanced_focus",
    "reduce_motion",
)


def clamp_font_step(step: int) -> int:
    """Saturate *step* to ``[FONT_STEP_MIN, FONT_STEP_MAX]``."""
    return max(FONT_STEP_MIN, min(FONT_STEP_MAX, step))


def font_scale_label(step: int) -> str:
    """Human-readable scale for a font step, e.g. ``"113%"``."""
    return f"{FONT_SCALE_PERCENT[clamp_font_step(step)]}%"


class PreferenceState(BaseModel):
    """Visitor display preferences, persisted under ``a11y-prefs``."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    font_step: int = Field(
        default=FONT_STEP_MIN,
        description="Text size step (0 = 100%, 4 = 150%).",
    )
    line_spacing: LineSpacing = Field(
        default=LineSpacing.DEFAULT,
        description="Line-height preset.",
    )
    letter_spacing: LetterSpacing = Field(
        default=LetterSpacing.DEFAULT,
        description="Letter-spacing preset.",
    )
    high_contrast: bool = False
    grayscale: bool = False
    invert_colors: bool = False
    highlight_links: bool = False
    enhanced_focus: bool = False
    reduce_motion: bool = False

    @field_validator("font_step")
    @classmethod
    def _saturate_font_step(cls, value: int) -> int:
        return clamp_font_step(value)

    # -- Derived values ------------------------------------------------------

    @property
    def is_default(self) -> bool:
        """True iff every field equals its default."""
        return self == PreferenceState()

    @property
    def font_scale(self) -> str:
        return font_scale_label(self.font_step)

    # -- Construction helpers ------------------------------------------------

    def patched(self, patch: Mapping[str, Any]) -> PreferenceState:
        """Return a copy with *patch* merged over this state.

        Keys may be attribute names or their camelCase aliases.  Fields not
        named in *patch* keep their current value.

        Raises:
            UnknownPreferenceError: If a key is not a preference field.
            InvalidPreferenceError: If a value is outside its field's domain.
        """
        data = self.model_dump()
        for key, value in patch.items():
            data[_resolve_field(key)] = value
        try:
            return PreferenceState.model_validate(data)
        except ValidationError as exc:
            raise InvalidPreferenceError(str(exc)) from exc

    @classmethod
    def from_partial(cls, data: Any) -> PreferenceState:
        """Merge a possibly incomplete or damaged record onto the defaults.

        Each field is validated on its own: missing, unknown or invalid
        entries fall back to their default instead of failing the whole
        record.  Anything that is not a mapping yields the defaults.
        """
        if not isinstance(data, Mapping):
            return cls()

        accepted: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            key = field.alias if field.alias in data else name
            if key not in data:
                continue
            try:
                cls.model_validate({name: data[key]})
            except ValidationError:
                logger.debug("Discarding invalid stored value for %s: %r", key, data[key])
                continue
            accepted[name] = data[key]
        return cls.model_validate(accepted)

    def to_storage(self) -> dict[str, Any]:
        """JSON-ready dict using the camelCase storage layout."""
        return self.model_dump(mode="json", by_alias=True)


def _resolve_field(key: str) -> str:
    fields = PreferenceState.model_fields
    if key in fields:
        return key
    for name, field in fields.items():
        if field.alias == key:
            return name
    raise UnknownPreferenceError(f"Unknown preference: {key!r}")
