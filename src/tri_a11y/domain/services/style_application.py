"""Style application — maps a PreferenceState onto root element markers.

This module is the only code that adds or removes ``a11y-*`` markers on
the document target.  ``apply_state`` first strips every marker it owns
and then adds back exactly those implied by the state, so repeated calls
with the same state converge on the same marker set and no marker from a
previous state survives a transition.
"""

from __future__ import annotations

from tri_a11y.domain.models.enums import LetterSpacing, LineSpacing, Marker
from tri_a11y.domain.models.preferences import PreferenceState
from tri_a11y.domain.ports.document_target import DocumentTargetPort

# Indexed by font step; step 0 is the baseline size and has no marker.
FONT_STEP_MARKERS: tuple[Marker | None, ...] = (
    None,
    Marker.TEXT_1,
    Marker.TEXT_2,
    Marker.TEXT_3,
    Marker.TEXT_4,
)

LINE_SPACING_MARKERS: dict[LineSpacing, Marker] = {
    LineSpacing.RELAXED: Marker.LINE_RELAXED,
    LineSpacing.LOOSE: Marker.LINE_LOOSE,
}

LETTER_SPACING_MARKERS: dict[LetterSpacing, Marker] = {
    LetterSpacing.WIDE: Marker.LETTERS_WIDE,
    LetterSpacing.WIDER: Marker.LETTERS_WIDER,
}

TOGGLE_MARKERS: dict[str, Marker] = {
    "high_contrast": Marker.CONTRAST,
    "grayscale": Marker.GRAYSCALE,
    "invert_colors": Marker.INVERT,
    "highlight_links": Marker.LINKS,
    "enhanced_focus": Marker.FOCUS,
    "reduce_motion": Marker.NO_MOTION,
}

ALL_MARKERS: frozenset[Marker] = frozenset(
    [m for m in FONT_STEP_MARKERS if m is not None]
    + list(LINE_SPACING_MARKERS.values())
    + list(LETTER_SPACING_MARKERS.values())
    + list(TOGGLE_MARKERS.values())
)


def markers_for(state: PreferenceState) -> frozenset[Marker]:
    """Return the marker set implied by *state*."""
    markers: set[Marker] = set()

    font_marker = FONT_STEP_MARKERS[state.font_step]
    if font_marker is not None:
        markers.add(font_marker)

    if state.line_spacing in LINE_SPACING_MARKERS:
        markers.add(LINE_SPACING_MARKERS[state.line_spacing])
    if state.letter_spacing in LETTER_SPACING_MARKERS:
        markers.add(LETTER_SPACING_MARKERS[state.letter_spacing])

    for field, marker in TOGGLE_MARKERS.items():
        if getattr(state, field):
            markers.add(marker)

    return frozenset(markers)


def apply_state(state: PreferenceState, target: DocumentTargetPort) -> frozenset[Marker]:
    """Synchronise *target*'s ``a11y-*`` markers with *state*.

    Class tokens not owned by this module are left untouched.

    Returns:
        The markers now present on *target*.
    """
    wanted = markers_for(state)
    target.remove(*(m.value for m in ALL_MARKERS))
    target.add(*(m.value for m in sorted(wanted, key=lambda m: m.value)))
    return wanted
