"""Qt document target — markers stored on a top-level widget.

The marker set lives in the widget's ``a11yMarkers`` dynamic property;
every change re-derives the widget's stylesheet and font from it.
Line spacing has no Qt stylesheet equivalent and only the marker is kept.
"""

from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QWidget

from tri_a11y.domain.ports.document_target import DocumentTargetPort
from tri_a11y.gui.theme import (
    BASE_POINT_SIZE,
    Theme,
    font_scale_for,
    letter_spacing_for,
)

MARKERS_PROPERTY = "a11yMarkers"


class QtDocumentTarget(DocumentTargetPort):
    """:class:`DocumentTargetPort` backed by a ``QWidget``."""

    def __init__(self, widget: QWidget) -> None:
        self._widget = widget
        base = widget.font().pointSizeF()
        self._base_point_size = base if base > 0 else BASE_POINT_SIZE
        self._tokens: list[str] = []
        self._restyle()

    @property
    def widget(self) -> QWidget:
        return self._widget

    @property
    def markers(self) -> frozenset[str]:
        return frozenset(self._tokens)

    def add(self, *tokens: str) -> None:
        changed = False
        for token in tokens:
            if token and token not in self._tokens:
                self._tokens.append(token)
                changed = True
        if changed:
            self._restyle()

    def remove(self, *tokens: str) -> None:
        drop = set(tokens)
        kept = [t for t in self._tokens if t not in drop]
        if kept != self._tokens:
            self._tokens = kept
            self._restyle()

    def _restyle(self) -> None:
        self._widget.setProperty(MARKERS_PROPERTY, list(self._tokens))
        self._widget.setStyleSheet(Theme.stylesheet_for(self._tokens))

        font = QFont(self._widget.font())
        font.setPointSizeF(self._base_point_size * font_scale_for(self._tokens) / 100)
        font.setLetterSpacing(
            QFont.SpacingType.PercentageSpacing, letter_spacing_for(self._tokens)
        )
        self._widget.setFont(font)
