"""Accessibility toolbar — side panel for display preferences.

A trigger button toggles a panel with text size, line spacing, letter
spacing, colour and reading-aid options.  All changes go through the
``ToolbarController``; the widget only mirrors its read model.

Usage::

    toolbar = AccessibilityToolbar(container.toolbar())
    toolbar.preferences_changed.connect(on_change)
"""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont, QKeyEvent
from PySide6.QtWidgets import (
    QButtonGroup,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from tri_a11y.application.toolbar_controller import ToolbarController
from tri_a11y.domain.models.enums import LetterSpacing, LineSpacing
from tri_a11y.domain.models.preferences import FONT_STEP_MAX, FONT_STEP_MIN

# ---------------------------------------------------------------------------
# Option metadata
# ---------------------------------------------------------------------------

_LINE_SPACING = [
    (LineSpacing.DEFAULT, "Normal"),
    (LineSpacing.RELAXED, "Relaxed"),
    (LineSpacing.LOOSE, "Loose"),
]

_LETTER_SPACING = [
    (LetterSpacing.DEFAULT, "Normal"),
    (LetterSpacing.WIDE, "Wide"),
    (LetterSpacing.WIDER, "Wider"),
]

_COLOUR_TOGGLES = [
    ("high_contrast", "◐ High Contrast", "Sharpen colours for easier reading"),
    ("grayscale", "▤ Grayscale", "Remove all colour"),
    ("invert_colors", "🎨 Invert Colours", "Reverse light and dark"),
]

_READING_TOGGLES = [
    ("highlight_links", "🔗 Highlight Links", "Add yellow background to all links"),
    ("enhanced_focus", "◎ Enhanced Focus", "Larger focus ring for keyboard nav"),
    ("reduce_motion", "⚡ Reduce Motion", "Disable animations & transitions"),
]


def _section_title(text: str) -> QLabel:
    label = QLabel(text.upper())
    font = QFont()
    font.setPointSize(8)
    font.setBold(True)
    label.setFont(font)
    return label


class AccessibilityToolbar(QWidget):
    """Trigger button plus collapsible preference panel.

    Signals:
        preferences_changed: emitted with the new ``PreferenceState``.
    """

    preferences_changed = Signal(object)  # emits PreferenceState

    def __init__(self, controller: ToolbarController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._controller.mount()

        outer = QHBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        # ── Panel ─────────────────────────────────────────────────────
        self._panel = QFrame()
        self._panel.setObjectName("a11yPanel")
        self._panel.setAccessibleName("Accessibility toolbar")
        panel_layout = QVBoxLayout(self._panel)
        panel_layout.setSpacing(12)

        header = QHBoxLayout()
        title = QLabel("♿ Accessibility")
        title.setToolTip("Adjust display preferences")
        header.addWidget(title, stretch=1)
        self._btn_close = QPushButton("✕")
        self._btn_close.setAccessibleName("Close")
        self._btn_close.clicked.connect(self._on_close)
        header.addWidget(self._btn_close)
        panel_layout.addLayout(header)

        # Text size
        panel_layout.addWidget(_section_title("Text Size"))
        size_row = QHBoxLayout()
        self._btn_smaller = QPushButton("−")
        self._btn_smaller.setAccessibleName("Decrease text size")
        self._btn_smaller.clicked.connect(lambda: self._act(self._controller.decrease_font))
        size_row.addWidget(self._btn_smaller)

        self._lbl_scale = QLabel()
        self._lbl_scale.setAlignment(Qt.AlignmentFlag.AlignCenter)
        size_row.addWidget(self._lbl_scale, stretch=1)

        self._btn_bigger = QPushButton("+")
        self._btn_bigger.setAccessibleName("Increase text size")
        self._btn_bigger.clicked.connect(lambda: self._act(self._controller.increase_font))
        size_row.addWidget(self._btn_bigger)
        panel_layout.addLayout(size_row)

        dots = QHBoxLayout()
        self._step_group = QButtonGroup(self)
        for step in range(FONT_STEP_MIN, FONT_STEP_MAX + 1):
            dot = QPushButton("●")
            dot.setCheckable(True)
            dot.setFixedWidth(22)
            dot.setAccessibleName(f"Text size step {step + 1}")
            self._step_group.addButton(dot, step)
            dots.addWidget(dot)
        self._step_group.idClicked.connect(
            lambda step: self._act(lambda: self._controller.set_font_step(step))
        )
        panel_layout.addLayout(dots)

        # Line / letter spacing
        panel_layout.addWidget(_section_title("Line Spacing"))
        self._line_group, row = self._segmented(_LINE_SPACING, "Line spacing")
        self._line_group.idClicked.connect(
            lambda i: self._act(lambda: self._controller.set_line_spacing(_LINE_SPACING[i][0]))
        )
        panel_layout.addLayout(row)

        panel_layout.addWidget(_section_title("Letter Spacing"))
        self._letter_group, row = self._segmented(_LETTER_SPACING, "Letter spacing")
        self._letter_group.idClicked.connect(
            lambda i: self._act(
                lambda: self._controller.set_letter_spacing(_LETTER_SPACING[i][0])
            )
        )
        panel_layout.addLayout(row)

        # Toggles
        self._toggles: dict[str, QPushButton] = {}
        panel_layout.addWidget(_section_title("Colour & Contrast"))
        for name, label, tip in _COLOUR_TOGGLES:
            panel_layout.addWidget(self._toggle_button(name, label, tip))
        panel_layout.addWidget(_section_title("Reading Aids"))
        for name, label, tip in _READING_TOGGLES:
            panel_layout.addWidget(self._toggle_button(name, label, tip))

        self._btn_reset = QPushButton("↺ Reset All to Default")
        self._btn_reset.clicked.connect(lambda: self._act(self._controller.reset))
        panel_layout.addWidget(self._btn_reset)
        panel_layout.addStretch()

        outer.addWidget(self._panel)

        # ── Trigger tab ───────────────────────────────────────────────
        trigger_col = QVBoxLayout()
        trigger_col.addStretch()
        self._lbl_modified = QLabel("●")
        self._lbl_modified.setObjectName("a11yModified")
        trigger_col.addWidget(self._lbl_modified, alignment=Qt.AlignmentFlag.AlignRight)
        self._btn_trigger = QPushButton("♿")
        self._btn_trigger.setToolTip("Accessibility Tools")
        self._btn_trigger.clicked.connect(self._on_trigger)
        trigger_col.addWidget(self._btn_trigger)
        trigger_col.addStretch()
        outer.addLayout(trigger_col)

        self._refresh()

    # -- Public API ----------------------------------------------------------

    @property
    def controller(self) -> ToolbarController:
        return self._controller

    # -- Builders ------------------------------------------------------------

    def _segmented(self, options, label: str) -> tuple[QButtonGroup, QHBoxLayout]:
        group = QButtonGroup(self)
        row = QHBoxLayout()
        for i, (value, text) in enumerate(options):
            btn = QPushButton(text)
            btn.setCheckable(True)
            btn.setAccessibleName(f"{label}: {value.value}")
            group.addButton(btn, i)
            row.addWidget(btn)
        return group, row

    def _toggle_button(self, name: str, label: str, tooltip: str) -> QPushButton:
        btn = QPushButton(label)
        btn.setCheckable(True)
        btn.setToolTip(tooltip)
        btn.clicked.connect(
            lambda _checked=False: self._act(lambda: self._controller.toggle_option(name))
        )
        self._toggles[name] = btn
        return btn

    # -- Slots ---------------------------------------------------------------

    def _act(self, intent) -> None:
        intent()
        self._refresh()
        self.preferences_changed.emit(self._controller.state)

    def _on_trigger(self) -> None:
        self._controller.toggle()
        self._refresh()

    def _on_close(self) -> None:
        self._controller.close()
        self._refresh()

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        if event.key() == Qt.Key.Key_Escape and self._controller.is_open:
            self._controller.dismiss_backdrop()
            self._refresh()
            return
        super().keyPressEvent(event)

    # -- Rendering -----------------------------------------------------------

    def _refresh(self) -> None:
        """Mirror the controller's read model into the widgets."""
        c = self._controller
        state = c.state

        self._panel.setVisible(c.is_open)
        self._btn_trigger.setText("✕" if c.is_open else "♿")
        self._btn_trigger.setAccessibleName(
            "Close accessibility options" if c.is_open else "Open accessibility options"
        )
        self._lbl_modified.setVisible(c.has_changes and not c.is_open)

        self._lbl_scale.setText(c.font_scale_label)
        self._btn_smaller.setEnabled(c.can_decrease_font)
        self._btn_bigger.setEnabled(c.can_increase_font)
        self._step_group.button(state.font_step).setChecked(True)

        line_index = [v for v, _ in _LINE_SPACING].index(state.line_spacing)
        self._line_group.button(line_index).setChecked(True)
        letter_index = [v for v, _ in _LETTER_SPACING].index(state.letter_spacing)
        self._letter_group.button(letter_index).setChecked(True)

        for name, btn in self._toggles.items():
            btn.setChecked(getattr(state, name))

        self._btn_reset.setEnabled(c.has_changes)
