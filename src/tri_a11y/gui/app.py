"""Application entry point for the accessibility toolbar demo.

Launch with:
    tri-a11y-gui          (after pip install -e .)
    python -m tri_a11y.gui.app
"""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication, QHBoxLayout, QLabel, QMainWindow, QWidget

from tri_a11y.bootstrap import Container
from tri_a11y.gui.qt_target import QtDocumentTarget
from tri_a11y.gui.toolbar import AccessibilityToolbar

_INTRO = (
    "The Tribal Research Institute & Training Centre, Sikkim documents the "
    "history, language and culture of the Lepcha, Limboo, Tamang and Sherpa "
    "communities of the state."
)


def build_window(container: Container | None = None) -> QMainWindow:
    """Main window with sample content and the toolbar docked on the right."""
    window = QMainWindow()
    window.setWindowTitle("TRI Sikkim — Accessibility")
    window.resize(900, 640)

    central = QWidget()
    layout = QHBoxLayout(central)

    intro = QLabel(_INTRO)
    intro.setWordWrap(True)
    layout.addWidget(intro, stretch=1)

    link = QLabel('<a href="https://sikkim.gov.in">Government of Sikkim</a>')
    link.setProperty("role", "link")
    link.setOpenExternalLinks(True)
    layout.addWidget(link)

    window.setCentralWidget(central)

    # Markers must be applied before the window is first shown.
    container = container or Container(target=QtDocumentTarget(window))
    layout.addWidget(AccessibilityToolbar(container.toolbar()))
    return window


def main() -> None:
    """Create the QApplication, show the main window, and enter the event loop."""
    app = QApplication(sys.argv)
    app.setApplicationName("TRI Sikkim Accessibility")
    app.setOrganizationName("tri-sikkim")

    window = build_window()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
