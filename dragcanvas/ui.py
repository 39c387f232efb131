"""UI creation functions for the dragcanvas demo."""

from __future__ import annotations

import logging
import os
import sys

from PySide6.QtWidgets import QMainWindow

from .constants import (
    DEFAULT_AREA_HEIGHT,
    DEFAULT_AREA_WIDTH,
    SHAPE_PRESETS,
    SMOKE_ENV_VAR,
    WINDOW_TITLE,
)
from .model import DragArea
from .shapes import shape_from_preset
from .widget import DragAreaWidget


def create_drag_window(area: DragArea) -> QMainWindow:
    """Create and return a main window hosting ``area``."""
    window = QMainWindow()
    window.setWindowTitle(WINDOW_TITLE)
    window.setCentralWidget(DragAreaWidget(area))
    return window


def populate_demo(area: DragArea) -> None:
    """Place every shape preset on ``area``."""
    for name in SHAPE_PRESETS:
        built = shape_from_preset(name)
        if built is not None:
            shape, x, y = built
            area.add(shape, x, y)


def main() -> int:
    """Main entry point for the dragcanvas demo."""
    from PySide6.QtWidgets import QApplication

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    smoke_mode = "--smoke" in sys.argv or os.environ.get(SMOKE_ENV_VAR) == "1"
    scrollable = "--scrollable" in sys.argv

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)

    area = DragArea(DEFAULT_AREA_WIDTH, DEFAULT_AREA_HEIGHT, scrollable=scrollable)
    populate_demo(area)
    window = create_drag_window(area)

    if smoke_mode:
        return 0

    window.show()
    return app.exec()
