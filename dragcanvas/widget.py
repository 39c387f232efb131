"""QWidget adapter that hosts a DragArea."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from .model import DragArea
from .types import DrawError, PointerButton

logger = logging.getLogger(__name__)

SINGLE_CLICK_BUTTONS = {
    Qt.MiddleButton: PointerButton.MIDDLE,
    Qt.RightButton: PointerButton.SECONDARY,
}


class DragAreaWidget(QWidget):
    """Widget that forwards mouse input into a DragArea and paints it.

    Left button presses drive drag gestures, a left double click is reported
    as a primary click, and single middle or right clicks are reported as
    such. Other click counts are filtered out here.
    """

    def __init__(self, area: DragArea, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._area = area
        self._press_pos: Optional[QPointF] = None
        self.setMinimumSize(area.width, area.height)
        area.redrawRequested.connect(self.update)

    @property
    def area(self) -> DragArea:
        return self._area

    # --- Qt event overrides -------------------------------------------------
    def paintEvent(self, event: QPaintEvent) -> None:  # type: ignore[override]
        painter = QPainter(self)
        try:
            self._area.render(painter, self.width(), self.height())
        except DrawError:
            logger.exception("Failed to draw frame; skipping it")
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        pos = event.position()
        if event.button() == Qt.LeftButton:
            self._press_pos = pos
            self._area.on_gesture_begin(pos.x(), pos.y())
        elif event.button() in SINGLE_CLICK_BUTTONS:
            self._area.on_click(SINGLE_CLICK_BUTTONS[event.button()], 1, pos.x(), pos.y())
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if self._press_pos is None:
            return
        pos = event.position()
        self._area.on_gesture_update(pos.x() - self._press_pos.x(), pos.y() - self._press_pos.y())
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.LeftButton and self._press_pos is not None:
            self._press_pos = None
            self._area.on_gesture_end()
        event.accept()

    def mouseDoubleClickEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.LeftButton:
            pos = event.position()
            self._area.on_click(PointerButton.PRIMARY, 2, pos.x(), pos.y())
        event.accept()
