"""Core DragArea class for dragcanvas.

DragArea owns the objects on the canvas and the pointer interaction state.
It does no painting or event decoding of its own: a widget forwards decoded
gestures and clicks into it and draws whenever ``redrawRequested`` fires.
"""

from __future__ import annotations

from typing import List, Tuple

from PySide6.QtCore import Property, QObject, Signal, Slot

from .clicks import ClickMixin
from .constants import DEFAULT_AREA_HEIGHT, DEFAULT_AREA_WIDTH
from .drag import DragMixin
from .draggable import Draggable
from .pan import PanMixin
from .registry import DraggableRegistry
from .render import RenderMixin


class DragArea(
    DragMixin,
    PanMixin,
    ClickMixin,
    RenderMixin,
    QObject,
):
    """Drag-and-drop surface for objects implementing ``Draggable``."""

    redrawRequested = Signal()
    scrollLocationChanged = Signal()
    scrollableChanged = Signal()
    countChanged = Signal()

    def __init__(
        self,
        width: int = DEFAULT_AREA_WIDTH,
        height: int = DEFAULT_AREA_HEIGHT,
        scrollable: bool = False,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._width = int(width)
        self._height = int(height)
        self._registry = DraggableRegistry()

        # Initialize mixins
        self._init_drag()
        self._init_pan(scrollable)
        self._init_render()

    @classmethod
    def new_scrollable(cls, width: int, height: int) -> "DragArea":
        """Construct a DragArea that pans when empty canvas is dragged."""
        return cls(width, height, scrollable=True)

    # --- Properties ---------------------------------------------------------
    @Property(int, constant=True)
    def width(self) -> int:
        return self._width

    @Property(int, constant=True)
    def height(self) -> int:
        return self._height

    @Property(int, notify=countChanged)
    def count(self) -> int:
        return len(self._registry)

    @Property(bool, notify=scrollableChanged)
    def scrollable(self) -> bool:
        return self._scrollable

    @property
    def registry(self) -> DraggableRegistry:
        return self._registry

    # --- Object management --------------------------------------------------
    def add(self, draggable: Draggable, x: float, y: float) -> int:
        """Place ``draggable`` at ``(x, y)`` above every existing object.

        The area keeps a reference only; the caller may hold on to the object
        and change it between frames. Returns the object's current index.
        """
        index = self._registry.push(draggable, x, y)
        self.countChanged.emit()
        self.request_redraw()
        return index

    def entries(self) -> List[Tuple[Draggable, float, float]]:
        """Return ``(draggable, x, y)`` for every object in paint order."""
        return [(entry.draggable, entry.x, entry.y) for entry in self._registry.iter()]

    @Slot()
    def request_redraw(self) -> None:
        self.redrawRequested.emit()

    def render(self, context, width: int, height: int) -> None:
        before = len(self._registry)
        try:
            super().render(context, width, height)
        finally:
            if len(self._registry) != before:
                self.countChanged.emit()
