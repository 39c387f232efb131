"""Pointer gesture handling mixin for DragArea.

A gesture either drags one object, pans the whole canvas, or does nothing.
Which of the three happens is decided once, when the gesture begins.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional, Tuple, TYPE_CHECKING

from PySide6.QtCore import Slot

from .draggable import clamped_limits
from .hit_test import find_hit
from .registry import DraggableRegistry
from .types import DragInfo, InteractionState, RegistryEntry

if TYPE_CHECKING:
    from .model import DragArea

logger = logging.getLogger(__name__)


def calculate_limits(
    neg_limit: float,
    pos_limit: float,
    area_size: float,
    scrollable: bool,
    desired: float,
) -> float:
    """Clamp one coordinate of a dragged object to the drawing area.

    Scrollable areas are unbounded. When the object is larger than the area
    the lower bound wins.
    """
    if scrollable:
        return desired
    if desired > area_size - pos_limit:
        desired = area_size - pos_limit
    if desired < neg_limit:
        return neg_limit
    return desired


class DragMixin:
    """Mixin providing the gesture state machine."""

    # Attributes expected from DragArea
    _registry: DraggableRegistry
    _width: int
    _height: int
    _scrollable: bool
    _translate: Tuple[float, float]
    request_redraw: Callable[[], None]
    _update_pan: Callable[[float, float], None]
    _commit_pan: Callable[[], None]

    def _init_drag(self) -> None:
        """Initialize gesture state. Call from DragArea.__init__."""
        self._state = InteractionState.IDLE
        self._drag_info: Optional[DragInfo] = None
        self._drag_entry: Optional[RegistryEntry] = None

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def drag_info(self) -> Optional[DragInfo]:
        return self._drag_info

    @Slot(float, float)
    def on_gesture_begin(self, x: float, y: float) -> None:
        """Start a gesture at ``(x, y)`` in widget coordinates."""
        result = find_hit(self._registry, x, y, self._translate)
        if result.index is not None:
            new_index = self._registry.promote(result.index)
            entry_x, entry_y = self._registry.location(new_index)
            self._drag_info = DragInfo(
                start_x=x,
                start_y=y,
                index=new_index,
                relative_x=entry_x - x,
                relative_y=entry_y - y,
            )
            self._drag_entry = self._registry[new_index]
            self._state = InteractionState.DRAGGING_OBJECT
            logger.debug("Dragging object %d (now %d) from (%.1f, %.1f)", result.index, new_index, x, y)
        elif self._scrollable and result.can_scroll:
            self._drag_info = None
            self._drag_entry = None
            self._state = InteractionState.PANNING
            logger.debug("Panning from (%.1f, %.1f)", x, y)
        else:
            self._drag_info = None
            self._drag_entry = None
            self._state = InteractionState.IDLE
        self.request_redraw()

    @Slot(float, float)
    def on_gesture_update(self, offset_x: float, offset_y: float) -> None:
        """Continue the gesture; offsets are measured from where it began."""
        if self._state == InteractionState.DRAGGING_OBJECT and not self._resync_drag():
            return
        if self._state == InteractionState.DRAGGING_OBJECT and self._drag_info is not None:
            info = self._drag_info
            neg_x, pos_x, neg_y, pos_y = clamped_limits(self._registry[info.index].draggable)
            new_x = calculate_limits(
                neg_x,
                pos_x,
                self._width,
                self._scrollable,
                info.start_x + offset_x + info.relative_x,
            )
            new_y = calculate_limits(
                neg_y,
                pos_y,
                self._height,
                self._scrollable,
                info.start_y + offset_y + info.relative_y,
            )
            self._registry.set_location(info.index, new_x, new_y)
        elif self._state == InteractionState.PANNING:
            self._update_pan(offset_x, offset_y)
        else:
            return
        self.request_redraw()

    @Slot()
    def on_gesture_end(self) -> None:
        """Finish the gesture. Object positions are already up to date."""
        if self._state == InteractionState.PANNING:
            self._commit_pan()
        self._state = InteractionState.IDLE
        self._drag_info = None
        self._drag_entry = None
        self.request_redraw()

    def _resync_drag(self) -> bool:
        """Follow the dragged entry after the registry changed under it.

        Returns False and drops the drag when the entry is gone.
        """
        if self._drag_info is None or self._drag_entry is None:
            return False
        index = self._registry.index_of(self._drag_entry)
        if index is None:
            logger.debug("Dragged object was removed; ending drag")
            self._state = InteractionState.IDLE
            self._drag_info = None
            self._drag_entry = None
            return False
        if index != self._drag_info.index:
            self._drag_info = replace(self._drag_info, index=index)
        return True
