"""Canvas panning mixin for DragArea.

Panning moves every object at once by translating the whole surface. The
committed translation is kept separate from the translation of the pan
gesture in progress; the two are added together when drawing.
"""

from __future__ import annotations

import logging
from typing import Callable, Tuple, TYPE_CHECKING

from PySide6.QtCore import Slot

from .types import InteractionState

if TYPE_CHECKING:
    from .model import DragArea

logger = logging.getLogger(__name__)


class PanMixin:
    """Mixin providing the pan translation layer.

    Note: The scrollLocationChanged and scrollableChanged signals are defined
    in DragArea since they need to live on the QObject.
    """

    # Attributes expected from DragArea
    _translate: Tuple[float, float]
    _drag_translate: Tuple[float, float]
    _scrollable: bool
    _state: InteractionState
    request_redraw: Callable[[], None]

    def _init_pan(self, scrollable: bool = False) -> None:
        """Initialize pan state. Call from DragArea.__init__."""
        self._translate = (0.0, 0.0)
        self._drag_translate = (0.0, 0.0)
        self._scrollable = scrollable

    @Slot(bool)
    def set_scrollable(self, scrollable: bool) -> None:
        """Allow or forbid panning by dragging empty canvas.

        Forbidding it drops any translation already applied, including a pan
        gesture in progress, so a bounded area always draws at the origin.
        """
        scrollable = bool(scrollable)
        if self._scrollable == scrollable:
            return
        self._scrollable = scrollable
        self.scrollableChanged.emit()
        if not scrollable and self._state == InteractionState.PANNING:
            self._state = InteractionState.IDLE
        if not scrollable and self._applied_translation() != (0.0, 0.0):
            self._translate = (0.0, 0.0)
            self._drag_translate = (0.0, 0.0)
            self.scrollLocationChanged.emit()
        self.request_redraw()

    def is_scrollable(self) -> bool:
        return self._scrollable

    def get_scroll_location(self) -> Tuple[float, float]:
        """Return the translation being applied by panning.

        This is the "location" of the visible window over the canvas and is
        always ``(0.0, 0.0)`` when scrolling is disabled.
        """
        if not self._scrollable:
            return (0.0, 0.0)
        return self._applied_translation()

    def _applied_translation(self) -> Tuple[float, float]:
        return (
            self._translate[0] + self._drag_translate[0],
            self._translate[1] + self._drag_translate[1],
        )

    def _update_pan(self, offset_x: float, offset_y: float) -> None:
        # Offsets are cumulative since the gesture began.
        self._drag_translate = (offset_x, offset_y)
        self.scrollLocationChanged.emit()

    def _commit_pan(self) -> None:
        self._translate = self._applied_translation()
        self._drag_translate = (0.0, 0.0)
        logger.debug("Pan committed at (%.1f, %.1f)", *self._translate)
        self.scrollLocationChanged.emit()
