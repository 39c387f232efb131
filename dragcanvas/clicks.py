"""Click dispatch mixin for DragArea."""

from __future__ import annotations

from typing import Callable, Tuple, TYPE_CHECKING

from .hit_test import hits_at
from .registry import DraggableRegistry
from .types import PointerButton

if TYPE_CHECKING:
    from .model import DragArea

CLICK_HANDLERS = {
    PointerButton.PRIMARY: "on_double_click",
    PointerButton.MIDDLE: "on_middle_click",
    PointerButton.SECONDARY: "on_right_click",
}


class ClickMixin:
    """Mixin forwarding clicks to every object under the pointer."""

    # Attributes expected from DragArea
    _registry: DraggableRegistry
    _translate: Tuple[float, float]
    request_redraw: Callable[[], None]

    def on_click(self, button: PointerButton, click_count: int, x: float, y: float) -> int:
        """Notify all objects containing ``(x, y)`` of a click.

        The widget decides which click counts are worth reporting (double for
        the primary button, single for the others). Every overlapping object
        is notified, not only the topmost, and paint order is left alone.
        Returns the number of objects notified.
        """
        handler_name = CLICK_HANDLERS[PointerButton(button)]
        targets = [
            self._registry[index].draggable
            for index in hits_at(self._registry, x, y, self._translate)
        ]
        for draggable in targets:
            getattr(draggable, handler_name)()
        self.request_redraw()
        return len(targets)
