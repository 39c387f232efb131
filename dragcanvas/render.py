"""Per-frame render pass mixin for DragArea."""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple, TYPE_CHECKING

from .registry import DraggableRegistry

if TYPE_CHECKING:
    from .model import DragArea

DrawHook = Callable[[Any, int, int], None]


class RenderMixin:
    """Mixin providing ``render`` and the pre/post draw hooks."""

    # Attributes expected from DragArea
    _registry: DraggableRegistry
    _applied_translation: Callable[[], Tuple[float, float]]

    def _init_render(self) -> None:
        """Initialize hook state. Call from DragArea.__init__."""
        self._pre_draw_hook: Optional[DrawHook] = None
        self._post_draw_hook: Optional[DrawHook] = None

    def set_pre_draw_hook(self, hook: DrawHook) -> None:
        """Call ``hook(context, width, height)`` before every frame."""
        self._pre_draw_hook = hook

    def unset_pre_draw_hook(self) -> None:
        self._pre_draw_hook = None

    def set_post_draw_hook(self, hook: DrawHook) -> None:
        """Call ``hook(context, width, height)`` after every frame."""
        self._post_draw_hook = hook

    def unset_post_draw_hook(self) -> None:
        self._post_draw_hook = None

    def render(self, context: Any, width: int, height: int) -> None:
        """Draw one frame onto ``context``.

        Objects that no longer want to be retained are dropped first. A
        ``DrawError`` from any object stops the frame and propagates; the post
        draw hook does not run in that case.
        """
        if self._pre_draw_hook is not None:
            self._pre_draw_hook(context, width, height)
        self._registry.sweep_retain()
        trans_x, trans_y = self._applied_translation()
        with self._registry.borrow():
            for entry in self._registry.iter():
                entry.draggable.draw(context, entry.x + trans_x, entry.y + trans_y)
        if self._post_draw_hook is not None:
            self._post_draw_hook(context, width, height)
