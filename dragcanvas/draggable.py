"""The contract every object placed on a DragArea implements."""

from __future__ import annotations

from typing import Any, Tuple

Limits = Tuple[float, float, float, float]


class Draggable:
    """An object that renders itself on a drawing context and can be dragged.

    Subclasses must implement ``draw`` and ``get_limits``. Everything else has
    a default based on the limits.
    """

    def draw(self, context: Any, x: float, y: float) -> None:
        """Draw the object with its origin at ``(x, y)``.

        Raise ``DrawError`` if the object cannot be drawn; the rest of the
        frame is then abandoned.
        """
        raise NotImplementedError

    def get_limits(self) -> Limits:
        """Return how far the object extends from its origin.

        The tuple is ``(-x, +x, -y, +y)`` and every value is a distance, so a
        circle of radius 50 centred on its origin returns
        ``(50.0, 50.0, 50.0, 50.0)``.
        """
        raise NotImplementedError

    def contains(self, x: float, y: float) -> bool:
        """Return whether a point relative to the origin is a drag handle.

        The default treats the object as a solid rectangle spanning its
        limits.
        """
        neg_x, pos_x, neg_y, pos_y = clamped_limits(self)
        return -neg_x <= x <= pos_x and -neg_y <= y <= pos_y

    def can_scroll(self, x: float, y: float) -> bool:
        """Return whether a press at this relative point may pan the canvas."""
        return not self.contains(x, y)

    def retain(self) -> bool:
        """Return False to have the object removed on the next render."""
        return True

    def on_double_click(self) -> None:
        """Called when the object is double clicked with the primary button."""

    def on_middle_click(self) -> None:
        """Called when the object is clicked with the middle button."""

    def on_right_click(self) -> None:
        """Called when the object is clicked with the secondary button."""


def clamped_limits(draggable: Draggable) -> Limits:
    """Return the object's limits with negative values replaced by zero."""
    neg_x, pos_x, neg_y, pos_y = draggable.get_limits()
    return (max(0.0, neg_x), max(0.0, pos_x), max(0.0, neg_y), max(0.0, pos_y))
