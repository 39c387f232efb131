"""Ready-made draggable shapes painted with QPainter."""

from __future__ import annotations

from typing import Optional, Tuple

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter

from .constants import SHAPE_PRESETS
from .draggable import Draggable, Limits
from .types import DrawError


def _require_active(painter: QPainter) -> None:
    if not isinstance(painter, QPainter) or not painter.isActive():
        raise DrawError("Shapes can only be drawn on an active QPainter")


class Square(Draggable):
    """A solid square whose origin is its top-left corner."""

    def __init__(self, color: str = "#ff0000", size: float = 100.0):
        self.color = QColor(color)
        self.size = float(size)

    def draw(self, context: QPainter, x: float, y: float) -> None:
        _require_active(context)
        context.fillRect(QRectF(x, y, self.size, self.size), self.color)

    def get_limits(self) -> Limits:
        return (0.0, self.size, 0.0, self.size)


class Circle(Draggable):
    """A solid circle centred on its origin."""

    def __init__(self, color: str = "#00ff00", radius: float = 50.0):
        self.color = QColor(color)
        self.radius = float(radius)

    def draw(self, context: QPainter, x: float, y: float) -> None:
        _require_active(context)
        context.save()
        context.setRenderHint(QPainter.Antialiasing)
        context.setPen(Qt.NoPen)
        context.setBrush(self.color)
        context.drawEllipse(QPointF(x, y), self.radius, self.radius)
        context.restore()

    def get_limits(self) -> Limits:
        r = self.radius
        return (r, r, r, r)

    def contains(self, x: float, y: float) -> bool:
        return (x * x + y * y) ** 0.5 <= self.radius


def shape_from_preset(name: str) -> Optional[Tuple[Draggable, float, float]]:
    """Build the shape described by ``SHAPE_PRESETS[name]`` and its position."""
    preset = SHAPE_PRESETS.get(name.lower())
    if not preset:
        return None
    if preset["shape"] == "circle":
        shape: Draggable = Circle(preset["color"], preset["size"])
    else:
        shape = Square(preset["color"], preset["size"])
    return shape, float(preset["x"]), float(preset["y"])
