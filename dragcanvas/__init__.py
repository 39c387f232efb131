"""Drag-and-drop canvas for arbitrary drawable objects, built on PySide6.

Client objects subclass ``Draggable`` to draw themselves and report their
extent; ``DragArea`` handles hit-testing, z-order, dragging, clamping,
panning and click dispatch, and ``DragAreaWidget`` hosts it in a Qt window.
"""

from .constants import DEFAULT_AREA_HEIGHT, DEFAULT_AREA_WIDTH, SHAPE_PRESETS
from .drag import calculate_limits
from .draggable import Draggable
from .hit_test import find_hit, hits_at
from .model import DragArea
from .registry import DraggableRegistry
from .shapes import Circle, Square, shape_from_preset
from .types import (
    DragInfo,
    DrawError,
    HitResult,
    InteractionState,
    PointerButton,
    RegistryBorrowError,
    RegistryEntry,
)
from .ui import create_drag_window, main
from .widget import DragAreaWidget

__all__ = [
    "Circle",
    "DEFAULT_AREA_HEIGHT",
    "DEFAULT_AREA_WIDTH",
    "DragArea",
    "DragAreaWidget",
    "DragInfo",
    "Draggable",
    "DraggableRegistry",
    "DrawError",
    "HitResult",
    "InteractionState",
    "PointerButton",
    "RegistryBorrowError",
    "RegistryEntry",
    "SHAPE_PRESETS",
    "Square",
    "calculate_limits",
    "create_drag_window",
    "find_hit",
    "hits_at",
    "main",
    "shape_from_preset",
]
