"""Data types for dragcanvas.

This module contains the small value types and errors shared by the
registry, the interaction mixins and the widget adapter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .draggable import Draggable


class DrawError(Exception):
    """Raised by ``Draggable.draw`` when an object cannot be rendered."""


class RegistryBorrowError(RuntimeError):
    """Raised when the registry is mutated while it is being iterated."""


class PointerButton(Enum):
    """Pointer buttons understood by the click dispatcher."""

    PRIMARY = "primary"
    MIDDLE = "middle"
    SECONDARY = "secondary"


class InteractionState(Enum):
    """What the current pointer gesture is doing."""

    IDLE = "idle"
    DRAGGING_OBJECT = "dragging_object"
    PANNING = "panning"


@dataclass
class RegistryEntry:
    """A draggable object together with its position on the surface."""

    draggable: "Draggable"
    x: float
    y: float

    @property
    def location(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class DragInfo:
    """Bookkeeping for the object drag in progress.

    ``relative_x``/``relative_y`` hold the entry position minus the gesture
    start point, captured when the drag began.
    """

    start_x: float
    start_y: float
    index: int
    relative_x: float
    relative_y: float


@dataclass(frozen=True)
class HitResult:
    """Outcome of a hit-test at a single point.

    ``index`` is the topmost matching registry index or ``None``.
    ``can_scroll`` is False as soon as any entry refused scrolling there.
    """

    index: int | None
    can_scroll: bool

    @property
    def hit(self) -> bool:
        return self.index is not None
