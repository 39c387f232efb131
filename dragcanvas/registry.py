"""Ordered storage for the objects placed on a DragArea.

Entry order is paint order: index 0 is drawn first and therefore sits at the
bottom. The same order decides which object wins a hit-test, so the last
match is the topmost one.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from .draggable import Draggable
from .types import RegistryBorrowError, RegistryEntry

logger = logging.getLogger(__name__)


class RegistryView:
    """A restartable view over the registry in its current order.

    ``iter(view)`` walks front to back (paint order) and ``reversed(view)``
    walks back to front (topmost first). Callers that hand entries to client
    code wrap the walk in ``registry.borrow()``.
    """

    def __init__(self, registry: "DraggableRegistry"):
        self._registry = registry

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self._registry._entries)

    def __reversed__(self) -> Iterator[RegistryEntry]:
        return reversed(self._registry._entries)

    def __len__(self) -> int:
        return len(self._registry)


class DraggableRegistry:
    """Ordered collection of (draggable, position) entries."""

    def __init__(self):
        self._entries: List[RegistryEntry] = []
        self._borrows = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> RegistryEntry:
        return self._entries[index]

    @property
    def borrowed(self) -> bool:
        return self._borrows > 0

    @contextmanager
    def borrow(self) -> Iterator["DraggableRegistry"]:
        """Hold a read borrow; mutation is refused until it is released."""
        self._borrows += 1
        try:
            yield self
        finally:
            self._borrows -= 1

    def _ensure_mutable(self, operation: str) -> None:
        if self._borrows:
            raise RegistryBorrowError(
                f"Cannot {operation} while the registry is being iterated"
            )

    def push(self, draggable: Draggable, x: float, y: float) -> int:
        """Append an object above everything already present; return its index."""
        self._ensure_mutable("push")
        self._entries.append(RegistryEntry(draggable, float(x), float(y)))
        return len(self._entries) - 1

    def promote(self, index: int) -> int:
        """Move the entry at ``index`` to the top of the paint order.

        Entries that were above it shift down by one. Returns the new index,
        which is always ``len(self) - 1``.
        """
        self._ensure_mutable("promote")
        if not 0 <= index < len(self._entries):
            raise IndexError(f"Registry index out of range: {index}")
        entry = self._entries.pop(index)
        self._entries.append(entry)
        return len(self._entries) - 1

    def iter(self) -> RegistryView:
        return RegistryView(self)

    def index_of(self, entry: RegistryEntry) -> Optional[int]:
        """Return the current index of ``entry`` (compared by identity) or None."""
        for i, candidate in enumerate(self._entries):
            if candidate is entry:
                return i
        return None

    def location(self, index: int) -> Tuple[float, float]:
        return self._entries[index].location

    def set_location(self, index: int, x: float, y: float) -> None:
        self._ensure_mutable("move an entry")
        if not 0 <= index < len(self._entries):
            raise IndexError(f"Registry index out of range: {index}")
        entry = self._entries[index]
        entry.x = x
        entry.y = y

    def sweep_retain(self) -> int:
        """Drop every entry whose ``retain()`` is False; return how many went.

        Survivors keep their relative order.
        """
        self._ensure_mutable("sweep")
        with self.borrow():
            keep = [entry for entry in self._entries if entry.draggable.retain()]
        removed = len(self._entries) - len(keep)
        if removed:
            self._entries = keep
            logger.debug("Removed %d unretained object(s)", removed)
        return removed
