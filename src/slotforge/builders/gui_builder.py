"""Fluent builder for slot-grid GUIs.

One builder wraps exactly one surface for its whole lifetime. Item operations
write straight to the surface; event operations delegate to the
`EventRegistry` the builder was created with. Every mutating call returns the
builder so calls chain:

    gui = (
        GUIBuilder.create_gui("&6Shop", 3, registry=registry)
        .set_border_slots("black_stained_glass_pane")
        .set_item(13, Item("emerald", display_name="Buy"))
        .set_click_event(on_buy, 13)
        .set_close_event(on_close)
        .build()
    )
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Union

from ..config.settings import MAX_ROWS, SLOTS_PER_ROW
from ..errors import InvalidArgumentError
from ..geometry import border_slots
from ..models import ContainerType, Handler, Item, ItemLike, Surface, as_item
from ..services.event_registry import EventRegistry
from ..surfaces.factory import ContainerFactory

__all__ = ["GUIBuilder"]

_logger = logging.getLogger(__name__)


class GUIBuilder:
    """Chaining facade over one surface and a shared event registry."""

    def __init__(self, surface: Surface, registry: EventRegistry) -> None:
        self._surface = surface
        self._registry = registry
        self.leftovers: List[Item] = []

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def create_gui(
        cls,
        name: str,
        rows_or_type: Union[int, ContainerType],
        *,
        registry: EventRegistry,
        owner: Any = None,
        factory: Optional[ContainerFactory] = None,
    ) -> "GUIBuilder":
        """Create a builder around a new surface.

        Parameters
        ----------
        name: Title; ``&`` colour codes are translated.
        rows_or_type: Row count (1..6, chest-like, 9 slots per row) or a `ContainerType`.
        registry: Registry that click/drag/close handlers are bound in.
        owner: Optional owning identity recorded on the surface.
        factory: Container creation service (memory backend when omitted).
        """
        if isinstance(rows_or_type, ContainerType):
            capacity: Union[int, ContainerType] = rows_or_type
        elif isinstance(rows_or_type, int) and not isinstance(rows_or_type, bool):
            if rows_or_type < 1 or rows_or_type > MAX_ROWS:
                raise InvalidArgumentError(
                    f"Row count must be between 1 and {MAX_ROWS}, got {rows_or_type}",
                    context={"rows": rows_or_type},
                )
            capacity = rows_or_type * SLOTS_PER_ROW
        else:
            raise InvalidArgumentError(
                f"Expected row count or ContainerType, got {type(rows_or_type).__name__}"
            )
        factory = factory or ContainerFactory()
        return cls(factory.create(owner, name, capacity), registry)

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    def set_item(self, slot: int, item: ItemLike) -> "GUIBuilder":
        self._surface.set_item(slot, as_item(item))
        return self

    def add_item(self, item: ItemLike) -> "GUIBuilder":
        """Place ``item`` in the first empty slot; a full surface records it in `leftovers`."""
        leftover = self._surface.add_item(as_item(item))
        if leftover is not None:
            _logger.debug("surface full, %s not placed", leftover.label)
            self.leftovers.append(leftover)
        return self

    def set_border_slots(self, item: ItemLike) -> "GUIBuilder":
        placed = as_item(item)
        for slot in border_slots(self._surface.shape, self._surface.size):
            self._surface.set_item(slot, placed)
        return self

    def fill_empty(self, item: ItemLike) -> "GUIBuilder":
        placed = as_item(item)
        for slot, current in enumerate(self._surface.contents()):
            if current is None:
                self._surface.set_item(slot, placed)
        return self

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def set_click_event(self, handler: Handler, *slots: int) -> "GUIBuilder":
        """Bind a click handler to ``slots``, or to every slot when none are given."""
        self._registry.set_click(self._surface, handler, *slots)
        return self

    def set_drag_event(self, handler: Handler) -> "GUIBuilder":
        self._registry.set_drag(self._surface, handler)
        return self

    def set_close_event(self, handler: Handler) -> "GUIBuilder":
        self._registry.set_close(self._surface, handler)
        return self

    # ------------------------------------------------------------------
    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def registry(self) -> EventRegistry:
        return self._registry

    def build(self) -> Surface:
        return self._surface
