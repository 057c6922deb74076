"""slotforge public API.

Curated surface for callers building slot-grid GUIs:
- `GUIBuilder` fluent construction over one surface
- `EventRegistry` / `InteractionDispatcher` handler binding and routing
- `border_slots` border geometry
- `create_context` bootstrap owning the registry lifecycle

Avoids importing PyQt6; the Qt backend lives in `slotforge.surfaces.qt_surface`.
"""

from __future__ import annotations

from .errors import (  # noqa: F401
    SlotforgeError,
    InvalidArgumentError,
    SlotOutOfRangeError,
)
from .models import ContainerType, Item, ShapeKind  # noqa: F401
from .geometry import border_slots  # noqa: F401
from .services.event_registry import EventRegistry  # noqa: F401
from .services.dispatch import (  # noqa: F401
    ClickEvent,
    CloseEvent,
    DragEvent,
    InteractionDispatcher,
)
from .surfaces import ContainerFactory, MemorySurface  # noqa: F401
from .builders.gui_builder import GUIBuilder  # noqa: F401
from .app.bootstrap import GUIContext, create_context  # noqa: F401

__all__ = [
    "SlotforgeError",
    "InvalidArgumentError",
    "SlotOutOfRangeError",
    "ContainerType",
    "Item",
    "ShapeKind",
    "border_slots",
    "EventRegistry",
    "InteractionDispatcher",
    "ClickEvent",
    "DragEvent",
    "CloseEvent",
    "ContainerFactory",
    "MemorySurface",
    "GUIBuilder",
    "GUIContext",
    "create_context",
]
