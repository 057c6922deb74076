"""Service layer exports.

Responsibilities:
 - `EventRegistry`: surface -> handler tables (shared, thread-safe)
 - `InteractionDispatcher`: resolves and runs handlers for raw interactions
 - `SurfaceDiagnostics`: lifecycle / failure records for registered surfaces
"""

from .diagnostics import SurfaceDiagnostics, SurfaceRecord  # noqa: F401
from .event_registry import EventRegistry, RegistryEntry  # noqa: F401
from .dispatch import (  # noqa: F401
    ClickEvent,
    CloseEvent,
    DragEvent,
    InteractionDispatcher,
)

__all__ = [
    "EventRegistry",
    "RegistryEntry",
    "ClickEvent",
    "DragEvent",
    "CloseEvent",
    "InteractionDispatcher",
    "SurfaceDiagnostics",
    "SurfaceRecord",
]
