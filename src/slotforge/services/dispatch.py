"""Interaction dispatcher: raw (surface, slot) interactions -> registered handlers.

Reference bridge between a platform's interaction delivery and the
`EventRegistry`. Platform glue builds one of the event values below and calls
the matching ``dispatch_*`` method from whatever thread delivers events.

Behaviour:
 - Empty resolution is a no-op (nothing bound is not an error).
 - Handlers run outside the registry lock.
 - Error isolation: a failing handler is logged and recorded in `errors`; it
   never propagates into the platform's delivery loop.
 - Closing a surface releases its registry entry (``release_on_close``), which
   is the normal end of a surface's lifecycle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, List, Optional, Tuple, Union

from ..models import Handler, Surface
from .event_registry import EventRegistry

__all__ = [
    "ClickEvent",
    "DragEvent",
    "CloseEvent",
    "InteractionEvent",
    "InteractionDispatcher",
]

_logger = logging.getLogger(__name__)


@dataclass
class ClickEvent:
    surface: Surface
    slot: int
    button: str = "left"
    shift: bool = False
    cancelled: bool = False


@dataclass
class DragEvent:
    surface: Surface
    slots: Tuple[int, ...] = field(default_factory=tuple)
    cancelled: bool = False


@dataclass
class CloseEvent:
    surface: Surface
    viewer: Any = None
    cancelled: bool = False


InteractionEvent = Union[ClickEvent, DragEvent, CloseEvent]


class InteractionDispatcher:
    """Resolves interactions through a registry and invokes the bound handler."""

    def __init__(self, registry: EventRegistry, *, release_on_close: bool = True) -> None:
        self._registry = registry
        self._release_on_close = release_on_close
        self._lock = RLock()
        self._errors: List[tuple[InteractionEvent, BaseException]] = []

    @property
    def registry(self) -> EventRegistry:
        return self._registry

    def _invoke(self, handler: Optional[Handler], event: InteractionEvent) -> bool:
        if handler is None:
            return False
        try:
            handler(event)
        except Exception as exc:  # noqa: BLE001 - isolate handler failures from delivery
            _logger.warning(
                "%s handler failed for %r: %s", type(event).__name__, event.surface, exc,
                exc_info=True,
            )
            with self._lock:
                self._errors.append((event, exc))
            diagnostics = self._registry.diagnostics
            if diagnostics is not None:
                diagnostics.record("handler_failed", event.surface, f"{type(event).__name__}: {exc!r}")
        return True

    def dispatch_click(self, event: ClickEvent) -> bool:
        """Invoke the click handler bound to ``event.slot``. Returns True if one ran."""
        return self._invoke(self._registry.resolve_click(event.surface, event.slot), event)

    def dispatch_drag(self, event: DragEvent) -> bool:
        return self._invoke(self._registry.resolve_drag(event.surface), event)

    def dispatch_close(self, event: CloseEvent) -> bool:
        try:
            return self._invoke(self._registry.resolve_close(event.surface), event)
        finally:
            if self._release_on_close:
                self._registry.release(event.surface)

    @property
    def errors(self) -> List[tuple[InteractionEvent, BaseException]]:
        with self._lock:
            return list(self._errors)

    def clear_errors(self) -> None:
        with self._lock:
            self._errors.clear()
