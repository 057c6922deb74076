"""Event registry: surface -> click table / drag handler / close handler.

The registry is the only shared mutable state in slotforge. It maps a surface
(by identity, never by equality) to a `RegistryEntry` holding:
 - a per-slot click table (last registration for a slot wins)
 - at most one drag handler
 - at most one close handler

Lifecycle:
 - Entries are created lazily by the first registration for a surface and
   mutated in place by every later one.
 - An entry is dropped as soon as all three handler slots are empty.
 - Entries are NOT tied to garbage collection. The registry holds a strong
   reference to every registered surface until `release` is called, so a
   surface that is discarded without `release` leaks together with its
   handlers. `len(registry)` exposes the live entry count and a warning is
   logged when it crosses ``REGISTRY_WARN_THRESHOLD``.
 - An optional `SurfaceDiagnostics` receives created / released / pruned
   records for every entry.

Thread-safety: a single re-entrant lock guards the entry table. Every public
operation is atomic; create-if-absent and mutate happen under the same lock
acquisition so two contexts can never build divergent entries for one surface.
Resolution returns the handler without invoking it; callers run handlers
outside the lock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config.settings import REGISTRY_WARN_THRESHOLD
from ..errors import InvalidArgumentError, check_slot
from ..models import Handler, Surface
from .diagnostics import SurfaceDiagnostics

__all__ = ["RegistryEntry", "EventRegistry"]

_logger = logging.getLogger(__name__)


@dataclass
class RegistryEntry:
    surface: Surface
    clicks: Dict[int, Handler] = field(default_factory=dict)
    drag: Optional[Handler] = None
    close: Optional[Handler] = None

    def is_empty(self) -> bool:
        return not self.clicks and self.drag is None and self.close is None


def _check_handler(handler: Any) -> Handler:
    if handler is None or not callable(handler):
        raise InvalidArgumentError(
            f"Handler must be callable, got {type(handler).__name__}",
            context={"handler": handler},
        )
    return handler


class EventRegistry:
    """Thread-safe registry of interaction handlers keyed by surface identity."""

    def __init__(
        self,
        *,
        warn_threshold: int = REGISTRY_WARN_THRESHOLD,
        diagnostics: Optional[SurfaceDiagnostics] = None,
    ) -> None:
        self._lock = RLock()
        self._diagnostics = diagnostics
        self._entries: Dict[int, RegistryEntry] = {}
        self._warn_threshold = warn_threshold
        self._warned = False

    # ------------------------------------------------------------------
    # Internal helpers (caller holds the lock)
    # ------------------------------------------------------------------
    def _entry_for(self, surface: Surface) -> RegistryEntry:
        key = id(surface)
        entry = self._entries.get(key)
        if entry is not None:
            return entry
        entry = RegistryEntry(surface=surface)
        self._entries[key] = entry
        _logger.debug("registry entry created for %r", surface)
        self._note("created", surface)
        self._check_growth()
        return entry

    def _lookup(self, surface: Surface) -> Optional[RegistryEntry]:
        entry = self._entries.get(id(surface))
        # id() values are only meaningful for the object we hold a reference to
        if entry is None or entry.surface is not surface:
            return None
        return entry

    def _prune(self, surface: Surface, entry: RegistryEntry) -> None:
        if entry.is_empty():
            self._entries.pop(id(surface), None)
            self._note("pruned", surface)
            self._reset_growth_warning()

    def _note(self, kind: str, surface: Surface) -> None:
        if self._diagnostics is not None:
            self._diagnostics.record(kind, surface)

    def _check_growth(self) -> None:
        count = len(self._entries)
        if not self._warned and count > self._warn_threshold:
            self._warned = True
            _logger.warning(
                "event registry holds %d live surfaces (threshold %d); "
                "surfaces are probably being discarded without release()",
                count,
                self._warn_threshold,
            )

    def _reset_growth_warning(self) -> None:
        if self._warned and len(self._entries) <= self._warn_threshold:
            self._warned = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def set_click(self, surface: Surface, handler: Handler, *slots: int) -> None:
        """Bind ``handler`` to ``slots`` (every slot when none are given).

        All slots are validated before anything is bound; an out-of-range slot
        raises `SlotOutOfRangeError` and leaves the registry untouched.
        """
        _check_handler(handler)
        size = surface.size
        targets: Iterable[int]
        if slots:
            targets = [check_slot(s, size) for s in slots]
        else:
            targets = range(size)
        with self._lock:
            entry = self._entry_for(surface)
            for slot in targets:
                entry.clicks[slot] = handler

    def set_drag(self, surface: Surface, handler: Handler) -> None:
        _check_handler(handler)
        with self._lock:
            self._entry_for(surface).drag = handler

    def set_close(self, surface: Surface, handler: Handler) -> None:
        _check_handler(handler)
        with self._lock:
            self._entry_for(surface).close = handler

    def remove_click(self, surface: Surface, *slots: int) -> None:
        """Unbind click handlers for ``slots`` (all slots when none are given)."""
        with self._lock:
            entry = self._lookup(surface)
            if entry is None:
                return
            if slots:
                for slot in slots:
                    entry.clicks.pop(slot, None)
            else:
                entry.clicks.clear()
            self._prune(surface, entry)

    def remove_drag(self, surface: Surface) -> None:
        with self._lock:
            entry = self._lookup(surface)
            if entry is None:
                return
            entry.drag = None
            self._prune(surface, entry)

    def remove_close(self, surface: Surface) -> None:
        with self._lock:
            entry = self._lookup(surface)
            if entry is None:
                return
            entry.close = None
            self._prune(surface, entry)

    # ------------------------------------------------------------------
    # Resolution (never raises)
    # ------------------------------------------------------------------
    def resolve_click(self, surface: Surface, slot: int) -> Optional[Handler]:
        if isinstance(slot, bool) or not isinstance(slot, int):
            return None
        with self._lock:
            entry = self._lookup(surface)
            if entry is None:
                return None
            return entry.clicks.get(slot)

    def resolve_drag(self, surface: Surface) -> Optional[Handler]:
        with self._lock:
            entry = self._lookup(surface)
            return entry.drag if entry else None

    def resolve_close(self, surface: Surface) -> Optional[Handler]:
        with self._lock:
            entry = self._lookup(surface)
            return entry.close if entry else None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def release(self, surface: Surface) -> bool:
        """Drop every handler for ``surface``. Safe to call repeatedly or for unknown surfaces."""
        with self._lock:
            entry = self._lookup(surface)
            if entry is None:
                return False
            del self._entries[id(surface)]
            self._note("released", surface)
            self._reset_growth_warning()
        _logger.debug("registry entry released for %r", surface)
        return True

    def clear(self) -> None:
        with self._lock:
            for entry in self._entries.values():
                self._note("released", entry.surface)
            self._entries.clear()
            self._warned = False

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def is_registered(self, surface: Surface) -> bool:
        with self._lock:
            return self._lookup(surface) is not None

    def bound_slots(self, surface: Surface) -> Tuple[int, ...]:
        with self._lock:
            entry = self._lookup(surface)
            return tuple(sorted(entry.clicks)) if entry else ()

    @property
    def diagnostics(self) -> Optional[SurfaceDiagnostics]:
        return self._diagnostics

    def surfaces(self) -> List[Surface]:
        with self._lock:
            return [e.surface for e in self._entries.values()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
