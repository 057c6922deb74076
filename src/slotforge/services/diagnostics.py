"""Surface lifecycle diagnostics.

Records what happens to surfaces in an `EventRegistry` and its dispatcher so a
host can see which surfaces were registered and never released, and which
handlers blew up during dispatch:

 - ``created``        first handler registered for a surface
 - ``released``       `release` dropped the surface
 - ``pruned``         last handler removed, entry dropped
 - ``handler_failed`` a click/drag/close handler raised during dispatch

Records keep the surface's type, size and title (not the surface itself) so the
recorder never extends a surface's lifetime. Capacity is bounded; the
per-kind counters are not, so ``outstanding()`` stays accurate after the buffer
wraps.
"""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from threading import RLock
from time import time
from typing import Deque, Dict, List, Optional

from ..config.settings import DIAGNOSTICS_CAPACITY
from ..models import Surface

__all__ = ["SurfaceRecord", "SurfaceDiagnostics", "RECORD_KINDS"]

RECORD_KINDS = ("created", "released", "pruned", "handler_failed")


@dataclass(frozen=True)
class SurfaceRecord:
    kind: str
    container_type: str
    size: int
    title: str
    timestamp: float
    detail: str = ""


class SurfaceDiagnostics:
    """Bounded, thread-safe log of surface lifecycle records."""

    def __init__(self, capacity: int = DIAGNOSTICS_CAPACITY) -> None:
        self._lock = RLock()
        self._records: Deque[SurfaceRecord] = deque(maxlen=capacity)
        self._counts: Counter[str] = Counter()

    def record(self, kind: str, surface: Surface, detail: str = "") -> SurfaceRecord:
        if kind not in RECORD_KINDS:
            raise ValueError(f"Unknown diagnostics record kind '{kind}'")
        rec = SurfaceRecord(
            kind=kind,
            container_type=surface.container_type.value,
            size=surface.size,
            title=surface.title,
            timestamp=time(),
            detail=detail,
        )
        with self._lock:
            self._records.append(rec)
            self._counts[kind] += 1
        return rec

    def recent(self, limit: Optional[int] = None) -> List[SurfaceRecord]:
        with self._lock:
            data = list(self._records)
        if limit is None:
            return data
        if limit <= 0:
            return []
        return data[-limit:]

    def filter(self, *, kind: str | None = None, container_type: str | None = None) -> List[SurfaceRecord]:
        return [
            r
            for r in self.recent()
            if (kind is None or r.kind == kind)
            and (container_type is None or r.container_type == container_type)
        ]

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return {k: self._counts.get(k, 0) for k in RECORD_KINDS}

    def outstanding(self) -> int:
        """Surfaces created and not yet released or pruned."""
        with self._lock:
            return self._counts["created"] - self._counts["released"] - self._counts["pruned"]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._counts.clear()
