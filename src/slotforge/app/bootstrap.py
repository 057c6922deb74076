"""Application bootstrap for slotforge.

Responsibilities:
 - Detect PyQt6 and choose the surface backend (Qt model or plain memory)
 - Optional headless bootstrap (tests / servers without a GUI)
 - Own the GUI-management objects: one `EventRegistry`, the container
   factory, the interaction dispatcher and surface diagnostics
 - Tear all of it down again (`GUIContext.shutdown`)

PyQt6 is not imported at module import time so headless callers and test
collection never require it.
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..builders.gui_builder import GUIBuilder
from ..models import ContainerType
from ..services.diagnostics import SurfaceDiagnostics
from ..services.dispatch import InteractionDispatcher
from ..services.event_registry import EventRegistry
from ..surfaces.factory import ContainerFactory

__all__ = ["GUIContext", "create_context", "qt_available"]

_logger = logging.getLogger(__name__)


def qt_available() -> bool:
    try:
        from PyQt6.QtGui import QStandardItemModel  # type: ignore  # noqa: F401
    except ImportError:
        return False
    return True


@dataclass
class GUIContext:
    """References created during bootstrap.

    Attributes
    ----------
    registry: Handler registry shared by every builder created here
    factory: Container creation service for the selected backend
    dispatcher: Bridge resolving raw interactions through ``registry``
    diagnostics: Lifecycle records for ``registry`` (None for an adopted registry built without one)
    headless: Whether headless bootstrap was used
    qt_app: The QApplication instance (None when headless)
    started_at / duration_s: Bootstrap timing
    """

    registry: EventRegistry
    factory: ContainerFactory
    dispatcher: InteractionDispatcher
    diagnostics: Optional[SurfaceDiagnostics]
    headless: bool
    qt_app: Optional[Any] = None
    started_at: float = 0.0
    duration_s: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def backend(self) -> str:
        return self.factory.backend

    def create_gui(
        self, name: str, rows_or_type: Union[int, ContainerType], owner: Any = None
    ) -> GUIBuilder:
        return GUIBuilder.create_gui(
            name, rows_or_type, registry=self.registry, owner=owner, factory=self.factory
        )

    def shutdown(self) -> None:
        """Release every registered surface and drop recorded dispatch errors."""
        remaining = len(self.registry)
        if remaining:
            _logger.info("shutdown releasing %d surfaces still registered", remaining)
        self.registry.clear()
        self.dispatcher.clear_errors()

    def __enter__(self) -> "GUIContext":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()


def create_context(
    *,
    headless: bool | None = None,
    backend: str | None = None,
    registry: EventRegistry | None = None,
    release_on_close: bool = True,
) -> GUIContext:
    """Create and initialize a GUI-management context.

    Parameters
    ----------
    headless: Force headless (no QApplication). If None, inferred from Qt availability.
    backend: ``"memory"`` or ``"qt"``. If None, Qt when a QApplication is created, else memory.
    registry: Existing registry to adopt instead of creating a new one.
    release_on_close: Whether close dispatch releases the surface's registry entry.
    """
    started = time.perf_counter()
    has_qt = qt_available()
    if headless is None:
        headless = not has_qt

    qt_app = None
    if not headless and has_qt:
        from PyQt6.QtWidgets import QApplication  # type: ignore

        qt_app = QApplication.instance() or QApplication(sys.argv)

    if backend is None:
        backend = "qt" if qt_app is not None else "memory"
    factory = ContainerFactory(backend)
    if registry is None:
        registry = EventRegistry(diagnostics=SurfaceDiagnostics())
    dispatcher = InteractionDispatcher(registry, release_on_close=release_on_close)

    duration = time.perf_counter() - started
    _logger.debug("context created backend=%s headless=%s in %.4fs", backend, headless, duration)
    return GUIContext(
        registry=registry,
        factory=factory,
        dispatcher=dispatcher,
        diagnostics=registry.diagnostics,
        headless=headless,
        qt_app=qt_app,
        started_at=started,
        duration_s=duration,
        metadata={"qt_available": has_qt},
    )
