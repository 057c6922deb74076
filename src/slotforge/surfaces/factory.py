"""Container creation service.

Creates surfaces from either a slot count (chest-like, multiple of 9) or a
`ContainerType`. The Qt backend is imported lazily so headless callers never
pay for (or require) PyQt6.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Union

from ..config.settings import DEFAULT_BACKEND, MAX_ROW_SLOTS, SLOTS_PER_ROW
from ..errors import InvalidArgumentError
from ..models import ContainerType, Surface
from .memory_surface import MemorySurface

__all__ = ["ContainerFactory", "colour_title", "BACKENDS"]

_logger = logging.getLogger(__name__)

BACKENDS = ("memory", "qt")

_COLOUR_CODE = re.compile(r"&([0-9a-fk-orA-FK-OR])")


def colour_title(text: str) -> str:
    """Translate ``&``-prefixed colour codes into section-sign codes (``&a`` -> ``§a``)."""
    return _COLOUR_CODE.sub(lambda m: "§" + m.group(1).lower(), text)


class ContainerFactory:
    """Creates surfaces for one backend (``"memory"`` or ``"qt"``)."""

    def __init__(self, backend: str | None = None) -> None:
        backend = backend or DEFAULT_BACKEND
        if backend not in BACKENDS:
            raise InvalidArgumentError(
                f"Unknown surface backend '{backend}'", context={"backend": backend}
            )
        self.backend = backend

    def _surface_class(self) -> type:
        if self.backend == "qt":
            from .qt_surface import QtSurface  # local import: optional Qt dependency

            return QtSurface
        return MemorySurface

    def create(self, owner: Any, title: str, size_or_type: Union[int, ContainerType]) -> Surface:
        if isinstance(size_or_type, ContainerType):
            container_type = size_or_type
            size = container_type.default_size
        elif isinstance(size_or_type, int) and not isinstance(size_or_type, bool):
            size = size_or_type
            if size <= 0 or size > MAX_ROW_SLOTS or size % SLOTS_PER_ROW:
                raise InvalidArgumentError(
                    f"Size must be a positive multiple of {SLOTS_PER_ROW} up to {MAX_ROW_SLOTS}, got {size}",
                    context={"size": size},
                )
            container_type = ContainerType.CHEST
        else:
            raise InvalidArgumentError(
                f"Expected slot count or ContainerType, got {type(size_or_type).__name__}"
            )
        surface = self._surface_class()(container_type, size, colour_title(title), owner)
        _logger.debug("created %r (backend=%s)", surface, self.backend)
        return surface
