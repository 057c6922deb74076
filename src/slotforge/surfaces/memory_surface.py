"""Plain Python surface backend (headless default)."""

from __future__ import annotations

from typing import Any, List, Optional

from ..models import ContainerType, Item
from .base import BaseSurface

__all__ = ["MemorySurface"]


class MemorySurface(BaseSurface):
    def __init__(
        self, container_type: ContainerType, size: int, title: str = "", owner: Any = None
    ) -> None:
        super().__init__(container_type, size, title, owner)
        self._slots: List[Optional[Item]] = [None] * size

    def _read(self, slot: int) -> Optional[Item]:
        return self._slots[slot]

    def _write(self, slot: int, item: Optional[Item]) -> None:
        self._slots[slot] = item
