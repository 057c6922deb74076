"""Shared slot bookkeeping for surface backends.

Backends only store and fetch single slots (`_read` / `_write`); bounds
checking, first-empty placement and bulk helpers live here so every backend
honours the same placement contract.
"""

from __future__ import annotations

from typing import Any, List, Optional

from ..errors import check_slot
from ..models import ContainerType, Item, ShapeKind

__all__ = ["BaseSurface"]


class BaseSurface:
    """Fixed-capacity slot container. Equality is identity (never structural)."""

    def __init__(
        self, container_type: ContainerType, size: int, title: str = "", owner: Any = None
    ) -> None:
        self.container_type = container_type
        self.title = title
        self.owner = owner
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    @property
    def shape(self) -> ShapeKind:
        return self.container_type.shape

    # Backend hooks ----------------------------------------------------
    def _read(self, slot: int) -> Optional[Item]:  # pragma: no cover - abstract
        raise NotImplementedError

    def _write(self, slot: int, item: Optional[Item]) -> None:  # pragma: no cover - abstract
        raise NotImplementedError

    # Placement ----------------------------------------------------------
    def get_item(self, slot: int) -> Optional[Item]:
        return self._read(check_slot(slot, self._size))

    def set_item(self, slot: int, item: Optional[Item]) -> None:
        self._write(check_slot(slot, self._size), item)

    def first_empty(self) -> int:
        for slot in range(self._size):
            if self._read(slot) is None:
                return slot
        return -1

    def add_item(self, item: Item) -> Optional[Item]:
        """Place ``item`` in the first empty slot; return it back if the surface is full."""
        slot = self.first_empty()
        if slot == -1:
            return item
        self._write(slot, item)
        return None

    def contents(self) -> List[Optional[Item]]:
        return [self._read(slot) for slot in range(self._size)]

    def clear(self) -> None:
        for slot in range(self._size):
            self._write(slot, None)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(type={self.container_type.value}, size={self._size}, "
            f"title={self.title!r})"
        )
