"""Structured errors raised by surface construction and handler registration."""

from __future__ import annotations
from typing import Any

__all__ = ["SlotforgeError", "InvalidArgumentError", "SlotOutOfRangeError"]


class SlotforgeError(Exception):
    """Base class for slotforge errors."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class InvalidArgumentError(SlotforgeError, ValueError):
    """Raised when a public call receives an out-of-contract value (row count, size, handler)."""


class SlotOutOfRangeError(SlotforgeError, IndexError):
    """Raised when a slot index falls outside ``[0, size)``."""

    def __init__(self, slot: int, size: int):
        super().__init__(
            f"Slot {slot} out of range for surface of size {size}",
            context={"slot": slot, "size": size},
        )
        self.slot = slot
        self.size = size


def check_slot(slot: Any, size: int) -> int:
    """Validate a slot index against a surface size and return it.

    Negative indexes never wrap; ``bool`` is rejected even though it is an int.
    """
    if isinstance(slot, bool) or not isinstance(slot, int):
        raise InvalidArgumentError(
            f"Slot must be an int, got {type(slot).__name__}", context={"slot": slot}
        )
    if slot < 0 or slot >= size:
        raise SlotOutOfRangeError(slot, size)
    return slot
