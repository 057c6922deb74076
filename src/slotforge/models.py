"""Core value types shared by surfaces, geometry and the builder.

`ContainerType` names the concrete container kinds a surface can be created
as; each maps to a `ShapeKind` which is all the border geometry cares about.
`Surface` is the structural contract every backend (memory, Qt model) meets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Protocol, Union

from .errors import InvalidArgumentError

__all__ = [
    "ShapeKind",
    "ContainerType",
    "Item",
    "ItemLike",
    "Surface",
    "Handler",
    "as_item",
]


class ShapeKind(str, Enum):
    ROWS = "rows"  # chest-like, 9 per row
    GRID_3X3 = "grid_3x3"  # dispenser / dropper
    HOPPER = "hopper"  # fixed 5 slots
    OTHER = "other"


class ContainerType(str, Enum):
    CHEST = "chest"
    ENDER_CHEST = "ender_chest"
    SHULKER_BOX = "shulker_box"
    BARREL = "barrel"
    DISPENSER = "dispenser"
    DROPPER = "dropper"
    HOPPER = "hopper"
    FURNACE = "furnace"
    WORKBENCH = "workbench"
    BREWING = "brewing"
    ANVIL = "anvil"

    @property
    def shape(self) -> ShapeKind:
        return _SHAPES[self]

    @property
    def default_size(self) -> int:
        return _DEFAULT_SIZES[self]


_SHAPES: dict[ContainerType, ShapeKind] = {
    ContainerType.CHEST: ShapeKind.ROWS,
    ContainerType.ENDER_CHEST: ShapeKind.ROWS,
    ContainerType.SHULKER_BOX: ShapeKind.ROWS,
    ContainerType.BARREL: ShapeKind.ROWS,
    ContainerType.DISPENSER: ShapeKind.GRID_3X3,
    ContainerType.DROPPER: ShapeKind.GRID_3X3,
    ContainerType.HOPPER: ShapeKind.HOPPER,
    ContainerType.FURNACE: ShapeKind.OTHER,
    ContainerType.WORKBENCH: ShapeKind.OTHER,
    ContainerType.BREWING: ShapeKind.OTHER,
    ContainerType.ANVIL: ShapeKind.OTHER,
}

_DEFAULT_SIZES: dict[ContainerType, int] = {
    ContainerType.CHEST: 27,
    ContainerType.ENDER_CHEST: 27,
    ContainerType.SHULKER_BOX: 27,
    ContainerType.BARREL: 27,
    ContainerType.DISPENSER: 9,
    ContainerType.DROPPER: 9,
    ContainerType.HOPPER: 5,
    ContainerType.FURNACE: 3,
    ContainerType.WORKBENCH: 10,
    ContainerType.BREWING: 5,
    ContainerType.ANVIL: 3,
}


@dataclass(frozen=True)
class Item:
    """Immutable stack placed into a slot.

    Attributes
    ----------
    material: str
        Material identifier (e.g. ``"glass_pane"``).
    amount: int
        Stack size, at least 1.
    display_name: str | None
        Optional custom name shown instead of the material.
    lore: tuple[str, ...]
        Extra description lines.
    """

    material: str
    amount: int = 1
    display_name: Optional[str] = None
    lore: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.material, str) or not self.material:
            raise InvalidArgumentError(
                "Item material must be a non-empty string", context={"material": self.material}
            )
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidArgumentError(
                f"Item amount must be an int, got {type(self.amount).__name__}"
            )
        if self.amount < 1:
            raise InvalidArgumentError(
                f"Item amount must be >= 1, got {self.amount}", context={"amount": self.amount}
            )

    @classmethod
    def of(cls, material: str) -> "Item":
        return cls(material=material)

    @property
    def label(self) -> str:
        return self.display_name or self.material


ItemLike = Union[Item, str]


def as_item(value: ItemLike) -> Item:
    """Accept either an `Item` or a bare material name."""
    if isinstance(value, Item):
        return value
    if isinstance(value, str):
        return Item.of(value)
    raise InvalidArgumentError(
        f"Expected Item or material name, got {type(value).__name__}"
    )


Handler = Callable[[Any], None]


class Surface(Protocol):  # noqa: D401 - structural contract
    title: str
    owner: Any
    container_type: ContainerType

    @property
    def size(self) -> int: ...  # pragma: no cover - structural

    @property
    def shape(self) -> ShapeKind: ...  # pragma: no cover - structural

    def get_item(self, slot: int) -> Optional[Item]: ...  # pragma: no cover

    def set_item(self, slot: int, item: Optional[Item]) -> None: ...  # pragma: no cover

    def add_item(self, item: Item) -> Optional[Item]: ...  # pragma: no cover

    def first_empty(self) -> int: ...  # pragma: no cover

    def contents(self) -> list[Optional[Item]]: ...  # pragma: no cover

    def clear(self) -> None: ...  # pragma: no cover
