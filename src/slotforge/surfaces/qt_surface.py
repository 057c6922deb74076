"""Surface backed by a PyQt6 `QStandardItemModel`.

The model is laid out as the surface's visual grid (9 columns for chest-like
surfaces, 3x3 for dispensers, a single row otherwise) so any Qt item view can
present it directly. Each occupied cell holds a `QStandardItem` whose text is
the item label and whose ``UserRole`` data is the `Item` value itself.
"""

from __future__ import annotations

from typing import Any, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QStandardItem, QStandardItemModel

from ..geometry import grid_dimensions, slot_to_cell
from ..models import ContainerType, Item
from .base import BaseSurface

__all__ = ["QtSurface", "ITEM_ROLE"]

ITEM_ROLE = Qt.ItemDataRole.UserRole


class QtSurface(BaseSurface):
    def __init__(
        self, container_type: ContainerType, size: int, title: str = "", owner: Any = None
    ) -> None:
        super().__init__(container_type, size, title, owner)
        rows, per_row = grid_dimensions(container_type.shape, size)
        if rows == 0:
            rows, per_row = 1, size
        self._per_row = per_row
        self._model = QStandardItemModel(rows, per_row)

    @property
    def model(self) -> QStandardItemModel:
        return self._model

    def _read(self, slot: int) -> Optional[Item]:
        row, col = slot_to_cell(slot, self._per_row)
        cell = self._model.item(row, col)
        if cell is None:
            return None
        return cell.data(ITEM_ROLE)

    def _write(self, slot: int, item: Optional[Item]) -> None:
        row, col = slot_to_cell(slot, self._per_row)
        if item is None:
            self._model.takeItem(row, col)
            return
        cell = QStandardItem(item.label)
        cell.setData(item, ITEM_ROLE)
        cell.setEditable(False)
        if item.lore:
            cell.setToolTip("\n".join(item.lore))
        self._model.setItem(row, col, cell)
