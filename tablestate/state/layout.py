"""
Column layout state: presentation order and pixel widths.

Reorder protocol
----------------
``move_column(dragged, target)`` removes ``dragged`` and reinserts it at the
index ``target`` occupies *after* the removal, so the dragged column always
lands immediately before the target. Pinned or unknown columns never move and
are never used as a drop target.

Resize protocol
---------------
``resize_column(column, delta)`` is applied per pointer-move delta and clamps
at the column's ``min_width`` on every step.
"""
from __future__ import annotations

from typing import Dict, List

from tablestate.domain.columns import ColumnRegistry


class LayoutState:
    def __init__(self, registry: ColumnRegistry) -> None:
        self._registry = registry
        self.order: List[str] = list(registry.ids)
        self.widths: Dict[str, int] = {column.id: column.default_width for column in registry}

    def can_drag(self, column_id: str) -> bool:
        column = self._registry.get(column_id)
        return column is not None and not column.pinned and column_id in self.order

    def move_column(self, dragged_id: str, target_id: str) -> bool:
        """Reorder ``dragged_id`` in front of ``target_id``; returns False for a no-op."""
        if dragged_id == target_id:
            return False
        if not (self.can_drag(dragged_id) and self.can_drag(target_id)):
            return False

        order = list(self.order)
        order.remove(dragged_id)
        order.insert(order.index(target_id), dragged_id)
        self.order = order
        return True

    def reset_order(self) -> None:
        self.order = list(self._registry.ids)

    def width_of(self, column_id: str) -> int:
        return self.widths[column_id]

    def resize_column(self, column_id: str, delta: int) -> bool:
        column = self._registry.get(column_id)
        if column is None or not column.resizable:
            return False
        self.widths[column_id] = max(column.min_width, self.widths[column_id] + int(delta))
        return True

    def set_width(self, column_id: str, width: int) -> bool:
        column = self._registry.get(column_id)
        if column is None:
            return False
        self.widths[column_id] = max(column.min_width, int(width))
        return True

    def reset_widths(self) -> None:
        self.widths = {column.id: column.default_width for column in self._registry}


__all__ = ["LayoutState"]
