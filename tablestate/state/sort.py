"""
Sort state: one optional active column plus a direction.

Toggling cycles none -> ascending -> descending -> none on the same column and
replaces any other active column. Ordering is stable in both directions.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Optional, Sequence, Tuple

from tablestate.domain.columns import ColumnRegistry
from tablestate.domain.models import Record, SortDirection

_NUMERIC = (int, float, Decimal)

_NEXT_DIRECTION = {
    SortDirection.NONE: SortDirection.ASCENDING,
    SortDirection.ASCENDING: SortDirection.DESCENDING,
    SortDirection.DESCENDING: SortDirection.NONE,
}


def _sort_key(value: Any) -> Tuple[int, Any]:
    """Numbers compare numerically and sort ahead of text; everything else compares as text."""
    if isinstance(value, _NUMERIC) and not isinstance(value, bool):
        return (0, value)
    return (1, str(value))


@dataclass
class SortState:
    column_id: Optional[str] = None
    direction: SortDirection = SortDirection.NONE

    @property
    def is_active(self) -> bool:
        return self.column_id is not None and self.direction is not SortDirection.NONE

    def direction_for(self, column_id: str) -> SortDirection:
        if column_id == self.column_id:
            return self.direction
        return SortDirection.NONE

    def toggle(self, column_id: str, registry: ColumnRegistry) -> bool:
        """
        Advance the sort cycle for ``column_id``.

        Returns False (and leaves state untouched) when the column is unknown
        or not sortable.
        """
        column = registry.get(column_id)
        if column is None or not column.sortable:
            return False

        if column_id != self.column_id:
            self.column_id = column_id
            self.direction = SortDirection.ASCENDING
            return True

        self.direction = _NEXT_DIRECTION[self.direction]
        if self.direction is SortDirection.NONE:
            self.column_id = None
        return True

    def clear(self) -> None:
        self.column_id = None
        self.direction = SortDirection.NONE

    def apply(self, records: Sequence[Record], registry: ColumnRegistry) -> List[Record]:
        """
        Return ``records`` ordered by the active column.

        Ties keep their original relative order in both directions; missing
        (``None``) values always go last.
        """
        if not self.is_active:
            return list(records)
        column = registry.get(self.column_id)  # type: ignore[arg-type]
        if column is None:
            return list(records)

        present: List[Tuple[Tuple[int, Any], Record]] = []
        missing: List[Record] = []
        for record in records:
            value = column.value(record)
            if value is None:
                missing.append(record)
            else:
                present.append((_sort_key(value), record))

        # list.sort is stable, and stays stable with reverse=True
        present.sort(
            key=lambda pair: pair[0],
            reverse=self.direction is SortDirection.DESCENDING,
        )
        return [record for _, record in present] + missing


__all__ = ["SortState"]
