"""
Read model handed to rendering layers and to the export transform.

All types are frozen; a projection is a consistent snapshot of the engine
after the most recent intent.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from tablestate.domain.models import ColumnDescriptor, Record, SortDirection
from tablestate.state.interaction import InteractionSession


@dataclass(frozen=True)
class HeaderCell:
    column: ColumnDescriptor
    width: int
    sort_direction: SortDirection = SortDirection.NONE
    is_resizing: bool = False
    is_dragging: bool = False
    is_drop_target: bool = False

    @property
    def column_id(self) -> str:
        return self.column.id


@dataclass(frozen=True)
class RowView:
    record: Record
    is_selected: bool = False

    @property
    def record_id(self) -> int:
        return self.record.id


@dataclass(frozen=True)
class PaginationSummary:
    page_index: int
    page_size: int
    page_count: int
    total_rows: int
    range_start: int
    range_end: int
    can_previous_page: bool = False
    can_next_page: bool = False


@dataclass(frozen=True)
class SelectionSummary:
    selected_count: int
    is_all_on_page_selected: bool
    is_some_on_page_selected: bool

    @property
    def select_all_state(self) -> str:
        """Tri-state value for a "select all" checkbox: checked, indeterminate or unchecked."""
        if self.is_all_on_page_selected:
            return "checked"
        if self.is_some_on_page_selected:
            return "indeterminate"
        return "unchecked"


@dataclass(frozen=True)
class Projection:
    header_layout: Tuple[HeaderCell, ...]
    visible_rows: Tuple[RowView, ...]
    pagination: PaginationSummary
    selection_summary: SelectionSummary
    interaction: InteractionSession = field(default_factory=InteractionSession.idle)

    @property
    def column_order(self) -> Tuple[str, ...]:
        return tuple(cell.column_id for cell in self.header_layout)

    @property
    def visible_ids(self) -> Tuple[int, ...]:
        return tuple(row.record_id for row in self.visible_rows)


__all__ = [
    "HeaderCell",
    "PaginationSummary",
    "Projection",
    "RowView",
    "SelectionSummary",
]
