"""
Table engine: composes sort, pagination, selection, and column layout into one
consistent read model and exposes the intent API a rendering layer drives.

Usage:
    from tablestate.engine import TableEngine

    engine = TableEngine(records)
    engine.toggle_sort("amount")
    engine.set_page_size(10)
    projection = engine.get_projection()

Every intent is a total function: invalid input is clamped or ignored, never
raised. Only construction can fail, with ConfigurationError. Each intent
recomputes the projection synchronously before returning it.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from tablestate.config import get_settings
from tablestate.domain.columns import ColumnRegistry, default_columns
from tablestate.domain.models import ColumnDescriptor, Record
from tablestate.domain.records import RecordStore
from tablestate.export import ExportRow, export_visible
from tablestate.projection import (
    HeaderCell,
    PaginationSummary,
    Projection,
    RowView,
    SelectionSummary,
)
from tablestate.state.interaction import InteractionSession
from tablestate.state.layout import LayoutState
from tablestate.state.pagination import PaginationState
from tablestate.state.selection import SelectionState
from tablestate.state.sort import SortState
from tablestate.utils.logging import get_logger

log = get_logger(__name__)

ColumnsInput = Union[ColumnRegistry, Iterable[ColumnDescriptor], Sequence[Mapping[str, Any]]]
RecordsInput = Iterable[Union[Record, Mapping[str, Any]]]


def _as_registry(columns: Optional[ColumnsInput]) -> ColumnRegistry:
    if columns is None:
        return default_columns()
    if isinstance(columns, ColumnRegistry):
        return columns
    items = list(columns)
    if items and all(isinstance(item, Mapping) for item in items):
        return ColumnRegistry.from_config(items)  # type: ignore[arg-type]
    return ColumnRegistry(items)  # type: ignore[arg-type]


class TableEngine:
    """
    Orchestrator owning the record store, column registry, and all mutable sub-states.

    Parameters
    ----------
    records : iterable of Record or mapping
        Initial ordered record sequence.
    columns : ColumnRegistry | iterable of ColumnDescriptor | sequence of mappings, optional
        Column configuration. Defaults to the stock column set.
    page_size : int, optional
        Initial page size. Defaults to settings.page_size.
    page_size_options : sequence of int, optional
        Allowed page sizes. Defaults to settings.page_size_options.

    Raises
    ------
    ConfigurationError
        For duplicate column or record ids, invalid column widths, or a page
        size that is not among the allowed options.
    """

    def __init__(
        self,
        records: RecordsInput = (),
        columns: Optional[ColumnsInput] = None,
        page_size: Optional[int] = None,
        page_size_options: Optional[Sequence[int]] = None,
    ) -> None:
        settings = get_settings()
        self.columns = _as_registry(columns)
        self.store = RecordStore(records)

        self._sort = SortState()
        self._pagination = PaginationState(
            page_size=page_size or settings.page_size,
            options=tuple(page_size_options or settings.page_size_options),
        )
        self._selection = SelectionState()
        self._layout = LayoutState(self.columns)
        self._session = InteractionSession.idle()

        self._sorted_rows: List[Record] = []
        self._projection: Optional[Projection] = None
        self._recompute()

        log.info(
            "Table engine ready",
            extra={
                "rows": len(self.store),
                "columns": len(self.columns),
                "page_size": self._pagination.page_size,
            },
        )

    # ------------------------------------------------------------------
    # Read model
    # ------------------------------------------------------------------

    def get_projection(self) -> Projection:
        assert self._projection is not None
        return self._projection

    @property
    def session(self) -> InteractionSession:
        return self._session

    @property
    def column_order(self) -> List[str]:
        return list(self._layout.order)

    @property
    def column_widths(self) -> dict:
        return dict(self._layout.widths)

    @property
    def selected_ids(self) -> frozenset:
        return frozenset(self._selection.selected)

    def _recompute(self) -> Projection:
        row_count = len(self.store)
        self._sorted_rows = self._sort.apply(self.store.records, self.columns)
        self._pagination.clamp(row_count)

        page = self._pagination.window(self._sorted_rows)
        page_ids = [record.id for record in page]
        rows = tuple(RowView(record=record, is_selected=record.id in self._selection) for record in page)

        range_start, range_end = self._pagination.range_bounds(row_count)
        pagination = PaginationSummary(
            page_index=self._pagination.page_index,
            page_size=self._pagination.page_size,
            page_count=self._pagination.page_count(row_count),
            total_rows=row_count,
            range_start=range_start,
            range_end=range_end,
            can_previous_page=self._pagination.can_previous_page(),
            can_next_page=self._pagination.can_next_page(row_count),
        )
        selection = SelectionSummary(
            selected_count=len(self._selection),
            is_all_on_page_selected=self._selection.is_all_on_page_selected(page_ids),
            is_some_on_page_selected=self._selection.is_some_on_page_selected(page_ids),
        )

        session = self._session
        header = tuple(
            HeaderCell(
                column=self.columns[column_id],
                width=self._layout.width_of(column_id),
                sort_direction=self._sort.direction_for(column_id),
                is_resizing=session.is_resizing and session.column_id == column_id,
                is_dragging=session.is_dragging and session.column_id == column_id,
                is_drop_target=session.is_dragging and session.over_id == column_id,
            )
            for column_id in self._layout.order
        )

        self._projection = Projection(
            header_layout=header,
            visible_rows=rows,
            pagination=pagination,
            selection_summary=selection,
            interaction=session,
        )
        return self._projection

    def _applied(self, intent: str, **extra: Any) -> Projection:
        log.debug("Intent applied", extra={"intent": intent, **extra})
        return self._recompute()

    def _ignored(self, intent: str, reason: str, **extra: Any) -> Projection:
        log.debug("Intent ignored", extra={"intent": intent, "reason": reason, **extra})
        return self.get_projection()

    def _page_ids(self) -> List[int]:
        return list(self.get_projection().visible_ids)

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def toggle_sort(self, column_id: str) -> Projection:
        if not self._sort.toggle(column_id, self.columns):
            return self._ignored("toggle_sort", "column not sortable", column_id=column_id)
        return self._applied(
            "toggle_sort", column_id=column_id, direction=self._sort.direction.value
        )

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def toggle_row(self, record_id: int) -> Projection:
        if record_id not in self.store:
            return self._ignored("toggle_row", "unknown record", record_id=record_id)
        self._selection.toggle_row(record_id)
        return self._applied("toggle_row", record_id=record_id)

    def toggle_all_on_current_page(self) -> Projection:
        self._selection.toggle_all_on_page(self._page_ids())
        return self._applied("toggle_all_on_current_page")

    def clear_all(self) -> Projection:
        self._selection.clear_all()
        return self._applied("clear_all")

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def set_page_size(self, size: int) -> Projection:
        self._pagination.set_page_size(size, len(self.store))
        return self._applied("set_page_size", requested=size, page_size=self._pagination.page_size)

    def set_page_index(self, index: int) -> Projection:
        self._pagination.set_page_index(index, len(self.store))
        return self._applied(
            "set_page_index", requested=index, page_index=self._pagination.page_index
        )

    def next_page(self) -> Projection:
        self._pagination.next_page(len(self.store))
        return self._applied("next_page", page_index=self._pagination.page_index)

    def previous_page(self) -> Projection:
        self._pagination.previous_page()
        return self._applied("previous_page", page_index=self._pagination.page_index)

    def first_page(self) -> Projection:
        self._pagination.first_page()
        return self._applied("first_page")

    def last_page(self) -> Projection:
        self._pagination.last_page(len(self.store))
        return self._applied("last_page", page_index=self._pagination.page_index)

    # ------------------------------------------------------------------
    # Column layout
    # ------------------------------------------------------------------

    def move_column(self, dragged_id: str, target_id: str) -> Projection:
        if not self._layout.move_column(dragged_id, target_id):
            return self._ignored(
                "move_column", "same, pinned or unknown column", dragged=dragged_id, target=target_id
            )
        return self._applied("move_column", dragged=dragged_id, target=target_id)

    def resize_column(self, column_id: str, delta: int) -> Projection:
        if not self._layout.resize_column(column_id, delta):
            return self._ignored("resize_column", "column not resizable", column_id=column_id)
        return self._applied(
            "resize_column", column_id=column_id, width=self._layout.width_of(column_id)
        )

    def reset_order(self) -> Projection:
        self._layout.reset_order()
        return self._applied("reset_order")

    def reset_widths(self) -> Projection:
        self._layout.reset_widths()
        return self._applied("reset_widths")

    # ------------------------------------------------------------------
    # Interaction sessions (drag-reorder, drag-resize)
    # ------------------------------------------------------------------

    def begin_drag(self, column_id: str) -> Projection:
        self._abort_session()
        if not self._layout.can_drag(column_id):
            # an aborted resize may have restored a width
            self._recompute()
            return self._ignored("begin_drag", "pinned or unknown column", column_id=column_id)
        self._session = InteractionSession.dragging(column_id)
        return self._applied("begin_drag", column_id=column_id)

    def update_drag(self, over_id: Optional[str]) -> Projection:
        if not self._session.is_dragging:
            return self._ignored("update_drag", "no drag in progress")
        valid = over_id is not None and over_id != self._session.column_id and self._layout.can_drag(over_id)
        self._session = self._session.hovering(over_id if valid else None)
        return self._applied("update_drag", over_id=over_id)

    def end_drag(self, target_id: Optional[str] = None) -> Projection:
        if not self._session.is_dragging:
            return self._ignored("end_drag", "no drag in progress")
        source_id = self._session.column_id
        self._session = InteractionSession.idle()
        if target_id is None or source_id is None:
            return self._applied("end_drag", committed=False)
        moved = self._layout.move_column(source_id, target_id)
        return self._applied("end_drag", dragged=source_id, target=target_id, committed=moved)

    def begin_resize(self, column_id: str) -> Projection:
        self._abort_session()
        column = self.columns.get(column_id)
        if column is None or not column.resizable:
            self._recompute()
            return self._ignored("begin_resize", "column not resizable", column_id=column_id)
        self._session = InteractionSession.resizing(column_id, self._layout.width_of(column_id))
        return self._applied("begin_resize", column_id=column_id)

    def update_resize(self, delta: int) -> Projection:
        if not self._session.is_resizing or self._session.column_id is None:
            return self._ignored("update_resize", "no resize in progress")
        column_id = self._session.column_id
        self._layout.resize_column(column_id, delta)
        return self._applied("update_resize", column_id=column_id, width=self._layout.width_of(column_id))

    def end_resize(self) -> Projection:
        if not self._session.is_resizing:
            return self._ignored("end_resize", "no resize in progress")
        column_id = self._session.column_id
        self._session = InteractionSession.idle()
        return self._applied("end_resize", column_id=column_id)

    def cancel_interaction(self) -> Projection:
        if self._session.is_idle:
            return self._ignored("cancel_interaction", "no session in progress")
        self._abort_session()
        return self._applied("cancel_interaction")

    def _abort_session(self) -> None:
        """Drop the active session, undoing any live resize it applied."""
        session = self._session
        if session.is_resizing and session.column_id is not None and session.start_width is not None:
            self._layout.set_width(session.column_id, session.start_width)
        self._session = InteractionSession.idle()

    # ------------------------------------------------------------------
    # Records and export
    # ------------------------------------------------------------------

    def replace_records(self, records: RecordsInput) -> Projection:
        """Swap the record set; selections that no longer resolve are dropped."""
        self.store = RecordStore(records)
        dropped = self._selection.prune(self.store.ids)
        return self._applied("replace_records", rows=len(self.store), dropped_selection=dropped)

    def export_visible(self) -> List[ExportRow]:
        """Flat rows for the currently visible page, in registry column order."""
        return export_visible(self.get_projection(), self.columns)


__all__ = ["TableEngine"]
