from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tablestate.domain.columns import SELECT_COLUMN_ID
from tablestate.domain.models import SortDirection
from tablestate.projection import HeaderCell, Projection

# Header pixels per terminal cell; a 180px column renders 22 characters wide.
PIXELS_PER_CELL = 8

_SORT_MARKERS = {
    SortDirection.ASCENDING: " ▲",
    SortDirection.DESCENDING: " ▼",
    SortDirection.NONE: "",
}

_SELECT_ALL_MARKERS = {
    "checked": "[x]",
    "indeterminate": "[-]",
    "unchecked": "[ ]",
}


def _header_text(cell: HeaderCell, select_all_state: str) -> str:
    if cell.column_id == SELECT_COLUMN_ID:
        return escape(_SELECT_ALL_MARKERS[select_all_state])
    label = cell.column.label or cell.column_id
    return escape(f"{label}{_SORT_MARKERS[cell.sort_direction]}")


def _footer(projection: Projection) -> str:
    page = projection.pagination
    return (
        f"Showing {page.range_start} to {page.range_end} of {page.total_rows} entries"
        f" │ Page {page.page_index + 1} of {page.page_count}"
        f" │ {page.page_size} rows per page"
    )


def _selection_title(projection: Projection) -> str:
    count = projection.selection_summary.selected_count
    if count == 0:
        return "No rows selected"
    return f"{count} of {projection.pagination.total_rows} row(s) selected"


def render_projection(projection: Projection, title: str = "Data Table") -> Table:
    """
    Build a rich Table for the projection.

    Column order and relative widths follow the header layout; the selection
    column shows the tri-state select-all marker and per-row checkboxes.
    """
    select_all_state = projection.selection_summary.select_all_state
    table = Table(
        title=f"{title}\n[dim]{_selection_title(projection)}[/dim]",
        box=box.ROUNDED,
        caption=_footer(projection),
    )

    for cell in projection.header_layout:
        style = "bold cyan" if cell.sort_direction is not SortDirection.NONE else None
        if cell.is_resizing or cell.is_drop_target:
            style = "reverse"
        table.add_column(
            _header_text(cell, select_all_state),
            width=max(3, cell.width // PIXELS_PER_CELL),
            style=style,
            overflow="ellipsis",
            no_wrap=True,
            justify="right" if cell.column_id == "amount" else "left",
        )

    if not projection.visible_rows:
        widths = [cell.width for cell in projection.header_layout]
        placeholder = [""] * len(widths)
        placeholder[widths.index(max(widths))] = "No results found."
        table.add_row(*placeholder)
        return table

    for row in projection.visible_rows:
        cells = []
        for cell in projection.header_layout:
            if cell.column_id == SELECT_COLUMN_ID:
                cells.append(escape("[x]" if row.is_selected else "[ ]"))
            else:
                cells.append(escape(cell.column.display(row.record)))
        table.add_row(*cells, style="on grey15" if row.is_selected else None)

    return table


def print_projection(
    projection: Projection, console: Optional[Console] = None, title: str = "Data Table"
) -> None:
    """Render the projection to the console."""
    console = console or Console()
    console.print(render_projection(projection, title=title))


__all__ = ["PIXELS_PER_CELL", "print_projection", "render_projection"]
