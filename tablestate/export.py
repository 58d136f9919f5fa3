"""
Export transform: the currently visible page as flat spreadsheet rows.

Only the rows of the current page are exported, not the full dataset.
Presentational columns (selection checkbox, avatar image) are skipped, and
cell values are the raw accessor values rather than display strings.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from tablestate.domain.models import ColumnDescriptor
from tablestate.projection import Projection

ExportRow = Dict[str, Any]


def exportable_columns(columns: Iterable[ColumnDescriptor]) -> List[ColumnDescriptor]:
    return [column for column in columns if not column.presentational]


def export_visible(projection: Projection, columns: Iterable[ColumnDescriptor]) -> List[ExportRow]:
    """
    Map the projection's visible rows to ordered ``{column_id: raw value}`` dicts.

    Parameters
    ----------
    projection : Projection
        Current engine read model; only ``visible_rows`` is consulted.
    columns : iterable of ColumnDescriptor
        Columns in the order the exported fields should appear.

    Returns
    -------
    list[dict]
        One mapping per visible row, in display order.
    """
    fields = exportable_columns(columns)
    return [
        {column.id: column.value(row.record) for column in fields}
        for row in projection.visible_rows
    ]


__all__ = ["ExportRow", "export_visible", "exportable_columns"]
