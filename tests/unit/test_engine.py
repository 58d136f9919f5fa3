from __future__ import annotations

import pytest

from tablestate.config import get_settings
from tablestate.domain.models import ConfigurationError, SortDirection
from tablestate.engine import TableEngine

TOTAL_ROWS = 12
STOCK_ORDER = ("select", "tableId", "avatar", "name", "description", "amount", "tooltip")


def test_initial_projection(engine: TableEngine) -> None:
    projection = engine.get_projection()

    assert projection.visible_ids == (1, 2, 3, 4, 5)
    assert projection.column_order == STOCK_ORDER
    assert [cell.width for cell in projection.header_layout] == [60, 100, 80, 180, 300, 140, 100]
    assert projection.pagination.page_count == 3
    assert projection.pagination.total_rows == TOTAL_ROWS
    assert (projection.pagination.range_start, projection.pagination.range_end) == (1, 5)
    assert not projection.pagination.can_previous_page
    assert projection.pagination.can_next_page
    assert projection.selection_summary.selected_count == 0
    assert projection.interaction.is_idle


def test_page_size_change_clamps_page_index(engine: TableEngine) -> None:
    engine.last_page()
    assert engine.get_projection().pagination.page_index == 2

    projection = engine.set_page_size(20)

    assert projection.pagination.page_count == 1
    assert projection.pagination.page_index == 0
    assert len(projection.visible_rows) == TOTAL_ROWS


def test_selection_survives_sort_page_and_layout_changes(engine: TableEngine) -> None:
    engine.next_page()
    engine.toggle_row(7)
    assert engine.get_projection().selection_summary.selected_count == 1

    engine.toggle_sort("amount")
    engine.set_page_size(20)
    engine.resize_column("description", -40)
    projection = engine.move_column("tooltip", "description")

    assert projection.selection_summary.selected_count == 1
    assert 7 in engine.selected_ids
    visible = {row.record_id: row.is_selected for row in projection.visible_rows}
    assert visible[7] is True


def test_sort_reorders_visible_rows_and_marks_header(engine: TableEngine) -> None:
    projection = engine.toggle_sort("amount")

    assert projection.visible_ids == (11, 8, 4, 1, 3)
    directions = {cell.column_id: cell.sort_direction for cell in projection.header_layout}
    assert directions["amount"] is SortDirection.ASCENDING
    assert directions["name"] is SortDirection.NONE


def test_toggle_all_on_current_page_uses_visible_rows(engine: TableEngine) -> None:
    engine.toggle_sort("amount")
    engine.toggle_sort("amount")

    projection = engine.toggle_all_on_current_page()

    assert engine.selected_ids == {5, 12, 7, 10, 2}
    assert projection.selection_summary.is_all_on_page_selected
    assert projection.selection_summary.select_all_state == "checked"

    engine.next_page()
    summary = engine.get_projection().selection_summary
    assert summary.selected_count == 5
    assert summary.select_all_state == "unchecked"


def test_toggle_all_twice_on_untouched_page_restores_selection(engine: TableEngine) -> None:
    engine.toggle_row(9)
    before = engine.selected_ids

    engine.toggle_all_on_current_page()
    engine.toggle_all_on_current_page()

    assert engine.selected_ids == before


def test_indeterminate_select_all(engine: TableEngine) -> None:
    projection = engine.toggle_row(2)

    assert projection.selection_summary.is_some_on_page_selected
    assert projection.selection_summary.select_all_state == "indeterminate"


def test_clear_all_empties_selection_everywhere(engine: TableEngine) -> None:
    engine.toggle_all_on_current_page()
    engine.last_page()
    engine.toggle_row(12)

    projection = engine.clear_all()

    assert projection.selection_summary.selected_count == 0


def test_invalid_intents_never_raise(engine: TableEngine) -> None:
    before = engine.get_projection()

    engine.toggle_row(404)
    engine.toggle_sort("select")
    engine.move_column("name", "amount")
    engine.resize_column("tableId", 500)
    engine.set_page_index(-3)
    engine.previous_page()

    assert engine.get_projection() == before


def test_replace_records_prunes_selection_and_reclamps(engine: TableEngine, records) -> None:
    engine.toggle_row(2)
    engine.toggle_row(11)
    engine.last_page()

    projection = engine.replace_records(records[:4])

    assert engine.selected_ids == {2}
    assert projection.pagination.page_count == 1
    assert projection.pagination.page_index == 0
    assert projection.selection_summary.selected_count == 1


def test_columns_from_plain_config(records) -> None:
    engine = TableEngine(
        records,
        columns=[
            {"id": "id", "label": "ID", "default_width": 80, "min_width": 40},
            {"id": "name", "label": "Name", "pinned": True},
        ],
    )

    projection = engine.get_projection()

    assert projection.column_order == ("id", "name")
    assert projection.header_layout[0].column.value(records[0]) == 1


@pytest.mark.parametrize(
    "columns",
    [
        [{"id": "id"}, {"id": "id"}],
        [{"id": "id", "min_width": 0}],
        [{"id": "id", "default_width": 40, "min_width": 60}],
        [],
    ],
)
def test_invalid_column_config_fails_construction(records, columns) -> None:
    with pytest.raises(ConfigurationError):
        TableEngine(records, columns=columns)


def test_duplicate_record_ids_fail_construction(records, columns) -> None:
    with pytest.raises(ConfigurationError):
        TableEngine([records[0], records[0]], columns=columns)


def test_page_size_defaults_come_from_settings(records, monkeypatch, fresh_settings) -> None:
    monkeypatch.setenv("TABLE_PAGE_SIZE", "10")
    monkeypatch.setenv("TABLE_PAGE_SIZE_OPTIONS", "[10, 25]")

    engine = TableEngine(records)
    projection = engine.set_page_size(20)

    assert get_settings().page_size == 10
    assert projection.pagination.page_size == 25
    assert projection.pagination.page_count == 1


def test_mapping_records_are_validated(columns) -> None:
    engine = TableEngine(
        [{"id": 1, "tableId": "TBL-1", "name": "Ada", "amount": "12.50"}],
        columns=columns,
    )

    row = engine.get_projection().visible_rows[0]
    assert row.record.table_id == "TBL-1"
    assert str(row.record.amount) == "12.50"


def test_float_page_index_is_coerced(engine: TableEngine) -> None:
    projection = engine.set_page_index(1.0)

    assert projection.pagination.page_index == 1
    assert projection.visible_ids == (6, 7, 8, 9, 10)
    assert engine.next_page().pagination.page_index == 2
