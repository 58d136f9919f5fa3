from __future__ import annotations

import csv
from decimal import Decimal
from pathlib import Path

import pytest
from openpyxl import load_workbook

from tablestate.engine import TableEngine
from tablestate.export import export_visible, exportable_columns
from tablestate.infrastructure.spreadsheet import write_spreadsheet

EXPORT_KEYS = ["tableId", "name", "description", "amount", "tooltip"]


def test_export_covers_only_the_visible_page(engine: TableEngine) -> None:
    engine.next_page()

    rows = engine.export_visible()

    assert [row["tableId"] for row in rows] == [f"TBL-{i:03d}" for i in range(6, 11)]
    assert all(list(row) == EXPORT_KEYS for row in rows)
    assert rows[0]["amount"] == Decimal("250.50")


def test_export_follows_sort_and_ignores_column_order(engine: TableEngine) -> None:
    engine.toggle_sort("amount")
    engine.toggle_sort("amount")
    engine.move_column("tooltip", "description")

    rows = engine.export_visible()

    assert [row["name"] for row in rows] == ["Margaret", "Niklaus", "Barbara", "Edsger", "Grace"]
    assert list(rows[0]) == EXPORT_KEYS


def test_export_of_empty_table_is_empty(columns) -> None:
    engine = TableEngine([], columns=columns)

    assert engine.export_visible() == []
    assert export_visible(engine.get_projection(), columns) == []


def test_presentational_columns_are_skipped(columns) -> None:
    ids = [column.id for column in exportable_columns(columns)]

    assert ids == EXPORT_KEYS


def test_write_xlsx_reads_back(engine: TableEngine, tmp_path: Path) -> None:
    path = write_spreadsheet(engine.export_visible(), tmp_path / "out" / "page.xlsx")

    workbook = load_workbook(path)
    sheet = workbook["Data"]
    values = list(sheet.iter_rows(values_only=True))

    assert list(values[0]) == EXPORT_KEYS
    assert len(values) == 6
    assert values[1][0] == "TBL-001"
    assert values[1][3] == pytest.approx(100.0)


def test_write_csv_reads_back(engine: TableEngine, tmp_path: Path) -> None:
    engine.last_page()

    path = write_spreadsheet(engine.export_visible(), tmp_path / "page.csv")

    with path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["name"] for row in rows] == ["Donald", "Niklaus"]
    assert rows[1]["amount"] == "999.99"


def test_unsupported_suffix_is_rejected(engine: TableEngine, tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unsupported export format"):
        write_spreadsheet(engine.export_visible(), tmp_path / "page.txt")

    assert not (tmp_path / "page.txt").exists()
