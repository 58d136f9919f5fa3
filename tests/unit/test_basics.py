import csv
import json
from decimal import Decimal
from pathlib import Path

import pytest

from tablestate import config
from tablestate.domain.models import Record
from tablestate.infrastructure.record_source import load_records
from scripts import generate_data

GENERATED_ROWS = 12


def test_get_settings_defaults(monkeypatch, fresh_settings):
    for name in ("TABLE_PAGE_SIZE", "TABLE_PAGE_SIZE_OPTIONS", "TABLE_MIN_COLUMN_WIDTH"):
        monkeypatch.delenv(name, raising=False)

    settings = config.get_settings()

    assert settings.page_size == 5
    assert settings.page_size_options == [5, 10, 20, 30, 40, 50]
    assert settings.min_column_width == 50
    assert settings.export_filename.endswith(".xlsx")
    assert settings.export_sheet_name == "Data"


def test_settings_overrides(test_settings):
    assert test_settings.log_level == "DEBUG"
    assert test_settings.page_size == 10


def test_generated_rows_are_deterministic():
    first = generate_data._generate_rows(5, seed=7)
    second = generate_data._generate_rows(5, seed=7)

    assert first == second
    assert [row["id"] for row in first] == [1, 2, 3, 4, 5]
    assert list(first[0]) == generate_data.FIELDS


def test_generate_data_writes_csv(tmp_path: Path):
    csv_path = tmp_path / "records.csv"
    generate_data._write_rows(csv_path, generate_data._generate_rows(5, seed=123))

    with csv_path.open("r", newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    # header + 5 rows
    assert len(rows) == 6
    assert rows[0] == generate_data.FIELDS


def test_generate_data_writes_json(tmp_path: Path):
    json_path = tmp_path / "records.json"
    generate_data._write_rows(json_path, generate_data._generate_rows(3, seed=123))

    payload = json.loads(json_path.read_text(encoding="utf-8"))
    assert len(payload) == 3
    assert payload[0]["tableId"] == "TBL-0001"


@pytest.mark.parametrize("suffix", [".csv", ".json"])
def test_load_records_round_trips_generated_file(tmp_path: Path, suffix: str):
    path = tmp_path / f"records{suffix}"
    generate_data._write_rows(path, generate_data._generate_rows(GENERATED_ROWS, seed=42))

    records = load_records(path)

    assert len(records) == GENERATED_ROWS
    assert all(isinstance(record, Record) for record in records)
    assert records[0].id == 1
    assert isinstance(records[0].amount, Decimal)


def test_load_records_rejects_unknown_suffix(tmp_path: Path):
    path = tmp_path / "records.txt"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ValueError, match="Unsupported record file"):
        load_records(path)


def test_load_records_rejects_json_object(tmp_path: Path):
    path = tmp_path / "records.json"
    path.write_text('{"id": 1}', encoding="utf-8")

    with pytest.raises(ValueError, match="JSON array"):
        load_records(path)
