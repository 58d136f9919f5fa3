"""
Pytest configuration for the table state engine.

Provides fixtures for:
- A deterministic 12-record dataset (with deliberate amount ties)
- The stock column registry and a small unpinned registry for layout tests
- Fresh engines and settings overrides
"""

from __future__ import annotations

from decimal import Decimal
from typing import Generator, List

import pytest

from tablestate.config import Settings, get_settings
from tablestate.domain.columns import ColumnRegistry, attribute_accessor, default_columns
from tablestate.domain.models import ColumnDescriptor, Record
from tablestate.engine import TableEngine

RAW_RECORDS = [
    (1, "Ada", "100.00"),
    (2, "Grace", "250.50"),
    (3, "Alan", "100.00"),
    (4, "Linus", "75.25"),
    (5, "Margaret", "1200.00"),
    (6, "Ken", "250.50"),
    (7, "Barbara", "980.10"),
    (8, "Dennis", "15.00"),
    (9, "Frances", "100.00"),
    (10, "Edsger", "640.00"),
    (11, "Donald", "3.99"),
    (12, "Niklaus", "999.99"),
]


def make_record(record_id: int, name: str, amount: str) -> Record:
    return Record(
        id=record_id,
        table_id=f"TBL-{record_id:03d}",
        avatar=f"https://example.test/avatars/{record_id}.png",
        name=name,
        description=f"{name} record",
        amount=Decimal(amount),
        tooltip=f"Note for {name}",
    )


def build_records() -> List[Record]:
    return [make_record(*raw) for raw in RAW_RECORDS]


def build_simple_columns() -> ColumnRegistry:
    """Four unpinned, sortable, resizable columns: id, name, amount, desc."""
    return ColumnRegistry(
        [
            ColumnDescriptor(id="id", label="ID", default_width=80, min_width=40, accessor=attribute_accessor("id")),
            ColumnDescriptor(id="name", label="Name", default_width=180, min_width=50, accessor=attribute_accessor("name")),
            ColumnDescriptor(id="amount", label="Amount", default_width=140, min_width=60, accessor=attribute_accessor("amount")),
            ColumnDescriptor(id="desc", label="Description", default_width=300, min_width=100, accessor=attribute_accessor("description")),
        ]
    )


@pytest.fixture(scope="session")
def records() -> List[Record]:
    return build_records()


@pytest.fixture(scope="session")
def columns() -> ColumnRegistry:
    return default_columns()


@pytest.fixture(scope="session")
def simple_columns() -> ColumnRegistry:
    return build_simple_columns()


@pytest.fixture
def engine(records: List[Record], columns: ColumnRegistry) -> TableEngine:
    """Engine over the 12-record dataset with the stock columns and page size 5."""
    return TableEngine(records, columns=columns, page_size=5)


@pytest.fixture
def simple_engine(records: List[Record], simple_columns: ColumnRegistry) -> TableEngine:
    return TableEngine(records, columns=simple_columns, page_size=5)


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(log_level="DEBUG", page_size=10)


@pytest.fixture
def fresh_settings() -> Generator[None, None, None]:
    """
    Clear the cached settings around a test that patches the environment.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
