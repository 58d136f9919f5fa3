"""
Column registry and the stock column set of the data table.

The registry is the single place where the "every referenced column id
exists" invariant is checked. It never mutates after construction.
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from pydantic import ValidationError

from tablestate.config import get_settings
from tablestate.domain.models import ColumnDescriptor, ConfigurationError
from tablestate.utils.logging import get_logger

log = get_logger(__name__)

SELECT_COLUMN_ID = "select"
AVATAR_COLUMN_ID = "avatar"


class ColumnRegistry:
    """Ordered, immutable collection of column descriptors keyed by id."""

    def __init__(self, columns: Iterable[ColumnDescriptor]) -> None:
        descriptors = tuple(columns)
        if not descriptors:
            log.error("Column registry is empty")
            raise ConfigurationError("A table needs at least one column.")

        by_id: Dict[str, ColumnDescriptor] = {}
        for column in descriptors:
            if column.id in by_id:
                log.error("Duplicate column id", extra={"column_id": column.id})
                raise ConfigurationError(f"Duplicate column id '{column.id}'.")
            by_id[column.id] = column

        self._columns: Tuple[ColumnDescriptor, ...] = descriptors
        self._by_id = by_id

    @classmethod
    def from_config(
        cls, entries: Sequence[Mapping[str, Any]]
    ) -> "ColumnRegistry":
        """
        Build a registry from plain mappings (e.g. parsed JSON/YAML).

        Any descriptor validation failure is reported as a ConfigurationError.
        Entries without an ``accessor`` read the attribute named like the column.
        """
        columns: List[ColumnDescriptor] = []
        for entry in entries:
            cfg = dict(entry)
            cfg.setdefault("accessor", attribute_accessor(str(cfg.get("id", ""))))
            try:
                columns.append(ColumnDescriptor(**cfg))
            except ValidationError as exc:
                log.error("Invalid column configuration", extra={"column_id": cfg.get("id")})
                raise ConfigurationError(
                    f"Invalid column configuration for '{cfg.get('id')}': {exc}"
                ) from exc
        return cls(columns)

    def __iter__(self) -> Iterator[ColumnDescriptor]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, column_id: object) -> bool:
        return column_id in self._by_id

    @property
    def ids(self) -> Tuple[str, ...]:
        """Declared (default) column order."""
        return tuple(column.id for column in self._columns)

    def get(self, column_id: str) -> Optional[ColumnDescriptor]:
        return self._by_id.get(column_id)

    def __getitem__(self, column_id: str) -> ColumnDescriptor:
        return self._by_id[column_id]


def attribute_accessor(name: str):
    """Accessor reading ``name`` from a model attribute or a mapping key."""

    def _read(record: Any) -> Any:
        if isinstance(record, Mapping):
            return record.get(name)
        return getattr(record, name, None)

    return _read


def format_currency(value: Any) -> str:
    """Format a raw amount as USD, e.g. ``$1,234.50``."""
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return "" if value is None else str(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def default_columns(min_width: Optional[int] = None) -> ColumnRegistry:
    """
    The stock column set: select, table id, avatar, name, description, amount, info.

    Declared order is the default column order.
    """
    floor = min_width or get_settings().min_column_width

    def column(**kwargs: Any) -> ColumnDescriptor:
        kwargs.setdefault("min_width", min(floor, kwargs["default_width"]))
        return ColumnDescriptor(**kwargs)

    return ColumnRegistry(
        [
            column(
                id=SELECT_COLUMN_ID,
                label="",
                sortable=False,
                resizable=False,
                pinned=True,
                presentational=True,
                default_width=60,
                accessor=lambda record: None,
            ),
            column(
                id="tableId",
                label="Table ID",
                resizable=False,
                pinned=True,
                default_width=100,
                accessor=attribute_accessor("table_id"),
            ),
            column(
                id=AVATAR_COLUMN_ID,
                label="Avatar",
                sortable=False,
                pinned=True,
                presentational=True,
                default_width=80,
                accessor=attribute_accessor("avatar"),
            ),
            column(
                id="name",
                label="Name",
                pinned=True,
                default_width=180,
                accessor=attribute_accessor("name"),
            ),
            column(
                id="description",
                label="Description",
                default_width=300,
                accessor=attribute_accessor("description"),
            ),
            column(
                id="amount",
                label="Amount",
                default_width=140,
                accessor=attribute_accessor("amount"),
                formatter=format_currency,
            ),
            column(
                id="tooltip",
                label="Info",
                default_width=100,
                accessor=attribute_accessor("tooltip"),
            ),
        ]
    )


__all__ = [
    "AVATAR_COLUMN_ID",
    "ColumnRegistry",
    "SELECT_COLUMN_ID",
    "attribute_accessor",
    "default_columns",
    "format_currency",
]
