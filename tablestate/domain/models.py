"""
Domain models for the table state engine.

Defines the record schema shown by the data table, the immutable column
descriptor that unifies every per-column flag (sortability, resizability,
pinning, widths, value accessor), and the sort direction enum.
"""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field, model_validator


class ConfigurationError(ValueError):
    """Raised once, at construction time, when the table configuration is invalid."""


class SortDirection(str, Enum):
    """Direction of the single active sort key."""

    NONE = "none"
    ASCENDING = "ascending"
    DESCENDING = "descending"


class Record(BaseModel):
    """
    Representation of a single row in the table.

    Identity is ``id``; content equality is irrelevant to the engine.
    """

    id: int = Field(..., description="Stable unique identifier.")
    table_id: str = Field(..., alias="tableId", description="Human-facing display id.")
    avatar: str = Field("", description="Avatar image URI.")
    name: str = Field(..., description="Display name.")
    description: str = Field("", description="Long description text.")
    amount: Decimal = Field(..., description="Monetary amount (raw, unformatted).")
    tooltip: str = Field("", description="Free-text note shown in the info tooltip.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }


Accessor = Callable[[Any], Any]
Formatter = Callable[[Any], str]


class ColumnDescriptor(BaseModel):
    """
    Immutable description of one table column.

    ``presentational`` columns (selection checkbox, avatar image) carry no
    exportable data. ``formatter`` is for renderers only; export always uses
    the raw ``accessor`` value.
    """

    id: str = Field(..., min_length=1)
    label: str = ""
    sortable: bool = True
    resizable: bool = True
    pinned: bool = False
    presentational: bool = False
    default_width: int = Field(150, gt=0)
    min_width: int = Field(50, gt=0)
    accessor: Accessor
    formatter: Optional[Formatter] = None

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }

    @model_validator(mode="after")
    def _check_widths(self) -> "ColumnDescriptor":
        if self.default_width < self.min_width:
            raise ValueError(
                f"Column '{self.id}' default_width={self.default_width} "
                f"is below min_width={self.min_width}."
            )
        return self

    def value(self, record: Any) -> Any:
        """Raw cell value for ``record``."""
        return self.accessor(record)

    def display(self, record: Any) -> str:
        """Cell text for renderers; falls back to ``str`` of the raw value."""
        raw = self.accessor(record)
        if self.formatter is not None:
            return self.formatter(raw)
        return "" if raw is None else str(raw)


__all__ = [
    "Accessor",
    "ColumnDescriptor",
    "ConfigurationError",
    "Formatter",
    "Record",
    "SortDirection",
]
