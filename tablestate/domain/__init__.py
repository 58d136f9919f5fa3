"""
Domain package for the table state engine.

Exports the record model, column descriptors and registry, and the record
store. Keep this package focused on data definitions and validation concerns.
"""

from tablestate.domain.columns import (
    AVATAR_COLUMN_ID,
    SELECT_COLUMN_ID,
    ColumnRegistry,
    attribute_accessor,
    default_columns,
    format_currency,
)
from tablestate.domain.models import ColumnDescriptor, ConfigurationError, Record, SortDirection
from tablestate.domain.records import RecordStore

__all__ = [
    "AVATAR_COLUMN_ID",
    "SELECT_COLUMN_ID",
    "ColumnDescriptor",
    "ColumnRegistry",
    "ConfigurationError",
    "Record",
    "RecordStore",
    "SortDirection",
    "attribute_accessor",
    "default_columns",
    "format_currency",
]
