"""
tablestate - Headless state engine for interactive data tables.

This package keeps the interacting pieces of a data table consistent:

- Single-column, stable sorting with a none/ascending/descending cycle
- Pagination with clamped page index and configurable page sizes
- Cross-page row selection with a derived tri-state "select all"
- Column reordering (drag) and live resizing with minimum widths
- Export of the currently visible page to spreadsheet files

Rendering is left to the caller; the engine exposes one read-only projection
and a set of intents that never raise after successful construction.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from tablestate.config import Settings, get_settings
from tablestate.domain import (
    ColumnDescriptor,
    ColumnRegistry,
    ConfigurationError,
    Record,
    RecordStore,
    SortDirection,
    default_columns,
)
from tablestate.engine import TableEngine
from tablestate.export import export_visible
from tablestate.projection import (
    HeaderCell,
    PaginationSummary,
    Projection,
    RowView,
    SelectionSummary,
)
from tablestate.state import InteractionSession, SessionKind
from tablestate.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "ColumnDescriptor",
    "ColumnRegistry",
    "ConfigurationError",
    "Record",
    "RecordStore",
    "SortDirection",
    "default_columns",
    # Engine and read model
    "TableEngine",
    "HeaderCell",
    "PaginationSummary",
    "Projection",
    "RowView",
    "SelectionSummary",
    "InteractionSession",
    "SessionKind",
    # Export
    "export_visible",
    # Logging
    "configure_logging",
    "get_logger",
]
