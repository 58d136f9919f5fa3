"""
Infrastructure package for the table state engine.

Centralizes file I/O concerns: loading records from disk and writing exported
rows to spreadsheets. Keep this layer focused on I/O, decoupled from the
engine's state logic.
"""

from tablestate.infrastructure.record_source import load_records
from tablestate.infrastructure.spreadsheet import write_csv, write_spreadsheet, write_xlsx

__all__ = [
    "load_records",
    "write_csv",
    "write_spreadsheet",
    "write_xlsx",
]
