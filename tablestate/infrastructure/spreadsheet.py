"""
Spreadsheet sink for exported table rows.

Writes ``.xlsx`` workbooks with openpyxl (one sheet, header row from the
column ids) or ``.csv`` files with the standard library writer. The format is
chosen from the output path suffix.
"""

from __future__ import annotations

import csv
from decimal import Decimal
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

from openpyxl import Workbook

from tablestate.config import get_settings
from tablestate.utils.logging import get_logger

log = get_logger(__name__)

SUPPORTED_SUFFIXES = (".xlsx", ".csv")


def _header(rows: Sequence[Mapping[str, Any]]) -> List[str]:
    header: List[str] = []
    for row in rows:
        for key in row:
            if key not in header:
                header.append(key)
    return header


def _cell(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    return value


def write_xlsx(rows: Sequence[Mapping[str, Any]], path: Path, sheet_name: str) -> None:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_name
    header = _header(rows)
    if header:
        sheet.append(header)
    for row in rows:
        sheet.append([_cell(row.get(key)) for key in header])
    workbook.save(path)


def write_csv(rows: Sequence[Mapping[str, Any]], path: Path) -> None:
    header = _header(rows)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=header)
        writer.writeheader()
        writer.writerows(rows)


def write_spreadsheet(
    rows: Sequence[Mapping[str, Any]],
    path: Path | str | None = None,
    sheet_name: Optional[str] = None,
) -> Path:
    """
    Serialize exported rows to a spreadsheet file.

    Parameters
    ----------
    rows : sequence of mappings
        Output of ``export_visible``; key order defines column order.
    path : Path | str, optional
        Destination file. Defaults to settings.export_filename.
    sheet_name : str, optional
        Worksheet title for ``.xlsx``. Defaults to settings.export_sheet_name.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    ValueError
        If the suffix is neither ``.xlsx`` nor ``.csv``.
    """
    settings = get_settings()
    target = Path(path or settings.export_filename)
    suffix = target.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported export format '{target.suffix}'. Use one of: {', '.join(SUPPORTED_SUFFIXES)}"
        )

    target.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".xlsx":
        write_xlsx(rows, target, sheet_name or settings.export_sheet_name)
    else:
        write_csv(rows, target)

    log.info("Export written", extra={"path": str(target), "rows": len(rows)})
    return target


__all__ = ["SUPPORTED_SUFFIXES", "write_csv", "write_spreadsheet", "write_xlsx"]
