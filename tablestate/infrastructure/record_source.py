"""
Record source: load the initial record sequence from a ``.json`` or ``.csv`` file.

JSON files hold an array of objects; CSV files have a header row. Field types
are coerced by the Record model, and both ``table_id`` and ``tableId`` are
accepted.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Dict, List

from pydantic import TypeAdapter

from tablestate.domain.models import Record
from tablestate.utils.logging import get_logger

log = get_logger(__name__)

_RECORDS = TypeAdapter(List[Record])


def _read_rows(path: Path) -> List[Dict[str, Any]]:
    suffix = path.suffix.lower()
    if suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, list):
            raise ValueError(f"{path} must contain a JSON array of records.")
        return payload
    if suffix == ".csv":
        with path.open("r", newline="", encoding="utf-8") as f:
            return list(csv.DictReader(f))
    raise ValueError(f"Unsupported record file '{path.suffix}'. Use .json or .csv")


def load_records(path: Path | str) -> List[Record]:
    """
    Read and validate records from ``path``.

    Raises
    ------
    ValueError
        For unsupported suffixes or rows that fail validation
        (pydantic.ValidationError is a ValueError).
    OSError
        When the file cannot be read.
    """
    source = Path(path)
    records = _RECORDS.validate_python(_read_rows(source))
    log.info("Records loaded", extra={"path": str(source), "rows": len(records)})
    return records


__all__ = ["load_records"]
