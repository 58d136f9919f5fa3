"""
Record store: the raw, ordered, read-only record sequence behind a table.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from pydantic import ValidationError

from tablestate.domain.models import ConfigurationError, Record
from tablestate.utils.logging import get_logger

log = get_logger(__name__)


class RecordStore:
    """
    Immutable ordered sequence of records with lookup by identifier.

    Accepts ``Record`` instances or mappings (validated into ``Record``).
    The insertion order is the identity sort order of the table.
    """

    def __init__(self, records: Iterable[Record | Mapping[str, Any]] = ()) -> None:
        items = []
        index: Dict[int, Record] = {}
        for raw in records:
            record = raw if isinstance(raw, Record) else _coerce(raw)
            if record.id in index:
                log.error("Duplicate record id", extra={"record_id": record.id})
                raise ConfigurationError(f"Duplicate record id {record.id!r}.")
            index[record.id] = record
            items.append(record)
        self._records: Tuple[Record, ...] = tuple(items)
        self._index = index

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._index

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    @property
    def ids(self) -> frozenset:
        return frozenset(self._index)

    def get(self, record_id: int) -> Optional[Record]:
        return self._index.get(record_id)


def _coerce(raw: Mapping[str, Any]) -> Record:
    try:
        return Record.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid record {dict(raw).get('id')!r}: {exc}") from exc


__all__ = ["RecordStore"]
