"""
Selection state: a cross-page accumulator of selected record ids.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, Set


@dataclass
class SelectionState:
    selected: Set[int] = field(default_factory=set)

    def __len__(self) -> int:
        return len(self.selected)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self.selected

    def toggle_row(self, record_id: int) -> None:
        if record_id in self.selected:
            self.selected.discard(record_id)
        else:
            self.selected.add(record_id)

    def toggle_all_on_page(self, page_ids: Iterable[int]) -> None:
        """Deselect exactly the page's rows when all are selected, otherwise select all of them."""
        ids = list(page_ids)
        if self.is_all_on_page_selected(ids):
            self.selected.difference_update(ids)
        else:
            self.selected.update(ids)

    def is_all_on_page_selected(self, page_ids: Iterable[int]) -> bool:
        ids = list(page_ids)
        return bool(ids) and all(record_id in self.selected for record_id in ids)

    def is_some_on_page_selected(self, page_ids: Iterable[int]) -> bool:
        ids = list(page_ids)
        hits = sum(1 for record_id in ids if record_id in self.selected)
        return 0 < hits < len(ids)

    def clear_all(self) -> None:
        self.selected.clear()

    def prune(self, valid_ids: AbstractSet[int]) -> int:
        """Drop ids that no longer resolve to a record; returns how many were dropped."""
        stale = self.selected - set(valid_ids)
        self.selected -= stale
        return len(stale)


__all__ = ["SelectionState"]
