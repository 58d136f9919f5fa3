"""
Pagination state: page index and page size over the post-sort row sequence.

Every operation clamps instead of failing, so ``0 <= page_index < page_count``
holds after any call.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, TypeVar

from tablestate.domain.models import ConfigurationError

T = TypeVar("T")

DEFAULT_PAGE_SIZE_OPTIONS: Tuple[int, ...] = (5, 10, 20, 30, 40, 50)


def page_count_for(row_count: int, page_size: int) -> int:
    """``ceil(rows / size)``, never below 1 so an empty table still has one page."""
    return max(1, math.ceil(row_count / page_size))


@dataclass
class PaginationState:
    page_index: int = 0
    page_size: int = 5
    options: Tuple[int, ...] = field(default=DEFAULT_PAGE_SIZE_OPTIONS)

    def __post_init__(self) -> None:
        self.options = tuple(sorted(set(self.options)))
        if not self.options or any(size <= 0 for size in self.options):
            raise ConfigurationError(f"Page size options must be positive, got {self.options}.")
        if self.page_size not in self.options:
            raise ConfigurationError(
                f"Default page size {self.page_size} is not one of {list(self.options)}."
            )
        self.page_index = max(0, self.page_index)

    def page_count(self, row_count: int) -> int:
        return page_count_for(row_count, self.page_size)

    def clamp(self, row_count: int) -> None:
        """Restore ``page_index < page_count`` after the row count or page size changed."""
        self.page_index = min(max(0, self.page_index), self.page_count(row_count) - 1)

    def nearest_option(self, size: int) -> int:
        """Snap an arbitrary size onto the allowed options (ties go to the smaller one)."""
        return min(self.options, key=lambda option: (abs(option - size), option))

    def set_page_size(self, size: int, row_count: int) -> None:
        self.page_size = self.nearest_option(size)
        self.clamp(row_count)

    def set_page_index(self, index: int, row_count: int) -> None:
        self.page_index = int(index)
        self.clamp(row_count)

    def can_previous_page(self) -> bool:
        return self.page_index > 0

    def can_next_page(self, row_count: int) -> bool:
        return self.page_index < self.page_count(row_count) - 1

    def next_page(self, row_count: int) -> None:
        if self.can_next_page(row_count):
            self.page_index += 1

    def previous_page(self) -> None:
        if self.can_previous_page():
            self.page_index -= 1

    def first_page(self) -> None:
        self.page_index = 0

    def last_page(self, row_count: int) -> None:
        self.page_index = self.page_count(row_count) - 1

    def window(self, rows: Sequence[T]) -> List[T]:
        start = self.page_index * self.page_size
        return list(rows[start : start + self.page_size])

    def range_bounds(self, row_count: int) -> Tuple[int, int]:
        """1-indexed ``(first, last)`` row numbers on the current page; ``(0, 0)`` when empty."""
        if row_count == 0:
            return 0, 0
        start = self.page_index * self.page_size + 1
        end = min((self.page_index + 1) * self.page_size, row_count)
        return start, end


__all__ = ["DEFAULT_PAGE_SIZE_OPTIONS", "PaginationState", "page_count_for"]
