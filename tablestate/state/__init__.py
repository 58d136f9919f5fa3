"""
Mutable sub-states owned by the table engine.

Each module holds one protocol: sorting, pagination, selection, column layout,
and the drag/resize interaction session.
"""

from tablestate.state.interaction import InteractionSession, SessionKind
from tablestate.state.layout import LayoutState
from tablestate.state.pagination import DEFAULT_PAGE_SIZE_OPTIONS, PaginationState, page_count_for
from tablestate.state.selection import SelectionState
from tablestate.state.sort import SortState

__all__ = [
    "DEFAULT_PAGE_SIZE_OPTIONS",
    "InteractionSession",
    "LayoutState",
    "PaginationState",
    "SelectionState",
    "SessionKind",
    "SortState",
    "page_count_for",
]
