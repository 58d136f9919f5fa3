"""
Interaction session: the begin/update/end lifecycle of a drag-reorder or
drag-resize gesture, as an immutable value.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class SessionKind(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    RESIZING = "resizing"


@dataclass(frozen=True)
class InteractionSession:
    kind: SessionKind = SessionKind.IDLE
    column_id: Optional[str] = None
    over_id: Optional[str] = None
    start_width: Optional[int] = None

    @classmethod
    def idle(cls) -> "InteractionSession":
        return cls()

    @classmethod
    def dragging(cls, source_id: str) -> "InteractionSession":
        return cls(kind=SessionKind.DRAGGING, column_id=source_id)

    @classmethod
    def resizing(cls, column_id: str, start_width: int) -> "InteractionSession":
        return cls(kind=SessionKind.RESIZING, column_id=column_id, start_width=start_width)

    @property
    def is_idle(self) -> bool:
        return self.kind is SessionKind.IDLE

    @property
    def is_dragging(self) -> bool:
        return self.kind is SessionKind.DRAGGING

    @property
    def is_resizing(self) -> bool:
        return self.kind is SessionKind.RESIZING

    def hovering(self, over_id: Optional[str]) -> "InteractionSession":
        return replace(self, over_id=over_id)


__all__ = ["InteractionSession", "SessionKind"]
