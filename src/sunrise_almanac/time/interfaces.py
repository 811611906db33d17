"""Calendar collaborator interface used to split and rebuild timestamps."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, tzinfo as TzInfo
from typing import Protocol, TypeAlias

Timestamp: TypeAlias = datetime | int


@dataclass(frozen=True, slots=True)
class CalendarFields:
    """Broken-down calendar time."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    tzinfo: TzInfo | None = None

    def with_clock(self, hour: int, minute: int, second: int = 0) -> "CalendarFields":
        """Return a copy on the same date with a new clock time."""
        return replace(self, hour=hour, minute=minute, second=second)


class CalendarUtility(Protocol):
    """Interface for decomposing and recomposing timestamps."""

    def decompose(self, ts: Timestamp) -> CalendarFields:
        """Split a timestamp into calendar fields."""

    def compose(self, fields: CalendarFields) -> Timestamp:
        """Rebuild a timestamp from calendar fields."""
