"""Domain models for tracc.

Models are **frozen** dataclasses — immutable value objects with no I/O
and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

DISPLAY_FORMAT: str = "%H:%M %d.%m.%y"
"""``strftime`` pattern used when rendering timestamps for the user."""

IN_PROGRESS_LABEL: str = "(in progress)"


def format_timestamp(value: datetime) -> str:
    """Render *value* in the user-facing display format."""
    return value.strftime(DISPLAY_FORMAT)


@dataclass(frozen=True, slots=True)
class WorkPeriod:
    """A contiguous interval of tracked working time."""

    start: datetime
    """Moment the period was opened (timezone-aware)."""

    end: datetime | None = None
    """Moment the period was closed, or ``None`` while it is in progress."""

    @property
    def is_open(self) -> bool:
        return self.end is None

    def close(self, at: datetime) -> WorkPeriod:
        """Return a copy of this period ended at *at*."""
        return replace(self, end=at)

    def render(self) -> str:
        """Render as ``START..END`` or ``START..(in progress)``."""
        end = IN_PROGRESS_LABEL if self.end is None else format_timestamp(self.end)
        return f"{format_timestamp(self.start)}..{end}"
