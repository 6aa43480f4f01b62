"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from tracc.core.models import WorkPeriod


class PeriodRepository(Protocol):
    """Contract for durable storage of the work-period sequence.

    Any object implementing :meth:`load` and :meth:`save` satisfies this
    protocol structurally (no explicit inheritance required).
    """

    def load(self) -> list[WorkPeriod]:
        """Return the persisted periods in append order.

        Returns an empty list when nothing has been persisted yet.

        Raises
        ------
        StoreUnreadableError
            When persisted data exists but cannot be parsed.
        StoreIOError
            When the backing storage cannot be read.
        """
        ...  # pragma: no cover

    def save(self, periods: Sequence[WorkPeriod]) -> None:
        """Replace the persisted sequence with *periods*.

        Implementations must never leave partially written data behind.

        Raises
        ------
        StoreIOError
            When the backing storage cannot be written.
        """
        ...  # pragma: no cover
