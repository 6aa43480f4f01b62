"""Core tracking service — begin, end and list work periods.

This service owns the in-memory period sequence for one invocation and
enforces the tracking rules on top of a
:class:`~tracc.core.protocols.PeriodRepository` injected at construction
time.

Invariant
---------
At most one period is open, and when one is open it is the last element
of the sequence.  Every mutation is persisted before it is returned.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import structlog

from tracc.core.models import WorkPeriod, format_timestamp
from tracc.core.protocols import PeriodRepository
from tracc.exceptions import AlreadyTrackingError, ClockSkewError, NotTrackingError

log = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Return the current local time as a timezone-aware datetime."""
    return datetime.now().astimezone()


class TrackingService:
    """Stateful service driving the begin / end / show commands.

    Parameters
    ----------
    repository:
        Any object satisfying the :class:`PeriodRepository` protocol.
    clock:
        Zero-argument callable returning the current aware datetime.
        Defaults to :func:`local_now`.
    """

    def __init__(
        self,
        repository: PeriodRepository,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._repository: PeriodRepository = repository
        self._clock: Clock = clock if clock is not None else local_now
        self._periods: list[WorkPeriod] | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def last_period(self) -> WorkPeriod | None:
        periods = self._load()
        return periods[-1] if periods else None

    def begin(self) -> WorkPeriod:
        """Open a new work period starting now.

        Raises
        ------
        AlreadyTrackingError
            If the last period is still open.
        """
        periods = self._load()
        last = periods[-1] if periods else None
        if last is not None and last.is_open:
            raise AlreadyTrackingError(
                "Cannot start period. Current period started at "
                f"{format_timestamp(last.start)} is still running.",
                hint="Run 'tracc end' to close it first.",
            )

        period = WorkPeriod(start=self._clock())
        self._commit([*periods, period])
        log.debug("period_opened", start=period.start.isoformat())
        return period

    def end(self) -> WorkPeriod:
        """Close the open work period at the current time.

        Raises
        ------
        NotTrackingError
            If no period is open.
        ClockSkewError
            If the clock reads earlier than the open period's start.
        """
        periods = self._load()
        if not periods:
            raise NotTrackingError(
                "Cannot end period. No period has been started yet.",
                hint="Run 'tracc begin' to start one.",
            )

        last = periods[-1]
        if last.end is not None:
            raise NotTrackingError(
                "Cannot end period. Last period has already been ended at "
                f"{format_timestamp(last.end)}.",
                hint="Run 'tracc begin' to start a new one.",
            )

        now = self._clock()
        if now < last.start:
            raise ClockSkewError(
                "Cannot end period. The current time "
                f"{format_timestamp(now)} is before its start at "
                f"{format_timestamp(last.start)}.",
                hint="Check the system clock, then run 'tracc end' again.",
            )

        closed = last.close(now)
        self._commit([*periods[:-1], closed])
        log.debug(
            "period_closed",
            start=closed.start.isoformat(),
            end=closed.end.isoformat() if closed.end else None,
        )
        return closed

    def list_periods(self) -> tuple[WorkPeriod, ...]:
        """Return every recorded period in chronological order."""
        return tuple(self._load())

    # ------------------------------------------------------------------
    # Repository delegation
    # ------------------------------------------------------------------

    def _load(self) -> list[WorkPeriod]:
        if self._periods is None:
            self._periods = self._repository.load()
            log.debug("periods_loaded", count=len(self._periods))
        return self._periods

    def _commit(self, periods: list[WorkPeriod]) -> None:
        """Persist *periods* and adopt them as the in-memory state."""
        self._repository.save(periods)
        self._periods = periods
