"""Custom exception hierarchy for tracc.

All exceptions that cross layer boundaries must inherit from
:class:`TraccError`.  Raw ``OSError`` / ``ValueError`` instances from the
filesystem or JSON layer must NEVER propagate beyond the infrastructure
layer — they are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
TraccError
├── AlreadyTrackingError
├── NotTrackingError
├── ClockSkewError
├── StoreUnreadableError
└── StoreIOError
"""

from __future__ import annotations


class TraccError(Exception):
    """Base exception for all tracc errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Tracking state --------------------------------------------------------

class AlreadyTrackingError(TraccError):
    """Raised by ``begin`` while a work period is still open."""


class NotTrackingError(TraccError):
    """Raised by ``end`` when there is no open work period."""


class ClockSkewError(TraccError):
    """Raised by ``end`` when the clock reads earlier than the open period's start."""


# --- Persistence -----------------------------------------------------------

class StoreUnreadableError(TraccError):
    """Raised when the data file exists but its contents cannot be parsed."""


class StoreIOError(TraccError):
    """Raised when the data file or its directory cannot be read or written."""
