"""Core / service layer — tracking rules and domain models.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O.
* No imports from ``cli`` or ``infra``.
"""

from tracc.core.models import WorkPeriod
from tracc.core.protocols import PeriodRepository
from tracc.core.tracking_service import TrackingService

__all__: list[str] = [
    "PeriodRepository",
    "TrackingService",
    "WorkPeriod",
]
