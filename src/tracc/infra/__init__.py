"""Infrastructure layer — filesystem persistence.

Every raw ``OSError`` / ``ValueError`` must be caught here and re-raised
as a :class:`~tracc.exceptions.TraccError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from tracc.infra.jsonl_store import JsonlPeriodStore

__all__: list[str] = ["JsonlPeriodStore"]
