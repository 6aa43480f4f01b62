"""Process exit codes returned by ``tracc``.

``begin``, ``end`` and ``show`` either succeed or fail with
:data:`GENERAL_ERROR`; the remaining codes come from the error boundary
in :func:`tracc.cli.app.cli`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command finished; for ``show`` this includes an empty listing."""

GENERAL_ERROR: int = 1
"""Tracking state or data file problem: already tracking, not tracking,
clock skew, unreadable or unwritable store."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Crash outside the TraccError hierarchy; also argparse usage errors."""
