"""Rich console helpers for the CLI layer.

Consoles are created per call so that they always target the current
``sys.stdout`` / ``sys.stderr`` (which test harnesses replace).
"""

from __future__ import annotations

from rich.console import Console


def get_rich_console(*, stderr: bool = True) -> Console:
    """Create a non-wrapping Rich console targeting stderr (default) or stdout."""
    return Console(stderr=stderr, highlight=False, soft_wrap=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy around a fresh Rich console."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        get_rich_console(stderr=self._stderr).print(*objects)


console = _ConsoleProxy(stderr=True)
"""Status and error messages."""

output = _ConsoleProxy(stderr=False)
"""Command results (``show`` listing)."""
