"""Allow ``python -m tracc`` invocation.

Delegates to the CLI error-boundary entry point so that ``python -m tracc``
behaves identically to the ``tracc`` console script.
"""

from __future__ import annotations

from tracc.cli.app import cli

if __name__ == "__main__":
    cli()
