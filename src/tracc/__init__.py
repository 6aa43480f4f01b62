"""tracc — minimal personal time-tracking CLI.

Records work periods with ``begin`` / ``end`` and lists them with ``show``.
"""

from tracc.version import __version__

__all__: list[str] = ["__version__"]
