"""Location of the tracc data file.

The data directory follows the XDG base-directory convention:
``$XDG_DATA_HOME/tracc`` when the variable is set and non-empty,
otherwise ``~/.local/share/tracc``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from tracc.exceptions import StoreIOError

APP_DIR_NAME: str = "tracc"
DATA_FILE_NAME: str = "periods.jsonl"


def data_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Return the per-user data directory (not created)."""
    env = os.environ if environ is None else environ
    base = env.get("XDG_DATA_HOME")
    if base:
        return Path(base) / APP_DIR_NAME
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as exc:
        raise StoreIOError(
            "Could not determine home directory.",
            hint="Set XDG_DATA_HOME or HOME.",
        ) from exc
    return home / ".local" / "share" / APP_DIR_NAME


def ensure_data_file(environ: Mapping[str, str] | None = None) -> Path:
    """Create the data directory if needed and return the data file path.

    Raises
    ------
    StoreIOError
        If the directory path is occupied by a regular file or cannot be
        created.
    """
    directory = data_dir(environ)
    if directory.is_file():
        raise StoreIOError(
            f"Could not use data directory {directory}: it is a file.",
        )
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StoreIOError(
            f"Could not create data directory {directory}: {exc}",
        ) from exc
    return directory / DATA_FILE_NAME
