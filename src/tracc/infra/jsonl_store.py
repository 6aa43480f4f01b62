"""JSON Lines backed implementation of :class:`~tracc.core.protocols.PeriodRepository`.

One work period per line::

    {"start": "2026-10-16T09:00:00+02:00", "end": "2026-10-16T12:30:00+02:00"}
    {"start": "2026-10-16T13:15:00+02:00", "end": null}

Writes go to a temporary file in the same directory which then replaces
the data file, so a crash never leaves a half-written file behind.

All ``OSError`` / ``ValueError`` instances are caught here and re-raised
as typed :class:`~tracc.exceptions.TraccError` subclasses.
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

import structlog

from tracc.core.models import WorkPeriod
from tracc.exceptions import StoreIOError, StoreUnreadableError

log = structlog.get_logger(__name__)

_MOVE_ASIDE_HINT = "Fix or move the file aside; tracc will start a fresh one."


class JsonlPeriodStore:
    """Concrete :class:`PeriodRepository` persisting to a ``.jsonl`` file.

    Usage::

        store = JsonlPeriodStore(Path("~/.local/share/tracc/periods.jsonl"))
        periods = store.load()
        store.save([*periods, WorkPeriod(start=now)])
    """

    def __init__(self, path: Path) -> None:
        self._path: Path = path

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def load(self) -> list[WorkPeriod]:
        """Read and validate every period in the data file.

        Raises
        ------
        StoreUnreadableError
            When the file is not UTF-8, a line is malformed, or the
            sequence violates the single-open-period rule.
        StoreIOError
            When the file exists but cannot be read.
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log.debug("store_missing", path=str(self._path))
            return []
        except UnicodeDecodeError as exc:
            raise StoreUnreadableError(
                f"Corrupted data file {self._path}: not valid UTF-8 ({exc}).",
                hint=_MOVE_ASIDE_HINT,
            ) from exc
        except OSError as exc:
            raise StoreIOError(
                f"Could not read data file {self._path}: {exc}",
            ) from exc

        periods: list[WorkPeriod] = []
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            period = self._parse_line(line, lineno)
            if periods and periods[-1].is_open:
                raise self._corrupted(
                    lineno,
                    "found a period after one that was never ended",
                )
            periods.append(period)

        log.debug("store_loaded", path=str(self._path), count=len(periods))
        return periods

    def save(self, periods: Sequence[WorkPeriod]) -> None:
        """Atomically replace the data file with *periods*.

        Raises
        ------
        StoreIOError
            When the directory or file cannot be written.
        """
        payload = "".join(
            json.dumps(self._to_record(period), ensure_ascii=False) + "\n"
            for period in periods
        )
        directory = self._path.parent

        tmp = None
        try:
            tmp = tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                delete=False,
                dir=directory,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
            )
            with tmp:
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp.name, self._path)
        except OSError as exc:
            if tmp is not None and os.path.exists(tmp.name):
                os.remove(tmp.name)
            raise StoreIOError(
                f"Could not write data file {self._path}: {exc}",
            ) from exc

        log.debug("store_saved", path=str(self._path), count=len(periods))

    # ------------------------------------------------------------------
    # Record <-> model conversion
    # ------------------------------------------------------------------

    @staticmethod
    def _to_record(period: WorkPeriod) -> dict[str, Any]:
        return {
            "start": period.start.isoformat(),
            "end": period.end.isoformat() if period.end is not None else None,
        }

    def _parse_line(self, line: str, lineno: int) -> WorkPeriod:
        """Convert one JSON line to a :class:`WorkPeriod`."""
        try:
            record: object = json.loads(line)
        except ValueError as exc:
            raise self._corrupted(lineno, f"invalid JSON ({exc})") from exc

        if not isinstance(record, dict):
            raise self._corrupted(lineno, "expected a JSON object")

        start = self._parse_timestamp(record.get("start"), "start", lineno)
        if "end" not in record:
            raise self._corrupted(lineno, "missing 'end' field")
        raw_end = record["end"]
        end = None if raw_end is None else self._parse_timestamp(raw_end, "end", lineno)

        if end is not None and end < start:
            raise self._corrupted(lineno, "period ends before it starts")

        return WorkPeriod(start=start, end=end)

    def _parse_timestamp(self, raw: object, field: str, lineno: int) -> datetime:
        if not isinstance(raw, str):
            raise self._corrupted(lineno, f"'{field}' must be a timestamp string")
        try:
            value = datetime.fromisoformat(raw)
        except ValueError as exc:
            raise self._corrupted(lineno, f"invalid '{field}' timestamp {raw!r}") from exc
        if value.tzinfo is None:
            raise self._corrupted(lineno, f"'{field}' timestamp {raw!r} has no UTC offset")
        return value

    def _corrupted(self, lineno: int, reason: str) -> StoreUnreadableError:
        return StoreUnreadableError(
            f"Corrupted data file {self._path} at line {lineno}: {reason}.",
            hint=_MOVE_ASIDE_HINT,
        )
