"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from tracc import __version__
from tracc.cli import exit_codes
from tracc.cli.console import get_rich_console
from tracc.exceptions import (
    AlreadyTrackingError,
    ClockSkewError,
    NotTrackingError,
    StoreIOError,
    StoreUnreadableError,
    TraccError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            AlreadyTrackingError,
            NotTrackingError,
            ClockSkewError,
            StoreUnreadableError,
            StoreIOError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[TraccError]
    ) -> None:
        assert issubclass(exc_class, TraccError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(TraccError, Exception)

    def test_hint_is_stored(self) -> None:
        err = TraccError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert TraccError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

class TestConsole:
    def test_stderr_console(self, capsys: pytest.CaptureFixture[str]) -> None:
        get_rich_console().print("to stderr")
        captured = capsys.readouterr()
        assert "to stderr" in captured.err
        assert captured.out == ""

    def test_stdout_console(self, capsys: pytest.CaptureFixture[str]) -> None:
        get_rich_console(stderr=False).print("to stdout")
        captured = capsys.readouterr()
        assert captured.out == "to stdout\n"
