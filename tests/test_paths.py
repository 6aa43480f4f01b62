"""Tests for data-file location (config/paths.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from tracc.config.paths import APP_DIR_NAME, DATA_FILE_NAME, data_dir, ensure_data_file
from tracc.exceptions import StoreIOError


class TestDataDir:
    def test_uses_xdg_data_home(self, tmp_path: Path) -> None:
        assert data_dir({"XDG_DATA_HOME": str(tmp_path)}) == tmp_path / APP_DIR_NAME

    def test_empty_xdg_falls_back_to_home(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        expected = tmp_path / ".local" / "share" / APP_DIR_NAME
        assert data_dir({"XDG_DATA_HOME": ""}) == expected
        assert data_dir({}) == expected

    def test_reads_process_environment_by_default(self, isolated_data_home: Path) -> None:
        assert data_dir() == isolated_data_home / APP_DIR_NAME

    def test_unknown_home_is_io_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _no_home() -> Path:
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", _no_home)
        with pytest.raises(StoreIOError, match="home directory"):
            data_dir({})


class TestEnsureDataFile:
    def test_creates_directory(self, isolated_data_home: Path) -> None:
        path = ensure_data_file()
        assert path == isolated_data_home / APP_DIR_NAME / DATA_FILE_NAME
        assert path.parent.is_dir()
        assert not path.exists()

    def test_existing_directory_is_reused(self, isolated_data_home: Path) -> None:
        (isolated_data_home / APP_DIR_NAME).mkdir(parents=True)
        assert ensure_data_file().parent.is_dir()

    def test_directory_occupied_by_file(self, isolated_data_home: Path) -> None:
        isolated_data_home.mkdir(parents=True)
        (isolated_data_home / APP_DIR_NAME).write_text("oops", encoding="utf-8")
        with pytest.raises(StoreIOError, match="it is a file"):
            ensure_data_file()

    def test_uncreatable_directory(self, isolated_data_home: Path) -> None:
        isolated_data_home.parent.mkdir(parents=True, exist_ok=True)
        isolated_data_home.write_text("not a directory", encoding="utf-8")
        with pytest.raises(StoreIOError, match="Could not create data directory"):
            ensure_data_file()
