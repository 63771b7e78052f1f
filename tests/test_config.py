"""Tests for dctui.config."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from dctui.config import CONFIG_DIR_ENV, Config, config_from_dict, get_config_path, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config(tmp_path / "absent.json") == Config()

    def test_reads_values(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps(
                {
                    "debug": True,
                    "logLevel": "DEBUG",
                    "logFile": "/tmp/dctui.log",
                    "keybindings": {"quit": ["ctrl+q"]},
                }
            )
        )
        config = load_config(path)
        assert config.debug is True
        assert config.log_level == "debug"
        assert config.log_file == "/tmp/dctui.log"
        assert config.keybindings == {"quit": ["ctrl+q"]}

    def test_malformed_file_logs_and_defaults(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="dctui.config"):
            assert load_config(path) == Config()
        assert "Error reading config" in caplog.text

    def test_non_object_is_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        assert load_config(path) == Config()

    def test_env_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
        assert get_config_path() == tmp_path / "config.json"
        (tmp_path / "config.json").write_text(json.dumps({"debug": True}))
        assert load_config().debug is True


class TestConfigFromDict:
    def test_bad_types_ignored(self) -> None:
        config = config_from_dict(
            {"debug": "yes", "logLevel": "loud", "keybindings": {"quit": 3, "nextPage": "tab"}}
        )
        assert config.debug is False
        assert config.log_level == "info"
        assert config.keybindings == {"nextPage": "tab"}
