"""
Tests for environment configuration.
"""

import os
from pathlib import Path

import pytest

from campusmatch.env import Settings, get_settings, load_env

pytestmark = pytest.mark.usefixtures("isolated_env")


class TestGetSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CAMPUSMATCH_LOG_DIR", raising=False)
        settings = get_settings()
        assert settings == Settings(log_level="INFO", case_sensitive=False, log_dir=Path("logs"))

    def test_empty_log_dir_disables_file_logging(self):
        assert get_settings().log_dir is None

    def test_case_sensitive_truthy_values(self, monkeypatch):
        for value in ["1", "true", "YES", " on "]:
            monkeypatch.setenv("CAMPUSMATCH_CASE_SENSITIVE", value)
            assert get_settings().case_sensitive is True

    def test_case_sensitive_garbled_is_false(self, monkeypatch):
        monkeypatch.setenv("CAMPUSMATCH_CASE_SENSITIVE", "maybe")
        assert get_settings().case_sensitive is False

    def test_log_level_uppercased(self, monkeypatch):
        monkeypatch.setenv("CAMPUSMATCH_LOG_LEVEL", "debug")
        assert get_settings().log_level == "DEBUG"

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("CAMPUSMATCH_LOG_LEVEL", "verbose")
        assert get_settings().log_level == "INFO"


class TestLoadEnv:

    def test_loads_dotenv_from_cwd(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CAMPUSMATCH_TEST_VALUE", raising=False)
        (tmp_path / ".env").write_text("CAMPUSMATCH_TEST_VALUE=hello\n", encoding="utf-8")
        load_env()
        assert os.environ["CAMPUSMATCH_TEST_VALUE"] == "hello"
        monkeypatch.delenv("CAMPUSMATCH_TEST_VALUE")

    def test_existing_environment_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CAMPUSMATCH_LOG_LEVEL", "ERROR")
        (tmp_path / ".env").write_text("CAMPUSMATCH_LOG_LEVEL=DEBUG\n", encoding="utf-8")
        load_env()
        assert get_settings().log_level == "ERROR"

    def test_missing_file_is_noop(self):
        load_env()
