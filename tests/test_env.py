"""
Tests for .env loading and SCOREBOARD_* settings.
"""

import os
from pathlib import Path

from scoreboard.env import Settings, load_env, load_settings


class TestLoadSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SCOREBOARD_LOG_CONSOLE", raising=False)
        assert load_settings() == Settings(log_level=None, log_dir=None, log_to_console=False)

    def test_values_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SCOREBOARD_LOG_LEVEL", " info ")
        monkeypatch.setenv("SCOREBOARD_LOG_DIR", str(tmp_path))
        monkeypatch.setenv("SCOREBOARD_LOG_CONSOLE", "Yes")

        settings = load_settings()

        assert settings.log_level == "INFO"
        assert settings.log_dir == Path(tmp_path)
        assert settings.log_to_console is True

    def test_unknown_level_means_unset(self, monkeypatch):
        monkeypatch.setenv("SCOREBOARD_LOG_LEVEL", "chatty")
        assert load_settings().log_level is None

    def test_console_off_values(self, monkeypatch):
        monkeypatch.setenv("SCOREBOARD_LOG_CONSOLE", "off")
        assert load_settings().log_to_console is False


class TestLoadEnv:

    def test_reads_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SCOREBOARD_TEST_VALUE", "placeholder")
        monkeypatch.delenv("SCOREBOARD_TEST_VALUE")
        (tmp_path / ".env").write_text("# comment\nSCOREBOARD_TEST_VALUE=from-file\n")

        load_env()

        assert os.environ["SCOREBOARD_TEST_VALUE"] == "from-file"

    def test_existing_variables_win(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SCOREBOARD_TEST_VALUE", "from-shell")
        (tmp_path / ".env").write_text("SCOREBOARD_TEST_VALUE=from-file\n")

        load_env()

        assert os.environ["SCOREBOARD_TEST_VALUE"] == "from-shell"

    def test_missing_file_is_noop(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        load_env()
