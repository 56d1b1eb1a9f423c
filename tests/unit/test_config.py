"""
Tests for environment configuration
"""

import pytest

from grammar_quiz.config import Settings

NOTIFY_VARS = ("NOTIFY_BOT_TOKEN", "NOTIFY_CHAT_ID", "TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID")


@pytest.fixture
def clean_env(monkeypatch):
    for name in NOTIFY_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, clean_env):
        config = Settings(_env_file=None)

        assert config.notify_bot_token is None
        assert config.notify_chat_id is None
        assert config.notify_enabled is False
        assert config.notify_api_base == "https://api.telegram.org"

    def test_notify_variables(self, clean_env):
        clean_env.setenv("NOTIFY_BOT_TOKEN", "123:abc")
        clean_env.setenv("NOTIFY_CHAT_ID", "-100200")

        config = Settings(_env_file=None)

        assert config.notify_bot_token == "123:abc"
        assert config.notify_chat_id == "-100200"
        assert config.notify_enabled is True

    def test_telegram_variables_accepted(self, clean_env):
        clean_env.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
        clean_env.setenv("TELEGRAM_CHAT_ID", "-100200")

        config = Settings(_env_file=None)

        assert config.notify_enabled is True

    def test_one_value_is_not_enough(self, clean_env):
        clean_env.setenv("NOTIFY_BOT_TOKEN", "123:abc")

        assert Settings(_env_file=None).notify_enabled is False

    def test_empty_value_is_not_enough(self, clean_env):
        clean_env.setenv("NOTIFY_BOT_TOKEN", "123:abc")
        clean_env.setenv("NOTIFY_CHAT_ID", "")

        assert Settings(_env_file=None).notify_enabled is False

    def test_cors_origins_list(self, clean_env):
        config = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")
        assert config.cors_origins_list == ["http://a.test", "http://b.test"]
