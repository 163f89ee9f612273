"""Tests for highsystems/config/settings.py — environment settings."""

from highsystems.config.settings import get_settings


class TestSettings:

    def test_defaults(self, override_settings):
        override_settings()
        s = get_settings()
        assert s.connection_limit == 10
        assert s.connection_limit_period == 1000
        assert s.error_on_connection_limit is False
        assert s.proxy_host == ""
        assert s.log_level == "WARNING"

    def test_env_override(self, override_settings):
        override_settings(
            HS_INSTANCE="demo",
            HS_USER_TOKEN="ut-abc",
            HS_CONNECTION_LIMIT="3",
            HS_ERROR_ON_CONNECTION_LIMIT="true",
        )
        s = get_settings()
        assert s.instance == "demo"
        assert s.user_token == "ut-abc"
        assert s.connection_limit == 3
        assert s.error_on_connection_limit is True

    def test_cached(self, override_settings):
        override_settings(HS_INSTANCE="first")
        assert get_settings() is get_settings()
