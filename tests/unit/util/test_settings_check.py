"""Unit tests for startup settings checks."""

import pytest

from forum.config import AuthSettings, FeedSettings, Settings
from forum.util.di.core import check_settings
from forum.util.error import ConfigurationError


class TestCheckSettings:
    """Tests for check_settings."""

    def test_development_defaults_pass(self):
        settings = Settings(environment="development")

        assert check_settings(settings) is settings

    def test_production_requires_jwt_secret(self):
        settings = Settings(environment="production")

        with pytest.raises(ConfigurationError) as exc_info:
            check_settings(settings)

        assert exc_info.value.setting == "AUTH__JWT_SECRET"

    def test_production_rejects_debug(self):
        settings = Settings(
            environment="production",
            debug=True,
            auth=AuthSettings(jwt_secret="s3cret"),
        )

        with pytest.raises(ConfigurationError, match="DEBUG"):
            check_settings(settings)

    def test_production_with_secret_passes(self):
        settings = Settings(
            environment="production", auth=AuthSettings(jwt_secret="s3cret")
        )

        assert check_settings(settings) is settings

    def test_default_limit_above_max_rejected(self):
        settings = Settings(feed=FeedSettings(default_limit=50, max_limit=20))

        with pytest.raises(ConfigurationError) as exc_info:
            check_settings(settings)

        assert exc_info.value.setting == "FEED__DEFAULT_LIMIT"
