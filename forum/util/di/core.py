"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from forum.config import (
    AuthSettings,
    FeedSettings,
    RankingSettings,
    Settings,
    VoteSettings,
)
from forum.util.di.base import ProviderBase
from forum.util.error import ConfigurationError

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_settings(settings: Settings) -> Settings:
    """Refuse settings that are unsafe for their environment.

    Raises:
        ConfigurationError: On the first offending setting
    """
    if settings.environment == "production":
        if settings.auth.jwt_secret == DEFAULT_JWT_SECRET:
            raise ConfigurationError("AUTH__JWT_SECRET", "must be set in production")
        if settings.debug:
            raise ConfigurationError("DEBUG", "must be off in production")
    if settings.feed.default_limit > settings.feed.max_limit:
        raise ConfigurationError(
            "FEED__DEFAULT_LIMIT", "must not exceed FEED__MAX_LIMIT"
        )
    return settings


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return check_settings(Settings())

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_ranking_settings(self, settings: Settings) -> RankingSettings:
        """Provide feed ranking settings."""
        return settings.ranking

    @provide(scope=Scope.APP)
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        """Provide feed pagination settings."""
        return settings.feed

    @provide(scope=Scope.APP)
    def provide_vote_settings(self, settings: Settings) -> VoteSettings:
        """Provide vote retry settings."""
        return settings.votes
