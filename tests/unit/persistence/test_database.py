"""Unit tests for engine construction."""

from unittest.mock import patch

from forum.config import DatabaseSettings, Settings
from forum.persistence.database import create_engine


class TestCreateEngine:
    """Tests for create_engine."""

    def test_pool_and_connection_settings(self):
        settings = Settings(
            database=DatabaseSettings(
                url="postgresql+asyncpg://forum:secret@db:5432/forum",
                pool_size=3,
            )
        )

        with patch("forum.persistence.database.create_async_engine") as factory:
            create_engine(settings)

        url, kwargs = factory.call_args.args[0], factory.call_args.kwargs
        assert url.host == "db"
        assert kwargs["pool_size"] == 3
        assert kwargs["pool_pre_ping"] is True
        assert kwargs["connect_args"] == {
            "server_settings": {"application_name": "forum-api"}
        }

    def test_no_statement_timeout(self):
        """Queries run until they finish; cancellation is the caller's concern."""
        with patch("forum.persistence.database.create_async_engine") as factory:
            create_engine(Settings())

        server_settings = factory.call_args.kwargs["connect_args"]["server_settings"]
        assert "statement_timeout" not in server_settings
