"""Tests for the Redis connection wrapper."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from cachegraph.cache.redis import RedisDatabase, create_redis_client
from cachegraph.config import Settings


class TestCreateRedisClient:
    """Tests for create_redis_client."""

    def test_client_options(self) -> None:
        """Timeouts and pool size are passed through, values stay as bytes."""
        with patch("cachegraph.cache.redis.redis.from_url") as from_url:
            create_redis_client(
                "rediss://cache:6380/1",
                socket_timeout=1.5,
                connect_timeout=2.0,
                max_connections=10,
            )

        args, kwargs = from_url.call_args
        assert args == ("rediss://cache:6380/1",)
        assert kwargs["decode_responses"] is False
        assert kwargs["socket_timeout"] == 1.5
        assert kwargs["socket_connect_timeout"] == 2.0
        assert kwargs["max_connections"] == 10
        assert kwargs["retry_on_timeout"] is True


class TestRedisDatabase:
    """Tests for RedisDatabase."""

    def test_from_settings(self) -> None:
        """Connection parameters come from the settings."""
        settings = Settings(
            REDIS_URL="redis://cache:6379/2",
            REDIS_SOCKET_TIMEOUT=1.0,
            REDIS_CONNECT_TIMEOUT=2.0,
            REDIS_MAX_CONNECTIONS=5,
        )
        with patch("cachegraph.cache.redis.redis.from_url") as from_url:
            db = RedisDatabase.from_settings(settings)

        assert db.client is from_url.return_value
        assert from_url.call_args.args == ("redis://cache:6379/2",)
        assert from_url.call_args.kwargs["max_connections"] == 5

    @pytest.mark.asyncio
    async def test_ping(self) -> None:
        """Ping reports connectivity."""
        client = MagicMock()
        client.ping = AsyncMock(return_value=True)

        assert await RedisDatabase(client).ping() is True

    @pytest.mark.asyncio
    async def test_ping_failure(self, caplog) -> None:
        """A failed ping returns False and logs a warning."""
        client = MagicMock()
        client.ping = AsyncMock(side_effect=RedisConnectionError("refused"))

        assert await RedisDatabase(client).ping() is False
        assert "Redis ping failed" in caplog.text

    @pytest.mark.asyncio
    async def test_context_manager_closes(self) -> None:
        """Leaving the context closes the client."""
        client = MagicMock()
        client.aclose = AsyncMock()

        async with RedisDatabase(client) as db:
            assert db.client is client

        client.aclose.assert_awaited_once()
