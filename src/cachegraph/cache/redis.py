"""Central Redis store connection.

One client (and its connection pool) is shared by every cached repository
of a process. The wrapper here only owns its lifecycle; repositories
receive the client explicitly through their options.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import redis.asyncio as redis
from redis.exceptions import RedisError

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from cachegraph.config import Settings

logger = logging.getLogger(__name__)


def create_redis_client(
    url: str,
    *,
    socket_timeout: float | None = None,
    connect_timeout: float | None = None,
    max_connections: int | None = None,
) -> Redis:
    """Create a pooled client. Use a ``rediss://`` URL for TLS."""
    return redis.from_url(  # type: ignore[no-untyped-call]
        url,
        encoding="utf-8",
        decode_responses=False,  # values are orjson bytes
        socket_timeout=socket_timeout,
        socket_connect_timeout=connect_timeout,
        max_connections=max_connections,
        retry_on_timeout=True,
        health_check_interval=30,
    )


class RedisDatabase:
    """Owns the shared Redis client.

    Usage:
        async with RedisDatabase.from_settings(settings) as db:
            users = CachedUserRepository.build(client=db.client, repo=user_repo)
    """

    def __init__(self, client: Redis) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> RedisDatabase:
        client = create_redis_client(
            settings.redis_url,
            socket_timeout=settings.redis_socket_timeout,
            connect_timeout=settings.redis_connect_timeout,
            max_connections=settings.redis_max_connections,
        )
        return cls(client)

    @property
    def client(self) -> Redis:
        return self._client

    async def ping(self) -> bool:
        """Check Redis connectivity."""
        try:
            return bool(await self._client.ping())
        except RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> RedisDatabase:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
