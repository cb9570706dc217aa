"""Redis-backed cache adapter.

Stores orjson-encoded values with a default maximum age and decodes them
through pydantic type adapters. Redis failures are translated into the
classified cache errors; a missing key is reported as ``CacheMiss``.

There is no in-process cache in front of Redis: every instance must observe
the central store as the only cached truth for invalidation to hold.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

import orjson
from pydantic import BaseModel, TypeAdapter, ValidationError
from redis.exceptions import RedisError

from cachegraph.core.ids import ID
from cachegraph.repository.errors import (
    CacheDeleteError,
    CacheMiss,
    CacheReadError,
    CacheWriteError,
)

if TYPE_CHECKING:
    from redis.asyncio import Redis

T = TypeVar("T")

# Default TTL (1 hour)
DEFAULT_TTL = 3600


def _encode_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, ID):
        return str(value)
    raise TypeError(f"Type is not cacheable: {type(value).__name__}")


def encode_value(value: Any) -> bytes:
    """Serialize a model, a list of models or plain JSON data."""
    return orjson.dumps(value, default=_encode_default)


class CacheBackend:
    """Cache operations over a shared ``redis.asyncio`` client."""

    def __init__(self, client: Redis, ttl: int = DEFAULT_TTL):
        self.client = client
        self.ttl = ttl

    async def set(self, key: str, value: Any) -> None:
        try:
            data = encode_value(value)
        except TypeError as exc:
            raise CacheWriteError(key) from exc
        try:
            await self.client.setex(key, self.ttl, data)
        except RedisError as exc:
            raise CacheWriteError(key) from exc

    async def get(self, key: str, adapter: TypeAdapter[T]) -> T:
        """Decode the value stored at ``key``.

        Raises:
            CacheMiss: the key does not exist
            CacheReadError: Redis failed or the stored bytes do not decode
        """
        try:
            data = await self.client.get(key)
        except RedisError as exc:
            raise CacheReadError(key) from exc
        if data is None:
            raise CacheMiss(key)
        try:
            return adapter.validate_json(data)
        except ValidationError as exc:
            raise CacheReadError(key) from exc

    async def delete(self, key: str) -> None:
        try:
            deleted = await self.client.delete(key)
        except RedisError as exc:
            raise CacheDeleteError(key) from exc
        if not deleted:
            raise CacheMiss(key)

    async def keys(self, pattern: str) -> list[str]:
        """Enumerate keys matching a glob pattern.

        Uses SCAN rather than KEYS so the server is never blocked.
        """
        found: dict[str, None] = {}
        try:
            async for key in self.client.scan_iter(match=pattern):
                name = key.decode("utf-8") if isinstance(key, bytes) else key
                found[name] = None
        except RedisError as exc:
            raise CacheReadError(pattern) from exc
        # SCAN may report a key more than once
        return list(found)

    async def ping(self) -> bool:
        """Check Redis connectivity."""
        try:
            return bool(await self.client.ping())
        except RedisError:
            return False
