"""Read-through behavior of every cached read."""

from __future__ import annotations

import asyncio

import orjson
import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from cachegraph.cache.backend import encode_value
from cachegraph.repository.errors import CacheReadError, CacheWriteError, NotFoundError
from tests.unit.cache.repositories.cases import READS, ReadCase

pytestmark = pytest.mark.asyncio


@pytest.fixture(params=READS, ids=lambda case: case.id)
def case(request) -> ReadCase:
    return request.param


class TestReadThrough:
    """Miss, hit and failure paths, for each cached read."""

    async def test_miss_loads_and_stores(self, case, build, fake_redis, samples):
        """A miss reads the authoritative repository and stores the value."""
        cached, repo = build(case.cls, case.protocol)
        expected = case.value(samples)
        getattr(repo, case.method).return_value = expected

        result = await getattr(cached, case.method)(*case.args(samples))

        assert result == expected
        getattr(repo, case.method).assert_awaited_once_with(*case.args(samples))
        assert fake_redis.store[case.key] == encode_value(expected)
        assert fake_redis.ttls[case.key] == 3600

    async def test_hit_skips_repository(self, case, build, samples):
        """The second read is served from the cache."""
        cached, repo = build(case.cls, case.protocol)
        expected = case.value(samples)
        getattr(repo, case.method).return_value = expected

        first = await getattr(cached, case.method)(*case.args(samples))
        second = await getattr(cached, case.method)(*case.args(samples))

        assert first == second == expected
        assert getattr(repo, case.method).await_count == 1

    async def test_hit_decodes_stored_value(self, case, build, fake_redis, samples):
        """A value already in the cache is decoded into domain models."""
        cached, repo = build(case.cls, case.protocol)
        expected = case.value(samples)
        fake_redis.seed(case.key, value=encode_value(expected))

        result = await getattr(cached, case.method)(*case.args(samples))

        assert result == expected
        getattr(repo, case.method).assert_not_awaited()

    async def test_read_error_fails_closed(self, case, build, fake_redis, samples):
        """A cache read failure surfaces without falling back to the repository."""
        cached, repo = build(case.cls, case.protocol)
        fake_redis.fail("get", RedisConnectionError("down"))

        with pytest.raises(CacheReadError) as exc_info:
            await getattr(cached, case.method)(*case.args(samples))

        assert exc_info.value.key == case.key
        getattr(repo, case.method).assert_not_awaited()

    async def test_undecodable_entry_is_read_error(self, case, build, fake_redis, samples):
        """Bytes that do not decode to the expected shape are a read error."""
        cached, repo = build(case.cls, case.protocol)
        fake_redis.seed(case.key, value=orjson.dumps({"unexpected": True}))

        with pytest.raises(CacheReadError):
            await getattr(cached, case.method)(*case.args(samples))

        getattr(repo, case.method).assert_not_awaited()

    async def test_repository_error_propagates(self, case, build, fake_redis, samples):
        """Authoritative errors reach the caller unchanged and nothing is cached."""
        cached, repo = build(case.cls, case.protocol)
        error = NotFoundError(case.cls.resource_type, "missing")
        getattr(repo, case.method).side_effect = error

        with pytest.raises(NotFoundError) as exc_info:
            await getattr(cached, case.method)(*case.args(samples))

        assert exc_info.value is error
        assert case.key not in fake_redis.store

    async def test_write_error_after_load(self, case, build, fake_redis, samples):
        """Failing to store the loaded value is reported as a write error."""
        cached, repo = build(case.cls, case.protocol)
        getattr(repo, case.method).return_value = case.value(samples)
        fake_redis.fail("setex", RedisConnectionError("down"))

        with pytest.raises(CacheWriteError) as exc_info:
            await getattr(cached, case.method)(*case.args(samples))

        assert exc_info.value.key == case.key
        getattr(repo, case.method).assert_awaited_once()

    async def test_cancellation_propagates(self, case, build, fake_redis, samples):
        """Cancellation during the lookup is not converted into a cache error."""
        cached, repo = build(case.cls, case.protocol)
        fake_redis.fail("get", asyncio.CancelledError())

        with pytest.raises(asyncio.CancelledError):
            await getattr(cached, case.method)(*case.args(samples))

        getattr(repo, case.method).assert_not_awaited()
