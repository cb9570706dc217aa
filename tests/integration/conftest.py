"""Integration test fixtures using Docker.

Provides a containerized Redis for exercising the cache against a real
central store.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from redis.asyncio import Redis

from cachegraph.cache.redis import create_redis_client
from tests.integration.docker_utils import DockerService, get_docker_client, run_container


@pytest.fixture(scope="session")
def docker_client():
    """Create a Docker client or skip if Docker is unavailable."""
    try:
        client = get_docker_client()
        client.ping()
    except Exception as exc:
        pytest.skip(f"Docker not available: {exc}")
    yield client
    client.close()


@pytest.fixture(scope="session")
def redis_container(docker_client) -> Iterator[DockerService]:
    """Start Redis container for the test session."""
    ports = {"6379/tcp": None}
    with run_container(docker_client, "redis:7-alpine", ports=ports) as redis:
        yield redis


@pytest.fixture(scope="session")
def redis_url(redis_container: DockerService) -> str:
    """Get the Redis URL for the test container."""
    return redis_container.url("redis", 6379, path="/0")


@pytest_asyncio.fixture
async def redis_client(redis_url: str) -> AsyncIterator[Redis]:
    """Create the shared cache client, flushed after each test."""
    client = create_redis_client(redis_url, socket_timeout=5.0, connect_timeout=5.0)
    await _wait_for_redis(client)
    yield client
    await client.flushdb()
    await client.aclose()


async def _wait_for_redis(client: Redis, timeout: float = 30.0) -> None:
    """Wait for Redis to accept connections."""
    deadline = time.monotonic() + timeout
    while True:
        try:
            await client.ping()
            return
        except Exception:
            if time.monotonic() >= deadline:
                raise
            await asyncio.sleep(0.5)
