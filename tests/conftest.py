"""Global pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from cachegraph.cache.repositories import CachedRepository
from tests.fakes import FakeRedis, Samples, make_samples


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer(span_exporter: InMemorySpanExporter) -> Any:
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider.get_tracer("tests")


@pytest.fixture
def samples() -> Samples:
    return make_samples()


@pytest.fixture
def build(fake_redis: FakeRedis, tracer: Any) -> Callable[..., tuple[Any, AsyncMock]]:
    """Build a cached repository around an ``AsyncMock`` of its protocol."""

    def _build(
        cls: type[CachedRepository[Any]], protocol: type, **options: Any
    ) -> tuple[Any, AsyncMock]:
        repo = AsyncMock(spec=protocol)
        cached = cls.build(client=fake_redis, repo=repo, tracer=tracer, **options)
        return cached, repo

    return _build
