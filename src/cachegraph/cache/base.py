"""Traced cache primitives shared by every cached repository.

``BaseCacheRepository`` wraps the ``CacheBackend`` with one span per
primitive (``repository.cache.base/<Op>``) and guarantees that whatever the
backend raises reaches the caller as a classified cache error. A miss is
never an error here: ``get`` returns ``None``, ``set``/``delete`` succeed.

Cancellation (``asyncio.CancelledError``) is not an ``Exception`` and passes
through untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cachegraph.cache.backend import CacheBackend
from cachegraph.config import settings
from cachegraph.observability.tracing import get_tracer
from cachegraph.repository.errors import (
    CacheDeleteError,
    CacheError,
    CacheMiss,
    CacheReadError,
    CacheWriteError,
    InvalidRepositoryError,
)

if TYPE_CHECKING:
    from pydantic import TypeAdapter

T = TypeVar("T")

SPAN_PREFIX = "repository.cache.base"


def _default_logger() -> logging.Logger:
    return logging.getLogger("cachegraph.cache")


def _default_tracer() -> Any:
    return get_tracer("cachegraph.cache")


def _default_ttl() -> int:
    return settings.cache_ttl


class RepositoryOptions(BaseModel):
    """Options accepted by every cached repository builder.

    ``client`` and ``repo`` are required. ``logger`` and ``tracer`` default to
    the library logger and tracer, both silent until the application sets up
    logging and tracing. ``ttl`` defaults to ``cache_ttl`` from the settings.
    Unknown options are rejected.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True, frozen=True)

    client: Any
    repo: Any
    logger: logging.Logger | logging.LoggerAdapter = Field(  # type: ignore[type-arg]
        default_factory=_default_logger
    )
    tracer: Any = Field(default_factory=_default_tracer)
    ttl: int = Field(default_factory=_default_ttl, gt=0)

    @field_validator("client", "repo", "tracer", mode="before")
    @classmethod
    def _not_none(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("must not be None")
        return value

    @field_validator("tracer")
    @classmethod
    def _is_tracer(cls, value: Any) -> Any:
        if not callable(getattr(value, "start_as_current_span", None)):
            raise ValueError("tracer must provide start_as_current_span")
        return value


def parse_options(options: Mapping[str, Any]) -> RepositoryOptions:
    """Validate builder options, raising ``InvalidRepositoryError`` on failure."""
    try:
        return RepositoryOptions.model_validate(dict(options))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'options'}: {error['msg']}"
            for error in exc.errors()
        )
        raise InvalidRepositoryError(f"invalid repository options: {problems}") from exc


class BaseCacheRepository:
    """Cache primitives with tracing and error classification."""

    def __init__(
        self,
        backend: CacheBackend | None,
        client: Any,
        logger: logging.Logger | logging.LoggerAdapter | None,  # type: ignore[type-arg]
        tracer: Any,
    ) -> None:
        missing = [
            name
            for name, dependency in (
                ("backend", backend),
                ("client", client),
                ("logger", logger),
                ("tracer", tracer),
            )
            if dependency is None
        ]
        if missing:
            raise InvalidRepositoryError(f"missing dependencies: {', '.join(missing)}")
        self.backend = backend
        self.client = client
        self.logger = logger
        self.tracer = tracer

    @classmethod
    def from_options(cls, options: RepositoryOptions) -> BaseCacheRepository:
        backend = CacheBackend(options.client, ttl=options.ttl)
        return cls(backend, options.client, options.logger, options.tracer)

    def _failed(self, operation: str, error: CacheError) -> None:
        self.logger.warning(
            f"cache {operation} failed: {error}",
            extra={"cache.key": error.key, "cache.operation": operation},
        )

    async def set(self, key: str, value: Any) -> None:
        with self.tracer.start_as_current_span(f"{SPAN_PREFIX}/Set") as span:
            span.set_attribute("cache.key", key)
            try:
                await self.backend.set(key, value)
            except CacheMiss:
                return
            except CacheError as exc:
                self._failed("set", exc)
                raise
            except Exception as exc:
                error = CacheWriteError(key)
                self._failed("set", error)
                raise error from exc

    async def get(self, key: str, adapter: TypeAdapter[T]) -> T | None:
        """Return the cached value, or ``None`` on a miss."""
        with self.tracer.start_as_current_span(f"{SPAN_PREFIX}/Get") as span:
            span.set_attribute("cache.key", key)
            try:
                value = await self.backend.get(key, adapter)
            except CacheMiss:
                span.set_attribute("cache.hit", False)
                self.logger.debug(f"cache miss: {key}", extra={"cache.key": key})
                return None
            except CacheError as exc:
                self._failed("get", exc)
                raise
            except Exception as exc:
                error = CacheReadError(key)
                self._failed("get", error)
                raise error from exc
            span.set_attribute("cache.hit", True)
            return value

    async def delete(self, key: str) -> None:
        with self.tracer.start_as_current_span(f"{SPAN_PREFIX}/Delete") as span:
            span.set_attribute("cache.key", key)
            try:
                await self.backend.delete(key)
            except CacheMiss:
                return
            except CacheDeleteError as exc:
                self._failed("delete", exc)
                raise
            except Exception as exc:
                error = CacheDeleteError(key)
                self._failed("delete", error)
                raise error from exc

    async def delete_pattern(self, pattern: str) -> None:
        """Delete every key matching ``pattern``, one at a time."""
        with self.tracer.start_as_current_span(f"{SPAN_PREFIX}/DeletePattern") as span:
            span.set_attribute("cache.pattern", pattern)
            try:
                keys = await self.backend.keys(pattern)
            except Exception as exc:
                error = CacheDeleteError(pattern)
                self._failed("delete pattern", error)
                raise error from exc
            span.set_attribute("cache.matched", len(keys))
            for key in keys:
                await self.delete(key)
