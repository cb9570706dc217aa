"""Shared plumbing of the per-entity cached repositories.

Reads go through ``_read_through``: cache lookup, authoritative read on a
miss, cache store, return. Writes first run the invalidation plan of the
topology and only then reach the authoritative repository; the first failed
step aborts the write with ``CacheDeleteError``.

Updates evict the canonical entity key, write, store the fresh value under
that key and then run the rest of the plan. A failed store still runs the
plan before its error is raised.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import TypeAdapter

from cachegraph.cache.base import BaseCacheRepository, parse_options
from cachegraph.cache.keys import CacheKeys
from cachegraph.cache.topology import WriteOp, invalidation_plan
from cachegraph.core.ids import ID, ResourceType
from cachegraph.repository.errors import CacheWriteError

R = TypeVar("R")
T = TypeVar("T")


class CachedRepository(Generic[R]):
    """Wraps an authoritative repository ``R`` with the central cache."""

    resource_type: ClassVar[ResourceType]

    def __init__(self, cache: BaseCacheRepository, repo: R) -> None:
        self.cache = cache
        self.repo = repo

    @classmethod
    def build(cls, **options: Any) -> Self:
        """Build from ``client``, ``repo`` and optional ``logger``, ``tracer``, ``ttl``.

        Raises:
            InvalidRepositoryError: an option is missing, None or unknown
        """
        parsed = parse_options(options)
        return cls(BaseCacheRepository.from_options(parsed), parsed.repo)

    def _key(self, id: ID | str) -> str:
        return CacheKeys.entity(self.resource_type, id)

    def _list_key(self, operation: str, *fragments: Any) -> str:
        return CacheKeys.collection(self.resource_type, operation, *fragments)

    async def _read_through(
        self,
        key: str,
        adapter: TypeAdapter[T],
        load: Callable[[], Awaitable[T]],
    ) -> T:
        cached = await self.cache.get(key, adapter)
        if cached is not None:
            return cached
        value = await load()
        await self.cache.set(key, value)
        return value

    async def _invalidate(self, op: WriteOp, **params: Any) -> None:
        for step in invalidation_plan(self.resource_type, op, **params):
            if step.pattern:
                await self.cache.delete_pattern(step.key)
            else:
                await self.cache.delete(step.key)

    async def _evict(self, id: ID) -> None:
        await self.cache.delete(self._key(id))

    async def _updated(self, id: ID, value: Any, **params: Any) -> None:
        """Store the fresh value, then run the update plan.

        The plan still runs when storing fails; its ``CacheDeleteError`` takes
        precedence over the ``CacheWriteError``.
        """
        try:
            await self.cache.set(self._key(id), value)
        except CacheWriteError:
            await self._invalidate(WriteOp.UPDATE, id=id, **params)
            raise
        await self._invalidate(WriteOp.UPDATE, id=id, **params)
