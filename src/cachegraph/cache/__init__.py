"""Cache layer.

Read-through, write-invalidating cache over the central Redis store:
- Keys are composed from typed fragments (``keys``)
- ``CacheBackend`` adapts Redis and classifies its failures
- ``BaseCacheRepository`` traces every primitive
- ``topology`` declares which keys each write invalidates
- One cached repository per entity wraps its authoritative repository
"""

from cachegraph.cache.backend import DEFAULT_TTL, CacheBackend
from cachegraph.cache.base import BaseCacheRepository, RepositoryOptions, parse_options
from cachegraph.cache.factory import (
    AuthoritativeRepositories,
    CachedRepositories,
    build_cached_repositories,
)
from cachegraph.cache.keys import CacheKeys, compose_cache_key
from cachegraph.cache.redis import RedisDatabase, create_redis_client
from cachegraph.cache.topology import CROSS_EDGES, OWN_INVALIDATIONS, WriteOp, invalidation_plan

__all__ = [
    # Keys
    "CacheKeys",
    "compose_cache_key",
    # Backend
    "CacheBackend",
    "DEFAULT_TTL",
    "RedisDatabase",
    "create_redis_client",
    # Base repository
    "BaseCacheRepository",
    "RepositoryOptions",
    "parse_options",
    # Topology
    "WriteOp",
    "OWN_INVALIDATIONS",
    "CROSS_EDGES",
    "invalidation_plan",
    # Wiring
    "AuthoritativeRepositories",
    "CachedRepositories",
    "build_cached_repositories",
]
