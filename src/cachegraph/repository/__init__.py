"""Repository contracts and the error taxonomy shared across the cache layer."""

from cachegraph.repository.errors import (
    CacheDeleteError,
    CacheError,
    CacheMiss,
    CacheReadError,
    CacheWriteError,
    CreateError,
    DeleteError,
    InvalidRepositoryError,
    NotFoundError,
    RepositoryError,
    UpdateError,
    WriteError,
)

__all__ = [
    "RepositoryError",
    "NotFoundError",
    "InvalidRepositoryError",
    "CacheMiss",
    "CacheError",
    "CacheReadError",
    "CacheWriteError",
    "CacheDeleteError",
    "WriteError",
    "CreateError",
    "UpdateError",
    "DeleteError",
]
