"""Error taxonomy shared by authoritative and cached repositories.

Cache errors always chain the backend failure (``raise ... from exc``) so
callers can match on the category and still inspect the cause. ``CacheMiss``
is deliberately not a ``CacheError``: a miss is a valid lookup outcome and
never escapes the cache layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cachegraph.core.ids import ID, ResourceType


class RepositoryError(Exception):
    """Base class for all repository errors."""


class NotFoundError(RepositoryError):
    """The authoritative repository has no such entity."""

    def __init__(self, resource_type: ResourceType, id: ID | str) -> None:
        self.resource_type = resource_type
        self.id = id
        super().__init__(f"{resource_type.value} not found: {id}")


class InvalidRepositoryError(RepositoryError):
    """A repository was constructed with missing, empty or unknown options."""


class CacheMiss(Exception):
    """The key is not present in the cache."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"cache miss: {key}")


class CacheError(RepositoryError):
    """Base class for classified cache failures."""

    action = "access"

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"failed to {self.action} cache: {key}")


class CacheReadError(CacheError):
    """Non-miss failure during a cache lookup."""

    action = "read"


class CacheWriteError(CacheError):
    """Failure while populating or refreshing a cache record."""

    action = "write"


class CacheDeleteError(CacheError):
    """Failure during single-key or pattern invalidation."""

    action = "delete"


class WriteError(RepositoryError):
    """A write rejected by the authoritative repository."""

    operation = "write"

    def __init__(self, resource_type: ResourceType, reason: str = "") -> None:
        self.resource_type = resource_type
        self.reason = reason
        message = f"failed to {self.operation} {resource_type.value}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CreateError(WriteError):
    operation = "create"


class UpdateError(WriteError):
    operation = "update"


class DeleteError(WriteError):
    operation = "delete"
