"""Cache key schema.

Single entity:  {type}:{id}
Collection:     {type}:{operation}:{scope...}:{offset}:{limit}[:{discriminator}]
Pattern:        any of the above cut short and terminated by "*"

Where:
- type: lower-case resource type tag ("user", "document", ...)
- id: identifier string form, which never contains ":"
- operation: name of the list operation ("GetAll", "GetAllBelongsTo", ...)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from cachegraph.core.ids import ID, ResourceType

SEPARATOR = ":"
WILDCARD = "*"


def _fragment(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return SEPARATOR.join(str(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def compose_cache_key(*fragments: Any) -> str:
    """Join stringified fragments with ":".

    None becomes an empty fragment, sequences are joined with ":" in place.
    Fragments are not escaped; identifiers never contain the separator.
    """
    return SEPARATOR.join(_fragment(fragment) for fragment in fragments)


class CacheKeys:
    """Cache key generator following the schema above."""

    @classmethod
    def entity(cls, resource_type: ResourceType, id: ID | str) -> str:
        """Canonical single-entity key."""
        return compose_cache_key(resource_type, id)

    @classmethod
    def collection(cls, resource_type: ResourceType, operation: str, *fragments: Any) -> str:
        """Key of one page of a list operation."""
        return compose_cache_key(resource_type, operation, *fragments)

    @classmethod
    def pattern(cls, resource_type: ResourceType, *fragments: Any) -> str:
        """Glob matching every key that starts with the given fragments."""
        return compose_cache_key(resource_type, *fragments, WILDCARD)

    @classmethod
    def everything(cls, resource_type: ResourceType) -> str:
        """Glob matching every key of a resource type."""
        return cls.pattern(resource_type)

    @classmethod
    def is_pattern(cls, key: str) -> bool:
        return key.endswith(WILDCARD)
