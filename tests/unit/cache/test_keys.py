"""Tests for cache key composition."""

from cachegraph.cache.keys import CacheKeys, compose_cache_key
from cachegraph.core.ids import ID, ResourceType


class TestComposeCacheKey:
    """Test fragment stringification and joining."""

    def test_joins_with_colon(self) -> None:
        """Fragments are joined with ':'."""
        assert compose_cache_key("user", "GetAll", 0, 10) == "user:GetAll:0:10"

    def test_none_is_empty_fragment(self) -> None:
        """None becomes an empty fragment, keeping its position."""
        key = compose_cache_key("todo", "GetByOwner", "u", 0, 10, None)
        assert key == "todo:GetByOwner:u:0:10:"

    def test_sequence_is_joined_in_place(self) -> None:
        """A sequence of strings is flattened with ':'."""
        assert compose_cache_key("a", ["b", "c"], "d") == "a:b:c:d"

    def test_booleans_are_lowercase(self) -> None:
        """Booleans render as true/false."""
        assert compose_cache_key(True, False) == "true:false"

    def test_enum_uses_value(self) -> None:
        """Enums render as their value, not their name."""
        assert compose_cache_key(ResourceType.DOCUMENT, "x") == "document:x"

    def test_identifier_uses_string_form(self) -> None:
        """Identifiers render through str()."""
        user_id = ID(ResourceType.USER, "u1")
        assert compose_cache_key(ResourceType.USER, user_id) == "user:user_u1"

    def test_is_pure(self) -> None:
        """Same inputs give the same key."""
        fragments = (ResourceType.ISSUE, "GetAllForProject", "p", 5, 20)
        assert compose_cache_key(*fragments) == compose_cache_key(*fragments)

    def test_no_fragments(self) -> None:
        """No fragments give an empty key."""
        assert compose_cache_key() == ""


class TestCacheKeys:
    """Test key schema helpers."""

    def test_entity_key(self) -> None:
        """Entity key is <type>:<id>."""
        doc_id = ID(ResourceType.DOCUMENT, "d1")
        assert CacheKeys.entity(ResourceType.DOCUMENT, doc_id) == "document:document_d1"

    def test_collection_key(self) -> None:
        """Collection key carries operation, scope, offset and limit."""
        key = CacheKeys.collection(ResourceType.COMMENT, "GetAllBelongsTo", "issue_i1", 0, 10)
        assert key == "comment:GetAllBelongsTo:issue_i1:0:10"

    def test_pattern_appends_wildcard(self) -> None:
        """Pattern ends with '*' after the given fragments."""
        assert CacheKeys.pattern(ResourceType.USER, "GetAll") == "user:GetAll:*"

    def test_everything(self) -> None:
        """Everything pattern covers the whole type keyspace."""
        assert CacheKeys.everything(ResourceType.ROLE) == "role:*"

    def test_is_pattern(self) -> None:
        """Only wildcard keys are patterns."""
        assert CacheKeys.is_pattern("role:*")
        assert not CacheKeys.is_pattern("role:role_r1")
