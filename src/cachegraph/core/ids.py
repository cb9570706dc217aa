"""Typed resource identifiers.

An identifier carries the type of the resource it names. Its string form is
``<type>_<inner>``, e.g. ``user_5f0c1e...``, and never contains ``:`` or
``*``, so it can be used as a cache key fragment without escaping.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Final
from uuid import uuid4

from pydantic_core import core_schema

ID_SEPARATOR: Final[str] = "_"

_INNER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9-]+$")


class ResourceType(str, Enum):
    """Closed set of resource types. Values double as cache key prefixes."""

    USER = "user"
    ORGANIZATION = "organization"
    NAMESPACE = "namespace"
    PROJECT = "project"
    DOCUMENT = "document"
    ISSUE = "issue"
    COMMENT = "comment"
    ATTACHMENT = "attachment"
    ASSIGNMENT = "assignment"
    LABEL = "label"
    ROLE = "role"
    PERMISSION = "permission"
    TODO = "todo"
    NOTIFICATION = "notification"

    def __str__(self) -> str:
        return self.value


class InvalidID(ValueError):
    pass


class ID:
    """Opaque, immutable identifier of a resource."""

    __slots__ = ("_type", "_inner")

    def __init__(self, type: ResourceType | str, inner: str) -> None:
        try:
            resource_type = ResourceType(type)
        except ValueError as exc:
            raise InvalidID(f"unknown resource type: {type!r}") from exc
        if not isinstance(inner, str) or not _INNER_PATTERN.match(inner):
            raise InvalidID(f"invalid identifier value: {inner!r}")
        self._type = resource_type
        self._inner = inner

    @classmethod
    def new(cls, type: ResourceType) -> ID:
        return cls(type, uuid4().hex)

    @classmethod
    def from_string(cls, value: str, expected: ResourceType | None = None) -> ID:
        """Parse ``<type>_<inner>``, optionally checking the resource type."""
        type_tag, sep, inner = value.partition(ID_SEPARATOR)
        if not sep:
            raise InvalidID(f"missing type tag in identifier: {value!r}")
        parsed = cls(type_tag, inner)
        if expected is not None and parsed.type is not expected:
            raise InvalidID(f"expected {expected.value} identifier, got {parsed.type.value}")
        return parsed

    @property
    def type(self) -> ResourceType:
        return self._type

    @property
    def inner(self) -> str:
        return self._inner

    def __str__(self) -> str:
        return f"{self._type.value}{ID_SEPARATOR}{self._inner}"

    def __repr__(self) -> str:
        return f"ID({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ID):
            return NotImplemented
        return self._type is other._type and self._inner == other._inner

    def __hash__(self) -> int:
        return hash((self._type, self._inner))

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, name):
            raise AttributeError("ID is immutable")
        object.__setattr__(self, name, value)

    @classmethod
    def _coerce(cls, value: Any) -> ID:
        if isinstance(value, ID):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        raise InvalidID(f"cannot build an identifier from {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        # Validated from its string form, serialized back to it in JSON mode.
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )
