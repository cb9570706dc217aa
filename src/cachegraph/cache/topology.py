"""Invalidation topology.

Which cache keys each write must remove, kept as data rather than as calls
between cached repositories so the graph stays auditable and acyclic.

``OWN_INVALIDATIONS`` lists, per (resource type, write operation), the keys
and patterns owned by the written entity, in execution order. Fragments
given as ``Param`` are filled in from the write's arguments; a step whose
optional parameter is missing is dropped. On ``UPDATE`` the canonical
entity key is absent from the table because it is refreshed instead.

``CROSS_EDGES`` lists, per resource type, the other resource types whose
whole keyspace (``<other>:*``) is wiped after the own steps of every write.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from cachegraph.cache.keys import CacheKeys
from cachegraph.core.ids import ResourceType


class WriteOp(str, Enum):
    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"
    ADD_MEMBER = "AddMember"
    REMOVE_MEMBER = "RemoveMember"
    ADD_INVITATION = "AddInvitation"
    REMOVE_INVITATION = "RemoveInvitation"
    ATTACH_TO = "AttachTo"
    DETACH_FROM = "DetachFrom"
    ADD_WATCHER = "AddWatcher"
    REMOVE_WATCHER = "RemoveWatcher"
    ADD_RELATION = "AddRelation"
    REMOVE_RELATION = "RemoveRelation"


@dataclass(frozen=True)
class Param:
    """Named fragment resolved from the write's arguments."""

    name: str
    optional: bool = False


@dataclass(frozen=True)
class Invalidation:
    """One declared step: a single key, or a pattern ending in ``*``."""

    resource_type: ResourceType
    fragments: tuple[str | Param, ...]
    wildcard: bool

    def render(self, params: Mapping[str, Any]) -> str | None:
        resolved: list[Any] = []
        for fragment in self.fragments:
            if isinstance(fragment, Param):
                value = params.get(fragment.name)
                if value is None:
                    if fragment.optional:
                        return None
                    raise ValueError(
                        f"missing parameter {fragment.name!r} for "
                        f"{self.resource_type.value} invalidation"
                    )
                resolved.append(value)
            else:
                resolved.append(fragment)
        if self.wildcard:
            return CacheKeys.pattern(self.resource_type, *resolved)
        return CacheKeys.collection(self.resource_type, *resolved)


@dataclass(frozen=True)
class Step:
    """A rendered invalidation step."""

    key: str
    pattern: bool


def key(resource_type: ResourceType, *fragments: str | Param) -> Invalidation:
    return Invalidation(resource_type, fragments, wildcard=False)


def pattern(resource_type: ResourceType, *fragments: str | Param) -> Invalidation:
    return Invalidation(resource_type, fragments, wildcard=True)


_SELF = Param("id")

_USER = ResourceType.USER
_ORG = ResourceType.ORGANIZATION
_NS = ResourceType.NAMESPACE
_PROJECT = ResourceType.PROJECT
_DOC = ResourceType.DOCUMENT
_ISSUE = ResourceType.ISSUE
_COMMENT = ResourceType.COMMENT
_ATTACHMENT = ResourceType.ATTACHMENT
_ASSIGNMENT = ResourceType.ASSIGNMENT
_LABEL = ResourceType.LABEL
_ROLE = ResourceType.ROLE
_PERMISSION = ResourceType.PERMISSION
_TODO = ResourceType.TODO
_NOTIFICATION = ResourceType.NOTIFICATION

_ORG_MEMBERSHIP = (
    pattern(_ORG, "GetAll"),
    key(_ORG, "GetMembers", _SELF),
    key(_ORG, _SELF),
)
_ORG_INVITATIONS = (
    key(_ORG, "GetInvitations", _SELF),
    key(_ORG, _SELF),
)
_ISSUE_LISTS = (
    pattern(_ISSUE, "GetAllForProject"),
    pattern(_ISSUE, "GetAllForIssue"),
)
_ISSUE_WATCHERS = (
    key(_ISSUE, "GetWatchers", _SELF),
    key(_ISSUE, _SELF),
    *_ISSUE_LISTS,
)
_ISSUE_RELATIONS = (
    key(_ISSUE, "GetRelations", _SELF),
    key(_ISSUE, _SELF),
    key(_ISSUE, "GetRelations", Param("other_id", optional=True)),
    key(_ISSUE, Param("other_id", optional=True)),
    *_ISSUE_LISTS,
)
_LABEL_LINKS = (
    pattern(_LABEL, "GetAll"),
    key(_LABEL, _SELF),
)
_ROLE_MEMBERSHIP = (
    pattern(_ROLE, "GetAllBelongsTo", Param("belongs_to")),
    key(_ROLE, _SELF),
)

OWN_INVALIDATIONS: dict[tuple[ResourceType, WriteOp], tuple[Invalidation, ...]] = {
    # User
    (_USER, WriteOp.CREATE): (pattern(_USER, "GetAll"),),
    (_USER, WriteOp.UPDATE): (pattern(_USER, "GetAll"), pattern(_USER, "GetByEmail")),
    (_USER, WriteOp.DELETE): (
        pattern(_USER, "GetAll"),
        pattern(_USER, "GetByEmail"),
        key(_USER, _SELF),
    ),
    # Organization
    (_ORG, WriteOp.CREATE): (pattern(_ORG, "GetAll"),),
    (_ORG, WriteOp.UPDATE): (pattern(_ORG, "GetAll"),),
    (_ORG, WriteOp.ADD_MEMBER): _ORG_MEMBERSHIP,
    (_ORG, WriteOp.REMOVE_MEMBER): _ORG_MEMBERSHIP,
    (_ORG, WriteOp.ADD_INVITATION): _ORG_INVITATIONS,
    (_ORG, WriteOp.REMOVE_INVITATION): _ORG_INVITATIONS,
    (_ORG, WriteOp.DELETE): (
        pattern(_ORG, "GetAll"),
        key(_ORG, "GetMembers", _SELF),
        key(_ORG, "GetInvitations", _SELF),
        key(_ORG, _SELF),
    ),
    # Namespace
    (_NS, WriteOp.CREATE): (pattern(_NS, "GetAll", Param("org_id")),),
    (_NS, WriteOp.UPDATE): (pattern(_NS, "GetAll"),),
    (_NS, WriteOp.DELETE): (pattern(_NS, "GetAll"), key(_NS, _SELF)),
    # Project
    (_PROJECT, WriteOp.CREATE): (pattern(_PROJECT, "GetAll", Param("namespace_id")),),
    (_PROJECT, WriteOp.UPDATE): (pattern(_PROJECT, "GetAll"), pattern(_PROJECT, "GetByKey")),
    (_PROJECT, WriteOp.DELETE): (
        pattern(_PROJECT, "GetAll"),
        pattern(_PROJECT, "GetByKey"),
        key(_PROJECT, _SELF),
    ),
    # Document
    (_DOC, WriteOp.CREATE): (
        pattern(_DOC, "GetAllBelongsTo", Param("belongs_to")),
        pattern(_DOC, "GetByCreator", Param("created_by")),
    ),
    (_DOC, WriteOp.UPDATE): (
        pattern(_DOC, "GetAllBelongsTo"),
        pattern(_DOC, "GetByCreator", Param("created_by")),
    ),
    (_DOC, WriteOp.DELETE): (
        pattern(_DOC, "GetAllBelongsTo"),
        pattern(_DOC, "GetByCreator"),
        key(_DOC, _SELF),
    ),
    # Issue
    (_ISSUE, WriteOp.CREATE): (
        pattern(_ISSUE, "GetAllForProject", Param("project_id")),
        pattern(_ISSUE, "GetAllForIssue", Param("parent", optional=True)),
    ),
    (_ISSUE, WriteOp.UPDATE): _ISSUE_LISTS,
    (_ISSUE, WriteOp.ADD_WATCHER): _ISSUE_WATCHERS,
    (_ISSUE, WriteOp.REMOVE_WATCHER): _ISSUE_WATCHERS,
    (_ISSUE, WriteOp.ADD_RELATION): _ISSUE_RELATIONS,
    (_ISSUE, WriteOp.REMOVE_RELATION): _ISSUE_RELATIONS,
    (_ISSUE, WriteOp.DELETE): (
        *_ISSUE_LISTS,
        key(_ISSUE, "GetWatchers", _SELF),
        pattern(_ISSUE, "GetRelations"),
        key(_ISSUE, _SELF),
    ),
    # Comment
    (_COMMENT, WriteOp.CREATE): (pattern(_COMMENT, "GetAllBelongsTo", Param("belongs_to")),),
    (_COMMENT, WriteOp.UPDATE): (pattern(_COMMENT, "GetAllBelongsTo"),),
    (_COMMENT, WriteOp.DELETE): (pattern(_COMMENT, "GetAllBelongsTo"), key(_COMMENT, _SELF)),
    # Attachment
    (_ATTACHMENT, WriteOp.CREATE): (
        pattern(_ATTACHMENT, "GetAllBelongsTo", Param("belongs_to")),
    ),
    (_ATTACHMENT, WriteOp.UPDATE): (pattern(_ATTACHMENT, "GetAllBelongsTo"),),
    (_ATTACHMENT, WriteOp.DELETE): (
        pattern(_ATTACHMENT, "GetAllBelongsTo"),
        key(_ATTACHMENT, _SELF),
    ),
    # Assignment
    (_ASSIGNMENT, WriteOp.CREATE): (
        pattern(_ASSIGNMENT, "GetByUser", Param("user_id")),
        pattern(_ASSIGNMENT, "GetByResource", Param("resource_id")),
    ),
    (_ASSIGNMENT, WriteOp.DELETE): (
        pattern(_ASSIGNMENT, "GetByUser"),
        pattern(_ASSIGNMENT, "GetByResource"),
        key(_ASSIGNMENT, _SELF),
    ),
    # Label
    (_LABEL, WriteOp.CREATE): (pattern(_LABEL, "GetAll"),),
    (_LABEL, WriteOp.UPDATE): (pattern(_LABEL, "GetAll"),),
    (_LABEL, WriteOp.ATTACH_TO): _LABEL_LINKS,
    (_LABEL, WriteOp.DETACH_FROM): _LABEL_LINKS,
    (_LABEL, WriteOp.DELETE): _LABEL_LINKS,
    # Role
    (_ROLE, WriteOp.CREATE): (pattern(_ROLE, "GetAllBelongsTo", Param("belongs_to")),),
    (_ROLE, WriteOp.UPDATE): (pattern(_ROLE, "GetAllBelongsTo", Param("belongs_to")),),
    (_ROLE, WriteOp.ADD_MEMBER): _ROLE_MEMBERSHIP,
    (_ROLE, WriteOp.REMOVE_MEMBER): _ROLE_MEMBERSHIP,
    (_ROLE, WriteOp.DELETE): _ROLE_MEMBERSHIP,
    # Permission reads are never cached, only the cross edges apply
    (_PERMISSION, WriteOp.CREATE): (),
    (_PERMISSION, WriteOp.UPDATE): (),
    (_PERMISSION, WriteOp.DELETE): (),
    # Todo
    (_TODO, WriteOp.CREATE): (pattern(_TODO, "GetByOwner", Param("owner_id")),),
    (_TODO, WriteOp.UPDATE): (pattern(_TODO, "GetByOwner", Param("owner_id")),),
    (_TODO, WriteOp.DELETE): (pattern(_TODO, "GetByOwner"), key(_TODO, _SELF)),
    # Notification
    (_NOTIFICATION, WriteOp.CREATE): (
        pattern(_NOTIFICATION, "GetByRecipient", Param("recipient")),
    ),
    (_NOTIFICATION, WriteOp.UPDATE): (
        pattern(_NOTIFICATION, "GetByRecipient", Param("recipient")),
    ),
    (_NOTIFICATION, WriteOp.DELETE): (
        pattern(_NOTIFICATION, "GetByRecipient", Param("recipient")),
        key(_NOTIFICATION, _SELF),
    ),
}

CROSS_EDGES: dict[ResourceType, tuple[ResourceType, ...]] = {
    _USER: (_ORG, _ROLE),
    _ORG: (),
    _NS: (_ORG,),
    _PROJECT: (_NS,),
    _DOC: (_NS, _PROJECT, _USER),
    _ISSUE: (_ATTACHMENT, _COMMENT, _PROJECT),
    _COMMENT: (_ISSUE, _DOC),
    _ATTACHMENT: (_ISSUE, _DOC),
    _ASSIGNMENT: (),
    _LABEL: (_DOC, _ISSUE),
    _ROLE: (_ORG, _PROJECT),
    _PERMISSION: (_ROLE, _USER),
    _TODO: (),
    _NOTIFICATION: (),
}


def write_operations(resource_type: ResourceType) -> list[WriteOp]:
    """Write operations declared for ``resource_type``."""
    return [op for (declared, op) in OWN_INVALIDATIONS if declared is resource_type]


def invalidation_plan(resource_type: ResourceType, op: WriteOp, **params: Any) -> list[Step]:
    """Render the ordered invalidation steps of a write.

    Raises:
        KeyError: the write is not declared for this resource type
        ValueError: a required parameter is missing
    """
    steps: list[Step] = []
    for invalidation in OWN_INVALIDATIONS[(resource_type, op)]:
        rendered = invalidation.render(params)
        if rendered is not None:
            steps.append(Step(rendered, invalidation.wildcard))
    for other in CROSS_EDGES[resource_type]:
        steps.append(Step(CacheKeys.everything(other), pattern=True))
    return steps
