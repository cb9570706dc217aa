"""Users, organizations, roles and permissions."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from cachegraph.core.ids import ID
from cachegraph.core.model import StrictModel
from cachegraph.core.model.refs import (
    OrganizationID,
    PermissionID,
    RoleID,
    UserID,
)


class UserStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    DELETED = "deleted"


class User(StrictModel):
    id: UserID
    username: str
    email: str
    first_name: str = ""
    last_name: str = ""
    picture: str | None = None
    status: UserStatus = UserStatus.ACTIVE
    documents: list[ID] = Field(default_factory=list)
    permissions: list[PermissionID] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Organization(StrictModel):
    id: OrganizationID
    name: str
    email: str
    logo: str | None = None
    website: str | None = None
    status: str = "active"
    members: list[UserID] = Field(default_factory=list)
    namespaces: list[ID] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrganizationMember(StrictModel):
    """A user as seen from the organization it belongs to."""

    id: UserID
    first_name: str = ""
    last_name: str = ""
    email: str
    picture: str | None = None
    status: UserStatus = UserStatus.ACTIVE
    roles: list[str] = Field(default_factory=list)


class Role(StrictModel):
    id: RoleID
    name: str
    description: str = ""
    members: list[UserID] = Field(default_factory=list)
    permissions: list[PermissionID] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PermissionKind(str, Enum):
    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    CREATE = "create"
    ALL = "*"


class SystemRole(str, Enum):
    OWNER = "owner"
    ADMIN = "admin"
    SUPPORT = "support"
    MEMBER = "member"


class Permission(StrictModel):
    """Grants ``kind`` on ``target`` to ``subject``."""

    id: PermissionID
    kind: PermissionKind
    subject: ID
    target: ID
    created_at: datetime | None = None
    updated_at: datetime | None = None
