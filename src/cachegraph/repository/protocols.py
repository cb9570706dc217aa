"""Contracts of the authoritative repositories.

Each entity has its own protocol; cached repositories wrap any object that
satisfies it. Implementations raise ``NotFoundError`` for unknown entities
and a ``WriteError`` subclass for rejected writes.

Patches are plain mappings of field name to new value.
"""

from __future__ import annotations

from typing import Any, Protocol

from cachegraph.core.ids import ID
from cachegraph.core.model import (
    Assignment,
    Attachment,
    Comment,
    Document,
    Issue,
    IssueRelation,
    IssueRelationKind,
    Label,
    Namespace,
    Notification,
    Organization,
    OrganizationMember,
    Permission,
    PermissionKind,
    Project,
    Role,
    SystemRole,
    Todo,
    User,
)

Patch = dict[str, Any]


class UserRepository(Protocol):
    async def create(self, user: User) -> None: ...

    async def get(self, id: ID) -> User: ...

    async def get_by_email(self, email: str) -> User: ...

    async def get_all(self, offset: int, limit: int) -> list[User]: ...

    async def update(self, id: ID, patch: Patch) -> User: ...

    async def delete(self, id: ID) -> None: ...


class OrganizationRepository(Protocol):
    async def create(self, owner: ID, organization: Organization) -> None:
        """Create ``organization`` with ``owner`` as its first member."""
        ...

    async def get(self, id: ID) -> Organization: ...

    async def get_all(self, user_id: ID, offset: int, limit: int) -> list[Organization]:
        """Return the organizations ``user_id`` is a member of."""
        ...

    async def update(self, id: ID, patch: Patch) -> Organization: ...

    async def get_members(self, id: ID) -> list[OrganizationMember]: ...

    async def add_member(self, id: ID, member_id: ID) -> None: ...

    async def remove_member(self, id: ID, member_id: ID) -> None: ...

    async def add_invitation(self, id: ID, user_id: ID) -> None: ...

    async def remove_invitation(self, id: ID, user_id: ID) -> None: ...

    async def get_invitations(self, id: ID) -> list[User]: ...

    async def delete(self, id: ID) -> None: ...


class NamespaceRepository(Protocol):
    async def create(self, creator_id: ID, org_id: ID, namespace: Namespace) -> None: ...

    async def get(self, id: ID) -> Namespace: ...

    async def get_all(self, org_id: ID, offset: int, limit: int) -> list[Namespace]: ...

    async def update(self, id: ID, patch: Patch) -> Namespace: ...

    async def delete(self, id: ID) -> None: ...


class ProjectRepository(Protocol):
    async def create(self, namespace_id: ID, project: Project) -> None: ...

    async def get(self, id: ID) -> Project: ...

    async def get_by_key(self, key: str) -> Project: ...

    async def get_all(self, namespace_id: ID, offset: int, limit: int) -> list[Project]: ...

    async def update(self, id: ID, patch: Patch) -> Project: ...

    async def delete(self, id: ID) -> None: ...


class DocumentRepository(Protocol):
    async def create(self, belongs_to: ID, document: Document) -> None:
        """Create ``document`` under a user, namespace or project."""
        ...

    async def get(self, id: ID) -> Document: ...

    async def get_by_creator(self, created_by: ID, offset: int, limit: int) -> list[Document]: ...

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Document]: ...

    async def update(self, id: ID, patch: Patch) -> Document: ...

    async def delete(self, id: ID) -> None: ...


class IssueRepository(Protocol):
    async def create(self, project_id: ID, issue: Issue) -> None: ...

    async def get(self, id: ID) -> Issue: ...

    async def get_all_for_project(self, project_id: ID, offset: int, limit: int) -> list[Issue]: ...

    async def get_all_for_issue(self, issue_id: ID, offset: int, limit: int) -> list[Issue]:
        """Return the direct children of ``issue_id``."""
        ...

    async def add_watcher(self, issue_id: ID, user_id: ID) -> None: ...

    async def get_watchers(self, issue_id: ID) -> list[User]: ...

    async def remove_watcher(self, issue_id: ID, user_id: ID) -> None: ...

    async def add_relation(self, source: ID, target: ID, kind: IssueRelationKind) -> None: ...

    async def get_relations(self, issue_id: ID) -> list[IssueRelation]: ...

    async def remove_relation(self, source: ID, target: ID, kind: IssueRelationKind) -> None: ...

    async def update(self, id: ID, patch: Patch) -> Issue: ...

    async def delete(self, id: ID) -> None: ...


class CommentRepository(Protocol):
    async def create(self, belongs_to: ID, comment: Comment) -> None: ...

    async def get(self, id: ID) -> Comment: ...

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Comment]: ...

    async def update(self, id: ID, content: str) -> Comment: ...

    async def delete(self, id: ID) -> None: ...


class AttachmentRepository(Protocol):
    async def create(self, belongs_to: ID, attachment: Attachment) -> None: ...

    async def get(self, id: ID) -> Attachment: ...

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Attachment]: ...

    async def update(self, id: ID, name: str) -> Attachment: ...

    async def delete(self, id: ID) -> None: ...


class AssignmentRepository(Protocol):
    async def create(self, assignment: Assignment) -> None: ...

    async def get(self, id: ID) -> Assignment: ...

    async def get_by_user(self, user_id: ID, offset: int, limit: int) -> list[Assignment]: ...

    async def get_by_resource(
        self, resource_id: ID, offset: int, limit: int
    ) -> list[Assignment]: ...

    async def delete(self, id: ID) -> None: ...


class LabelRepository(Protocol):
    async def create(self, label: Label) -> None: ...

    async def get(self, id: ID) -> Label: ...

    async def get_all(self, offset: int, limit: int) -> list[Label]: ...

    async def update(self, id: ID, patch: Patch) -> Label: ...

    async def attach_to(self, label_id: ID, attach_to_id: ID) -> None:
        """Attach the label to a document or issue."""
        ...

    async def detach_from(self, label_id: ID, detach_from_id: ID) -> None: ...

    async def delete(self, id: ID) -> None: ...


class RoleRepository(Protocol):
    """Roles are scoped to the organization or project they belong to."""

    async def create(self, created_by: ID, belongs_to: ID, role: Role) -> None: ...

    async def get(self, id: ID, belongs_to: ID) -> Role: ...

    async def get_all_belongs_to(self, belongs_to: ID, offset: int, limit: int) -> list[Role]: ...

    async def update(self, id: ID, belongs_to: ID, patch: Patch) -> Role: ...

    async def add_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None: ...

    async def remove_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None: ...

    async def delete(self, id: ID, belongs_to: ID) -> None: ...


class PermissionRepository(Protocol):
    async def create(self, permission: Permission) -> None: ...

    async def get(self, id: ID) -> Permission: ...

    async def get_by_subject(self, subject: ID) -> list[Permission]: ...

    async def get_by_target(self, target: ID) -> list[Permission]: ...

    async def get_by_subject_and_target(self, subject: ID, target: ID) -> list[Permission]: ...

    async def update(self, id: ID, kind: PermissionKind) -> Permission: ...

    async def delete(self, id: ID) -> None: ...

    async def has_permission(self, subject: ID, target: ID, *kinds: PermissionKind) -> bool:
        """Report whether ``subject`` holds any of ``kinds`` on ``target``."""
        ...

    async def has_any_relation(self, subject: ID, target: ID) -> bool: ...

    async def has_system_role(self, subject: ID, *roles: SystemRole) -> bool: ...


class TodoRepository(Protocol):
    async def create(self, todo: Todo) -> None: ...

    async def get(self, id: ID) -> Todo: ...

    async def get_by_owner(
        self, owner_id: ID, offset: int, limit: int, completed: bool | None = None
    ) -> list[Todo]:
        """List todos of ``owner_id``; ``completed=None`` returns both states."""
        ...

    async def update(self, id: ID, patch: Patch) -> Todo: ...

    async def delete(self, id: ID) -> None: ...


class NotificationRepository(Protocol):
    """Notifications are always addressed through their recipient."""

    async def create(self, notification: Notification) -> None: ...

    async def get(self, id: ID, recipient: ID) -> Notification: ...

    async def get_all_by_recipient(
        self, recipient: ID, offset: int, limit: int
    ) -> list[Notification]: ...

    async def update(self, id: ID, recipient: ID, read: bool) -> Notification: ...

    async def delete(self, id: ID, recipient: ID) -> None: ...
