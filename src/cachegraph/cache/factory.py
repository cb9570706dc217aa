"""Wire every cached repository around one shared Redis client."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from cachegraph.cache.repositories import (
    CachedAssignmentRepository,
    CachedAttachmentRepository,
    CachedCommentRepository,
    CachedDocumentRepository,
    CachedIssueRepository,
    CachedLabelRepository,
    CachedNamespaceRepository,
    CachedNotificationRepository,
    CachedOrganizationRepository,
    CachedPermissionRepository,
    CachedProjectRepository,
    CachedRepository,
    CachedRoleRepository,
    CachedTodoRepository,
    CachedUserRepository,
)
from cachegraph.repository.protocols import (
    AssignmentRepository,
    AttachmentRepository,
    CommentRepository,
    DocumentRepository,
    IssueRepository,
    LabelRepository,
    NamespaceRepository,
    NotificationRepository,
    OrganizationRepository,
    PermissionRepository,
    ProjectRepository,
    RoleRepository,
    TodoRepository,
    UserRepository,
)


@dataclass(frozen=True)
class AuthoritativeRepositories:
    user: UserRepository
    organization: OrganizationRepository
    namespace: NamespaceRepository
    project: ProjectRepository
    document: DocumentRepository
    issue: IssueRepository
    comment: CommentRepository
    attachment: AttachmentRepository
    assignment: AssignmentRepository
    label: LabelRepository
    role: RoleRepository
    permission: PermissionRepository
    todo: TodoRepository
    notification: NotificationRepository


@dataclass(frozen=True)
class CachedRepositories:
    user: CachedUserRepository
    organization: CachedOrganizationRepository
    namespace: CachedNamespaceRepository
    project: CachedProjectRepository
    document: CachedDocumentRepository
    issue: CachedIssueRepository
    comment: CachedCommentRepository
    attachment: CachedAttachmentRepository
    assignment: CachedAssignmentRepository
    label: CachedLabelRepository
    role: CachedRoleRepository
    permission: CachedPermissionRepository
    todo: CachedTodoRepository
    notification: CachedNotificationRepository


_CACHED: dict[str, type[CachedRepository[Any]]] = {
    "user": CachedUserRepository,
    "organization": CachedOrganizationRepository,
    "namespace": CachedNamespaceRepository,
    "project": CachedProjectRepository,
    "document": CachedDocumentRepository,
    "issue": CachedIssueRepository,
    "comment": CachedCommentRepository,
    "attachment": CachedAttachmentRepository,
    "assignment": CachedAssignmentRepository,
    "label": CachedLabelRepository,
    "role": CachedRoleRepository,
    "permission": CachedPermissionRepository,
    "todo": CachedTodoRepository,
    "notification": CachedNotificationRepository,
}


def build_cached_repositories(
    client: Any, repos: AuthoritativeRepositories, **options: Any
) -> CachedRepositories:
    """Build all cached repositories.

    ``options`` (``logger``, ``tracer``, ``ttl``) are passed to every builder.

    Raises:
        InvalidRepositoryError: an option is invalid or a repository is missing
    """
    built = {
        field.name: _CACHED[field.name].build(
            client=client, repo=getattr(repos, field.name), **options
        )
        for field in fields(AuthoritativeRepositories)
    }
    return CachedRepositories(**built)
