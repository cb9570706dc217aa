"""Cached variants of the authoritative repositories, one per entity."""

from cachegraph.cache.repositories.assignment import CachedAssignmentRepository
from cachegraph.cache.repositories.attachment import CachedAttachmentRepository
from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.repositories.comment import CachedCommentRepository
from cachegraph.cache.repositories.document import CachedDocumentRepository
from cachegraph.cache.repositories.issue import CachedIssueRepository
from cachegraph.cache.repositories.label import CachedLabelRepository
from cachegraph.cache.repositories.namespace import CachedNamespaceRepository
from cachegraph.cache.repositories.notification import CachedNotificationRepository
from cachegraph.cache.repositories.organization import CachedOrganizationRepository
from cachegraph.cache.repositories.permission import CachedPermissionRepository
from cachegraph.cache.repositories.project import CachedProjectRepository
from cachegraph.cache.repositories.role import CachedRoleRepository
from cachegraph.cache.repositories.todo import CachedTodoRepository
from cachegraph.cache.repositories.user import CachedUserRepository

__all__ = [
    "CachedRepository",
    "CachedAssignmentRepository",
    "CachedAttachmentRepository",
    "CachedCommentRepository",
    "CachedDocumentRepository",
    "CachedIssueRepository",
    "CachedLabelRepository",
    "CachedNamespaceRepository",
    "CachedNotificationRepository",
    "CachedOrganizationRepository",
    "CachedPermissionRepository",
    "CachedProjectRepository",
    "CachedRoleRepository",
    "CachedTodoRepository",
    "CachedUserRepository",
]
