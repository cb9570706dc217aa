"""Domain models stored in and returned by the repositories.

Only the fields the cache layer needs to compose keys carry real semantics
here (owners, parents, recipients, subjects); the rest mirror what the
authoritative store returns so cached and fresh values compare equal.
"""

from pydantic import BaseModel


class StrictModel(BaseModel):
    """Base model for all domain entities.

    extra="forbid" rejects unknown fields, so a cached record written by an
    incompatible version fails to decode instead of silently losing data.
    """

    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "validate_default": True,
    }


# StrictModel must be defined before the entity modules import it
# ruff: noqa: E402
from cachegraph.core.model.activity import (
    Assignment,
    AssignmentKind,
    Notification,
    Todo,
    TodoPriority,
)
from cachegraph.core.model.content import (
    Attachment,
    Comment,
    Document,
    Issue,
    IssueKind,
    IssuePriority,
    IssueRelation,
    IssueRelationKind,
    IssueStatus,
)
from cachegraph.core.model.identity import (
    Organization,
    OrganizationMember,
    Permission,
    PermissionKind,
    Role,
    SystemRole,
    User,
    UserStatus,
)
from cachegraph.core.model.refs import (
    AttachmentID,
    CommentID,
    DocumentID,
    IssueID,
    LabelID,
    NamespaceID,
    OrganizationID,
    PermissionID,
    ProjectID,
    RoleID,
    UserID,
)
from cachegraph.core.model.workspace import Label, Namespace, Project, ProjectStatus

__all__ = [
    "StrictModel",
    # Identity
    "User",
    "UserStatus",
    "Organization",
    "OrganizationMember",
    "Role",
    "Permission",
    "PermissionKind",
    "SystemRole",
    # Workspace
    "Namespace",
    "Project",
    "ProjectStatus",
    "Label",
    # Content
    "Document",
    "Issue",
    "IssueKind",
    "IssuePriority",
    "IssueStatus",
    "IssueRelation",
    "IssueRelationKind",
    "Comment",
    "Attachment",
    # Activity
    "Assignment",
    "AssignmentKind",
    "Todo",
    "TodoPriority",
    "Notification",
    # Typed references
    "AttachmentID",
    "CommentID",
    "DocumentID",
    "IssueID",
    "LabelID",
    "NamespaceID",
    "OrganizationID",
    "PermissionID",
    "ProjectID",
    "RoleID",
    "UserID",
]
