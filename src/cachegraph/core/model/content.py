"""Documents, issues and the comments and attachments hanging off them."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from cachegraph.core.ids import ID
from cachegraph.core.model import StrictModel
from cachegraph.core.model.refs import (
    AttachmentID,
    CommentID,
    DocumentID,
    IssueID,
    LabelID,
    UserID,
)


class Document(StrictModel):
    id: DocumentID
    name: str
    excerpt: str = ""
    file_id: str
    created_by: UserID
    labels: list[LabelID] = Field(default_factory=list)
    comments: list[CommentID] = Field(default_factory=list)
    attachments: list[AttachmentID] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class IssueKind(str, Enum):
    EPIC = "epic"
    STORY = "story"
    TASK = "task"
    BUG = "bug"
    SUBTASK = "subtask"


class IssueStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    BLOCKED = "blocked"
    REVIEW = "review"
    DONE = "done"
    CLOSED = "closed"


class IssuePriority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Issue(StrictModel):
    id: IssueID
    numeric_id: int = Field(ge=0)
    parent: IssueID | None = None
    kind: IssueKind = IssueKind.TASK
    title: str
    description: str = ""
    status: IssueStatus = IssueStatus.OPEN
    priority: IssuePriority = IssuePriority.MEDIUM
    reported_by: UserID
    assignees: list[UserID] = Field(default_factory=list)
    labels: list[LabelID] = Field(default_factory=list)
    comments: list[CommentID] = Field(default_factory=list)
    attachments: list[AttachmentID] = Field(default_factory=list)
    watchers: list[UserID] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class IssueRelationKind(str, Enum):
    SUBTASK_OF = "subtask_of"
    BLOCKED_BY = "blocked_by"
    DEPENDS_ON = "depends_on"
    DUPLICATE_OF = "duplicate_of"
    RELATED_TO = "related_to"


class IssueRelation(StrictModel):
    """Directed edge from an issue to another issue or document."""

    source: ID
    target: ID
    kind: IssueRelationKind


class Comment(StrictModel):
    id: CommentID
    content: str
    created_by: UserID
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Attachment(StrictModel):
    id: AttachmentID
    name: str
    file_id: str
    created_by: UserID
    created_at: datetime | None = None
    updated_at: datetime | None = None
