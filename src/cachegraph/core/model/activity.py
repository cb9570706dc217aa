from __future__ import annotations

from datetime import datetime
from enum import Enum

from cachegraph.core.ids import ID
from cachegraph.core.model import StrictModel
from cachegraph.core.model.refs import AssignmentID, NotificationID, TodoID, UserID


class AssignmentKind(str, Enum):
    ASSIGNEE = "assignee"
    REVIEWER = "reviewer"


class Assignment(StrictModel):
    """Assigns ``user`` to a resource (usually an issue or document)."""

    id: AssignmentID
    kind: AssignmentKind = AssignmentKind.ASSIGNEE
    user: UserID
    resource: ID
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TodoPriority(str, Enum):
    URGENT = "urgent"
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class Todo(StrictModel):
    id: TodoID
    title: str
    description: str = ""
    priority: TodoPriority = TodoPriority.NORMAL
    completed: bool = False
    owned_by: UserID
    created_by: UserID
    due_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Notification(StrictModel):
    id: NotificationID
    title: str
    description: str = ""
    recipient: UserID
    read: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
