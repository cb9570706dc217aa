"""Namespaces, projects and labels."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from cachegraph.core.ids import ID
from cachegraph.core.model import StrictModel
from cachegraph.core.model.refs import DocumentID, IssueID, LabelID, NamespaceID, ProjectID


class Namespace(StrictModel):
    id: NamespaceID
    name: str
    description: str = ""
    projects: list[ProjectID] = Field(default_factory=list)
    documents: list[DocumentID] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectStatus(str, Enum):
    PLANNED = "planned"
    ACTIVE = "active"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Project(StrictModel):
    id: ProjectID
    key: str = Field(pattern=r"^[A-Z][A-Z0-9]{1,9}$")
    name: str
    description: str = ""
    logo: str | None = None
    status: ProjectStatus = ProjectStatus.ACTIVE
    teams: list[ID] = Field(default_factory=list)
    issues: list[IssueID] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Label(StrictModel):
    id: LabelID
    name: str
    description: str = ""
    color: str = "#ffffff"
    created_at: datetime | None = None
    updated_at: datetime | None = None
