"""Annotated identifier types that pin the resource type of a reference."""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

from pydantic import AfterValidator

from cachegraph.core.ids import ID, ResourceType


def _expect(resource_type: ResourceType) -> Callable[[ID], ID]:
    def check(value: ID) -> ID:
        if value.type is not resource_type:
            raise ValueError(f"expected {resource_type.value} identifier, got {value}")
        return value

    return check


UserID = Annotated[ID, AfterValidator(_expect(ResourceType.USER))]
OrganizationID = Annotated[ID, AfterValidator(_expect(ResourceType.ORGANIZATION))]
NamespaceID = Annotated[ID, AfterValidator(_expect(ResourceType.NAMESPACE))]
ProjectID = Annotated[ID, AfterValidator(_expect(ResourceType.PROJECT))]
DocumentID = Annotated[ID, AfterValidator(_expect(ResourceType.DOCUMENT))]
IssueID = Annotated[ID, AfterValidator(_expect(ResourceType.ISSUE))]
CommentID = Annotated[ID, AfterValidator(_expect(ResourceType.COMMENT))]
AttachmentID = Annotated[ID, AfterValidator(_expect(ResourceType.ATTACHMENT))]
AssignmentID = Annotated[ID, AfterValidator(_expect(ResourceType.ASSIGNMENT))]
LabelID = Annotated[ID, AfterValidator(_expect(ResourceType.LABEL))]
RoleID = Annotated[ID, AfterValidator(_expect(ResourceType.ROLE))]
PermissionID = Annotated[ID, AfterValidator(_expect(ResourceType.PERMISSION))]
TodoID = Annotated[ID, AfterValidator(_expect(ResourceType.TODO))]
NotificationID = Annotated[ID, AfterValidator(_expect(ResourceType.NOTIFICATION))]
