"""Test doubles shared by the unit tests."""

from __future__ import annotations

import fnmatch
from collections.abc import AsyncIterator
from dataclasses import dataclass

from cachegraph.core.ids import ID, ResourceType
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
    Todo,
    User,
)


class FakeRedis:
    """In-memory async Redis covering the commands the cache layer issues.

    ``fail(command, exc, key=...)`` makes a command raise ``exc`` for keys
    matching the glob ``key`` (every key by default). ``calls`` records
    ``(command, key)`` in execution order.
    """

    def __init__(self) -> None:
        self.store: dict[str, bytes] = {}
        self.ttls: dict[str, int] = {}
        self.calls: list[tuple[str, str]] = []
        self._failures: list[tuple[str, str, BaseException]] = []

    def fail(self, command: str, exc: BaseException, key: str = "*") -> None:
        self._failures.append((command, key, exc))

    def _record(self, command: str, key: str) -> None:
        self.calls.append((command, key))
        for failing, pattern, exc in self._failures:
            if failing == command and fnmatch.fnmatchcase(key, pattern):
                raise exc

    def seed(self, *keys: str, value: bytes = b"{}") -> None:
        for key in keys:
            self.store[key] = value

    def keys_matching(self, pattern: str) -> list[str]:
        return [key for key in self.store if fnmatch.fnmatchcase(key, pattern)]

    async def setex(self, key: str, ttl: int, value: bytes) -> bool:
        self._record("setex", key)
        self.store[key] = value
        self.ttls[key] = ttl
        return True

    async def get(self, key: str) -> bytes | None:
        self._record("get", key)
        return self.store.get(key)

    async def delete(self, *keys: str) -> int:
        deleted = 0
        for key in keys:
            self._record("delete", key)
            if self.store.pop(key, None) is not None:
                self.ttls.pop(key, None)
                deleted += 1
        return deleted

    async def scan_iter(self, match: str = "*", count: int | None = None) -> AsyncIterator[bytes]:
        self._record("scan", match)
        for key in list(self.store):
            if fnmatch.fnmatchcase(key, match):
                yield key.encode("utf-8")

    async def ping(self) -> bool:
        self._record("ping", "")
        return True

    async def aclose(self) -> None:
        pass


@dataclass
class Samples:
    user: User
    other_user: User
    organization: Organization
    member: OrganizationMember
    namespace: Namespace
    project: Project
    document: Document
    issue: Issue
    child_issue: Issue
    relation: IssueRelation
    comment: Comment
    attachment: Attachment
    assignment: Assignment
    label: Label
    role: Role
    permission: Permission
    todo: Todo
    notification: Notification


def make_samples() -> Samples:
    u1 = ID(ResourceType.USER, "u1")
    u2 = ID(ResourceType.USER, "u2")
    i1 = ID(ResourceType.ISSUE, "i1")
    i2 = ID(ResourceType.ISSUE, "i2")
    d1 = ID(ResourceType.DOCUMENT, "d1")
    return Samples(
        user=User(id=u1, username="ada", email="a@x", first_name="Ada"),
        other_user=User(id=u2, username="bob", email="b@x"),
        organization=Organization(
            id=ID(ResourceType.ORGANIZATION, "o1"), name="Acme", email="org@x", members=[u1]
        ),
        member=OrganizationMember(id=u1, email="a@x", roles=["owner"]),
        namespace=Namespace(id=ID(ResourceType.NAMESPACE, "n1"), name="core"),
        project=Project(id=ID(ResourceType.PROJECT, "p1"), key="CORE", name="Core"),
        document=Document(id=d1, name="Design", file_id="f1", created_by=u1),
        issue=Issue(id=i1, numeric_id=1, title="Crash on save", reported_by=u1),
        child_issue=Issue(id=i2, numeric_id=2, parent=i1, title="Repro", reported_by=u1),
        relation=IssueRelation(source=i1, target=i2, kind=IssueRelationKind.BLOCKED_BY),
        comment=Comment(id=ID(ResourceType.COMMENT, "c1"), content="LGTM", created_by=u1),
        attachment=Attachment(
            id=ID(ResourceType.ATTACHMENT, "a1"), name="trace.log", file_id="f2", created_by=u1
        ),
        assignment=Assignment(id=ID(ResourceType.ASSIGNMENT, "as1"), user=u1, resource=i1),
        label=Label(id=ID(ResourceType.LABEL, "l1"), name="bug"),
        role=Role(id=ID(ResourceType.ROLE, "r1"), name="maintainer", members=[u1]),
        permission=Permission(
            id=ID(ResourceType.PERMISSION, "pm1"), kind=PermissionKind.READ, subject=u1, target=d1
        ),
        todo=Todo(id=ID(ResourceType.TODO, "t1"), title="Review", owned_by=u1, created_by=u1),
        notification=Notification(
            id=ID(ResourceType.NOTIFICATION, "nt1"), title="Mentioned", recipient=u1
        ),
    )
