from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Issue, IssueRelation, IssueRelationKind, User
from cachegraph.repository.protocols import IssueRepository, Patch

_ISSUE = TypeAdapter(Issue)
_ISSUES = TypeAdapter(list[Issue])
_WATCHERS = TypeAdapter(list[User])
_RELATIONS = TypeAdapter(list[IssueRelation])


def _relation_sides(source: ID, target: ID) -> tuple[ID, ID | None]:
    """Split a relation into the issue that owns it and the other issue, if any."""
    if source.type is ResourceType.ISSUE:
        other = target if target.type is ResourceType.ISSUE else None
        return source, other
    return target, None


class CachedIssueRepository(CachedRepository[IssueRepository]):
    """Issues, their watchers and their relations.

    Issue lists are scoped by project and by parent issue. Writes that touch
    watchers or relations evict the issue record together with both lists,
    since listed issues embed their watchers.
    """

    resource_type = ResourceType.ISSUE

    async def create(self, project_id: ID, issue: Issue) -> None:
        await self._invalidate(WriteOp.CREATE, project_id=project_id, parent=issue.parent)
        await self.repo.create(project_id, issue)

    async def get(self, id: ID) -> Issue:
        return await self._read_through(self._key(id), _ISSUE, lambda: self.repo.get(id))

    async def get_all_for_project(self, project_id: ID, offset: int, limit: int) -> list[Issue]:
        return await self._read_through(
            self._list_key("GetAllForProject", project_id, offset, limit),
            _ISSUES,
            lambda: self.repo.get_all_for_project(project_id, offset, limit),
        )

    async def get_all_for_issue(self, issue_id: ID, offset: int, limit: int) -> list[Issue]:
        return await self._read_through(
            self._list_key("GetAllForIssue", issue_id, offset, limit),
            _ISSUES,
            lambda: self.repo.get_all_for_issue(issue_id, offset, limit),
        )

    async def add_watcher(self, issue_id: ID, user_id: ID) -> None:
        await self._invalidate(WriteOp.ADD_WATCHER, id=issue_id)
        await self.repo.add_watcher(issue_id, user_id)

    async def get_watchers(self, issue_id: ID) -> list[User]:
        return await self._read_through(
            self._list_key("GetWatchers", issue_id),
            _WATCHERS,
            lambda: self.repo.get_watchers(issue_id),
        )

    async def remove_watcher(self, issue_id: ID, user_id: ID) -> None:
        await self._invalidate(WriteOp.REMOVE_WATCHER, id=issue_id)
        await self.repo.remove_watcher(issue_id, user_id)

    async def add_relation(self, source: ID, target: ID, kind: IssueRelationKind) -> None:
        issue_id, other_id = _relation_sides(source, target)
        await self._invalidate(WriteOp.ADD_RELATION, id=issue_id, other_id=other_id)
        await self.repo.add_relation(source, target, kind)

    async def get_relations(self, issue_id: ID) -> list[IssueRelation]:
        return await self._read_through(
            self._list_key("GetRelations", issue_id),
            _RELATIONS,
            lambda: self.repo.get_relations(issue_id),
        )

    async def remove_relation(self, source: ID, target: ID, kind: IssueRelationKind) -> None:
        issue_id, other_id = _relation_sides(source, target)
        await self._invalidate(WriteOp.REMOVE_RELATION, id=issue_id, other_id=other_id)
        await self.repo.remove_relation(source, target, kind)

    async def update(self, id: ID, patch: Patch) -> Issue:
        await self._evict(id)
        issue = await self.repo.update(id, patch)
        await self._updated(id, issue)
        return issue

    async def delete(self, id: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id)
        await self.repo.delete(id)
