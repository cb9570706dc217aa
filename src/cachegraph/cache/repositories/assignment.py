from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Assignment
from cachegraph.repository.protocols import AssignmentRepository

_ASSIGNMENT = TypeAdapter(Assignment)
_ASSIGNMENTS = TypeAdapter(list[Assignment])


class CachedAssignmentRepository(CachedRepository[AssignmentRepository]):
    """Assignments have no cross edges; they are listed per user and per resource."""

    resource_type = ResourceType.ASSIGNMENT

    async def create(self, assignment: Assignment) -> None:
        await self._invalidate(
            WriteOp.CREATE, user_id=assignment.user, resource_id=assignment.resource
        )
        await self.repo.create(assignment)

    async def get(self, id: ID) -> Assignment:
        return await self._read_through(self._key(id), _ASSIGNMENT, lambda: self.repo.get(id))

    async def get_by_user(self, user_id: ID, offset: int, limit: int) -> list[Assignment]:
        return await self._read_through(
            self._list_key("GetByUser", user_id, offset, limit),
            _ASSIGNMENTS,
            lambda: self.repo.get_by_user(user_id, offset, limit),
        )

    async def get_by_resource(self, resource_id: ID, offset: int, limit: int) -> list[Assignment]:
        return await self._read_through(
            self._list_key("GetByResource", resource_id, offset, limit),
            _ASSIGNMENTS,
            lambda: self.repo.get_by_resource(resource_id, offset, limit),
        )

    async def delete(self, id: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id)
        await self.repo.delete(id)
