from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Role
from cachegraph.repository.protocols import Patch, RoleRepository

_ROLE = TypeAdapter(Role)
_ROLES = TypeAdapter(list[Role])


class CachedRoleRepository(CachedRepository[RoleRepository]):
    """Roles scoped to an organization or project.

    The canonical key is ``role:<id>``; the owning scope is only part of the
    list keys.
    """

    resource_type = ResourceType.ROLE

    async def create(self, created_by: ID, belongs_to: ID, role: Role) -> None:
        await self._invalidate(WriteOp.CREATE, belongs_to=belongs_to)
        await self.repo.create(created_by, belongs_to, role)

    async def get(self, id: ID, belongs_to: ID) -> Role:
        # Roles hold no scope field, so a hit is served for any belongs_to.
        return await self._read_through(
            self._key(id), _ROLE, lambda: self.repo.get(id, belongs_to)
        )

    async def get_all_belongs_to(self, belongs_to: ID, offset: int, limit: int) -> list[Role]:
        return await self._read_through(
            self._list_key("GetAllBelongsTo", belongs_to, offset, limit),
            _ROLES,
            lambda: self.repo.get_all_belongs_to(belongs_to, offset, limit),
        )

    async def update(self, id: ID, belongs_to: ID, patch: Patch) -> Role:
        await self._evict(id)
        role = await self.repo.update(id, belongs_to, patch)
        await self._updated(id, role, belongs_to=belongs_to)
        return role

    async def add_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None:
        await self._invalidate(WriteOp.ADD_MEMBER, id=role_id, belongs_to=belongs_to)
        await self.repo.add_member(role_id, member_id, belongs_to)

    async def remove_member(self, role_id: ID, member_id: ID, belongs_to: ID) -> None:
        await self._invalidate(WriteOp.REMOVE_MEMBER, id=role_id, belongs_to=belongs_to)
        await self.repo.remove_member(role_id, member_id, belongs_to)

    async def delete(self, id: ID, belongs_to: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id, belongs_to=belongs_to)
        await self.repo.delete(id, belongs_to)
