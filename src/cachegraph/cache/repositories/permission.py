"""Permission repository: invalidates on writes, never caches reads.

A cached privilege decision could outlive a revocation, so every read goes
to the authoritative repository. Writes still wipe the role and user
keyspaces, which embed permission references.
"""

from __future__ import annotations

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Permission, PermissionKind, SystemRole
from cachegraph.repository.protocols import PermissionRepository


class CachedPermissionRepository(CachedRepository[PermissionRepository]):
    resource_type = ResourceType.PERMISSION

    async def create(self, permission: Permission) -> None:
        await self._invalidate(WriteOp.CREATE)
        await self.repo.create(permission)

    async def get(self, id: ID) -> Permission:
        return await self.repo.get(id)

    async def get_by_subject(self, subject: ID) -> list[Permission]:
        return await self.repo.get_by_subject(subject)

    async def get_by_target(self, target: ID) -> list[Permission]:
        return await self.repo.get_by_target(target)

    async def get_by_subject_and_target(self, subject: ID, target: ID) -> list[Permission]:
        return await self.repo.get_by_subject_and_target(subject, target)

    async def update(self, id: ID, kind: PermissionKind) -> Permission:
        await self._invalidate(WriteOp.UPDATE)
        return await self.repo.update(id, kind)

    async def delete(self, id: ID) -> None:
        await self._invalidate(WriteOp.DELETE)
        await self.repo.delete(id)

    async def has_permission(self, subject: ID, target: ID, *kinds: PermissionKind) -> bool:
        return await self.repo.has_permission(subject, target, *kinds)

    async def has_any_relation(self, subject: ID, target: ID) -> bool:
        return await self.repo.has_any_relation(subject, target)

    async def has_system_role(self, subject: ID, *roles: SystemRole) -> bool:
        return await self.repo.has_system_role(subject, *roles)
