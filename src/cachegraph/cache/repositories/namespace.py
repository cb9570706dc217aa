from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Namespace
from cachegraph.repository.protocols import NamespaceRepository, Patch

_NAMESPACE = TypeAdapter(Namespace)
_NAMESPACES = TypeAdapter(list[Namespace])


class CachedNamespaceRepository(CachedRepository[NamespaceRepository]):
    resource_type = ResourceType.NAMESPACE

    async def create(self, creator_id: ID, org_id: ID, namespace: Namespace) -> None:
        await self._invalidate(WriteOp.CREATE, org_id=org_id)
        await self.repo.create(creator_id, org_id, namespace)

    async def get(self, id: ID) -> Namespace:
        return await self._read_through(self._key(id), _NAMESPACE, lambda: self.repo.get(id))

    async def get_all(self, org_id: ID, offset: int, limit: int) -> list[Namespace]:
        return await self._read_through(
            self._list_key("GetAll", org_id, offset, limit),
            _NAMESPACES,
            lambda: self.repo.get_all(org_id, offset, limit),
        )

    async def update(self, id: ID, patch: Patch) -> Namespace:
        await self._evict(id)
        namespace = await self.repo.update(id, patch)
        await self._updated(id, namespace)
        return namespace

    async def delete(self, id: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id)
        await self.repo.delete(id)
