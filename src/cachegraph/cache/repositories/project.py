from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Project
from cachegraph.repository.protocols import Patch, ProjectRepository

_PROJECT = TypeAdapter(Project)
_PROJECTS = TypeAdapter(list[Project])


class CachedProjectRepository(CachedRepository[ProjectRepository]):
    resource_type = ResourceType.PROJECT

    async def create(self, namespace_id: ID, project: Project) -> None:
        await self._invalidate(WriteOp.CREATE, namespace_id=namespace_id)
        await self.repo.create(namespace_id, project)

    async def get(self, id: ID) -> Project:
        return await self._read_through(self._key(id), _PROJECT, lambda: self.repo.get(id))

    async def get_by_key(self, key: str) -> Project:
        return await self._read_through(
            self._list_key("GetByKey", key), _PROJECT, lambda: self.repo.get_by_key(key)
        )

    async def get_all(self, namespace_id: ID, offset: int, limit: int) -> list[Project]:
        return await self._read_through(
            self._list_key("GetAll", namespace_id, offset, limit),
            _PROJECTS,
            lambda: self.repo.get_all(namespace_id, offset, limit),
        )

    async def update(self, id: ID, patch: Patch) -> Project:
        # The key itself may change, so every GetByKey record goes.
        await self._evict(id)
        project = await self.repo.update(id, patch)
        await self._updated(id, project)
        return project

    async def delete(self, id: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id)
        await self.repo.delete(id)
