from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Todo
from cachegraph.repository.protocols import Patch, TodoRepository

_TODO = TypeAdapter(Todo)
_TODOS = TypeAdapter(list[Todo])


class CachedTodoRepository(CachedRepository[TodoRepository]):
    resource_type = ResourceType.TODO

    async def create(self, todo: Todo) -> None:
        await self._invalidate(WriteOp.CREATE, owner_id=todo.owned_by)
        await self.repo.create(todo)

    async def get(self, id: ID) -> Todo:
        return await self._read_through(self._key(id), _TODO, lambda: self.repo.get(id))

    async def get_by_owner(
        self, owner_id: ID, offset: int, limit: int, completed: bool | None = None
    ) -> list[Todo]:
        # completed=None keeps an empty trailing fragment, distinct from true/false
        return await self._read_through(
            self._list_key("GetByOwner", owner_id, offset, limit, completed),
            _TODOS,
            lambda: self.repo.get_by_owner(owner_id, offset, limit, completed),
        )

    async def update(self, id: ID, patch: Patch) -> Todo:
        await self._evict(id)
        todo = await self.repo.update(id, patch)
        await self._updated(id, todo, owner_id=todo.owned_by)
        return todo

    async def delete(self, id: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id)
        await self.repo.delete(id)
