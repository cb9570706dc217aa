from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import User
from cachegraph.repository.protocols import Patch, UserRepository

_USER = TypeAdapter(User)
_USERS = TypeAdapter(list[User])


class CachedUserRepository(CachedRepository[UserRepository]):
    resource_type = ResourceType.USER

    async def create(self, user: User) -> None:
        await self._invalidate(WriteOp.CREATE)
        await self.repo.create(user)

    async def get(self, id: ID) -> User:
        return await self._read_through(self._key(id), _USER, lambda: self.repo.get(id))

    async def get_by_email(self, email: str) -> User:
        return await self._read_through(
            self._list_key("GetByEmail", email), _USER, lambda: self.repo.get_by_email(email)
        )

    async def get_all(self, offset: int, limit: int) -> list[User]:
        return await self._read_through(
            self._list_key("GetAll", offset, limit),
            _USERS,
            lambda: self.repo.get_all(offset, limit),
        )

    async def update(self, id: ID, patch: Patch) -> User:
        await self._evict(id)
        user = await self.repo.update(id, patch)
        await self._updated(id, user)
        return user

    async def delete(self, id: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id)
        await self.repo.delete(id)
