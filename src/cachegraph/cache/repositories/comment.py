from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Comment
from cachegraph.repository.protocols import CommentRepository

_COMMENT = TypeAdapter(Comment)
_COMMENTS = TypeAdapter(list[Comment])


class CachedCommentRepository(CachedRepository[CommentRepository]):
    resource_type = ResourceType.COMMENT

    async def create(self, belongs_to: ID, comment: Comment) -> None:
        await self._invalidate(WriteOp.CREATE, belongs_to=belongs_to)
        await self.repo.create(belongs_to, comment)

    async def get(self, id: ID) -> Comment:
        return await self._read_through(self._key(id), _COMMENT, lambda: self.repo.get(id))

    async def get_all_belongs_to(self, belongs_to: ID, offset: int, limit: int) -> list[Comment]:
        return await self._read_through(
            self._list_key("GetAllBelongsTo", belongs_to, offset, limit),
            _COMMENTS,
            lambda: self.repo.get_all_belongs_to(belongs_to, offset, limit),
        )

    async def update(self, id: ID, content: str) -> Comment:
        await self._evict(id)
        comment = await self.repo.update(id, content)
        await self._updated(id, comment)
        return comment

    async def delete(self, id: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id)
        await self.repo.delete(id)
