from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Attachment
from cachegraph.repository.protocols import AttachmentRepository

_ATTACHMENT = TypeAdapter(Attachment)
_ATTACHMENTS = TypeAdapter(list[Attachment])


class CachedAttachmentRepository(CachedRepository[AttachmentRepository]):
    resource_type = ResourceType.ATTACHMENT

    async def create(self, belongs_to: ID, attachment: Attachment) -> None:
        await self._invalidate(WriteOp.CREATE, belongs_to=belongs_to)
        await self.repo.create(belongs_to, attachment)

    async def get(self, id: ID) -> Attachment:
        return await self._read_through(self._key(id), _ATTACHMENT, lambda: self.repo.get(id))

    async def get_all_belongs_to(
        self, belongs_to: ID, offset: int, limit: int
    ) -> list[Attachment]:
        return await self._read_through(
            self._list_key("GetAllBelongsTo", belongs_to, offset, limit),
            _ATTACHMENTS,
            lambda: self.repo.get_all_belongs_to(belongs_to, offset, limit),
        )

    async def update(self, id: ID, name: str) -> Attachment:
        await self._evict(id)
        attachment = await self.repo.update(id, name)
        await self._updated(id, attachment)
        return attachment

    async def delete(self, id: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id)
        await self.repo.delete(id)
