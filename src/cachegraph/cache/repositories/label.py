from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Label
from cachegraph.repository.protocols import LabelRepository, Patch

_LABEL = TypeAdapter(Label)
_LABELS = TypeAdapter(list[Label])


class CachedLabelRepository(CachedRepository[LabelRepository]):
    """Labels are global; attaching one changes the labelled document or issue."""

    resource_type = ResourceType.LABEL

    async def create(self, label: Label) -> None:
        await self._invalidate(WriteOp.CREATE)
        await self.repo.create(label)

    async def get(self, id: ID) -> Label:
        return await self._read_through(self._key(id), _LABEL, lambda: self.repo.get(id))

    async def get_all(self, offset: int, limit: int) -> list[Label]:
        return await self._read_through(
            self._list_key("GetAll", offset, limit),
            _LABELS,
            lambda: self.repo.get_all(offset, limit),
        )

    async def update(self, id: ID, patch: Patch) -> Label:
        await self._evict(id)
        label = await self.repo.update(id, patch)
        await self._updated(id, label)
        return label

    async def attach_to(self, label_id: ID, attach_to_id: ID) -> None:
        await self._invalidate(WriteOp.ATTACH_TO, id=label_id)
        await self.repo.attach_to(label_id, attach_to_id)

    async def detach_from(self, label_id: ID, detach_from_id: ID) -> None:
        await self._invalidate(WriteOp.DETACH_FROM, id=label_id)
        await self.repo.detach_from(label_id, detach_from_id)

    async def delete(self, id: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id)
        await self.repo.delete(id)
