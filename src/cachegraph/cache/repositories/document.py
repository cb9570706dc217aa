from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Document
from cachegraph.repository.protocols import DocumentRepository, Patch

_DOCUMENT = TypeAdapter(Document)
_DOCUMENTS = TypeAdapter(list[Document])


class CachedDocumentRepository(CachedRepository[DocumentRepository]):
    """Documents live under a parent (user, namespace or project) and a creator.

    Both scopes are invalidated on every write, and because namespaces,
    projects and users embed document references their keyspaces go too.
    """

    resource_type = ResourceType.DOCUMENT

    async def create(self, belongs_to: ID, document: Document) -> None:
        await self._invalidate(
            WriteOp.CREATE, belongs_to=belongs_to, created_by=document.created_by
        )
        await self.repo.create(belongs_to, document)

    async def get(self, id: ID) -> Document:
        return await self._read_through(self._key(id), _DOCUMENT, lambda: self.repo.get(id))

    async def get_by_creator(self, created_by: ID, offset: int, limit: int) -> list[Document]:
        return await self._read_through(
            self._list_key("GetByCreator", created_by, offset, limit),
            _DOCUMENTS,
            lambda: self.repo.get_by_creator(created_by, offset, limit),
        )

    async def get_all_belongs_to(self, belongs_to: ID, offset: int, limit: int) -> list[Document]:
        return await self._read_through(
            self._list_key("GetAllBelongsTo", belongs_to, offset, limit),
            _DOCUMENTS,
            lambda: self.repo.get_all_belongs_to(belongs_to, offset, limit),
        )

    async def update(self, id: ID, patch: Patch) -> Document:
        await self._evict(id)
        document = await self.repo.update(id, patch)
        await self._updated(id, document, created_by=document.created_by)
        return document

    async def delete(self, id: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id)
        await self.repo.delete(id)
