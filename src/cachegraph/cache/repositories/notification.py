from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Notification
from cachegraph.repository.protocols import NotificationRepository

_NOTIFICATION = TypeAdapter(Notification)
_NOTIFICATIONS = TypeAdapter(list[Notification])


class CachedNotificationRepository(CachedRepository[NotificationRepository]):
    resource_type = ResourceType.NOTIFICATION

    async def create(self, notification: Notification) -> None:
        await self._invalidate(WriteOp.CREATE, recipient=notification.recipient)
        await self.repo.create(notification)

    async def get(self, id: ID, recipient: ID) -> Notification:
        notification = await self._read_through(
            self._key(id), _NOTIFICATION, lambda: self.repo.get(id, recipient)
        )
        # The key carries no recipient; a hit for someone else is not served.
        if notification.recipient != recipient:
            return await self.repo.get(id, recipient)
        return notification

    async def get_all_by_recipient(
        self, recipient: ID, offset: int, limit: int
    ) -> list[Notification]:
        return await self._read_through(
            self._list_key("GetByRecipient", recipient, offset, limit),
            _NOTIFICATIONS,
            lambda: self.repo.get_all_by_recipient(recipient, offset, limit),
        )

    async def update(self, id: ID, recipient: ID, read: bool) -> Notification:
        await self._evict(id)
        notification = await self.repo.update(id, recipient, read)
        await self._updated(id, notification, recipient=recipient)
        return notification

    async def delete(self, id: ID, recipient: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id, recipient=recipient)
        await self.repo.delete(id, recipient)
