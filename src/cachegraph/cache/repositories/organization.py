from __future__ import annotations

from pydantic import TypeAdapter

from cachegraph.cache.repositories.base import CachedRepository
from cachegraph.cache.topology import WriteOp
from cachegraph.core.ids import ID, ResourceType
from cachegraph.core.model import Organization, OrganizationMember, User
from cachegraph.repository.protocols import OrganizationRepository, Patch

_ORGANIZATION = TypeAdapter(Organization)
_ORGANIZATIONS = TypeAdapter(list[Organization])
_MEMBERS = TypeAdapter(list[OrganizationMember])
_INVITEES = TypeAdapter(list[User])


class CachedOrganizationRepository(CachedRepository[OrganizationRepository]):
    """Organizations and their member and invitation graphs.

    Membership changes are own-key writes: they evict the organization, its
    member list and every ``GetAll`` page, since those pages are per user.
    """

    resource_type = ResourceType.ORGANIZATION

    async def create(self, owner: ID, organization: Organization) -> None:
        await self._invalidate(WriteOp.CREATE)
        await self.repo.create(owner, organization)

    async def get(self, id: ID) -> Organization:
        return await self._read_through(self._key(id), _ORGANIZATION, lambda: self.repo.get(id))

    async def get_all(self, user_id: ID, offset: int, limit: int) -> list[Organization]:
        return await self._read_through(
            self._list_key("GetAll", user_id, offset, limit),
            _ORGANIZATIONS,
            lambda: self.repo.get_all(user_id, offset, limit),
        )

    async def update(self, id: ID, patch: Patch) -> Organization:
        await self._evict(id)
        organization = await self.repo.update(id, patch)
        await self._updated(id, organization)
        return organization

    async def get_members(self, id: ID) -> list[OrganizationMember]:
        return await self._read_through(
            self._list_key("GetMembers", id), _MEMBERS, lambda: self.repo.get_members(id)
        )

    async def add_member(self, id: ID, member_id: ID) -> None:
        await self._invalidate(WriteOp.ADD_MEMBER, id=id)
        await self.repo.add_member(id, member_id)

    async def remove_member(self, id: ID, member_id: ID) -> None:
        await self._invalidate(WriteOp.REMOVE_MEMBER, id=id)
        await self.repo.remove_member(id, member_id)

    async def get_invitations(self, id: ID) -> list[User]:
        return await self._read_through(
            self._list_key("GetInvitations", id),
            _INVITEES,
            lambda: self.repo.get_invitations(id),
        )

    async def add_invitation(self, id: ID, user_id: ID) -> None:
        await self._invalidate(WriteOp.ADD_INVITATION, id=id)
        await self.repo.add_invitation(id, user_id)

    async def remove_invitation(self, id: ID, user_id: ID) -> None:
        await self._invalidate(WriteOp.REMOVE_INVITATION, id=id)
        await self.repo.remove_invitation(id, user_id)

    async def delete(self, id: ID) -> None:
        await self._invalidate(WriteOp.DELETE, id=id)
        await self.repo.delete(id)
