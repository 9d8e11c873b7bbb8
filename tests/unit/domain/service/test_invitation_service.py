"""Unit tests for InvitationService."""

from uuid import uuid4

import pytest

from gatepass.domain.error import NotFoundError
from gatepass.domain.repository import InvitationRepository
from gatepass.domain.service import InvitationService
from gatepass.domain.value import InvitationId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateInvitation:
    """Tests for create_invitation method."""

    @pytest.mark.asyncio
    async def test_create_invitation_success(self, unit_env):
        """Created invitations carry the community title and are stored."""
        # Arrange
        invitation_service = await unit_env.get(InvitationService)
        invitation_repo = await unit_env.get(InvitationRepository)

        # Act
        result = await invitation_service.create_invitation("Ana Torres", 3)

        # Assert
        assert result.name == "Ana Torres"
        assert result.guest_count == 3
        assert result.is_frequent is False
        assert result.title == "Jardines de La Perla"
        assert result.description == "código de invitación"

        saved = await invitation_repo.find_by_id(result.id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_each_invitation_gets_a_new_id(self, unit_env):
        """Identical input still yields distinct invitations."""
        invitation_service = await unit_env.get(InvitationService)

        first = await invitation_service.create_invitation("Ana Torres", 3)
        second = await invitation_service.create_invitation("Ana Torres", 3)

        assert first.id != second.id
        assert len(await invitation_service.list_invitations()) == 2


class TestGetInvitation:
    """Tests for get_invitation method."""

    @pytest.mark.asyncio
    async def test_get_missing_invitation_raises(self, unit_env):
        """Unknown IDs raise NotFoundError."""
        invitation_service = await unit_env.get(InvitationService)

        with pytest.raises(NotFoundError) as exc_info:
            await invitation_service.get_invitation(InvitationId(uuid4()))

        assert exc_info.value.resource == "Invitation"


class TestDeleteInvitation:
    """Tests for delete_invitation method."""

    @pytest.mark.asyncio
    async def test_delete_removes_from_working_set(self, unit_env):
        """Deleted invitations disappear from the list."""
        invitation_service = await unit_env.get(InvitationService)
        kept = await invitation_service.create_invitation("Ana Torres", 3)
        removed = await invitation_service.create_invitation("Luis Gómez", 0)

        result = await invitation_service.delete_invitation(removed.id)

        assert result == removed
        assert await invitation_service.list_invitations() == [kept]

    @pytest.mark.asyncio
    async def test_delete_missing_invitation_raises(self, unit_env):
        """Deleting twice raises NotFoundError the second time."""
        invitation_service = await unit_env.get(InvitationService)
        invitation = await invitation_service.create_invitation("Ana Torres", 3)
        await invitation_service.delete_invitation(invitation.id)

        with pytest.raises(NotFoundError):
            await invitation_service.delete_invitation(invitation.id)
