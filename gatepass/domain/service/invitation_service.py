"""Invitation domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from gatepass.config import InvitationSettings
from gatepass.domain.error import NotFoundError
from gatepass.domain.model import Invitation
from gatepass.domain.repository import InvitationRepository
from gatepass.domain.value import InvitationId

from .base import Service


class InvitationService(Service):
    """Domain service for the session's invitation working set."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        settings: InvitationSettings,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            settings: Invitation settings (fixed title and description)
        """
        self.invitation_repository = invitation_repository
        self.settings = settings

    async def create_invitation(
        self, name: str, guest_count: int, is_frequent: bool = False
    ) -> Invitation:
        """Create and store a new invitation.

        Input must already be validated by the creation form.

        Args:
            name: Guest name
            guest_count: Number of companions
            is_frequent: Frequent visitor flag

        Returns:
            Created invitation
        """
        with logfire.span(
            "invitation_service.create_invitation",
            guest_count=guest_count,
            is_frequent=is_frequent,
        ):
            invitation = Invitation(
                id=InvitationId(uuid4()),
                name=name,
                guest_count=guest_count,
                is_frequent=is_frequent,
                title=self.settings.title,
                description=self.settings.description,
                created_at=datetime.now(),
            )

            saved = await self.invitation_repository.save(invitation)
            logfire.info(
                "Invitation created",
                invitation_id=str(saved.id),
                guest_count=guest_count,
            )
            return saved

    async def get_invitation(self, invitation_id: InvitationId) -> Invitation:
        """Get an invitation by ID.

        Raises:
            NotFoundError: If no invitation has this ID
        """
        invitation = await self.invitation_repository.find_by_id(invitation_id)
        if invitation is None:
            logfire.warn("Invitation not found", invitation_id=str(invitation_id))
            raise NotFoundError("Invitation", str(invitation_id))
        return invitation

    async def list_invitations(self) -> list[Invitation]:
        """List the working set, oldest first."""
        with logfire.span("invitation_service.list_invitations"):
            invitations = await self.invitation_repository.find_all()
            logfire.info("Invitations listed", count=len(invitations))
            return invitations

    async def delete_invitation(self, invitation_id: InvitationId) -> Invitation:
        """Remove an invitation from the working set.

        Returns:
            The removed invitation

        Raises:
            NotFoundError: If no invitation has this ID
        """
        with logfire.span(
            "invitation_service.delete_invitation", invitation_id=str(invitation_id)
        ):
            invitation = await self.get_invitation(invitation_id)
            await self.invitation_repository.delete(invitation_id)
            logfire.info("Invitation deleted", invitation_id=str(invitation_id))
            return invitation
