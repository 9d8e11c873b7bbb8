"""Invitation repository interface."""

from abc import ABC, abstractmethod

from gatepass.domain.model import Invitation
from gatepass.domain.value import InvitationId


class InvitationRepository(ABC):
    """Repository for the Invitation entity.

    Holds the working set of invitations for a session. Implementations live
    in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or replace by ID).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Invitation]:
        """List invitations, oldest first.

        Returns:
            List of invitations
        """
        pass

    @abstractmethod
    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            True if an invitation was removed, False if none matched
        """
        pass
