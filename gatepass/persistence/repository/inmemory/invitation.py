"""In-memory invitation repository."""

from typing import Optional

from gatepass.domain.model import Invitation
from gatepass.domain.repository import InvitationRepository
from gatepass.domain.value import InvitationId


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository.

    Invitations live only for the lifetime of the process.
    """

    def __init__(self) -> None:
        self._invitations: list[Invitation] = []

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        for invitation in self._invitations:
            if invitation.id == invitation_id:
                return invitation
        return None

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation, replacing any existing one with the same ID."""
        for i, existing in enumerate(self._invitations):
            if existing.id == invitation.id:
                self._invitations[i] = invitation
                return invitation

        self._invitations.append(invitation)
        return invitation

    async def find_all(self) -> list[Invitation]:
        """List invitations, oldest first."""
        return sorted(self._invitations, key=lambda inv: inv.created_at)

    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation by ID."""
        remaining = [inv for inv in self._invitations if inv.id != invitation_id]
        removed = len(remaining) != len(self._invitations)
        self._invitations = remaining
        return removed
