"""Shared response models for invitation use cases."""

from datetime import datetime

from pydantic import BaseModel

from gatepass.domain.model import Invitation
from gatepass.util.time import format_distance_to_now


class InvitationItem(BaseModel):
    """Invitation item in responses."""

    id: str
    name: str
    guest_count: int
    is_frequent: bool
    title: str
    description: str
    created_at: datetime
    created_ago: str  # e.g. "5 minutes"

    @classmethod
    def from_invitation(cls, invitation: Invitation) -> "InvitationItem":
        return cls(
            id=str(invitation.id),
            name=invitation.name,
            guest_count=invitation.guest_count,
            is_frequent=invitation.is_frequent,
            title=invitation.title,
            description=invitation.description,
            created_at=invitation.created_at,
            created_ago=format_distance_to_now(invitation.created_at),
        )
