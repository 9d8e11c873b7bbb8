"""Create invitation use case."""

import logfire
from pydantic import BaseModel, Field, field_validator

from gatepass.application.usecase.base import BaseUseCase
from gatepass.application.usecase.invitation.common import InvitationItem
from gatepass.domain.service import InvitationService


class CreateInvitationRequest(BaseModel):
    """Request to create an invitation.

    This is the validation boundary: nothing past it re-checks the name
    length or the companion count.
    """

    name: str = Field(min_length=2, max_length=50)
    guest_count: int = Field(default=0, ge=0, le=10)
    is_frequent: bool = False

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        """Trim surrounding whitespace before the length check."""
        return v.strip() if isinstance(v, str) else v


class CreateInvitationResponse(BaseModel):
    """Response after creating an invitation."""

    invitation: InvitationItem


class CreateInvitationUseCase(
    BaseUseCase[CreateInvitationRequest, CreateInvitationResponse]
):
    """Use case for creating an invitation."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(
        self, request: CreateInvitationRequest
    ) -> CreateInvitationResponse:
        """Execute create invitation use case.

        Args:
            request: Validated create invitation request

        Returns:
            Response with the created invitation
        """
        with logfire.span("create_invitation", guest_count=request.guest_count):
            invitation = await self.invitation_service.create_invitation(
                name=request.name,
                guest_count=request.guest_count,
                is_frequent=request.is_frequent,
            )
            return CreateInvitationResponse(
                invitation=InvitationItem.from_invitation(invitation)
            )
