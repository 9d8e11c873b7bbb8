"""List invitations use case."""

from pydantic import BaseModel

from gatepass.application.usecase.base import BaseUseCase
from gatepass.application.usecase.invitation.common import InvitationItem
from gatepass.domain.service import InvitationService


class ListInvitationsRequest(BaseModel):
    """Request to list invitations."""

    pass


class ListInvitationsResponse(BaseModel):
    """Response with the active invitations."""

    invitations: list[InvitationItem]
    total: int


class ListInvitationsUseCase(
    BaseUseCase[ListInvitationsRequest, ListInvitationsResponse]
):
    """Use case for listing the active invitations."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        invitations = await self.invitation_service.list_invitations()
        items = [InvitationItem.from_invitation(inv) for inv in invitations]
        return ListInvitationsResponse(invitations=items, total=len(items))
