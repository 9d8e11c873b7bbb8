"""Delete invitation use case."""

from uuid import UUID

from pydantic import BaseModel

from gatepass.application.usecase.base import BaseUseCase
from gatepass.application.usecase.invitation.common import InvitationItem
from gatepass.domain.service import InvitationService
from gatepass.domain.value import InvitationId


class DeleteInvitationRequest(BaseModel):
    """Request to delete an invitation."""

    invitation_id: UUID


class DeleteInvitationResponse(BaseModel):
    """Response with the deleted invitation."""

    invitation: InvitationItem


class DeleteInvitationUseCase(
    BaseUseCase[DeleteInvitationRequest, DeleteInvitationResponse]
):
    """Use case for removing an invitation from the working set."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: DeleteInvitationRequest
    ) -> DeleteInvitationResponse:
        """Execute delete invitation use case.

        Raises:
            NotFoundError: If the invitation does not exist
        """
        invitation = await self.invitation_service.delete_invitation(
            InvitationId(request.invitation_id)
        )
        return DeleteInvitationResponse(
            invitation=InvitationItem.from_invitation(invitation)
        )
