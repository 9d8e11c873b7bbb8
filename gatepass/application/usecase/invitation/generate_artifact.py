"""Generate artifact use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from gatepass.application.usecase.base import BaseUseCase
from gatepass.domain.service import (
    ArtifactService,
    InvitationService,
    download_filename,
)
from gatepass.domain.value import ImageFormat, InvitationId


class GenerateArtifactRequest(BaseModel):
    """Request to render an invitation's artifact."""

    invitation_id: UUID
    format: ImageFormat | None = None
    quality: int | None = Field(default=None, ge=1, le=100)


class GenerateArtifactResponse(BaseModel):
    """Rendered artifact ready to be served."""

    invitation_id: str
    filename: str
    content_type: str
    data: bytes
    token_text: str


class GenerateArtifactUseCase(
    BaseUseCase[GenerateArtifactRequest, GenerateArtifactResponse]
):
    """Use case rendering the shareable image of a stored invitation."""

    def __init__(
        self,
        invitation_service: InvitationService,
        artifact_service: ArtifactService,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            artifact_service: Render pipeline
        """
        self.invitation_service = invitation_service
        self.artifact_service = artifact_service

    async def execute(
        self, request: GenerateArtifactRequest
    ) -> GenerateArtifactResponse:
        """Execute generate artifact use case.

        Args:
            request: Generate artifact request

        Returns:
            Encoded artifact with its download file name

        Raises:
            NotFoundError: If the invitation does not exist
            RenderError: If rendering fails
        """
        with logfire.span(
            "generate_artifact", invitation_id=str(request.invitation_id)
        ):
            invitation = await self.invitation_service.get_invitation(
                InvitationId(request.invitation_id)
            )
            artifact = await self.artifact_service.render(
                invitation, image_format=request.format, quality=request.quality
            )
            return GenerateArtifactResponse(
                invitation_id=str(invitation.id),
                filename=download_filename(invitation.name, artifact.format.extension),
                content_type=artifact.content_type,
                data=artifact.data,
                token_text=artifact.token_text,
            )
