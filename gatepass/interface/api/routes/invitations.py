"""Invitation routes."""

from urllib.parse import quote
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Response, status

from gatepass.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    DeleteInvitationRequest,
    DeleteInvitationUseCase,
    GenerateArtifactRequest,
    GenerateArtifactUseCase,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from gatepass.domain.error import NotFoundError, RenderError
from gatepass.domain.value import ImageFormat

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


@router.post(
    "", response_model=CreateInvitationResponse, status_code=status.HTTP_201_CREATED
)
async def create_invitation(
    request: CreateInvitationRequest,
    create_invitation_use_case: FromDishka[CreateInvitationUseCase],
) -> CreateInvitationResponse:
    """Create an invitation.

    Invalid names or companion counts are rejected with 422 before any
    record is created.
    """
    return await create_invitation_use_case.execute(request)


@router.get("", response_model=ListInvitationsResponse)
async def list_invitations(
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
) -> ListInvitationsResponse:
    """List the invitation working set, oldest first."""
    return await list_invitations_use_case.execute(ListInvitationsRequest())


@router.delete("/{invitation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invitation(
    invitation_id: UUID,
    delete_invitation_use_case: FromDishka[DeleteInvitationUseCase],
) -> Response:
    """Remove an invitation from the working set.

    Raises:
        HTTPException: 404 if the invitation does not exist
    """
    try:
        await delete_invitation_use_case.execute(
            DeleteInvitationRequest(invitation_id=invitation_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{invitation_id}/artifact",
    response_class=Response,
    responses={200: {"content": {f.content_type: {} for f in ImageFormat}}},
)
async def get_artifact(
    invitation_id: UUID,
    generate_artifact_use_case: FromDishka[GenerateArtifactUseCase],
    format: ImageFormat | None = Query(default=None),
    quality: int | None = Query(default=None, ge=1, le=100),
) -> Response:
    """Render and download the shareable image of an invitation.

    Raises:
        HTTPException: 404 if the invitation does not exist, 500 if the
            render fails
    """
    try:
        result = await generate_artifact_use_case.execute(
            GenerateArtifactRequest(
                invitation_id=invitation_id, format=format, quality=quality
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except RenderError as e:
        logfire.error(
            "Artifact render failed",
            invitation_id=str(invitation_id),
            error=str(e),
            error_type=type(e).__name__,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to render invitation",
        )

    return Response(
        content=result.data,
        media_type=result.content_type,
        headers={
            "Content-Disposition": (
                f"attachment; filename*=UTF-8''{quote(result.filename)}"
            )
        },
    )
