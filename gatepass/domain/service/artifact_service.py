"""Artifact render pipeline domain service."""

import asyncio

import logfire

from gatepass.config import RenderSettings
from gatepass.domain.error import RenderError, RenderTimeoutError
from gatepass.domain.model import Artifact, Invitation
from gatepass.domain.value import ImageFormat

from .artifact_compositor import ArtifactCompositor
from .base import Service
from .token_encoder import TokenEncoder


class ArtifactService(Service):
    """Domain service running encode then compose for one invitation.

    Compositing never starts before encoding completes.
    """

    def __init__(
        self,
        token_encoder: TokenEncoder,
        artifact_compositor: ArtifactCompositor,
        render_settings: RenderSettings,
    ) -> None:
        """Initialize artifact service.

        Args:
            token_encoder: Token encoder
            artifact_compositor: Artifact compositor
            render_settings: Render pipeline settings
        """
        self.token_encoder = token_encoder
        self.artifact_compositor = artifact_compositor
        self.render_settings = render_settings

    async def render(
        self,
        invitation: Invitation,
        image_format: ImageFormat | None = None,
        quality: int | None = None,
    ) -> Artifact:
        """Render the artifact for an invitation.

        Args:
            invitation: Invitation to render
            image_format: Output format override
            quality: Lossy quality override

        Returns:
            Encoded artifact

        Raises:
            RenderError: If encoding, decoding or compositing fails, or the
                configured timeout elapses
        """
        timeout = self.render_settings.timeout_seconds

        with logfire.span(
            "artifact_service.render",
            invitation_id=str(invitation.id),
            timeout=timeout,
        ):
            try:
                if timeout is None:
                    return await self._render(invitation, image_format, quality)
                return await asyncio.wait_for(
                    self._render(invitation, image_format, quality), timeout
                )
            except asyncio.TimeoutError as e:
                logfire.error(
                    "Render timed out",
                    invitation_id=str(invitation.id),
                    timeout=timeout,
                )
                raise RenderTimeoutError(
                    f"Render did not finish within {timeout}s", invitation.id
                ) from e
            except RenderError as e:
                logfire.error(
                    "Render failed",
                    invitation_id=str(invitation.id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise

    async def _render(
        self,
        invitation: Invitation,
        image_format: ImageFormat | None,
        quality: int | None,
    ) -> Artifact:
        token = self.token_encoder.encode(invitation)
        return await self.artifact_compositor.compose(
            invitation, token, image_format=image_format, quality=quality
        )
