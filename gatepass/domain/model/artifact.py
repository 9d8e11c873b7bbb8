"""Artifact model."""

from gatepass.domain.model.common import DomainModel
from gatepass.domain.value import ImageFormat, InvitationId


class Artifact(DomainModel):
    """Composited, encoded invitation image.

    Owned by the session for the currently displayed invitation and replaced,
    never updated, when a new invitation is rendered.
    """

    invitation_id: InvitationId
    format: ImageFormat
    data: bytes
    width: int
    height: int
    captions: tuple[str, ...]  # Text lines drawn into the image, top to bottom
    token_text: str  # Payload embedded in the barcode

    @property
    def content_type(self) -> str:
        return self.format.content_type

    @property
    def size(self) -> int:
        return len(self.data)
