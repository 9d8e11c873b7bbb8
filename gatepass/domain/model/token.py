"""Token model.

The token is the barcode-encodable form of an invitation's identity fields.
It is derived and ephemeral: regenerated whenever the invitation changes.
"""

from pydantic import ConfigDict, Field

from gatepass.domain.model.common import DomainModel
from gatepass.domain.value import ErrorCorrection
from gatepass.domain.value.common import ValueObject


class TokenPayload(ValueObject):
    """Closed record serialized into the QR code.

    The guard-side scanner reads the same JSON keys: ``id``, ``name`` and
    ``guests``.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
    )

    id: str
    name: str
    guest_count: int = Field(alias="guests")

    def to_text(self) -> str:
        """Serialize to the compact JSON text stored in the QR code."""
        return self.model_dump_json(by_alias=True)


class Token(DomainModel):
    """Encoded token with its two PNG renderings."""

    payload: TokenPayload
    text: str
    error_correction: ErrorCorrection

    # On-screen rendering
    canvas_image: bytes
    canvas_size: int

    # Larger rendering embedded into the shareable artifact
    share_image: bytes
    share_size: int
