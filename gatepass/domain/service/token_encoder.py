"""Token encoder domain service."""

import io

import logfire
import pydantic
import qrcode
from PIL import Image
from qrcode.exceptions import DataOverflowError
from qrcode.image.pil import PilImage

from gatepass.config import TokenSettings
from gatepass.domain.error import EncodingError, TokenDecodeError
from gatepass.domain.model import Invitation, Token, TokenPayload
from gatepass.domain.value import ErrorCorrection

from .base import Service

_QR_ERROR_CORRECTION = {
    ErrorCorrection.L: qrcode.constants.ERROR_CORRECT_L,
    ErrorCorrection.M: qrcode.constants.ERROR_CORRECT_M,
    ErrorCorrection.Q: qrcode.constants.ERROR_CORRECT_Q,
    ErrorCorrection.H: qrcode.constants.ERROR_CORRECT_H,
}


class TokenEncoder(Service):
    """Domain service that turns invitations into QR tokens."""

    def __init__(self, settings: TokenSettings) -> None:
        """Initialize token encoder.

        Args:
            settings: Token rendering settings
        """
        self.settings = settings

    @staticmethod
    def serialize(invitation: Invitation) -> TokenPayload:
        """Build the closed payload record for an invitation."""
        return TokenPayload(
            id=str(invitation.id),
            name=invitation.name,
            guest_count=invitation.guest_count,
        )

    @staticmethod
    def decode(text: str) -> TokenPayload:
        """Deserialize scanned QR text back into a payload.

        Args:
            text: Raw text read from the QR code

        Returns:
            Decoded payload

        Raises:
            TokenDecodeError: If the text is not a token payload
        """
        try:
            return TokenPayload.model_validate_json(text)
        except pydantic.ValidationError as e:
            raise TokenDecodeError(f"Not an invitation token: {e}") from e

    def encode(
        self,
        invitation: Invitation,
        pixel_size: int | None = None,
        error_correction: ErrorCorrection | None = None,
    ) -> Token:
        """Encode an invitation into a token.

        Args:
            invitation: Validated invitation
            pixel_size: Side of the on-screen rendering (defaults to settings)
            error_correction: QR error-correction level (defaults to settings)

        Returns:
            Token with canvas and share renderings

        Raises:
            EncodingError: If the payload cannot be serialized or rasterized
        """
        pixel_size = pixel_size if pixel_size is not None else self.settings.pixel_size
        error_correction = error_correction or self.settings.error_correction
        share_size = round(pixel_size * self.settings.share_scale)

        with logfire.span(
            "token_encoder.encode",
            invitation_id=str(invitation.id),
            pixel_size=pixel_size,
            error_correction=error_correction.value,
        ):
            try:
                payload = self.serialize(invitation)
                text = payload.to_text()
            except (pydantic.ValidationError, TypeError, ValueError) as e:
                raise EncodingError(
                    f"Cannot serialize token payload: {e}", invitation.id
                ) from e

            canvas_image = self._rasterize(text, pixel_size, error_correction, invitation)
            share_image = self._rasterize(text, share_size, error_correction, invitation)

            logfire.info(
                "Token encoded",
                invitation_id=str(invitation.id),
                payload_length=len(text),
                canvas_size=pixel_size,
                share_size=share_size,
            )
            return Token(
                payload=payload,
                text=text,
                error_correction=error_correction,
                canvas_image=canvas_image,
                canvas_size=pixel_size,
                share_image=share_image,
                share_size=share_size,
            )

    def _rasterize(
        self,
        text: str,
        pixel_size: int,
        error_correction: ErrorCorrection,
        invitation: Invitation,
    ) -> bytes:
        """Render QR text as a square PNG of exactly ``pixel_size`` pixels.

        Modules are scaled by a whole number of pixels and the code is centred
        on the light colour, so the grid never blurs.
        """
        if pixel_size <= 0:
            raise EncodingError(
                f"Pixel size must be positive, got {pixel_size}", invitation.id
            )

        qr = qrcode.QRCode(
            version=None,
            error_correction=_QR_ERROR_CORRECTION[error_correction],
            box_size=1,
            border=self.settings.margin,
            image_factory=PilImage,
        )
        try:
            qr.add_data(text)
            qr.make(fit=True)
        except DataOverflowError as e:
            raise EncodingError(f"Token payload too large: {e}", invitation.id) from e

        modules = qr.modules_count + 2 * self.settings.margin
        box_size = pixel_size // modules
        if box_size < 1:
            raise EncodingError(
                f"Pixel size {pixel_size} cannot hold {modules} QR modules",
                invitation.id,
            )

        qr.box_size = box_size
        code = (
            qr.make_image(
                fill_color=self.settings.dark_color,
                back_color=self.settings.light_color,
            )
            .get_image()
            .convert("RGB")
        )

        image = Image.new("RGB", (pixel_size, pixel_size), self.settings.light_color)
        offset = (pixel_size - code.width) // 2
        image.paste(code, (offset, offset))

        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()
