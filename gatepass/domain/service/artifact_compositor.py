"""Artifact compositor domain service.

Draws the shareable invitation image. The layout is fixed and every
coordinate is a proportion of the canvas size:

    background gradient
    dot pattern
    content panel with drop shadow
    title
    recipient and companion lines
    barcode on its own panel
    footer caption
    divider rule
"""

import asyncio
import io

import logfire
from PIL import Image, ImageColor, ImageDraw, ImageFilter, ImageFont

from gatepass.config import ArtifactSettings
from gatepass.domain.error import ArtifactEncodeError, ImageDecodeError
from gatepass.domain.model import Artifact, Invitation, Token
from gatepass.domain.value import ImageFormat
from gatepass.util.error import ConfigurationError

from .base import Service

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


class ArtifactCompositor(Service):
    """Domain service that composes invitation artifacts."""

    def __init__(self, settings: ArtifactSettings) -> None:
        """Initialize artifact compositor.

        Args:
            settings: Artifact layout and encoding settings
        """
        self.settings = settings
        self._fonts: dict[tuple[int, bool], Font] = {}

    def captions(self, invitation: Invitation) -> tuple[str, ...]:
        """Text lines drawn into the artifact, top to bottom."""
        return (
            invitation.title,
            f"{self.settings.recipient_label}: {invitation.name}",
            f"{self.settings.companions_label}: {invitation.guest_count}",
            invitation.description,
        )

    async def compose(
        self,
        invitation: Invitation,
        token: Token,
        width: int | None = None,
        height: int | None = None,
        image_format: ImageFormat | None = None,
        quality: int | None = None,
    ) -> Artifact:
        """Compose and encode the artifact for an invitation.

        Args:
            invitation: Invitation whose metadata is drawn
            token: Encoded token; its share rendering is embedded
            width: Canvas width in pixels (defaults to settings)
            height: Canvas height in pixels (defaults to settings)
            image_format: Output format (defaults to settings)
            quality: Lossy encoding quality, 1-100 (defaults to settings)

        Returns:
            Encoded artifact

        Raises:
            ValueError: If dimensions are not positive or quality is out of range
            ImageDecodeError: If the barcode image cannot be decoded
            ArtifactEncodeError: If the composed image cannot be encoded
        """
        width = self.settings.width if width is None else width
        height = self.settings.height if height is None else height
        image_format = image_format or self.settings.format
        quality = self.settings.quality if quality is None else quality
        if width <= 0 or height <= 0:
            raise ValueError(f"Artifact size must be positive, got {width}x{height}")
        if not 1 <= quality <= 100:
            raise ValueError(f"Quality must be between 1 and 100, got {quality}")

        with logfire.span(
            "artifact_compositor.compose",
            invitation_id=str(invitation.id),
            width=width,
            height=height,
            format=image_format.value,
        ):
            barcode = await self._decode_barcode(token.share_image, invitation)
            canvas = self._draw(invitation, barcode, width, height)
            data = await self._encode(canvas, image_format, quality, invitation)

            logfire.info(
                "Artifact composed",
                invitation_id=str(invitation.id),
                format=image_format.value,
                size=len(data),
            )
            return Artifact(
                invitation_id=invitation.id,
                format=image_format,
                data=data,
                width=width,
                height=height,
                captions=self.captions(invitation),
                token_text=token.text,
            )

    async def _decode_barcode(self, data: bytes, invitation: Invitation) -> Image.Image:
        """Decode and fully load the barcode image before any drawing."""

        def load() -> Image.Image:
            image = Image.open(io.BytesIO(data))
            image.load()
            return image.convert("RGBA")

        try:
            return await asyncio.to_thread(load)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            logfire.error(
                "Barcode decode failed",
                invitation_id=str(invitation.id),
                error=str(e),
            )
            raise ImageDecodeError(
                f"Cannot decode barcode image: {e}", invitation.id
            ) from e

    async def _encode(
        self,
        canvas: Image.Image,
        image_format: ImageFormat,
        quality: int,
        invitation: Invitation,
    ) -> bytes:
        def encode() -> bytes:
            buffer = io.BytesIO()
            options = {"quality": quality} if image_format.is_lossy else {"optimize": True}
            canvas.convert("RGB").save(buffer, format=image_format.pil_format, **options)
            return buffer.getvalue()

        try:
            data = await asyncio.to_thread(encode)
        except (OSError, ValueError, KeyError) as e:
            raise ArtifactEncodeError(
                f"Cannot encode artifact as {image_format.value}: {e}", invitation.id
            ) from e

        if not data:
            raise ArtifactEncodeError("Encoder produced no bytes", invitation.id)
        return data

    def _draw(
        self, invitation: Invitation, barcode: Image.Image, width: int, height: int
    ) -> Image.Image:
        s = self.settings
        canvas = self._background(width, height)
        self._draw_pattern(canvas)

        margin = round(width * 0.06)
        panel = (margin, margin, width - margin, height - margin)
        self._draw_panel(canvas, panel, radius=round(width * 0.05))

        draw = ImageDraw.Draw(canvas)
        center_x = width / 2
        text_width = (panel[2] - panel[0]) - 2 * round(width * 0.05)
        title, recipient, companions, caption = self.captions(invitation)

        self._draw_text(
            draw, title, center_x, height * 0.12, text_width,
            size=round(width * 0.065), fill=s.title_color, bold=True,
        )
        self._draw_text(
            draw, recipient, center_x, height * 0.19, text_width,
            size=round(width * 0.045), fill=s.text_color,
        )
        self._draw_text(
            draw, companions, center_x, height * 0.24, text_width,
            size=round(width * 0.045), fill=s.text_color,
        )

        # Never upscale; downscale only when the panel is too small
        max_side = max(1, min(text_width, round(height * 0.45)))
        if barcode.width > max_side or barcode.height > max_side:
            barcode = barcode.resize((max_side, max_side), Image.Resampling.NEAREST)

        padding = round(width * 0.03)
        code_x = round(center_x - barcode.width / 2)
        code_y = round(height * 0.29)
        code_panel = (
            code_x - padding,
            code_y - padding,
            code_x + barcode.width + padding,
            code_y + barcode.height + padding,
        )
        draw.rounded_rectangle(
            code_panel,
            radius=round(width * 0.03),
            fill=s.panel_color,
            outline=s.border_color,
            width=max(1, round(width * 0.004)),
        )
        canvas.alpha_composite(barcode, dest=(code_x, code_y))

        footer_y = code_panel[3] + height * 0.06
        self._draw_text(
            draw, caption, center_x, footer_y, text_width,
            size=round(width * 0.04), fill=s.muted_color,
        )

        rule_y = round(footer_y + height * 0.045)
        half_rule = round(width * 0.15)
        draw.line(
            [(center_x - half_rule, rule_y), (center_x + half_rule, rule_y)],
            fill=s.accent_color,
            width=max(1, round(height * 0.004)),
        )
        return canvas

    def _background(self, width: int, height: int) -> Image.Image:
        top = ImageColor.getrgb(self.settings.background_top)
        bottom = ImageColor.getrgb(self.settings.background_bottom)

        canvas = Image.new("RGBA", (width, height))
        draw = ImageDraw.Draw(canvas)
        for y in range(height):
            t = y / max(height - 1, 1)
            color = tuple(round(a + (b - a) * t) for a, b in zip(top[:3], bottom[:3]))
            draw.line([(0, y), (width, y)], fill=(*color, 255))
        return canvas

    def _draw_pattern(self, canvas: Image.Image) -> None:
        width, height = canvas.size
        overlay = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay)

        step = max(8, round(width * 0.04))
        radius = max(1, round(step * 0.12))
        color = (*ImageColor.getrgb(self.settings.pattern_color)[:3], 160)
        for row, y in enumerate(range(step // 2, height, step)):
            shift = step // 2 if row % 2 else 0
            for x in range(step // 2 + shift, width, step):
                draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=color)

        canvas.alpha_composite(overlay)

    def _draw_panel(
        self, canvas: Image.Image, box: tuple[int, int, int, int], radius: int
    ) -> None:
        width, height = canvas.size
        offset = round(height * 0.008)

        shadow = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        ImageDraw.Draw(shadow).rounded_rectangle(
            (box[0], box[1] + offset, box[2], box[3] + offset),
            radius=radius,
            fill=(*ImageColor.getrgb(self.settings.shadow_color)[:3], 70),
        )
        shadow = shadow.filter(ImageFilter.GaussianBlur(radius=max(1, round(width * 0.015))))
        canvas.alpha_composite(shadow)

        ImageDraw.Draw(canvas).rounded_rectangle(
            box,
            radius=radius,
            fill=self.settings.panel_color,
            outline=self.settings.border_color,
            width=max(1, round(width * 0.003)),
        )

    def _draw_text(
        self,
        draw: ImageDraw.ImageDraw,
        text: str,
        x: float,
        y: float,
        max_width: int,
        size: int,
        fill: str,
        bold: bool = False,
    ) -> None:
        """Draw a centred line, shrinking the font until it fits.

        Below half the requested size the text is drawn anyway and clips.
        """
        min_size = max(8, size // 2)
        size = max(size, min_size)
        font = self._font(size, bold)
        while size > min_size and draw.textlength(text, font=font) > max_width:
            size -= 1
            font = self._font(size, bold)

        left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
        origin = (x - (left + right) / 2, y - (top + bottom) / 2)
        draw.text(origin, text, font=font, fill=fill)

    def _font(self, size: int, bold: bool) -> Font:
        key = (size, bold)
        if key not in self._fonts:
            setting, path = "artifact.font_path", self.settings.font_path
            if bold and self.settings.bold_font_path:
                setting, path = "artifact.bold_font_path", self.settings.bold_font_path

            if path is None:
                self._fonts[key] = ImageFont.load_default(size=size)
            else:
                try:
                    self._fonts[key] = ImageFont.truetype(str(path), size)
                except OSError as e:
                    raise ConfigurationError(setting, f"Cannot load font {path}: {e}") from e
        return self._fonts[key]
