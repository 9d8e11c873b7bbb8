"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gatepass.domain.value import ErrorCorrection, ImageFormat


class InvitationSettings(BaseModel):
    """Invitation configuration."""

    # Fixed for the current deployment, copied onto every invitation
    title: str = "Jardines de La Perla"
    description: str = "código de invitación"


class TokenSettings(BaseModel):
    """QR token rendering configuration."""

    # Side length of the on-screen rendering, in pixels
    pixel_size: int = Field(default=200, gt=0)

    # The shareable artifact embeds a larger rendering so the code stays
    # scannable once the composition is flattened
    share_scale: float = Field(default=1.5, gt=0)

    error_correction: ErrorCorrection = ErrorCorrection.H

    # Quiet zone around the code, in modules
    margin: int = Field(default=1, ge=0)

    dark_color: str = "#000000"
    light_color: str = "#ffffff"


class ArtifactSettings(BaseModel):
    """Composited artifact configuration."""

    width: int = Field(default=600, gt=0)
    height: int = Field(default=900, gt=0)
    format: ImageFormat = ImageFormat.PNG

    # Only used by lossy formats
    quality: int = Field(default=92, ge=1, le=100)

    recipient_label: str = "Para"
    companions_label: str = "Acompañantes"

    # TrueType fonts; Pillow's bundled font is used when unset
    font_path: Path | None = None
    bold_font_path: Path | None = None

    background_top: str = "#f0fdfa"
    background_bottom: str = "#ccfbf1"
    pattern_color: str = "#99f6e4"
    panel_color: str = "#ffffff"
    shadow_color: str = "#0f172a"
    border_color: str = "#e2e8f0"
    title_color: str = "#000000"
    text_color: str = "#1f2937"
    muted_color: str = "#4b5563"
    accent_color: str = "#0f766e"


class RenderSettings(BaseModel):
    """Render pipeline configuration."""

    # None disables the timeout; a hung render then waits indefinitely
    timeout_seconds: float | None = Field(default=None, gt=0)


class DistributionSettings(BaseModel):
    """Distribution configuration for the local host."""

    download_dir: Path = Path("downloads")


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Nested sections can be overridden from the environment, e.g.:

        TOKEN__PIXEL_SIZE=240
        ARTIFACT__FORMAT=webp
        RENDER__TIMEOUT_SECONDS=5
        DISTRIBUTION__DOWNLOAD_DIR=/tmp/invitations
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows TOKEN__PIXEL_SIZE syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "localhost"
    port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Nested settings
    invitations: InvitationSettings = InvitationSettings()
    token: TokenSettings = TokenSettings()
    artifact: ArtifactSettings = ArtifactSettings()
    render: RenderSettings = RenderSettings()
    distribution: DistributionSettings = DistributionSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def load_version(self) -> "Settings":
        """Load git SHA from the version file when deployed."""
        self.git_sha = self._load_git_sha()
        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        # In development, version file may not exist
        return "unknown"
