"""Domain value objects for gatepass.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from gatepass.domain.value.common import ValueObject


class ErrorCorrection(str, Enum):
    """QR error-correction level, from least to most redundant."""

    L = "L"
    M = "M"
    Q = "Q"
    H = "H"


class ImageFormat(str, Enum):
    """Encoded artifact image format."""

    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"

    @property
    def content_type(self) -> str:
        return f"image/{self.value}"

    @property
    def extension(self) -> str:
        return "jpg" if self is ImageFormat.JPEG else self.value

    @property
    def pil_format(self) -> str:
        return self.value.upper()

    @property
    def is_lossy(self) -> bool:
        return self is not ImageFormat.PNG


class HostPrimitive(str, Enum):
    """Primitives a host environment may expose for distribution."""

    SHARE = "share"
    CAN_SHARE = "can_share"
    CLIPBOARD_WRITE = "clipboard_write"


class Capabilities(ValueObject):
    """Distribution capabilities detected for one artifact.

    Fail-closed: every flag defaults to unsupported.
    """

    native_share: bool = False
    native_file_share: bool = False
    clipboard_write: bool = False


class DistributionAction(str, Enum):
    """User-initiated distribution action."""

    SHARE = "share"
    COPY = "copy"
    DOWNLOAD = "download"


class DistributionStatus(str, Enum):
    """Outcome of a distribution action."""

    SUCCEEDED = "succeeded"
    CANCELLED = "cancelled"
    FAILED = "failed"


class DistributionErrorKind(str, Enum):
    """Why a distribution action did not succeed."""

    UNSUPPORTED = "unsupported"
    CANCELLED = "cancelled"
    CLIPBOARD_UNAVAILABLE = "clipboard_unavailable"
    WRITE_FAILED = "write_failed"


class DistributionMethod(str, Enum):
    """Mechanism that actually carried a successful distribution."""

    FILE_SHARE = "file_share"
    TEXT_SHARE = "text_share"
    CLIPBOARD = "clipboard"
    DOWNLOAD = "download"


class DistributionResult(ValueObject):
    """Tagged result of one distribution action.

    Exactly one of ``method`` (succeeded) or ``error_kind`` (cancelled,
    failed) is set.
    """

    action: DistributionAction
    status: DistributionStatus
    method: DistributionMethod | None = None
    error_kind: DistributionErrorKind | None = None
    filename: str | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == DistributionStatus.SUCCEEDED
