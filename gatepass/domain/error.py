"""Domain layer errors."""

from gatepass.domain.value import DistributionErrorKind, InvitationId


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class TokenDecodeError(ValidationError):
    """Raised when scanned text is not a gatepass token payload."""

    pass


class RenderError(DomainError):
    """Base error for a failed render attempt.

    Terminal for the current attempt; never retried automatically.
    """

    def __init__(self, message: str, invitation_id: InvitationId | None = None):
        self.invitation_id = invitation_id
        super().__init__(message)


class EncodingError(RenderError):
    """Token serialization or QR rasterization failed."""

    pass


class ImageDecodeError(RenderError):
    """The barcode image could not be decoded before compositing."""

    pass


class ArtifactEncodeError(RenderError):
    """The composed artifact could not be encoded to bytes."""

    pass


class RenderTimeoutError(RenderError):
    """The render did not finish within the configured timeout."""

    pass


class DistributionError(DomainError):
    """A distribution action did not complete."""

    def __init__(self, kind: DistributionErrorKind, message: str):
        self.kind = kind
        super().__init__(message)


class HostError(DomainError):
    """Base error raised by a host environment primitive."""

    pass


class ShareAbortedError(HostError):
    """The user dismissed the native share sheet."""

    pass


class SharePayloadRejectedError(HostError):
    """The host cannot share this particular payload."""

    pass


class ClipboardRejectedError(HostError):
    """The host clipboard refused the payload."""

    pass
