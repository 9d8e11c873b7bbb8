"""Domain value objects for gatepass."""

from gatepass.domain.value.identifiers import InvitationId
from gatepass.domain.value.types import (
    Capabilities,
    DistributionAction,
    DistributionErrorKind,
    DistributionMethod,
    DistributionResult,
    DistributionStatus,
    ErrorCorrection,
    HostPrimitive,
    ImageFormat,
)

__all__ = [
    # Identifiers
    "InvitationId",
    # Types
    "Capabilities",
    "DistributionAction",
    "DistributionErrorKind",
    "DistributionMethod",
    "DistributionResult",
    "DistributionStatus",
    "ErrorCorrection",
    "HostPrimitive",
    "ImageFormat",
]
