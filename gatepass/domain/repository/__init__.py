"""Repository interfaces for the gatepass domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from gatepass.domain.repository.invitation import InvitationRepository

__all__ = [
    "InvitationRepository",
]
