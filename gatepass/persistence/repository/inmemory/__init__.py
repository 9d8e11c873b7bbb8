"""In-memory repository implementations."""

from .invitation import InMemoryInvitationRepository

__all__ = [
    "InMemoryInvitationRepository",
]
