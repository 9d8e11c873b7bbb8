"""Repository implementations."""

from gatepass.persistence.repository.inmemory import InMemoryInvitationRepository

__all__ = ["InMemoryInvitationRepository"]
