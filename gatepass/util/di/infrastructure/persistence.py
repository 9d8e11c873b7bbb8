"""Persistence infrastructure providers."""

from dishka import Scope, provide

from gatepass.domain.repository import InvitationRepository
from gatepass.persistence.repository.inmemory import InMemoryInvitationRepository
from gatepass.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Invitations live only for the lifetime of the process, so the working
    set is one APP-scoped in-memory repository shared by every request.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_invitation_repository(self) -> InvitationRepository:
        """Provide Invitation repository."""
        return InMemoryInvitationRepository()
