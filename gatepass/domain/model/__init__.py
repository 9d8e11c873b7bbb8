"""Domain model entities for gatepass."""

from gatepass.domain.model.artifact import Artifact
from gatepass.domain.model.invitation import Invitation
from gatepass.domain.model.token import Token, TokenPayload

__all__ = [
    "Artifact",
    "Invitation",
    "Token",
    "TokenPayload",
]
