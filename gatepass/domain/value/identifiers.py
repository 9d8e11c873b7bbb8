"""Strongly typed identifiers for gatepass domain entities."""

from typing import NewType
from uuid import UUID

InvitationId = NewType("InvitationId", UUID)
