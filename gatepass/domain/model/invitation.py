"""Invitation entity.

A resident-authored request to admit one guest (plus companions) into the
community. Records are built only from already validated form input.
"""

from datetime import datetime

from pydantic import Field

from gatepass.domain.model.common import DomainModel
from gatepass.domain.value import InvitationId


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - ``id`` is unique within the session's working set
    - ``name`` is 2-50 characters and ``guest_count`` is 0-10, checked before
      the record is constructed
    - ``title`` and ``description`` are deployment constants carried on the
      record so the artifact is self-contained
    """

    id: InvitationId
    name: str
    guest_count: int
    is_frequent: bool = False  # Reserved, not consumed downstream yet
    title: str
    description: str
    created_at: datetime = Field(default_factory=datetime.now)
