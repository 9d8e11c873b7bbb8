"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Records are superseded, never updated: a changed invitation is a new
    ``Invitation`` and yields a new ``Token`` and ``Artifact``.
    """

    model_config = ConfigDict(frozen=True)
