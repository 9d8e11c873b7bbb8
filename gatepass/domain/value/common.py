"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, so two detections
    with the same outcome are equal ``Capabilities``.
    """

    model_config = ConfigDict(frozen=True)
