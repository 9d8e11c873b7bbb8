"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case for orchestrating domain services.

    Requests are pydantic models, so input is validated before
    ``execute`` runs.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
