"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Use cases are the entry points the authentication framework calls;
    they take a request model and return a response model.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        """Run the use case for one request."""
        pass
