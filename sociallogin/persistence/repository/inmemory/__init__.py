"""In-memory repository implementations for testing."""

from .stored_identity import InMemoryStoredIdentityRepository

__all__ = [
    "InMemoryStoredIdentityRepository",
]
