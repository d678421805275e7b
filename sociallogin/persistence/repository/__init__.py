"""PostgreSQL repository implementations."""

from sociallogin.persistence.repository.stored_identity import (
    PostgresStoredIdentityRepository,
)

__all__ = [
    "PostgresStoredIdentityRepository",
]
