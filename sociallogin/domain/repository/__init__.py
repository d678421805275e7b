"""Repository interfaces for the identity domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from sociallogin.domain.repository.stored_identity import StoredIdentityRepository

__all__ = [
    "StoredIdentityRepository",
]
