"""Domain value objects for social login."""

from sociallogin.domain.value.identifiers import StoredIdentityId
from sociallogin.domain.value.types import (
    AttributeValue,
    CanonicalIdentity,
    ProviderKind,
    RawIdentityPayload,
)

__all__ = [
    # Identifiers
    "StoredIdentityId",
    # Types
    "AttributeValue",
    "CanonicalIdentity",
    "ProviderKind",
    "RawIdentityPayload",
]
