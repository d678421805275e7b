"""Domain model entities for social login."""

from sociallogin.domain.model.stored_identity import StoredIdentity, utc_now

__all__ = [
    "StoredIdentity",
    "utc_now",
]
