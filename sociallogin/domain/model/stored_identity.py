"""Stored identity entity.

The persisted record of one account at one identity provider.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from sociallogin.domain.model.common import DomainModel
from sociallogin.domain.value import CanonicalIdentity, ProviderKind, StoredIdentityId


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class StoredIdentity(DomainModel):
    """Local identity record keyed by (provider, provider_id).

    id is None until the repository assigns it on create. id and
    created_at never change afterwards; display fields are overwritten
    on every login and last_login_at only moves forward.
    """

    id: Optional[StoredIdentityId] = None
    provider: ProviderKind
    provider_id: str  # Subject id, unique per provider only
    email: Optional[str] = None
    display_name: str
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    last_login_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def from_canonical(
        cls, identity: CanonicalIdentity, now: datetime
    ) -> "StoredIdentity":
        """Build an unsaved record for a first login.

        Args:
            identity: Normalized provider identity
            now: Login time, used for both timestamps

        Returns:
            New record without a surrogate id
        """
        return cls(
            provider=identity.provider,
            provider_id=identity.provider_id,
            email=identity.email,
            display_name=identity.display_name,
            avatar_url=identity.avatar_url,
            created_at=now,
            last_login_at=now,
        )

    def refreshed(self, identity: CanonicalIdentity, now: datetime) -> "StoredIdentity":
        """Return a copy carrying the latest provider values.

        Absent values in identity overwrite stored ones; the latest
        provider response is authoritative for display fields.

        Args:
            identity: Normalized provider identity for the same key
            now: Login time

        Returns:
            Updated copy with id and created_at untouched
        """
        return self.model_copy(
            update={
                "email": identity.email,
                "display_name": identity.display_name,
                "avatar_url": identity.avatar_url,
                "last_login_at": max(self.last_login_at, now),
            }
        )

    @property
    def key(self) -> tuple[ProviderKind, str]:
        """Composite key (provider, provider_id)."""
        return self.provider, self.provider_id
