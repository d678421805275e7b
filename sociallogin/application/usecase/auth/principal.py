"""Session principal returned to the authentication framework."""

from typing import Any

from pydantic import BaseModel, Field

from sociallogin.domain.model import StoredIdentity
from sociallogin.domain.value import ProviderKind


class IdentityPrincipal(BaseModel):
    """View-safe projection of a stored identity.

    Only these fields may reach a view layer. raw_attributes are the
    provider's payload for the current login and are not persisted.
    """

    identity_id: str
    provider: ProviderKind
    display_name: str
    email: str | None = None
    avatar_url: str | None = None
    raw_attributes: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_stored(
        cls, identity: StoredIdentity, raw_attributes: dict[str, Any] | None = None
    ) -> "IdentityPrincipal":
        """Build a principal from a stored identity.

        Args:
            identity: Stored identity with an assigned id
            raw_attributes: Provider payload of the current login, if any

        Returns:
            Principal for the session
        """
        return cls(
            identity_id=str(identity.id),
            provider=identity.provider,
            display_name=identity.display_name,
            email=identity.email,
            avatar_url=identity.avatar_url,
            raw_attributes=dict(raw_attributes or {}),
        )
