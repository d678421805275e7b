"""Stored identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from sociallogin.domain.model.stored_identity import StoredIdentity
from sociallogin.domain.value import ProviderKind, StoredIdentityId


class StoredIdentityRepository(ABC):
    """Repository for StoredIdentity entity.

    Implementations enforce uniqueness of (provider, provider_id) and
    assign surrogate ids. Email is deliberately not a lookup key: several
    rows may share an email or have none at all.

    All methods raise PersistenceUnavailableError when the backing store
    cannot be reached.
    """

    @abstractmethod
    async def find_by_provider(
        self, provider: ProviderKind, provider_id: str
    ) -> Optional[StoredIdentity]:
        """Find an identity by its composite key.

        Args:
            provider: The identity provider
            provider_id: The subject id at that provider

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, identity: StoredIdentity) -> StoredIdentity:
        """Insert a new identity and assign its surrogate id.

        Args:
            identity: Unsaved identity (id is ignored)

        Returns:
            The stored identity with its assigned id

        Raises:
            PersistenceConflictError: If (provider, provider_id) already exists
        """
        pass

    @abstractmethod
    async def update(self, identity: StoredIdentity) -> StoredIdentity:
        """Persist display fields and last_login_at of an existing identity.

        id, provider, provider_id and created_at are never written. The
        stored last_login_at becomes the later of the stored and given
        values, so overlapping logins cannot move it backwards.

        Args:
            identity: Identity carrying an assigned id

        Returns:
            The updated identity

        Raises:
            NotFoundError: If no row has identity.id
        """
        pass

    @abstractmethod
    async def find_by_id(self, identity_id: StoredIdentityId) -> Optional[StoredIdentity]:
        """Find an identity by surrogate id.

        Args:
            identity_id: The identity's unique identifier

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_provider(self, provider: ProviderKind, provider_id: str) -> bool:
        """Check if an identity exists for the given composite key.

        Args:
            provider: The identity provider
            provider_id: The subject id at that provider

        Returns:
            True if identity exists, False otherwise
        """
        pass
