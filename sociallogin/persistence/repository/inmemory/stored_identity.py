"""In-memory stored identity repository for testing."""

from typing import Optional
from uuid import uuid4

from sociallogin.domain.error import NotFoundError, PersistenceConflictError
from sociallogin.domain.model import StoredIdentity
from sociallogin.domain.repository.stored_identity import StoredIdentityRepository
from sociallogin.domain.value import ProviderKind, StoredIdentityId


class InMemoryStoredIdentityRepository(StoredIdentityRepository):
    """In-memory implementation of StoredIdentityRepository for testing.

    Enforces the same (provider, provider_id) uniqueness as the database.
    create and update contain no awaits, so each runs atomically on the
    event loop.
    """

    def __init__(self) -> None:
        self._identities: dict[StoredIdentityId, StoredIdentity] = {}

    async def find_by_provider(
        self, provider: ProviderKind, provider_id: str
    ) -> Optional[StoredIdentity]:
        """Find stored identity by provider and provider subject id."""
        for identity in self._identities.values():
            if identity.provider == provider and identity.provider_id == provider_id:
                return identity
        return None

    async def create(self, identity: StoredIdentity) -> StoredIdentity:
        """Insert stored identity and assign a fresh id.

        Raises:
            PersistenceConflictError: If (provider, provider_id) already exists
        """
        for existing in self._identities.values():
            if existing.key == identity.key:
                raise PersistenceConflictError(
                    identity.provider.value, identity.provider_id
                )

        created = identity.model_copy(update={"id": StoredIdentityId(uuid4())})
        self._identities[created.id] = created
        return created

    async def update(self, identity: StoredIdentity) -> StoredIdentity:
        """Overwrite the mutable fields of an existing stored identity.

        Raises:
            NotFoundError: If no identity has this id
        """
        existing = self._identities.get(identity.id) if identity.id else None
        if existing is None:
            raise NotFoundError("StoredIdentity", str(identity.id))

        updated = existing.model_copy(
            update={
                "email": identity.email,
                "display_name": identity.display_name,
                "avatar_url": identity.avatar_url,
                "last_login_at": max(
                    existing.last_login_at, identity.last_login_at
                ),
            }
        )
        self._identities[updated.id] = updated
        return updated

    async def find_by_id(self, identity_id: StoredIdentityId) -> Optional[StoredIdentity]:
        """Find stored identity by ID."""
        return self._identities.get(identity_id)

    async def exists_by_provider(self, provider: ProviderKind, provider_id: str) -> bool:
        """Check if an identity exists for the given composite key."""
        return await self.find_by_provider(provider, provider_id) is not None

    def count(self) -> int:
        """Number of stored identities."""
        return len(self._identities)
