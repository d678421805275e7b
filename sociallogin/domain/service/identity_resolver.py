"""Identity resolver domain service."""

from datetime import datetime
from typing import Callable

import logfire

from sociallogin.domain.error import IdentityResolutionError, PersistenceConflictError
from sociallogin.domain.model.stored_identity import StoredIdentity, utc_now
from sociallogin.domain.repository.stored_identity import StoredIdentityRepository
from sociallogin.domain.value import CanonicalIdentity

from .base import Service


class IdentityResolver(Service):
    """Domain service turning a canonical identity into its stored record.

    Find-or-create with merge: a first login creates the record, later
    logins refresh display fields and last_login_at. Concurrent first
    logins for the same key are serialized by the repository's unique
    constraint; the loser of that race re-reads once and updates the
    winner's row instead of creating a duplicate.
    """

    def __init__(
        self,
        stored_identity_repository: StoredIdentityRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize identity resolver.

        Args:
            stored_identity_repository: Stored identity repository
            clock: Source of the current time (timezone-aware)
        """
        self.stored_identity_repository = stored_identity_repository
        self.clock = clock

    async def resolve(self, identity: CanonicalIdentity) -> StoredIdentity:
        """Resolve a canonical identity to the authoritative stored record.

        Args:
            identity: Normalized identity from the current login

        Returns:
            Created or refreshed stored identity, with its surrogate id

        Raises:
            IdentityResolutionError: If create conflicts again after the retry
            PersistenceUnavailableError: If the store cannot be reached
        """
        with logfire.span(
            "identity_resolver.resolve",
            provider=identity.provider.value,
            provider_id=identity.provider_id,
        ):
            try:
                return await self._find_or_create(identity)
            except PersistenceConflictError:
                logfire.warn(
                    "Identity create conflict, retrying",
                    provider=identity.provider.value,
                    provider_id=identity.provider_id,
                )

            try:
                return await self._find_or_create(identity)
            except PersistenceConflictError as e:
                logfire.error(
                    "Identity create conflicted after retry",
                    provider=identity.provider.value,
                    provider_id=identity.provider_id,
                )
                raise IdentityResolutionError(
                    f"Could not resolve identity {identity.provider.value}:"
                    f"{identity.provider_id} after conflict retry"
                ) from e

    async def _find_or_create(self, identity: CanonicalIdentity) -> StoredIdentity:
        now = self.clock()
        existing = await self.stored_identity_repository.find_by_provider(
            identity.provider, identity.provider_id
        )

        if existing is None:
            created = await self.stored_identity_repository.create(
                StoredIdentity.from_canonical(identity, now)
            )
            logfire.info(
                "Identity created",
                identity_id=str(created.id),
                provider=created.provider.value,
                provider_id=created.provider_id,
            )
            return created

        updated = await self.stored_identity_repository.update(
            existing.refreshed(identity, now)
        )
        logfire.info(
            "Identity refreshed",
            identity_id=str(updated.id),
            provider=updated.provider.value,
            provider_id=updated.provider_id,
        )
        return updated
