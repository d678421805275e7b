"""StoredIdentity repository implementation using PostgreSQL."""

from contextlib import contextmanager
from typing import Iterator, Optional

import logfire
from sqlalchemy import func, insert, literal, select, update
from sqlalchemy.exc import (
    IntegrityError,
    InterfaceError,
    OperationalError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from sociallogin.domain.error import (
    NotFoundError,
    PersistenceConflictError,
    PersistenceUnavailableError,
)
from sociallogin.domain.model import StoredIdentity
from sociallogin.domain.repository.stored_identity import StoredIdentityRepository
from sociallogin.domain.value import ProviderKind, StoredIdentityId
from sociallogin.persistence.mappers import (
    row_to_stored_identity,
    stored_identity_to_insert_dict,
    stored_identity_to_update_dict,
)
from sociallogin.persistence.tables import stored_identities_table

UNIQUE_KEY_CONSTRAINT = "uq_stored_identity_provider"


@contextmanager
def _surface_unavailable(operation: str) -> Iterator[None]:
    """Translate connection-level database failures into domain errors."""
    try:
        yield
    except (OperationalError, InterfaceError, PoolTimeoutError, OSError) as e:
        logfire.error(
            "Identity store unavailable",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise PersistenceUnavailableError(
            f"Identity store unavailable during {operation}"
        ) from e


class PostgresStoredIdentityRepository(StoredIdentityRepository):
    """PostgreSQL implementation of StoredIdentityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_provider(
        self, provider: ProviderKind, provider_id: str
    ) -> Optional[StoredIdentity]:
        """Get stored identity by provider and provider subject id.

        Args:
            provider: Identity provider
            provider_id: Subject id at that provider

        Returns:
            StoredIdentity if found, None otherwise
        """
        stmt = select(stored_identities_table).where(
            stored_identities_table.c.provider == provider.value,
            stored_identities_table.c.provider_id == provider_id,
        )
        with _surface_unavailable("find_by_provider"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()

        if not row:
            return None

        return row_to_stored_identity(dict(row))

    async def create(self, identity: StoredIdentity) -> StoredIdentity:
        """Insert a stored identity; the database assigns the id.

        The insert runs in a SAVEPOINT so a unique violation leaves the
        surrounding transaction usable for the resolver's re-read.

        Args:
            identity: Unsaved StoredIdentity

        Returns:
            StoredIdentity with its assigned id

        Raises:
            PersistenceConflictError: If (provider, provider_id) already exists
        """
        stmt = (
            insert(stored_identities_table)
            .values(**stored_identity_to_insert_dict(identity))
            .returning(stored_identities_table)
        )
        with _surface_unavailable("create"):
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
                    row = result.mappings().one()
            except IntegrityError as e:
                if UNIQUE_KEY_CONSTRAINT not in str(e.orig):
                    raise
                raise PersistenceConflictError(
                    identity.provider.value, identity.provider_id
                ) from e

        return row_to_stored_identity(dict(row))

    async def update(self, identity: StoredIdentity) -> StoredIdentity:
        """Write display fields and last_login_at of an existing identity.

        Args:
            identity: StoredIdentity with an assigned id

        Returns:
            Updated StoredIdentity as stored

        Raises:
            NotFoundError: If the row no longer exists
        """
        if identity.id is None:
            raise NotFoundError("StoredIdentity", "<unsaved>")

        stmt = (
            update(stored_identities_table)
            .where(stored_identities_table.c.id == identity.id)
            .values(
                **stored_identity_to_update_dict(identity),
                # Overlapping logins may finish out of order
                last_login_at=func.greatest(
                    stored_identities_table.c.last_login_at,
                    literal(
                        identity.last_login_at,
                        stored_identities_table.c.last_login_at.type,
                    ),
                ),
            )
            .returning(stored_identities_table)
        )
        with _surface_unavailable("update"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            await self.session.flush()

        if not row:
            raise NotFoundError("StoredIdentity", str(identity.id))

        return row_to_stored_identity(dict(row))

    async def find_by_id(self, identity_id: StoredIdentityId) -> Optional[StoredIdentity]:
        """Get stored identity by surrogate id.

        Args:
            identity_id: Identity ID to look up

        Returns:
            StoredIdentity if found, None otherwise
        """
        stmt = select(stored_identities_table).where(
            stored_identities_table.c.id == identity_id
        )
        with _surface_unavailable("find_by_id"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()

        if not row:
            return None

        return row_to_stored_identity(dict(row))

    async def exists_by_provider(self, provider: ProviderKind, provider_id: str) -> bool:
        """Check if an identity exists for the given composite key.

        Args:
            provider: Identity provider
            provider_id: Subject id at that provider

        Returns:
            True if identity exists, False otherwise
        """
        stmt = select(stored_identities_table.c.id).where(
            stored_identities_table.c.provider == provider.value,
            stored_identities_table.c.provider_id == provider_id,
        )
        with _surface_unavailable("exists_by_provider"):
            result = await self.session.execute(stmt)
            row = result.first()
        return row is not None
