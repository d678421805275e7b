"""Integration tests for PostgresStoredIdentityRepository.

These tests verify the unique key, the savepoint around create, and
that timestamps survive the round trip through PostgreSQL.
"""

from datetime import timedelta
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from sociallogin.domain.error import NotFoundError, PersistenceConflictError
from sociallogin.domain.model import StoredIdentity
from sociallogin.domain.repository import StoredIdentityRepository
from sociallogin.domain.service import normalize
from sociallogin.domain.value import ProviderKind, StoredIdentityId
from tests.conftest import FakeClock, facebook_payload, github_payload
from tests.harness import create_env_fixture, database_available

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    if not await database_available():
        pytest.skip("PostgreSQL not reachable or not migrated")

    session = await integration_env.get(AsyncSession)
    await session.execute(text("TRUNCATE TABLE stored_identities"))
    await session.commit()

    yield


def _unsaved(payload=None, clock: FakeClock | None = None) -> StoredIdentity:
    clock = clock or FakeClock()
    identity = normalize(ProviderKind.GITHUB, payload or github_payload())
    return StoredIdentity.from_canonical(identity, clock())


class TestStoredIdentityRepositoryIntegration:
    """Integration tests for PostgresStoredIdentityRepository."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_keeps_timestamps(self, integration_env):
        """The database assigns the id; timestamps come back timezone-aware."""
        # Arrange
        repo = await integration_env.get(StoredIdentityRepository)
        unsaved = _unsaved()

        # Act
        created = await repo.create(unsaved)

        # Assert
        assert created.id is not None
        assert created.provider == ProviderKind.GITHUB
        assert created.provider_id == "12345"
        assert created.created_at == unsaved.created_at
        assert created.last_login_at == unsaved.last_login_at
        assert created.created_at.tzinfo is not None

        found = await repo.find_by_provider(ProviderKind.GITHUB, "12345")
        assert found == created

    @pytest.mark.asyncio
    async def test_duplicate_create_conflicts_and_session_stays_usable(
        self, integration_env
    ):
        """A unique violation should not poison the surrounding transaction."""
        # Arrange
        repo = await integration_env.get(StoredIdentityRepository)
        created = await repo.create(_unsaved())

        # Act / Assert
        with pytest.raises(PersistenceConflictError):
            await repo.create(_unsaved(github_payload(name="Someone Else")))

        found = await repo.find_by_provider(ProviderKind.GITHUB, "12345")
        assert found is not None
        assert found.id == created.id
        assert found.display_name == "John Doe"

    @pytest.mark.asyncio
    async def test_same_subject_id_at_other_provider_is_allowed(
        self, integration_env
    ):
        repo = await integration_env.get(StoredIdentityRepository)
        identity = normalize(ProviderKind.FACEBOOK, facebook_payload(id="12345"))

        await repo.create(_unsaved())
        other = await repo.create(StoredIdentity.from_canonical(identity, FakeClock()()))

        assert other.provider == ProviderKind.FACEBOOK
        assert await repo.exists_by_provider(ProviderKind.GITHUB, "12345") is True
        assert await repo.exists_by_provider(ProviderKind.FACEBOOK, "12345") is True
        assert await repo.exists_by_provider(ProviderKind.GOOGLE, "12345") is False

    @pytest.mark.asyncio
    async def test_update_overwrites_display_fields(self, integration_env):
        """update writes email, name, avatar and last_login_at only."""
        # Arrange
        clock = FakeClock()
        repo = await integration_env.get(StoredIdentityRepository)
        created = await repo.create(_unsaved(clock=clock))
        identity = normalize(
            ProviderKind.GITHUB, github_payload(name="Johnny", email=None)
        )

        # Act
        updated = await repo.update(
            created.refreshed(identity, clock() + timedelta(hours=3))
        )

        # Assert
        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.display_name == "Johnny"
        assert updated.email is None
        assert updated.last_login_at == created.created_at + timedelta(hours=3)
        assert await repo.find_by_id(created.id) == updated

    @pytest.mark.asyncio
    async def test_update_with_older_login_time_keeps_stored_time(
        self, integration_env
    ):
        """Out-of-order refreshes should not move last_login_at backwards."""
        # Arrange
        clock = FakeClock()
        repo = await integration_env.get(StoredIdentityRepository)
        created = await repo.create(_unsaved(clock=clock))
        identity = normalize(ProviderKind.GITHUB, github_payload(name="Johnny"))
        newer = created.refreshed(identity, clock() + timedelta(minutes=2))
        older = created.refreshed(identity, clock() + timedelta(minutes=1))

        # Act
        await repo.update(newer)
        updated = await repo.update(older)

        # Assert
        assert updated.last_login_at == newer.last_login_at
        assert updated.display_name == "Johnny"
        assert (await repo.find_by_id(created.id)).last_login_at == newer.last_login_at

    @pytest.mark.asyncio
    async def test_update_missing_row_raises_not_found(self, integration_env):
        repo = await integration_env.get(StoredIdentityRepository)
        ghost = _unsaved().model_copy(update={"id": StoredIdentityId(uuid4())})

        with pytest.raises(NotFoundError):
            await repo.update(ghost)

    @pytest.mark.asyncio
    async def test_find_by_id_missing_returns_none(self, integration_env):
        repo = await integration_env.get(StoredIdentityRepository)

        assert await repo.find_by_id(StoredIdentityId(uuid4())) is None
