"""Test harness for unit and integration tests.

Integration tests assume PostgreSQL is reachable at DATABASE__URL with
migrations applied (python scripts/run_migrations.py); otherwise they
skip.
"""

import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import OperationalError, ProgrammingError

from sociallogin.config import Settings
from sociallogin.persistence.database import create_engine
from sociallogin.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    components unmocked and yields a request-scoped container.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory persistence
        unit_env = create_env_fixture()

        # Integration tests - real PostgreSQL
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_login(unit_env):
            login = await unit_env.get(LoginUseCase)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


async def database_available(settings: Settings | None = None) -> bool:
    """Check that PostgreSQL is reachable and migrated.

    Integration modules skip instead of failing when it is not.
    """
    engine = create_engine(settings or Settings(environment="test"))
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1 FROM stored_identities LIMIT 1"))
        return True
    except (OperationalError, ProgrammingError, OSError):
        return False
    finally:
        await engine.dispose()
