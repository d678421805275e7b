"""Application bootstrap for the identity core.

The authentication framework calls create_app() once at startup and
opens a request scope per provider callback:

    container = create_app()
    async with container() as request_container:
        login = await request_container.get(LoginUseCase)
        principal = await login.execute(
            LoginRequest(provider="github", attributes=user_info)
        )
"""

from dishka import AsyncContainer
from sqlalchemy.engine import make_url

from sociallogin.config import Settings
from sociallogin.util.di.container import create_container
from sociallogin.util.logging import get_logger, setup_logging
from sociallogin.util.observability import configure_logfire


def create_app(settings: Settings | None = None) -> AsyncContainer:
    """Configure logging and observability, then build the DI container.

    Args:
        settings: Application settings; loaded from the environment if omitted

    Returns:
        Production DI container
    """
    settings = settings or Settings()
    setup_logging(settings)
    configure_logfire(settings)

    container = create_container(settings)
    get_logger(__name__).info(
        "Identity core ready: environment=%s, database=%s",
        settings.environment,
        make_url(settings.database.url).render_as_string(hide_password=True),
    )
    return container
