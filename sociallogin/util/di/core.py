"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context

from sociallogin.config import Settings
from sociallogin.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are passed in as container context so the process loads
    them once (see create_container).
    """

    settings = from_context(provides=Settings, scope=Scope.APP)
