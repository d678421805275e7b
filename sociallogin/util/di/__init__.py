"""Dependency injection wiring for the identity core.

Providers are listed once in PROVIDERS. A provider with subclasses is a
mockable component (today only persistence); the concrete subclass is
picked by its __is_mock__ flag when a container is built.
"""

from typing import Type

from sociallogin.util.di.application import ProdApplicationProvider
from sociallogin.util.di.base import Component, ProviderBase
from sociallogin.util.di.core import ProdConfigProvider
from sociallogin.util.di.domain import ProdDomainProvider
from sociallogin.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from sociallogin.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable: PostgreSQL in production, in-memory in unit tests
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the class to instantiate.

    Args:
        base: Entry from PROVIDERS
        use_mock: Select the in-memory implementation of a mockable component

    Returns:
        base itself for concrete providers, else the matching subclass

    Raises:
        DependencyInjectionError: If the component has no such implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component_name = getattr(base, "__mock_component__", None) or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {component_name}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
