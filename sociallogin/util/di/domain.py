"""Domain layer DI providers."""

from dishka import Scope, provide

from sociallogin.domain.repository import StoredIdentityRepository
from sociallogin.domain.service import AttributeNormalizer, IdentityResolver
from sociallogin.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The normalizer is pure and shared app-wide. The resolver is
    REQUEST-scoped to align with the repository/session lifecycle.
    """

    @provide(scope=Scope.APP)
    def get_attribute_normalizer(self) -> AttributeNormalizer:
        """Provide attribute normalizer domain service."""
        return AttributeNormalizer()

    @provide(scope=Scope.REQUEST)
    def get_identity_resolver(
        self, stored_identity_repository: StoredIdentityRepository
    ) -> IdentityResolver:
        """Provide identity resolver domain service."""
        return IdentityResolver(stored_identity_repository=stored_identity_repository)
