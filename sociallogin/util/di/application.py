"""Application layer DI providers."""

from dishka import Scope, provide

from sociallogin.application.usecase.auth import (
    GetCurrentIdentityUseCase,
    LoginUseCase,
)
from sociallogin.domain.repository import StoredIdentityRepository
from sociallogin.domain.service import AttributeNormalizer, IdentityResolver
from sociallogin.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        attribute_normalizer: AttributeNormalizer,
        identity_resolver: IdentityResolver,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            attribute_normalizer=attribute_normalizer,
            identity_resolver=identity_resolver,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_identity_use_case(
        self, stored_identity_repository: StoredIdentityRepository
    ) -> GetCurrentIdentityUseCase:
        """Provide get current identity use case."""
        return GetCurrentIdentityUseCase(
            stored_identity_repository=stored_identity_repository
        )
