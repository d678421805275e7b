"""Login use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from sociallogin.application.usecase.auth.principal import IdentityPrincipal
from sociallogin.application.usecase.base import BaseUseCase
from sociallogin.domain.service import AttributeNormalizer, IdentityResolver
from sociallogin.domain.value import ProviderKind


class LoginRequest(BaseModel):
    """Login request from a completed OAuth2 callback.

    The code-for-token exchange and the user-info call have already
    happened; this carries their result.
    """

    provider: str  # OAuth2 registration id, e.g. "github"
    attributes: dict[str, Any]  # User-info payload as returned by the provider


class LoginResponse(IdentityPrincipal):
    """Login response: the principal to store in the session."""

    pass


class LoginUseCase(BaseUseCase):
    """Use case for turning a provider callback into a stored identity."""

    def __init__(
        self,
        attribute_normalizer: AttributeNormalizer,
        identity_resolver: IdentityResolver,
    ) -> None:
        """Initialize login use case.

        Args:
            attribute_normalizer: Attribute normalizer domain service
            identity_resolver: Identity resolver domain service
        """
        self.attribute_normalizer = attribute_normalizer
        self.identity_resolver = identity_resolver

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Parse the provider tag (unknown tags fail before any lookup)
        2. Normalize provider attributes into a canonical identity
        3. Resolve the canonical identity to its stored record
        4. Project the stored record into the session principal

        Args:
            request: Login request with provider tag and attributes

        Returns:
            Login response with the resolved principal

        Raises:
            UnsupportedProviderError: If the provider tag is unknown
            MalformedPayloadError: If the payload lacks required fields
            IdentityResolutionError: If concurrent creates do not converge
            PersistenceUnavailableError: If the identity store is down
        """
        provider = ProviderKind.parse(request.provider)
        identity = self.attribute_normalizer.normalize(provider, request.attributes)

        with logfire.span(
            "login_identity",
            provider=provider.value,
            provider_id=identity.provider_id,
        ):
            stored = await self.identity_resolver.resolve(identity)
            logfire.info(
                "Identity logged in",
                identity_id=str(stored.id),
                provider=provider.value,
            )

            return LoginResponse.from_stored(stored, identity.raw_attributes)
