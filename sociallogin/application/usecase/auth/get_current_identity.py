"""Get current identity use case."""

from uuid import UUID

from pydantic import BaseModel

from sociallogin.application.usecase.auth.principal import IdentityPrincipal
from sociallogin.application.usecase.base import BaseUseCase
from sociallogin.domain.error import NotFoundError
from sociallogin.domain.repository import StoredIdentityRepository
from sociallogin.domain.value import StoredIdentityId


class GetCurrentIdentityRequest(BaseModel):
    """Get current identity request."""

    identity_id: str  # Surrogate id kept in the session


class GetCurrentIdentityUseCase(BaseUseCase):
    """Use case for restoring the session principal from its stored identity."""

    def __init__(self, stored_identity_repository: StoredIdentityRepository) -> None:
        """Initialize get current identity use case.

        Args:
            stored_identity_repository: Stored identity repository
        """
        self.stored_identity_repository = stored_identity_repository

    async def execute(self, request: GetCurrentIdentityRequest) -> IdentityPrincipal:
        """Load the principal for a session.

        raw_attributes are not persisted, so the restored principal has none.

        Args:
            request: Request with the surrogate identity id

        Returns:
            Principal built from the stored identity

        Raises:
            NotFoundError: If the id is malformed or no identity has it
        """
        try:
            identity_id = StoredIdentityId(UUID(request.identity_id))
        except ValueError:
            raise NotFoundError("StoredIdentity", request.identity_id) from None

        identity = await self.stored_identity_repository.find_by_id(identity_id)
        if identity is None:
            raise NotFoundError("StoredIdentity", request.identity_id)

        return IdentityPrincipal.from_stored(identity)
