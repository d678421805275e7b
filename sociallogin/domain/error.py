"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NormalizationError(DomainError):
    """Provider payload could not be turned into a canonical identity."""

    pass


class UnsupportedProviderError(NormalizationError):
    """Raised when a provider tag is not one of the recognized kinds."""

    def __init__(self, provider: object):
        self.provider = provider
        super().__init__(f"Unsupported identity provider: {provider!r}")


class MalformedPayloadError(NormalizationError):
    """Raised when a required provider field is missing or has the wrong shape."""

    def __init__(self, provider: str, field: str, reason: str):
        self.provider = provider
        self.field = field
        super().__init__(f"Malformed {provider} payload: field '{field}' {reason}")


class PersistenceError(DomainError):
    """Base error raised by identity repositories."""

    pass


class PersistenceConflictError(PersistenceError):
    """Raised on create when the (provider, provider_id) pair already exists."""

    def __init__(self, provider: str, provider_id: str):
        self.provider = provider
        self.provider_id = provider_id
        super().__init__(f"Identity already exists: {provider}:{provider_id}")


class PersistenceUnavailableError(PersistenceError):
    """Raised when the identity store cannot be reached or times out."""

    pass


class IdentityResolutionError(DomainError):
    """Raised when an identity cannot be converged to a single stored record."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
