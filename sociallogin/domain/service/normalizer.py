"""Attribute normalizer domain service.

All knowledge of provider-specific user-info field names lives here.
Callers hand in a provider kind and the raw payload and get back a
CanonicalIdentity; nothing else in the system inspects payload shape.

Field rules per provider:

    provider  identifier  name    email  avatar             name fallback
    github    id          name    email  avatar_url         login
    google    sub         name    email  picture            -
    facebook  id          name    email  picture.data.url   -
"""

from collections.abc import Mapping
from typing import Callable

import logfire
from pydantic import ValidationError

from sociallogin.domain.error import MalformedPayloadError, UnsupportedProviderError
from sociallogin.domain.value import CanonicalIdentity, ProviderKind, RawIdentityPayload

from .base import Service

Extractor = Callable[[RawIdentityPayload], CanonicalIdentity]


def _subject_id(provider: ProviderKind, payload: RawIdentityPayload, field: str) -> str:
    """Read the provider's subject identifier as a canonical string.

    Providers may encode the same id as a JSON number on one call and a
    string on another, so both map to the same decimal string.
    """
    value = payload.get(field)
    if value is None:
        raise MalformedPayloadError(provider.value, field, "is missing")
    # bool is an int subclass and never a valid id
    if isinstance(value, bool):
        raise MalformedPayloadError(provider.value, field, "must be a string or integer")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise MalformedPayloadError(provider.value, field, "is not an integer")
        return str(int(value))
    if isinstance(value, str):
        if not value.strip():
            raise MalformedPayloadError(provider.value, field, "is blank")
        return value.strip()
    raise MalformedPayloadError(provider.value, field, "must be a string or integer")


def _optional_str(
    provider: ProviderKind, payload: RawIdentityPayload, field: str
) -> str | None:
    """Read an optional string field; blank counts as absent."""
    value = payload.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedPayloadError(provider.value, field, "must be a string")
    return value if value.strip() else None


def _required_name(provider: ProviderKind, payload: RawIdentityPayload) -> str:
    name = _optional_str(provider, payload, "name")
    if name is None:
        raise MalformedPayloadError(provider.value, "name", "is missing")
    return name


def _build(
    provider: ProviderKind,
    *,
    raw_attributes: RawIdentityPayload,
    **fields: str | None,
) -> CanonicalIdentity:
    try:
        return CanonicalIdentity(
            provider=provider, raw_attributes=dict(raw_attributes), **fields
        )
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "<payload>"
        raise MalformedPayloadError(provider.value, field, error["msg"]) from e


def _extract_github(payload: RawIdentityPayload) -> CanonicalIdentity:
    provider = ProviderKind.GITHUB
    display_name = _optional_str(provider, payload, "name") or _optional_str(
        provider, payload, "login"
    )
    if display_name is None:
        raise MalformedPayloadError(provider.value, "name", "and 'login' are both missing")

    return _build(
        provider,
        provider_id=_subject_id(provider, payload, "id"),
        display_name=display_name,
        email=_optional_str(provider, payload, "email"),
        avatar_url=_optional_str(provider, payload, "avatar_url"),
        raw_attributes=payload,
    )


def _extract_google(payload: RawIdentityPayload) -> CanonicalIdentity:
    provider = ProviderKind.GOOGLE
    return _build(
        provider,
        provider_id=_subject_id(provider, payload, "sub"),
        display_name=_required_name(provider, payload),
        email=_optional_str(provider, payload, "email"),
        avatar_url=_optional_str(provider, payload, "picture"),
        raw_attributes=payload,
    )


def _facebook_picture_url(payload: RawIdentityPayload) -> str | None:
    """Look up picture.data.url; a missing level means no avatar."""
    picture = payload.get("picture")
    if not isinstance(picture, Mapping):
        return None
    data = picture.get("data")
    if not isinstance(data, Mapping):
        return None
    return _optional_str(ProviderKind.FACEBOOK, data, "url")


def _extract_facebook(payload: RawIdentityPayload) -> CanonicalIdentity:
    provider = ProviderKind.FACEBOOK
    return _build(
        provider,
        provider_id=_subject_id(provider, payload, "id"),
        display_name=_required_name(provider, payload),
        email=_optional_str(provider, payload, "email"),
        avatar_url=_facebook_picture_url(payload),
        raw_attributes=payload,
    )


# One entry per ProviderKind member
EXTRACTORS: dict[ProviderKind, Extractor] = {
    ProviderKind.GITHUB: _extract_github,
    ProviderKind.GOOGLE: _extract_google,
    ProviderKind.FACEBOOK: _extract_facebook,
}


class AttributeNormalizer(Service):
    """Domain service mapping provider payloads to canonical identities.

    Pure and deterministic: the same payload always yields an equal
    CanonicalIdentity, and no I/O happens here.
    """

    def __init__(self, extractors: Mapping[ProviderKind, Extractor] = EXTRACTORS) -> None:
        """Initialize attribute normalizer.

        Args:
            extractors: Extraction rule per provider kind
        """
        self.extractors = extractors

    def normalize(
        self, provider: ProviderKind, payload: RawIdentityPayload
    ) -> CanonicalIdentity:
        """Normalize one provider user-info payload.

        Args:
            provider: Provider that produced the payload
            payload: User-info attributes as returned by the provider

        Returns:
            Canonical identity for this login

        Raises:
            UnsupportedProviderError: If provider is not a known kind
            MalformedPayloadError: If a required field is missing or mistyped
        """
        # Checked before touching the payload: no default mapping exists
        if not isinstance(provider, ProviderKind) or provider not in self.extractors:
            logfire.warn("Unsupported provider rejected", provider=repr(provider))
            raise UnsupportedProviderError(provider)

        with logfire.span("attribute_normalizer.normalize", provider=provider.value):
            if not isinstance(payload, Mapping):
                raise MalformedPayloadError(provider.value, "<payload>", "is not a mapping")

            logfire.debug(
                "Normalizing provider attributes",
                provider=provider.value,
                attribute_keys=sorted(payload.keys()),
            )
            identity = self.extractors[provider](payload)
            logfire.info(
                "Provider attributes normalized",
                provider=provider.value,
                provider_id=identity.provider_id,
                has_email=identity.email is not None,
                has_avatar=identity.avatar_url is not None,
            )
            return identity


_default_normalizer = AttributeNormalizer()


def normalize(provider: ProviderKind, payload: RawIdentityPayload) -> CanonicalIdentity:
    """Normalize a payload with the built-in extraction rules."""
    return _default_normalizer.normalize(provider, payload)
