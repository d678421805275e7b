"""Domain value objects for identity normalization.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules for data crossing the provider boundary.
"""

from enum import Enum
from typing import Mapping, Union

from pydantic import Field, field_validator
from typing_extensions import TypeAliasType

from sociallogin.domain.error import UnsupportedProviderError
from sociallogin.domain.value.common import ValueObject


class ProviderKind(str, Enum):
    """Supported identity providers.

    Adding a provider means adding a member here and an extraction rule
    in the attribute normalizer.
    """

    GITHUB = "github"
    GOOGLE = "google"
    FACEBOOK = "facebook"

    @classmethod
    def parse(cls, tag: "str | ProviderKind") -> "ProviderKind":
        """Convert an OAuth2 registration tag into a provider kind.

        Args:
            tag: Registration id as handed over by the OAuth2 client
                (e.g. "github", "Google")

        Returns:
            Matching provider kind

        Raises:
            UnsupportedProviderError: If the tag names no known provider
        """
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            try:
                return cls(tag.strip().lower())
            except ValueError:
                pass
        raise UnsupportedProviderError(tag)


# Provider user-info values as decoded from JSON. None and lists show up in
# real payloads (e.g. GitHub sends "email": null) and are carried through.
AttributeValue = TypeAliasType(
    "AttributeValue",
    Union[
        bool,
        int,
        float,
        str,
        None,
        list["AttributeValue"],
        dict[str, "AttributeValue"],
    ],
)

RawIdentityPayload = Mapping[str, AttributeValue]


class CanonicalIdentity(ValueObject):
    """Provider-agnostic identity produced from one user-info payload.

    (provider, provider_id) names one real-world account at that provider.
    raw_attributes are kept for display only and never used to resolve
    identity.
    """

    provider: ProviderKind
    provider_id: str  # Stable subject id, never the login/username
    display_name: str
    email: str | None = None
    avatar_url: str | None = None
    raw_attributes: dict[str, AttributeValue] = Field(default_factory=dict)

    @field_validator("provider_id", "display_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty and whitespace-only values."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @property
    def key(self) -> tuple[ProviderKind, str]:
        """Composite key (provider, provider_id)."""
        return self.provider, self.provider_id
