"""Unit tests for identity value objects."""

import pytest
from pydantic import ValidationError

from sociallogin.domain.error import UnsupportedProviderError
from sociallogin.domain.value import CanonicalIdentity, ProviderKind


class TestProviderKindParse:
    """Tests for ProviderKind.parse."""

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("github", ProviderKind.GITHUB),
            ("Google", ProviderKind.GOOGLE),
            (" FACEBOOK ", ProviderKind.FACEBOOK),
            (ProviderKind.GITHUB, ProviderKind.GITHUB),
        ],
    )
    def test_known_tags_parse(self, tag, expected):
        """Registration ids should parse case-insensitively."""
        assert ProviderKind.parse(tag) is expected

    @pytest.mark.parametrize("tag", ["myspace", "", None, 1])
    def test_unknown_tags_are_unsupported(self, tag):
        """Unknown tags should raise, never fall back to a default."""
        with pytest.raises(UnsupportedProviderError) as exc_info:
            ProviderKind.parse(tag)

        assert exc_info.value.provider == tag


class TestCanonicalIdentity:
    """Tests for CanonicalIdentity validation."""

    def test_blank_provider_id_is_rejected(self):
        """provider_id must carry a value."""
        with pytest.raises(ValidationError):
            CanonicalIdentity(
                provider=ProviderKind.GITHUB, provider_id="  ", display_name="John"
            )

    def test_blank_display_name_is_rejected(self):
        """display_name must carry a value."""
        with pytest.raises(ValidationError):
            CanonicalIdentity(
                provider=ProviderKind.GITHUB, provider_id="1", display_name=""
            )

    def test_is_immutable(self):
        """Value objects cannot be changed after construction."""
        identity = CanonicalIdentity(
            provider=ProviderKind.GITHUB, provider_id="1", display_name="John"
        )

        with pytest.raises(ValidationError):
            identity.email = "john@example.com"

    def test_key_is_provider_and_subject_id(self):
        """The composite key ignores every other field."""
        identity = CanonicalIdentity(
            provider=ProviderKind.GOOGLE,
            provider_id="g-1",
            display_name="Jane",
            email="jane@x.com",
        )

        assert identity.key == (ProviderKind.GOOGLE, "g-1")
