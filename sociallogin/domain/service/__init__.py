"""Domain services."""

from .base import Service
from .identity_resolver import IdentityResolver
from .normalizer import AttributeNormalizer, normalize

__all__ = [
    "AttributeNormalizer",
    "IdentityResolver",
    "Service",
    "normalize",
]
