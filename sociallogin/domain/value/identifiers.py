"""Strongly typed identifiers for stored identity records.

Using NewType keeps surrogate ids apart from provider subject identifiers,
which are plain strings scoped to a single provider.
"""

from typing import NewType
from uuid import UUID

StoredIdentityId = NewType("StoredIdentityId", UUID)
