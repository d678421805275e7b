"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from sociallogin.domain.model import StoredIdentity
from sociallogin.domain.value import ProviderKind, StoredIdentityId


def row_to_stored_identity(row: Dict[str, Any]) -> StoredIdentity:
    """Convert database row to StoredIdentity domain model.

    Args:
        row: Database row as dict

    Returns:
        StoredIdentity domain model
    """
    return StoredIdentity(
        id=StoredIdentityId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        provider=ProviderKind(row["provider"]),
        provider_id=row["provider_id"],
        email=row.get("email"),
        display_name=row["display_name"],
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        last_login_at=row["last_login_at"],
    )


def stored_identity_to_insert_dict(identity: StoredIdentity) -> Dict[str, Any]:
    """Convert StoredIdentity to a dict for insertion.

    The id is left out so the database assigns it.

    Args:
        identity: StoredIdentity domain model

    Returns:
        Dict suitable for database insertion
    """
    values = identity.model_dump(exclude={"id"})
    values["provider"] = identity.provider.value
    return values


def stored_identity_to_update_dict(identity: StoredIdentity) -> Dict[str, Any]:
    """Convert StoredIdentity to a dict of its display columns.

    last_login_at is left out; the repository writes it so that it never
    moves backwards.

    Args:
        identity: StoredIdentity domain model

    Returns:
        Dict suitable for database update
    """
    return identity.model_dump(
        include={"email", "display_name", "avatar_url"}
    )
