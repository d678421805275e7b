"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    Provider payload values are validated strictly enough that a numeric
    subject id never silently becomes a different string.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        strict=True,  # No implicit int -> str coercion on identity fields
    )
