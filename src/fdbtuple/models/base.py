"""Base model class and fdbtuple-specific Pydantic configuration.

Every element and versionstamp type inherits from FrozenModel, which makes
instances immutable, hashable and equal by value.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """Base class for all fdbtuple value types.

    Values are constructed with keyword arguments and validated once:

    Example:
        >>> from fdbtuple.models import IntElement
        >>> IntElement(value=7) == IntElement(value=7)
        True
        >>> hash(IntElement(value=7)) == hash(IntElement(value=7))
        True
    """

    # ConfigDict for Pydantic v2
    model_config = ConfigDict(
        # No silent coercions (True is not an int, str is not bytes)
        strict=True,
        # Immutable and hashable
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        # bytes payloads are arbitrary binary, not UTF-8
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )
