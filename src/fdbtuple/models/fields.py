"""Field type helpers for fixed-width unsigned integers.

Versionstamp components are fixed-width on the wire, so their model fields
carry explicit bounds that Pydantic enforces at construction time.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

UINT16_MAX = 0xFFFF
UINT64_MAX = 0xFFFF_FFFF_FFFF_FFFF


def BoundedInt(*, ge: int | None = None, le: int | None = None, **kwargs: Any) -> FieldInfo:
    """Create a bounded integer field.

    This is a convenience wrapper around Pydantic's Field() that ensures
    both ge= and le= constraints are set.

    Args:
        ge: Minimum value (inclusive)
        le: Maximum value (inclusive)
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.
    """
    return cast(FieldInfo, Field(ge=ge, le=le, **kwargs))


def UInt16(**kwargs: Any) -> FieldInfo:
    """Create an unsigned 16-bit integer field.

    Example:
        >>> class Stamp(FrozenModel):
        ...     user_version: int = UInt16(default=0)
    """
    return BoundedInt(ge=0, le=UINT16_MAX, **kwargs)


def UInt64(**kwargs: Any) -> FieldInfo:
    """Create an unsigned 64-bit integer field."""
    return BoundedInt(ge=0, le=UINT64_MAX, **kwargs)
