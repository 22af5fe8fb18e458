"""Pydantic value types for fdbtuple.

This module provides the tuple element types and the versionstamp records
they carry.
"""

from __future__ import annotations

from .base import FrozenModel
from .elements import (
    ELEMENT_TYPES,
    BoolElement,
    BytesElement,
    DoubleElement,
    Element,
    Elements,
    FloatElement,
    IncompleteVersionstampElement,
    IntElement,
    NullElement,
    TextElement,
    TupleElement,
    UUIDElement,
    VersionstampElement,
)
from .versionstamp import CompleteVersionstamp, IncompleteVersionstamp

__all__ = [
    "FrozenModel",
    "Element",
    "Elements",
    "ELEMENT_TYPES",
    "NullElement",
    "BytesElement",
    "TextElement",
    "IntElement",
    "FloatElement",
    "DoubleElement",
    "BoolElement",
    "UUIDElement",
    "TupleElement",
    "VersionstampElement",
    "IncompleteVersionstampElement",
    "CompleteVersionstamp",
    "IncompleteVersionstamp",
]
