"""Conversion between plain Python values and tuple elements.

This module provides pack()/unpack(), which accept and return ordinary Python
values instead of element models:

    None                      <-> NullElement
    bytes / bytearray         <-> BytesElement
    str                       <-> TextElement
    bool                      <-> BoolElement
    int                       <-> IntElement
    float                     <-> DoubleElement (FloatElement if configured)
    uuid.UUID                 <-> UUIDElement
    tuple / list              <-> TupleElement (decoded as tuple)
    CompleteVersionstamp      <-> VersionstampElement
    IncompleteVersionstamp    --> IncompleteVersionstampElement

Element instances are passed through unchanged, so values and elements can be
mixed in one tuple.
"""

from __future__ import annotations

import uuid
from typing import Any, Sequence

from .codec import decode, encode, encode_for_versionstamped_mutation
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import EncodeError
from .models.elements import (
    ELEMENT_TYPES,
    BoolElement,
    BytesElement,
    DoubleElement,
    Element,
    FloatElement,
    IncompleteVersionstampElement,
    IntElement,
    NullElement,
    TextElement,
    TupleElement,
    UUIDElement,
    VersionstampElement,
)
from .models.versionstamp import CompleteVersionstamp, IncompleteVersionstamp


def to_element(value: Any, config: CodecConfig | None = None) -> Element:
    """Convert a plain Python value to an element.

    Args:
        value: Value to convert
        config: Codec options; native_float selects the float element type

    Returns:
        The corresponding element

    Raises:
        EncodeError: If the value's type has no element counterpart
    """
    cfg = config or DEFAULT_CONFIG

    if isinstance(value, ELEMENT_TYPES):
        return value

    if value is None:
        return NullElement()

    # bool before int: isinstance(True, int) is True
    if isinstance(value, bool):
        return BoolElement(value=value)

    if isinstance(value, int):
        return IntElement(value=value)

    if isinstance(value, float):
        if cfg.native_float == "float":
            try:
                return FloatElement(value=value)
            except ValueError as e:
                raise EncodeError(f"Cannot encode {value!r} as a 32-bit float") from e
        return DoubleElement(value=value)

    if isinstance(value, str):
        return TextElement(value=value)

    if isinstance(value, (bytes, bytearray)):
        return BytesElement(value=bytes(value))

    if isinstance(value, uuid.UUID):
        return UUIDElement(value=value)

    if isinstance(value, (tuple, list)):
        return TupleElement(elements=tuple(to_element(item, cfg) for item in value))

    if isinstance(value, CompleteVersionstamp):
        return VersionstampElement(value=value)

    if isinstance(value, IncompleteVersionstamp):
        return IncompleteVersionstampElement(value=value)

    raise EncodeError(f"Unsupported type for tuple encoding: {type(value).__name__}")


def from_element(element: Element) -> Any:
    """Convert an element back to a plain Python value.

    Float and double elements both become ``float``; nested tuples become
    ``tuple``.
    """
    if isinstance(element, NullElement):
        return None

    if isinstance(element, TupleElement):
        return tuple(from_element(inner) for inner in element.elements)

    return element.value


def to_elements(values: Sequence[Any], config: CodecConfig | None = None) -> list[Element]:
    """Convert a sequence of plain values to elements."""
    return [to_element(value, config) for value in values]


def pack(values: Sequence[Any], config: CodecConfig | None = None) -> bytes:
    """Encode a sequence of plain Python values.

    Examples:
        ```python
        from fdbtuple import pack

        pack((1, "a", None))      # b'\\x15\\x01\\x02a\\x00\\x00'
        pack(("users", (3, 4)))   # nested tuple
        ```
    """
    return encode(to_elements(values, config))


def pack_with_versionstamp(values: Sequence[Any], config: CodecConfig | None = None) -> bytes:
    """Encode plain values containing one IncompleteVersionstamp, with offset trailer."""
    return encode_for_versionstamped_mutation(to_elements(values, config))


def unpack(data: bytes, config: CodecConfig | None = None) -> tuple[Any, ...]:
    """Decode bytes into a tuple of plain Python values."""
    return tuple(from_element(element) for element in decode(data, config))
