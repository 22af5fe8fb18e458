"""Order-preserving tuple encoder.

This module provides encode(), which turns a sequence of elements into bytes
whose unsigned lexicographic order matches the order of the elements, and
encode_for_versionstamped_mutation(), the variant used for keys and values
that contain an incomplete versionstamp.
"""

from __future__ import annotations

import logging
import struct

from ..exceptions import EncodeError
from ..models.elements import (
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
from . import tags
from .buffer import ByteWriter

logger = logging.getLogger(__name__)

_FLOAT = struct.Struct(">f")
_DOUBLE = struct.Struct(">d")
_TRAILER = struct.Struct("<H")


def encode(elements: Elements) -> bytes:
    """Encode a tuple of elements.

    Elements are encoded in order, each introduced by its type tag, with no
    separators. The result decodes back to an equal tuple.

    Args:
        elements: Elements to encode

    Returns:
        Encoded tuple (empty for an empty tuple)

    Raises:
        EncodeError: If an integer magnitude exceeds 255 bytes, or the tuple
            contains an incomplete versionstamp (use
            encode_for_versionstamped_mutation for those)

    Examples:
        ```python
        from fdbtuple import IntElement, TextElement, encode

        encode([IntElement(value=1)])            # b'\\x15\\x01'
        encode([TextElement(value="hello")])     # b'\\x02hello\\x00'
        ```
    """
    writer = ByteWriter()
    for element in elements:
        _encode_element(writer, element, nested=False, stamp_offsets=None)
    return writer.to_bytes()


def encode_with_versionstamp_offset(elements: Elements) -> tuple[bytes, int]:
    """Encode a tuple holding exactly one incomplete versionstamp.

    Returns:
        The encoding (without trailer) and the offset at which the 10-byte
        placeholder starts

    Raises:
        EncodeError: If the tuple does not contain exactly one incomplete versionstamp
    """
    writer = ByteWriter()
    offsets: list[int] = []
    for element in elements:
        _encode_element(writer, element, nested=False, stamp_offsets=offsets)

    if len(offsets) != 1:
        raise EncodeError(
            f"Versionstamped mutation requires exactly one incomplete versionstamp, "
            f"found {len(offsets)}"
        )
    return writer.to_bytes(), offsets[0]


def versionstamp_trailer(offset: int) -> bytes:
    """Return the 2-byte little-endian trailer that points the database at a placeholder.

    Raises:
        EncodeError: If offset does not fit in 16 bits
    """
    if offset < 0 or offset > tags.TRAILER_MAX_OFFSET:
        raise EncodeError(
            f"Versionstamp offset {offset} does not fit in a {tags.TRAILER_SIZE}-byte trailer"
        )
    return _TRAILER.pack(offset)


def encode_for_versionstamped_mutation(elements: Elements) -> bytes:
    """Encode a tuple for a set-versionstamped-key or -value mutation.

    The tuple must contain exactly one incomplete versionstamp (at any nesting
    depth). The encoding is followed by a 2-byte little-endian offset of the
    placeholder; the database overwrites the placeholder with the commit
    version and strips the trailer. The output is not meant for decode().

    Args:
        elements: Elements to encode

    Returns:
        Encoded tuple followed by the offset trailer

    Raises:
        EncodeError: If the tuple does not contain exactly one incomplete
            versionstamp, or the placeholder lies beyond offset 0xFFFF

    Examples:
        ```python
        from fdbtuple import IncompleteVersionstamp, IncompleteVersionstampElement
        from fdbtuple import encode_for_versionstamped_mutation

        stamp = IncompleteVersionstampElement(value=IncompleteVersionstamp(user_version=12))
        encode_for_versionstamped_mutation([stamp])
        # b'\\x33' + b'\\xff' * 10 + b'\\x00\\x0c' + b'\\x01\\x00'
        ```
    """
    encoded, offset = encode_with_versionstamp_offset(elements)
    logger.debug("Versionstamp placeholder at offset %d of %d bytes", offset, len(encoded))
    return encoded + versionstamp_trailer(offset)


def _encode_element(
    writer: ByteWriter,
    element: Element,
    nested: bool,
    stamp_offsets: list[int] | None,
) -> None:
    """Encode a single element.

    Args:
        writer: ByteWriter to write to
        element: Element to encode
        nested: True inside a nested tuple, where null needs escaping
        stamp_offsets: Collects placeholder offsets; None rejects incomplete versionstamps

    Raises:
        EncodeError: If the element cannot be encoded
    """
    if isinstance(element, NullElement):
        writer.write_byte(tags.NULL)
        if nested:
            writer.write_byte(tags.ESCAPE)
        return

    if isinstance(element, BytesElement):
        writer.write_byte(tags.BYTES)
        writer.write_escaped(element.value)
        return

    if isinstance(element, TextElement):
        writer.write_byte(tags.TEXT)
        writer.write_escaped(element.value.encode("utf-8"))
        return

    if isinstance(element, IntElement):
        _encode_int(writer, element.value)
        return

    if isinstance(element, FloatElement):
        writer.write_byte(tags.FLOAT)
        writer.write_bytes(_order_ieee(_FLOAT.pack(element.value)))
        return

    if isinstance(element, DoubleElement):
        writer.write_byte(tags.DOUBLE)
        writer.write_bytes(_order_ieee(_DOUBLE.pack(element.value)))
        return

    if isinstance(element, BoolElement):
        writer.write_byte(tags.TRUE if element.value else tags.FALSE)
        return

    if isinstance(element, UUIDElement):
        writer.write_byte(tags.UUID)
        writer.write_bytes(element.value.bytes)
        return

    if isinstance(element, TupleElement):
        writer.write_byte(tags.NESTED)
        for inner in element.elements:
            _encode_element(writer, inner, nested=True, stamp_offsets=stamp_offsets)
        writer.write_byte(tags.NULL)
        return

    if isinstance(element, VersionstampElement):
        writer.write_byte(tags.VERSIONSTAMP)
        writer.write_bytes(element.value.to_bytes())
        return

    if isinstance(element, IncompleteVersionstampElement):
        if stamp_offsets is None:
            raise EncodeError(
                "Incomplete versionstamps cannot be encoded for round-tripping; "
                "use encode_for_versionstamped_mutation()"
            )
        writer.write_byte(tags.VERSIONSTAMP)
        stamp_offsets.append(writer.position())
        writer.write_bytes(element.value.to_bytes())
        return

    raise EncodeError(f"Unsupported element type {type(element).__name__}")


def _encode_int(writer: ByteWriter, value: int) -> None:
    """Encode an integer as sign-and-length tag plus big-endian magnitude.

    Negative magnitudes are written as their one's complement over the same
    number of bytes, so larger magnitudes produce smaller bytes.
    """
    if value == 0:
        writer.write_byte(tags.INT_ZERO)
        return

    magnitude = abs(value)
    length = (magnitude.bit_length() + 7) // 8
    if length > tags.INT_MAX_EXTENDED_BYTES:
        raise EncodeError(
            f"Integer magnitude of {length} bytes exceeds {tags.INT_MAX_EXTENDED_BYTES} bytes"
        )

    if value > 0:
        if length <= tags.INT_MAX_BYTES:
            writer.write_byte(tags.INT_ZERO + length)
        else:
            writer.write_byte(tags.POS_INT_END)
            writer.write_byte(length)
        writer.write_uint(magnitude, length)
        return

    if length <= tags.INT_MAX_BYTES:
        writer.write_byte(tags.INT_ZERO - length)
    else:
        writer.write_byte(tags.NEG_INT_START)
        writer.write_byte(length ^ 0xFF)
    writer.write_uint((1 << (8 * length)) - 1 - magnitude, length)


def _order_ieee(packed: bytes) -> bytes:
    """Make big-endian IEEE-754 bits sort like the numbers they represent.

    Non-negative values get their sign bit flipped; negative values get every
    bit flipped.
    """
    if packed[0] & 0x80:
        return bytes(b ^ 0xFF for b in packed)
    return bytes([packed[0] ^ 0x80]) + packed[1:]
