"""Tuple decoder.

This module provides decode(), the exact inverse of encode(). Decoding is a
single front-to-back pass: read a tag, read the payload the tag implies,
repeat until the input is exhausted. Nested tuples recurse and stop at their
own terminator.
"""

from __future__ import annotations

import logging
import struct

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import (
    DecodeError,
    InvalidNestedTupleError,
    InvalidUtf8Error,
    NestingTooDeepError,
    TruncatedError,
    UnknownTagError,
)
from ..models.elements import (
    BoolElement,
    BytesElement,
    DoubleElement,
    Element,
    FloatElement,
    IntElement,
    NullElement,
    TextElement,
    TupleElement,
    UUIDElement,
    VersionstampElement,
)
from ..models.versionstamp import VERSIONSTAMP_SIZE, CompleteVersionstamp
from . import tags
from .buffer import ByteReader

logger = logging.getLogger(__name__)

_FLOAT = struct.Struct(">f")
_DOUBLE = struct.Struct(">d")


def decode(data: bytes, config: CodecConfig | None = None) -> tuple[Element, ...]:
    """Decode an encoded tuple.

    Args:
        data: Bytes produced by encode()
        config: Codec options (defaults to DEFAULT_CONFIG)

    Returns:
        The decoded elements

    Raises:
        TruncatedError: If the data ends in the middle of an element
        UnknownTagError: If a type tag is not recognized
        InvalidNestedTupleError: If a nested tuple has no terminator
        InvalidUtf8Error: If a text payload is not valid UTF-8
        NestingTooDeepError: If nested tuples exceed config.max_depth

    Examples:
        ```python
        from fdbtuple import decode

        decode(b'\\x15\\x01')        # (IntElement(value=1),)
        decode(b'\\x05\\x15\\x01\\x00')  # (TupleElement(elements=(IntElement(value=1),)),)
        ```

    Note:
        Versionstamps always decode as VersionstampElement. The output of
        encode_for_versionstamped_mutation() is not decodable: its trailer
        is read as further elements.
    """
    cfg = config or DEFAULT_CONFIG
    reader = ByteReader(data)

    elements: list[Element] = []
    try:
        while not reader.at_end():
            elements.append(_decode_element(reader, 0, cfg))
    except DecodeError as e:
        logger.debug("Failed to decode %d bytes at offset %s: %s", len(data), e.offset, e)
        raise

    return tuple(elements)


def _decode_element(reader: ByteReader, depth: int, cfg: CodecConfig) -> Element:
    """Decode a single element.

    Args:
        reader: ByteReader positioned at a type tag
        depth: Nesting depth of the tuple being decoded (0 at top level)
        cfg: Codec options

    Returns:
        Decoded element

    Raises:
        DecodeError: If data is invalid or truncated
    """
    start = reader.position()
    tag = reader.read_byte()

    try:
        if tag == tags.NULL:
            return NullElement()

        if tag == tags.BYTES:
            return BytesElement(value=reader.read_escaped())

        if tag == tags.TEXT:
            raw = reader.read_escaped()
            try:
                return TextElement(value=raw.decode("utf-8"))
            except UnicodeDecodeError as e:
                raise InvalidUtf8Error(f"Invalid UTF-8 in text element: {e}", start) from e

        if tag == tags.NESTED:
            return _decode_nested(reader, depth + 1, cfg, start)

        if tags.NEG_INT_START <= tag <= tags.POS_INT_END:
            return IntElement(value=_decode_int(reader, tag))

        if tag == tags.FLOAT:
            return FloatElement(value=_FLOAT.unpack(_restore_ieee(reader.read_bytes(4)))[0])

        if tag == tags.DOUBLE:
            return DoubleElement(value=_DOUBLE.unpack(_restore_ieee(reader.read_bytes(8)))[0])

        if tag == tags.FALSE:
            return BoolElement(value=False)

        if tag == tags.TRUE:
            return BoolElement(value=True)

        if tag == tags.UUID:
            return UUIDElement.from_bytes(reader.read_bytes(16))

        if tag == tags.VERSIONSTAMP:
            stamp = CompleteVersionstamp.from_bytes(reader.read_bytes(VERSIONSTAMP_SIZE))
            return VersionstampElement(value=stamp)
    except IndexError as e:
        raise TruncatedError(f"Truncated element with tag 0x{tag:02x}: {e}", start) from e

    raise UnknownTagError(tag, start)


def _decode_nested(reader: ByteReader, depth: int, cfg: CodecConfig, start: int) -> TupleElement:
    """Decode the elements of a nested tuple up to its terminator.

    Inside a nested tuple 0x00 0xFF is a null element and a lone 0x00 closes
    the tuple.
    """
    if depth > cfg.max_depth:
        raise NestingTooDeepError(
            f"Nested tuple depth {depth} exceeds max_depth={cfg.max_depth}", start
        )

    inner: list[Element] = []
    while True:
        tag = reader.peek()
        if tag is None:
            raise InvalidNestedTupleError("Nested tuple is missing its terminator", start)
        if tag == tags.NULL:
            if reader.peek(1) == tags.ESCAPE:
                reader.read_bytes(2)
                inner.append(NullElement())
                continue
            reader.read_byte()
            return TupleElement(elements=tuple(inner))
        inner.append(_decode_element(reader, depth, cfg))


def _decode_int(reader: ByteReader, tag: int) -> int:
    """Decode an integer payload for an integer tag.

    Raises:
        IndexError: If the payload is truncated
    """
    if tag == tags.POS_INT_END:
        length = reader.read_byte()
        return reader.read_uint(length)

    if tag == tags.NEG_INT_START:
        length = reader.read_byte() ^ 0xFF
        return reader.read_uint(length) - ((1 << (8 * length)) - 1)

    length = tag - tags.INT_ZERO
    if length >= 0:
        return reader.read_uint(length)
    length = -length
    return reader.read_uint(length) - ((1 << (8 * length)) - 1)


def _restore_ieee(encoded: bytes) -> bytes:
    """Undo the ordering transform applied by the encoder.

    A set high bit means the value was non-negative and only its sign bit
    was flipped; otherwise every bit was flipped.
    """
    if encoded[0] & 0x80:
        return bytes([encoded[0] ^ 0x80]) + encoded[1:]
    return bytes(b ^ 0xFF for b in encoded)
