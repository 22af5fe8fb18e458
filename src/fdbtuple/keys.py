"""Key construction helpers.

Keys in a sorted store are usually a fixed prefix (a subspace) followed by an
encoded tuple. This module provides the prefix-aware forms of the codec
operations and the range bounds used to scan every key under a tuple.
"""

from __future__ import annotations

from .codec import decode, encode, encode_with_versionstamp_offset, versionstamp_trailer
from .config import CodecConfig
from .exceptions import PrefixMismatchError
from .models.elements import (
    Element,
    Elements,
    IncompleteVersionstampElement,
    TupleElement,
)


def encode_key(prefix: bytes, elements: Elements) -> bytes:
    """Return ``prefix`` followed by the encoding of ``elements``."""
    return prefix + encode(elements)


def encode_versionstamped_key(prefix: bytes, elements: Elements) -> bytes:
    """Encode a prefixed key for a set-versionstamped-key mutation.

    The trailer offset counts the prefix bytes, since the database patches the
    key as a whole.

    Raises:
        EncodeError: If the tuple does not contain exactly one incomplete
            versionstamp, or the placeholder lies beyond offset 0xFFFF
    """
    encoded, offset = encode_with_versionstamp_offset(elements)
    return prefix + encoded + versionstamp_trailer(len(prefix) + offset)


def decode_key(
    prefix: bytes, key: bytes, config: CodecConfig | None = None
) -> tuple[Element, ...]:
    """Strip ``prefix`` from ``key`` and decode the remainder.

    Raises:
        PrefixMismatchError: If key does not start with prefix
        DecodeError: If the remainder is not a valid encoding
    """
    if not key.startswith(prefix):
        raise PrefixMismatchError(
            f"Key {key[: len(prefix)].hex()} does not start with prefix {prefix.hex()}", 0
        )
    return decode(key[len(prefix) :], config)


def tuple_range(elements: Elements, prefix: bytes = b"") -> tuple[bytes, bytes]:
    """Return the ``[begin, end)`` key range of all tuples extending ``elements``.

    Every element starts with a tag below 0xFF, so every longer tuple with
    this prefix sorts between the two bounds. The tuple itself sorts before
    ``begin`` and is excluded.

    Example:
        >>> tuple_range([IntElement(value=1)])
        (b'\\x15\\x01\\x00', b'\\x15\\x01\\xff')
    """
    base = prefix + encode(elements)
    return base + b"\x00", base + b"\xff"


def has_incomplete_versionstamp(elements: Elements) -> bool:
    """Return True if any element, at any nesting depth, is an incomplete versionstamp."""
    for element in elements:
        if isinstance(element, IncompleteVersionstampElement):
            return True
        if isinstance(element, TupleElement) and has_incomplete_versionstamp(element.elements):
            return True
    return False
