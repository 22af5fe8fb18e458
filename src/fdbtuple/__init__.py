"""fdbtuple: Order-Preserving Tuple Codec

A Python implementation of the FoundationDB tuple layer: typed, nested values
are encoded into byte strings whose unsigned lexicographic order matches the
order of the values, so the bytes can be used directly as keys in a sorted
key-value store and scanned with range reads.

Key Features:
- Pydantic-based immutable element models
- Arbitrary-precision integers, IEEE-754 floats, UUIDs, nested tuples
- Complete and incomplete versionstamps with the offset-trailer protocol
- Plain-Python pack()/unpack() convenience layer
- Pure Python, no I/O, thread-safe

Quick Start:
    >>> from fdbtuple import IntElement, TextElement, decode, encode
    >>>
    >>> key = encode([TextElement(value="users"), IntElement(value=42)])
    >>> decode(key)
    (TextElement(kind='text', value='users'), IntElement(kind='int', value=42))
    >>>
    >>> from fdbtuple import pack, unpack
    >>> unpack(pack(("users", 42, None)))
    ('users', 42, None)
"""

from __future__ import annotations

from .codec import (
    decode,
    encode,
    encode_for_versionstamped_mutation,
    encode_with_versionstamp_offset,
    versionstamp_trailer,
)
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    DecodeError,
    EncodeError,
    InvalidNestedTupleError,
    InvalidUtf8Error,
    NestingTooDeepError,
    PrefixMismatchError,
    TruncatedError,
    TupleLayerError,
    UnknownTagError,
)
from .keys import (
    decode_key,
    encode_key,
    encode_versionstamped_key,
    has_incomplete_versionstamp,
    tuple_range,
)
from .models import (
    BoolElement,
    BytesElement,
    CompleteVersionstamp,
    DoubleElement,
    Element,
    Elements,
    FloatElement,
    IncompleteVersionstamp,
    IncompleteVersionstampElement,
    IntElement,
    NullElement,
    TextElement,
    TupleElement,
    UUIDElement,
    VersionstampElement,
)
from .native import from_element, pack, pack_with_versionstamp, to_element, unpack

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "encode_for_versionstamped_mutation",
    "encode_with_versionstamp_offset",
    "versionstamp_trailer",
    # Elements
    "Element",
    "Elements",
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
    # Versionstamps
    "CompleteVersionstamp",
    "IncompleteVersionstamp",
    # Native values
    "pack",
    "unpack",
    "pack_with_versionstamp",
    "to_element",
    "from_element",
    # Keys
    "encode_key",
    "decode_key",
    "encode_versionstamped_key",
    "tuple_range",
    "has_incomplete_versionstamp",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "TupleLayerError",
    "EncodeError",
    "DecodeError",
    "TruncatedError",
    "UnknownTagError",
    "InvalidNestedTupleError",
    "InvalidUtf8Error",
    "NestingTooDeepError",
    "PrefixMismatchError",
    # Version
    "__version__",
]
