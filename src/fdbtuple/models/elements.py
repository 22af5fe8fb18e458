"""Tuple element types.

An element is one typed value inside a tuple. The set of element types is
closed; ``Element`` is the discriminated union over all of them and
``kind`` is the discriminator.
"""

from __future__ import annotations

import struct
import uuid
from typing import Annotated, Literal, Sequence, Union

from pydantic import Field, field_validator

from .base import FrozenModel
from .versionstamp import CompleteVersionstamp, IncompleteVersionstamp

_FLOAT32 = struct.Struct(">f")


class NullElement(FrozenModel):
    """The null value."""

    kind: Literal["null"] = "null"


class BytesElement(FrozenModel):
    """An arbitrary byte string."""

    kind: Literal["bytes"] = "bytes"
    value: bytes


class TextElement(FrozenModel):
    """A Unicode string, stored as UTF-8."""

    kind: Literal["text"] = "text"
    value: str


class IntElement(FrozenModel):
    """A signed integer of any size.

    Magnitudes up to 255 bytes are encodable.
    """

    kind: Literal["int"] = "int"
    value: int


class FloatElement(FrozenModel):
    """A 32-bit IEEE-754 float.

    The value is rounded to binary32 on construction so that an element
    compares equal to its own decoded form.

    Example:
        >>> FloatElement(value=0.1).value
        0.10000000149011612
    """

    kind: Literal["float"] = "float"
    value: float

    @field_validator("value")
    @classmethod
    def _round_to_binary32(cls, value: float) -> float:
        try:
            return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
        except OverflowError as err:
            raise ValueError(f"{value!r} is outside the 32-bit float range") from err


class DoubleElement(FrozenModel):
    """A 64-bit IEEE-754 float."""

    kind: Literal["double"] = "double"
    value: float


class BoolElement(FrozenModel):
    """A boolean."""

    kind: Literal["bool"] = "bool"
    value: bool


class UUIDElement(FrozenModel):
    """A 128-bit UUID.

    On the wire a UUID is four 32-bit big-endian words in order, which is
    exactly ``uuid.UUID.bytes``.
    """

    kind: Literal["uuid"] = "uuid"
    value: uuid.UUID

    @property
    def words(self) -> tuple[int, int, int, int]:
        """The UUID as four unsigned 32-bit words, most significant first."""
        return struct.unpack(">IIII", self.value.bytes)

    @classmethod
    def from_words(cls, w0: int, w1: int, w2: int, w3: int) -> UUIDElement:
        """Build a UUID element from four unsigned 32-bit words.

        Raises:
            struct.error: If a word does not fit in 32 bits
        """
        return cls.from_bytes(struct.pack(">IIII", w0, w1, w2, w3))

    @classmethod
    def from_bytes(cls, data: bytes) -> UUIDElement:
        """Build a UUID element from its 16 big-endian bytes."""
        return cls(value=uuid.UUID(bytes=data))


class TupleElement(FrozenModel):
    """A nested tuple of elements."""

    kind: Literal["tuple"] = "tuple"
    elements: Annotated[tuple["Element", ...], Field(strict=False)] = ()


class VersionstampElement(FrozenModel):
    """A complete versionstamp."""

    kind: Literal["versionstamp"] = "versionstamp"
    value: CompleteVersionstamp


class IncompleteVersionstampElement(FrozenModel):
    """An incomplete versionstamp, patched by the database at commit time.

    Only ``encode_for_versionstamped_mutation`` accepts this element.
    """

    kind: Literal["incomplete_versionstamp"] = "incomplete_versionstamp"
    value: IncompleteVersionstamp


Element = Annotated[
    Union[
        NullElement,
        BytesElement,
        TextElement,
        IntElement,
        FloatElement,
        DoubleElement,
        BoolElement,
        UUIDElement,
        TupleElement,
        VersionstampElement,
        IncompleteVersionstampElement,
    ],
    Field(discriminator="kind"),
]

Elements = Sequence[Element]

ELEMENT_TYPES = (
    NullElement,
    BytesElement,
    TextElement,
    IntElement,
    FloatElement,
    DoubleElement,
    BoolElement,
    UUIDElement,
    TupleElement,
    VersionstampElement,
    IncompleteVersionstampElement,
)

TupleElement.model_rebuild()
