"""Exception hierarchy for fdbtuple.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from TupleLayerError for easy catching of any fdbtuple-specific error.
"""

from __future__ import annotations


class TupleLayerError(Exception):
    """Base exception for all fdbtuple errors."""

    pass


class EncodeError(TupleLayerError):
    """Raised when a tuple cannot be encoded.

    Examples:
        - Integer magnitude longer than 255 bytes
        - Unsupported Python type passed to pack()
        - Incomplete versionstamp given to the general encoder
        - Mutation encoding without exactly one incomplete versionstamp
        - Versionstamp offset that does not fit in the 2-byte trailer
    """

    pass


class DecodeError(TupleLayerError):
    """Raised when decoding binary data fails.

    Decoding never returns partial output: any DecodeError aborts the whole input.

    Attributes:
        offset: Byte position in the input at which the problem was detected
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class TruncatedError(DecodeError):
    """Raised when the input ends in the middle of an element."""

    pass


class UnknownTagError(DecodeError):
    """Raised when a type tag outside the recognized set is read.

    Attributes:
        tag: The offending tag byte
    """

    def __init__(self, tag: int, offset: int | None = None) -> None:
        super().__init__(f"Unknown type tag 0x{tag:02x}", offset)
        self.tag = tag


class InvalidNestedTupleError(DecodeError):
    """Raised when a nested tuple is missing its terminator."""

    pass


class InvalidUtf8Error(DecodeError):
    """Raised when a text element payload is not valid UTF-8."""

    pass


class NestingTooDeepError(DecodeError):
    """Raised when nested tuples exceed the configured maximum depth."""

    pass


class PrefixMismatchError(DecodeError):
    """Raised when a key does not start with the expected prefix."""

    pass
