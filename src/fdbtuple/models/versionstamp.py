"""Versionstamp value types.

A versionstamp is the 10-byte commit version the database assigns to a
transaction (8-byte transaction version + 2-byte batch number), extended with a
2-byte user version chosen by the application to order several stamps written
by the same transaction.

Before commit the 10 database bytes are unknown. An IncompleteVersionstamp is
written as ten 0xFF bytes that the database overwrites at commit time.
"""

from __future__ import annotations

import struct
from typing import ClassVar

from .base import FrozenModel
from .fields import UInt16, UInt64

_STAMP = struct.Struct(">QHH")

VERSIONSTAMP_SIZE = 12
TR_VERSION_SIZE = 10
PLACEHOLDER = b"\xff" * TR_VERSION_SIZE


class CompleteVersionstamp(FrozenModel):
    """A versionstamp whose commit version is known.

    Attributes:
        transaction_version: Database commit version (unsigned 64-bit)
        batch_number: Order of the transaction within its commit batch (unsigned 16-bit)
        user_version: Application-chosen sub-ordering (unsigned 16-bit)

    Example:
        >>> vs = CompleteVersionstamp(
        ...     transaction_version=0xDEADBEEFDEADBEEF, batch_number=0xBEEF, user_version=12
        ... )
        >>> vs.to_bytes().hex()
        'deadbeefdeadbeefbeef000c'
    """

    is_complete: ClassVar[bool] = True

    transaction_version: int = UInt64()
    batch_number: int = UInt16()
    user_version: int = UInt16(default=0)

    def to_bytes(self) -> bytes:
        """Return the 12-byte big-endian form used inside keys and values."""
        return _STAMP.pack(self.transaction_version, self.batch_number, self.user_version)

    @classmethod
    def from_bytes(cls, data: bytes) -> CompleteVersionstamp:
        """Build a versionstamp from its 12-byte big-endian form.

        Raises:
            ValueError: If data is not exactly 12 bytes
        """
        if len(data) != VERSIONSTAMP_SIZE:
            raise ValueError(f"Versionstamp must be {VERSIONSTAMP_SIZE} bytes, got {len(data)}")
        tr_version, batch, user = _STAMP.unpack(data)
        return cls(transaction_version=tr_version, batch_number=batch, user_version=user)

    def tr_version(self) -> bytes:
        """Return the 10 database-assigned bytes."""
        return self.to_bytes()[:TR_VERSION_SIZE]


class IncompleteVersionstamp(FrozenModel):
    """A versionstamp placeholder written before the transaction commits.

    Only the user version is known. Encoding it writes ten 0xFF bytes where the
    database will later patch in the commit version.

    Attributes:
        user_version: Application-chosen sub-ordering (unsigned 16-bit)
    """

    is_complete: ClassVar[bool] = False

    user_version: int = UInt16(default=0)

    def to_bytes(self) -> bytes:
        """Return the 12-byte placeholder form."""
        return PLACEHOLDER + self.user_version.to_bytes(2, "big")

    def complete(self, tr_version: bytes) -> CompleteVersionstamp:
        """Combine this placeholder with the 10-byte commit version.

        Args:
            tr_version: The 10 bytes reported by the database for the committed
                transaction (transaction version + batch number)

        Raises:
            ValueError: If tr_version is not exactly 10 bytes
        """
        if len(tr_version) != TR_VERSION_SIZE:
            raise ValueError(
                f"Commit version must be {TR_VERSION_SIZE} bytes, got {len(tr_version)}"
            )
        return CompleteVersionstamp.from_bytes(
            tr_version + self.user_version.to_bytes(2, "big")
        )
