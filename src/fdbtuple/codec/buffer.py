"""Byte-level reading and writing utilities.

This module provides the cursor types the encoder and decoder work through.
All multi-byte integers are big-endian unless a method says otherwise.
"""

from __future__ import annotations


class ByteWriter:
    """Accumulates encoded bytes.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_byte(0x15)
        >>> writer.write_uint(1, num_bytes=1)
        >>> writer.to_bytes()
        b'\\x15\\x01'
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buf = bytearray()

    def write_byte(self, value: int) -> None:
        """Write a single byte.

        Args:
            value: Byte value (0-255)

        Raises:
            ValueError: If value is not a byte
        """
        if value < 0 or value > 0xFF:
            raise ValueError(f"Byte value must be 0-255, got {value}")
        self._buf.append(value)

    def write_uint(self, value: int, num_bytes: int) -> None:
        """Write an unsigned integer as exactly num_bytes big-endian bytes.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            num_bytes: Number of bytes to use

        Raises:
            ValueError: If value is negative or doesn't fit in num_bytes
        """
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")
        if value >> (8 * num_bytes):
            raise ValueError(f"Value {value} requires more than {num_bytes} bytes")
        self._buf.extend(value.to_bytes(num_bytes, "big"))

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._buf.extend(data)

    def write_escaped(self, data: bytes) -> None:
        """Write a payload with every 0x00 escaped as 0x00 0xFF, then a 0x00 terminator."""
        self._buf.extend(data.replace(b"\x00", b"\x00\xff"))
        self._buf.append(0x00)

    def position(self) -> int:
        """Return the number of bytes written so far."""
        return len(self._buf)

    def to_bytes(self) -> bytes:
        """Return the accumulated bytes."""
        return bytes(self._buf)


class ByteReader:
    """Reads values front-to-back from a byte buffer.

    Read methods raise IndexError when the buffer does not hold enough bytes;
    the decoder turns that into a TruncatedError carrying the offset.

    Example:
        >>> reader = ByteReader(b'\\x01hello\\x00')
        >>> reader.read_byte()
        1
        >>> reader.read_escaped()
        b'hello'
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a reader over the given data.

        Args:
            data: Byte buffer to read
        """
        self._data = bytes(data)
        self._position = 0

    def peek(self, ahead: int = 0) -> int | None:
        """Return the byte ``ahead`` positions past the cursor without consuming it.

        Returns:
            The byte value, or None past the end of the buffer
        """
        index = self._position + ahead
        if index >= len(self._data):
            return None
        return self._data[index]

    def read_byte(self) -> int:
        """Read a single byte.

        Raises:
            IndexError: If no more bytes are available
        """
        if self._position >= len(self._data):
            raise IndexError("Attempted to read past end of buffer")

        value = self._data[self._position]
        self._position += 1
        return value

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes raw bytes.

        Raises:
            IndexError: If not enough bytes are available
        """
        if self._position + num_bytes > len(self._data):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )

        result = self._data[self._position : self._position + num_bytes]
        self._position += num_bytes
        return result

    def read_uint(self, num_bytes: int) -> int:
        """Read a big-endian unsigned integer of num_bytes bytes.

        Raises:
            IndexError: If not enough bytes are available
        """
        return int.from_bytes(self.read_bytes(num_bytes), "big")

    def read_escaped(self) -> bytes:
        """Read an escaped payload up to its unescaped 0x00 terminator.

        The terminator is consumed; 0x00 0xFF pairs are unescaped to 0x00.

        Raises:
            IndexError: If the buffer ends before the terminator
        """
        data = self._data
        start = self._position
        pos = start
        while True:
            end = data.find(b"\x00", pos)
            if end < 0:
                raise IndexError("Unterminated byte string")
            if end + 1 < len(data) and data[end + 1] == 0xFF:
                pos = end + 2
                continue
            self._position = end + 1
            return data[start:end].replace(b"\x00\xff", b"\x00")

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def at_end(self) -> bool:
        """Return True if every byte has been consumed."""
        return self._position >= len(self._data)

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position
