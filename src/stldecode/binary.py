"""Little-endian reader for binary STL data."""

from __future__ import annotations

__all__ = ["BinaryReader"]

import struct

from stldecode.exceptions import STLIncompleteError

_UINT32 = struct.Struct("<I")


class BinaryReader:
    """A cursor over an immutable byte buffer.

    All multi-byte values are read in little-endian order, regardless of the host.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        """Initialize the reader.

        :param data: The binary data to read from.
        """
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        """The current byte offset into the buffer."""
        return self._pos

    @property
    def remaining(self) -> int:
        """The number of unread bytes."""
        return len(self._data) - self._pos

    @property
    def data(self) -> bytes:
        """The underlying buffer."""
        return self._data

    def is_eof(self) -> bool:
        """Check whether all bytes have been consumed.

        :return: ``True`` if no bytes remain.
        """
        return self._pos >= len(self._data)

    def skip(self, count: int) -> None:
        """Advance the cursor without reading.

        :param count: The number of bytes to skip.
        :raises STLIncompleteError: If fewer than ``count`` bytes remain.
        """
        self._require(count)
        self._pos += count

    def read_bytes(self, count: int) -> bytes:
        """Read a fixed number of bytes.

        :param count: The number of bytes to read.
        :return: The bytes read.
        :raises STLIncompleteError: If fewer than ``count`` bytes remain.
        """
        self._require(count)
        start = self._pos
        self._pos += count
        return self._data[start : self._pos]

    def read_remaining(self) -> bytes:
        """Read all unread bytes.

        :return: The bytes from the cursor to the end of the buffer (may be empty).
        """
        result = self._data[self._pos :]
        self._pos = len(self._data)
        return result

    def read_uint32(self) -> int:
        """Read an unsigned little-endian 32-bit integer.

        :return: The integer read.
        :raises STLIncompleteError: If fewer than 4 bytes remain.
        """
        self._require(_UINT32.size)
        (value,) = _UINT32.unpack_from(self._data, self._pos)
        self._pos += _UINT32.size
        return value

    def _require(self, count: int) -> None:
        """Ensure that at least ``count`` bytes remain.

        :param count: The number of bytes required.
        :raises STLIncompleteError: If not enough bytes remain.
        """
        if self.remaining < count:
            raise STLIncompleteError(
                f"Unexpected end of stream. Expected {count} bytes, got {self.remaining}",
                needed=count - self.remaining,
                position=self._pos,
            )
