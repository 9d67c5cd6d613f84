"""Bounded cursor over an immutable byte buffer."""

from openpgp_codec.exceptions import TruncatedInput


class ByteReader:
    """
    Sequential reader that never reads past the end of its buffer.

    Every read either returns exactly the requested number of bytes or raises
    TruncatedInput without advancing.
    """

    def __init__(self, data: bytes) -> None:
        """
        Args:
            data: Buffer to read from.
        """
        self._data = bytes(data)
        self._offset = 0

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._data) - self._offset

    @property
    def offset(self) -> int:
        return self._offset

    def is_empty(self) -> bool:
        return self._offset >= len(self._data)

    def read(self, count: int) -> bytes:
        """
        Read exactly `count` bytes.

        Raises:
            TruncatedInput: If fewer than `count` bytes remain.
        """
        if count > self.remaining:
            raise TruncatedInput(needed=count, available=self.remaining)
        chunk = self._data[self._offset : self._offset + count]
        self._offset += count
        return chunk

    def read_byte(self) -> int:
        return self.read(1)[0]

    def read_uint16(self) -> int:
        return int.from_bytes(self.read(2), "big")

    def read_uint32(self) -> int:
        return int.from_bytes(self.read(4), "big")

    def read_rest(self) -> bytes:
        """Read everything that is left (possibly nothing)."""
        return self.read(self.remaining)
