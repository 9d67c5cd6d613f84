"""
Packet header parsing and encoding (RFC 4880 section 4.2).

Old-format headers carry the tag in bits 5-2 and a length type in bits 1-0;
new-format headers carry the tag in bits 5-0 followed by a variable-length
length field.
"""

from dataclasses import dataclass

from openpgp_codec.core.reader import ByteReader
from openpgp_codec.exceptions import InvalidPacketHeader, UnsupportedLengthEncoding

_MAX_ONE_OCTET_LENGTH = 191
_MAX_TWO_OCTET_LENGTH = 8383
_MAX_FIVE_OCTET_LENGTH = 0xFFFFFFFF
_MAX_NEW_FORMAT_TAG = 0x3F


@dataclass(frozen=True, kw_only=True)
class PacketHeader:
    """
    Attributes:
        tag: Packet tag value.
        length: Body length in bytes.
        new_format: Whether the header used the new format.
        indeterminate: Old-format length type 3; the body is the rest of the scope.
    """

    tag: int
    length: int
    new_format: bool
    indeterminate: bool = False


def read_packet_header(reader: ByteReader) -> PacketHeader:
    """
    Read a packet header.

    An old-format indeterminate length resolves to every byte remaining in
    the reader, so such a packet is only well defined as the last one in its
    scope.

    Raises:
        InvalidPacketHeader: If the tag octet lacks its high bit.
        UnsupportedLengthEncoding: For new-format partial body lengths.
        TruncatedInput: If the length field is cut short.
    """
    first_byte = reader.read_byte()

    if _is_new_format_packet(first_byte):
        packet_tag = first_byte & 0x3F
        return PacketHeader(tag=packet_tag, length=_read_new_format_length(reader), new_format=True)

    if _is_old_format_packet(first_byte):
        packet_tag = (first_byte & 0x3C) >> 2
        length_type = first_byte & 0x03
        if length_type == 3:
            return PacketHeader(
                tag=packet_tag, length=reader.remaining, new_format=False, indeterminate=True
            )
        return PacketHeader(
            tag=packet_tag, length=_read_old_format_length(reader, length_type), new_format=False
        )

    raise InvalidPacketHeader(first_byte)


def _is_new_format_packet(first_byte: int) -> bool:
    return (first_byte & 0xC0) == 0xC0


def _is_old_format_packet(first_byte: int) -> bool:
    return (first_byte & 0x80) == 0x80


def _read_new_format_length(reader: ByteReader) -> int:
    first_byte = reader.read_byte()

    if first_byte < 192:
        return first_byte

    if first_byte < 224:
        return ((first_byte - 192) << 8) + reader.read_byte() + 192

    if first_byte == 255:
        return reader.read_uint32()

    raise UnsupportedLengthEncoding(first_byte)


def _read_old_format_length(reader: ByteReader, length_type: int) -> int:
    if length_type == 0:
        return reader.read_byte()
    if length_type == 1:
        return reader.read_uint16()
    return reader.read_uint32()


def decode_new_length(data: bytes) -> int:
    """Decode a standalone new-format length field."""
    return _read_new_format_length(ByteReader(data))


def encode_new_length(length: int) -> bytes:
    """
    Encode a body length in the shortest new-format form.

    Raises:
        ValueError: If the length is negative or does not fit in 32 bits.
    """
    if length < 0:
        msg = f"Packet length must be non-negative, got {length}"
        raise ValueError(msg)

    if length <= _MAX_ONE_OCTET_LENGTH:
        return bytes([length])

    if length <= _MAX_TWO_OCTET_LENGTH:
        length -= 192
        return bytes([(length >> 8) + 192, length & 0xFF])

    if length <= _MAX_FIVE_OCTET_LENGTH:
        return b"\xff" + length.to_bytes(4, "big")

    msg = f"Packet length too large: {length}"
    raise ValueError(msg)


def encode_header(tag: int, length: int) -> bytes:
    """Encode a new-format packet header."""
    if not 0 <= tag <= _MAX_NEW_FORMAT_TAG:
        msg = f"Packet tag out of range: {tag}"
        raise ValueError(msg)
    return bytes([0xC0 | tag]) + encode_new_length(length)
