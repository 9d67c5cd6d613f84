"""
MPI (Multi-Precision Integer) codec.

MPI format: [bit_count(2 bytes)] + [minimal big-endian magnitude]
"""

from openpgp_codec.core.reader import ByteReader

_MAX_MPI_BITS = 0xFFFF


def encode_mpi(value: int) -> bytes:
    """
    Encode a non-negative integer as an MPI.

    Zero encodes as a zero bit count with no magnitude bytes.

    Raises:
        ValueError: If the value is negative or longer than 65535 bits.
    """
    if value < 0:
        msg = f"MPI value must be non-negative, got {value}"
        raise ValueError(msg)

    bit_count = value.bit_length()
    if bit_count > _MAX_MPI_BITS:
        msg = f"MPI too large: {bit_count} bits"
        raise ValueError(msg)

    magnitude = value.to_bytes((bit_count + 7) // 8, "big")
    return bit_count.to_bytes(2, "big") + magnitude


def read_mpi(reader: ByteReader) -> int:
    """
    Read one MPI from the reader.

    Raises:
        TruncatedInput: If the declared magnitude runs past the data.
    """
    bit_count = reader.read_uint16()
    byte_count = (bit_count + 7) // 8
    return int.from_bytes(reader.read(byte_count), "big")


def decode_mpi(data: bytes) -> tuple[int, int]:
    """
    Parse an MPI from the start of a buffer.

    Returns:
        Tuple of (value, total_bytes_consumed).
    """
    reader = ByteReader(data)
    value = read_mpi(reader)
    return value, reader.offset


def mpi_magnitude(value: int) -> bytes:
    """Encoded MPI without its two-byte bit count."""
    return encode_mpi(value)[2:]
