"""
Compressed Data packet payload transforms.

ZIP is raw deflate, ZLIB is deflate with zlib framing, BZIP2 is bzip2.
Decompression is bounded so a small payload cannot expand without limit.
"""

import bz2
import zlib

import structlog

from openpgp_codec.exceptions import (
    DecompressionError,
    MessageLimitExceeded,
    UnknownAlgorithmCode,
)
from openpgp_codec.models.algorithms import CompressionAlgorithm

logger = structlog.get_logger(__name__)

_RAW_DEFLATE_WBITS = -zlib.MAX_WBITS


def compress(algorithm: CompressionAlgorithm, data: bytes) -> bytes:
    """Compress a payload with the given algorithm."""
    match algorithm:
        case CompressionAlgorithm.UNCOMPRESSED:
            return bytes(data)
        case CompressionAlgorithm.ZIP:
            compressor = zlib.compressobj(wbits=_RAW_DEFLATE_WBITS)
            return compressor.compress(data) + compressor.flush()
        case CompressionAlgorithm.ZLIB:
            return zlib.compress(data)
        case CompressionAlgorithm.BZIP2:
            return bz2.compress(data)
    raise UnknownAlgorithmCode(int(algorithm), kind="compression")


def decompress(algorithm: CompressionAlgorithm, data: bytes, *, max_size: int) -> bytes:
    """
    Decompress a payload, refusing to produce more than `max_size` bytes.

    Args:
        algorithm: Compression algorithm from the packet.
        data: Compressed payload.
        max_size: Maximum decompressed size.

    Returns:
        Decompressed bytes.

    Raises:
        DecompressionError: If the payload is corrupt, truncated or followed
            by trailing bytes.
        MessageLimitExceeded: If the payload expands beyond `max_size`.
    """
    match algorithm:
        case CompressionAlgorithm.UNCOMPRESSED:
            result = bytes(data)
            _check_size(len(result), max_size)
        case CompressionAlgorithm.ZIP:
            result = _inflate(zlib.decompressobj(_RAW_DEFLATE_WBITS), data, max_size, algorithm)
        case CompressionAlgorithm.ZLIB:
            result = _inflate(zlib.decompressobj(), data, max_size, algorithm)
        case CompressionAlgorithm.BZIP2:
            result = _bunzip(data, max_size)
        case _:
            raise UnknownAlgorithmCode(int(algorithm), kind="compression")

    logger.debug(
        "Decompressed payload",
        algorithm=algorithm.name,
        compressed_size=len(data),
        size=len(result),
    )
    return result


def _check_size(size: int, max_size: int) -> None:
    if size > max_size:
        msg = "Decompressed payload exceeds size limit"
        raise MessageLimitExceeded(msg, limit=max_size, value=size)


def _inflate(
    decompressor: "zlib._Decompress",
    data: bytes,
    max_size: int,
    algorithm: CompressionAlgorithm,
) -> bytes:
    try:
        result = decompressor.decompress(data, max_size + 1)
    except zlib.error as e:
        msg = f"Corrupt {algorithm.name} payload: {e}"
        raise DecompressionError(msg, algorithm=algorithm.name) from e

    _check_size(len(result), max_size)
    if not decompressor.eof:
        msg = f"Truncated {algorithm.name} payload"
        raise DecompressionError(msg, algorithm=algorithm.name)
    if decompressor.unused_data:
        msg = f"Trailing data after {algorithm.name} payload"
        raise DecompressionError(msg, algorithm=algorithm.name)
    return result


def _bunzip(data: bytes, max_size: int) -> bytes:
    name = CompressionAlgorithm.BZIP2.name
    decompressor = bz2.BZ2Decompressor()
    try:
        result = decompressor.decompress(data, max_size + 1)
    except (OSError, ValueError) as e:
        msg = f"Corrupt {name} payload: {e}"
        raise DecompressionError(msg, algorithm=name) from e

    _check_size(len(result), max_size)
    if not decompressor.eof:
        msg = f"Truncated {name} payload"
        raise DecompressionError(msg, algorithm=name)
    if decompressor.unused_data:
        msg = f"Trailing data after {name} payload"
        raise DecompressionError(msg, algorithm=name)
    return result
