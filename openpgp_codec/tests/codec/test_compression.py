import bz2
import zlib

import pytest

from openpgp_codec.codec.compression import compress, decompress
from openpgp_codec.exceptions import DecompressionError, MessageLimitExceeded, UnknownAlgorithmCode
from openpgp_codec.models.algorithms import CompressionAlgorithm

_PAYLOAD = b"OpenPGP compressed payload " * 40
_LIMIT = 1024 * 1024


@pytest.mark.parametrize("algorithm", list(CompressionAlgorithm))
def test_decompress_reverses_compress(algorithm: CompressionAlgorithm) -> None:
    compressed = compress(algorithm, _PAYLOAD)

    assert decompress(algorithm, compressed, max_size=_LIMIT) == _PAYLOAD


def test_compress_zip_is_raw_deflate() -> None:
    compressed = compress(CompressionAlgorithm.ZIP, _PAYLOAD)

    assert zlib.decompress(compressed, -zlib.MAX_WBITS) == _PAYLOAD


def test_compress_zlib_has_zlib_framing() -> None:
    compressed = compress(CompressionAlgorithm.ZLIB, _PAYLOAD)

    assert zlib.decompress(compressed) == _PAYLOAD


def test_decompress_bzip2_reads_standard_stream() -> None:
    assert decompress(CompressionAlgorithm.BZIP2, bz2.compress(_PAYLOAD), max_size=_LIMIT) == _PAYLOAD


def test_decompress_uncompressed_is_identity() -> None:
    assert decompress(CompressionAlgorithm.UNCOMPRESSED, b"as-is", max_size=_LIMIT) == b"as-is"


@pytest.mark.parametrize("algorithm", list(CompressionAlgorithm))
def test_decompress_enforces_size_limit(algorithm: CompressionAlgorithm) -> None:
    compressed = compress(algorithm, bytes(10_000))

    with pytest.raises(MessageLimitExceeded, match="exceeds size limit") as exc_info:
        decompress(algorithm, compressed, max_size=1000)

    assert exc_info.value.limit == 1000


def test_decompress_accepts_payload_exactly_at_limit() -> None:
    compressed = compress(CompressionAlgorithm.ZLIB, bytes(1000))

    assert decompress(CompressionAlgorithm.ZLIB, compressed, max_size=1000) == bytes(1000)


@pytest.mark.parametrize(
    "algorithm",
    [CompressionAlgorithm.ZIP, CompressionAlgorithm.ZLIB, CompressionAlgorithm.BZIP2],
)
def test_decompress_raises_on_corrupt_payload(algorithm: CompressionAlgorithm) -> None:
    with pytest.raises(DecompressionError, match="Corrupt"):
        decompress(algorithm, b"\xff\xfe\xfd\xfc not compressed", max_size=_LIMIT)


@pytest.mark.parametrize(
    "algorithm",
    [CompressionAlgorithm.ZIP, CompressionAlgorithm.ZLIB, CompressionAlgorithm.BZIP2],
)
def test_decompress_raises_on_truncated_payload(algorithm: CompressionAlgorithm) -> None:
    compressed = compress(algorithm, _PAYLOAD)

    with pytest.raises(DecompressionError, match="Truncated"):
        decompress(algorithm, compressed[: len(compressed) // 2], max_size=_LIMIT)


@pytest.mark.parametrize(
    "algorithm",
    [CompressionAlgorithm.ZIP, CompressionAlgorithm.ZLIB, CompressionAlgorithm.BZIP2],
)
def test_decompress_rejects_trailing_bytes(algorithm: CompressionAlgorithm) -> None:
    compressed = compress(algorithm, _PAYLOAD) + b"trailing garbage"

    with pytest.raises(DecompressionError, match="Trailing data") as exc_info:
        decompress(algorithm, compressed, max_size=_LIMIT)

    assert exc_info.value.algorithm == algorithm.name


def test_decompress_rejects_concatenated_bzip2_streams() -> None:
    compressed = bz2.compress(b"first") + bz2.compress(b"second")

    with pytest.raises(DecompressionError, match="Trailing data"):
        decompress(CompressionAlgorithm.BZIP2, compressed, max_size=_LIMIT)


def test_compress_rejects_unknown_algorithm_code() -> None:
    with pytest.raises(UnknownAlgorithmCode, match="compression") as exc_info:
        compress(7, _PAYLOAD)  # type: ignore[arg-type]

    assert exc_info.value.code == 7


def test_decompress_rejects_unknown_algorithm_code() -> None:
    with pytest.raises(UnknownAlgorithmCode, match="compression"):
        decompress(110, _PAYLOAD, max_size=_LIMIT)  # type: ignore[arg-type]
