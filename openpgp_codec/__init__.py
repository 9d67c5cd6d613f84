"""
OpenPGP message codec.

Decodes the RFC 4880 binary packet format into immutable models, encodes
them back, and derives key fingerprints.

Example:
    ```python
    from openpgp_codec import PublicKeyPacket, decode_message, fingerprint

    message = decode_message(key_bytes)
    for packet in message:
        if isinstance(packet, PublicKeyPacket):
            print(fingerprint(packet))
    ```
"""

from openpgp_codec.codec import decode_message, encode_message
from openpgp_codec.config import DecoderConfig
from openpgp_codec.crypto import fingerprint, key_id
from openpgp_codec.exceptions import (
    DecompressionError,
    InvalidPacketHeader,
    MessageLimitExceeded,
    OpenPGPError,
    TruncatedInput,
    UnimplementedPacketTag,
    UnknownAlgorithmCode,
    UnsupportedKeyAlgorithm,
    UnsupportedLengthEncoding,
    UnsupportedPacketVersion,
)
from openpgp_codec.models import (
    CompressedDataPacket,
    CompressionAlgorithm,
    HashAlgorithm,
    KeyAlgorithm,
    LiteralDataPacket,
    Message,
    OnePassSignaturePacket,
    Packet,
    PublicKeyPacket,
    SecretKeyPacket,
    UserIDPacket,
)

__version__ = "0.1.0"

__all__ = [
    # Codec
    "decode_message",
    "encode_message",
    "fingerprint",
    "key_id",
    "DecoderConfig",
    # Models
    "HashAlgorithm",
    "KeyAlgorithm",
    "CompressionAlgorithm",
    "Packet",
    "OnePassSignaturePacket",
    "PublicKeyPacket",
    "SecretKeyPacket",
    "CompressedDataPacket",
    "LiteralDataPacket",
    "UserIDPacket",
    "Message",
    # Exceptions
    "OpenPGPError",
    "UnknownAlgorithmCode",
    "UnsupportedPacketVersion",
    "UnimplementedPacketTag",
    "UnsupportedKeyAlgorithm",
    "TruncatedInput",
    "UnsupportedLengthEncoding",
    "InvalidPacketHeader",
    "DecompressionError",
    "MessageLimitExceeded",
]
