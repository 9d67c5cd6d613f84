"""
Domain models for OpenPGP packets.

These are immutable (frozen) dataclasses and enums mirroring the wire format.
"""

from openpgp_codec.models.algorithms import (
    CompressionAlgorithm,
    HashAlgorithm,
    KeyAlgorithm,
    PacketTag,
)
from openpgp_codec.models.keys import (
    DSAPublicKey,
    DSASecretKey,
    ElGamalPublicKey,
    ElGamalSecretKey,
    LegacyCipher,
    PublicKeyMaterial,
    RSAPublicKey,
    RSASecretKey,
    S2KProtected,
    S2KType,
    SecretKeyMaterial,
    SecretKeyProtection,
    Unprotected,
    public_material_type,
    secret_material_type,
)
from openpgp_codec.models.packets import (
    CompressedDataPacket,
    LiteralDataPacket,
    Message,
    OnePassSignaturePacket,
    Packet,
    PublicKeyPacket,
    SecretKeyPacket,
    UserIDPacket,
)

__all__ = [
    # Algorithms
    "HashAlgorithm",
    "KeyAlgorithm",
    "CompressionAlgorithm",
    "PacketTag",
    # Key material
    "RSAPublicKey",
    "ElGamalPublicKey",
    "DSAPublicKey",
    "RSASecretKey",
    "ElGamalSecretKey",
    "DSASecretKey",
    "PublicKeyMaterial",
    "SecretKeyMaterial",
    "public_material_type",
    "secret_material_type",
    # Protection
    "S2KType",
    "Unprotected",
    "LegacyCipher",
    "S2KProtected",
    "SecretKeyProtection",
    # Packets
    "Packet",
    "OnePassSignaturePacket",
    "PublicKeyPacket",
    "SecretKeyPacket",
    "CompressedDataPacket",
    "LiteralDataPacket",
    "UserIDPacket",
    "Message",
]
