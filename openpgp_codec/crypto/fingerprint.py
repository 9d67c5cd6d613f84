"""
Key fingerprint and key id derivation (RFC 4880 section 12.2).

A V4 fingerprint is the SHA-1 hash of the octet 0x99, a two-octet length and
the public key packet body. A V3 fingerprint is the MD5 hash of the RSA
modulus and exponent magnitudes.
"""

import hashlib

from openpgp_codec.codec.mpi import mpi_magnitude
from openpgp_codec.codec.packets import encode_body
from openpgp_codec.exceptions import UnsupportedKeyAlgorithm, UnsupportedPacketVersion
from openpgp_codec.models.keys import RSAPublicKey
from openpgp_codec.models.packets import PublicKeyPacket

_V4_FINGERPRINT_PREFIX = b"\x99"
_KEY_ID_MASK = 0xFFFFFFFFFFFFFFFF


def fingerprint_material(packet: PublicKeyPacket) -> bytes:
    """
    Build the bytes hashed into a fingerprint.

    Raises:
        UnsupportedPacketVersion: For versions other than 2, 3 and 4, and
            for packets that are not Public-Key packets.
        UnsupportedKeyAlgorithm: For a version 2/3 key without RSA material.
    """
    _require_public_key(packet)

    match packet.version:
        case 4:
            body = encode_body(packet)
            return _V4_FINGERPRINT_PREFIX + len(body).to_bytes(2, "big") + body
        case 2 | 3:
            rsa = _legacy_rsa_material(packet)
            return mpi_magnitude(rsa.n) + mpi_magnitude(rsa.e)
        case _:
            raise UnsupportedPacketVersion(packet.version, packet="public key fingerprint")


def fingerprint(packet: PublicKeyPacket) -> str:
    """
    Compute the fingerprint of a public key as lowercase hex.

    Secret keys are fingerprinted through `SecretKeyPacket.public_key()`.
    """
    material = fingerprint_material(packet)
    if packet.version == 4:
        return hashlib.sha1(material).hexdigest()
    return hashlib.md5(material, usedforsecurity=False).hexdigest()


def key_id(packet: PublicKeyPacket) -> str:
    """
    Compute the 64-bit key id as 16 lowercase hex digits.

    V4 key ids are the low 64 bits of the fingerprint; V2/V3 key ids are the
    low 64 bits of the RSA modulus.
    """
    _require_public_key(packet)
    if packet.version in (2, 3):
        return f"{_legacy_rsa_material(packet).n & _KEY_ID_MASK:016x}"
    return fingerprint(packet)[-16:]


def _require_public_key(packet: object) -> None:
    if isinstance(packet, PublicKeyPacket):
        return
    raise UnsupportedPacketVersion(
        getattr(packet, "version", None), packet=f"{type(packet).__name__} fingerprint"
    )


def _legacy_rsa_material(packet: PublicKeyPacket) -> RSAPublicKey:
    if isinstance(packet.material, RSAPublicKey):
        return packet.material
    raise UnsupportedKeyAlgorithm(packet.algorithm)
