"""
Packet body decoders and encoders.

Each decoder works on the isolated body of one packet, so it cannot read past
the packet boundary. Compressed Data bodies hold a nested message and are
handled by the message codec.
"""

from collections.abc import Callable

from openpgp_codec.codec.mpi import encode_mpi, read_mpi
from openpgp_codec.core.reader import ByteReader
from openpgp_codec.exceptions import UnimplementedPacketTag, UnsupportedPacketVersion
from openpgp_codec.models.algorithms import HashAlgorithm, KeyAlgorithm, PacketTag
from openpgp_codec.models.keys import (
    LegacyCipher,
    PublicKeyMaterial,
    S2KProtected,
    S2KType,
    SecretKeyMaterial,
    SecretKeyProtection,
    Unprotected,
    public_material_type,
    secret_material_type,
)
from openpgp_codec.models.packets import (
    LiteralDataPacket,
    OnePassSignaturePacket,
    Packet,
    PublicKeyPacket,
    SecretKeyPacket,
    UserIDPacket,
)

_SUPPORTED_KEY_VERSION = 4
_KEY_ID_SIZE = 8
_SALT_SIZE = 8
_S2K_USAGE_CHECKSUM = 255
_S2K_USAGE_SHA1 = 254
_MAX_FILENAME_LENGTH = 255


def decode_body(tag: int, body: bytes) -> Packet:
    """
    Decode a packet body for the given tag.

    Args:
        tag: Packet tag from the header.
        body: Exactly the body bytes of the packet.

    Returns:
        The decoded packet.

    Raises:
        UnimplementedPacketTag: If the tag has no decoder here.
        TruncatedInput: If a field runs past the end of the body.
    """
    decoder = _BODY_DECODERS.get(tag)
    if decoder is None:
        raise UnimplementedPacketTag(tag)
    return decoder(ByteReader(body))


def _read_one_pass_signature(reader: ByteReader) -> OnePassSignaturePacket:
    version = reader.read_byte()
    signature_type = reader.read_byte()
    hash_algorithm = HashAlgorithm.from_code(reader.read_byte())
    key_algorithm = KeyAlgorithm.from_code(reader.read_byte())
    key_id = reader.read(_KEY_ID_SIZE).hex()
    nested = reader.read_byte()
    return OnePassSignaturePacket(
        version=version,
        signature_type=signature_type,
        hash_algorithm=hash_algorithm,
        key_algorithm=key_algorithm,
        key_id=key_id,
        nested=nested,
    )


def _read_key_fields(
    reader: ByteReader, packet: str
) -> tuple[int, KeyAlgorithm, PublicKeyMaterial]:
    version = reader.read_byte()
    if version != _SUPPORTED_KEY_VERSION:
        raise UnsupportedPacketVersion(version, packet=packet)

    timestamp = reader.read_uint32()
    algorithm = KeyAlgorithm.from_code(reader.read_byte())
    material_type = public_material_type(algorithm)
    material = material_type.from_mpis(tuple(read_mpi(reader) for _ in material_type.FIELDS))
    return timestamp, algorithm, material


def _read_public_key(reader: ByteReader) -> PublicKeyPacket:
    timestamp, algorithm, material = _read_key_fields(reader, "public key")
    return PublicKeyPacket(timestamp=timestamp, algorithm=algorithm, material=material)


def _read_secret_key(reader: ByteReader) -> SecretKeyPacket:
    timestamp, algorithm, material = _read_key_fields(reader, "secret key")
    protection = _read_protection(reader, algorithm)
    return SecretKeyPacket(
        timestamp=timestamp,
        algorithm=algorithm,
        material=material,
        protection=protection,
    )


def _read_protection(reader: ByteReader, algorithm: KeyAlgorithm) -> SecretKeyProtection:
    usage = reader.read_byte()

    if usage in (_S2K_USAGE_SHA1, _S2K_USAGE_CHECKSUM):
        cipher_id = reader.read_byte()
        s2k_type = reader.read_byte()
        hash_algorithm = HashAlgorithm.from_code(reader.read_byte())
        salt = None
        iterations = None
        if s2k_type in (S2KType.SALTED, S2KType.ITERATED_SALTED):
            salt = reader.read(_SALT_SIZE)
        if s2k_type == S2KType.ITERATED_SALTED:
            iterations = expand_s2k_count(reader.read_byte())
        return S2KProtected(
            usage=usage,
            cipher_id=cipher_id,
            s2k_type=s2k_type,
            hash_algorithm=hash_algorithm,
            salt=salt,
            iterations=iterations,
            ciphertext=reader.read_rest(),
        )

    if usage > 0:
        # Legacy form: the usage octet is the cipher id itself
        return LegacyCipher(cipher_id=usage, ciphertext=reader.read_rest())

    secret_type = secret_material_type(algorithm)
    secret = secret_type.from_mpis(tuple(read_mpi(reader) for _ in secret_type.FIELDS))
    return Unprotected(secret=secret, checksum=reader.read_rest())


def _read_literal_data(reader: ByteReader) -> LiteralDataPacket:
    data_format = chr(reader.read_byte())
    filename_length = reader.read_byte()
    filename = reader.read(filename_length).decode("utf-8", errors="replace")
    timestamp = reader.read_uint32()
    return LiteralDataPacket(
        format=data_format,
        filename=filename,
        timestamp=timestamp,
        content=reader.read_rest(),
    )


def _read_user_id(reader: ByteReader) -> UserIDPacket:
    return UserIDPacket(user_id=reader.read_rest().decode("utf-8", errors="replace"))


_BODY_DECODERS: dict[int, Callable[[ByteReader], Packet]] = {
    PacketTag.ONE_PASS_SIGNATURE: _read_one_pass_signature,
    PacketTag.SECRET_KEY: _read_secret_key,
    PacketTag.PUBLIC_KEY: _read_public_key,
    PacketTag.LITERAL_DATA: _read_literal_data,
    PacketTag.USER_ID: _read_user_id,
}


def expand_s2k_count(coded: int) -> int:
    """Expand a one-octet iterated S2K count (RFC 4880 section 3.7.1.3)."""
    return (16 + (coded & 0x0F)) << ((coded >> 4) + 6)


def encode_s2k_count(iterations: int) -> int:
    """
    Find the one-octet coded form of an iteration count.

    Raises:
        ValueError: If the count has no exact coded form.
    """
    for coded in range(256):
        if expand_s2k_count(coded) == iterations:
            return coded
    msg = f"Iteration count {iterations} has no one-octet encoding"
    raise ValueError(msg)


def encode_key_material(material: PublicKeyMaterial | SecretKeyMaterial) -> bytes:
    """Concatenated MPIs of key material in wire order."""
    return b"".join(encode_mpi(value) for value in material.mpis())


def encode_body(packet: Packet) -> bytes:
    """
    Encode the body of a packet (everything after the header).

    Raises:
        UnsupportedPacketVersion: For key packets other than version 4.
        ValueError: If a field cannot be represented on the wire.
    """
    match packet:
        case OnePassSignaturePacket():
            return _encode_one_pass_signature(packet)
        case PublicKeyPacket():
            return _encode_key_fields(packet, "public key")
        case SecretKeyPacket():
            return _encode_key_fields(packet, "secret key") + _encode_protection(packet.protection)
        case LiteralDataPacket():
            return _encode_literal_data(packet)
        case UserIDPacket():
            return packet.user_id.encode("utf-8")
    raise UnimplementedPacketTag(packet.tag)


def _encode_one_pass_signature(packet: OnePassSignaturePacket) -> bytes:
    return (
        bytes([packet.version, packet.signature_type, packet.hash_algorithm, packet.key_algorithm])
        + bytes.fromhex(packet.key_id)
        + bytes([packet.nested])
    )


def _encode_key_fields(packet: PublicKeyPacket | SecretKeyPacket, name: str) -> bytes:
    if packet.version != _SUPPORTED_KEY_VERSION:
        raise UnsupportedPacketVersion(packet.version, packet=name)
    return (
        bytes([packet.version])
        + packet.timestamp.to_bytes(4, "big")
        + bytes([packet.algorithm])
        + encode_key_material(packet.material)
    )


def _encode_protection(protection: SecretKeyProtection) -> bytes:
    match protection:
        case Unprotected():
            return b"\x00" + encode_key_material(protection.secret) + protection.checksum
        case LegacyCipher():
            return bytes([protection.cipher_id]) + protection.ciphertext
        case S2KProtected():
            encoded = bytes(
                [
                    protection.usage,
                    protection.cipher_id,
                    protection.s2k_type,
                    protection.hash_algorithm,
                ]
            )
            if protection.salt is not None:
                encoded += protection.salt
            if protection.iterations is not None:
                encoded += bytes([encode_s2k_count(protection.iterations)])
            return encoded + protection.ciphertext
    raise TypeError(protection)


def _encode_literal_data(packet: LiteralDataPacket) -> bytes:
    filename = packet.filename.encode("utf-8")
    if len(filename) > _MAX_FILENAME_LENGTH:
        msg = f"Literal data filename too long: {len(filename)} bytes"
        raise ValueError(msg)
    return (
        bytes([ord(packet.format), len(filename)])
        + filename
        + packet.timestamp.to_bytes(4, "big")
        + packet.content
    )
