"""
OpenPGP packet and message models.

Packet is a tagged union: each variant is a frozen dataclass carrying only its
own fields, with the wire tag as a class attribute.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar, Self

from openpgp_codec.models.algorithms import (
    CompressionAlgorithm,
    HashAlgorithm,
    KeyAlgorithm,
    PacketTag,
)
from openpgp_codec.models.keys import (
    PublicKeyMaterial,
    SecretKeyMaterial,
    SecretKeyProtection,
    Unprotected,
    public_material_type,
    secret_material_type,
)

_KEY_ID_LENGTH = 16
_HEX_DIGITS = frozenset("0123456789abcdef")
_MAX_UINT32 = 0xFFFFFFFF


def _validate_timestamp(timestamp: int) -> None:
    if not 0 <= timestamp <= _MAX_UINT32:
        msg = f"Timestamp must fit in 32 bits, got {timestamp}"
        raise ValueError(msg)


@dataclass(frozen=True, kw_only=True)
class OnePassSignaturePacket:
    """
    One-Pass Signature packet (tag 4).

    Announces a signature that follows the data it covers.
    """

    tag: ClassVar[PacketTag] = PacketTag.ONE_PASS_SIGNATURE

    version: int
    signature_type: int
    hash_algorithm: HashAlgorithm
    key_algorithm: KeyAlgorithm
    key_id: str  # 16 lowercase hex digits
    nested: int

    def __post_init__(self) -> None:
        if len(self.key_id) != _KEY_ID_LENGTH or not set(self.key_id) <= _HEX_DIGITS:
            msg = f"Key id must be {_KEY_ID_LENGTH} lowercase hex digits, got {self.key_id!r}"
            raise ValueError(msg)


@dataclass(frozen=True, kw_only=True)
class PublicKeyPacket:
    """
    Public-Key packet (tag 6).

    Only version 4 packets are decoded; versions 2 and 3 may be constructed
    for fingerprinting.
    """

    tag: ClassVar[PacketTag] = PacketTag.PUBLIC_KEY

    version: int = 4
    timestamp: int
    algorithm: KeyAlgorithm
    material: PublicKeyMaterial

    def __post_init__(self) -> None:
        _validate_timestamp(self.timestamp)
        expected = public_material_type(self.algorithm)
        if not isinstance(self.material, expected):
            msg = f"{self.algorithm.name} requires {expected.__name__} material"
            raise ValueError(msg)

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)


@dataclass(frozen=True, kw_only=True)
class SecretKeyPacket:
    """
    Secret-Key packet (tag 5).

    The public portion is laid out exactly as a Public-Key packet; the
    protection variant describes how the secret portion is stored.
    """

    tag: ClassVar[PacketTag] = PacketTag.SECRET_KEY

    version: int = 4
    timestamp: int
    algorithm: KeyAlgorithm
    material: PublicKeyMaterial
    protection: SecretKeyProtection

    def __post_init__(self) -> None:
        _validate_timestamp(self.timestamp)
        expected = public_material_type(self.algorithm)
        if not isinstance(self.material, expected):
            msg = f"{self.algorithm.name} requires {expected.__name__} material"
            raise ValueError(msg)
        if isinstance(self.protection, Unprotected):
            expected_secret = secret_material_type(self.algorithm)
            if not isinstance(self.protection.secret, expected_secret):
                msg = f"{self.algorithm.name} requires {expected_secret.__name__} secret material"
                raise ValueError(msg)

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    @property
    def secret(self) -> SecretKeyMaterial | None:
        """Cleartext secret material, or None when the key is protected."""
        if isinstance(self.protection, Unprotected):
            return self.protection.secret
        return None

    def public_key(self) -> PublicKeyPacket:
        """Return the public portion as a standalone Public-Key packet."""
        return PublicKeyPacket(
            version=self.version,
            timestamp=self.timestamp,
            algorithm=self.algorithm,
            material=self.material,
        )


@dataclass(frozen=True, kw_only=True)
class CompressedDataPacket:
    """Compressed Data packet (tag 8), holding a nested message."""

    tag: ClassVar[PacketTag] = PacketTag.COMPRESSED_DATA

    algorithm: CompressionAlgorithm
    message: "Message"


@dataclass(frozen=True, kw_only=True)
class LiteralDataPacket:
    """
    Literal Data packet (tag 11).

    Attributes:
        format: Content type octet as a character ('b', 't', 'u', ...).
        filename: Suggested file name, at most 255 bytes once UTF-8 encoded.
        timestamp: Modification time in seconds since the epoch.
        content: Literal data, opaque.
    """

    tag: ClassVar[PacketTag] = PacketTag.LITERAL_DATA

    format: str
    filename: str
    timestamp: int
    content: bytes

    def __post_init__(self) -> None:
        if len(self.format) != 1 or ord(self.format) > 0xFF:
            msg = f"Literal data format must be a single octet, got {self.format!r}"
            raise ValueError(msg)
        _validate_timestamp(self.timestamp)


@dataclass(frozen=True, kw_only=True)
class UserIDPacket:
    """User ID packet (tag 13)."""

    tag: ClassVar[PacketTag] = PacketTag.USER_ID

    user_id: str


Packet = (
    OnePassSignaturePacket
    | PublicKeyPacket
    | SecretKeyPacket
    | CompressedDataPacket
    | LiteralDataPacket
    | UserIDPacket
)


@dataclass(frozen=True)
class Message:
    """
    An ordered sequence of packets.

    Order is meaningful: a one-pass signature precedes the data it covers.
    """

    packets: tuple[Packet, ...] = ()

    @classmethod
    def of(cls, *packets: Packet) -> Self:
        return cls(tuple(packets))

    def __iter__(self) -> Iterator[Packet]:
        return iter(self.packets)

    def __len__(self) -> int:
        return len(self.packets)

    def __getitem__(self, index: int) -> Packet:
        return self.packets[index]
