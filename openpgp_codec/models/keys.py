"""
Key material and secret key protection models.

Each key algorithm has its own material type carrying exactly the MPI fields
RFC 4880 section 5.5.2/5.5.3 requires, in wire order.
"""

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import ClassVar, Self

from openpgp_codec.exceptions import UnsupportedKeyAlgorithm
from openpgp_codec.models.algorithms import HashAlgorithm, KeyAlgorithm


class _KeyMaterial:
    FIELDS: ClassVar[tuple[str, ...]] = ()

    def mpis(self) -> tuple[int, ...]:
        """MPI values in wire order."""
        return tuple(getattr(self, name) for name in self.FIELDS)

    def as_dict(self) -> dict[str, int]:
        """Single-letter field name to integer mapping."""
        return {name: getattr(self, name) for name in self.FIELDS}

    @classmethod
    def from_mpis(cls, values: tuple[int, ...]) -> Self:
        return cls(**dict(zip(cls.FIELDS, values, strict=True)))

    def __post_init__(self) -> None:
        for field in fields(self):  # type: ignore[arg-type]
            if getattr(self, field.name) < 0:
                msg = f"MPI field {field.name} must be non-negative"
                raise ValueError(msg)


@dataclass(frozen=True, kw_only=True)
class RSAPublicKey(_KeyMaterial):
    FIELDS: ClassVar[tuple[str, ...]] = ("n", "e")

    n: int
    e: int


@dataclass(frozen=True, kw_only=True)
class ElGamalPublicKey(_KeyMaterial):
    FIELDS: ClassVar[tuple[str, ...]] = ("p", "g", "y")

    p: int
    g: int
    y: int


@dataclass(frozen=True, kw_only=True)
class DSAPublicKey(_KeyMaterial):
    FIELDS: ClassVar[tuple[str, ...]] = ("p", "q", "g", "y")

    p: int
    q: int
    g: int
    y: int


@dataclass(frozen=True, kw_only=True)
class RSASecretKey(_KeyMaterial):
    FIELDS: ClassVar[tuple[str, ...]] = ("d", "p", "q", "u")

    d: int
    p: int
    q: int
    u: int


@dataclass(frozen=True, kw_only=True)
class ElGamalSecretKey(_KeyMaterial):
    FIELDS: ClassVar[tuple[str, ...]] = ("x",)

    x: int


@dataclass(frozen=True, kw_only=True)
class DSASecretKey(_KeyMaterial):
    FIELDS: ClassVar[tuple[str, ...]] = ("x",)

    x: int


PublicKeyMaterial = RSAPublicKey | ElGamalPublicKey | DSAPublicKey
SecretKeyMaterial = RSASecretKey | ElGamalSecretKey | DSASecretKey


def public_material_type(algorithm: KeyAlgorithm) -> type[PublicKeyMaterial]:
    """
    Select the public key material type for an algorithm.

    Raises:
        UnsupportedKeyAlgorithm: For ECC, ECDSA and DH keys.
    """
    if algorithm.is_rsa:
        return RSAPublicKey
    match algorithm:
        case KeyAlgorithm.ELGAMAL:
            return ElGamalPublicKey
        case KeyAlgorithm.DSA:
            return DSAPublicKey
        case _:
            raise UnsupportedKeyAlgorithm(algorithm)


def secret_material_type(algorithm: KeyAlgorithm) -> type[SecretKeyMaterial]:
    """
    Select the secret key material type for an algorithm.

    Raises:
        UnsupportedKeyAlgorithm: For ECC, ECDSA and DH keys.
    """
    if algorithm.is_rsa:
        return RSASecretKey
    match algorithm:
        case KeyAlgorithm.ELGAMAL:
            return ElGamalSecretKey
        case KeyAlgorithm.DSA:
            return DSASecretKey
        case _:
            raise UnsupportedKeyAlgorithm(algorithm)


class S2KType(IntEnum):
    """String-to-key specifier types (RFC 4880 section 3.7.1)."""

    SIMPLE = 0
    SALTED = 1
    ITERATED_SALTED = 3


@dataclass(frozen=True, kw_only=True)
class Unprotected:
    """
    Cleartext secret key material.

    Attributes:
        secret: Secret MPI fields.
        checksum: Trailing checksum or hash bytes, kept verbatim and unverified.
    """

    secret: SecretKeyMaterial
    checksum: bytes = b""


@dataclass(frozen=True, kw_only=True)
class LegacyCipher:
    """Secret material encrypted with a bare cipher id (s2k usage 1..253)."""

    cipher_id: int
    ciphertext: bytes

    def __post_init__(self) -> None:
        if not 0 < self.cipher_id < 254:
            msg = f"Legacy cipher id must be in 1..253, got {self.cipher_id}"
            raise ValueError(msg)


@dataclass(frozen=True, kw_only=True)
class S2KProtected:
    """
    Secret material encrypted with an S2K-derived key (s2k usage 254 or 255).

    Attributes:
        usage: 254 (SHA-1 integrity hash) or 255 (two-octet checksum).
        cipher_id: Symmetric cipher identifier.
        s2k_type: String-to-key specifier type.
        hash_algorithm: Hash used by the S2K function.
        salt: Eight-octet salt, present for salted and iterated types.
        iterations: Expanded iteration count, present for the iterated type.
        ciphertext: Encrypted secret MPIs and checksum, opaque.
    """

    usage: int
    cipher_id: int
    s2k_type: int
    hash_algorithm: HashAlgorithm
    salt: bytes | None = None
    iterations: int | None = None
    ciphertext: bytes = b""

    def __post_init__(self) -> None:
        if self.usage not in (254, 255):
            msg = f"S2K usage must be 254 or 255, got {self.usage}"
            raise ValueError(msg)
        salted = self.s2k_type in (S2KType.SALTED, S2KType.ITERATED_SALTED)
        if salted != (self.salt is not None):
            msg = f"S2K type {self.s2k_type} {'requires' if salted else 'does not take'} a salt"
            raise ValueError(msg)
        if self.salt is not None and len(self.salt) != 8:
            msg = f"S2K salt must be 8 bytes, got {len(self.salt)}"
            raise ValueError(msg)
        iterated = self.s2k_type == S2KType.ITERATED_SALTED
        if iterated != (self.iterations is not None):
            msg = f"S2K type {self.s2k_type} {'requires' if iterated else 'does not take'} an iteration count"
            raise ValueError(msg)


SecretKeyProtection = Unprotected | LegacyCipher | S2KProtected
