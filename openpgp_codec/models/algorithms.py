"""
OpenPGP algorithm and packet tag identifiers.

Each enum value is the one-octet wire code, so `int(member)` is its encoding.
"""

from enum import IntEnum
from typing import Self

from openpgp_codec.exceptions import UnknownAlgorithmCode


class HashAlgorithm(IntEnum):
    """OpenPGP hash algorithm identifiers (RFC 4880 section 9.4)."""

    MD5 = 1
    SHA1 = 2
    RIPEMD160 = 3
    SHA256 = 8
    SHA384 = 9
    SHA512 = 10
    SHA224 = 11

    @classmethod
    def from_code(cls, code: int) -> Self:
        try:
            return cls(code)
        except ValueError:
            raise UnknownAlgorithmCode(code, kind="hash") from None


class KeyAlgorithm(IntEnum):
    """OpenPGP public key algorithm identifiers (RFC 4880 section 9.1)."""

    RSA = 1
    RSA_ENCRYPT_ONLY = 2
    RSA_SIGN_ONLY = 3
    ELGAMAL = 16
    DSA = 17
    ECC = 18
    ECDSA = 19
    DH = 21

    @classmethod
    def from_code(cls, code: int) -> Self:
        try:
            return cls(code)
        except ValueError:
            raise UnknownAlgorithmCode(code, kind="public key") from None

    @property
    def is_rsa(self) -> bool:
        """RSA, RSA encrypt-only and RSA sign-only share one key layout."""
        match self:
            case self.RSA | self.RSA_ENCRYPT_ONLY | self.RSA_SIGN_ONLY:
                return True
            case _:
                return False


class CompressionAlgorithm(IntEnum):
    """OpenPGP compression algorithm identifiers (RFC 4880 section 9.3)."""

    UNCOMPRESSED = 0
    ZIP = 1
    ZLIB = 2
    BZIP2 = 3

    @classmethod
    def from_code(cls, code: int) -> Self:
        try:
            return cls(code)
        except ValueError:
            raise UnknownAlgorithmCode(code, kind="compression") from None


class PacketTag(IntEnum):
    """Packet tags with a decoder in this package."""

    ONE_PASS_SIGNATURE = 4
    SECRET_KEY = 5
    PUBLIC_KEY = 6
    COMPRESSED_DATA = 8
    LITERAL_DATA = 11
    USER_ID = 13
