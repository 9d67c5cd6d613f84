from collections.abc import Callable

import pytest

from openpgp_codec.models import (
    DSAPublicKey,
    KeyAlgorithm,
    LiteralDataPacket,
    PublicKeyPacket,
    RSAPublicKey,
    RSASecretKey,
    SecretKeyPacket,
    SecretKeyProtection,
    Unprotected,
)
from openpgp_codec.tests.vectors import (
    DSA_G,
    DSA_P,
    DSA_Q,
    DSA_Y,
    KEY_TIMESTAMP,
    RSA_E,
    RSA_N,
)


@pytest.fixture
def rsa_public_key() -> PublicKeyPacket:
    return PublicKeyPacket(
        timestamp=KEY_TIMESTAMP,
        algorithm=KeyAlgorithm.RSA,
        material=RSAPublicKey(n=RSA_N, e=RSA_E),
    )


@pytest.fixture
def dsa_public_key() -> PublicKeyPacket:
    return PublicKeyPacket(
        timestamp=KEY_TIMESTAMP,
        algorithm=KeyAlgorithm.DSA,
        material=DSAPublicKey(p=DSA_P, q=DSA_Q, g=DSA_G, y=DSA_Y),
    )


@pytest.fixture
def make_secret_key() -> Callable[..., SecretKeyPacket]:
    def _make(protection: SecretKeyProtection | None = None) -> SecretKeyPacket:
        if protection is None:
            protection = Unprotected(
                secret=RSASecretKey(d=0x1234, p=0x0B, q=0x0D, u=0x05),
                checksum=b"\x01\x02",
            )
        return SecretKeyPacket(
            timestamp=KEY_TIMESTAMP,
            algorithm=KeyAlgorithm.RSA,
            material=RSAPublicKey(n=RSA_N, e=RSA_E),
            protection=protection,
        )

    return _make


@pytest.fixture
def make_literal_data() -> Callable[..., LiteralDataPacket]:
    def _make(
        content: bytes = b"hello, world\n",
        filename: str = "test.txt",
        data_format: str = "b",
        timestamp: int = 1700000000,
    ) -> LiteralDataPacket:
        return LiteralDataPacket(
            format=data_format,
            filename=filename,
            timestamp=timestamp,
            content=content,
        )

    return _make
