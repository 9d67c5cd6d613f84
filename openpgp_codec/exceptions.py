"""
OpenPGP codec exception hierarchy.

All exceptions inherit from OpenPGPError for easy catching. A failure anywhere
inside a message aborts decoding of the whole message.
"""

from typing import Any


class OpenPGPError(Exception):
    """Base exception for all openpgp_codec errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class UnknownAlgorithmCode(OpenPGPError):
    """An algorithm octet is not in the corresponding code table."""

    def __init__(self, code: int, *, kind: str) -> None:
        super().__init__(f"Unknown {kind} algorithm code: {code}", code=code)
        self.code = code
        self.kind = kind


class UnsupportedPacketVersion(OpenPGPError):
    """Packet version is not handled by this operation."""

    def __init__(self, version: int | None, *, packet: str) -> None:
        super().__init__(f"Unsupported {packet} version: {version}", version=version)
        self.version = version
        self.packet = packet


class UnimplementedPacketTag(OpenPGPError):
    """Packet tag has no decoder."""

    def __init__(self, tag: int) -> None:
        super().__init__(f"Unimplemented OpenPGP packet tag: {tag}", tag=tag)
        self.tag = tag


class UnsupportedKeyAlgorithm(OpenPGPError):
    """Key algorithm has no key material layout."""

    def __init__(self, algorithm: Any) -> None:
        name = getattr(algorithm, "name", algorithm)
        super().__init__(f"Unsupported key algorithm: {name}", algorithm=int(algorithm))
        self.algorithm = algorithm


class TruncatedInput(OpenPGPError):
    """Fewer bytes are available than a field or length requires."""

    def __init__(self, *, needed: int, available: int) -> None:
        super().__init__("Truncated input", needed=needed, available=available)
        self.needed = needed
        self.available = available


class UnsupportedLengthEncoding(OpenPGPError):
    """New-format partial body length."""

    def __init__(self, octet: int) -> None:
        super().__init__("Partial body length not supported", octet=octet)
        self.octet = octet


class InvalidPacketHeader(OpenPGPError):
    """Tag octet does not have its high bit set."""

    def __init__(self, octet: int) -> None:
        super().__init__(f"Invalid packet header: 0x{octet:02x}")
        self.octet = octet


class DecompressionError(OpenPGPError):
    """Compressed payload is corrupt, truncated or followed by trailing bytes."""

    def __init__(self, message: str, *, algorithm: str) -> None:
        super().__init__(message, algorithm=algorithm)
        self.algorithm = algorithm


class MessageLimitExceeded(OpenPGPError):
    """Nested messages are too deep or decompress to too many bytes."""

    def __init__(self, message: str, *, limit: int, value: int) -> None:
        super().__init__(message, limit=limit, value=value)
        self.limit = limit
        self.value = value
