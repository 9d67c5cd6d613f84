"""
Decoder configuration.
"""

from dataclasses import dataclass

_DEFAULT_MAX_DECOMPRESSED_SIZE = 64 * 1024 * 1024


@dataclass(frozen=True, kw_only=True)
class DecoderConfig:
    """
    Attributes:
        max_nesting_depth: Number of compressed data levels allowed below the
            top-level message. Zero rejects any compressed packet payload.
        max_decompressed_size: Maximum number of bytes all compressed
            payloads of one message may expand to, counted across sibling
            packets and nesting levels.
    """

    max_nesting_depth: int = 8
    max_decompressed_size: int = _DEFAULT_MAX_DECOMPRESSED_SIZE

    def __post_init__(self) -> None:
        if self.max_nesting_depth < 0:
            msg = "max_nesting_depth must be non-negative"
            raise ValueError(msg)
        if self.max_decompressed_size <= 0:
            msg = "max_decompressed_size must be positive"
            raise ValueError(msg)


DEFAULT_CONFIG = DecoderConfig()
