"""
Message codec.

A message is a back-to-back sequence of packets filling the whole buffer.
Compressed Data packets contain a nested message, decoded recursively with an
explicit depth counter and a decompression budget shared by the whole decode.
"""

from dataclasses import dataclass
from typing import Self

import structlog

from openpgp_codec.codec.compression import compress, decompress
from openpgp_codec.codec.header import encode_header, read_packet_header
from openpgp_codec.codec.packets import decode_body, encode_body
from openpgp_codec.config import DEFAULT_CONFIG, DecoderConfig
from openpgp_codec.core.reader import ByteReader
from openpgp_codec.exceptions import MessageLimitExceeded
from openpgp_codec.models.algorithms import CompressionAlgorithm, PacketTag
from openpgp_codec.models.packets import CompressedDataPacket, Message, Packet

logger = structlog.get_logger(__name__)


@dataclass(kw_only=True)
class DecompressionBudget:
    """
    Decompressed bytes allowed within one decode call.

    Shared by every Compressed Data packet of the message, siblings and
    nested levels alike.

    Attributes:
        limit: Total number of decompressed bytes allowed.
        used: Bytes produced so far.
    """

    limit: int
    used: int = 0

    @classmethod
    def from_config(cls, config: DecoderConfig) -> Self:
        return cls(limit=config.max_decompressed_size)

    @property
    def remaining(self) -> int:
        return self.limit - self.used


def decode_message(data: bytes, config: DecoderConfig | None = None) -> Message:
    """
    Decode a binary OpenPGP message.

    Args:
        data: Complete message bytes (not ASCII-armored).
        config: Decoder limits; defaults to DEFAULT_CONFIG.

    Returns:
        The decoded message, packets in wire order.

    Raises:
        OpenPGPError: If any packet fails to decode. No partial message is
            returned.
    """
    config = config or DEFAULT_CONFIG
    return _decode_message(data, config, 0, DecompressionBudget.from_config(config))


def _decode_message(
    data: bytes, config: DecoderConfig, depth: int, budget: DecompressionBudget
) -> Message:
    reader = ByteReader(data)
    packets: list[Packet] = []
    while not reader.is_empty():
        packets.append(read_packet(reader, config=config, depth=depth, budget=budget))

    logger.debug("Decoded message", packet_count=len(packets), depth=depth)
    return Message(tuple(packets))


def read_packet(
    reader: ByteReader,
    *,
    config: DecoderConfig = DEFAULT_CONFIG,
    depth: int = 0,
    budget: DecompressionBudget | None = None,
) -> Packet:
    """
    Read one packet (header and body) from the reader.

    The body is sliced out before decoding so a malformed body can never
    consume bytes belonging to the next packet.

    Args:
        reader: Reader positioned at a packet header.
        config: Decoder limits.
        depth: Nesting depth of the message being read.
        budget: Decompression budget to draw from. A fresh one sized from
            `config` is used when omitted.

    Raises:
        TruncatedInput: If the declared body length exceeds the data.
    """
    header = read_packet_header(reader)
    if header.indeterminate:
        logger.debug("Indeterminate length packet", tag=header.tag, length=header.length)

    body = reader.read(header.length)
    if header.tag == PacketTag.COMPRESSED_DATA:
        if budget is None:
            budget = DecompressionBudget.from_config(config)
        return _decode_compressed_data(body, config, depth, budget)
    return decode_body(header.tag, body)


def _decode_compressed_data(
    body: bytes, config: DecoderConfig, depth: int, budget: DecompressionBudget
) -> CompressedDataPacket:
    reader = ByteReader(body)
    algorithm = CompressionAlgorithm.from_code(reader.read_byte())

    nested_depth = depth + 1
    if nested_depth > config.max_nesting_depth:
        msg = "Compressed data nested too deeply"
        raise MessageLimitExceeded(msg, limit=config.max_nesting_depth, value=nested_depth)

    try:
        payload = decompress(algorithm, reader.read_rest(), max_size=budget.remaining)
    except MessageLimitExceeded as e:
        msg = "Decompressed data exceeds size limit"
        raise MessageLimitExceeded(msg, limit=budget.limit, value=budget.used + e.value) from e
    budget.used += len(payload)

    return CompressedDataPacket(
        algorithm=algorithm,
        message=_decode_message(payload, config, nested_depth, budget),
    )


def encode_packet(packet: Packet) -> bytes:
    """Encode one packet with a new-format header."""
    if isinstance(packet, CompressedDataPacket):
        payload = compress(packet.algorithm, encode_message(packet.message))
        body = bytes([packet.algorithm]) + payload
    else:
        body = encode_body(packet)
    return encode_header(packet.tag, len(body)) + body


def encode_message(message: Message) -> bytes:
    """Encode a message, preserving packet order."""
    return b"".join(encode_packet(packet) for packet in message)
