"""
OpenPGP wire format codec.

This module provides:
- MPI encoding and decoding
- Old and new format packet headers
- Packet body decoders and encoders
- Message decoding with bounded recursion through compressed data
"""

from openpgp_codec.codec.header import (
    PacketHeader,
    decode_new_length,
    encode_header,
    encode_new_length,
    read_packet_header,
)
from openpgp_codec.codec.message import (
    DecompressionBudget,
    decode_message,
    encode_message,
    encode_packet,
    read_packet,
)
from openpgp_codec.codec.mpi import decode_mpi, encode_mpi, read_mpi
from openpgp_codec.codec.packets import decode_body, encode_body

__all__ = [
    "PacketHeader",
    "read_packet_header",
    "decode_new_length",
    "encode_new_length",
    "encode_header",
    "encode_mpi",
    "decode_mpi",
    "read_mpi",
    "decode_body",
    "encode_body",
    "read_packet",
    "DecompressionBudget",
    "encode_packet",
    "decode_message",
    "encode_message",
]
