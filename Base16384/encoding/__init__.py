"""
Base16384 encoding and decoding.

Packs 7-byte groups into four 14-bit symbols in the CJK window starting at
U+4E00, with a padding marker in U+3D00..U+3D06 for a partial last group.
"""

from Base16384.encoding import utf8
from Base16384.encoding.codec import (
    encode,
    encode_to_slice,
    decode,
    decode_to_slice,
    encode_str,
    decode_str,
)
from Base16384.encoding.lengths import encode_len, decode_len, padding
from Base16384.encoding.batch import (
    encode_batch,
    decode_batch,
    encode_batch_utf8,
    decode_batch_utf8,
)
from Base16384.encoding.constants import (
    START,
    PADDING_OFFSET,
    GROUP_BYTES,
    GROUP_SYMBOLS,
)

__all__ = [
    "utf8",
    "encode",
    "encode_to_slice",
    "decode",
    "decode_to_slice",
    "encode_str",
    "decode_str",
    "encode_len",
    "decode_len",
    "padding",
    "encode_batch",
    "decode_batch",
    "encode_batch_utf8",
    "decode_batch_utf8",
    "START",
    "PADDING_OFFSET",
    "GROUP_BYTES",
    "GROUP_SYMBOLS",
]
