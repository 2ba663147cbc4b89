"""
Base16384 - binary-to-text encoding with 14 bits per character

Encodes arbitrary bytes as CJK characters, 7 bytes to every 4 characters,
either as 16-bit symbol arrays or directly as UTF-8.
"""

from Base16384.version import __version__

from Base16384.encoding.constants import START, PADDING_OFFSET
from Base16384.encoding.lengths import encode_len, decode_len, padding
from Base16384.encoding.codec import (
    encode,
    encode_to_slice,
    decode,
    decode_to_slice,
    encode_str,
    decode_str,
)
from Base16384.encoding import utf8

from Base16384.errors import (
    Base16384DecodeError,
    InvalidLengthError,
    InvalidCharacterError,
    BufferTooSmallError,
)
from Base16384.utils.config import CodecConfig, get_config, set_config, ConfigContext
from Base16384.utils.logging import get_logger

from Base16384 import encoding
from Base16384 import utils

__all__ = [
    "__version__",
    "START",
    "PADDING_OFFSET",
    "encode_len",
    "decode_len",
    "padding",
    "encode",
    "encode_to_slice",
    "decode",
    "decode_to_slice",
    "encode_str",
    "decode_str",
    "utf8",
    "Base16384DecodeError",
    "InvalidLengthError",
    "InvalidCharacterError",
    "BufferTooSmallError",
    "CodecConfig",
    "get_config",
    "set_config",
    "ConfigContext",
    "get_logger",
    "encoding",
    "utils",
]
