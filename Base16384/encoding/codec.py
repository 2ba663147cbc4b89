"""
Base16384 encoding and decoding over 16-bit symbol buffers.

Symbols are held in numpy ``uint16`` arrays. Every symbol is a BMP code
point, so the same stream can also be handled as a Python ``str`` with
``encode_str`` and ``decode_str``.
"""

import numpy as np

from Base16384.encoding.block import pack_groups, unpack_groups
from Base16384.encoding.constants import GROUP_BYTES, GROUP_SYMBOLS
from Base16384.encoding.lengths import encode_len
from Base16384.encoding.remainder import decode_remainder, encode_remainder, split_tail
from Base16384.errors import Base16384DecodeError
from Base16384.utils.buffers import (
    BytesLike,
    as_byte_array,
    as_symbol_array,
    as_writable,
    iter_batches,
    require_capacity,
    split_groups,
)
from Base16384.utils.config import get_config
from Base16384.utils.logging import get_logger


def _encode_into(data: np.ndarray, out: np.ndarray) -> int:
    groups, tail = split_groups(data, GROUP_BYTES)
    n = len(groups)
    body = out[:n * GROUP_SYMBOLS].reshape(-1, GROUP_SYMBOLS)

    for rows in iter_batches(n, get_config().batch_groups):
        pack_groups(groups[rows], out=body[rows])

    i = n * GROUP_SYMBOLS
    if len(tail):
        i += len(encode_remainder(tail, out=out[i:]))
    return i

def _decode_into(body: np.ndarray, tail: np.ndarray, r, out: np.ndarray) -> int:
    n = len(body)
    dest = out[:n * GROUP_BYTES].reshape(-1, GROUP_BYTES)

    for rows in iter_batches(n, get_config().batch_groups):
        unpack_groups(body[rows], out=dest[rows])

    i = n * GROUP_BYTES
    if r is not None:
        out[i:i + r] = np.frombuffer(decode_remainder(tail, r), dtype=np.uint8)
        i += r
    return i

def encode(data: BytesLike) -> np.ndarray:
    """
    Encodes bytes as Base16384 symbols.

    Args:
        data: Bytes-like input of any length

    Returns:
        uint16 array of exactly ``encode_len(len(data))`` symbols
    """
    arr = as_byte_array(data)
    out = np.empty(encode_len(len(arr)), dtype=np.uint16)
    written = _encode_into(arr, out)
    get_logger().transform("encode", len(arr), written)
    return out

def encode_to_slice(data: BytesLike, buf) -> np.ndarray:
    """
    Encodes bytes as Base16384 symbols into a caller-provided buffer.

    Args:
        data: Bytes-like input of any length
        buf: Writable uint16 buffer holding at least ``encode_len(len(data))`` items

    Returns:
        The written prefix of ``buf`` as a uint16 array view

    Raises:
        BufferTooSmallError: ``buf`` is too small.
    """
    arr = as_byte_array(data)
    view = as_writable(buf, np.uint16)
    require_capacity(len(view), encode_len(len(arr)))
    written = _encode_into(arr, view)
    get_logger().transform("encode_to_slice", len(arr), written, capacity=len(view))
    return view[:written]

def decode(symbols) -> bytes:
    """
    Decodes Base16384 symbols into bytes.

    Args:
        symbols: Sequence or array of 16-bit symbols

    Returns:
        Decoded bytes

    Raises:
        InvalidLengthError: The stream is not a whole number of groups plus
            an optional tail.
        InvalidCharacterError: A symbol is outside the data range.
    """
    arr = as_symbol_array(symbols)
    logger = get_logger()
    try:
        body, tail, r = split_tail(arr)
        out = np.empty(len(body) * GROUP_BYTES + (r or 0), dtype=np.uint8)
        written = _decode_into(body, tail, r, out)
    except Base16384DecodeError as exc:
        logger.debug(f"decode | in: {len(arr)} | error: {exc}")
        raise
    logger.transform("decode", len(arr), written)
    return out.tobytes()

def decode_to_slice(symbols, buf) -> np.ndarray:
    """
    Decodes Base16384 symbols into a caller-provided buffer.

    Args:
        symbols: Sequence or array of 16-bit symbols
        buf: Writable byte buffer holding at least ``decode_len`` bytes

    Returns:
        The written prefix of ``buf`` as a uint8 array view

    Raises:
        BufferTooSmallError: ``buf`` is too small.
        InvalidLengthError: The stream is malformed.
        InvalidCharacterError: A symbol is outside the data range.
    """
    arr = as_symbol_array(symbols)
    view = as_writable(buf, np.uint8)
    logger = get_logger()
    try:
        body, tail, r = split_tail(arr)
        require_capacity(len(view), len(body) * GROUP_BYTES + (r or 0))
        written = _decode_into(body, tail, r, view)
    except Base16384DecodeError as exc:
        logger.debug(f"decode_to_slice | in: {len(arr)} | error: {exc}")
        raise
    logger.transform("decode_to_slice", len(arr), written, capacity=len(view))
    return view[:written]

def encode_str(data: BytesLike) -> str:
    """Encodes bytes as a Base16384 string."""
    return encode(data).astype("<u2").tobytes().decode("utf-16-le")

def decode_str(text: str) -> bytes:
    """
    Decodes a Base16384 string into bytes.

    Characters outside the BMP are reported as invalid at their own index.
    """
    code_points = np.frombuffer(text.encode("utf-32-le", "surrogatepass"), dtype="<u4")
    return decode(code_points)
