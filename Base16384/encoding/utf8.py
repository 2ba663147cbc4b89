"""
Base16384 encoding and decoding straight to and from UTF-8.

Every Base16384 symbol lies in U+0800..U+FFFF, so its UTF-8 form is always
the triplet ``[0xE0 | hi4, 0x80 | mid6, 0x80 | lo6]``. Because START has
zero low 6 bits, a data symbol splits into an 8-bit high part offset by
``START >> 6`` (spread over the first two bytes) and a 6-bit low part (the
last byte). Groups are packed and unpacked directly against those triplets
without building a 16-bit symbol buffer.
"""

import numpy as np
from typing import Optional, Union

from Base16384.encoding import lengths
from Base16384.encoding.constants import (
    GROUP_BYTES,
    GROUP_SYMBOLS,
    PADDING_OFFSET,
    PADDING_UTF8_HI,
    PADDING_UTF8_LO,
    PADDING_UTF8_MD,
    START_HI,
    START_UTF8,
    UTF8_GROUP_BYTES,
    UTF8_WIDTH,
)
from Base16384.encoding.remainder import remainder_symbols
from Base16384.errors import Base16384DecodeError, InvalidCharacterError, InvalidLengthError
from Base16384.utils.buffers import (
    BytesLike,
    as_byte_array,
    as_writable,
    iter_batches,
    require_capacity,
    split_groups,
)
from Base16384.utils.config import get_config
from Base16384.utils.logging import get_logger


def encode_len(byte_len: int) -> int:
    """Gets the number of UTF-8 bytes needed to encode ``byte_len`` bytes."""
    return lengths.encode_len(byte_len) * UTF8_WIDTH

def decode_len(utf8_len: int, padding: Optional[int] = None) -> int:
    """
    Gets the number of bytes ``utf8_len`` bytes of UTF-8 data decode to.

    Args:
        utf8_len: Length of the UTF-8 data, a multiple of 3
        padding: Padding marker that ends the data, if any

    Returns:
        Exact length of the decoded bytes
    """
    if utf8_len % UTF8_WIDTH != 0:
        raise ValueError(f"utf8_len must be a multiple of {UTF8_WIDTH}, got {utf8_len}")
    return lengths.decode_len(utf8_len // UTF8_WIDTH, padding)

def _code_point(triplet) -> Optional[int]:
    b0, b1, b2 = (int(b) for b in triplet)
    if b0 & 0xF0 != 0xE0 or b1 & 0xC0 != 0x80 or b2 & 0xC0 != 0x80:
        return None
    return (b0 & 0x0F) << 12 | (b1 & 0x3F) << 6 | (b2 & 0x3F)

def padding(last: BytesLike) -> Optional[int]:
    """
    Gets the padding marker encoded by the last triplet of the data, if any.

    Args:
        last: The last 3 bytes of UTF-8 encoded data

    Returns:
        The padding marker code point, or None
    """
    last = as_byte_array(last)
    if len(last) != UTF8_WIDTH:
        raise ValueError(f"a triplet is {UTF8_WIDTH} bytes, got {len(last)}")
    code_point = _code_point(last)
    if code_point is None:
        return None
    return lengths.padding(code_point)

def pack_triplets(groups: np.ndarray, out: np.ndarray = None) -> np.ndarray:
    """
    Packs 7-byte groups into four UTF-8 triplets each.

    Args:
        groups: uint8 array of shape (n, 7)
        out: Optional uint8 array of shape (n, 12) to write into

    Returns:
        uint8 array of shape (n, 12)
    """
    if out is None:
        out = np.empty((groups.shape[0], UTF8_GROUP_BYTES), dtype=np.uint8)

    c = groups.astype(np.uint16)

    highs = (
        c[:, 0],
        ((c[:, 1] & 0x03) << 6) | (c[:, 2] >> 2),
        ((c[:, 3] & 0x0F) << 4) | (c[:, 4] >> 4),
        ((c[:, 5] & 0x3F) << 2) | (c[:, 6] >> 6),
    )
    lows = (
        c[:, 1] >> 2,
        ((c[:, 2] & 0x03) << 4) | (c[:, 3] >> 4),
        ((c[:, 4] & 0x0F) << 2) | (c[:, 5] >> 6),
        c[:, 6] & 0x3F,
    )

    for k, (hi, lo) in enumerate(zip(highs, lows)):
        hi = hi + START_HI
        out[:, 3 * k] = 0xE0 | (hi >> 6)
        out[:, 3 * k + 1] = 0x80 | (hi & 0x3F)
        out[:, 3 * k + 2] = 0x80 | lo

    return out

def unpack_triplets(triplets: np.ndarray, out: np.ndarray = None) -> np.ndarray:
    """
    Unpacks groups of four UTF-8 triplets into 7 bytes each.

    Args:
        triplets: uint8 array of shape (n, 12)
        out: Optional uint8 array of shape (n, 7) to write into

    Returns:
        uint8 array of shape (n, 7)

    Raises:
        InvalidCharacterError: A triplet is malformed or not a data symbol.
            The index is the byte offset of the first such triplet within
            its group.
    """
    t = triplets.reshape(-1, GROUP_SYMBOLS, UTF8_WIDTH)
    t0, t1, t2 = t[:, :, 0], t[:, :, 1], t[:, :, 2]

    high = ((t0 & 0x0F).astype(np.int32) << 6 | (t1 & 0x3F)) - START_HI
    low = (t2 & 0x3F).astype(np.int32)

    invalid = (
        ((t0 & 0xF0) != 0xE0)
        | ((t1 & 0xC0) != 0x80)
        | ((t2 & 0xC0) != 0x80)
        | (high < 0)
        | (high > 0xFF)
    )
    positions = np.flatnonzero(invalid)
    if positions.size:
        raise InvalidCharacterError(int(positions[0]) % GROUP_SYMBOLS * UTF8_WIDTH)

    if out is None:
        out = np.empty((t.shape[0], GROUP_BYTES), dtype=np.uint8)

    h0, h1, h2, h3 = high[:, 0], high[:, 1], high[:, 2], high[:, 3]
    l0, l1, l2, l3 = low[:, 0], low[:, 1], low[:, 2], low[:, 3]

    out[:, 0] = h0
    out[:, 1] = (l0 << 2) | (h1 >> 6)
    out[:, 2] = ((h1 & 0x3F) << 2) | (l1 >> 4)
    out[:, 3] = ((l1 & 0x0F) << 4) | (h2 >> 4)
    out[:, 4] = ((h2 & 0x0F) << 4) | (l2 >> 2)
    out[:, 5] = ((l2 & 0x03) << 6) | (h3 >> 2)
    out[:, 6] = ((h3 & 0x03) << 6) | l3

    return out

def _encode_tail(tail: np.ndarray, out: np.ndarray) -> int:
    r = len(tail)
    group = np.zeros((1, GROUP_BYTES), dtype=np.uint8)
    group[0, :r] = tail
    packed = pack_triplets(group)[0]

    kept = remainder_symbols(r) * UTF8_WIDTH
    out[:kept] = packed[:kept]
    out[kept:kept + UTF8_WIDTH] = (PADDING_UTF8_HI, PADDING_UTF8_MD, PADDING_UTF8_LO | r)
    return kept + UTF8_WIDTH

def _decode_tail(tail: np.ndarray, r: int) -> np.ndarray:
    group = np.frombuffer(START_UTF8 * GROUP_SYMBOLS, dtype=np.uint8).reshape(1, -1).copy()
    group[0, :len(tail)] = tail
    return unpack_triplets(group)[0, :r]

def _encode_into(data: np.ndarray, out: np.ndarray) -> int:
    groups, tail = split_groups(data, GROUP_BYTES)
    n = len(groups)
    body = out[:n * UTF8_GROUP_BYTES].reshape(-1, UTF8_GROUP_BYTES)

    for rows in iter_batches(n, get_config().batch_groups):
        pack_triplets(groups[rows], out=body[rows])

    i = n * UTF8_GROUP_BYTES
    if len(tail):
        i += _encode_tail(tail, out[i:])
    return i

def _split(data: np.ndarray):
    if len(data) % UTF8_WIDTH != 0:
        raise InvalidLengthError()
    if len(data) < UTF8_WIDTH:
        raise InvalidLengthError()

    marker = padding(data[-UTF8_WIDTH:])
    if marker is None:
        body, tail, r = data, data[:0], None
    else:
        consumed = lengths.tail_len(marker) * UTF8_WIDTH
        if len(data) < consumed:
            raise InvalidLengthError()
        split = len(data) - consumed
        body, tail, r = data[:split], data[split:-UTF8_WIDTH], marker - PADDING_OFFSET

    if len(body) % UTF8_GROUP_BYTES != 0:
        raise InvalidLengthError()

    return body.reshape(-1, UTF8_GROUP_BYTES), tail, r

def _decode_into(body: np.ndarray, tail: np.ndarray, r, out: np.ndarray) -> int:
    n = len(body)
    dest = out[:n * GROUP_BYTES].reshape(-1, GROUP_BYTES)

    for rows in iter_batches(n, get_config().batch_groups):
        unpack_triplets(body[rows], out=dest[rows])

    i = n * GROUP_BYTES
    if r is not None:
        out[i:i + r] = _decode_tail(tail, r)
        i += r
    return i

def _as_utf8(data: Union[str, BytesLike]) -> np.ndarray:
    if isinstance(data, str):
        data = data.encode("utf-8", "surrogatepass")
    return as_byte_array(data)

def encode(data: BytesLike) -> bytes:
    """
    Encodes bytes as Base16384 UTF-8 text.

    Args:
        data: Bytes-like input of any length

    Returns:
        UTF-8 bytes, exactly ``encode_len(len(data))`` long
    """
    arr = as_byte_array(data)
    out = np.empty(encode_len(len(arr)), dtype=np.uint8)
    written = _encode_into(arr, out)
    get_logger().transform("utf8.encode", len(arr), written)
    return out.tobytes()

def encode_to_slice(data: BytesLike, buf) -> np.ndarray:
    """
    Encodes bytes as Base16384 UTF-8 text into a caller-provided buffer.

    Args:
        data: Bytes-like input of any length
        buf: Writable byte buffer holding at least ``encode_len(len(data))`` bytes

    Returns:
        The written prefix of ``buf`` as a uint8 array view

    Raises:
        BufferTooSmallError: ``buf`` is too small.
    """
    arr = as_byte_array(data)
    view = as_writable(buf, np.uint8)
    require_capacity(len(view), encode_len(len(arr)))
    written = _encode_into(arr, view)
    get_logger().transform("utf8.encode_to_slice", len(arr), written, capacity=len(view))
    return view[:written]

def decode(data: Union[str, BytesLike]) -> bytes:
    """
    Decodes Base16384 UTF-8 text into bytes.

    Args:
        data: UTF-8 bytes or a str

    Returns:
        Decoded bytes

    Raises:
        InvalidLengthError: The data is not a whole number of triplets, or
            not a whole number of groups plus an optional tail.
        InvalidCharacterError: A triplet is malformed or outside the data range.
    """
    arr = _as_utf8(data)
    if len(arr) == 0:
        return b""

    logger = get_logger()
    try:
        body, tail, r = _split(arr)
        out = np.empty(len(body) * GROUP_BYTES + (r or 0), dtype=np.uint8)
        written = _decode_into(body, tail, r, out)
    except Base16384DecodeError as exc:
        logger.debug(f"utf8.decode | in: {len(arr)} | error: {exc}")
        raise
    logger.transform("utf8.decode", len(arr), written)
    return out.tobytes()

def decode_to_slice(data: Union[str, BytesLike], buf) -> np.ndarray:
    """
    Decodes Base16384 UTF-8 text into a caller-provided buffer.

    Args:
        data: UTF-8 bytes or a str
        buf: Writable byte buffer holding at least ``decode_len`` bytes

    Returns:
        The written prefix of ``buf`` as a uint8 array view

    Raises:
        BufferTooSmallError: ``buf`` is too small.
        InvalidLengthError: The data is malformed.
        InvalidCharacterError: A triplet is malformed or outside the data range.
    """
    arr = _as_utf8(data)
    view = as_writable(buf, np.uint8)
    if len(arr) == 0:
        return view[:0]

    logger = get_logger()
    try:
        body, tail, r = _split(arr)
        require_capacity(len(view), len(body) * GROUP_BYTES + (r or 0))
        written = _decode_into(body, tail, r, view)
    except Base16384DecodeError as exc:
        logger.debug(f"utf8.decode_to_slice | in: {len(arr)} | error: {exc}")
        raise
    logger.transform("utf8.decode_to_slice", len(arr), written, capacity=len(view))
    return view[:written]
