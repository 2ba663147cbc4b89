"""
Group packing for Base16384.

A group of 7 bytes (56 bits, most significant bit first) packs into four
14-bit values with no slack. Symbol ``i`` holds bits ``[14i, 14i + 14)`` of
the group, biased by START. All functions work on every group of a buffer
at once: rows of a ``(n, 7)`` byte array map to rows of a ``(n, 4)`` symbol
array.
"""

import numpy as np

from Base16384.encoding.constants import (
    GROUP_BYTES,
    GROUP_SYMBOLS,
    START,
    SYMBOL_RANGE,
)
from Base16384.errors import InvalidCharacterError
from Base16384.utils.buffers import as_symbol_array


def pack_groups(groups: np.ndarray, out: np.ndarray = None) -> np.ndarray:
    """
    Packs 7-byte groups into 4 data symbols each.

    Args:
        groups: uint8 array of shape (n, 7)
        out: Optional uint16 array of shape (n, 4) to write into

    Returns:
        uint16 array of shape (n, 4)
    """
    if groups.ndim != 2 or groups.shape[1] != GROUP_BYTES:
        raise ValueError(f"expected groups of shape (n, {GROUP_BYTES}), got {groups.shape}")
    if out is None:
        out = np.empty((groups.shape[0], GROUP_SYMBOLS), dtype=np.uint16)

    c = groups.astype(np.uint16)

    out[:, 0] = (c[:, 0] << 6) | (c[:, 1] >> 2)
    out[:, 1] = ((c[:, 1] & 0x03) << 12) | (c[:, 2] << 4) | (c[:, 3] >> 4)
    out[:, 2] = ((c[:, 3] & 0x0F) << 10) | (c[:, 4] << 2) | (c[:, 5] >> 6)
    out[:, 3] = ((c[:, 5] & 0x3F) << 8) | c[:, 6]
    out += START

    return out

def first_invalid(symbols: np.ndarray) -> int:
    """
    Gets the flat position of the first symbol outside the data range.

    Returns:
        Position in row-major order, or -1 when every symbol is valid
    """
    invalid = (symbols < START) | (symbols >= START + SYMBOL_RANGE)
    positions = np.flatnonzero(invalid)
    return int(positions[0]) if positions.size else -1

def unpack_groups(symbols: np.ndarray, out: np.ndarray = None) -> np.ndarray:
    """
    Unpacks groups of 4 data symbols into 7 bytes each.

    Args:
        symbols: uint16 array of shape (n, 4)
        out: Optional uint8 array of shape (n, 7) to write into

    Returns:
        uint8 array of shape (n, 7)

    Raises:
        InvalidCharacterError: A symbol is not a data symbol. The index is
            the position of the first such symbol within its group.
    """
    if symbols.ndim != 2 or symbols.shape[1] != GROUP_SYMBOLS:
        raise ValueError(f"expected symbols of shape (n, {GROUP_SYMBOLS}), got {symbols.shape}")

    bad = first_invalid(symbols)
    if bad >= 0:
        raise InvalidCharacterError(bad % GROUP_SYMBOLS)

    if out is None:
        out = np.empty((symbols.shape[0], GROUP_BYTES), dtype=np.uint8)

    b = symbols - np.uint16(START)
    b0, b1, b2, b3 = b[:, 0], b[:, 1], b[:, 2], b[:, 3]

    out[:, 0] = b0 >> 6
    out[:, 1] = ((b0 & 0x3F) << 2) | (b1 >> 12)
    out[:, 2] = (b1 >> 4) & 0xFF
    out[:, 3] = ((b1 & 0x0F) << 4) | (b2 >> 10)
    out[:, 4] = (b2 >> 2) & 0xFF
    out[:, 5] = ((b2 & 0x03) << 6) | (b3 >> 8)
    out[:, 6] = b3 & 0xFF

    return out

def encode_group(chunk: bytes) -> np.ndarray:
    """Packs exactly one 7-byte group into 4 symbols."""
    data = np.frombuffer(bytes(chunk), dtype=np.uint8)
    if data.size != GROUP_BYTES:
        raise ValueError(f"a group is {GROUP_BYTES} bytes, got {data.size}")
    return pack_groups(data.reshape(1, GROUP_BYTES))[0]

def decode_group(symbols) -> bytes:
    """Unpacks exactly one group of 4 symbols into 7 bytes."""
    arr = as_symbol_array(symbols)
    if arr.size != GROUP_SYMBOLS:
        raise ValueError(f"a group is {GROUP_SYMBOLS} symbols, got {arr.size}")
    return unpack_groups(arr.reshape(1, GROUP_SYMBOLS))[0].tobytes()
