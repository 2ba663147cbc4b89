"""
Tail handling for Base16384.

Input whose length is not a multiple of 7 ends in a tail: the last 1 to 6
bytes are zero-padded to a full group and packed, only the ``r // 2 + 1``
symbols that carry those bytes are kept, and a padding marker
``PADDING_OFFSET | r`` records how many bytes the tail holds.
"""

import numpy as np
from typing import Optional, Tuple

from Base16384.encoding.block import pack_groups, unpack_groups
from Base16384.encoding.constants import (
    GROUP_BYTES,
    GROUP_SYMBOLS,
    MAX_REMAINDER,
    PADDING_OFFSET,
    START,
)
from Base16384.encoding.lengths import padding, tail_len
from Base16384.errors import InvalidLengthError


def remainder_symbols(r: int) -> int:
    """Gets the number of data symbols that carry a tail of ``r`` bytes."""
    return r // 2 + 1

def encode_remainder(tail: np.ndarray, out: np.ndarray = None) -> np.ndarray:
    """
    Encodes the last 1 to 6 bytes of the input.

    Args:
        tail: uint8 array of 1 to 6 bytes
        out: Optional uint16 array to write into

    Returns:
        uint16 array of ``r // 2 + 1`` data symbols followed by the marker
    """
    r = len(tail)
    if not 1 <= r <= MAX_REMAINDER:
        raise ValueError(f"a tail holds 1 to {MAX_REMAINDER} bytes, got {r}")

    group = np.zeros((1, GROUP_BYTES), dtype=np.uint8)
    group[0, :r] = tail
    packed = pack_groups(group)[0]

    kept = remainder_symbols(r)
    if out is None:
        out = np.empty(kept + 1, dtype=np.uint16)
    out[:kept] = packed[:kept]
    out[kept] = PADDING_OFFSET | r
    return out[:kept + 1]

def decode_remainder(symbols: np.ndarray, r: int) -> bytes:
    """
    Decodes the data symbols of a tail whose marker has been stripped.

    Missing trailing positions of the group are filled with START, the
    encoding of zero, before unpacking.

    Args:
        symbols: uint16 array of at most 4 data symbols
        r: Number of bytes the tail holds

    Returns:
        The first ``r`` bytes of the unpacked group
    """
    if len(symbols) > GROUP_SYMBOLS:
        raise ValueError(f"a tail has at most {GROUP_SYMBOLS} data symbols, got {len(symbols)}")

    group = np.full((1, GROUP_SYMBOLS), START, dtype=np.uint16)
    group[0, :len(symbols)] = symbols
    return unpack_groups(group)[0, :r].tobytes()

def split_tail(symbols: np.ndarray) -> Tuple[np.ndarray, np.ndarray, Optional[int]]:
    """
    Splits an encoded stream into its full groups and its tail.

    Args:
        symbols: uint16 array of an encoded stream

    Returns:
        Tuple of (body of shape (n, 4), tail data symbols, r or None)

    Raises:
        InvalidLengthError: The stream is shorter than the tail its marker
            announces, or the body is not a whole number of groups.
    """
    marker = padding(symbols[-1]) if len(symbols) else None

    if marker is None:
        body, tail, r = symbols, symbols[:0], None
    else:
        consumed = tail_len(marker)
        if len(symbols) < consumed:
            raise InvalidLengthError()
        split = len(symbols) - consumed
        body, tail, r = symbols[:split], symbols[split:-1], marker - PADDING_OFFSET

    if len(body) % GROUP_SYMBOLS != 0:
        raise InvalidLengthError()

    return body.reshape(-1, GROUP_SYMBOLS), tail, r
