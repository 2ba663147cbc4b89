"""
Length arithmetic for Base16384 symbol streams.
"""

from typing import Optional

from Base16384.encoding.constants import (
    GROUP_BYTES,
    GROUP_SYMBOLS,
    PADDING_OFFSET,
    REMAINDER_SYMBOLS,
    TAIL_SYMBOLS,
)


def encode_len(byte_len: int) -> int:
    """
    Gets the number of symbols needed to encode ``byte_len`` bytes.

    Every full 7-byte group takes 4 symbols. A remainder of r bytes takes
    ``r // 2 + 1`` data symbols plus one padding marker.

    Args:
        byte_len: Length of the plaintext in bytes

    Returns:
        Exact length of the encoded symbol stream
    """
    if byte_len < 0:
        raise ValueError(f"byte_len must be non-negative, got {byte_len}")
    return byte_len // GROUP_BYTES * GROUP_SYMBOLS + REMAINDER_SYMBOLS[byte_len % GROUP_BYTES]

def is_padding(symbol: int) -> bool:
    return PADDING_OFFSET <= symbol < PADDING_OFFSET + GROUP_BYTES

def padding(last: int) -> Optional[int]:
    """
    Gets the padding marker of a stream from its last symbol, if it has one.

    Args:
        last: Last symbol of an encoded stream

    Returns:
        The symbol itself when it is a padding marker, None otherwise
    """
    last = int(last)
    return last if is_padding(last) else None

def tail_len(padding: int) -> int:
    """Gets the number of symbols a tail occupies, its padding marker included."""
    if not is_padding(padding):
        raise ValueError(f"not a padding marker: {padding:#06x}")
    return TAIL_SYMBOLS[padding - PADDING_OFFSET]

def decode_len(symbol_len: int, padding: Optional[int] = None) -> int:
    """
    Gets the number of bytes a stream of ``symbol_len`` symbols decodes to.

    Args:
        symbol_len: Length of the encoded symbol stream
        padding: Padding marker that ends the stream, if any

    Returns:
        Exact length of the decoded bytes
    """
    r = 0
    if padding is not None:
        padding = int(padding)
        consumed = tail_len(padding)
        if symbol_len < consumed:
            raise ValueError(
                f"a stream of {symbol_len} symbols cannot end in padding {padding:#06x}"
            )
        symbol_len -= consumed
        r = padding - PADDING_OFFSET
    return symbol_len // GROUP_SYMBOLS * GROUP_BYTES + r
