"""
Batch encoding and decoding of many independent buffers.
"""

import numpy as np
from typing import List, Sequence

from Base16384.encoding import codec, utf8
from Base16384.utils.buffers import BytesLike


def encode_batch(items: Sequence[BytesLike]) -> List[np.ndarray]:
    """
    Encodes each buffer of a batch as Base16384 symbols.
    
    Args:
        items: Bytes-like inputs
    
    Returns:
        List of uint16 symbol arrays, one per input
    """
    return [codec.encode(item) for item in items]

def decode_batch(items: Sequence) -> List[bytes]:
    """
    Decodes each symbol stream of a batch.

    Stops at the first stream that fails to decode and raises its error.
    """
    return [codec.decode(item) for item in items]

def encode_batch_utf8(items: Sequence[BytesLike]) -> List[bytes]:
    return [utf8.encode(item) for item in items]

def decode_batch_utf8(items: Sequence) -> List[bytes]:
    return [utf8.decode(item) for item in items]
