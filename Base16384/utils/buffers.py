"""
Buffer helpers for Base16384.

Converts caller input into numpy views and splits flat buffers into
fixed-width groups by index stride.
"""

import numpy as np
from typing import Iterator, Tuple, Union

from Base16384.errors import BufferTooSmallError


BytesLike = Union[bytes, bytearray, memoryview, np.ndarray]


def as_byte_array(data: BytesLike) -> np.ndarray:
    """
    Gets a flat uint8 view of bytes-like input without copying.

    Args:
        data: bytes, bytearray, memoryview or uint8 array

    Returns:
        1-D uint8 array
    """
    if isinstance(data, np.ndarray):
        if data.dtype != np.uint8:
            raise TypeError(f"expected a uint8 array, got {data.dtype}")
        return data.reshape(-1)
    if isinstance(data, str):
        raise TypeError("expected a bytes-like object, got str")
    if memoryview(data).nbytes == 0:
        return np.empty(0, dtype=np.uint8)
    return np.frombuffer(data, dtype=np.uint8)

def as_symbol_array(symbols) -> np.ndarray:
    """
    Gets a flat uint16 array of symbols.

    Integers outside the 16-bit range are mapped to 0, which is neither a
    data symbol nor a padding marker, so they fail validation in place.
    """
    if isinstance(symbols, np.ndarray) and symbols.dtype == np.uint16:
        return symbols.reshape(-1)
    if isinstance(symbols, (bytes, bytearray, memoryview)):
        raise TypeError("expected a sequence of 16-bit symbols, got a byte buffer")

    arr = np.asarray(symbols).reshape(-1)
    if arr.size == 0:
        return np.empty(0, dtype=np.uint16)
    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"expected integer symbols, got {arr.dtype}")

    arr = arr.astype(np.int64)
    arr[(arr < 0) | (arr > 0xFFFF)] = 0
    return arr.astype(np.uint16)

def as_writable(buf, dtype) -> np.ndarray:
    """
    Gets a flat writable view of a caller-provided buffer.

    Args:
        buf: numpy array, bytearray, array.array or other writable buffer
        dtype: Element type the view must have

    Returns:
        1-D array sharing memory with ``buf``
    """
    dtype = np.dtype(dtype)
    if isinstance(buf, np.ndarray):
        if buf.dtype != dtype:
            raise TypeError(f"expected a {dtype} buffer, got {buf.dtype}")
        view = buf.reshape(-1)
        if view.size and not np.shares_memory(view, buf):
            raise TypeError("buffer must be contiguous")
    elif memoryview(buf).nbytes == 0:
        view = np.empty(0, dtype=dtype)
    else:
        view = np.frombuffer(buf, dtype=dtype)

    if not view.flags.writeable:
        raise TypeError("buffer is read-only")
    return view

def require_capacity(available: int, required: int) -> None:
    """Raises BufferTooSmallError when a buffer cannot hold ``required`` items."""
    if available < required:
        raise BufferTooSmallError(required, available)

def split_groups(arr: np.ndarray, width: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Splits a flat array into rows of ``width`` items and a shorter remainder.

    The rows are a view of the leading ``len(arr) // width * width`` items,
    the remainder is whatever is left (fewer than ``width`` items).
    """
    whole = len(arr) // width * width
    return arr[:whole].reshape(-1, width), arr[whole:]

def iter_batches(count: int, batch: int) -> Iterator[slice]:
    """Yields consecutive row slices of at most ``batch`` rows."""
    for start in range(0, count, batch):
        yield slice(start, min(start + batch, count))
