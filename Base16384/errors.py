"""
Error types for Base16384.

Decode failures are data errors and derive from ``ValueError``. Undersized
output buffers are caller contract violations and derive from ``BufferError``.
"""


class Base16384DecodeError(ValueError):
    """Base class for errors raised while decoding Base16384 data."""

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidLengthError(Base16384DecodeError):
    """The input data has an invalid length."""

    def __init__(self):
        super().__init__()

    def __str__(self) -> str:
        return "invalid length"

    def __repr__(self) -> str:
        return "InvalidLengthError()"


class InvalidCharacterError(Base16384DecodeError):
    """
    The input data has an invalid character.

    For 16-bit symbol input ``index`` is the position of the symbol within
    its 4-symbol group. For UTF-8 input it is the byte offset of the
    triplet within its 12-byte group.
    """

    def __init__(self, index: int):
        super().__init__(index)
        self.index = index

    def __str__(self) -> str:
        return f"invalid character at index {self.index}"

    def __repr__(self) -> str:
        return f"InvalidCharacterError(index={self.index})"


class BufferTooSmallError(BufferError):
    """An output buffer cannot hold the encoded or decoded result."""

    def __init__(self, required: int, available: int):
        super().__init__(f"buffer is too small: need {required}, got {available}")
        self.required = required
        self.available = available
