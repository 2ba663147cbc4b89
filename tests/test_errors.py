from Base16384.errors import (
    Base16384DecodeError,
    BufferTooSmallError,
    InvalidCharacterError,
    InvalidLengthError,
)


def test_messages():
    assert str(InvalidLengthError()) == "invalid length"
    assert str(InvalidCharacterError(5)) == "invalid character at index 5"

def test_equality():
    assert InvalidLengthError() == InvalidLengthError()
    assert InvalidCharacterError(3) == InvalidCharacterError(3)
    assert InvalidCharacterError(3) != InvalidCharacterError(4)
    assert InvalidCharacterError(0) != InvalidLengthError()
    assert hash(InvalidCharacterError(3)) == hash(InvalidCharacterError(3))

def test_hierarchy():
    assert issubclass(InvalidLengthError, Base16384DecodeError)
    assert issubclass(InvalidCharacterError, Base16384DecodeError)
    assert issubclass(Base16384DecodeError, ValueError)
    assert issubclass(BufferTooSmallError, BufferError)
    assert not issubclass(BufferTooSmallError, ValueError)
