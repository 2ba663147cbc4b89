import numpy as np
import pytest

from Base16384 import encode, encode_str, decode, utf8
from Base16384.encoding.constants import PADDING_OFFSET
from Base16384.encoding.utf8 import pack_triplets, unpack_triplets
from Base16384.errors import BufferTooSmallError, InvalidCharacterError, InvalidLengthError

ONE = "一".encode("utf-8")


def test_known_vector():
    encoded = utf8.encode(b"12345678")
    assert isinstance(encoded, bytes)
    assert encoded.decode("utf-8") == "婌焳廔萷尀㴁"
    assert utf8.decode(encoded) == b"12345678"
    assert utf8.decode("婌焳廔萷尀㴁") == b"12345678"

def test_empty():
    assert utf8.encode(b"") == b""
    assert utf8.decode(b"") == b""
    assert utf8.decode("") == b""

def test_zeros():
    encoded = utf8.encode(bytes(32))
    assert encoded.decode("utf-8") == "一" * 19 + "㴄"

@pytest.mark.parametrize("length", range(0, 64))
def test_round_trip(length, rng):
    data = rng.integers(0, 256, size=length, dtype=np.uint8).tobytes()
    encoded = utf8.encode(data)
    assert len(encoded) == utf8.encode_len(length)
    assert utf8.decode(encoded) == data
    marker = utf8.padding(encoded[-3:]) if length else None
    assert utf8.decode_len(len(encoded), marker) == length

@pytest.mark.parametrize("length", [0, 1, 6, 7, 13, 256, 4099])
def test_matches_symbol_form(length, rng):
    data = rng.integers(0, 256, size=length, dtype=np.uint8).tobytes()
    encoded = utf8.encode(data)
    assert encoded == encode_str(data).encode("utf-8")
    assert utf8.decode(encoded) == decode(encode(data))

def test_all_ones_round_trip():
    data = b"\xff" * 21
    assert utf8.decode(utf8.encode(data)) == data

def test_pack_triplets_matches_symbols(rng):
    groups = rng.integers(0, 256, size=(30, 7), dtype=np.uint8)
    triplets = pack_triplets(groups)
    assert triplets.shape == (30, 12)
    assert triplets.tobytes() == encode(groups.tobytes()).astype("<u2").tobytes().decode("utf-16-le").encode("utf-8")
    np.testing.assert_array_equal(unpack_triplets(triplets), groups)

def test_encode_to_slice():
    buf = bytearray(b"A" * 18)
    written = utf8.encode_to_slice(b"12345678", buf)
    assert written.tobytes().decode("utf-8") == "婌焳廔萷尀㴁"
    assert buf.decode("utf-8") == "婌焳廔萷尀㴁"

def test_encode_to_slice_too_small():
    with pytest.raises(BufferTooSmallError):
        utf8.encode_to_slice(b"12345678", bytearray(17))

def test_decode_to_slice():
    buf = np.zeros(10, dtype=np.uint8)
    written = utf8.decode_to_slice("婌焳廔萷尀㴁", buf)
    assert written.tobytes() == b"12345678"
    assert buf[8] == 0

def test_decode_to_slice_empty():
    assert len(utf8.decode_to_slice(b"", bytearray(0))) == 0

def test_decode_to_slice_too_small():
    with pytest.raises(BufferTooSmallError):
        utf8.decode_to_slice("婌焳廔萷尀㴁", bytearray(7))

@pytest.mark.parametrize("data", [
    b"\xe4",
    b"\xe4\xb8",
    ONE + b"\xe4",
    ONE * 5,
    ONE * 3,
    "㴆".encode("utf-8"),
    ONE * 3 + "㴁".encode("utf-8"),
])
def test_invalid_length(data):
    with pytest.raises(InvalidLengthError):
        utf8.decode(data)
    with pytest.raises(InvalidLengthError):
        utf8.decode_to_slice(data, bytearray(64))

def test_invalid_character_reports_byte_offset():
    data = ONE * 5 + "䷿".encode("utf-8") + ONE * 2
    with pytest.raises(InvalidCharacterError) as exc_info:
        utf8.decode(data)
    assert exc_info.value == InvalidCharacterError(3)

def test_malformed_triplet():
    data = ONE * 3 + b"A\xb8\x80"
    with pytest.raises(InvalidCharacterError) as exc_info:
        utf8.decode(data)
    assert exc_info.value.index == 9

def test_ascii_is_invalid():
    with pytest.raises(InvalidCharacterError) as exc_info:
        utf8.decode(b"abcdefghijkl")
    assert exc_info.value.index == 0

def test_above_range_is_invalid():
    data = ONE * 2 + chr(0x8E00).encode("utf-8") + ONE
    with pytest.raises(InvalidCharacterError) as exc_info:
        utf8.decode(data)
    assert exc_info.value.index == 6

def test_invalid_character_in_tail():
    data = ONE * 4 + "䷿".encode("utf-8") + "㴁".encode("utf-8")
    with pytest.raises(InvalidCharacterError) as exc_info:
        utf8.decode(data)
    assert exc_info.value.index == 0

def test_zero_length_marker():
    assert utf8.decode(chr(PADDING_OFFSET)) == b""
