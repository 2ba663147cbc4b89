import pytest

from Base16384.encoding.constants import PADDING_OFFSET, START
from Base16384.encoding.lengths import decode_len, encode_len, padding, tail_len
from Base16384.encoding import utf8


@pytest.mark.parametrize("byte_len, expected", [
    (0, 0),
    (1, 2),
    (2, 3),
    (3, 3),
    (4, 4),
    (5, 4),
    (6, 5),
    (7, 4),
    (8, 6),
    (14, 8),
    (32, 20),
    (256, 148),
    (1024000, 585144),
])
def test_encode_len(byte_len, expected):
    assert encode_len(byte_len) == expected

def test_encode_len_negative():
    with pytest.raises(ValueError):
        encode_len(-1)

@pytest.mark.parametrize("symbol_len, marker, expected", [
    (0, None, 0),
    (4, None, 7),
    (8, None, 14),
    (6, PADDING_OFFSET + 1, 8),
    (20, PADDING_OFFSET + 4, 32),
    (5, PADDING_OFFSET + 6, 6),
    (1, PADDING_OFFSET, 0),
    (585144, PADDING_OFFSET + 5, 1024000),
])
def test_decode_len(symbol_len, marker, expected):
    assert decode_len(symbol_len, marker) == expected

@pytest.mark.parametrize("byte_len", range(0, 50))
def test_decode_len_inverts_encode_len(byte_len):
    r = byte_len % 7
    marker = PADDING_OFFSET + r if r else None
    assert decode_len(encode_len(byte_len), marker) == byte_len

@pytest.mark.parametrize("marker", [PADDING_OFFSET - 1, PADDING_OFFSET + 7, START])
def test_decode_len_rejects_non_marker(marker):
    with pytest.raises(ValueError):
        decode_len(8, marker)

def test_decode_len_rejects_short_stream():
    with pytest.raises(ValueError):
        decode_len(2, PADDING_OFFSET + 5)

def test_padding_recognises_markers():
    for r in range(7):
        assert padding(PADDING_OFFSET + r) == PADDING_OFFSET + r

@pytest.mark.parametrize("symbol", [
    START,
    START + 0x3FFF,
    PADDING_OFFSET - 1,
    PADDING_OFFSET + 7,
    0,
])
def test_padding_rejects_other_symbols(symbol):
    assert padding(symbol) is None

def test_tail_len():
    assert [tail_len(PADDING_OFFSET + r) for r in range(7)] == [1, 2, 3, 3, 4, 4, 5]

def test_utf8_lengths():
    assert utf8.encode_len(8) == 18
    assert utf8.encode_len(0) == 0
    assert utf8.decode_len(18, PADDING_OFFSET + 1) == 8
    assert utf8.decode_len(12) == 7

def test_utf8_decode_len_requires_whole_triplets():
    with pytest.raises(ValueError):
        utf8.decode_len(17)

def test_utf8_padding():
    assert utf8.padding(b"\xe3\xb4\x81") == PADDING_OFFSET + 1
    assert utf8.padding("㴆".encode("utf-8")) == PADDING_OFFSET + 6
    assert utf8.padding("一".encode("utf-8")) is None
    assert utf8.padding(b"A\xb4\x81") is None

def test_utf8_padding_requires_triplet():
    with pytest.raises(ValueError):
        utf8.padding(b"\xe3\xb4")
