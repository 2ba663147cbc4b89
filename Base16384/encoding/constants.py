START = 0x4E00
PADDING_OFFSET = 0x3D00

GROUP_BYTES = 7
GROUP_SYMBOLS = 4
BITS_PER_SYMBOL = 14
SYMBOL_RANGE = 1 << BITS_PER_SYMBOL

UTF8_WIDTH = 3
UTF8_GROUP_BYTES = GROUP_SYMBOLS * UTF8_WIDTH

MAX_REMAINDER = GROUP_BYTES - 1

# symbols taken by a tail of r bytes, padding marker included
TAIL_SYMBOLS = {0: 1, 1: 2, 2: 3, 3: 3, 4: 4, 5: 4, 6: 5}

# extra symbols added to encode_len for a remainder of r bytes
REMAINDER_SYMBOLS = {0: 0, 1: 2, 2: 3, 3: 3, 4: 4, 5: 4, 6: 5}

START_HI = START >> 6
START_LO = START & 0x3F

START_UTF8 = bytes((
    0xE0 | (START_HI >> 6),
    0x80 | (START_HI & 0x3F),
    0x80 | START_LO,
))

PADDING_UTF8_HI = 0xE0 | (PADDING_OFFSET >> 12)
PADDING_UTF8_MD = 0x80 | ((PADDING_OFFSET >> 6) & 0x3F)
PADDING_UTF8_LO = 0x80 | (PADDING_OFFSET & 0x3F)

assert START_LO == 0, "the UTF-8 transcoder relies on START having zero low bits"
assert PADDING_OFFSET + GROUP_BYTES < START
