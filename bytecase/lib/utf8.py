"""
Decoding and encoding of single UTF-8 sequences. The decoder consumes one unit at a time from a byte
buffer: Either a valid codepoint, or a maximal invalid subpart. The latter follows the Unicode
recommendation for the substitution of maximal subparts, i.e. an invalid run is always cut off right
before the first byte that could not continue a well-formed sequence. For example, the input

    F0 9F 87 59

yields one invalid unit of three bytes followed by the letter `Y`, since `F0 9F 87` is a proper
prefix of a well-formed four byte sequence. Conversely, `ED A0 80` (an encoded surrogate) yields
three invalid units of one byte each, because no well-formed sequence starts with `ED A0`.
"""
from __future__ import annotations

import re

from typing import Optional, Tuple

from bytecase.lib.types import buf

UTF8_CHAR_MAX_BYTES = 4
"""
The maximum number of bytes in a UTF-8 encoded codepoint.
"""

_NON_ASCII = re.compile(B'[\\x80-\\xFF]')

# For each lead byte of a multibyte sequence: The number of continuation bytes, the payload mask
# for the lead byte, and the admissible range for the first continuation byte. All continuation
# bytes after the first one must be in the range 80..BF.
_LEADS = {}

for _b in range(0xC2, 0xE0):
    _LEADS[_b] = (1, 0x1F, 0x80, 0xBF)
for _b in range(0xE1, 0xF0):
    _LEADS[_b] = (2, 0x0F, 0x80, 0xBF)
for _b in range(0xF1, 0xF4):
    _LEADS[_b] = (3, 0x07, 0x80, 0xBF)

_LEADS[0xE0] = (2, 0x0F, 0xA0, 0xBF)
_LEADS[0xED] = (2, 0x0F, 0x80, 0x9F)
_LEADS[0xF0] = (3, 0x07, 0x90, 0xBF)
_LEADS[0xF4] = (3, 0x07, 0x80, 0x8F)

del _b


def decode_utf8(data: buf, offset: int = 0) -> Tuple[Optional[int], int]:
    """
    Decode the unit that starts at the given offset of the input. The return value is a tuple
    `(codepoint, size)` where `size` is the number of bytes that were consumed. When the bytes at
    the offset do not start a well-formed sequence, `codepoint` is `None` and `size` is the length
    of the maximal invalid subpart, which is between one and three. At the end of the input, the
    function returns `(None, 0)`; in every other case, `size` is positive.
    """
    end = len(data)
    if offset >= end:
        return None, 0
    lead = data[offset]
    if lead < 0x80:
        return lead, 1
    try:
        more, mask, lower, upper = _LEADS[lead]
    except KeyError:
        return None, 1
    codepoint = lead & mask
    for k in range(1, more + 1):
        if offset + k >= end:
            return None, k
        byte = data[offset + k]
        if not lower <= byte <= upper:
            return None, k
        lower, upper = 0x80, 0xBF
        codepoint = codepoint << 6 | byte & 0x3F
    return codepoint, more + 1


def utf8_length(codepoint: int) -> int:
    """
    The number of bytes in the UTF-8 encoding of the given codepoint.
    """
    if codepoint < 0x80:
        return 1
    if codepoint < 0x800:
        return 2
    if codepoint < 0x10000:
        return 3
    return 4


def encode_utf8(codepoint: int, buffer: bytearray) -> int:
    """
    Write the UTF-8 encoding of the codepoint to the beginning of the buffer, which must have room
    for at least `bytecase.lib.utf8.UTF8_CHAR_MAX_BYTES` bytes. Returns the number of bytes that
    were written.
    """
    if codepoint < 0x80:
        buffer[0] = codepoint
        return 1
    if codepoint < 0x800:
        buffer[0] = 0xC0 | codepoint >> 6
        buffer[1] = 0x80 | codepoint & 0x3F
        return 2
    if codepoint < 0x10000:
        buffer[0] = 0xE0 | codepoint >> 12
        buffer[1] = 0x80 | codepoint >> 6 & 0x3F
        buffer[2] = 0x80 | codepoint & 0x3F
        return 3
    if codepoint > 0x10FFFF:
        raise ValueError(F'not a valid codepoint: 0x{codepoint:X}')
    buffer[0] = 0xF0 | codepoint >> 18
    buffer[1] = 0x80 | codepoint >> 12 & 0x3F
    buffer[2] = 0x80 | codepoint >> 6 & 0x3F
    buffer[3] = 0x80 | codepoint & 0x3F
    return 4


def is_ascii(data: buf, offset: int = 0) -> bool:
    """
    Check whether all bytes of the input from the given offset onwards are ASCII.
    """
    return _NON_ASCII.search(data, offset) is None
