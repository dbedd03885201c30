"""Lossless conversion between 26 character text and 16 byte binary ULIDs.

The 26 symbols carry 130 bits. Binary form keeps the first 128 of them, high
bit first; the 2 bits dropped at the end sit inside the final symbol, which is
always "0" for canonical IDs.
"""

from ulidkit.core.base32 import ALPHABET, DECODE_MAP
from ulidkit.core.errors import InvalidLengthError, InvalidUlidError
from ulidkit.core.generator import canonical_tail
from ulidkit.core.validation import is_valid

BINARY_LEN = 16

# Low bits of the last byte that land in the final symbol.
_TAIL_BYTE_MASK = 0b111


def to_binary(value):
    """Pack a text ULID into 16 bytes."""
    if not is_valid(value):
        raise InvalidUlidError("invalid ULID", value=value)

    out = bytearray()
    buffer = 0
    bits = 0
    for char in value:
        buffer = (buffer << 5) | DECODE_MAP[char]
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1
            if len(out) == BINARY_LEN:
                break
    return bytes(out)


def from_binary(data, strict=False):
    """Unpack 16 bytes into a 26 character ULID ending in "0".

    With `strict`, refuse input whose final three bits would be discarded by
    the trailing "0" instead of silently normalising it.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidLengthError(f"expected {BINARY_LEN} bytes, got {type(data).__name__}")
    data = bytes(data)
    if len(data) != BINARY_LEN:
        raise InvalidLengthError(f"expected {BINARY_LEN} bytes, got {len(data)}", length=len(data))
    if strict and data[-1] & _TAIL_BYTE_MASK:
        raise InvalidUlidError("low bits of final byte are not zero", value=data.hex())

    chars = []
    buffer = 0
    bits = 0
    for byte in data:
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            chars.append(ALPHABET[(buffer >> bits) & 31])
        buffer &= (1 << bits) - 1
    if bits:
        chars.append(ALPHABET[(buffer << (5 - bits)) & 31])
    return canonical_tail("".join(chars))
