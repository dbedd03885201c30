"""Crockford Base32 symbol table."""

ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

# Both cases decode; output is always upper case.
DECODE_MAP = {}
for _index, _symbol in enumerate(ALPHABET):
    DECODE_MAP[_symbol] = _index
    DECODE_MAP[_symbol.lower()] = _index
del _index, _symbol


def encode_base32(value, length):
    """Encode a non-negative int as `length` symbols, most significant first."""
    chars = []
    for _ in range(length):
        value, remainder = divmod(value, 32)
        chars.append(ALPHABET[remainder])
    return "".join(reversed(chars))


def decode_base32(text):
    """Decode symbols back to an int. Input must already be validated."""
    value = 0
    for char in text:
        value = (value << 5) | DECODE_MAP[char]
    return value
