"""ULID text validation."""

from ulidkit.core.base32 import DECODE_MAP

ULID_LEN = 26


def is_valid(candidate):
    """True if `candidate` is 26 Crockford symbols in either case. Never raises."""
    if not isinstance(candidate, str) or len(candidate) != ULID_LEN:
        return False
    # Membership on the ASCII table directly; str.upper() maps some
    # non-ASCII letters (e.g. U+017F) onto the alphabet.
    return all(char in DECODE_MAP for char in candidate)
