"""48-bit millisecond timestamp <-> 10 character prefix."""

from ulidkit.core.base32 import decode_base32, encode_base32
from ulidkit.core.errors import InvalidUlidError, OutOfRangeError
from ulidkit.core.validation import is_valid

TIME_MAX = (1 << 48) - 1
TIME_LEN = 10


def encode_time(ms):
    """Encode epoch milliseconds as the 10 character ULID prefix."""
    if isinstance(ms, bool) or not isinstance(ms, int):
        raise OutOfRangeError(f"timestamp must be an integer, got {type(ms).__name__}", value=repr(ms))
    if ms < 0 or ms > TIME_MAX:
        raise OutOfRangeError(f"timestamp {ms} outside 0..{TIME_MAX}", value=ms)
    return encode_base32(ms, TIME_LEN)


def decode_time(prefix):
    """Decode the first 10 characters. The caller validates."""
    return decode_base32(prefix[:TIME_LEN])


def decode_timestamp(value):
    """Validate a text ULID and return its timestamp in milliseconds."""
    if not is_valid(value):
        raise InvalidUlidError("invalid ULID", value=value)
    ms = decode_time(value)
    if ms > TIME_MAX:
        raise OutOfRangeError(f"timestamp {ms} exceeds {TIME_MAX}", value=ms)
    return ms
