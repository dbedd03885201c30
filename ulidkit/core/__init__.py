from ulidkit.core.base32 import ALPHABET
from ulidkit.core.binary import BINARY_LEN, from_binary, to_binary
from ulidkit.core.errors import (
    InvalidLengthError,
    InvalidUlidError,
    MonotonicOverflowError,
    OutOfRangeError,
    UlidError,
)
from ulidkit.core.generator import MonotonicGenerator, generate, get_generator
from ulidkit.core.timestamp import TIME_MAX, decode_time, decode_timestamp, encode_time
from ulidkit.core.validation import ULID_LEN, is_valid

__all__ = [
    "ALPHABET",
    "BINARY_LEN",
    "TIME_MAX",
    "ULID_LEN",
    "MonotonicGenerator",
    "generate",
    "get_generator",
    "is_valid",
    "encode_time",
    "decode_time",
    "decode_timestamp",
    "to_binary",
    "from_binary",
    "UlidError",
    "InvalidUlidError",
    "InvalidLengthError",
    "OutOfRangeError",
    "MonotonicOverflowError",
]
