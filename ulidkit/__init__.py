"""ulidkit - monotonic ULID generation and lossless text/binary conversion."""

from ulidkit.core import (
    InvalidLengthError,
    InvalidUlidError,
    MonotonicGenerator,
    MonotonicOverflowError,
    OutOfRangeError,
    UlidError,
    decode_timestamp,
    from_binary,
    generate,
    is_valid,
    to_binary,
)

__version__ = "1.0.0"

__all__ = [
    "MonotonicGenerator",
    "generate",
    "is_valid",
    "decode_timestamp",
    "to_binary",
    "from_binary",
    "UlidError",
    "InvalidUlidError",
    "InvalidLengthError",
    "OutOfRangeError",
    "MonotonicOverflowError",
]
