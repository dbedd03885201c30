"""Monotonic ULID generation.

Each generator owns its last timestamp and last randomness. Calls in the same
millisecond (or after the clock moved backwards) reuse the stored timestamp
and bump the randomness, so output never sorts below an earlier ID from the
same instance.
"""

import os
import threading

from ulidkit.core.base32 import encode_base32
from ulidkit.core.errors import MonotonicOverflowError
from ulidkit.core.timestamp import encode_time
from ulidkit.core.validation import ULID_LEN
from ulidkit.internal.logging import get_logger
from ulidkit.utils.timestamp import now_millis

RANDOM_BYTES = 10
RANDOM_LEN = 16
RANDOM_MAX = (1 << 80) - 1

# The last symbol is always rendered as "0", so its 5 bits never reach the
# output. Increments happen one symbol higher.
_TAIL_BITS = 5
_TAIL_MASK = (1 << _TAIL_BITS) - 1
_STEP = 1 << _TAIL_BITS


def canonical_tail(value):
    """Force the final symbol to "0"."""
    return value[:ULID_LEN - 1] + "0"


class MonotonicGenerator:
    """Thread-safe monotonic ULID source.

    `random_bytes(n)` must return n uniformly random bytes; `clock()` returns
    epoch milliseconds. Both are injectable for deterministic tests.
    """

    def __init__(self, random_bytes=None, clock=None):
        self._random_bytes = random_bytes or os.urandom
        self._clock = clock or now_millis
        self._lock = threading.Lock()
        self._log = get_logger("generator")
        self.last_timestamp = None
        self.last_randomness = None
        self.issued = 0
        self.clock_regressions = 0

    def _fresh_randomness(self):
        raw = self._random_bytes(RANDOM_BYTES)
        if len(raw) != RANDOM_BYTES:
            raise ValueError(f"random source returned {len(raw)} bytes, expected {RANDOM_BYTES}")
        return int.from_bytes(raw, "big") & ~_TAIL_MASK

    def generate(self, seed_time=None):
        """Return the next 26 character ULID, last character always "0"."""
        timestamp = self._clock() if seed_time is None else seed_time
        # Range check before the state is touched.
        encode_time(timestamp)

        with self._lock:
            if self.last_timestamp is None or timestamp > self.last_timestamp:
                randomness = self._fresh_randomness()
                self.last_timestamp = timestamp
            else:
                if timestamp < self.last_timestamp:
                    self.clock_regressions += 1
                    self._log.debug("clock behind last timestamp", now=timestamp, last=self.last_timestamp)
                randomness = self.last_randomness + _STEP
                if randomness > RANDOM_MAX:
                    self._log.warn("randomness exhausted", timestamp=self.last_timestamp)
                    raise MonotonicOverflowError(
                        "randomness exhausted within one millisecond", timestamp=self.last_timestamp
                    )
            self.last_randomness = randomness
            self.issued += 1
            encoded = encode_time(self.last_timestamp) + encode_base32(randomness, RANDOM_LEN)

        return canonical_tail(encoded)

    def get_stats(self):
        return {
            "issued": self.issued,
            "clock_regressions": self.clock_regressions,
            "last_timestamp": self.last_timestamp,
        }


_generator = None
_generator_lock = threading.Lock()


def get_generator():
    """Process default generator, created on first use."""
    global _generator
    if _generator is None:
        with _generator_lock:
            if _generator is None:
                _generator = MonotonicGenerator()
    return _generator


def generate(seed_time=None):
    return get_generator().generate(seed_time)
