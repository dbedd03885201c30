"""Unit tests for text <-> binary conversion."""

import os

import pytest

from ulidkit.core.binary import from_binary, to_binary
from ulidkit.core.errors import InvalidLengthError, InvalidUlidError
from ulidkit.core.generator import MonotonicGenerator

from tests.conftest import fixed_bytes


class TestToBinary:
    """Tests for packing text into 16 bytes."""

    def test_zero(self):
        """All-zero ULID packs to zero bytes."""
        assert to_binary("0" * 26) == bytes(16)

    def test_max(self):
        """Largest canonical ULID packs to the expected bit pattern."""
        assert to_binary("7" + "Z" * 24 + "0") == b"\x3f" + b"\xff" * 14 + b"\xf8"

    def test_length(self):
        """Output is always 16 bytes."""
        assert len(to_binary(MonotonicGenerator().generate())) == 16

    def test_case_insensitive(self):
        """Lower case input packs the same as upper case."""
        value = "01BX5ZZKBKACTAV9WEVGEMMVR0"
        assert to_binary(value.lower()) == to_binary(value)

    def test_timestamp_position(self):
        """Timestamp occupies the bits after the two leading zero bits."""
        gen = MonotonicGenerator(random_bytes=fixed_bytes(0xAB))
        packed = to_binary(gen.generate(1469918176385))
        assert int.from_bytes(packed, "big") >> 78 == 1469918176385

    @pytest.mark.parametrize("value", ["", "0" * 25, "0" * 27, "I" * 26, None, b"0" * 26])
    def test_invalid(self, value):
        """Malformed input raises InvalidUlidError."""
        with pytest.raises(InvalidUlidError):
            to_binary(value)


class TestFromBinary:
    """Tests for unpacking 16 bytes into text."""

    def test_zero(self):
        """Zero bytes unpack to the all-zero ULID."""
        assert from_binary(bytes(16)) == "0" * 26

    def test_output_shape(self):
        """Output is 26 upper case symbols ending in 0."""
        value = from_binary(os.urandom(16))
        assert len(value) == 26
        assert value == value.upper()
        assert value[-1] == "0"

    def test_accepts_bytearray_and_memoryview(self):
        """Any bytes-like buffer of 16 bytes is accepted."""
        raw = bytes(range(16))
        assert from_binary(bytearray(raw)) == from_binary(raw)
        assert from_binary(memoryview(raw)) == from_binary(raw)

    @pytest.mark.parametrize("length", [0, 15, 17, 32])
    def test_wrong_length(self, length):
        """Anything but 16 bytes raises InvalidLengthError."""
        with pytest.raises(InvalidLengthError) as info:
            from_binary(bytes(length))
        assert info.value.context["length"] == length

    @pytest.mark.parametrize("value", ["0" * 16, 16, None, list(range(16))])
    def test_wrong_type(self, value):
        """Non bytes-like input raises InvalidLengthError."""
        with pytest.raises(InvalidLengthError):
            from_binary(value)

    def test_tail_bits_normalised(self):
        """Low bits of the last byte are dropped by the trailing 0."""
        assert from_binary(b"\xff" * 16) == "Z" * 25 + "0"
        assert to_binary(from_binary(b"\xff" * 16)) == b"\xff" * 15 + b"\xf8"

    def test_strict_rejects_tail_bits(self):
        """Strict mode refuses values the trailing 0 would alter."""
        with pytest.raises(InvalidUlidError):
            from_binary(b"\xff" * 16, strict=True)
        assert from_binary(b"\xff" * 15 + b"\xf8", strict=True) == "Z" * 25 + "0"

    def test_non_canonical_text_tail(self):
        """Reading a ULID with a non-zero tail normalises it."""
        value = "01BX5ZZKBKACTAV9WEVGEMMVRZ"
        assert from_binary(to_binary(value)) == value[:25] + "0"


class TestRoundTrip:
    """Round-trip properties between the two forms."""

    def test_generated_text_round_trip(self):
        """Generated IDs survive text -> binary -> text."""
        gen = MonotonicGenerator()
        for _ in range(200):
            value = gen.generate()
            assert from_binary(to_binary(value)) == value

    def test_binary_round_trip(self):
        """Binary values with a clear tail survive binary -> text -> binary."""
        for _ in range(200):
            raw = bytearray(os.urandom(16))
            raw[-1] &= 0xF8
            assert to_binary(from_binary(bytes(raw))) == bytes(raw)

    def test_lower_case_round_trip_is_upper(self):
        """Lower case input comes back in canonical upper case."""
        value = MonotonicGenerator().generate()
        assert from_binary(to_binary(value.lower())) == value

    def test_seed_zero_end_to_end(self):
        """Two IDs at seed 0 are ordered, canonical and convert losslessly."""
        gen = MonotonicGenerator()
        first = gen.generate(0)
        second = gen.generate(0)
        assert len(first) == len(second) == 26
        assert first[:10] == second[:10] == "0" * 10
        assert second > first
        assert first[-1] == second[-1] == "0"
        assert from_binary(to_binary(first)) == first
        assert from_binary(to_binary(second)) == second
