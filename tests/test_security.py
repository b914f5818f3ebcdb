"""
Security tests for shecomp.

Tests specifically for hostile or out-of-range input:
- SHE length limit (2^40 - 1 bits)
- Malformed hex
- Misaligned caller-padded input
"""

import pytest

from shecomp.core_crypto.errors import (
    SheCompError, MessageTooLargeError, InvalidHexCharError, OddLengthError,
    NotBlockAlignedError,
)
from shecomp.core_crypto.framing import (
    Message, check_bit_length, decode_message, decode_blocks, MAX_BIT_LENGTH
)
from shecomp.core_crypto.miyaguchi_preneel import compress_hex, compress_without_padding


class TestLengthLimit:
    """Security tests for the SHE message length limit."""

    def test_limit_value(self):
        """Limit is 2^40 - 1 bits."""
        assert MAX_BIT_LENGTH == 2 ** 40 - 1

    def test_largest_message_accepted(self):
        """2^37 - 1 bytes (2^40 - 8 bits) is within the limit."""
        assert check_bit_length(2 ** 37 - 1) == 2 ** 40 - 8

    def test_one_byte_over_rejected(self):
        """2^37 bytes (2^40 bits) exceeds the limit."""
        with pytest.raises(MessageTooLargeError) as exc:
            check_bit_length(2 ** 37)
        assert exc.value.bit_length == 2 ** 40
        assert exc.value.max_bit_length == MAX_BIT_LENGTH

    def test_boundary_with_lowered_limit(self):
        """decode_message checks the limit after consuming all input."""
        assert decode_message("00" * 16, max_bit_length=128).bit_length == 128
        with pytest.raises(MessageTooLargeError):
            decode_message("00" * 17, max_bit_length=128)

    def test_from_bytes_checks_limit(self):
        """Message.from_bytes applies the same limit."""
        with pytest.raises(MessageTooLargeError):
            Message.from_bytes(bytes(2), max_bit_length=15)

    def test_too_large_is_distinct_from_malformed(self):
        """Callers can tell 'too large' from 'malformed'."""
        assert not issubclass(MessageTooLargeError, InvalidHexCharError)
        assert not issubclass(MessageTooLargeError, OddLengthError)
        assert issubclass(MessageTooLargeError, SheCompError)
        assert MessageTooLargeError.kind != InvalidHexCharError.kind


class TestMalformedInput:
    """Security tests for malformed hex."""

    @pytest.mark.parametrize("text", [
        "0x00",
        "00\n",
        "0011\r\n",
        "00 11",
        "gg",
        "００",  # full-width digits
    ])
    def test_malformed_rejected(self, text):
        """Malformed input is rejected, never skipped."""
        with pytest.raises((InvalidHexCharError, OddLengthError)):
            compress_hex(text)

    def test_null_byte_rejected(self):
        """Embedded NUL is not a hex digit."""
        with pytest.raises(InvalidHexCharError):
            decode_message("00\x0000")

    def test_non_ascii_bytes_rejected(self):
        """Binary garbage is rejected."""
        with pytest.raises(InvalidHexCharError):
            decode_message(b"\x80\x81")


class TestAlignment:
    """Security tests for the no-padding variant."""

    def test_short_final_chunk(self):
        """A final chunk shorter than a block is fatal."""
        with pytest.raises(NotBlockAlignedError):
            decode_blocks("00" * 31)

    def test_long_block_rejected(self):
        """An oversize block is not truncated."""
        with pytest.raises(NotBlockAlignedError):
            compress_without_padding([bytes(17)])

    def test_empty_block_rejected(self):
        """An empty block is not zero-padded."""
        with pytest.raises(NotBlockAlignedError):
            compress_without_padding([bytes(16), b""])
