"""
Hexadecimal codec used at the public boundaries.

Decoding is strict: only the characters 0-9, a-f and A-F are accepted.
Whitespace and line terminators are rejected rather than skipped, because
the input is the exact byte sequence to be compressed. Encoding is always
lower-case.
"""

import string
from typing import IO, Union

from .errors import InvalidHexCharError, OddLengthError


HEX_DIGITS = frozenset(string.hexdigits)

HexSource = Union[str, bytes, bytearray, IO]


def read_source(source: HexSource) -> str:
    """
    Normalise a hex source to a str.

    Args:
        source: A str, ASCII bytes, or any object with a ``read()`` method
            (text or binary stream). Streams are read to EOF.

    Returns:
        The hex text, unmodified

    Raises:
        InvalidHexCharError: If a bytes source holds non-ASCII data
        TypeError: If the source type is not supported
    """
    if hasattr(source, "read"):
        source = source.read()

    if isinstance(source, (bytes, bytearray)):
        try:
            return bytes(source).decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidHexCharError(chr(source[e.start]), e.start) from e

    if isinstance(source, str):
        return source

    raise TypeError(f"unsupported hex source: {type(source).__name__}")


def decode_hex(text: str) -> bytes:
    """
    Decode a hex string into bytes.

    Args:
        text: Hex digits, case-insensitive, even count

    Returns:
        Decoded bytes

    Raises:
        InvalidHexCharError: On the first character that is not a hex digit
        OddLengthError: If the digit count is odd
    """
    for position, char in enumerate(text):
        if char not in HEX_DIGITS:
            raise InvalidHexCharError(char, position)

    if len(text) % 2:
        raise OddLengthError(len(text))

    # bytes.fromhex() would silently skip whitespace; validated above.
    return bytes.fromhex(text)


def encode_hex(data: bytes) -> str:
    """Encode bytes as lower-case hex."""
    return bytes(data).hex()
