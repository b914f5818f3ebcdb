"""
SHE padding.

The padded message is: message || 1 || 0...0 || L
where L is the message bit-length as a 40-bit big-endian integer, and the
zero run is the shortest that makes the total a multiple of 128 bits.
"""

from .framing import BLOCK_SIZE, Message


LENGTH_FIELD_BITS = 40
LENGTH_FIELD_BYTES = LENGTH_FIELD_BITS // 8
MARKER_BIT = 0x80


def padding_length(remainder_length: int) -> int:
    """
    Number of padding bytes for a remainder of the given length.

    Always between 6 and 21 bytes for a 0-15 byte remainder; an empty
    remainder gets one full block.
    """
    min_bits = 8 * remainder_length + 1 + LENGTH_FIELD_BITS
    return (min_bits // 128 + 1) * BLOCK_SIZE - remainder_length


def compute_padding(message: Message) -> bytes:
    """
    Compute the padding bytes for a message.

    Args:
        message: Framed message

    Returns:
        Padding such that remainder + padding is block-aligned

    Example:
        >>> compute_padding(Message()).hex()
        '80000000000000000000000000000000'
    """
    pad = bytearray(padding_length(len(message.remainder)))

    pad[-LENGTH_FIELD_BYTES:] = message.bit_length.to_bytes(LENGTH_FIELD_BYTES, "big")
    # OR, not assign: with a 5-byte pad the marker shares a byte with L
    pad[0] |= MARKER_BIT

    return bytes(pad)


def pad_message(message: Message) -> bytes:
    """Return remainder + padding, the final block(s) of the message."""
    return message.remainder + compute_padding(message)
