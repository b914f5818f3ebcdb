"""
Message Framing

Turns hex input into a Message: an ordered tuple of full 16-byte blocks
plus a remainder of 0-15 bytes. The remainder is always present, even when
empty, because an empty remainder still gets a full padding block.

The whole input is decoded before anything else happens. The SHE length
limit (2^40 - 1 bits) is checked once, after all input has been consumed.

Two framings are provided:
- decode_message(): blocks + remainder, for compression with padding
- decode_blocks(): strictly aligned blocks, for caller-padded input
"""

from dataclasses import dataclass
from typing import List, Tuple

from .errors import MessageTooLargeError, NotBlockAlignedError
from .hex_codec import HexSource, decode_hex, read_source


# Constants
BLOCK_SIZE = 16                 # 128-bit blocks
HEX_BLOCK_CHARS = BLOCK_SIZE * 2
MAX_BIT_LENGTH = (1 << 40) - 1  # SHE protocol limit


@dataclass(frozen=True)
class Message:
    """
    A framed plaintext.

    Attributes:
        blocks: Full 16-byte blocks, in order
        remainder: Trailing partial block, 0-15 bytes
    """
    blocks: Tuple[bytes, ...] = ()
    remainder: bytes = b""

    def __post_init__(self):
        object.__setattr__(self, "blocks", tuple(bytes(b) for b in self.blocks))
        object.__setattr__(self, "remainder", bytes(self.remainder))

        for index, block in enumerate(self.blocks):
            if len(block) != BLOCK_SIZE:
                raise NotBlockAlignedError(len(block), index, BLOCK_SIZE)
        if len(self.remainder) >= BLOCK_SIZE:
            raise ValueError(
                f"remainder must be shorter than {BLOCK_SIZE} bytes, "
                f"got {len(self.remainder)}"
            )

    @property
    def byte_length(self) -> int:
        """Total message length in bytes."""
        return len(self.blocks) * BLOCK_SIZE + len(self.remainder)

    @property
    def bit_length(self) -> int:
        """Total message length in bits."""
        return self.byte_length * 8

    def to_bytes(self) -> bytes:
        """Concatenate blocks and remainder back into the raw message."""
        return b"".join(self.blocks) + self.remainder

    @classmethod
    def from_bytes(cls, data: bytes, max_bit_length: int = MAX_BIT_LENGTH) -> 'Message':
        """
        Frame raw bytes.

        Args:
            data: Raw message bytes
            max_bit_length: Length limit in bits

        Returns:
            Framed message

        Raises:
            MessageTooLargeError: If the message exceeds max_bit_length
        """
        blocks, remainder = split_blocks(data)
        check_bit_length(len(data), max_bit_length)
        return cls(blocks=tuple(blocks), remainder=remainder)


def split_blocks(data: bytes) -> Tuple[List[bytes], bytes]:
    """
    Split raw bytes into full blocks and a remainder.

    Args:
        data: Raw bytes

    Returns:
        Tuple of (blocks, remainder); remainder is b"" when data is aligned
    """
    full = len(data) - len(data) % BLOCK_SIZE
    blocks = [bytes(data[i:i + BLOCK_SIZE]) for i in range(0, full, BLOCK_SIZE)]
    return blocks, bytes(data[full:])


def check_bit_length(byte_length: int, max_bit_length: int = MAX_BIT_LENGTH) -> int:
    """
    Enforce the SHE message length limit.

    Args:
        byte_length: Message length in bytes
        max_bit_length: Largest accepted bit-length

    Returns:
        The message bit-length

    Raises:
        MessageTooLargeError: If 8 * byte_length exceeds max_bit_length
    """
    bit_length = byte_length * 8
    if bit_length > max_bit_length:
        raise MessageTooLargeError(bit_length, max_bit_length)
    return bit_length


def decode_message(source: HexSource, max_bit_length: int = MAX_BIT_LENGTH) -> Message:
    """
    Decode hex input into a Message.

    Args:
        source: Hex str, ASCII bytes, or a readable stream
        max_bit_length: Largest accepted bit-length

    Returns:
        Framed message

    Raises:
        OddLengthError: Odd number of hex digits
        InvalidHexCharError: Non-hex character, including whitespace
        MessageTooLargeError: Decoded message exceeds max_bit_length

    Example:
        >>> msg = decode_message("88" * 17)
        >>> len(msg.blocks), msg.remainder
        (1, b'\\x88')
    """
    data = decode_hex(read_source(source))
    return Message.from_bytes(data, max_bit_length)


def decode_blocks(source: HexSource) -> List[bytes]:
    """
    Decode caller-padded hex input into aligned 16-byte blocks.

    Args:
        source: Hex str, ASCII bytes, or a readable stream

    Returns:
        List of 16-byte blocks

    Raises:
        OddLengthError: Odd number of hex digits
        InvalidHexCharError: Non-hex character, including whitespace
        NotBlockAlignedError: Final chunk shorter than 16 bytes
    """
    data = decode_hex(read_source(source))
    blocks, remainder = split_blocks(data)
    if remainder:
        raise NotBlockAlignedError(len(remainder), len(blocks), BLOCK_SIZE)
    return blocks
