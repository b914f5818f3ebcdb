"""
Error taxonomy for the SHE compression function.

Every failure the core can report is a subclass of SheCompError, so a
caller can catch the whole family at once. The classes also inherit from
the builtin the rest of the code base raises for the same situation
(ValueError for bad input, RuntimeError for internal faults), which keeps
plain ``except ValueError`` handlers working.

Kinds:
- Malformed input: OddLengthError, InvalidHexCharError
- Length limit: MessageTooLargeError
- Alignment (no-padding variant): NotBlockAlignedError
- Internal cipher fault: CipherSetupError
"""

from typing import Optional


class SheCompError(Exception):
    """Base class for all compression errors."""

    kind = "error"


class HexDecodeError(SheCompError, ValueError):
    """Input is not a valid hexadecimal string."""

    kind = "malformed input"


class OddLengthError(HexDecodeError):
    """Hex input has an odd number of digits."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"odd number of hex digits: {length}")


class InvalidHexCharError(HexDecodeError):
    """Hex input contains a character outside [0-9a-fA-F]."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"invalid hex character {char!r} at position {position}")


class MessageTooLargeError(SheCompError, ValueError):
    """Message bit-length exceeds the SHE limit of 2^40 - 1 bits."""

    kind = "length limit"

    def __init__(self, bit_length: int, max_bit_length: int):
        self.bit_length = bit_length
        self.max_bit_length = max_bit_length
        super().__init__(
            f"message is {bit_length} bits long, limit is {max_bit_length} bits"
        )


class NotBlockAlignedError(SheCompError, ValueError):
    """A block handed to the compression engine is not exactly 16 bytes."""

    kind = "alignment"

    def __init__(self, length: int, index: Optional[int] = None, block_size: int = 16):
        self.length = length
        self.index = index
        where = f"block {index}" if index is not None else "block"
        super().__init__(
            f"{where} is {length} bytes, every block must be {block_size} bytes"
        )


class CipherSetupError(SheCompError, RuntimeError):
    """AES key setup failed for the chaining state."""

    kind = "internal cipher error"
