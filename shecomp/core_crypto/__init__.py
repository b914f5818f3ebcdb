# Core Cryptography Module
"""
SHE compression core:
- Hex codec and error taxonomy
- Message framing (16-byte blocks + remainder)
- SHE padding
- AES-128 Miyaguchi-Preneel compression
"""

from .errors import (
    SheCompError,
    HexDecodeError,
    OddLengthError,
    InvalidHexCharError,
    MessageTooLargeError,
    NotBlockAlignedError,
    CipherSetupError,
)

from .hex_codec import decode_hex, encode_hex, read_source

from .framing import (
    Message,
    decode_message,
    decode_blocks,
    split_blocks,
    check_bit_length,
    BLOCK_SIZE,
    MAX_BIT_LENGTH,
)

from .padding import compute_padding, padding_length, pad_message

from .miyaguchi_preneel import (
    compress,
    compress_without_padding,
    compress_blocks,
    compress_step,
    aes_encrypt_block,
    xor_bytes,
    compress_hex,
    padding_hex,
    compress_without_padding_hex,
)

__all__ = [
    # Errors
    'SheCompError',
    'HexDecodeError',
    'OddLengthError',
    'InvalidHexCharError',
    'MessageTooLargeError',
    'NotBlockAlignedError',
    'CipherSetupError',
    # Codec
    'decode_hex',
    'encode_hex',
    'read_source',
    # Framing
    'Message',
    'decode_message',
    'decode_blocks',
    'split_blocks',
    'check_bit_length',
    'BLOCK_SIZE',
    'MAX_BIT_LENGTH',
    # Padding
    'compute_padding',
    'padding_length',
    'pad_message',
    # Compression
    'compress',
    'compress_without_padding',
    'compress_blocks',
    'compress_step',
    'aes_encrypt_block',
    'xor_bytes',
    'compress_hex',
    'padding_hex',
    'compress_without_padding_hex',
]
