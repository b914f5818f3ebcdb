"""
shecomp - AUTOSAR SHE compression function

Miyaguchi-Preneel compression over AES-128 with SHE padding.

Usage:
    from shecomp import decode_message, compress, compute_padding

    msg = decode_message("6bc1bee22e409f96e93d7e117393172a"
                         "ae2d8a571e03ac9c9eb76fac45af8e51")
    compress(msg).hex()          # 'c7277a0dc1fb853b5f4d9cbd26be40c6'
    compute_padding(msg).hex()   # '80000000000000000000000000000100'
"""

from .core_crypto import (
    SheCompError,
    HexDecodeError,
    OddLengthError,
    InvalidHexCharError,
    MessageTooLargeError,
    NotBlockAlignedError,
    CipherSetupError,
    Message,
    decode_message,
    decode_blocks,
    compute_padding,
    compress,
    compress_without_padding,
    compress_hex,
    padding_hex,
    compress_without_padding_hex,
    encode_hex,
)

__all__ = [
    'SheCompError',
    'HexDecodeError',
    'OddLengthError',
    'InvalidHexCharError',
    'MessageTooLargeError',
    'NotBlockAlignedError',
    'CipherSetupError',
    'Message',
    'decode_message',
    'decode_blocks',
    'compute_padding',
    'compress',
    'compress_without_padding',
    'compress_hex',
    'padding_hex',
    'compress_without_padding_hex',
    'encode_hex',
]
__version__ = '0.1.0'
