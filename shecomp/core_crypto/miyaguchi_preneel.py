"""
Miyaguchi-Preneel Compression (AUTOSAR SHE)

Implements the SHE one-way compression function on top of AES-128:

    H_0 = 0^128
    H_i = E(H_{i-1}, M_i) XOR M_i XOR H_{i-1}

where E(K, P) is AES-128 encryption of block P under key K. The message is
padded first (see padding.py); the output is the final chaining value H_n.

Components:
- AES-128 single-block encryption (cryptography package)
- Chaining step and block fold
- compress(): padded compression of a framed Message
- compress_without_padding(): compression of caller-padded blocks
- Hex-in/hex-out convenience wrappers

Reference vector (SHE specification):
    M = 6bc1bee22e409f96e93d7e117393172aae2d8a571e03ac9c9eb76fac45af8e51
    H = c7277a0dc1fb853b5f4d9cbd26be40c6
"""

import functools
import operator
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from .errors import CipherSetupError, NotBlockAlignedError
from .framing import BLOCK_SIZE, Message, decode_blocks, decode_message, split_blocks
from .hex_codec import HexSource, encode_hex
from .padding import compute_padding, pad_message

if TYPE_CHECKING:
    from ..integration.event_logger import EventLogger


KEY_SIZE = 16                        # AES-128
INITIAL_STATE = bytes(BLOCK_SIZE)    # H_0 = 0^128


# ============================================================================
# Primitives
# ============================================================================

def xor_bytes(*data: bytes) -> bytes:
    """
    XOR equal-length byte strings together.

    Raises:
        ValueError: If the inputs differ in length
    """
    if not all(len(d) == len(data[0]) for d in data):
        raise ValueError("All byte strings must be of the same length")
    return bytes(functools.reduce(operator.xor, t) for t in zip(*data))


def aes_encrypt_block(key: bytes, block: bytes) -> bytes:
    """
    Encrypt a single 16-byte block with AES-128.

    Args:
        key: 16-byte AES key
        block: 16-byte plaintext block

    Returns:
        16-byte ciphertext

    Raises:
        CipherSetupError: If the key cannot be used as an AES-128 key
        NotBlockAlignedError: If block is not 16 bytes
    """
    if len(block) != BLOCK_SIZE:
        raise NotBlockAlignedError(len(block), block_size=BLOCK_SIZE)
    if len(key) != KEY_SIZE:
        raise CipherSetupError(f"AES-128 requires a {KEY_SIZE}-byte key, got {len(key)} bytes")

    try:
        cipher = Cipher(algorithms.AES(bytes(key)), modes.ECB(), backend=default_backend())
    except ValueError as e:
        raise CipherSetupError(f"failed to create cipher: {e}") from e

    encryptor = cipher.encryptor()
    return encryptor.update(bytes(block)) + encryptor.finalize()


def compress_step(state: bytes, block: bytes) -> bytes:
    """
    One Miyaguchi-Preneel chaining step.

    Args:
        state: Current chaining value (16 bytes), used as the AES key
        block: Next message block (16 bytes)

    Returns:
        Next chaining value: E(state, block) XOR block XOR state
    """
    encrypted = aes_encrypt_block(state, block)
    return xor_bytes(encrypted, block, state)


def compress_blocks(blocks: Iterable[bytes]) -> bytes:
    """
    Fold 16-byte blocks through the chaining step from the zero state.

    Raises:
        NotBlockAlignedError: On the first block that is not 16 bytes
    """
    state = INITIAL_STATE
    for index, block in enumerate(blocks):
        if len(block) != BLOCK_SIZE:
            raise NotBlockAlignedError(len(block), index, BLOCK_SIZE)
        state = compress_step(state, block)
    return state


# ============================================================================
# Public API
# ============================================================================

def compress(message: Message, event_logger: Optional['EventLogger'] = None) -> bytes:
    """
    Compress a message with SHE padding applied.

    Args:
        message: Framed message
        event_logger: Optional logger notified of the run

    Returns:
        16-byte compression output

    Raises:
        CipherSetupError: If AES key setup fails (internal fault)

    Example:
        >>> msg = decode_message("6bc1bee22e409f96e93d7e117393172a"
        ...                      "ae2d8a571e03ac9c9eb76fac45af8e51")
        >>> compress(msg).hex()
        'c7277a0dc1fb853b5f4d9cbd26be40c6'
    """
    tail, _ = split_blocks(pad_message(message))
    blocks = list(message.blocks) + tail

    out = compress_blocks(blocks)

    if event_logger is not None:
        event_logger.log_compression(message.to_bytes(), len(blocks), padded=True)
    return out


def compress_without_padding(blocks: Sequence[bytes],
                             event_logger: Optional['EventLogger'] = None) -> bytes:
    """
    Compress caller-padded blocks; no padding is added.

    The input must already carry SHE padding. Every block must be exactly
    16 bytes.

    Args:
        blocks: Ordered 16-byte blocks
        event_logger: Optional logger notified of the run

    Returns:
        16-byte compression output

    Raises:
        NotBlockAlignedError: If any block is not 16 bytes
        CipherSetupError: If AES key setup fails (internal fault)
    """
    blocks = [bytes(b) for b in blocks]

    out = compress_blocks(blocks)

    if event_logger is not None:
        event_logger.log_compression(b"".join(blocks), len(blocks), padded=False)
    return out


# ============================================================================
# Convenience Functions
# ============================================================================

def compress_hex(source: HexSource) -> str:
    """Hex in, hex out: padded compression."""
    return encode_hex(compress(decode_message(source)))


def padding_hex(source: HexSource) -> str:
    """Hex in, hex out: the padding for the given message."""
    return encode_hex(compute_padding(decode_message(source)))


def compress_without_padding_hex(source: HexSource) -> str:
    """Hex in, hex out: compression of caller-padded input."""
    return encode_hex(compress_without_padding(decode_blocks(source)))


# Self-test when run directly
if __name__ == "__main__":
    print("SHE Compression Module Test")
    print("=" * 70)

    vectors: List[tuple] = [
        ("compress", compress_hex,
         "6bc1bee22e409f96e93d7e117393172aae2d8a571e03ac9c9eb76fac45af8e51",
         "c7277a0dc1fb853b5f4d9cbd26be40c6"),
        ("padding", padding_hex,
         "6bc1bee22e409f96e93d7e117393172aae2d8a571e03ac9c9eb76fac45af8e51",
         "80000000000000000000000000000100"),
        ("no padding", compress_without_padding_hex,
         "000102030405060708090a0b0c0d0e0f010153484500800000000000000000b0",
         "118a46447a770d87828a69c222e2d17e"),
    ]

    all_passed = True
    for i, (name, fn, data, expected) in enumerate(vectors, 1):
        got = fn(data)
        ok = got == expected
        all_passed = all_passed and ok
        print(f"\n[Test {i}] {name}")
        print(f"  Input:    {data}")
        print(f"  Output:   {got}")
        print(f"  Expected: {expected}")
        print(f"  Status: {'✓ PASS' if ok else '✗ FAIL'}")

    print("\n" + "=" * 70)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
