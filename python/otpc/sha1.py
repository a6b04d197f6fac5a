"""
SHA-1 message digest (FIPS 180-4).

Pure-Python implementation used as the hash primitive for HMAC-SHA1 and
therefore for every HOTP/TOTP code. The result is bit-identical to
``hashlib.sha1``.

Example:
    >>> from otpc.sha1 import sha1
    >>> sha1(b"abc").hex()
    'a9993e364706816aba3e25717850c26c9cd0d89d'
"""

import struct

# Sizes in bytes
BLOCK_SIZE = 64
DIGEST_SIZE = 20

# Initial hash value H(0)
_H0 = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

# Round constants, one per 20-round stage
_K = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)

_MASK = 0xFFFFFFFF


def _rotl(value: int, shift: int) -> int:
    """Rotate a 32-bit word left."""
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _pad(data: bytes) -> bytes:
    """Append the 0x80 separator, zero fill and the 64-bit bit length."""
    bit_length = (len(data) * 8) & 0xFFFFFFFFFFFFFFFF
    zeros = (55 - len(data)) % BLOCK_SIZE
    return data + b"\x80" + b"\x00" * zeros + struct.pack(">Q", bit_length)


def _compress(state: tuple, block: bytes) -> tuple:
    """Process one 64-byte block and return the new state words."""
    w = list(struct.unpack(">16I", block))
    for i in range(16, 80):
        w.append(_rotl(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    a, b, c, d, e = state

    for i in range(80):
        if i < 20:
            f = (b & c) | (~b & d)
            k = _K[0]
        elif i < 40:
            f = b ^ c ^ d
            k = _K[1]
        elif i < 60:
            f = (b & c) | (b & d) | (c & d)
            k = _K[2]
        else:
            f = b ^ c ^ d
            k = _K[3]

        temp = (_rotl(a, 5) + (f & _MASK) + e + k + w[i]) & _MASK
        e = d
        d = c
        c = _rotl(b, 30)
        b = a
        a = temp

    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d, e)))


def sha1(data: bytes) -> bytes:
    """
    Compute the SHA-1 digest of data.

    Args:
        data: Message bytes (any length)

    Returns:
        20-byte digest
    """
    padded = _pad(bytes(data))
    state = _H0
    for offset in range(0, len(padded), BLOCK_SIZE):
        state = _compress(state, padded[offset : offset + BLOCK_SIZE])
    return struct.pack(">5I", *state)
