"""
Base32 secrets (RFC 4648 alphabet, no padding).

Authenticator apps show secrets as base32 text that users retype by hand,
so decoding is case-insensitive and ignores spaces. Characters outside the
alphabet are skipped unless ``strict`` is set.

Example:
    >>> from otpc import base32
    >>> base32.decode("jbsw y3dp ehpk 3pxp")
    b'Hello!\\xde\\xad\\xbe\\xef'
"""

import base64
import logging

from otpc.errors import InvalidSecretEncoding

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_VALUES = {char: value for value, char in enumerate(ALPHABET)}


def decode(text: str, strict: bool = False) -> bytes:
    """
    Decode base32 secret text into raw key bytes.

    Args:
        text: Base32 secret, any case, spaces allowed
        strict: Reject characters outside the alphabet instead of skipping them

    Returns:
        Decoded bytes (trailing bits that do not fill a byte are dropped)

    Raises:
        InvalidSecretEncoding: strict mode and an invalid character was found
    """
    buffer = 0
    bits = 0
    skipped = 0
    result = bytearray()

    for char in text.upper().replace(" ", ""):
        value = _VALUES.get(char)
        if value is None:
            if strict and not (char.isspace() or char == "="):
                raise InvalidSecretEncoding(f"Invalid base32 character: {char!r}")
            skipped += 1
            continue

        buffer = ((buffer << 5) | value) & 0xFFFF
        bits += 5
        if bits >= 8:
            bits -= 8
            result.append((buffer >> bits) & 0xFF)

    if skipped:
        logger.debug("Skipped %d non-base32 characters in secret", skipped)

    return bytes(result)


def encode(data: bytes) -> str:
    """
    Encode key bytes as base32 text without padding.

    Args:
        data: Raw key bytes

    Returns:
        Upper-case base32 string
    """
    return base64.b32encode(data).decode("ascii").rstrip("=")
