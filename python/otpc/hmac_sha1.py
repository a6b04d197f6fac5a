"""
HMAC-SHA1 (RFC 2104) built on otpc.sha1.

Example:
    >>> from otpc.hmac_sha1 import hmac_sha1
    >>> mac = hmac_sha1(b"key", b"message")
    >>> len(mac)
    20
"""

from otpc.sha1 import BLOCK_SIZE, sha1

_IPAD = bytes([0x36] * BLOCK_SIZE)
_OPAD = bytes([0x5C] * BLOCK_SIZE)


def _prepare_key(key: bytes) -> bytes:
    """Hash keys longer than one block, then zero-pad to the block size."""
    if len(key) > BLOCK_SIZE:
        key = sha1(key)
    return key.ljust(BLOCK_SIZE, b"\x00")


def hmac_sha1(key: bytes, message: bytes) -> bytes:
    """
    Compute HMAC-SHA1 over message.

    Args:
        key: Secret key bytes (any length)
        message: Data to authenticate

    Returns:
        20-byte MAC
    """
    key = _prepare_key(bytes(key))
    inner = bytes(k ^ p for k, p in zip(key, _IPAD))
    outer = bytes(k ^ p for k, p in zip(key, _OPAD))
    return sha1(outer + sha1(inner + bytes(message)))
