"""
otpc OTP - HOTP (RFC 4226) and TOTP (RFC 6238) code generation.

Codes are six-digit SHA-1 codes by default, the format authenticator apps expect.

Example:
    >>> from otpc.otp import OTP, OtpType
    >>> otp = OTP("JBSWY3DPEHPK3PXP")
    >>> code = otp.generate_code()
    >>> hotp = OTP.from_key(b"12345678901234567890", otp_type=OtpType.HOTP)
    >>> hotp.generate_hotp(0)
    '755224'
"""

import struct
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from otpc import base32
from otpc.errors import InvalidSecretEncoding, MissingCounterForHotp
from otpc.hmac_sha1 import hmac_sha1

DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30

MAX_DIGITS = 9
MAX_COUNTER = 2**64 - 1


class OtpType(Enum):
    """How the HMAC counter is obtained."""

    HOTP = "hotp"  # Explicit counter supplied by the caller
    TOTP = "totp"  # Counter derived from Unix time / period


@dataclass(frozen=True)
class OtpParameters:
    """Code length and TOTP time step."""

    digits: int = DEFAULT_DIGITS
    period: int = DEFAULT_PERIOD

    def __post_init__(self):
        if not 1 <= self.digits <= MAX_DIGITS:
            raise ValueError(f"digits must be between 1 and {MAX_DIGITS}, got {self.digits}")
        if self.period <= 0:
            raise ValueError(f"period must be positive, got {self.period}")


class OTP:
    """
    One-time password generator.

    Holds the decoded key, the generation parameters and the OTP type.
    Generation touches no shared state, so one instance can be used from
    several threads.
    """

    def __init__(
        self,
        secret: str,
        digits: int = DEFAULT_DIGITS,
        period: int = DEFAULT_PERIOD,
        otp_type: OtpType = OtpType.TOTP,
    ):
        """
        Initialize generator from a base32 secret.

        Args:
            secret: Base32 secret as shown by the issuer
            digits: Code length (1-9, default: 6)
            period: TOTP time step in seconds (default: 30)
            otp_type: OtpType.TOTP or OtpType.HOTP

        Raises:
            InvalidSecretEncoding: If the secret decodes to zero bytes
            ValueError: If digits or period is out of range
        """
        key = base32.decode(secret)
        if not key:
            raise InvalidSecretEncoding("Secret does not contain any base32 data")
        self._init(key, OtpParameters(digits, period), otp_type)

    @classmethod
    def from_key(
        cls,
        key: bytes,
        digits: int = DEFAULT_DIGITS,
        period: int = DEFAULT_PERIOD,
        otp_type: OtpType = OtpType.TOTP,
    ) -> "OTP":
        """
        Create generator from raw key bytes (no base32 decoding).

        Raises:
            InvalidSecretEncoding: If key is empty
        """
        if not key:
            raise InvalidSecretEncoding("Key must contain at least one byte")
        instance = cls.__new__(cls)
        instance._init(bytes(key), OtpParameters(digits, period), otp_type)
        return instance

    def _init(self, key: bytes, params: OtpParameters, otp_type: OtpType) -> None:
        self._key = key
        self.params = params
        self.otp_type = otp_type

    @property
    def digits(self) -> int:
        return self.params.digits

    @property
    def period(self) -> int:
        return self.params.period

    def generate_hotp(self, counter: int) -> str:
        """
        HOTP algorithm (RFC 4226).

        Args:
            counter: Counter value (unsigned 64-bit)

        Returns:
            OTP code as string (zero-padded to ``digits``)
        """
        if not 0 <= counter <= MAX_COUNTER:
            raise ValueError(f"counter must be an unsigned 64-bit integer, got {counter}")

        # Counter as 8-byte big-endian
        mac = hmac_sha1(self._key, struct.pack(">Q", counter))

        # Dynamic truncation
        offset = mac[19] & 0x0F
        binary = struct.unpack(">I", mac[offset : offset + 4])[0] & 0x7FFFFFFF

        code = binary % (10**self.digits)
        return str(code).zfill(self.digits)

    def timecode(self, timestamp: Optional[int] = None) -> int:
        """TOTP counter for a Unix timestamp (default: now)."""
        if timestamp is None:
            timestamp = int(time.time())
        return int(timestamp) // self.period

    def remaining_seconds(self, timestamp: Optional[int] = None) -> int:
        """Seconds until the TOTP code for timestamp rolls over."""
        if timestamp is None:
            timestamp = int(time.time())
        return self.period - int(timestamp) % self.period

    def generate_code(
        self,
        timestamp: Optional[int] = None,
        counter: Optional[int] = None,
    ) -> str:
        """
        Generate the code for this generator's OTP type.

        Args:
            timestamp: Unix timestamp for TOTP (default: current time)
            counter: Explicit counter; always used when given

        Returns:
            OTP code as string

        Raises:
            MissingCounterForHotp: HOTP generator called without a counter
        """
        if counter is not None:
            return self.generate_hotp(counter)

        if self.otp_type is OtpType.HOTP:
            raise MissingCounterForHotp("HOTP requires a counter value; use generate_hotp()")

        return self.generate_hotp(self.timecode(timestamp))

    def __str__(self) -> str:
        if self.otp_type is OtpType.HOTP:
            return repr(self)
        return self.generate_code()

    def __repr__(self) -> str:
        return f"OTP(type={self.otp_type.value}, digits={self.digits}, period={self.period})"
