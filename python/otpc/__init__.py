"""
otpc - One-time password engine

HOTP/TOTP code generation on a self-contained SHA-1/HMAC core, base32
secret decoding and otpauth:// URI parsing for QR-code provisioning.

Usage:
    from otpc import OTP, OtpType, parse_uri

    # Current TOTP code
    code = OTP("JBSWY3DPEHPK3PXP").generate_code()

    # HOTP code for a counter
    code = OTP("JBSWY3DPEHPK3PXP", otp_type=OtpType.HOTP).generate_hotp(5)

    # Credential from a scanned QR code
    credential = parse_uri("otpauth://totp/GitHub:alice?secret=JBSWY3DPEHPK3PXP")
"""

__version__ = "0.1.0"
__license__ = "CC0-1.0"

from otpc.sha1 import sha1
from otpc.hmac_sha1 import hmac_sha1
from otpc.otp import OTP, OtpType, OtpParameters
from otpc.uri import Credential, parse_uri, build_uri, percent_decode
from otpc.accounts import AccountStore, generate_secret
from otpc.errors import (
    OTPError,
    InvalidSecretEncoding,
    MissingCounterForHotp,
    URIError,
    InvalidUriScheme,
    MalformedUri,
    EmptyAccountName,
    MissingSecretParameter,
    EmptySecretParameter,
    InvalidPercentEncoding,
    NonTextDecodedBytes,
    AccountExists,
    AccountNotFound,
)

__all__ = [
    # Primitives
    "sha1",
    "hmac_sha1",
    # Codes
    "OTP",
    "OtpType",
    "OtpParameters",
    # Provisioning URIs
    "Credential",
    "parse_uri",
    "build_uri",
    "percent_decode",
    # Accounts
    "AccountStore",
    "generate_secret",
    # Errors
    "OTPError",
    "InvalidSecretEncoding",
    "MissingCounterForHotp",
    "URIError",
    "InvalidUriScheme",
    "MalformedUri",
    "EmptyAccountName",
    "MissingSecretParameter",
    "EmptySecretParameter",
    "InvalidPercentEncoding",
    "NonTextDecodedBytes",
    "AccountExists",
    "AccountNotFound",
]
