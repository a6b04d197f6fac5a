"""Exceptions raised by the otpc engine.

Every failure is raised to the caller; deciding whether to exit the process
is left to the command-line layer.
"""


class OTPError(Exception):
    """Base class for all otpc errors."""

    pass


class InvalidSecretEncoding(OTPError):
    """Secret text does not decode to a usable key."""

    pass


class MissingCounterForHotp(OTPError):
    """HOTP code requested without a counter."""

    pass


class URIError(OTPError, ValueError):
    """otpauth:// URI could not be parsed."""

    pass


class InvalidUriScheme(URIError):
    """URI does not start with otpauth://."""

    pass


class MalformedUri(URIError):
    """URI is missing the separator between OTP type and label."""

    pass


class EmptyAccountName(URIError):
    """Label yields an empty account name."""

    pass


class MissingSecretParameter(URIError):
    """Query string has no secret parameter."""

    pass


class EmptySecretParameter(URIError):
    """secret parameter is present but empty."""

    pass


class InvalidPercentEncoding(URIError):
    """A % escape is truncated or not hexadecimal."""

    pass


class NonTextDecodedBytes(URIError):
    """Percent-decoded bytes are not valid UTF-8."""

    pass


class AccountExists(OTPError):
    """An account with the same name is already stored."""

    pass


class AccountNotFound(OTPError):
    """No account with the requested name."""

    pass
