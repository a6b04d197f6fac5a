"""
otpauth:// provisioning URIs.

Grammar (Google Authenticator Key Uri Format):

    otpauth://{totp|hotp}/[ISSUER:]ACCOUNTNAME?secret=SECRET[&issuer=ISSUER][&...]

The label and every query value are percent-encoded; ``+`` is accepted as a
legacy encoding of a space. The OTP type and the algorithm, digits, period
and counter parameters are read past but not applied: codes are always
generated with the caller's parameters.

Example:
    >>> from otpc.uri import parse_uri
    >>> parse_uri("otpauth://totp/Example:alice@google.com?secret=JBSWY3DPEHPK3PXP")
    Credential(name='alice@google.com', secret='JBSWY3DPEHPK3PXP', issuer='Example')
"""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

from otpc.errors import (
    EmptyAccountName,
    EmptySecretParameter,
    InvalidPercentEncoding,
    InvalidUriScheme,
    MalformedUri,
    MissingSecretParameter,
    NonTextDecodedBytes,
)
from otpc.otp import OtpType

logger = logging.getLogger(__name__)

SCHEME_PREFIX = "otpauth://"
DEFAULT_ISSUER = "host"

_HEX_DIGITS = b"0123456789abcdefABCDEF"


@dataclass(frozen=True)
class Credential:
    """An account's display name, base32 secret and issuer label."""

    name: str
    secret: str
    issuer: str = DEFAULT_ISSUER


def percent_decode(text: str) -> str:
    """
    Decode %XX escapes and ``+`` in a URI component.

    Raises:
        InvalidPercentEncoding: If a % is not followed by two hex digits
        NonTextDecodedBytes: If the decoded bytes are not valid UTF-8
    """
    data = text.encode("utf-8")
    result = bytearray()
    i = 0
    while i < len(data):
        byte = data[i]
        if byte == 0x25:  # %
            pair = data[i + 1 : i + 3]
            if len(pair) != 2 or any(b not in _HEX_DIGITS for b in pair):
                raise InvalidPercentEncoding(f"Invalid percent escape at position {i}")
            result.append(int(pair, 16))
            i += 3
            continue
        result.append(0x20 if byte == 0x2B else byte)  # + -> space
        i += 1

    try:
        return result.decode("utf-8")
    except UnicodeDecodeError as e:
        raise NonTextDecodedBytes(f"Decoded URI component is not valid UTF-8: {e}") from e


def _parse_label(label: str):
    """Split a decoded label into (issuer, name)."""
    issuer, sep, name = label.partition(":")
    if not sep:
        return DEFAULT_ISSUER, label.strip()
    return issuer.strip() or DEFAULT_ISSUER, name.strip()


def parse_uri(uri: str) -> Credential:
    """
    Parse an otpauth:// URI into a Credential.

    Args:
        uri: URI text, usually recovered from a QR code

    Returns:
        Credential with name, issuer and secret

    Raises:
        URIError: One of its subclasses, depending on what is wrong
    """
    if not uri.startswith(SCHEME_PREFIX):
        raise InvalidUriScheme("Not an otpauth:// URI")

    otp_type, sep, rest = uri[len(SCHEME_PREFIX) :].partition("/")
    if not sep:
        raise MalformedUri("Missing '/' between OTP type and label")

    label, _, query = rest.partition("?")
    issuer, name = _parse_label(percent_decode(label))
    if not name:
        raise EmptyAccountName("Account name is empty")

    secret: Optional[str] = None
    for entry in query.split("&"):
        if not entry:
            continue
        raw_key, _, raw_value = entry.partition("=")
        key = percent_decode(raw_key).lower()
        value = percent_decode(raw_value)

        if key == "secret":
            secret = value
        elif key == "issuer":
            if value.strip():
                issuer = value.strip()
        else:
            logger.debug("Ignoring otpauth parameter %r", key)

    if secret is None:
        raise MissingSecretParameter("No secret parameter in URI")
    if not secret:
        raise EmptySecretParameter("secret parameter is empty")

    logger.debug("Parsed %s credential for %r (issuer %r)", otp_type, name, issuer)
    return Credential(name=name, secret=secret, issuer=issuer)


def build_uri(credential: Credential, otp_type: OtpType = OtpType.TOTP) -> str:
    """
    Build a provisioning URI for QR code generation.

    Args:
        credential: Account to encode
        otp_type: OTP type written into the URI

    Returns:
        otpauth:// URI that parse_uri() maps back to credential

    Raises:
        ValueError: If both issuer and name contain ':'
    """
    name = quote(credential.name, safe="@")
    if ":" not in credential.issuer:
        label = f"{quote(credential.issuer, safe='')}:{name}"
    elif ":" in credential.name:
        raise ValueError("Issuer and account name cannot both contain ':'")
    else:
        # Label is split at the first ':' after decoding; issuer= carries it
        label = name
    return (
        f"{SCHEME_PREFIX}{otp_type.value}/{label}"
        f"?secret={quote(credential.secret, safe='')}"
        f"&issuer={quote(credential.issuer, safe='')}"
    )
