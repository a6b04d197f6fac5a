#!/usr/bin/env python3
"""
otpc CLI - Command-line one-time password generator.

Usage:
    otpc generate --account ACCOUNT [--issuer ISSUER]
    otpc code <secret> [--digits N] [--period SECONDS]
    otpc hotp <secret> --counter N [--digits N]
    otpc parse-uri <uri|-> [--code]

Examples:
    # Create a secret for a new account
    otpc generate --account user@example.com --issuer GitHub

    # Current TOTP code
    otpc code JBSWY3DPEHPK3PXP

    # HOTP code for counter 5
    otpc hotp JBSWY3DPEHPK3PXP --counter 5

    # Read a URI decoded from a QR code
    zbarimg -q --raw qr.png | otpc parse-uri - --code
"""

import argparse
import logging
import sys
from typing import Optional

from otpc import __version__
from otpc.accounts import generate_secret
from otpc.errors import OTPError
from otpc.otp import DEFAULT_DIGITS, DEFAULT_PERIOD, OTP, OtpType
from otpc.uri import DEFAULT_ISSUER, Credential, build_uri, parse_uri

logger = logging.getLogger(__name__)


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate a secret and provisioning URI for a new account."""
    name = args.account.strip()
    if not name:
        raise ValueError("Account name must not be empty")
    credential = Credential(
        name=name,
        secret=generate_secret(),
        issuer=(args.issuer or "").strip() or DEFAULT_ISSUER,
    )
    otp = OTP(credential.secret)

    print("Secret (Base32):", credential.secret)
    print()
    print("QR Code URI:", build_uri(credential))
    print()
    print("Current code:", otp.generate_code())
    return 0


def cmd_code(args: argparse.Namespace) -> int:
    """Print the current TOTP code for a secret."""
    otp = OTP(args.secret, digits=args.digits, period=args.period)
    print(otp.generate_code())
    return 0


def cmd_hotp(args: argparse.Namespace) -> int:
    """Print the HOTP code for a counter."""
    otp = OTP(args.secret, digits=args.digits, otp_type=OtpType.HOTP)
    print(otp.generate_hotp(args.counter))
    return 0


def cmd_parse_uri(args: argparse.Namespace) -> int:
    """Parse an otpauth:// URI."""
    uri = sys.stdin.read().strip() if args.uri == "-" else args.uri
    credential = parse_uri(uri)

    print("Name:", credential.name)
    print("Issuer:", credential.issuer)
    print("Secret:", credential.secret)
    if args.code:
        print("Current code:", OTP(credential.secret).generate_code())
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="otpc",
        description="otpc - HOTP/TOTP code generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"otpc {__version__}"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # generate command
    generate_parser = subparsers.add_parser("generate", help="Generate a new OTP secret")
    generate_parser.add_argument("-a", "--account", required=True, help="Account name")
    generate_parser.add_argument("-i", "--issuer", help="Service name")

    # code command
    code_parser = subparsers.add_parser("code", help="Generate current TOTP code")
    code_parser.add_argument("secret", help="Base32 secret")
    code_parser.add_argument("--digits", type=int, default=DEFAULT_DIGITS, help="Code length")
    code_parser.add_argument("--period", type=int, default=DEFAULT_PERIOD, help="Time step in seconds")

    # hotp command
    hotp_parser = subparsers.add_parser("hotp", help="Generate HOTP code")
    hotp_parser.add_argument("secret", help="Base32 secret")
    hotp_parser.add_argument("-c", "--counter", type=int, required=True, help="Counter value")
    hotp_parser.add_argument("--digits", type=int, default=DEFAULT_DIGITS, help="Code length")

    # parse-uri command
    parse_parser = subparsers.add_parser("parse-uri", help="Parse an otpauth:// URI")
    parse_parser.add_argument("uri", help="otpauth:// URI, or - to read from stdin")
    parse_parser.add_argument("--code", action="store_true", help="Also print the current code")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "generate": cmd_generate,
        "code": cmd_code,
        "hotp": cmd_hotp,
        "parse-uri": cmd_parse_uri,
    }

    try:
        return commands[args.command](args)
    except (OTPError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
