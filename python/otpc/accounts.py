"""
In-memory account list.

The store is an ordinary object: construct one, pass it to whoever needs
it. It owns the lock that serializes access to its credential list, so
several threads may look up codes while accounts are added or removed.

Example:
    >>> from otpc.accounts import AccountStore
    >>> store = AccountStore()
    >>> store.import_uri("otpauth://totp/GitHub:alice?secret=JBSWY3DPEHPK3PXP")
    Credential(name='alice', secret='JBSWY3DPEHPK3PXP', issuer='GitHub')
    >>> code = store.code("alice")
"""

import logging
import secrets
import threading
from typing import Dict, Iterable, List, Optional

from otpc import base32
from otpc.errors import AccountExists, AccountNotFound
from otpc.otp import DEFAULT_DIGITS, DEFAULT_PERIOD, OTP
from otpc.uri import DEFAULT_ISSUER, Credential, parse_uri

logger = logging.getLogger(__name__)

# 160-bit secrets, the RFC 4226 recommendation
SECRET_BYTES = 20


def generate_secret(length: int = SECRET_BYTES) -> str:
    """
    Generate a random base32 secret for a new account.

    Args:
        length: Secret length in bytes (default: 20)

    Returns:
        Base32 secret without padding
    """
    return base32.encode(secrets.token_bytes(length))


class AccountStore:
    """Credentials keyed by account name."""

    def __init__(self, credentials: Optional[Iterable[Credential]] = None):
        self._accounts: Dict[str, Credential] = {}
        self._lock = threading.Lock()
        for credential in credentials or ():
            self.add(credential)

    def add(self, credential: Credential) -> Credential:
        """
        Add a credential.

        Raises:
            AccountExists: If an account with the same name is stored
            ValueError: If the account name is blank
        """
        if not credential.name.strip():
            raise ValueError("Account name must not be empty")
        with self._lock:
            if credential.name in self._accounts:
                raise AccountExists(f"Account already exists: {credential.name}")
            self._accounts[credential.name] = credential
        logger.debug("Added account %r (issuer %r)", credential.name, credential.issuer)
        return credential

    def create(self, name: str, issuer: Optional[str] = None) -> Credential:
        """Create and add an account with a freshly generated secret."""
        if not name.strip():
            raise ValueError("Account name must not be empty")
        credential = Credential(
            name=name.strip(),
            secret=generate_secret(),
            issuer=(issuer or "").strip() or DEFAULT_ISSUER,
        )
        return self.add(credential)

    def import_uri(self, uri: str) -> Credential:
        """Parse an otpauth:// URI (e.g. from a scanned QR code) and add it."""
        return self.add(parse_uri(uri))

    def get(self, name: str) -> Credential:
        """
        Look up an account by name.

        Raises:
            AccountNotFound: If no such account exists
        """
        with self._lock:
            credential = self._accounts.get(name)
        if credential is None:
            raise AccountNotFound(f"No account named {name!r}")
        return credential

    def remove(self, name: str) -> Credential:
        """Remove an account and return it."""
        with self._lock:
            credential = self._accounts.pop(name, None)
        if credential is None:
            raise AccountNotFound(f"No account named {name!r}")
        logger.debug("Removed account %r", name)
        return credential

    def list(self) -> List[Credential]:
        """All accounts, sorted by name."""
        with self._lock:
            return sorted(self._accounts.values(), key=lambda c: c.name)

    def code(
        self,
        name: str,
        timestamp: Optional[int] = None,
        digits: int = DEFAULT_DIGITS,
        period: int = DEFAULT_PERIOD,
    ) -> str:
        """Current TOTP code for an account."""
        credential = self.get(name)
        return OTP(credential.secret, digits=digits, period=period).generate_code(timestamp)

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._accounts
