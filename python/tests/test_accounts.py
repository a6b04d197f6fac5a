"""Tests for the in-memory account store."""

import threading
import pytest
from otpc.accounts import AccountStore, generate_secret
from otpc.uri import Credential
from otpc.otp import OTP
from otpc import base32
from otpc.errors import AccountExists, AccountNotFound, EmptyAccountName


class TestGenerateSecret:
    """Test generate_secret."""

    def test_length(self):
        """Default secret is 160 bits."""
        secret = generate_secret()
        assert len(base32.decode(secret)) == 20
        assert "=" not in secret

    def test_random(self):
        """Secrets differ."""
        assert generate_secret() != generate_secret()


class TestAccountStore:
    """Test AccountStore class."""

    def test_add_get(self):
        """Added account can be looked up."""
        store = AccountStore()
        c = Credential(name="alice", secret="JBSWY3DPEHPK3PXP", issuer="GitHub")
        store.add(c)
        assert store.get("alice") == c
        assert "alice" in store
        assert len(store) == 1

    def test_duplicate_name(self):
        """Names are unique."""
        store = AccountStore([Credential(name="alice", secret="ABCDEFGH")])
        with pytest.raises(AccountExists):
            store.add(Credential(name="alice", secret="IJKLMNOP"))

    def test_get_missing(self):
        """Unknown name fails."""
        with pytest.raises(AccountNotFound):
            AccountStore().get("nobody")

    def test_remove(self):
        """Removed account is gone."""
        store = AccountStore([Credential(name="alice", secret="ABCDEFGH")])
        store.remove("alice")
        assert "alice" not in store
        with pytest.raises(AccountNotFound):
            store.remove("alice")

    def test_list_sorted(self):
        """list() is sorted by name."""
        store = AccountStore([
            Credential(name="carol", secret="ABCDEFGH"),
            Credential(name="alice", secret="ABCDEFGH"),
            Credential(name="bob", secret="ABCDEFGH"),
        ])
        assert [c.name for c in store.list()] == ["alice", "bob", "carol"]

    def test_create(self):
        """create() generates a usable secret."""
        store = AccountStore()
        c = store.create("alice", issuer="GitHub")
        assert c.issuer == "GitHub"
        assert len(store.code("alice")) == 6

    def test_create_default_issuer(self):
        """create() without issuer uses 'host'."""
        assert AccountStore().create("alice").issuer == "host"

    def test_add_blank_name(self):
        """add() rejects credentials with a blank name."""
        store = AccountStore()
        with pytest.raises(ValueError):
            store.add(Credential(name="", secret="ABCDEFGH"))
        with pytest.raises(ValueError):
            AccountStore([Credential(name="  ", secret="ABCDEFGH")])
        assert len(store) == 0

    def test_create_empty_name(self):
        """create() rejects blank names."""
        with pytest.raises(ValueError):
            AccountStore().create("  ")

    def test_import_uri(self):
        """import_uri() parses and stores."""
        store = AccountStore()
        c = store.import_uri("otpauth://totp/GitHub:alice?secret=JBSWY3DPEHPK3PXP")
        assert store.get("alice") == c
        assert c.issuer == "GitHub"

    def test_import_invalid_uri(self):
        """Invalid URI leaves the store untouched."""
        store = AccountStore()
        with pytest.raises(EmptyAccountName):
            store.import_uri("otpauth://totp/?secret=ABC")
        assert len(store) == 0

    def test_code(self):
        """code() matches the generator for the stored secret."""
        store = AccountStore([Credential(name="alice", secret="JBSWY3DPEHPK3PXP")])
        expected = OTP("JBSWY3DPEHPK3PXP").generate_code(1_700_000_000)
        assert store.code("alice", timestamp=1_700_000_000) == expected

    def test_concurrent_adds(self):
        """Concurrent adds keep every account."""
        store = AccountStore()

        def worker(start):
            for i in range(start, start + 50):
                store.add(Credential(name=f"user{i}", secret="ABCDEFGH"))

        threads = [threading.Thread(target=worker, args=(n * 50,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(store) == 200
