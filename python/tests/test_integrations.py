"""Tests for otpc integrations - FastAPI router."""

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi import FastAPI
from fastapi.testclient import TestClient

from otpc.integrations.fastapi import OtpRouter

RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(OtpRouter().router)
    return TestClient(app)


class TestOtpRouter:
    """Test OtpRouter endpoints."""

    def test_totp_code(self, client):
        """RFC 6238 value for T=59."""
        resp = client.post("/otp/code", json={"secret": RFC_SECRET, "digits": 8, "timestamp": 59})
        assert resp.status_code == 200
        assert resp.json() == {"code": "94287082"}

    def test_totp_current(self, client):
        """Code for the current time."""
        resp = client.post("/otp/code", json={"secret": "JBSWY3DPEHPK3PXP"})
        assert resp.status_code == 200
        assert len(resp.json()["code"]) == 6

    def test_hotp_code(self, client):
        """RFC 4226 value for counter 2."""
        resp = client.post("/otp/hotp", json={"secret": RFC_SECRET, "counter": 2})
        assert resp.status_code == 200
        assert resp.json() == {"code": "359152"}

    def test_invalid_secret(self, client):
        """Undecodable secret is a 400."""
        resp = client.post("/otp/code", json={"secret": "1890"})
        assert resp.status_code == 400

    def test_invalid_digits(self, client):
        """Out-of-range digits fails validation."""
        resp = client.post("/otp/code", json={"secret": RFC_SECRET, "digits": 12})
        assert resp.status_code == 422

    def test_timestamp_out_of_range(self, client):
        """Timestamp past the 64-bit counter range is a 400."""
        resp = client.post(
            "/otp/code",
            json={"secret": "JBSWY3DPEHPK3PXP", "timestamp": 2**64 * 30, "period": 30},
        )
        assert resp.status_code == 400

    def test_parse(self, client):
        """URI is parsed into a credential."""
        uri = "otpauth://totp/Example:alice@google.com?secret=JBSWY3DPEHPK3PXP&issuer=Example"
        resp = client.post("/otp/parse", json={"uri": uri})
        assert resp.status_code == 200
        assert resp.json() == {
            "name": "alice@google.com",
            "issuer": "Example",
            "secret": "JBSWY3DPEHPK3PXP",
        }

    def test_parse_invalid(self, client):
        """Invalid URI is a 400."""
        resp = client.post("/otp/parse", json={"uri": "https://example.com"})
        assert resp.status_code == 400

    def test_custom_prefix(self):
        """Router prefix is configurable."""
        app = FastAPI()
        app.include_router(OtpRouter(prefix="/2fa").router)
        resp = TestClient(app).post("/2fa/hotp", json={"secret": RFC_SECRET, "counter": 0})
        assert resp.json() == {"code": "755224"}
