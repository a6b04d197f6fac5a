"""
FastAPI integration for OTP code generation.

Exposes the otpc engine over HTTP for services that show codes to users
(e.g. an internal dashboard holding shared team accounts).

Example:
    from fastapi import FastAPI
    from otpc.integrations.fastapi import OtpRouter

    app = FastAPI()
    app.include_router(OtpRouter().router)
"""

import logging
from typing import Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from otpc.errors import OTPError
from otpc.otp import DEFAULT_DIGITS, DEFAULT_PERIOD, MAX_COUNTER, MAX_DIGITS, OTP, OtpType
from otpc.uri import parse_uri

logger = logging.getLogger(__name__)


class CodeRequest(BaseModel):
    """Request for a TOTP code"""

    secret: str = Field(..., min_length=1, max_length=1024)
    digits: int = Field(DEFAULT_DIGITS, ge=1, le=MAX_DIGITS)
    period: int = Field(DEFAULT_PERIOD, gt=0)
    timestamp: Optional[int] = Field(None, ge=0)


class HotpRequest(BaseModel):
    """Request for an HOTP code"""

    secret: str = Field(..., min_length=1, max_length=1024)
    counter: int = Field(..., ge=0, le=MAX_COUNTER)
    digits: int = Field(DEFAULT_DIGITS, ge=1, le=MAX_DIGITS)


class ParseRequest(BaseModel):
    """Request to parse an otpauth:// URI"""

    uri: str = Field(..., min_length=1, max_length=4096)


class CredentialResponse(BaseModel):
    """Parsed credential"""

    name: str
    issuer: str
    secret: str


class OtpRouter:
    """FastAPI router for OTP endpoints"""

    def __init__(self, prefix: str = "/otp"):
        """
        Initialize OTP router.

        Args:
            prefix: URL prefix for all routes
        """
        self.router = APIRouter(prefix=prefix, tags=["otp"])
        self._setup_routes()

    def _setup_routes(self) -> None:
        """Set up API routes"""

        @self.router.post("/code")
        async def totp_code(request: CodeRequest) -> Dict[str, str]:
            """Current (or given-time) TOTP code"""
            try:
                otp = OTP(request.secret, digits=request.digits, period=request.period)
                return {"code": otp.generate_code(request.timestamp)}
            except (OTPError, ValueError) as e:
                raise HTTPException(status_code=400, detail=str(e))

        @self.router.post("/hotp")
        async def hotp_code(request: HotpRequest) -> Dict[str, str]:
            """HOTP code for a counter"""
            try:
                otp = OTP(request.secret, digits=request.digits, otp_type=OtpType.HOTP)
                return {"code": otp.generate_hotp(request.counter)}
            except (OTPError, ValueError) as e:
                raise HTTPException(status_code=400, detail=str(e))

        @self.router.post("/parse", response_model=CredentialResponse)
        async def parse(request: ParseRequest) -> CredentialResponse:
            """Parse a provisioning URI"""
            try:
                credential = parse_uri(request.uri)
            except OTPError as e:
                logger.debug("Rejected provisioning URI: %s", e)
                raise HTTPException(status_code=400, detail=str(e))
            return CredentialResponse(
                name=credential.name,
                issuer=credential.issuer,
                secret=credential.secret,
            )
