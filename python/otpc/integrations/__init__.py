"""
otpc Web Framework Integrations

Supported frameworks:
- FastAPI: OtpRouter (code generation and URI parsing endpoints)

Requires the ``fastapi`` extra: pip install otpc[fastapi]
"""

from otpc.integrations.fastapi import OtpRouter

__all__ = ["OtpRouter"]
