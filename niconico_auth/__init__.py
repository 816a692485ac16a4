"""
NicoNico Auth - Login and session token retrieval

Exchanges a mail/tel + password pair for a NicoNico user session token.
Secrets are held in pydantic SecretStr and never shown by default.

Usage:
    from niconico_auth import login
    from niconico_auth.adapters import EnvCredentialAdapter

    credentials = EnvCredentialAdapter(use_dotenv=True).load()
    session = await login(credentials)

    print(session.expose())
"""

__version__ = "0.1.0"

from niconico_auth.sdk.client import LoginClient, login
from niconico_auth.domain.credentials import Credentials
from niconico_auth.domain.session import UserSession
from niconico_auth.config import LoginConfig
from niconico_auth.errors import (
    LoginError,
    NetworkError,
    InvalidCredentials,
    UnexpectedResponse,
)

__all__ = [
    "LoginClient",
    "login",
    "Credentials",
    "UserSession",
    "LoginConfig",
    "LoginError",
    "NetworkError",
    "InvalidCredentials",
    "UnexpectedResponse",
]
