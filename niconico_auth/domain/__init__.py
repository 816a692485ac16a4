"""
Domain Models - Pure value objects.

No infrastructure dependencies. Secret handling only.
"""

from niconico_auth.domain.credentials import Credentials
from niconico_auth.domain.session import UserSession, SESSION_COOKIE_NAME

__all__ = [
    "Credentials",
    "UserSession",
    "SESSION_COOKIE_NAME",
]
