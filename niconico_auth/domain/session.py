"""
Session Domain Model - Represents a NicoNico user session.
"""

from dataclasses import dataclass
from typing import Any, Dict

from pydantic import SecretStr

SESSION_COOKIE_NAME = "user_session"


@dataclass(frozen=True)
class UserSession:
    """
    Session entity - the outcome of a successful login.

    Domain rules:
    - user_session is the token received from NicoNico's login service
    - immutable after creation
    - token is never returned in repr(), str() or to_dict()
    """
    user_session: SecretStr

    def __post_init__(self):
        if not isinstance(self.user_session, SecretStr):
            object.__setattr__(self, "user_session", SecretStr(self.user_session))

    def expose(self) -> str:
        """Return the raw session token."""
        return self.user_session.get_secret_value()

    def cookies(self) -> Dict[str, str]:
        """
        Cookie jar contents for authenticated follow-up requests.

        Example:
            async with httpx.AsyncClient(cookies=session.cookies()) as client:
                ...
        """
        return {SESSION_COOKIE_NAME: self.expose()}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict (token redacted)."""
        return {
            SESSION_COOKIE_NAME: str(self.user_session),
        }
