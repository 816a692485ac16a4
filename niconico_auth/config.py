"""
Login Configuration - Endpoint, user agent and timeout.
"""

import os
from dataclasses import dataclass

DEFAULT_LOGIN_URL = "https://account.nicovideo.jp/login/redirector"
DEFAULT_USER_AGENT = "toof-jp/niconico"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class LoginConfig:
    """Settings for the outbound login request."""
    login_url: str = DEFAULT_LOGIN_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, prefix: str = "NICONICO_") -> "LoginConfig":
        """
        Load settings from environment variables.

        Reads <prefix>LOGIN_URL, <prefix>USER_AGENT and <prefix>TIMEOUT.
        Unset variables fall back to the defaults.

        Raises:
            ValueError: If the timeout is not a number
        """
        timeout_raw = os.environ.get(f"{prefix}TIMEOUT")
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError:
                raise ValueError(f"{prefix}TIMEOUT must be a number, got {timeout_raw!r}")
        else:
            timeout = DEFAULT_TIMEOUT

        return cls(
            login_url=os.environ.get(f"{prefix}LOGIN_URL") or DEFAULT_LOGIN_URL,
            user_agent=os.environ.get(f"{prefix}USER_AGENT") or DEFAULT_USER_AGENT,
            timeout=timeout,
        )
