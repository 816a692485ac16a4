"""
Adapters - Implementations of ports.

Login:
- NicoNicoLoginAdapter: form login against account.nicovideo.jp

Credential Loading:
- EnvCredentialAdapter: Environment variable / .env credentials
"""

from niconico_auth.adapters.niconico_login import NicoNicoLoginAdapter, parse_session_cookie
from niconico_auth.adapters.env_credential import EnvCredentialAdapter

__all__ = [
    "NicoNicoLoginAdapter",
    "parse_session_cookie",
    "EnvCredentialAdapter",
]
