"""
SDK - High-level entry points.
"""

from niconico_auth.sdk.client import LoginClient, login

__all__ = [
    "LoginClient",
    "login",
]
