"""
Ports - Interfaces for login.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from niconico_auth.ports.login_port import LoginPort

__all__ = [
    "LoginPort",
]
