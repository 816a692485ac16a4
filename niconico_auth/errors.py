"""
Login Errors - Typed failures of the login exchange.

Messages and details never carry the password or the session token.
"""

from typing import Any, Dict, Optional


class LoginError(Exception):
    """Base exception for all login failures."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize login error.

        Args:
            message: Human-readable error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NetworkError(LoginError):
    """Transport or connection failure (DNS, refused connection, timeout)."""


class InvalidCredentials(LoginError):
    """The login endpoint rejected the credential pair."""

    def __init__(self, status_code: int, details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        details["status_code"] = status_code
        super().__init__("Login rejected: invalid credentials", details)
        self.status_code = status_code


class UnexpectedResponse(LoginError):
    """Malformed response, unexpected status, or missing session cookie."""
