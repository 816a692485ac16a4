"""
Login Port - Interface for exchanging credentials for a session.

Implementations:
- NicoNicoLoginAdapter: form POST to the NicoNico account service
"""

from abc import ABC, abstractmethod
from niconico_auth.domain.credentials import Credentials
from niconico_auth.domain.session import UserSession


class LoginPort(ABC):
    """Port: Authenticate a credential pair and return a session."""

    @abstractmethod
    async def authenticate(self, credentials: Credentials) -> UserSession:
        """
        Exchange credentials for a user session.

        Performs at most one outbound request. Never retries.

        Args:
            credentials: Identifier and password

        Returns:
            UserSession wrapping the session token

        Raises:
            NetworkError: Transport or connection failure
            InvalidCredentials: Endpoint rejected the credential pair
            UnexpectedResponse: Response carried no usable session token
        """
        pass
