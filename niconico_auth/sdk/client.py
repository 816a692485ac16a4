"""
Login Client - High-level SDK for NicoNico login.

Simplifies the login workflow for application developers.
"""

import logging
from typing import Optional

import httpx

from niconico_auth.adapters.niconico_login import NicoNicoLoginAdapter
from niconico_auth.config import LoginConfig
from niconico_auth.domain.credentials import Credentials
from niconico_auth.domain.session import UserSession
from niconico_auth.errors import LoginError
from niconico_auth.ports.login_port import LoginPort

logger = logging.getLogger(__name__)


class LoginClient:
    """
    High-level login client.

    Example:
        from niconico_auth import LoginClient
        from niconico_auth.adapters import EnvCredentialAdapter

        client = LoginClient()
        credentials = EnvCredentialAdapter(use_dotenv=True).load()

        session = await client.login(credentials)
        print(session.expose())
    """

    def __init__(self, authenticator: Optional[LoginPort] = None):
        """
        Initialize login client.

        Args:
            authenticator: Login adapter (default NicoNicoLoginAdapter)
        """
        self._authenticator = authenticator or NicoNicoLoginAdapter()

    async def login(self, credentials: Credentials) -> UserSession:
        """
        Log in with the given credentials.

        Args:
            credentials: Account mail/tel and password

        Returns:
            UserSession on success

        Raises:
            LoginError: NetworkError, InvalidCredentials or UnexpectedResponse
        """
        logger.info("Logging in as %s", credentials.mail_tel)
        try:
            session = await self._authenticator.authenticate(credentials)
        except LoginError as e:
            logger.warning("Login failed for %s: %s", credentials.mail_tel, e)
            raise

        logger.info("Login succeeded for %s", credentials.mail_tel)
        return session


async def login(
    credentials: Credentials,
    *,
    config: Optional[LoginConfig] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> UserSession:
    """
    Attempt to log in to NicoNico using the provided credentials.

    Args:
        credentials: The user credentials to use for login
        config: Optional endpoint settings
        http_client: Optional externally managed AsyncClient

    Returns:
        UserSession containing the session token

    Raises:
        LoginError: NetworkError, InvalidCredentials or UnexpectedResponse

    Example:
        credentials = Credentials(mail_tel="user@example.com", password="password123")
        try:
            session = await login(credentials)
        except LoginError as e:
            print(f"Login failed: {e}")
    """
    adapter = NicoNicoLoginAdapter(config=config, http_client=http_client)
    return await LoginClient(authenticator=adapter).login(credentials)
