"""
NicoNico Login Adapter - Implements LoginPort against the NicoNico account service.

The service answers a successful form login with a redirect that sets several
cookies; the session token is the one whose value starts with 'user_session_'.
"""

import logging
from typing import Optional

import httpx

from niconico_auth.config import LoginConfig
from niconico_auth.domain.credentials import Credentials
from niconico_auth.domain.session import UserSession, SESSION_COOKIE_NAME
from niconico_auth.errors import InvalidCredentials, NetworkError, UnexpectedResponse
from niconico_auth.ports.login_port import LoginPort

logger = logging.getLogger(__name__)

SESSION_COOKIE_PREFIX = f"{SESSION_COOKIE_NAME}={SESSION_COOKIE_NAME}_"
REJECTED_STATUS_CODES = frozenset({400, 401, 403})


def _is_visible_ascii(byte: int) -> bool:
    """Printable ASCII or horizontal tab."""
    return 0x20 <= byte < 0x7F or byte == 0x09


def parse_session_cookie(headers: httpx.Headers) -> UserSession:
    """
    Extract the user session token from response headers.

    There are multiple Set-Cookie headers named 'user_session'; only the one
    whose value starts with 'user_session_' carries the token. The first
    match wins.

    Args:
        headers: Response headers

    Returns:
        UserSession wrapping the cookie value

    Raises:
        UnexpectedResponse: If a Set-Cookie header is not visible ASCII,
            or no session cookie is present
    """
    for name, raw_value in headers.raw:
        if name.lower() != b"set-cookie":
            continue

        if not all(_is_visible_ascii(b) for b in raw_value):
            raise UnexpectedResponse(
                "Failed to parse cookie header: value is not visible ASCII"
            )
        cookie = raw_value.decode("ascii")

        if cookie.startswith(SESSION_COOKIE_PREFIX):
            pair = cookie.split(";", 1)[0]
            token = pair.partition("=")[2].strip()
            return UserSession(user_session=token)

    raise UnexpectedResponse("User session cookie not found in response")


class NicoNicoLoginAdapter(LoginPort):
    """
    Form-POST login against account.nicovideo.jp.

    One request per call, redirects not followed, no retries. Pass an
    http_client to share a connection pool (or a MockTransport in tests);
    an injected client is never closed by the adapter.
    """

    def __init__(
        self,
        config: Optional[LoginConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize login adapter.

        Args:
            config: Endpoint settings (default LoginConfig())
            http_client: Optional externally managed AsyncClient
        """
        self._config = config or LoginConfig()
        self._http_client = http_client

    async def authenticate(self, credentials: Credentials) -> UserSession:
        """
        Log in to NicoNico and return the user session.

        Args:
            credentials: Account mail/tel and password

        Returns:
            UserSession with the session token

        Raises:
            NetworkError: Transport failure
            InvalidCredentials: Status 400/401/403
            UnexpectedResponse: Other status, undecodable body, or no session cookie
        """
        try:
            if self._http_client is not None:
                response = await self._send(self._http_client, credentials)
            else:
                async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                    response = await self._send(client, credentials)
        except httpx.DecodingError as e:
            logger.warning("Login response from %s could not be decoded: %s", self._config.login_url, e)
            raise UnexpectedResponse(
                f"Malformed login response: {e}",
                {"url": self._config.login_url},
            ) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning("Login request to %s failed: %s", self._config.login_url, e)
            raise NetworkError(
                f"Network error occurred: {e}",
                {"url": self._config.login_url},
            ) from e

        return self._handle_response(response)

    async def _send(self, client: httpx.AsyncClient, credentials: Credentials) -> httpx.Response:
        """Send the single login request."""
        return await client.post(
            self._config.login_url,
            data=credentials.form_data(),
            headers={"User-Agent": self._config.user_agent},
            follow_redirects=False,
            timeout=self._config.timeout,
        )

    def _handle_response(self, response: httpx.Response) -> UserSession:
        """Map the response status and cookies to a session or a typed error."""
        status = response.status_code
        logger.debug("Login endpoint answered with status %d", status)

        if status in REJECTED_STATUS_CODES:
            raise InvalidCredentials(status)

        if not 200 <= status < 400:
            raise UnexpectedResponse(
                f"Unexpected login response status: {status}",
                {"status_code": status},
            )

        return parse_session_cookie(response.headers)
