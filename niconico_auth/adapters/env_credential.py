"""
Environment Variable Credential Adapter - Builds Credentials from the environment.

Application-side glue: the login adapter never reads the environment itself.
"""

import os
from typing import List, Optional

from dotenv import load_dotenv

from niconico_auth.domain.credentials import Credentials


class EnvCredentialAdapter:
    """
    Read login credentials from environment variables.

    Variables (with the configured prefix):
    - MAIL_TEL: email address or telephone number
    - PASSWORD: account password

    If dotenv_path is given (or use_dotenv is set), a .env file is loaded
    first; variables already in the environment take precedence.
    """

    def __init__(
        self,
        prefix: str = "",
        dotenv_path: Optional[str] = None,
        use_dotenv: bool = False,
    ):
        """
        Initialize env credential adapter.

        Args:
            prefix: Prefix for environment variables (default none)
            dotenv_path: Path to a .env file to load before reading
            use_dotenv: Search for a .env file when no path is given
        """
        self._prefix = prefix
        self._dotenv_path = dotenv_path
        self._use_dotenv = use_dotenv or dotenv_path is not None

    def _env_key(self, key: str) -> str:
        """Convert field name to env var name."""
        return f"{self._prefix}{key.upper()}"

    def load(self) -> Credentials:
        """
        Load credentials from the environment.

        Returns:
            Credentials with the password wrapped as a secret

        Raises:
            ValueError: If any required variable is missing or empty
        """
        if self._use_dotenv:
            load_dotenv(dotenv_path=self._dotenv_path, override=False)

        values = {}
        missing: List[str] = []
        for field_name in ("mail_tel", "password"):
            env_key = self._env_key(field_name)
            value = os.environ.get(env_key)
            if not value:
                missing.append(env_key)
            else:
                values[field_name] = value

        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")

        return Credentials.from_dict(values)
