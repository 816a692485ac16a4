"""
Credentials Domain Model - Login credential pair.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from pydantic import SecretStr


@dataclass(frozen=True)
class Credentials:
    """
    Credentials required for NicoNico login.

    Domain rules:
    - password is always held as a SecretStr (redacted in repr/str)
    - the raw password is only reachable via password.get_secret_value()
    - no format validation; callers supply non-empty values
    """
    mail_tel: str
    password: SecretStr

    def __post_init__(self):
        # Plain strings are wrapped so the secret never sits unredacted
        if not isinstance(self.password, SecretStr):
            object.__setattr__(self, "password", SecretStr(self.password))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Credentials":
        """
        Build credentials from a mapping.

        Args:
            data: Mapping with 'mail_tel' and 'password' keys

        Returns:
            New credentials instance

        Raises:
            KeyError: If a required key is missing
        """
        return cls(mail_tel=data["mail_tel"], password=data["password"])

    def form_data(self) -> Dict[str, str]:
        """Form payload for the login endpoint. Exposes the password."""
        return {
            "mail_tel": self.mail_tel,
            "password": self.password.get_secret_value(),
        }
