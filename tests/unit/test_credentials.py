"""
Unit tests for Credentials domain model.
"""

import pytest
from dataclasses import FrozenInstanceError
from pydantic import SecretStr
from niconico_auth.domain.credentials import Credentials


def test_credentials_wraps_password():
    """Test plain password is wrapped as a secret."""
    creds = Credentials(mail_tel="user@example.com", password="password123")

    assert creds.mail_tel == "user@example.com"
    assert isinstance(creds.password, SecretStr)
    assert creds.password.get_secret_value() == "password123"


def test_credentials_password_redacted():
    """Test password never appears in repr or str."""
    creds = Credentials(mail_tel="user@example.com", password="password123")

    assert "password123" not in repr(creds)
    assert "password123" not in str(creds)
    assert "user@example.com" in repr(creds)


def test_credentials_immutable():
    """Test credentials cannot be modified."""
    creds = Credentials(mail_tel="user@example.com", password="password123")

    with pytest.raises(FrozenInstanceError):
        creds.mail_tel = "other@example.com"


def test_credentials_from_dict():
    """Test building credentials from a mapping."""
    creds = Credentials.from_dict({"mail_tel": "09012345678", "password": "pw"})

    assert creds.mail_tel == "09012345678"
    assert creds.password.get_secret_value() == "pw"


def test_credentials_from_dict_missing_key():
    """Test missing key is reported."""
    with pytest.raises(KeyError):
        Credentials.from_dict({"mail_tel": "user@example.com"})


def test_credentials_form_data():
    """Test form payload exposes both fields."""
    creds = Credentials(mail_tel="user@example.com", password=SecretStr("password123"))

    assert creds.form_data() == {
        "mail_tel": "user@example.com",
        "password": "password123",
    }
