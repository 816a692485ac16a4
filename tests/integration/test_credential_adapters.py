"""
Integration tests for credential loading from the environment.
"""

import os
import pytest
from niconico_auth.adapters import EnvCredentialAdapter

CREDENTIAL_VARS = {"MAIL_TEL", "PASSWORD", "TEST_MAIL_TEL", "TEST_PASSWORD"}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Unset credential variables; drop any that .env loading added."""
    for name in CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)

    yield

    # Runs before monkeypatch restores the original values
    for name in CREDENTIAL_VARS:
        os.environ.pop(name, None)


class TestEnvCredentialAdapter:
    """Test environment variable credential loading."""

    def test_load(self, monkeypatch):
        """Test loading credentials without a prefix."""
        monkeypatch.setenv("MAIL_TEL", "user@example.com")
        monkeypatch.setenv("PASSWORD", "password123")

        creds = EnvCredentialAdapter().load()

        assert creds.mail_tel == "user@example.com"
        assert creds.password.get_secret_value() == "password123"
        assert "password123" not in repr(creds)

    def test_load_with_prefix(self, monkeypatch):
        """Test prefixed variable names."""
        monkeypatch.setenv("TEST_MAIL_TEL", "09012345678")
        monkeypatch.setenv("TEST_PASSWORD", "pw")
        monkeypatch.setenv("MAIL_TEL", "ignored@example.com")

        creds = EnvCredentialAdapter(prefix="TEST_").load()

        assert creds.mail_tel == "09012345678"

    def test_load_missing(self, monkeypatch):
        """Test missing variables are named in the error."""
        monkeypatch.setenv("MAIL_TEL", "user@example.com")

        with pytest.raises(ValueError, match="PASSWORD"):
            EnvCredentialAdapter().load()

    def test_load_empty(self, monkeypatch):
        """Test empty variables count as missing."""
        monkeypatch.setenv("MAIL_TEL", "")
        monkeypatch.setenv("PASSWORD", "")

        with pytest.raises(ValueError) as exc_info:
            EnvCredentialAdapter().load()

        assert "MAIL_TEL" in str(exc_info.value)
        assert "PASSWORD" in str(exc_info.value)

    def test_load_dotenv(self, tmp_path):
        """Test loading from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("TEST_MAIL_TEL=dotenv@example.com\nTEST_PASSWORD=from-file\n")

        creds = EnvCredentialAdapter(prefix="TEST_", dotenv_path=str(env_file)).load()

        assert creds.mail_tel == "dotenv@example.com"
        assert creds.password.get_secret_value() == "from-file"

    def test_environment_overrides_dotenv(self, monkeypatch, tmp_path):
        """Test existing environment wins over .env values."""
        env_file = tmp_path / ".env"
        env_file.write_text("TEST_MAIL_TEL=dotenv@example.com\nTEST_PASSWORD=from-file\n")
        monkeypatch.setenv("TEST_PASSWORD", "from-env")

        creds = EnvCredentialAdapter(prefix="TEST_", dotenv_path=str(env_file)).load()

        assert creds.password.get_secret_value() == "from-env"
