"""
Tests for settings loading.
"""

from doctors_portal.core.config import Settings


class TestSecretKey:

    def test_read_from_node_service_variable(self, monkeypatch):
        """The Node service exported the secret as ACCESS_TOKEN_SECREST."""
        monkeypatch.delenv("SECRET_KEY", raising=False)
        monkeypatch.delenv("ACCESS_TOKEN_SECRET", raising=False)
        monkeypatch.setenv("ACCESS_TOKEN_SECREST", "from-node-service")

        assert Settings(_env_file=None).SECRET_KEY == "from-node-service"

    def test_secret_key_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "primary")
        monkeypatch.setenv("ACCESS_TOKEN_SECREST", "from-node-service")

        assert Settings(_env_file=None).SECRET_KEY == "primary"
