"""Tests for application settings."""

from fitscreen.core.config import Settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch) -> None:
        """Test default values with no environment overrides."""
        for name in ("APP_NAME", "DEBUG", "LOG_LEVEL", "AUDIT_ENABLED", "MESSAGE_SEPARATOR"):
            monkeypatch.delenv(f"FITSCREEN_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.app_name == "Fitness Risk Screening"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.audit_enabled is True
        assert settings.message_separator == " | "

    def test_env_prefix(self, monkeypatch) -> None:
        """Test that FITSCREEN_ variables override defaults."""
        monkeypatch.setenv("FITSCREEN_AUDIT_ENABLED", "false")
        monkeypatch.setenv("FITSCREEN_MESSAGE_SEPARATOR", "; ")

        settings = Settings(_env_file=None)

        assert settings.audit_enabled is False
        assert settings.message_separator == "; "

    def test_unprefixed_env_ignored(self, monkeypatch) -> None:
        """Test that variables without the prefix are not read."""
        monkeypatch.delenv("FITSCREEN_DEBUG", raising=False)
        monkeypatch.setenv("DEBUG", "true")

        assert Settings(_env_file=None).debug is False
