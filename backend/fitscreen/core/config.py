"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FITSCREEN_",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Fitness Risk Screening"
    debug: bool = False
    log_level: str = "INFO"

    # Audit
    audit_enabled: bool = True

    # Export
    message_separator: str = " | "


settings = Settings()
