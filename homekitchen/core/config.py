"""Application configuration."""
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Kitchen
    app_name: str = "Home Kitchen Orders"
    menu_file: Optional[str] = None  # Defaults to the packaged sample menu

    # Order parsing
    match_threshold: int = Field(default=50, ge=0, le=100)
    max_alternatives: int = Field(default=3, ge=1)

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
