"""
Records Service Settings

Configuration management using Pydantic settings with environment variable support.
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Records Service configuration"""

    # Service Configuration
    service_name: str = Field(default="police-records-service", description="Service name")
    environment: str = Field(default="development", description="Environment (development, production)")
    port: int = Field(default=5000, description="Service port")
    host: str = Field(default="0.0.0.0", description="Service host")
    log_level: str = Field(default="INFO", description="Root log level")

    # Database Configuration
    # When unset, records live in process memory and are lost on restart.
    database_url: Optional[str] = Field(
        default=None,
        description="Database connection URL (e.g. sqlite+aiosqlite:///./records.db)"
    )
    seed_defaults: bool = Field(
        default=True,
        description="Seed the default admin account, sample cases and patrol vehicles"
    )

    # Session Configuration
    session_cookie_name: str = Field(default="sid", description="Session cookie name")
    session_max_age_seconds: int = Field(default=24 * 60 * 60, description="Session lifetime")
    session_cookie_secure: bool = Field(
        default=False,
        description="Mark the session cookie Secure (enable behind HTTPS)"
    )

    # Password reset
    reset_token_ttl_seconds: int = Field(default=60 * 60, description="Reset token lifetime")
    expose_reset_token: bool = Field(
        default=True,
        description="Return reset tokens in the forgot-password response (demo mode)"
    )

    # CORS Configuration
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def persistent(self) -> bool:
        """Whether a database-backed store is configured"""
        return bool(self.database_url)


# Global settings instance
settings = Settings()
