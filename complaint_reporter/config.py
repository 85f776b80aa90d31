"""
Configuration management using pydantic-settings and python-dotenv
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Local storage
    DATABASE_URL: str = Field(
        default="sqlite:///complaints.db",
        description="Local storage database URL",
        alias="DATABASE_URL"
    )
    DATABASE_ECHO: bool = Field(
        default=False,
        description="Echo SQL queries for debugging",
        alias="DATABASE_ECHO"
    )
    STORAGE_KEY: str = Field(
        default="complaints",
        description="Storage slot holding the serialized complaint list",
        alias="STORAGE_KEY"
    )

    # Application
    ENVIRONMENT: str = Field(
        default="development",
        description="Application environment"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    # Admin placeholder credentials, not a security boundary
    ADMIN_USERNAME: str = Field(
        default="admin",
        description="Username accepted by the placeholder admin check"
    )
    ADMIN_PASSWORD: str = Field(
        default="password",
        description="Password accepted by the placeholder admin check"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "allow"  # Allow extra fields from environment variables


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
